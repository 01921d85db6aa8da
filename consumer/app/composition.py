"""Consumer composition root: build the processing service from settings."""
from __future__ import annotations

from consumer.app.application.processing_service import ProcessingService
from consumer.app.config.settings import Settings
from consumer.app.domain.simulated_work import SimulatedDelayProcessor


class ConsumerDependencies:
    """Holds wired consumer dependencies."""

    def __init__(self, *, settings: Settings) -> None:
        self._settings = settings
        self._processing_service = ProcessingService(
            SimulatedDelayProcessor(settings.processing_delay_seconds),
        )

    @property
    def settings(self) -> Settings:
        return self._settings

    @property
    def processing_service(self) -> ProcessingService:
        return self._processing_service


def create_consumer_dependencies(settings: Settings | None = None) -> ConsumerDependencies:
    return ConsumerDependencies(settings=settings or Settings())
