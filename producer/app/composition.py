"""
Composition root: single place where concrete implementations are wired.

Builds settings and the broker client from config; provides connect/close
lifecycle. Used by lifespan to populate app.state. Backend selection
(e.g. broker_backend=inmemory) is driven by settings.
"""

from producer.app.config.settings import Settings
from producer.app.ports.message_broker import MessageBrokerClient
from producer.app.infrastructure.messaging.factory import create_broker_client


class AppDependencies:
    """Holds wired dependencies and their lifecycle. Built only in composition root."""

    def __init__(self, *, settings: Settings, broker: MessageBrokerClient) -> None:
        self._settings = settings
        self._broker = broker
        self._broker_connected = False

    @property
    def settings(self) -> Settings:
        return self._settings

    @property
    def broker(self) -> MessageBrokerClient:
        return self._broker

    async def connect(self) -> None:
        await self._broker.connect()
        self._broker_connected = True

    async def close(self) -> None:
        if self._broker_connected:
            await self._broker.close()
            self._broker_connected = False


def create_app_dependencies(settings: Settings | None = None) -> AppDependencies:
    """
    Composition root: build all app dependencies in one place.
    Caller owns lifecycle (connect/close).
    """
    _settings = settings or Settings()
    return AppDependencies(settings=_settings, broker=create_broker_client(_settings))
