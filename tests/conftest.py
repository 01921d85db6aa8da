from __future__ import annotations

import time

import pytest
from fastapi import FastAPI
from loguru import logger

from consumer.app.application.processing_service import ProcessingService
from consumer.app.domain.models import Message as ConsumerMessage
from consumer.app.routers.health import health_router as consumer_health_router
from consumer.app.routers.message_queue import message_queue_router
from producer.app.domain.models import Message
from producer.app.ports.message_broker import BrokerTransportError
from producer.app.routers.health import health_router as producer_health_router
from producer.app.routers.produce import produce_router


class FakeBroker:
    """Implements MessageBrokerClient for tests; records every publish attempt with its monotonic time."""

    def __init__(
        self,
        *,
        fail_on_call: int | None = None,
        fail_status_code: int | None = 500,
        ready: bool = True,
        ping_ok: bool = True,
    ) -> None:
        self.calls: list[Message] = []
        self.call_times: list[float] = []
        self._fail_on_call = fail_on_call
        self._fail_status_code = fail_status_code
        self._ready = ready
        self._ping_ok = ping_ok

    @property
    def ready(self) -> bool:
        return self._ready

    async def connect(self) -> None:
        self._ready = True

    async def publish(self, message: Message) -> None:
        self.calls.append(message)
        self.call_times.append(time.monotonic())
        if self._fail_on_call is not None and len(self.calls) == self._fail_on_call:
            raise BrokerTransportError(
                f"http status {self._fail_status_code} for fake binding",
                status_code=self._fail_status_code,
            )

    async def ping(self) -> bool:
        return self._ping_ok

    async def close(self) -> None:
        self._ready = False


class RecordingProcessor:
    """Zero-delay MessageProcessor stub that remembers what it processed."""

    def __init__(self) -> None:
        self.processed: list[ConsumerMessage] = []

    async def __call__(self, message: ConsumerMessage) -> None:
        self.processed.append(message)


@pytest.fixture()
def producer_app() -> FastAPI:
    app = FastAPI()
    app.state.broker = FakeBroker()
    app.include_router(producer_health_router)
    app.include_router(produce_router)
    return app


@pytest.fixture()
def recording_processor() -> RecordingProcessor:
    return RecordingProcessor()


@pytest.fixture()
def consumer_app(recording_processor: RecordingProcessor) -> FastAPI:
    app = FastAPI()
    app.state.processing_service = ProcessingService(recording_processor)
    app.include_router(consumer_health_router)
    app.include_router(message_queue_router)
    return app


@pytest.fixture()
def log_records() -> list[dict]:
    """Captures loguru records (message, level, extra, exception) emitted during the test."""
    records: list[dict] = []
    handler_id = logger.add(lambda message: records.append(message.record), level="DEBUG")
    yield records
    logger.remove(handler_id)
