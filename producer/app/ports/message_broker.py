"""Message broker port: contract for publishing one message to a queue binding.

The dispatch service depends on this port; infrastructure (Dapr over httpx,
in-memory) implements it. Keeps the service free of transport imports.
"""
from __future__ import annotations

from typing import Protocol, runtime_checkable

from producer.app.domain.models import Message


class BrokerError(Exception):
    """Base for broker publish failures."""


class BrokerTransportError(BrokerError):
    """Raised on a non-2xx response or a network failure. status_code is None when no response arrived."""

    def __init__(self, message: str, *, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class BrokerTimeoutError(BrokerTransportError):
    """Raised when the publish request times out."""


@runtime_checkable
class MessageBrokerClient(Protocol):
    """Port: publish messages. Implementations live in infrastructure."""

    @property
    def ready(self) -> bool: ...

    async def connect(self) -> None: ...

    async def publish(self, message: Message) -> None:
        """Publish once; raise BrokerTransportError or BrokerTimeoutError on failure. Never retries."""
        ...

    async def ping(self) -> bool: ...

    async def close(self) -> None: ...
