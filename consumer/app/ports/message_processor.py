"""Port: the work done for one message. Implementations live in domain (simulated) or tests (stubs)."""
from __future__ import annotations

from typing import Protocol

from consumer.app.domain.models import Message


class MessageProcessor(Protocol):
    async def __call__(self, message: Message) -> None: ...
