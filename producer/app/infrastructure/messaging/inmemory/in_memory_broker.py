"""In-memory broker client for tests and local runs.
Messages are only recorded; nothing consumes them. Only the newest
max_messages are kept so a long-running local producer stays bounded.
"""
from __future__ import annotations

from collections import deque

from producer.app.domain.models import Message

DEFAULT_MAX_MESSAGES = 10_000


class InMemoryBrokerClient:
    def __init__(self, max_messages: int = DEFAULT_MAX_MESSAGES) -> None:
        self.messages: deque[Message] = deque(maxlen=max_messages)

    async def connect(self) -> None:
        return

    @property
    def ready(self) -> bool:
        return True

    async def publish(self, message: Message) -> None:
        self.messages.append(message)

    async def ping(self) -> bool:
        return True

    async def close(self) -> None:
        return
