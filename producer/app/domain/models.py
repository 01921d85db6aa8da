"""Domain models."""
from __future__ import annotations

from dataclasses import dataclass

DEFAULT_MESSAGE_TEXT = "Hello World"


def _is_int(value: object) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


@dataclass(frozen=True)
class Message:
    """A single message emitted per dispatch iteration."""

    text: str


@dataclass(frozen=True)
class ProduceRequest:
    """How many messages to emit and how far apart."""

    count: int
    interval_milliseconds: int
    text: str = DEFAULT_MESSAGE_TEXT

    def __post_init__(self) -> None:
        if not _is_int(self.count) or self.count < 0:
            raise ValueError("count must be a non-negative integer")
        if not _is_int(self.interval_milliseconds) or self.interval_milliseconds < 0:
            raise ValueError("interval_milliseconds must be a non-negative integer")

    @property
    def interval_seconds(self) -> float:
        return self.interval_milliseconds / 1000

    def build_message(self) -> Message:
        return Message(text=self.text)
