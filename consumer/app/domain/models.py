"""Domain models."""
from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Any


@dataclass(frozen=True)
class Message:
    """Message delivered by the queue binding."""

    text: str


@dataclass(frozen=True)
class ProcessingRecord:
    """Start/end timestamps of one processing run. Not persisted."""

    started_at: datetime
    finished_at: datetime
    payload: Message

    @property
    def duration_seconds(self) -> float:
        return (self.finished_at - self.started_at).total_seconds()

    def to_log_fields(self) -> dict[str, Any]:
        return {
            "text": self.payload.text,
            "started_at": self.started_at.isoformat(),
            "finished_at": self.finished_at.isoformat(),
            "duration_ms": round(self.duration_seconds * 1000, 2),
        }
