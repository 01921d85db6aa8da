"""Simulated processing: a fixed pause standing in for real backend work."""
from __future__ import annotations

import asyncio

from consumer.app.domain.models import Message

DEFAULT_PROCESSING_DELAY_SECONDS = 5.0


class SimulatedDelayProcessor:
    """Suspends the current request for delay_seconds without blocking the event loop."""

    def __init__(self, delay_seconds: float = DEFAULT_PROCESSING_DELAY_SECONDS) -> None:
        if delay_seconds < 0:
            raise ValueError("delay_seconds must be non-negative")
        self._delay_seconds = float(delay_seconds)

    @property
    def delay_seconds(self) -> float:
        return self._delay_seconds

    async def __call__(self, message: Message) -> None:
        await asyncio.sleep(self._delay_seconds)
