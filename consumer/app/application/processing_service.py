from __future__ import annotations

from datetime import datetime, timezone
from typing import Any

from loguru import logger

from consumer.app.core import SERVICE_NAME
from consumer.app.domain.models import Message, ProcessingRecord
from consumer.app.ports.message_processor import MessageProcessor


def _log(event: str, **kwargs: Any) -> None:
    logger.bind(service_name=SERVICE_NAME, event=event, **kwargs).info("")


class ProcessingService:
    """
    Processes one delivered message: record start, run the processor, record end.

    process() returns only after the processor has finished, so the HTTP
    acknowledgment is never sent before the work completes. Each call is
    independent; nothing is shared between concurrent invocations.
    """

    def __init__(self, processor: MessageProcessor) -> None:
        self._processor = processor

    async def process(self, message: Message) -> ProcessingRecord:
        started_at = datetime.now(timezone.utc)
        _log("message_received", text=message.text, started_at=started_at.isoformat())

        await self._processor(message)

        record = ProcessingRecord(
            started_at=started_at,
            finished_at=datetime.now(timezone.utc),
            payload=message,
        )
        _log("message_processed", **record.to_log_fields())
        return record
