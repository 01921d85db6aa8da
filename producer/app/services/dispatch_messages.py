"""
Accepts a ProduceRequest and the MessageBrokerClient abstraction; returns an outcome.
Router translates outcome to HTTP status codes and content.
"""

import asyncio
import time
from dataclasses import dataclass
from typing import Any, Awaitable, Callable

from loguru import logger

from producer.app.core import SERVICE_NAME
from producer.app.domain.models import ProduceRequest
from producer.app.ports.message_broker import BrokerError, BrokerTransportError, MessageBrokerClient

Sleeper = Callable[[float], Awaitable[Any]]


def _log(event: str, **kwargs: Any) -> None:
    logger.bind(service_name=SERVICE_NAME, event=event, **kwargs).info("")


@dataclass(frozen=True)
class DispatchOutcome:
    """Result of dispatch_messages.
    success=True => published == attempted == requested.
    success=False => the loop stopped at the failing attempt; error set, status_code set when the broker answered.
    """
    success: bool
    requested: int
    attempted: int
    published: int
    error: str | None = None
    status_code: int | None = None


async def dispatch_messages(
    request: ProduceRequest,
    broker: MessageBrokerClient,
    *,
    sleep: Sleeper = asyncio.sleep,
) -> DispatchOutcome:
    """
    Publish request.count messages one at a time, waiting request.interval_seconds between them.
    Stops at the first publish failure; messages already sent stay sent.
    """
    _log(
        "dispatch_started",
        count=request.count,
        interval_ms=request.interval_milliseconds,
    )
    start = time.perf_counter()
    published = 0

    for index in range(request.count):
        message = request.build_message()
        try:
            await broker.publish(message)
        except BrokerError as e:
            status_code = e.status_code if isinstance(e, BrokerTransportError) else None
            logger.bind(
                service_name=SERVICE_NAME,
                event="publish_failed",
                attempt=index + 1,
                status_code=status_code,
            ).warning("")
            return DispatchOutcome(
                success=False,
                requested=request.count,
                attempted=index + 1,
                published=published,
                error=str(e),
                status_code=status_code,
            )

        published += 1
        _log("message_published", attempt=index + 1)

        if index < request.count - 1 and request.interval_milliseconds > 0:
            await sleep(request.interval_seconds)

    elapsed_ms = (time.perf_counter() - start) * 1000
    _log("dispatch_completed", published=published, elapsed_ms=round(elapsed_ms, 2))
    return DispatchOutcome(
        success=True,
        requested=request.count,
        attempted=published,
        published=published,
    )
