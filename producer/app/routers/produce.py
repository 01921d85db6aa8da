from __future__ import annotations

from typing import Any

from fastapi import APIRouter, Request, Response
from loguru import logger

from producer.app.core import SERVICE_NAME
from producer.app.domain.models import DEFAULT_MESSAGE_TEXT, ProduceRequest
from producer.app.schemas.produce import (
    ProduceFailedResponse,
    ProducePostRequest,
    ProducePostResponse,
)
from producer.app.services.dispatch_messages import dispatch_messages


def _log(event: str, **kwargs: Any) -> None:
    logger.bind(service_name=SERVICE_NAME, event=event, **kwargs).warning("")


produce_router = APIRouter(prefix="/message-queue-producer", tags=["Producer"])


def _default_text(request: Request) -> str:
    settings = getattr(request.app.state, "settings", None)
    if settings is not None:
        return getattr(settings, "default_message_text", DEFAULT_MESSAGE_TEXT)
    return DEFAULT_MESSAGE_TEXT


@produce_router.post(
    "",
    summary="Emit messages to the queue binding",
    description="Publishes `count` messages one at a time, waiting `intervalMilliseconds` between publishes. Responds once the whole batch is sent, or at the first publish failure.",
    responses={
        200: {"description": "All messages published."},
        422: {"description": "Invalid request body (e.g. negative count or interval)."},
        502: {"description": "The broker rejected a publish or was unreachable; dispatch stopped."},
        503: {"description": "Broker client not available."},
    },
)
async def produce(request: Request, body: ProducePostRequest) -> Response:
    broker = getattr(request.app.state, "broker", None)
    if broker is None:
        _log("produce_rejected", reason="broker_not_available")
        return Response(status_code=503, content="Broker not available")

    produce_request = ProduceRequest(
        count=body.count,
        interval_milliseconds=body.interval_milliseconds,
        text=body.text if body.text is not None else _default_text(request),
    )
    try:
        outcome = await dispatch_messages(produce_request, broker)
    except Exception as e:
        logger.exception("dispatch failed: {}", e)
        raise

    if outcome.success:
        return Response(
            status_code=200,
            media_type="application/json",
            content=ProducePostResponse(
                requested=outcome.requested,
                published=outcome.published,
            ).model_dump_json(by_alias=True),
        )

    _log(
        "dispatch_failed",
        reason=outcome.error,
        attempted=outcome.attempted,
        published=outcome.published,
    )
    return Response(
        status_code=502,
        media_type="application/json",
        content=ProduceFailedResponse(
            requested=outcome.requested,
            attempted=outcome.attempted,
            published=outcome.published,
            error=outcome.error,
            broker_status_code=outcome.status_code,
        ).model_dump_json(by_alias=True),
    )
