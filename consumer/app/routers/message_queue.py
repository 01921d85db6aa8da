from __future__ import annotations

from fastapi import APIRouter, Request, Response
from loguru import logger

from consumer.app.domain.models import Message
from consumer.app.schemas.message import MessagePostRequest

message_queue_router = APIRouter(prefix="/message-queue", tags=["Consumer"])


@message_queue_router.options(
    "",
    summary="Binding subscription probe",
    description="Answers the binding sidecar's startup OPTIONS probe so it delivers messages to this route.",
)
async def subscribe_probe() -> Response:
    return Response(status_code=200)


@message_queue_router.post(
    "",
    summary="Process one delivered message",
    description="Runs the simulated processing for the message and responds only after it has finished.",
    responses={
        200: {"description": "Message processed."},
        422: {"description": "Invalid request body."},
        503: {"description": "Processing service not available."},
    },
)
async def process_message(request: Request, body: MessagePostRequest) -> Response:
    service = getattr(request.app.state, "processing_service", None)
    if service is None:
        return Response(status_code=503, content="Processing service not available")

    try:
        await service.process(Message(text=body.text))
    except Exception as e:
        logger.exception("message processing failed: {}", e)
        raise
    return Response(status_code=200)
