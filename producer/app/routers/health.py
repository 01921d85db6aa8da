import asyncio
from typing import Any

from fastapi import APIRouter, Request, Response
from loguru import logger

from producer.app.core import SERVICE_NAME

SIDECAR_PING_TIMEOUT_DEFAULT = 5.0

health_router = APIRouter(prefix="/health", tags=["Health"])


def _log(event: str, **kwargs: Any) -> None:
    logger.bind(service_name=SERVICE_NAME, event=event, **kwargs).info("")


def _sidecar_ping_timeout(request: Request) -> float:
    settings = getattr(request.app.state, "settings", None)
    return getattr(settings, "readiness_ping_timeout_seconds", SIDECAR_PING_TIMEOUT_DEFAULT)


@health_router.get(
    "/live",
    summary="Producer liveness",
    description="Always 200 while the producer process can answer HTTP.",
    responses={200: {"description": "Producer process is up."}},
)
async def live() -> dict:
    return {"status": "ok"}


@health_router.get(
    "/ready",
    summary="Producer readiness",
    description="200 when the binding client is open and the binding sidecar reports healthy, so produce requests can reach the queue.",
    responses={
        200: {"description": "Messages can be published."},
        503: {"description": "No binding client, client closed, or sidecar unhealthy/unreachable."},
    },
)
async def ready(request: Request) -> Response:
    broker = getattr(request.app.state, "broker", None)
    if broker is None or not broker.ready:
        _log("readiness_broker_unavailable", wired=broker is not None)
        return Response(status_code=503, content="Binding client unavailable")

    try:
        sidecar_ok = await asyncio.wait_for(broker.ping(), timeout=_sidecar_ping_timeout(request))
    except asyncio.TimeoutError:
        sidecar_ok = False
    if not sidecar_ok:
        _log("readiness_sidecar_unhealthy")
        return Response(status_code=503, content="Binding sidecar unhealthy")
    return Response(status_code=200, content="OK")
