from fastapi import APIRouter, Request, Response

health_router = APIRouter(tags=["Health"])


@health_router.get(
    "/health/live",
    summary="Liveness probe",
    description="Returns 200 if the consumer process is running.",
    responses={200: {"description": "Service is alive."}},
)
async def live() -> dict:
    return {"status": "ok"}


@health_router.get(
    "/health/ready",
    summary="Readiness probe",
    description="Returns 200 once the processing service is wired and messages can be accepted.",
    responses={
        200: {"description": "Consumer is ready."},
        503: {"description": "Processing service not initialized."},
    },
)
async def ready(request: Request) -> Response:
    if getattr(request.app.state, "processing_service", None) is None:
        return Response(status_code=503, content="Not ready")
    return Response(status_code=200, content="OK")
