from contextlib import asynccontextmanager

from fastapi import FastAPI
from loguru import logger

from consumer.app.composition import create_consumer_dependencies
from consumer.app.core import SERVICE_NAME
from consumer.app.routers.health import health_router
from consumer.app.routers.message_queue import message_queue_router


@asynccontextmanager
async def lifespan(app: FastAPI):
    deps = create_consumer_dependencies()
    logger.bind(
        service_name=SERVICE_NAME,
        event="consumer_starting",
        processing_delay_seconds=deps.settings.processing_delay_seconds,
    ).info("")
    app.state.settings = deps.settings
    app.state.processing_service = deps.processing_service
    yield
    logger.bind(service_name=SERVICE_NAME, event="consumer_stopping").info("")


app = FastAPI(
    title="Message Queue Consumer",
    version="0.1.0",
    lifespan=lifespan,
)

app.include_router(health_router)
app.include_router(message_queue_router)
