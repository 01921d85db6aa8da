from contextlib import asynccontextmanager

from fastapi import FastAPI
from loguru import logger

from producer.app.composition import create_app_dependencies
from producer.app.core import SERVICE_NAME
from producer.app.routers.health import health_router
from producer.app.routers.produce import produce_router


@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.bind(service_name=SERVICE_NAME, event="producer_starting").info("")
    deps = create_app_dependencies()
    await deps.connect()
    app.state.settings = deps.settings
    app.state.broker = deps.broker
    try:
        yield
    finally:
        logger.bind(service_name=SERVICE_NAME, event="producer_stopping").info("")
        await deps.close()


app = FastAPI(
    title="Message Queue Producer",
    version="0.1.0",
    lifespan=lifespan,
)

app.include_router(health_router)
app.include_router(produce_router)
