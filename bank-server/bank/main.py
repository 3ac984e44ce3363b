import logging
import time
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from bank import __version__
from bank.api import create_api_router
from bank.core.config import Settings, get_settings
from bank.core.container import ApplicationContainer
from bank.core.logging import setup_logging
from bank.schemas import HealthResponse

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    container: ApplicationContainer = app.state.container
    await container.startup()
    logger.info("%s %s started (%s)", container.settings.project_name, __version__, container.settings.environment)
    try:
        yield
    finally:
        await container.shutdown()


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    settings = settings or get_settings()
    setup_logging(settings)

    app = FastAPI(
        title=settings.project_name,
        description="Multi-currency accounts with double-entry funds transfers",
        version=__version__,
        lifespan=lifespan,
    )
    app.state.container = ApplicationContainer.build(settings)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.middleware("http")
    async def log_requests(request: Request, call_next):
        started = time.perf_counter()
        response = await call_next(request)
        elapsed_ms = (time.perf_counter() - started) * 1000
        logger.info("%s %s -> %s (%.1f ms)", request.method, request.url.path, response.status_code, elapsed_ms)
        return response

    @app.exception_handler(Exception)
    async def unhandled_exception(request: Request, exc: Exception) -> JSONResponse:
        logger.exception("Unhandled error on %s %s", request.method, request.url.path)
        return JSONResponse(status_code=500, content={"detail": "internal error"})

    app.include_router(create_api_router(settings.api_prefix))

    @app.get(f"{settings.api_prefix}/health", response_model=HealthResponse, tags=["health"])
    async def health() -> HealthResponse:
        return HealthResponse(version=__version__)

    return app


app = create_app()
