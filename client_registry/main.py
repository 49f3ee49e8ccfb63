"""
Application factory.

``create_app()`` builds a fully wired FastAPI app with its own client store.
uvicorn loads ``client_registry.main:app``, which is created on first
access so importing this module never reads configuration.
"""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from client_registry.api import health
from client_registry.api.endpoints import router as api_router
from client_registry.core.config import get_app_config, get_settings
from client_registry.core.exception_handlers import register_exception_handlers
from client_registry.core.logging import get_logger, setup_logging
from client_registry.core.middleware import RequestContextMiddleware
from client_registry.core.responses import SafeJSONResponse
from client_registry.repositories.client import ClientStore, build_client_store
from client_registry.schemas.client import ClientPayload

logger = get_logger(__name__)

_app: FastAPI | None = None


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    config = get_app_config()
    setup_logging(level=get_settings().log_level or config.logging.level)
    logger.info(
        "Client registry started",
        extra={
            "version": config.application.version,
            "environment": config.application.environment,
            "clients": len(app.state.client_store),
        },
    )
    yield
    logger.info("Client registry stopped")


def create_client_store() -> ClientStore:
    """A store holding the seed records from application.yaml, if enabled."""
    seed = get_app_config().application.seed
    records = seed.clients if seed.enabled else []
    return build_client_store(ClientPayload(**record.model_dump()) for record in records)


def create_app() -> FastAPI:
    settings = get_app_config().application
    docs = settings.docs_enabled

    app = FastAPI(
        title=settings.name,
        description=settings.description,
        version=settings.version,
        docs_url="/docs" if docs else None,
        redoc_url="/redoc" if docs else None,
        default_response_class=SafeJSONResponse,
        lifespan=lifespan,
    )
    app.state.client_store = create_client_store()

    # Added last runs first: CORS answers preflights before request tagging
    app.add_middleware(RequestContextMiddleware)
    if settings.cors_origins:
        app.add_middleware(
            CORSMiddleware,
            allow_origins=settings.cors_origins,
            allow_methods=["*"],
            allow_headers=["*"],
            expose_headers=["X-Request-ID", "X-Response-Time"],
        )

    register_exception_handlers(app)
    app.include_router(health.router, tags=["health"])
    app.include_router(api_router)
    return app


def get_app() -> FastAPI:
    """The process-wide app, created on first call."""
    global _app
    if _app is None:
        _app = create_app()
    return _app


def __getattr__(name: str) -> FastAPI:
    if name == "app":
        return get_app()
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
