"""FastAPI application factory and lifespan."""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from planner.api.v1 import api_router
from planner.core.config import Settings, get_settings
from planner.core.errors import register_exception_handlers
from planner.core.security import ApiKeyMiddleware
from planner.db.session import engine

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup: announce; shutdown: dispose the engine pool."""
    # Schema is managed by Alembic (alembic upgrade head)
    logger.info("starting %s (%s)", app.title, app.state.settings.environment)
    yield
    await engine.dispose()


def create_application(settings: Settings | None = None) -> FastAPI:
    settings = settings or get_settings()
    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    if not settings.api_key:
        logger.warning("API_KEY is not set: every mutating request will be rejected")

    app = FastAPI(
        title=settings.app_name,
        version="0.1.0",
        lifespan=lifespan,
        docs_url="/docs",
        redoc_url="/redoc",
    )
    app.state.settings = settings
    register_exception_handlers(app)

    # Added first so CORS (added last, outermost) still answers preflight requests
    app.add_middleware(ApiKeyMiddleware, api_key=settings.api_key, header_name=settings.api_key_header)

    # CORS: allow everything in debug/dev; otherwise only CORS_ORIGINS (comma-separated)
    if settings.debug or settings.environment == "development":
        cors_origins = ["*"]
    else:
        cors_origins = [o.strip() for o in settings.cors_origins.split(",") if o.strip()]
    app.add_middleware(
        CORSMiddleware,
        allow_origins=cors_origins,
        allow_credentials=False,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.get("/")
    def root():
        return {"status": "ok", "message": settings.app_name}

    app.include_router(api_router, prefix=settings.api_prefix)
    return app


app = create_application()
