"""FastAPI application factory.

Creates and configures the FastAPI application with all routers,
middleware, and exception handlers.

API Versioning:
    All API endpoints are versioned under /api/v1/ prefix.
    The health check endpoint remains unversioned at /health.
"""

import logging
import sys
from contextlib import asynccontextmanager
from functools import lru_cache
from typing import AsyncGenerator

from fastapi import APIRouter, FastAPI
from fastapi.middleware.cors import CORSMiddleware

from holdem import __version__
from holdem.presentation.api.config import get_api_settings
from holdem.presentation.api.dependencies import (
    create_tables,
    get_engine,
    uses_memory_store,
)
from holdem.presentation.api.exception_handlers import setup_exception_handlers
from holdem.presentation.api.routers import users_router
from holdem_config.settings import Settings, get_settings
from holdem_identity.infrastructure.persistence.memory import InMemoryUserRepository


@lru_cache(maxsize=1)
def _configure_logging(log_level_str: str) -> None:
    """Configure application logging.

    Sets up logging with:
    - Console output with timestamps and module names
    - Configurable log level for holdem modules (from settings)
    - WARNING level for noisy third-party libraries
    """
    log_level = getattr(logging, log_level_str.upper(), logging.INFO)

    log_format = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
    date_format = "%Y-%m-%d %H:%M:%S"

    logging.basicConfig(
        level=log_level,
        format=log_format,
        datefmt=date_format,
        stream=sys.stdout,
        force=True,  # Override any existing config
    )

    logging.getLogger("holdem").setLevel(log_level)
    logging.getLogger("holdem_identity").setLevel(log_level)

    # Quiet down noisy third-party loggers
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)
    logging.getLogger("aiosqlite").setLevel(logging.WARNING)


logger = logging.getLogger(__name__)

API_VERSION = __version__
API_V1_PREFIX = "/api/v1"

OPENAPI_TAGS = [
    {
        "name": "Users",
        "description": """User registration, sign in and identity lookup.

**Sign up & Sign in:**
- Register with id, password, name and date of birth
- Sign in to obtain a session token

**Security:**
- Passwords are stored as salted bcrypt hashes
- Signed JWT session tokens with a fixed lifetime
- Protected endpoints require `Authorization: Bearer <token>`
""",
    },
    {
        "name": "Health",
        "description": "Service health monitoring endpoints.",
    },
    {
        "name": "Info",
        "description": "API information and discovery.",
    },
]


def _build_lifespan(settings: Settings):
    @asynccontextmanager
    async def lifespan(_: FastAPI) -> AsyncGenerator[None, None]:
        """Application lifespan manager."""
        logger.info("Starting %s API v%s...", settings.app_name, API_VERSION)

        if uses_memory_store(settings):
            logger.info("Using in-memory user store")
            yield
            logger.info("Shutting down %s API...", settings.app_name)
            return

        logger.info("Using %s user store", settings.database_type)
        engine = get_engine(settings.database_url)
        try:
            await create_tables(engine)
        except OSError:
            logger.critical("Could not connect to the database.")
            raise SystemExit(1) from None

        yield

        # Dispose the shared engine and its connection pool
        logger.info("Shutting down %s API...", settings.app_name)
        await engine.dispose()
        logger.info("Database connections closed")

    return lifespan


def create_v1_router() -> APIRouter:
    """Create the v1 API router with all endpoints."""
    v1_router = APIRouter()
    v1_router.include_router(users_router, prefix="/user", tags=["Users"])
    return v1_router


def create_app(settings: Settings | None = None) -> FastAPI:
    """Create and configure the FastAPI application.

    Parameters
    ----------
    settings
        Optional settings override for testing.

    Returns
    -------
    Configured FastAPI application instance.
    """
    if settings is None:
        settings = get_settings()

    # Configure logging on app creation (not on module import)
    _configure_logging(settings.log_level)

    app = FastAPI(
        title=f"{settings.app_name} API",
        description="User sign up, sign in and session tokens for the game server.",
        version=API_VERSION,
        docs_url="/docs" if settings.api_debug else None,
        redoc_url="/redoc" if settings.api_debug else None,
        openapi_url="/openapi.json" if settings.api_debug else None,
        lifespan=_build_lifespan(settings),
        openapi_tags=OPENAPI_TAGS,
    )

    # Dependencies read the settings this app was built with
    app.dependency_overrides[get_api_settings] = lambda: settings

    if uses_memory_store(settings):
        app.state.user_repository = InMemoryUserRepository()

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    setup_exception_handlers(app)

    app.include_router(create_v1_router(), prefix=API_V1_PREFIX)

    @app.get("/health", tags=["Health"])
    async def health_check() -> dict:
        """Health check endpoint.

        Unversioned for load balancer/monitoring compatibility.
        """
        return {
            "status": "healthy",
            "version": API_VERSION,
            "api_versions": ["v1"],
        }

    @app.get("/", tags=["Info"])
    async def root() -> dict:
        """API root endpoint with version information."""
        return {
            "name": f"{settings.app_name} API",
            "version": API_VERSION,
            "docs": "/docs" if settings.api_debug else None,
            "api_base": API_V1_PREFIX,
            "endpoints": {
                "health": "/health",
                "signup": f"{API_V1_PREFIX}/user/signup",
                "signin": f"{API_V1_PREFIX}/user/signin",
                "user_info": f"{API_V1_PREFIX}/user/{{user_id}}/info",
            },
        }

    return app
