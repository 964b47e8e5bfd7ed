"""
Main FastAPI application entry point.
Configures the application, middleware, and routes.
"""

from contextlib import asynccontextmanager
from typing import AsyncGenerator

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from sqlmodel import Session

from app.api.routes import actors, auth, health, movies, users
from app.core.config import DEFAULT_ADMIN_PASSWORD, DEFAULT_JWT_SECRET, settings
from app.core.errors import setup_exception_handlers
from app.core.logging import get_logger, setup_logging
from app.core.security import password_hasher
from app.db.session import create_db_and_tables, engine
from app.models.user import UserRole
from app.services.user_service import UserService

setup_logging()
logger = get_logger(__name__)


def bootstrap_first_admin() -> None:
    """Create the configured admin account if it does not exist yet."""
    with Session(engine) as session:
        users = UserService(session)
        if users.get_by_email(settings.FIRST_ADMIN_EMAIL) is not None:
            return

        logger.info("Creating first admin user...")
        result = users.create(
            email=settings.FIRST_ADMIN_EMAIL,
            hashed_password=password_hasher.hash(settings.FIRST_ADMIN_PASSWORD),
            first_name="Admin",
            last_name="User",
            role=UserRole.ADMIN,
        )
        if result.ok:
            logger.info(f"Admin user created: {settings.FIRST_ADMIN_EMAIL}")
        else:
            logger.warning(f"Admin user not created: {result.message}")


def warn_insecure_defaults() -> None:
    """Log a warning for each placeholder credential still in effect."""
    if settings.JWT_SECRET == DEFAULT_JWT_SECRET:
        logger.warning("JWT_SECRET is the insecure default; set it before deploying")
    if not settings.DISABLE_BOOTSTRAP_USERS and settings.FIRST_ADMIN_PASSWORD == DEFAULT_ADMIN_PASSWORD:
        logger.warning(
            "FIRST_ADMIN_PASSWORD is the insecure default; "
            f"change the password of {settings.FIRST_ADMIN_EMAIL}"
        )


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """
    Application lifespan handler.
    Runs startup and shutdown logic.
    """
    logger.info(f"Starting {settings.PROJECT_NAME} v{settings.VERSION}")
    warn_insecure_defaults()

    logger.info("Creating database tables...")
    create_db_and_tables()

    if not settings.DISABLE_BOOTSTRAP_USERS:
        bootstrap_first_admin()
    else:
        logger.info("User bootstrapping disabled (DISABLE_BOOTSTRAP_USERS=true)")

    logger.info("Application startup complete")

    yield

    logger.info("Shutting down application...")


app = FastAPI(
    title=settings.PROJECT_NAME,
    version=settings.VERSION,
    openapi_url=f"{settings.API_V1_PREFIX}/openapi.json",
    docs_url=f"{settings.API_V1_PREFIX}/docs",
    redoc_url=f"{settings.API_V1_PREFIX}/redoc",
    lifespan=lifespan,
)

if settings.BACKEND_CORS_ORIGINS:
    app.add_middleware(
        CORSMiddleware,
        allow_origins=[str(origin).rstrip("/") for origin in settings.BACKEND_CORS_ORIGINS],
        allow_credentials=True,
        allow_methods=["GET", "POST", "PATCH", "DELETE", "OPTIONS"],
        allow_headers=["authorization", "content-type", "accept"],
    )

setup_exception_handlers(app)

app.include_router(health.router, prefix=settings.API_V1_PREFIX)
app.include_router(auth.router, prefix=settings.API_V1_PREFIX)
app.include_router(users.router, prefix=settings.API_V1_PREFIX)
app.include_router(movies.router, prefix=settings.API_V1_PREFIX)
app.include_router(actors.router, prefix=settings.API_V1_PREFIX)
