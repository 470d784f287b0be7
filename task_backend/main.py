# Standard library imports
from pathlib import Path
from contextlib import asynccontextmanager
import logging

# External package imports
from dotenv import load_dotenv
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from pymongo.errors import PyMongoError

# Local application imports
from .api.v1 import user_router, task_router, register_error_handlers, RequestLoggingMiddleware
from .core.config import get_settings
from .core.logging_config import setup_logging
from .infrastructure.db.mongo_connection import ensure_indexes, close_connection

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Lifespan context manager for startup/shutdown events.

    Ensures MongoDB indexes on startup and closes the MongoDB client on shutdown.
    """
    settings = get_settings()

    try:
        await ensure_indexes()
    except PyMongoError as e:
        # The API can still serve requests; uniqueness then relies on the use case check only
        logger.error(f"Failed to ensure MongoDB indexes: {e}", exc_info=True)

    logger.info(f"Task backend started (env: {settings.app_env})")
    logger.info(f"CORS enabled for: {', '.join(settings.cors_origins)}")

    yield

    close_connection()
    logger.info("Application shutdown complete")


def create_application() -> FastAPI:
    """
    Create and configure FastAPI application.

    This function sets up the FastAPI application with:
    - Environment variable loading
    - Logging configuration
    - CORS and request logging middleware
    - Domain error handlers
    - API route registration

    Returns:
        Configured FastAPI application instance
    """
    # Load environment variables from .env file
    env_path = Path(__file__).resolve().parent.parent / ".env"
    load_dotenv(env_path)

    settings = get_settings()
    setup_logging(settings.log_level)

    application = FastAPI(
        title="Task Backend API",
        version="1.0.0",
        description="Clean Architecture task management backend",
        lifespan=lifespan
    )

    application.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["GET", "POST", "PUT", "DELETE", "PATCH", "OPTIONS"],
        allow_headers=["Content-Type", "Authorization"],
    )
    application.add_middleware(RequestLoggingMiddleware)

    register_error_handlers(application)

    # Register API routers
    application.include_router(user_router, prefix="/api/v1/users")
    application.include_router(task_router, prefix="/api/v1/tasks")

    return application


# Create application instance
app = create_application()
