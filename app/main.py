"""
Main FastAPI application entry point.
Configures the app, middleware, routers, and startup/shutdown events.
"""

from contextlib import asynccontextmanager
from datetime import datetime, timezone
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import PlainTextResponse
import logging
from typing import Optional

from app.config import Settings, get_settings
from app.application.dto.base_dto import HealthCheckResponseDTO
from app.infrastructure.db.database import MongoDatabase
from app.infrastructure.web.middleware.error_handler import (
    ErrorHandlerMiddleware,
    register_exception_handlers
)
from app.infrastructure.web.routers import (
    session,
    jobs,
    accepted_tasks
)

logger = logging.getLogger(__name__)

BANNER = "Freelance Hub Server is running!"


def configure_logging(settings: Settings) -> None:
    logging.basicConfig(
        level=logging.DEBUG if settings.debug else logging.INFO,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Manage application lifecycle.
    Connects to MongoDB before serving and closes the client on shutdown.
    """
    settings: Settings = app.state.settings

    # Startup
    logger.info(f"Starting {settings.api_title} v{settings.api_version}")
    logger.info(f"Environment: {settings.environment}")

    mongo = MongoDatabase(settings)
    try:
        await mongo.connect()
    except Exception:
        logger.error("Database connection failed, aborting startup")
        mongo.close()
        raise
    app.state.mongo = mongo

    yield

    # Shutdown
    logger.info("Shutting down application")
    mongo.close()


def create_application(settings: Optional[Settings] = None) -> FastAPI:
    """
    Create and configure the FastAPI application.
    """
    settings = settings or get_settings()
    configure_logging(settings)

    app = FastAPI(
        title=settings.api_title,
        version=settings.api_version,
        debug=settings.debug,
        docs_url="/docs" if settings.debug else None,
        redoc_url="/redoc" if settings.debug else None,
        openapi_url="/openapi.json" if settings.debug else None,
        lifespan=lifespan
    )
    app.state.settings = settings

    # Add CORS middleware; the session cookie needs credentials
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Add custom error handler middleware
    app.add_middleware(ErrorHandlerMiddleware)
    register_exception_handlers(app)

    # Include routers
    app.include_router(session.router, tags=["Session"])
    app.include_router(jobs.router, tags=["Jobs"])
    app.include_router(accepted_tasks.router, tags=["Accepted Tasks"])

    # Root endpoint
    @app.get("/", response_class=PlainTextResponse)
    async def root() -> str:
        return BANNER

    # Health check endpoint
    @app.get("/health", response_model=HealthCheckResponseDTO)
    async def health_check(request: Request) -> HealthCheckResponseDTO:
        """Health check endpoint for monitoring."""
        mongo: Optional[MongoDatabase] = getattr(request.app.state, "mongo", None)
        healthy = mongo is not None and await mongo.is_healthy()
        return HealthCheckResponseDTO(
            status="healthy" if healthy else "degraded",
            environment=settings.environment,
            version=settings.api_version,
            database="connected" if healthy else "unavailable",
            timestamp=datetime.now(timezone.utc)
        )

    return app


# Create the FastAPI app instance
app = create_application()

if __name__ == "__main__":
    import uvicorn

    settings = get_settings()
    uvicorn.run(
        "app.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.is_development,
        log_level="debug" if settings.debug else "info",
    )
