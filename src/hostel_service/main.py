"""
Hostel Service - Main Application
=================================

Composition root of the hostel management API.

Startup order:
1. Load layered configuration
2. Configure structured logging
3. Build the database context, service registry and FastAPI app
4. Apply database migrations (policy-gated, with retry)
5. Start serving

Clean Architecture Layers (per slice: hostels, rooms, hostel_students):
- Interfaces: FastAPI controllers
- Application: Services, repository interfaces and DTOs
- Domain: Entities
- Infrastructure: ORM models and SQLAlchemy repositories
"""

from contextlib import asynccontextmanager
from typing import AsyncGenerator

import uvicorn
from fastapi import FastAPI, Request
from fastapi.middleware.httpsredirect import HTTPSRedirectMiddleware

from hostel_service.config import Settings, get_settings
from hostel_service.core import ConfigurationException, MigrationException
from hostel_service.hostel_students.interfaces import hostel_student_router
from hostel_service.hostels.interfaces import hostel_router
from hostel_service.infrastructure.database import DatabaseContext
from hostel_service.rooms.interfaces import room_router
from hostel_service.shared.api.middleware import install_middleware
from hostel_service.shared.infrastructure.logging import get_logger, setup_logging
from hostel_service.shared.infrastructure.registry import ServiceRegistry
from hostel_service.startup import MigrationOrchestrator, MigrationPolicy, build_registry

logger = get_logger(__name__)

DOCS_URL = "/swagger"
REDOC_URL = "/redoc"
OPENAPI_URL = "/swagger/v1/swagger.json"


def build_database(settings: Settings) -> DatabaseContext:
    """Database context for the configured connection string. Does not connect."""
    return DatabaseContext(
        settings.database_url,
        settings.migrations_source,
        pool_size=settings.db_pool_size,
        max_overflow=settings.db_max_overflow,
        echo=settings.db_echo,
    )


def create_app(settings: Settings, database: DatabaseContext, registry: ServiceRegistry) -> FastAPI:
    """
    Build the FastAPI application.

    Routes are always mounted. Swagger UI, ReDoc and the OpenAPI document
    exist only in Development. Plain HTTP is redirected to HTTPS everywhere.
    """

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncGenerator:
        logger.info("Hostel Service accepting requests", extra={
            "version": settings.app_version,
            "environment": settings.environment
        })
        yield
        await database.dispose()
        logger.info("Hostel Service shutdown complete")

    docs_enabled = settings.is_development
    app = FastAPI(
        title="Hostel Service API",
        description="Manage hostels, their rooms and student room allocations.",
        version="v1",
        docs_url=DOCS_URL if docs_enabled else None,
        redoc_url=REDOC_URL if docs_enabled else None,
        openapi_url=OPENAPI_URL if docs_enabled else None,
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.database = database
    app.state.registry = registry

    install_middleware(app)
    # Outermost, so redirects happen before any other processing
    app.add_middleware(HTTPSRedirectMiddleware)

    app.include_router(hostel_router)
    app.include_router(room_router)
    app.include_router(hostel_student_router)

    @app.get("/health", tags=["Health"])
    async def health_check(request: Request):
        """Health check endpoint for load balancers and orchestrators."""
        db: DatabaseContext = request.app.state.database
        try:
            await db.ping()
            database_status = "connected"
        except Exception as e:
            logger.warning("Health check could not reach the database", extra={"error": str(e)})
            database_status = "unavailable"

        return {
            "status": "healthy" if database_status == "connected" else "degraded",
            "version": settings.app_version,
            "environment": settings.environment,
            "checks": {"database": database_status},
        }

    @app.get("/", tags=["Root"])
    async def root():
        """Root endpoint with API information."""
        return {
            "service": "Hostel Service",
            "version": settings.app_version,
            "docs": DOCS_URL if docs_enabled else None,
            "health": "/health",
            "modules": {
                "hostels": "/api/hostels",
                "rooms": "/api/rooms",
                "hostel_students": "/api/hostel-students",
            },
        }

    return app


def main() -> None:
    """Process entry point. Exits with status 1 if startup cannot complete."""
    try:
        settings = get_settings()
    except ConfigurationException as e:
        setup_logging()
        logger.critical(f"Configuration could not be loaded: {e.message}", extra={"details": e.details})
        raise SystemExit(1) from e

    setup_logging(settings.log_level, settings.environment)
    logger.info("Starting Hostel Service", extra={
        "version": settings.app_version,
        "environment": settings.environment
    })

    try:
        database = build_database(settings)
        app = create_app(settings, database=database, registry=build_registry())
    except ConfigurationException as e:
        logger.critical(f"Application could not be built: {e.message}", extra={"details": e.details})
        raise SystemExit(1) from e

    result = MigrationOrchestrator(database.migrate).run(MigrationPolicy.from_settings(settings))
    if result.failed:
        logger.critical("Startup aborted: database migrations failed", extra={"attempts": result.attempts})
        raise SystemExit(1) from MigrationException(result.attempts, result.error)

    # The listening socket is opened only after migrations have finished.
    uvicorn.run(
        app,
        host=settings.host,
        port=settings.port,
        log_config=None,
        proxy_headers=True,
    )


if __name__ == "__main__":
    main()
