"""
Event Registry - FastAPI Application Factory

Events and participant registrations backed by MongoDB.
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from event_registry.database import MongoConnection
from event_registry.exceptions import EventRegistryError, NotFoundError, ValidationError
from event_registry.routers import events
from event_registry.settings import app_settings, configure_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan manager - opens MongoDB on startup and closes it on shutdown."""
    logger.info(f"{app_settings.app_name} starting up...")

    mongo = MongoConnection(app_settings.mongo_url, app_settings.database_name)
    await mongo.connect()
    await mongo.init_indexes()
    app.state.mongo = mongo

    yield

    await mongo.close()
    logger.info(f"{app_settings.app_name} shutting down...")


def format_validation_errors(exc: RequestValidationError) -> str:
    """Flatten FastAPI's validation errors into one message string."""
    messages = []
    for error in exc.errors():
        location = ".".join(str(part) for part in error.get("loc", ()) if part != "body")
        messages.append(f"{location}: {error.get('msg')}" if location else str(error.get("msg")))
    return "; ".join(messages) or "Invalid request"


async def request_validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Report malformed query parameters and bodies as 400 rather than 422."""
    logger.info(f"Rejected {request.method} {request.url.path}: {exc.errors()}")
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"detail": format_validation_errors(exc)},
    )


async def event_registry_exception_handler(request: Request, exc: EventRegistryError) -> JSONResponse:
    """Map domain errors to 400 (validation), 404 (not found) or 500."""
    if isinstance(exc, ValidationError):
        status_code = status.HTTP_400_BAD_REQUEST
    elif isinstance(exc, NotFoundError):
        status_code = status.HTTP_404_NOT_FOUND
    else:
        logger.error(f"Unhandled domain error on {request.method} {request.url.path}: {exc}")
        status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    return JSONResponse(status_code=status_code, content={"detail": exc.message})


def create_app() -> FastAPI:
    """FastAPI application factory."""
    configure_logging(log_level=app_settings.log_level)

    app = FastAPI(
        title=f"{app_settings.app_name} API",
        description="Create and manage events and register their participants.",
        version=app_settings.app_version,
        docs_url=f"{app_settings.api_prefix}/docs",
        openapi_url=f"{app_settings.api_prefix}/openapi.json",
        lifespan=lifespan,
    )

    if app_settings.enable_cors:
        app.add_middleware(
            CORSMiddleware,
            allow_origins=app_settings.cors_origins,
            allow_methods=["*"],
            allow_headers=["*"],
        )

    app.add_exception_handler(RequestValidationError, request_validation_exception_handler)
    app.add_exception_handler(EventRegistryError, event_registry_exception_handler)

    app.include_router(events.router, prefix=f"{app_settings.api_prefix}/events", tags=["Events"])

    @app.get("/health", tags=["Health"])
    async def health():
        """Health check endpoint."""
        return {"status": "healthy", "service": app_settings.app_name}

    logger.info(f"{app_settings.app_name} application created")
    return app
