import logging
import uuid
from contextlib import asynccontextmanager
from pathlib import Path

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.staticfiles import StaticFiles
from sqlalchemy.exc import SQLAlchemyError

from hoopdex.context import AppContext
from hoopdex.settings import AppSettings, get_settings

from .api import favorites, pages, search
from .schemas.error import ValidationErrorDetail
from .utils.error_responses import (
    build_failure_response,
    build_validation_error_response,
    error_json,
)
from .utils.request_context import clear_request_id, get_request_id, set_request_id

settings = get_settings()

logging.basicConfig(
    level=settings.log_level_numeric,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


def _validate_environment(app_settings: AppSettings) -> None:
    """Log warnings for optional settings that were left unset."""

    warnings = app_settings.optional_config_warnings()
    if warnings:
        logger.warning("=" * 60)
        logger.warning("Environment Configuration Warnings:")
        for warning in warnings:
            logger.warning(f"  • {warning}")
        logger.warning("=" * 60)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Build (or adopt) the application context and prepare the schema."""

    app_settings: AppSettings = app.state.settings
    _validate_environment(app_settings)

    context: AppContext | None = getattr(app.state, "context", None)
    owns_context = context is None
    if context is None:
        context = AppContext.from_settings(app_settings)
        app.state.context = context

    await context.create_schema()
    logger.info("Hoopdex API ready")

    yield

    logger.info("Shutting down Hoopdex API")
    if owns_context:
        await context.aclose()


# Middleware to add request ID to each request
async def add_request_id(request: Request, call_next):
    """Add unique request ID to each request for tracking."""
    request_id = str(uuid.uuid4())
    token = set_request_id(request_id)
    try:
        response = await call_next(request)
    finally:
        clear_request_id(token)
    response.headers["X-Request-ID"] = request_id
    return response


# Exception handlers
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    """Reject malformed requests with a 400 listing each failed field."""
    errors = [
        ValidationErrorDetail(
            field=".".join(str(loc) for loc in error["loc"]),
            message=error["msg"],
            value=error.get("input"),
        )
        for error in exc.errors()
    ]

    logger.warning(
        "Validation error for request %s to %s: %s errors",
        get_request_id(),
        request.url.path,
        len(errors),
    )

    return error_json(
        status.HTTP_400_BAD_REQUEST,
        build_validation_error_response(
            message="Request validation failed",
            errors=errors,
        ),
    )


async def database_exception_handler(request: Request, exc: SQLAlchemyError):
    """Handle database errors raised outside the favorites store."""
    logger.error(
        "Database error for request %s to %s: %s",
        get_request_id(),
        request.url.path,
        str(exc),
    )

    return error_json(
        status.HTTP_500_INTERNAL_SERVER_ERROR,
        build_failure_response("Database operation failed"),
    )


async def generic_exception_handler(request: Request, exc: Exception):
    """Handle all other unhandled exceptions."""
    logger.exception(
        "Unhandled exception for request %s to %s: %s",
        get_request_id(),
        request.url.path,
        type(exc).__name__,
    )

    return error_json(
        status.HTTP_500_INTERNAL_SERVER_ERROR,
        build_failure_response("Internal server error"),
    )


def create_app(
    app_settings: AppSettings | None = None,
    *,
    context: AppContext | None = None,
) -> FastAPI:
    """Assemble the FastAPI application.

    Passing ``context`` installs it immediately, which lets tests drive the app
    through ``ASGITransport`` (no lifespan events) against a substitute store
    and upstream transport.
    """

    app_settings = app_settings or (context.settings if context else settings)

    app = FastAPI(
        title="Hoopdex API",
        version="0.1.0",
        description="Search NBA players and teams and keep a list of favorites.",
        lifespan=lifespan,
        redirect_slashes=False,
    )
    app.state.settings = app_settings
    if context is not None:
        app.state.context = context

    app.middleware("http")(add_request_id)

    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(SQLAlchemyError, database_exception_handler)
    app.add_exception_handler(Exception, generic_exception_handler)

    static_dir = Path(app_settings.static_dir)
    if static_dir.is_dir():
        app.mount("/static", StaticFiles(directory=str(static_dir)), name="static")

    @app.get("/health", tags=["system"])
    async def healthcheck() -> dict[str, str]:
        """Simple health endpoint for readiness checks."""
        return {"status": "ok"}

    app.include_router(search.router, prefix="/api/search", tags=["search"])
    app.include_router(favorites.router, prefix="/api/favorites", tags=["favorites"])
    app.include_router(pages.router, tags=["pages"])

    return app


app = create_app()
