"""FastAPI application entry point."""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from flowboard import __version__
from flowboard.api import auth, pages, users
from flowboard.config import get_settings
from flowboard.database import init_db
from flowboard.errors import (
    Conflict,
    FlowboardError,
    NotFound,
    StoreFailure,
    Unauthenticated,
    ValidationError,
)
from flowboard.logging_config import configure_logging

settings = get_settings()
logger = logging.getLogger(__name__)

REQUEST_SECTIONS = ("body", "path", "query", "header")


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Handle application startup and shutdown events."""
    configure_logging(settings.log_level)
    logger.info(f"Starting FlowBoard API ({settings.environment})")
    if settings.is_development:
        # Deployed environments run Alembic migrations instead
        init_db()
    yield
    logger.info("FlowBoard API stopped")


app = FastAPI(
    title="FlowBoard API",
    description="Multi-tenant note-taking backend",
    version=__version__,
    lifespan=lifespan,
)

# CORS middleware for development
if settings.is_development:
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )


ERROR_STATUS = {
    ValidationError: status.HTTP_400_BAD_REQUEST,
    Unauthenticated: status.HTTP_401_UNAUTHORIZED,
    NotFound: status.HTTP_404_NOT_FOUND,
    Conflict: status.HTTP_409_CONFLICT,
    StoreFailure: status.HTTP_500_INTERNAL_SERVER_ERROR,
}


def status_for(exc: FlowboardError) -> int:
    """HTTP status for an application error, by its closest mapped base class."""
    for cls in type(exc).__mro__:
        if cls in ERROR_STATUS:
            return ERROR_STATUS[cls]
    return status.HTTP_500_INTERNAL_SERVER_ERROR


@app.exception_handler(FlowboardError)
async def flowboard_error_handler(request: Request, exc: FlowboardError) -> JSONResponse:
    """Render application errors as ``{"error", "message"}``."""
    status_code = status_for(exc)
    headers = None
    if status_code == status.HTTP_401_UNAUTHORIZED:
        headers = {"WWW-Authenticate": "Bearer"}
    return JSONResponse(
        status_code=status_code,
        content={"error": exc.code, "message": exc.message},
        headers=headers,
    )


@app.exception_handler(Exception)
async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    """Anything unexpected becomes an opaque 500; details only go to the log."""
    logger.exception(f"Unhandled error on {request.method} {request.url.path}", exc_info=exc)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"error": StoreFailure.code, "message": StoreFailure.message},
    )


@app.exception_handler(RequestValidationError)
async def request_validation_error_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Report malformed request bodies and parameters as 400."""
    errors = exc.errors()
    if errors:
        first = errors[0]
        loc = [str(part) for part in first.get("loc", ()) if part not in REQUEST_SECTIONS]
        field = ".".join(loc)
        message = f"{field}: {first.get('msg')}" if field else str(first.get("msg"))
    else:
        message = "Invalid request"
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"error": "validation_error", "message": message},
    )


# Register routers
app.include_router(auth.router)
app.include_router(users.router)
app.include_router(pages.router)


@app.get("/health")
async def health_check():
    """Health check endpoint."""
    return {"status": "healthy", "environment": settings.environment}
