"""FastAPI application."""

import logfire
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from board.config import Settings
from board.interface.api.auth import SERVER_NOT_CONFIGURED
from board.interface.api.routes import (
    account,
    admin,
    comments,
    health,
    invites,
    profiles,
    session,
    threads,
    upload,
    votes,
)
from board.util.di.container import create_container, setup_di
from board.util.error import ConfigurationError
from board.util.observability import (
    instrument_fastapi,
    instrument_httpx,
)


async def http_error_handler(
    request: Request, exc: StarletteHTTPException
) -> JSONResponse:
    """Render errors as ``{"error": message}``."""
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": exc.detail},
        headers=getattr(exc, "headers", None),
    )


async def validation_error_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Report the first invalid field as a 400."""
    errors = exc.errors()
    if errors:
        first = errors[0]
        field = ".".join(str(part) for part in first.get("loc", ()) if part != "body")
        message = f"{field}: {first.get('msg')}" if field else first.get("msg")
    else:
        message = "Invalid request."
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST, content={"error": message}
    )


async def configuration_error_handler(
    request: Request, exc: ConfigurationError
) -> JSONResponse:
    """Missing settings found mid-request; the detail stays in the logs."""
    logfire.error("Server misconfigured", path=request.url.path, error=str(exc))
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"error": SERVER_NOT_CONFIGURED},
    )


def create_app() -> FastAPI:
    """Create FastAPI application.

    Note: Logfire should be configured before calling this function.
    In production, start_app.py handles this.
    """
    settings = Settings()

    # Instrument httpx for outbound store requests
    # (Logfire must be configured before instrumentation)
    instrument_httpx()

    app_instance = FastAPI(
        title="Board API",
        description="Backend API for an invite-only pseudonymous discussion board",
        version="0.1.0",
    )

    instrument_fastapi(app_instance)

    app_instance.add_middleware(
        CORSMiddleware,
        allow_origins=[
            settings.api.frontend_url,
            "http://localhost:3000",  # Local development
        ],
        allow_credentials=True,
        allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
        allow_headers=[
            "Authorization",
            "Content-Type",
            "Accept",
            "Origin",
            "X-Requested-With",
        ],
        expose_headers=["Content-Length", "Content-Type"],
        max_age=600,  # Cache preflight requests for 10 minutes
    )

    app_instance.add_exception_handler(StarletteHTTPException, http_error_handler)
    app_instance.add_exception_handler(
        RequestValidationError, validation_error_handler
    )
    app_instance.add_exception_handler(
        ConfigurationError, configuration_error_handler
    )

    # Setup dependency injection
    # Settings are loaded from environment automatically
    container = create_container()
    setup_di(app_instance, container)

    app_instance.include_router(health.router)
    app_instance.include_router(account.router)
    app_instance.include_router(admin.router)
    app_instance.include_router(upload.router)
    app_instance.include_router(session.router)
    app_instance.include_router(invites.router)
    app_instance.include_router(threads.router)
    app_instance.include_router(comments.router)
    app_instance.include_router(votes.router)
    app_instance.include_router(profiles.router)

    return app_instance


# Create app instance for uvicorn
# Note: Logfire must be configured before this module is imported
# In production: start_app.py handles this
app = create_app()
