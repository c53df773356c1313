"""
FastAPI Application Entry Point.

This module creates and configures the FastAPI application instance.
It handles:
1. Application initialization from an explicit Settings object
2. Router registration
3. Middleware configuration (CORS, audit, security headers)
4. Exception handlers mapping errors to failure envelopes
5. Startup/shutdown events

Run with: uvicorn bfhl.api.main:app --port 3000
"""
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.middleware.base import BaseHTTPMiddleware

from bfhl import __version__
from bfhl.api.dependencies import get_app_settings
from bfhl.api.routes import bfhl_router, health_router
from bfhl.core.audit import AuditMiddleware, SecurityHeadersMiddleware
from bfhl.core.config import Settings, get_settings
from bfhl.core.exceptions import BFHLException, ErrorKind
from bfhl.core.logging_config import get_logger, setup_logging
from bfhl.services.bfhl_service import BFHLService

logger = get_logger(__name__)

INTERNAL_ERROR_MESSAGE = "Internal Server Error"


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan manager.

    Logs the effective configuration on startup and shutdown.
    """
    settings: Settings = app.state.settings
    logger.info(f"Starting {settings.app_name} in {settings.app_env} mode")
    logger.info(f"LLM Model: {settings.llm_model} (configured={settings.ai_configured()})")
    logger.info(f"Audit Logging: {settings.enable_audit_logging}")
    logger.info(f"Server running on {settings.port}")

    yield  # Application runs here

    logger.info(f"Shutting down {settings.app_name}")


async def bfhl_exception_handler(request: Request, exc: BFHLException):
    """Render known errors as failure envelopes."""
    settings = get_app_settings(request)
    if exc.error_code == ErrorKind.EXTERNAL_SERVICE:
        logger.error(f"Upstream failure on {request.url.path}: {exc.message}")
    else:
        logger.warning(f"Rejected request ({exc.error_code.value}): {exc.message}")

    return JSONResponse(
        status_code=exc.status_code,
        content=exc.to_envelope(settings.official_email),
    )


async def global_exception_handler(request: Request, exc: Exception):
    """
    Handle uncaught exceptions globally.

    Details are logged and never returned to the client.
    """
    settings = get_app_settings(request)
    logger.exception(f"Unhandled exception: {exc}")

    return JSONResponse(
        status_code=500,
        content={
            "is_success": False,
            "official_email": settings.official_email,
            "error": INTERNAL_ERROR_MESSAGE,
        },
    )


class InternalErrorMiddleware(BaseHTTPMiddleware):
    """
    Turn unexpected exceptions into the generic 500 envelope.

    Installed innermost so the response still passes through the security
    header, audit and CORS middleware. The Exception handler registered on
    the app stays as the last resort for failures inside those layers.
    """

    async def dispatch(self, request: Request, call_next):
        try:
            return await call_next(request)
        except Exception as exc:
            return await global_exception_handler(request, exc)


def create_app(
    settings: Optional[Settings] = None,
    bfhl_service: Optional[BFHLService] = None,
) -> FastAPI:
    """
    Build the FastAPI application.

    Args:
        settings: Application settings. Read from the environment if omitted.
        bfhl_service: Dispatcher to use. Built from settings if omitted.

    Returns:
        Configured FastAPI instance
    """
    settings = settings or get_settings()
    setup_logging(settings.log_level, log_to_file=settings.log_to_file)

    app = FastAPI(
        title="BFHL API",
        description="""
        Numeric utilities and a one-word AI answer behind a single endpoint.

        ## Keys accepted by POST /bfhl

        - **fibonacci**: sequence F(0)..F(n), 0 <= n <= 1000
        - **prime**: primes filtered from an array
        - **lcm** / **hcf**: least common multiple / highest common factor
        - **AI**: one-word answer from Google Gemini
        """,
        version=__version__,
        lifespan=lifespan,
        docs_url="/docs",
        redoc_url="/redoc",
    )

    app.state.settings = settings
    app.state.bfhl_service = bfhl_service or BFHLService(settings)

    # ============================================================
    # Middleware Configuration (last added runs first)
    # ============================================================

    app.add_middleware(InternalErrorMiddleware)
    app.add_middleware(SecurityHeadersMiddleware)

    if settings.enable_audit_logging:
        app.add_middleware(AuditMiddleware)
        logger.info("Audit logging middleware enabled")

    allow_all = "*" in settings.cors_origins
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"] if allow_all else list(settings.cors_origins),
        allow_credentials=not allow_all,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # ============================================================
    # Exception Handlers
    # ============================================================

    app.add_exception_handler(BFHLException, bfhl_exception_handler)
    app.add_exception_handler(Exception, global_exception_handler)

    # ============================================================
    # Routers
    # ============================================================

    app.include_router(health_router)
    app.include_router(bfhl_router)

    @app.get("/", include_in_schema=False)
    async def root():
        """Describe the service."""
        return {
            "message": "BFHL API",
            "version": __version__,
            "documentation": "/docs",
            "health": "/health",
        }

    return app


app = create_app()

