"""
Back Office Backend — FastAPI Application Factory
===================================================

What:  Creates and configures the FastAPI application instance.
Why:   Centralizes app configuration, middleware registration, route mounting,
       and lifecycle management in one place.
How:   Factory pattern: create_app() returns a configured FastAPI instance.
Who:   Called by uvicorn to start the server (uvicorn backoffice.main:app).

Application Architecture:
    ┌─────────────────────────────────────────────────────┐
    │                   FastAPI App                       │
    │                                                     │
    │  Middleware Chain:                                  │
    │  ┌──────────┐ ┌─────────────────┐ ┌──────────────┐  │
    │  │ Req ID   │→│  Logging        │→│ GZip / CORS  │  │
    │  └──────────┘ └─────────────────┘ └──────────────┘  │
    │                                                     │
    │  Routes:                                            │
    │  ┌──────────┐ ┌──────────────┐ ┌────────────────┐   │
    │  │ catalogs │ │ payment-plans│ │ unit-measures  │   │
    │  └──────────┘ └──────────────┘ └────────────────┘   │
    │  ┌──────────┐ ┌──────────────────────────────────┐  │
    │  │ prospects│ │ /health, /api/test/jwt-roles     │  │
    │  └──────────┘ └──────────────────────────────────┘  │
    │                                                     │
    │  Exception Handlers:                                │
    │  ┌──────────────────────────────────────────────┐   │
    │  │ Validation→400 │ Auth→401 │ HTTP→status │ 500│   │
    │  └──────────────────────────────────────────────┘   │
    └─────────────────────────────────────────────────────┘
"""

import logging
import sys
from contextlib import asynccontextmanager
from typing import AsyncGenerator, Dict

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.middleware.gzip import GZipMiddleware
from starlette.exceptions import HTTPException as StarletteHTTPException

from backoffice import __version__
from backoffice.config import settings
from backoffice.database import dispose_engine
from backoffice.exceptions import AuthenticationError, BackOfficeError
from backoffice.middleware.logging import RequestLoggingMiddleware
from backoffice.middleware.request_id import RequestIDMiddleware, RequestIdFilter, request_id_var
from backoffice.routes import catalogs, health, payment_plans, prospects, unit_measures
from backoffice.routes.responses import error_response

logger = logging.getLogger(__name__)


# ══════════════════════════════════════════════════════════════════════════
# Logging Configuration
# ══════════════════════════════════════════════════════════════════════════

def setup_logging() -> None:
    """
    Configure logging for the entire application.

    Format: %(asctime)s [%(levelname)s] %(name)s [%(request_id)s] %(message)s

    The request id comes from RequestIdFilter, attached to the handler so
    records from every logger (ours and third-party) get the attribute.
    """
    handler = logging.StreamHandler(sys.stdout)
    handler.addFilter(RequestIdFilter())

    logging.basicConfig(
        level=getattr(logging, settings.log_level, logging.INFO),
        format="%(asctime)s [%(levelname)s] %(name)s [%(request_id)s] %(message)s",
        datefmt="%Y-%m-%dT%H:%M:%S",
        handlers=[handler],
        force=True,
    )

    # Reduce noise from third-party libraries
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)
    logging.getLogger("httpx").setLevel(logging.WARNING)


# ══════════════════════════════════════════════════════════════════════════
# Application Lifespan (Startup & Shutdown)
# ══════════════════════════════════════════════════════════════════════════

@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    # ── Startup ───────────────────────────────────────────────────────────
    setup_logging()
    logger.info("Back Office Backend %s starting up...", __version__)

    try:
        settings.validate_required_for_production()
    except ValueError as e:
        # Keep serving: health checks and local development still work
        logger.warning("Configuration warning: %s", e)

    logger.info("Server ready at http://%s:%d", settings.backend_host, settings.backend_port)

    yield

    # ── Shutdown ──────────────────────────────────────────────────────────
    logger.info("Back Office Backend shutting down...")
    await dispose_engine()
    logger.info("Shutdown complete.")


# ══════════════════════════════════════════════════════════════════════════
# Exception Handlers
# ══════════════════════════════════════════════════════════════════════════

def _validation_fields(exc: RequestValidationError) -> Dict[str, str]:
    """{"body.name": "String should have at least 1 character", ...}; input values are not echoed."""
    fields: Dict[str, str] = {}
    for err in exc.errors():
        location = ".".join(str(part) for part in err.get("loc", ()))
        fields[location or "request"] = err.get("msg", "invalid")
    return fields


_HTTP_ERROR_CODES = {
    400: ("validation_error", "Solicitud inválida"),
    401: ("unauthorized", "No autorizado"),
    403: ("forbidden", "Acceso denegado"),
    404: ("not_found", "Recurso no encontrado"),
    405: ("method_not_allowed", "Método no permitido"),
}


def register_exception_handlers(app: FastAPI) -> None:
    """
    Register global exception handlers for consistent error responses.

    Handler hierarchy:
        RequestValidationError  → 400 validation_error (fields listed in details)
        AuthenticationError     → 401 unauthorized
        BackOfficeError (base)  → its status_code
        HTTPException           → its status code (unknown routes, 405, ...)
        Exception (fallback)    → 500 server_error

    Security: handlers NEVER put exception text, type names or stack traces
    in the response. Those go to the server log with the request id.
    """

    @app.exception_handler(RequestValidationError)
    async def handle_request_validation(request: Request, exc: RequestValidationError):
        fields = _validation_fields(exc)
        logger.warning("Request validation failed on %s: %s", request.url.path, list(fields))
        return error_response(
            400,
            "validation_error",
            "Los datos enviados no son válidos",
            {"fields": fields},
        )

    @app.exception_handler(AuthenticationError)
    async def handle_authentication_error(request: Request, exc: AuthenticationError):
        logger.info("Rejected request to %s: %s", request.url.path, exc.reason)
        return error_response(
            exc.status_code,
            exc.error_code,
            exc.message,
            headers={"WWW-Authenticate": "Bearer"},
        )

    @app.exception_handler(BackOfficeError)
    async def handle_backoffice_error(request: Request, exc: BackOfficeError):
        logger.error("Application error: %s | Context: %s", exc.message, exc.context)
        return error_response(exc.status_code, exc.error_code, exc.message)

    @app.exception_handler(StarletteHTTPException)
    async def handle_http_exception(request: Request, exc: StarletteHTTPException):
        code, message = _HTTP_ERROR_CODES.get(exc.status_code, ("http_error", "Error en la solicitud"))
        if exc.status_code >= 500:
            code, message = "server_error", "Error interno del servidor"
        return error_response(exc.status_code, code, message, headers=getattr(exc, "headers", None))

    @app.exception_handler(Exception)
    async def handle_unexpected_error(request: Request, exc: Exception):
        """Catch-all: stack trace logged server-side ONLY."""
        rid = getattr(request.state, "request_id", None) or request_id_var.get("")
        logger.error("[%s] Unexpected error: %s", rid, exc, exc_info=exc)
        return error_response(500, "server_error", "Error interno del servidor", request_id=rid)


# ══════════════════════════════════════════════════════════════════════════
# Application Factory
# ══════════════════════════════════════════════════════════════════════════

def create_app() -> FastAPI:
    app = FastAPI(
        title="Back Office API",
        description=(
            "Catalogs, payment plans, prospects and unit measures for the "
            "inventory and expense back office."
        ),
        version=__version__,
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
        lifespan=lifespan,
    )

    # ── Register Middleware ───────────────────────────────────────────────
    # Last added runs first: RequestID → Logging → GZip → CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins_list,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
        expose_headers=["X-Request-ID"],
    )
    app.add_middleware(GZipMiddleware, minimum_size=500)
    app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(RequestIDMiddleware)

    # ── Register Exception Handlers ───────────────────────────────────────
    register_exception_handlers(app)

    # ── Register Routes ───────────────────────────────────────────────────
    app.include_router(catalogs.router)
    app.include_router(payment_plans.router)
    app.include_router(prospects.router)
    app.include_router(unit_measures.router)
    app.include_router(health.router)

    return app


# uvicorn expects `backoffice.main:app` to be importable
app = create_app()
