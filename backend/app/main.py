"""
NoteKeeper Backend: FastAPI Application Factory
================================================

What:  Creates and configures the FastAPI application instance.
How:   Factory pattern: create_app() returns a configured FastAPI instance.
Who:   Called by uvicorn to start the server (uvicorn app.main:app).

Application Architecture:
    ┌──────────────────────────────────────────────────────┐
    │                    FastAPI App                        │
    │                                                       │
    │  Middleware:  Request ID → Logging → CORS             │
    │                                                       │
    │  Routes:                                              │
    │    POST /account   POST /login   GET /get-user        │
    │    /notes (CRUD, pin/unpin, search)  [auth gate]      │
    │    GET /health     GET /             [auth gate]      │
    │                                                       │
    │  Exception Handlers:                                  │
    │    NoteKeeperError → status from class                │
    │    RequestValidationError → 400                       │
    │    Exception → 500                                    │
    └──────────────────────────────────────────────────────┘

Lifecycle:
    Startup:  logging, configuration check (refuses to start without
              ACCESS_TOKEN_SECRET)
    Shutdown: dispose database engine
"""

import logging
import sys
from contextlib import asynccontextmanager
from typing import AsyncGenerator

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from app import __version__
from app.config import settings
from app.database import dispose_engine
from app.exceptions import (
    AuthenticationError,
    ConfigurationError,
    DatabaseError,
    NoteKeeperError,
)
from app.middleware.logging import RequestLoggingMiddleware
from app.middleware.request_id import RequestIDMiddleware, request_id_var
from app.routes import accounts, health, notes

logger = logging.getLogger(__name__)


# ══════════════════════════════════════════════════════════════════════════
# Logging Configuration
# ══════════════════════════════════════════════════════════════════════════

def setup_logging() -> None:
    """
    Configure root logging for the entire application.

    Format: %(asctime)s [%(levelname)s] %(name)s: %(message)s
    Output: stdout (captured by the container runtime)
    """
    logging.basicConfig(
        level=getattr(logging, settings.log_level, logging.INFO),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%dT%H:%M:%S",
        handlers=[logging.StreamHandler(sys.stdout)],
        force=True,
    )

    # Third-party libraries log every operation at INFO/DEBUG
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)
    logging.getLogger("passlib").setLevel(logging.ERROR)


# ══════════════════════════════════════════════════════════════════════════
# Application Lifespan (Startup & Shutdown)
# ══════════════════════════════════════════════════════════════════════════

@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """
    Startup validates configuration and fails fast; shutdown releases the
    connection pool.

    Raises:
        ConfigurationError: required settings are missing. Uvicorn aborts
        startup, so no request is ever served with an unsigned token path.
    """
    setup_logging()
    logger.info("NoteKeeper Backend %s starting up...", __version__)

    try:
        settings.validate_required_for_production()
    except ConfigurationError as e:
        logger.critical("Configuration error: %s", e.message)
        raise

    logger.info("Environment: %s", settings.environment)
    logger.info("Server ready at http://%s:%d", settings.backend_host, settings.backend_port)

    yield

    logger.info("NoteKeeper Backend shutting down...")
    await dispose_engine()
    logger.info("Shutdown complete.")


# ══════════════════════════════════════════════════════════════════════════
# Exception Handlers
# ══════════════════════════════════════════════════════════════════════════

def _error_body(message: str, kind: str, details=None) -> dict:
    body = {"error": message, "kind": kind, "request_id": request_id_var.get("")}
    if details:
        body["details"] = details
    return body


def register_exception_handlers(app: FastAPI) -> None:
    """
    Map exceptions to the failure envelope `{error, kind, details?, request_id}`.

    Handler hierarchy:
        AuthenticationError     → 401 with WWW-Authenticate: Bearer
        DatabaseError           → 500, details only outside production
        NoteKeeperError (base)  → exc.status_code (400 / 404 / 500)
        RequestValidationError  → 400 (malformed JSON, wrong field types)
        Exception (fallback)    → 500
    """

    @app.exception_handler(AuthenticationError)
    async def handle_authentication_error(request: Request, exc: AuthenticationError):
        return JSONResponse(
            status_code=exc.status_code,
            content=_error_body(exc.message, exc.kind),
            headers={"WWW-Authenticate": "Bearer"},
        )

    @app.exception_handler(DatabaseError)
    async def handle_database_error(request: Request, exc: DatabaseError):
        rid = request_id_var.get("")
        logger.error("[%s] Database error: %s | Context: %s", rid, exc.message, exc.context)
        details = None if settings.is_production else exc.context.get("original_error")
        return JSONResponse(
            status_code=exc.status_code,
            content=_error_body(exc.message, exc.kind, details),
        )

    @app.exception_handler(NoteKeeperError)
    async def handle_app_error(request: Request, exc: NoteKeeperError):
        rid = request_id_var.get("")
        if exc.status_code >= 500:
            logger.error("[%s] %s: %s | Context: %s", rid, type(exc).__name__, exc.message, exc.context)
        else:
            logger.info("[%s] %s: %s", rid, type(exc).__name__, exc.message)
        return JSONResponse(
            status_code=exc.status_code,
            content=_error_body(exc.message, exc.kind),
        )

    @app.exception_handler(RequestValidationError)
    async def handle_request_validation(request: Request, exc: RequestValidationError):
        rid = request_id_var.get("")
        logger.warning("[%s] Request validation failed: %s", rid, exc.errors())
        return JSONResponse(
            status_code=400,
            content=_error_body("Invalid request", "validation_error", jsonable_encoder(exc.errors())),
        )

    @app.exception_handler(Exception)
    async def handle_unexpected_error(request: Request, exc: Exception):
        """Catch-all: stack trace goes to the log, never to the client."""
        rid = request_id_var.get("")
        logger.error("[%s] Unexpected error: %s", rid, str(exc), exc_info=True)
        details = None if settings.is_production else str(exc)
        return JSONResponse(
            status_code=500,
            content=_error_body("Internal server error", "internal", details),
        )


# ══════════════════════════════════════════════════════════════════════════
# Application Factory
# ══════════════════════════════════════════════════════════════════════════

def create_app() -> FastAPI:
    """
    Create and configure the FastAPI application.

    Returns: Fully configured FastAPI instance ready to receive requests.
    """
    app = FastAPI(
        title="NoteKeeper API",
        description=(
            "Multi-user note-taking backend: accounts, bearer-token login, "
            "and per-account note CRUD and search."
        ),
        version=__version__,
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
        lifespan=lifespan,
    )

    # ── Register Middleware ───────────────────────────────────────────────
    # Last added runs first: RequestID → Logging → CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins_list,
        allow_methods=["*"],
        allow_headers=["*"],
        expose_headers=["X-Request-ID"],
    )
    app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(RequestIDMiddleware)

    # ── Register Exception Handlers ───────────────────────────────────────
    register_exception_handlers(app)

    # ── Register Routes ───────────────────────────────────────────────────
    app.include_router(health.router)
    app.include_router(accounts.router)
    app.include_router(notes.router)

    return app


# uvicorn imports `app.main:app`
app = create_app()
