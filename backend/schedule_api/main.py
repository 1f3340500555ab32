"""
Schedule API — FastAPI Application Factory
===========================================

What:  Creates and configures the FastAPI application instance.
How:   Factory pattern: create_app() wires settings, the store handle,
       middleware, exception handlers, and routers, and returns the app.
Who:   uvicorn (`schedule_api.main:app`), the `schedule-api` command, tests.

Application Architecture:
    ┌──────────────────────────────────────────────────────────┐
    │                      FastAPI App                         │
    │                                                          │
    │  Middleware:  [Request ID] → [Logging] → [CORS]          │
    │                                                          │
    │  Routes:      GET /            GET /health               │
    │               GET  /schedule/{user_id}/{semester_id}     │
    │               POST /schedule/add   POST /schedule/remove │
    │               GET  /feedback   GET /feedback/{id}        │
    │               POST /feedback                             │
    │                                                          │
    │  Exception Handlers:                                     │
    │    ValidationError→400 │ NotFound→404 │ Query/Insert→500 │
    └──────────────────────────────────────────────────────────┘

Lifecycle:
    Startup:  configure logging, optionally create tables
    Shutdown: dispose the database engine (close pooled connections)
"""

import logging
import sys
from contextlib import asynccontextmanager
from typing import Any, AsyncGenerator, Dict, Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from schedule_api import __version__
from schedule_api.config import Settings, settings as default_settings
from schedule_api.database import Database
from schedule_api.dependencies import format_validation_errors
from schedule_api.exceptions import (
    DatabaseError,
    InsertError,
    NotFoundError,
    QueryError,
    ScheduleApiError,
    ValidationError,
)
from schedule_api.middleware.logging import RequestLoggingMiddleware
from schedule_api.middleware.request_id import RequestIDMiddleware, request_id_var
from schedule_api.routes import feedback, health, schedule

logger = logging.getLogger(__name__)


# ══════════════════════════════════════════════════════════════════════════
# Logging Configuration
# ══════════════════════════════════════════════════════════════════════════

def setup_logging(level: str) -> None:
    """
    Configure the root logger once for the whole process.

    Format: %(asctime)s [%(levelname)s] %(name)s: %(message)s
    """
    logging.basicConfig(
        level=getattr(logging, level, logging.INFO),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%dT%H:%M:%S",
        handlers=[logging.StreamHandler(sys.stdout)],
        force=True,
    )

    # Third-party loggers are chatty at INFO
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)
    logging.getLogger("httpx").setLevel(logging.WARNING)


# ══════════════════════════════════════════════════════════════════════════
# Application Lifespan
# ══════════════════════════════════════════════════════════════════════════

@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Startup before the yield, shutdown after it."""
    app_settings: Settings = app.state.settings
    database: Database = app.state.database

    setup_logging(app_settings.log_level)
    logger.info("Schedule API %s starting up...", __version__)

    if app_settings.db_create_all:
        await database.create_all()

    logger.info("Server ready at http://%s:%d", app_settings.host, app_settings.port)

    yield

    logger.info("Schedule API shutting down...")
    await database.dispose()
    logger.info("Shutdown complete.")


# ══════════════════════════════════════════════════════════════════════════
# Exception Handlers
# ══════════════════════════════════════════════════════════════════════════

def _error_response(
    status_code: int,
    error: str,
    message: str,
    details: Optional[Dict[str, Any]] = None,
) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content={
            "error": error,
            "message": message,
            "details": details,
            "request_id": request_id_var.get(""),
        },
    )


def register_exception_handlers(app: FastAPI) -> None:
    """
    Map exception types to HTTP status codes and the shared error envelope.

    Handler hierarchy:
        ValidationError         → 400 Bad Request
        RequestValidationError  → 400 Bad Request (malformed path params)
        NotFoundError           → 404 Not Found
        QueryError              → 500 query_error
        InsertError             → 500 insert_error
        DatabaseError           → 500 database_error
        ScheduleApiError (base) → 500 server_error
        Exception (fallback)    → 500 internal_server_error, rendered by
                                  RequestIDMiddleware so X-Request-ID is kept
    """

    @app.exception_handler(ValidationError)
    async def handle_validation_error(request: Request, exc: ValidationError):
        logger.warning("[%s] Validation error: %s", request_id_var.get(""), exc.message)
        return _error_response(400, "validation_error", exc.message, exc.context)

    @app.exception_handler(RequestValidationError)
    async def handle_request_validation_error(request: Request, exc: RequestValidationError):
        errors = format_validation_errors(exc.errors())
        logger.warning("[%s] Malformed request parameters: %s", request_id_var.get(""), errors)
        return _error_response(
            400,
            "validation_error",
            "Invalid request parameters",
            {"errors": errors},
        )

    @app.exception_handler(NotFoundError)
    async def handle_not_found(request: Request, exc: NotFoundError):
        return _error_response(404, "not_found", exc.message)

    @app.exception_handler(DatabaseError)
    async def handle_database_error(request: Request, exc: DatabaseError):
        """Store failure: the error type is returned, the full context only logged."""
        if isinstance(exc, QueryError):
            code = "query_error"
        elif isinstance(exc, InsertError):
            code = "insert_error"
        else:
            code = "database_error"
        logger.error(
            "[%s] %s: %s | Context: %s",
            request_id_var.get(""), type(exc).__name__, exc.message, exc.context,
        )
        details = None
        if "error_type" in exc.context:
            details = {"error_type": exc.context["error_type"]}
        return _error_response(500, code, exc.message, details)

    @app.exception_handler(ScheduleApiError)
    async def handle_app_error(request: Request, exc: ScheduleApiError):
        logger.error("[%s] Application error: %s", request_id_var.get(""), exc.message)
        return _error_response(500, "server_error", exc.message)


# ══════════════════════════════════════════════════════════════════════════
# Application Factory
# ══════════════════════════════════════════════════════════════════════════

def create_app(
    settings: Optional[Settings] = None,
    database: Optional[Database] = None,
) -> FastAPI:
    """
    Create and configure the FastAPI application.

    Args:
        settings: Configuration; defaults to the process-wide `settings`.
        database: Store handle; built from `settings` when omitted. Tests
                  pass their own to point the app at a scratch database.
    """
    settings = settings or default_settings
    database = database or Database.from_settings(settings)

    app = FastAPI(
        title="Schedule API",
        description="Course schedule entries and course feedback over a relational store.",
        version=__version__,
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.database = database

    # Middleware executes in REVERSE order of addition:
    # RequestID → Logging → CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins_list,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
        expose_headers=["X-Request-ID"],
    )
    app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(RequestIDMiddleware)

    register_exception_handlers(app)

    app.include_router(health.router)
    app.include_router(schedule.router)
    app.include_router(feedback.router)

    return app


def run() -> None:
    """Console entry point: serve the app on HOST:PORT with uvicorn."""
    import uvicorn

    setup_logging(default_settings.log_level)
    uvicorn.run(
        "schedule_api.main:app",
        host=default_settings.host,
        port=default_settings.port,
        log_level=default_settings.log_level.lower(),
    )


# uvicorn expects `schedule_api.main:app` to be importable
app = create_app()
