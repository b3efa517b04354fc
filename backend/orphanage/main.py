"""
Orphanage API — FastAPI Application Factory
============================================

What:  Creates and configures the FastAPI application instance.
Why:   Centralizes store ownership, middleware registration, route mounting,
       and lifecycle management in one place.
How:   Factory pattern: create_app() returns a configured FastAPI instance
       that owns its own Store (app.state.store).
Who:   Called by uvicorn (orphanage.main:app) and by the test suite.

Application Architecture:
    ┌──────────────────────────────────────────────────────┐
    │                    FastAPI App                       │
    │                                                      │
    │  Middleware:  Request ID → Logging → CORS            │
    │                                                      │
    │  Routes:                                             │
    │  ┌─────────────────┐ ┌─────────────────┐ ┌────────┐  │
    │  │ /employees[/id] │ │ /children[/id]  │ │/health │  │
    │  └─────────────────┘ └─────────────────┘ └────────┘  │
    │                                                      │
    │  Exception Handlers:                                 │
    │  Constraint→400 │ Malformed→400 │ NotFound→404 │     │
    │  StorageFault→500 │ Exception→500                    │
    │                                                      │
    │  Docs: /api-docs (Swagger UI), /openapi.json         │
    └──────────────────────────────────────────────────────┘

Lifecycle:
    Startup:  setup logging → create tables in the store → log the port
    Shutdown: dispose the store engine (in-memory contents are discarded)
"""

import logging
import sys
from contextlib import asynccontextmanager
from typing import AsyncGenerator, Optional

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from orphanage import __version__
from orphanage.config import Settings, settings as default_settings
from orphanage.database import Store
from orphanage.exceptions import (
    ConstraintViolationError,
    MalformedBodyError,
    NotFoundError,
    OrphanageError,
    StorageFaultError,
)
from orphanage.middleware.logging import RequestLoggingMiddleware
from orphanage.middleware.request_id import RequestIDMiddleware, request_id_var
from orphanage.routes import children, employees, health

logger = logging.getLogger(__name__)


# ══════════════════════════════════════════════════════════════════════════
# Logging Configuration
# ══════════════════════════════════════════════════════════════════════════

def setup_logging(level: str = "INFO") -> None:
    """
    Configure logging for the entire application.

    Format: %(asctime)s [%(levelname)s] %(name)s: %(message)s
    Called once during startup, before anything else logs.
    """
    logging.basicConfig(
        level=getattr(logging, level, logging.INFO),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%dT%H:%M:%S",
        handlers=[logging.StreamHandler(sys.stdout)],
        force=True,
    )

    # Reduce noise from third-party libraries
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)
    logging.getLogger("aiosqlite").setLevel(logging.WARNING)


# ══════════════════════════════════════════════════════════════════════════
# Application Lifespan (Startup & Shutdown)
# ══════════════════════════════════════════════════════════════════════════

@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """
    Start the store on startup and dispose it on shutdown.

    The store is created by create_app() but holds no tables until start()
    runs here; the schema is fixed and created exactly once per process.
    """
    config: Settings = app.state.settings
    store: Store = app.state.store

    setup_logging(config.log_level)
    logger.info("Orphanage API starting up...")

    await store.start()

    logger.info("Server running on port %d", config.port)
    logger.info("API docs: http://%s:%d/api-docs", config.host, config.port)

    yield

    logger.info("Orphanage API shutting down...")
    await store.close()
    logger.info("Shutdown complete.")


# ══════════════════════════════════════════════════════════════════════════
# Exception Handlers
# ══════════════════════════════════════════════════════════════════════════

def _error_response(exc: OrphanageError) -> JSONResponse:
    return JSONResponse(status_code=exc.status_code, content={"error": exc.message})


def register_exception_handlers(app: FastAPI) -> None:
    """
    Register global exception handlers for consistent error responses.

    Handler hierarchy:
        ConstraintViolationError → 400 Bad Request
        MalformedBodyError       → 400 Bad Request
        NotFoundError            → 404 Not Found
        StorageFaultError        → 500 Internal Server Error
        Exception (fallback)     → 500 Internal Server Error

    Every body has the same shape: {"error": "<message>"}. Context dicts
    carried by the exceptions are logged, never returned.
    """

    @app.exception_handler(ConstraintViolationError)
    async def handle_constraint_violation(request: Request, exc: ConstraintViolationError):
        logger.warning("[%s] Write rejected: %s", request_id_var.get(""), exc.message)
        return _error_response(exc)

    @app.exception_handler(MalformedBodyError)
    async def handle_malformed_body(request: Request, exc: MalformedBodyError):
        logger.warning("[%s] Malformed body: %s", request_id_var.get(""), exc.context)
        return _error_response(exc)

    @app.exception_handler(NotFoundError)
    async def handle_not_found(request: Request, exc: NotFoundError):
        return _error_response(exc)

    @app.exception_handler(StorageFaultError)
    async def handle_storage_fault(request: Request, exc: StorageFaultError):
        logger.error(
            "[%s] Storage fault: %s | Context: %s",
            request_id_var.get(""),
            exc.message,
            exc.context,
        )
        return _error_response(exc)

    @app.exception_handler(Exception)
    async def handle_unexpected_error(request: Request, exc: Exception):
        """Catch-all: full stack trace goes to the log, a generic message to the client."""
        logger.error(
            "[%s] Unexpected error: %s",
            request_id_var.get(""),
            str(exc),
            exc_info=True,
        )
        return JSONResponse(
            status_code=500,
            content={"error": "An unexpected error occurred"},
        )


# ══════════════════════════════════════════════════════════════════════════
# Application Factory
# ══════════════════════════════════════════════════════════════════════════

def create_app(config: Optional[Settings] = None, store: Optional[Store] = None) -> FastAPI:
    """
    Create and configure the FastAPI application.

    Args:
        config: Settings to use (defaults to the environment-loaded singleton)
        store:  Store to own (defaults to a new Store on config.database_url)

    Returns:
        Configured FastAPI instance. Its store is available as app.state.store
        and is started by the lifespan.
    """
    config = config or default_settings

    app = FastAPI(
        title="Orphanage API",
        description="CRUD API for the employees and children of an orphanage.",
        version=__version__,
        docs_url="/api-docs",
        redoc_url=None,
        openapi_url="/openapi.json",
        lifespan=lifespan,
    )

    app.state.settings = config
    app.state.store = store or Store(config.database_url, echo=config.log_level == "DEBUG")

    # ── Register Middleware ───────────────────────────────────────────────
    # Executes in REVERSE order of addition: RequestID → Logging → CORS
    origins = config.cors_origins_list
    app.add_middleware(
        CORSMiddleware,
        allow_origins=origins,
        allow_credentials="*" not in origins,
        allow_methods=["*"],
        allow_headers=["*"],
        expose_headers=["X-Request-ID"],
    )
    app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(RequestIDMiddleware)

    # ── Register Exception Handlers ───────────────────────────────────────
    register_exception_handlers(app)

    # ── Register Routes ───────────────────────────────────────────────────
    app.include_router(employees.router)
    app.include_router(children.router)
    app.include_router(health.router)

    return app


# uvicorn expects `orphanage.main:app` to be importable
app = create_app()
