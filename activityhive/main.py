"""
ActivityHive Backend — FastAPI Application Factory
===================================================

What:  Creates and configures the FastAPI application instance.
How:   Factory pattern: create_app() returns a configured FastAPI instance
       that owns one MongoStore on `app.state.store`.
Who:   uvicorn (`uvicorn activityhive.main:app`) or the `activityhive`
       console script (run()).

Application Architecture:
    ┌──────────────────────────────────────────────────────┐
    │                    FastAPI App                       │
    │                                                      │
    │  Middleware Chain:                                   │
    │  ┌──────────┐ ┌──────────────┐ ┌──────────────────┐  │
    │  │  Req ID  │→│   Logging    │→│ CORS (optional)  │  │
    │  └──────────┘ └──────────────┘ └──────────────────┘  │
    │                                                      │
    │  Routes:                                             │
    │  GET /                 GET /api/{collection_name}    │
    │  GET /health           POST /api/orders              │
    │                        PUT /api/products/{id}        │
    │                                                      │
    │  Exception Handlers (plain-text bodies):             │
    │  Validation/InvalidCollection→400 │ NotFound→404     │
    │  DatabaseError→500 │ anything else→500               │
    └──────────────────────────────────────────────────────┘

Lifecycle:
    Startup:
    1. Initialize logging
    2. Connect to MongoDB and ping; on failure the exception propagates
       and uvicorn exits without serving a single request
    Shutdown:
    1. Close the MongoDB client
"""

import logging
import sys
from contextlib import asynccontextmanager
from typing import AsyncGenerator, Optional

import uvicorn
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import PlainTextResponse

from activityhive import __version__
from activityhive.config import Settings, settings as default_settings
from activityhive.database import MongoStore
from activityhive.exceptions import (
    DatabaseError,
    InvalidCollectionError,
    NotFoundError,
    StoreConnectionError,
    ValidationError,
)
from activityhive.middleware.logging import RequestLoggingMiddleware
from activityhive.middleware.request_id import RequestIDMiddleware, request_id_var
from activityhive.routes import collections, health, orders, products

logger = logging.getLogger(__name__)


# ══════════════════════════════════════════════════════════════════════════
# Logging Configuration
# ══════════════════════════════════════════════════════════════════════════

def setup_logging(level: str = "INFO") -> None:
    """
    Configure logging for the entire application.

    Format: %(asctime)s [%(levelname)s] %(name)s: %(message)s
    Called once from the lifespan, before the store connects.
    """
    logging.basicConfig(
        level=getattr(logging, level, logging.INFO),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%dT%H:%M:%S",
        handlers=[logging.StreamHandler(sys.stdout)],
        force=True,
    )

    # The access middleware already logs every request
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
    logging.getLogger("pymongo").setLevel(logging.WARNING)


# ══════════════════════════════════════════════════════════════════════════
# Application Lifespan (Startup & Shutdown)
# ══════════════════════════════════════════════════════════════════════════

@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    app_settings: Settings = app.state.settings
    store: MongoStore = app.state.store

    # ── Startup ───────────────────────────────────────────────────────────
    setup_logging(app_settings.log_level)
    logger.info("ActivityHive Backend %s starting up...", __version__)

    try:
        await store.connect()
    except StoreConnectionError as e:
        logger.critical("Cannot start without MongoDB: %s | Context: %s", e.message, e.context)
        raise

    logger.info("Server ready at http://%s:%d", app_settings.backend_host, app_settings.backend_port)

    yield

    # ── Shutdown ──────────────────────────────────────────────────────────
    logger.info("ActivityHive Backend shutting down...")
    await store.close()
    logger.info("Shutdown complete.")


# ══════════════════════════════════════════════════════════════════════════
# Exception Handlers
# ══════════════════════════════════════════════════════════════════════════

def register_exception_handlers(app: FastAPI) -> None:
    """
    Map exception types to status codes and fixed plain-text bodies.

    Handler table:
        ValidationError         → 400
        RequestValidationError  → 400 (FastAPI's own parameter checks)
        InvalidCollectionError  → 400
        NotFoundError           → 404
        DatabaseError           → 500
        Exception (fallback)    → 500

    Driver errors and stack traces are logged here and never echoed.
    """

    @app.exception_handler(ValidationError)
    async def handle_validation_error(request: Request, exc: ValidationError):
        rid = request_id_var.get("")
        logger.warning("[%s] Validation error: %s | Errors: %s", rid, exc.message, exc.errors)
        return PlainTextResponse(exc.message, status_code=400)

    @app.exception_handler(RequestValidationError)
    async def handle_request_validation_error(request: Request, exc: RequestValidationError):
        rid = request_id_var.get("")
        logger.warning("[%s] Request validation error: %s", rid, exc.errors())
        return PlainTextResponse("Invalid request data", status_code=400)

    @app.exception_handler(InvalidCollectionError)
    async def handle_invalid_collection(request: Request, exc: InvalidCollectionError):
        rid = request_id_var.get("")
        logger.warning("[%s] %s | Context: %s", rid, exc.message, exc.context)
        return PlainTextResponse(exc.message, status_code=400)

    @app.exception_handler(NotFoundError)
    async def handle_not_found(request: Request, exc: NotFoundError):
        return PlainTextResponse(exc.message, status_code=404)

    @app.exception_handler(DatabaseError)
    async def handle_database_error(request: Request, exc: DatabaseError):
        rid = request_id_var.get("")
        logger.error("[%s] Database error: %s | Context: %s", rid, exc.message, exc.context)
        return PlainTextResponse(exc.message, status_code=500)

    @app.exception_handler(Exception)
    async def handle_unexpected_error(request: Request, exc: Exception):
        # Runs in ServerErrorMiddleware, outside RequestIDMiddleware, so the
        # header is stamped here; scope state carries the assigned ID.
        rid = getattr(request.state, "request_id", "") or request_id_var.get("")
        logger.error("[%s] Unexpected error: %s", rid, str(exc), exc_info=True)
        headers = {"X-Request-ID": rid} if rid else None
        return PlainTextResponse("Internal server error", status_code=500, headers=headers)


# ══════════════════════════════════════════════════════════════════════════
# Application Factory
# ══════════════════════════════════════════════════════════════════════════

def create_app(
    store: Optional[MongoStore] = None,
    app_settings: Optional[Settings] = None,
) -> FastAPI:
    """
    Create and configure the FastAPI application.

    Args:
        store:        Store to serve from. Defaults to a MongoStore built
                      from the settings; tests pass an in-memory one.
        app_settings: Defaults to the module-level settings singleton.

    Returns:
        Configured FastAPI instance. The store is attached but not yet
        connected; the lifespan connects it.
    """
    app_settings = app_settings or default_settings

    app = FastAPI(
        title="ActivityHive API",
        description=(
            "Read access to any ActivityHive collection, order creation, "
            "and partial product updates over MongoDB."
        ),
        version=__version__,
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
        lifespan=lifespan,
    )
    app.state.settings = app_settings
    app.state.store = store if store is not None else MongoStore(app_settings)

    # ── Register Middleware ───────────────────────────────────────────────
    # Last added runs first: RequestID → Logging → CORS → routes
    if app_settings.cors_enabled:
        origins = app_settings.cors_origins_list
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
    # Fixed /api paths before the catch-all /api/{collection_name}
    app.include_router(health.router)
    app.include_router(orders.router)
    app.include_router(products.router)
    app.include_router(collections.router)

    return app


app = create_app()


def run() -> None:
    """Console-script entry point: serve `app` with uvicorn."""
    uvicorn.run(
        "activityhive.main:app",
        host=default_settings.backend_host,
        port=default_settings.backend_port,
        log_level=default_settings.log_level.lower(),
    )
