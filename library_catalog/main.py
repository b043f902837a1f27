"""
Library Catalog — FastAPI Application Factory
===============================================

What:  Creates and configures the FastAPI application instance.
How:   Factory pattern: create_app() returns a configured FastAPI instance
       owning its own Database handle (app.state.database).
Who:   uvicorn (uvicorn library_catalog.main:app), the `library-catalog`
       console script, and the test fixtures.

Application Architecture:
    ┌─────────────────────────────────────────────────────┐
    │                   FastAPI App                       │
    │                                                     │
    │  Middleware Chain:                                  │
    │  ┌──────────┐ ┌──────────┐ ┌──────┐ ┌──────────┐   │
    │  │  Req ID  │→│ Logging  │→│ GZip │→│   CORS   │   │
    │  └──────────┘ └──────────┘ └──────┘ └──────────┘   │
    │                                                     │
    │  Routes:                                            │
    │  /books  /books/{id}  /authors  /genres  /health    │
    │                                                     │
    │  Exception Handlers:                                │
    │  Validation→400 │ NotFound→404 │ Database→500       │
    └─────────────────────────────────────────────────────┘

Lifecycle:
    Startup:
    1. Configure logging
    2. Create tables and seed reference data (failures are logged only)
    3. Log startup complete

    Shutdown:
    1. Dispose database engine (close all connections)
"""

import logging
import sys
from contextlib import asynccontextmanager
from typing import AsyncGenerator, Optional

import uvicorn
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.middleware.gzip import GZipMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from library_catalog import __version__
from library_catalog.config import Settings, settings as default_settings
from library_catalog.database import Database
from library_catalog.exceptions import (
    DatabaseError,
    LibraryCatalogError,
    NotFoundError,
    ValidationError,
)
from library_catalog.middleware.logging import RequestLoggingMiddleware
from library_catalog.middleware.request_id import (
    REQUEST_ID_HEADER,
    RequestIDMiddleware,
    request_id_var,
)
from library_catalog.routes import authors, books, genres, health
from library_catalog.services.seed_service import seed_service

logger = logging.getLogger(__name__)


# ══════════════════════════════════════════════════════════════════════════
# Logging Configuration
# ══════════════════════════════════════════════════════════════════════════

def setup_logging(config: Optional[Settings] = None) -> None:
    """
    Configure logging for the entire application.

    Format: %(asctime)s [%(levelname)s] %(name)s: %(message)s
    """
    config = config or default_settings
    logging.basicConfig(
        level=getattr(logging, config.log_level, logging.INFO),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%dT%H:%M:%S",
        handlers=[logging.StreamHandler(sys.stdout)],
        force=True,
    )

    # Our access log replaces uvicorn's
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
    if not config.sql_echo:
        logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)


# ══════════════════════════════════════════════════════════════════════════
# Application Lifespan (Startup & Shutdown)
# ══════════════════════════════════════════════════════════════════════════

@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Seeds the database before serving and disposes the engine afterwards."""
    config: Settings = app.state.settings
    database: Database = app.state.database

    setup_logging(config)
    logger.info("Library Catalog %s starting up (database: %s)", __version__, database.url)

    if config.seed_on_startup:
        summary = await seed_service.initialize(database)
        if not summary.succeeded:
            logger.error("Database setup failed; serving requests against an unseeded catalog")

    logger.info("Server is running on http://%s:%d", config.host, config.port)

    yield

    logger.info("Library Catalog shutting down...")
    await database.dispose()
    logger.info("Shutdown complete.")


# ══════════════════════════════════════════════════════════════════════════
# Exception Handlers
# ══════════════════════════════════════════════════════════════════════════

def _error(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": message})


def _describe_validation_errors(exc: RequestValidationError) -> str:
    """Condenses FastAPI's validation error list into one line."""
    errors = exc.errors()
    if not errors:
        return "Invalid request"
    first = errors[0]
    location = ".".join(
        str(part) for part in first.get("loc", ()) if part not in ("body", "query", "path")
    )
    reason = first.get("msg", "invalid value")
    return f"Invalid request: {location}: {reason}" if location else f"Invalid request: {reason}"


def register_exception_handlers(app: FastAPI) -> None:
    """
    Register global exception handlers; every error body is {"error": "<message>"}.

    Handler hierarchy:
        ValidationError / RequestValidationError → 400
        NotFoundError                            → 404
        DatabaseError                            → 500 (driver message)
        LibraryCatalogError (base)               → 500
        StarletteHTTPException                   → its own status (404/405 for routing)
        Exception (fallback)                     → 500
    """

    @app.exception_handler(ValidationError)
    async def handle_validation_error(request: Request, exc: ValidationError):
        logger.warning("[%s] Validation error: %s", request_id_var.get(""), exc.message)
        return _error(400, exc.message)

    @app.exception_handler(RequestValidationError)
    async def handle_request_validation_error(request: Request, exc: RequestValidationError):
        message = _describe_validation_errors(exc)
        logger.warning("[%s] Request validation error: %s", request_id_var.get(""), message)
        return _error(400, message)

    @app.exception_handler(NotFoundError)
    async def handle_not_found(request: Request, exc: NotFoundError):
        return _error(404, exc.message)

    @app.exception_handler(DatabaseError)
    async def handle_database_error(request: Request, exc: DatabaseError):
        logger.error(
            "[%s] Database error: %s | Context: %s",
            request_id_var.get(""),
            exc.message,
            exc.context,
        )
        return _error(500, exc.message)

    @app.exception_handler(LibraryCatalogError)
    async def handle_catalog_error(request: Request, exc: LibraryCatalogError):
        logger.error("[%s] %s: %s", request_id_var.get(""), type(exc).__name__, exc.message)
        return _error(exc.status_code, exc.message)

    @app.exception_handler(StarletteHTTPException)
    async def handle_http_exception(request: Request, exc: StarletteHTTPException):
        return JSONResponse(
            status_code=exc.status_code,
            content={"error": str(exc.detail)},
            headers=getattr(exc, "headers", None),
        )

    @app.exception_handler(Exception)
    async def handle_unexpected_error(request: Request, exc: Exception):
        logger.error(
            "[%s] Unexpected error: %s",
            request_id_var.get(""),
            str(exc),
            exc_info=True,
        )
        return _error(500, "An unexpected error occurred")


# ══════════════════════════════════════════════════════════════════════════
# Application Factory
# ══════════════════════════════════════════════════════════════════════════

def create_app(config: Optional[Settings] = None) -> FastAPI:
    """
    Create and configure the FastAPI application.

    Args:
        config: Settings to use; defaults to the module-level singleton.
                Tests pass their own to point at a temporary database.
    """
    config = config or default_settings

    app = FastAPI(
        title="Library Catalog API",
        description="CRUD over a catalog of books, authors and genres stored in SQLite.",
        version=__version__,
        lifespan=lifespan,
    )
    app.state.settings = config
    app.state.database = Database(config)

    # Middleware executes in REVERSE order of addition:
    # RequestID → Logging → GZip → CORS → routes
    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.cors_origins_list,
        allow_methods=config.cors_methods_list,
        allow_headers=["*"],
        expose_headers=[REQUEST_ID_HEADER],
    )
    app.add_middleware(GZipMiddleware, minimum_size=500)
    app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(RequestIDMiddleware)

    register_exception_handlers(app)

    app.include_router(books.router)
    app.include_router(authors.router)
    app.include_router(genres.router)
    app.include_router(health.router)

    return app


def run() -> None:
    """Console entry point: serve the app on the configured host and port."""
    uvicorn.run(
        "library_catalog.main:app",
        host=default_settings.host,
        port=default_settings.port,
        log_level=default_settings.log_level.lower(),
    )


# uvicorn expects `library_catalog.main:app` to be importable
app = create_app()
