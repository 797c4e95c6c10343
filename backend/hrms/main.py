"""
HRMS Employee API — FastAPI Application Factory
=================================================

What:  Creates and configures the FastAPI application instance.
How:   Factory pattern: create_app() returns a configured FastAPI instance.
Who:   Called by uvicorn (uvicorn hrms.main:app) and by tests.

Application Architecture:
    ┌─────────────────────────────────────────────────────┐
    │                   FastAPI App                       │
    │                                                     │
    │  Middleware Chain:                                  │
    │  ┌──────────────┐ ┌─────────────────┐               │
    │  │  Request ID  │→│  Access Log     │               │
    │  └──────────────┘ └─────────────────┘               │
    │                                                     │
    │  Routes:                                            │
    │  ┌────────────────┐ ┌──────────────┐ ┌───────────┐  │
    │  │ GET/POST       │ │ PUT/DELETE   │ │ GET       │  │
    │  │ /employee      │ │ /employee/id │ │ /health   │  │
    │  └────────────────┘ └──────────────┘ └───────────┘  │
    │                                                     │
    │  Exception Handlers:                                │
    │  ┌──────────────────────────────────────────────┐   │
    │  │ Validation→400 │ NotFound→404 │ Database→500 │   │
    │  └──────────────────────────────────────────────┘   │
    └─────────────────────────────────────────────────────┘

Lifecycle:
    Startup:
    1. Initialize logging
    2. Open the MongoDB client and bind the employee repository
       (skipped when a repository was passed to create_app)

    Shutdown:
    1. Close the MongoDB client opened at startup
"""

import logging
import sys
from contextlib import asynccontextmanager
from typing import Any, AsyncGenerator, Dict, List, Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from hrms import __version__
from hrms.config import settings
from hrms.database import (
    close_mongo_client,
    create_mongo_client,
    get_employee_collection,
)
from hrms.exceptions import (
    DatabaseError,
    HRMSError,
    NotFoundError,
    ValidationError,
)
from hrms.middleware.logging import RequestLoggingMiddleware
from hrms.middleware.request_id import RequestIDMiddleware, request_id_var
from hrms.repositories.base import EmployeeRepository
from hrms.repositories.mongo import MongoEmployeeRepository
from hrms.routes import employees, health

logger = logging.getLogger(__name__)


# ══════════════════════════════════════════════════════════════════════════
# Logging Configuration
# ══════════════════════════════════════════════════════════════════════════

def setup_logging() -> None:
    """
    Configure logging for the entire application.

    Format: %(asctime)s [%(levelname)s] %(name)s: %(message)s
    Called once during app startup, before the storage client is opened.
    """
    logging.basicConfig(
        level=getattr(logging, settings.log_level, logging.INFO),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%dT%H:%M:%S",
        handlers=[
            logging.StreamHandler(sys.stdout),
        ],
        force=True,
    )

    # hrms.access already logs every request
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
    logging.getLogger("pymongo").setLevel(logging.WARNING)


# ══════════════════════════════════════════════════════════════════════════
# Application Lifespan (Startup & Shutdown)
# ══════════════════════════════════════════════════════════════════════════

@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """
    Open the storage handle on startup and release it on shutdown.

    The MongoDB client is created exactly once per process and never
    re-created; every request shares it through app.state.
    """
    # ── Startup ───────────────────────────────────────────────────────────
    setup_logging()
    logger.info("HRMS Employee API %s starting up...", __version__)

    client = None
    if getattr(app.state, "employee_repository", None) is None:
        client = create_mongo_client(settings)
        collection = get_employee_collection(client, settings)
        app.state.employee_repository = MongoEmployeeRepository(collection)
        logger.info(
            "Using MongoDB collection %s.%s",
            settings.mongodb_database,
            settings.mongodb_collection,
        )

    logger.info("Server ready at http://%s:%d", settings.backend_host, settings.backend_port)

    yield

    # ── Shutdown ──────────────────────────────────────────────────────────
    logger.info("HRMS Employee API shutting down...")
    await close_mongo_client(client)
    logger.info("Shutdown complete.")


# ══════════════════════════════════════════════════════════════════════════
# Exception Handlers
# ══════════════════════════════════════════════════════════════════════════

def _error_response(exc: HRMSError, rid: str) -> JSONResponse:
    return JSONResponse(
        status_code=exc.status_code,
        content={
            "error": exc.error_code,
            "message": exc.message,
            "request_id": rid,
        },
    )


def format_validation_errors(errors: List[Dict[str, Any]]) -> str:
    """
    Flatten pydantic/FastAPI validation errors into one readable message.

    Example:
        [{"loc": ("body", "salary"), "msg": "Input should be a valid number"}]
        → "salary: Input should be a valid number"
    """
    parts = []
    for error in errors:
        if error.get("type") == "json_invalid":
            detail = error.get("ctx", {}).get("error", "")
            parts.append(f"Invalid JSON body: {detail}" if detail else "Invalid JSON body")
            continue
        loc = [str(part) for part in error.get("loc", ()) if part != "body"]
        msg = error.get("msg", "Invalid value")
        parts.append(f"{'.'.join(loc)}: {msg}" if loc else msg)
    return "; ".join(parts) or "Invalid request body"


def register_exception_handlers(app: FastAPI) -> None:
    """
    Register global exception handlers for consistent error responses.

    Handler hierarchy:
        RequestValidationError  → 400 (FastAPI's default would be 422)
        ValidationError         → 400 (includes InvalidIdentifierError)
        NotFoundError           → 404
        DatabaseError           → 500, driver message passed through
        Exception (fallback)    → 500, generic message
    """

    @app.exception_handler(RequestValidationError)
    async def handle_request_validation_error(request: Request, exc: RequestValidationError):
        rid = request_id_var.get("")
        message = format_validation_errors(exc.errors())
        logger.warning("[%s] Request body rejected: %s", rid, message)
        return JSONResponse(
            status_code=ValidationError.status_code,
            content={
                "error": ValidationError.error_code,
                "message": message,
                "request_id": rid,
            },
        )

    @app.exception_handler(ValidationError)
    async def handle_validation_error(request: Request, exc: ValidationError):
        rid = request_id_var.get("")
        logger.warning("[%s] Validation error: %s | Context: %s", rid, exc.message, exc.context)
        return _error_response(exc, rid)

    @app.exception_handler(NotFoundError)
    async def handle_not_found(request: Request, exc: NotFoundError):
        rid = request_id_var.get("")
        return _error_response(exc, rid)

    @app.exception_handler(DatabaseError)
    async def handle_database_error(request: Request, exc: DatabaseError):
        rid = request_id_var.get("")
        logger.error("[%s] Database error: %s | Context: %s", rid, exc.message, exc.context)
        return _error_response(exc, rid)

    @app.exception_handler(Exception)
    async def handle_unexpected_error(request: Request, exc: Exception):
        rid = request_id_var.get("")
        logger.error("[%s] Unexpected error: %s", rid, str(exc), exc_info=True)
        return JSONResponse(
            status_code=HRMSError.status_code,
            content={
                "error": HRMSError.error_code,
                "message": "An unexpected error occurred.",
                "request_id": rid,
            },
        )


# ══════════════════════════════════════════════════════════════════════════
# Application Factory
# ══════════════════════════════════════════════════════════════════════════

def create_app(repository: Optional[EmployeeRepository] = None) -> FastAPI:
    """
    Create and configure the FastAPI application.

    Args:
        repository: Storage to serve from. When omitted, the lifespan handler
            opens a MongoDB client from settings at startup.

    Returns: Fully configured FastAPI instance ready to receive requests.
    """
    app = FastAPI(
        title="HRMS Employee API",
        description="Create, list, update and delete employee records stored in MongoDB.",
        version=__version__,
        lifespan=lifespan,
    )
    app.state.employee_repository = repository

    # Last added = first to execute: RequestID → Logging → route
    app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(RequestIDMiddleware)

    register_exception_handlers(app)

    app.include_router(employees.router)
    app.include_router(health.router)

    return app


# uvicorn expects `hrms.main:app` to be importable
app = create_app()
