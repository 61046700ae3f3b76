"""
Catalog API — FastAPI Application Factory
==========================================

What:  Creates and configures the FastAPI application instance.
How:   Factory pattern: create_app() builds the DocumentStore (or takes one
       from the caller), wires one create handler per resource to it,
       mounts the routers and registers middleware and exception handlers.
Who:   uvicorn (`uvicorn catalog_api.main:app`), the `catalog-api` console
       script and the test suite.

Application Architecture:
    ┌─────────────────────────────────────────────────────┐
    │                   FastAPI App                       │
    │                                                     │
    │  Middleware:  Request ID → Logging → GZip → CORS    │
    │                                                     │
    │  Routes:                                            │
    │  ┌──────────┐ ┌──────────┐ ┌───────────────┐ ┌─────┐│
    │  │ /books   │ │ /jobs    │ │ /api/products │ │/hlth││
    │  └──────────┘ └──────────┘ └───────────────┘ └─────┘│
    │        └──── ResourceCreateHandler(store) ────┘     │
    │                                                     │
    │  Exception Handlers:                                │
    │    bad JSON body → 400 │ CatalogError → 500 │ * → 500│
    └─────────────────────────────────────────────────────┘

Lifecycle:
    Startup:  configure logging, connect the document store
    Shutdown: close the document store (uvicorn maps SIGINT/SIGTERM here)
"""

import logging
import sys
from contextlib import asynccontextmanager
from typing import AsyncGenerator, Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.middleware.gzip import GZipMiddleware
from fastapi.responses import JSONResponse

from catalog_api import __version__
from catalog_api.config import Settings, settings
from catalog_api.database import DocumentStore
from catalog_api.exceptions import CatalogError
from catalog_api.middleware.logging import RequestLoggingMiddleware
from catalog_api.middleware.request_id import RequestIDMiddleware, request_id_var
from catalog_api.resources import RESOURCES
from catalog_api.routes.health import build_health_router
from catalog_api.routes.resources import build_resource_router
from catalog_api.services.resource_service import ResourceCreateHandler

logger = logging.getLogger(__name__)


# ══════════════════════════════════════════════════════════════════════════
# Logging Configuration
# ══════════════════════════════════════════════════════════════════════════

def setup_logging(level: str = "INFO") -> None:
    """
    Configure the root logger once for the whole process.

    Format: %(asctime)s [%(levelname)s] %(name)s: %(message)s on stdout.
    """
    logging.basicConfig(
        level=getattr(logging, level, logging.INFO),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%dT%H:%M:%S",
        handlers=[logging.StreamHandler(sys.stdout)],
        force=True,
    )

    for noisy in ("uvicorn.access", "sqlalchemy.engine", "httpcore", "httpx"):
        logging.getLogger(noisy).setLevel(logging.WARNING)


# ══════════════════════════════════════════════════════════════════════════
# Exception Handlers
# ══════════════════════════════════════════════════════════════════════════

def register_exception_handlers(app: FastAPI) -> None:
    """
    Map errors that escape the route handlers to JSON responses.

    Handler hierarchy:
        RequestValidationError → 400 (malformed or non-object JSON body)
        CatalogError           → 500 (app error outside the create contract)
        Exception              → 500 (unexpected; stack trace logged only)

    PersistenceError never reaches these: the create handlers answer it
    with their per-resource 400 body.
    """

    @app.exception_handler(RequestValidationError)
    async def handle_request_validation(request: Request, exc: RequestValidationError):
        rid = request_id_var.get("")
        reasons = "; ".join(error.get("msg", "") for error in exc.errors())
        logger.warning("[%s] Invalid request body: %s", rid, reasons)
        return JSONResponse(
            status_code=400,
            content={
                "error": "invalid_request_body",
                "message": f"Request body must be a JSON object: {reasons}",
                "request_id": rid,
            },
        )

    @app.exception_handler(CatalogError)
    async def handle_catalog_error(request: Request, exc: CatalogError):
        rid = request_id_var.get("")
        logger.error("[%s] Application error: %s | Context: %s", rid, exc.message, exc.context)
        return JSONResponse(
            status_code=500,
            content={
                "error": "server_error",
                "message": "An internal error occurred. Please try again later.",
                "request_id": rid,
            },
        )

    @app.exception_handler(Exception)
    async def handle_unexpected_error(request: Request, exc: Exception):
        rid = request_id_var.get("")
        logger.error("[%s] Unexpected error: %s", rid, str(exc), exc_info=True)
        return JSONResponse(
            status_code=500,
            content={
                "error": "internal_server_error",
                "message": "An unexpected error occurred. Please try again or contact support.",
                "request_id": rid,
            },
        )


# ══════════════════════════════════════════════════════════════════════════
# Application Factory
# ══════════════════════════════════════════════════════════════════════════

def create_app(
    store: Optional[DocumentStore] = None,
    app_settings: Settings = settings,
) -> FastAPI:
    """
    Create and configure the FastAPI application.

    Args:
        store:        Persistence client to inject into the handlers. Built
                      from `app_settings` when omitted.
        app_settings: Settings for logging, CORS and the default store.

    The store is exposed as `app.state.store`; the lifespan connects it on
    startup and closes it on shutdown.
    """
    if store is None:
        store = DocumentStore.from_settings(app_settings)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
        # ── Startup ───────────────────────────────────────────────────────
        setup_logging(app_settings.log_level)
        logger.info("Catalog API %s starting up...", __version__)
        await store.connect()
        logger.info(
            "Serving %s at http://%s:%d",
            ", ".join(resource.prefix for resource in RESOURCES),
            app_settings.backend_host,
            app_settings.backend_port,
        )

        yield

        # ── Shutdown ──────────────────────────────────────────────────────
        logger.info("Catalog API shutting down...")
        await store.close()
        logger.info("Shutdown complete.")

    app = FastAPI(
        title="Catalog API",
        description="Create and browse books, jobs and products.",
        version=__version__,
        lifespan=lifespan,
    )
    app.state.store = store

    # ── Register Middleware ───────────────────────────────────────────────
    # Last added runs first: RequestID → Logging → GZip → CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=app_settings.cors_origins_list,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
        expose_headers=["X-Request-ID"],
    )
    app.add_middleware(GZipMiddleware, minimum_size=500)
    app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(RequestIDMiddleware)

    register_exception_handlers(app)

    # ── Register Routes ───────────────────────────────────────────────────
    for resource in RESOURCES:
        handler = ResourceCreateHandler(resource, store)
        app.include_router(build_resource_router(resource, handler))
    app.include_router(build_health_router(store))

    return app


app = create_app()


def run() -> None:
    """Console entry point: serve `app` with uvicorn using the configured host/port."""
    import uvicorn

    uvicorn.run(
        "catalog_api.main:app",
        host=settings.backend_host,
        port=settings.backend_port,
        log_level=settings.log_level.lower(),
    )
