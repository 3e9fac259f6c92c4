"""
Main entrypoint for the Quote API.

This module assembles the FastAPI application, sets up logging,
middleware and error handlers, and includes versioned routers.  The
``create_app`` function builds and configures the app, which is then
instantiated at module import time as ``app``.  Run it with uvicorn,
e.g.::

    uvicorn quote_api.app.main:app --reload

The document store is created by the application lifespan (unless one
is passed to ``create_app``), stored on ``app.state.store`` and closed
on shutdown.  Interactive documentation is served at ``/api-docs``.
"""

import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from .api.v1.endpoints import quotes
from .api.v1.router import router as v1_router
from .core.config import Settings, settings
from .core.db import DocumentStore, create_store
from .core.exceptions import QuoteApiError, ValidationError
from .core.logging_config import setup_logging
from .core.middleware import setup_middleware

logger = logging.getLogger(__name__)


def _register_exception_handlers(app: FastAPI) -> None:
    @app.exception_handler(QuoteApiError)
    async def quote_api_error_handler(request: Request, exc: QuoteApiError) -> JSONResponse:
        logger.warning("%s %s failed: %s", request.method, request.url.path, exc.error_code)
        return JSONResponse(status_code=exc.status_code, content=exc.to_dict())

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
        errors = [
            {"field": ".".join(str(part) for part in error["loc"]), "message": error["msg"]}
            for error in exc.errors()
        ]
        error = ValidationError("Request could not be parsed", errors)
        logger.warning("%s %s failed: %s", request.method, request.url.path, error.error_code)
        return JSONResponse(status_code=error.status_code, content=error.to_dict())

    @app.exception_handler(Exception)
    async def generic_exception_handler(request: Request, exc: Exception) -> JSONResponse:
        logger.exception("Unhandled error on %s %s", request.method, request.url.path)
        return JSONResponse(
            status_code=500,
            content={
                "error": "Internal Server Error",
                "error_code": "INTERNAL_ERROR",
                "detail": "An unexpected error occurred",
            },
        )


def create_app(config: Optional[Settings] = None, store: Optional[DocumentStore] = None) -> FastAPI:
    """Create and configure a FastAPI application.

    Parameters
    ----------
    config : Optional[Settings]
        Settings to use; defaults to the module-level ``settings``.
    store : Optional[DocumentStore]
        Pre-built document store.  When omitted the lifespan creates
        one from ``config`` on startup and closes it on shutdown.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.
    """
    config = config or settings
    setup_logging(config.log_level, config.log_file or None)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        owns_store = app.state.store is None
        if owns_store:
            app.state.store = create_store(config)
        logger.info("%s %s started", config.project_name, config.api_version)
        try:
            yield
        finally:
            if owns_store:
                app.state.store.close()
                app.state.store = None
            logger.info("%s stopped", config.project_name)

    app = FastAPI(
        title=config.project_name,
        version=config.api_version,
        description=config.description,
        debug=config.debug,
        docs_url="/api-docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
        lifespan=lifespan,
    )
    app.state.store = store

    setup_middleware(app, config)
    _register_exception_handlers(app)

    app.include_router(v1_router, prefix="/api/v1")
    # Quotes were first published at the top level; keep that path
    # working without listing the routes twice in the schema.
    app.include_router(quotes.router, prefix="/quotes", include_in_schema=False)

    @app.get("/", tags=["info"])
    async def root() -> dict:
        return {
            "message": f"Welcome to the {config.project_name}",
            "version": config.api_version,
            "docs": "/api-docs",
        }

    @app.get("/health", tags=["info"])
    async def health(request: Request) -> JSONResponse:
        current_store = request.app.state.store
        store_ok = current_store is not None and await current_store.ping()
        return JSONResponse(
            status_code=200 if store_ok else 503,
            content={"status": "ok" if store_ok else "degraded", "storage": "ok" if store_ok else "unavailable"},
        )

    return app


# Create the application instance at import time so that tools such as
# uvicorn can discover it without calling create_app manually.
app = create_app()
