"""
HTTP middleware for the Quote API.

* ``RequestLoggingMiddleware`` logs method, path, status and latency of
  every request.  Bodies and query strings are not logged.
* ``SecurityHeadersMiddleware`` adds conservative security headers to
  every response.
* CORS is handled by Starlette's ``CORSMiddleware`` with the origins
  from ``Settings.cors_origins``.
"""

import logging
import time
from typing import Callable

from fastapi import FastAPI, Request, Response
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.middleware.cors import CORSMiddleware

from .config import Settings

logger = logging.getLogger("quote_api.access")


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        start_time = time.perf_counter()
        try:
            response = await call_next(request)
        except Exception:
            elapsed_ms = (time.perf_counter() - start_time) * 1000
            logger.error("%s %s - ERROR - %.1fms", request.method, request.url.path, elapsed_ms)
            raise
        elapsed_ms = (time.perf_counter() - start_time) * 1000
        logger.info(
            "%s %s - %d - %.1fms",
            request.method,
            request.url.path,
            response.status_code,
            elapsed_ms,
        )
        response.headers["X-Process-Time"] = f"{elapsed_ms:.1f}ms"
        return response


class SecurityHeadersMiddleware(BaseHTTPMiddleware):
    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        response = await call_next(request)
        response.headers["X-Content-Type-Options"] = "nosniff"
        response.headers["X-Frame-Options"] = "DENY"
        response.headers["Referrer-Policy"] = "no-referrer"
        response.headers["X-DNS-Prefetch-Control"] = "off"
        return response


def setup_middleware(app: FastAPI, config: Settings) -> None:
    """Install CORS, security header and request logging middleware."""
    # Credentials cannot be combined with a wildcard origin.
    allow_credentials = "*" not in config.cors_origins
    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.cors_origins,
        allow_credentials=allow_credentials,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_middleware(SecurityHeadersMiddleware)
    # Added last so it wraps everything else and sees the final status.
    app.add_middleware(RequestLoggingMiddleware)
