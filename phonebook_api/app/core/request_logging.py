"""
Access logging middleware.

Writes one line per request in the format

    METHOD URL STATUS CONTENT-LENGTH - RESPONSE-TIME ms POST-DATA

``POST-DATA`` is the raw request body, exactly as received, for POST
requests (``{}`` when the body is empty) and ``-`` for all other
methods.  The body is not parsed and re-serialized, so its whitespace
is kept.
"""

import logging
import time
from typing import Awaitable, Callable

from fastapi import FastAPI, Request, Response

from .logging_config import ACCESS_LOGGER

logger = logging.getLogger(ACCESS_LOGGER)


def _post_data(method: str, body: bytes) -> str:
    if method != "POST":
        return "-"
    if not body:
        return "{}"
    return body.decode("utf-8", errors="replace")


def register_request_logging(app: FastAPI) -> None:
    """Attach the access logging middleware to ``app``."""

    @app.middleware("http")
    async def log_requests(
        request: Request, call_next: Callable[[Request], Awaitable[Response]]
    ) -> Response:
        started = time.perf_counter()
        # Starlette caches the body, so the route can still read it.
        body = await request.body() if request.method == "POST" else b""
        response = await call_next(request)
        elapsed_ms = (time.perf_counter() - started) * 1000
        url = request.url.path
        if request.url.query:
            url = f"{url}?{request.url.query}"
        logger.info(
            "%s %s %s %s - %.3f ms %s",
            request.method,
            url,
            response.status_code,
            response.headers.get("content-length", "-"),
            elapsed_ms,
            _post_data(request.method, body),
        )
        return response
