from __future__ import annotations

"""backend/capture_bridge/services/platforms/fastapi_context.py

Host platform backed by a FastAPI application.

- on_error: an exception handler for ``Exception`` (anything a route
  lets escape); the client still gets a plain 500 response.
- on_page_not_found: an ``HTTPException`` handler that reports 404s with
  ``{"path", "method", "query"}`` and then answers the way FastAPI would.

Exception handlers are read when Starlette builds its middleware stack,
so hooks must be wired before the app serves its first request or
lifespan event.
"""

import logging
from typing import Any, Callable, Dict

from fastapi import FastAPI, Request
from fastapi.exception_handlers import http_exception_handler
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

logger = logging.getLogger(__name__)

Handler = Callable[[Any], Any]


def _page_info(request: Request) -> Dict[str, Any]:
    return {
        "path": request.url.path,
        "method": request.method,
        "query": request.url.query,
    }


class FastAPIContext:
    name = "fastapi"

    def __init__(self, app: FastAPI):
        self.app = app

    def on_error(self, handler: Handler) -> None:
        async def handle_uncaught(request: Request, exc: Exception) -> JSONResponse:
            try:
                handler(exc)
            except Exception as hook_exc:  # noqa: BLE001
                logger.warning("Global error handler failed: %s", hook_exc)
            return JSONResponse({"detail": "Internal Server Error"}, status_code=500)

        self.app.add_exception_handler(Exception, handle_uncaught)

    def on_page_not_found(self, handler: Handler) -> None:
        async def handle_http_exception(request: Request, exc: StarletteHTTPException):
            if exc.status_code == 404:
                try:
                    handler(_page_info(request))
                except Exception as hook_exc:  # noqa: BLE001
                    logger.warning("Page-not-found handler failed: %s", hook_exc)
            return await http_exception_handler(request, exc)

        self.app.add_exception_handler(StarletteHTTPException, handle_http_exception)
