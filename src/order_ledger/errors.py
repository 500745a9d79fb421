"""Store failure type and the HTTP translation boundary."""

from __future__ import annotations

import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse, PlainTextResponse, Response

logger = logging.getLogger(__name__)

GENERIC_ERROR = "Internal server error"


class StoreOperationFailed(RuntimeError):
    """Raised when the relational store rejects or fails an operation."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


def _route_tags(request: Request) -> list[str]:
    route = request.scope.get("route")
    return list(getattr(route, "tags", None) or [])


def render_store_failure(request: Request, exc: StoreOperationFailed) -> Response:
    tags = _route_tags(request)
    code = status.HTTP_500_INTERNAL_SERVER_ERROR
    if "menu" in tags or "history" in tags:
        return PlainTextResponse(exc.message, status_code=code)
    if "orders" in tags:
        return JSONResponse({"success": False, "message": exc.message}, status_code=code)
    return JSONResponse({"error": GENERIC_ERROR}, status_code=code)


async def store_failure_handler(request: Request, exc: StoreOperationFailed) -> Response:
    logger.error(
        "%s (%s %s)",
        exc.message,
        request.method,
        request.url.path,
        exc_info=(type(exc), exc, exc.__traceback__),
    )
    return render_store_failure(request, exc)


def register_error_handlers(application: FastAPI) -> None:
    application.add_exception_handler(StoreOperationFailed, store_failure_handler)
