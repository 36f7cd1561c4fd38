# src/backend/utils/error_handler.py
from __future__ import annotations

import logging
from typing import Any, Dict

from fastapi import Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

logger = logging.getLogger("fastapi")


def _safe_args(exc: Exception) -> str:
    a = getattr(exc, "args", None)
    return str(a) if a else "No additional details"


def _json_error(
    status_code: int,
    message: str,
    exc: Exception,
    extra: Dict[str, Any] | None = None,
) -> JSONResponse:
    """
    Unified JSON error response. Clients show `message` to the user as-is.
    """
    user_message = message
    if status_code == 404 and not message:
        user_message = "The requested resource was not found."
    elif status_code >= 500:
        user_message = "Internal Server Error. Please try again later."

    payload: Dict[str, Any] = {
        "message": user_message,
        "error_type": exc.__class__.__name__,
        "status_code": status_code,
    }

    if extra:
        payload.update(extra)

    return JSONResponse(status_code=status_code, content=payload)


def _log_http(request: Request, status_code: int, detail: str, exc: Exception) -> None:
    """
    Log levels:
    - 404 -> INFO (normal noise)
    - other 4xx -> WARNING (client error worth checking)
    - 5xx -> EXCEPTION (stack trace)
    """
    url = str(request.url)
    method = request.method

    if status_code == 404:
        logger.info("404 Not Found: %s %s | detail=%s", method, url, detail)
        return

    if 400 <= status_code < 500:
        logger.warning(
            "%s: %s %s | detail=%s | args=%s",
            status_code,
            method,
            url,
            detail,
            _safe_args(exc),
        )
        return

    logger.exception("%s: %s %s | detail=%s", status_code, method, url, detail)


async def custom_exception_handler(request: Request, exc: Exception):
    """
    Single handler registered for every error type the API can raise.
    """

    # -----------------------------
    # 1) HTTPException (FastAPI's is a subclass)
    # -----------------------------
    if isinstance(exc, StarletteHTTPException):
        status = int(exc.status_code)
        detail = str(exc.detail)
        _log_http(request, status, detail, exc)
        return _json_error(status_code=status, message=detail, exc=exc)

    # -----------------------------
    # 2) Validation error
    # -----------------------------
    if isinstance(exc, RequestValidationError):
        logger.warning(
            "422 Validation error: %s %s | %s",
            request.method,
            str(request.url),
            exc.errors(),
        )
        return _json_error(
            status_code=422,
            message="Validation error occurred",
            exc=exc,
            extra={"validation_errors": jsonable_encoder(exc.errors())},
        )

    # -----------------------------
    # 3) Any other unexpected exception
    # -----------------------------
    logger.exception("500 Unhandled exception: %s %s | %s", request.method, str(request.url), str(exc))
    return _json_error(
        status_code=500,
        message="Internal Server Error. Please try again later.",
        exc=exc,
    )
