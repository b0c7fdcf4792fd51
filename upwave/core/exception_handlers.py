"""
exception_handlers.py
- Purpose: Convert AppError (and anything unexpected) into consistent API responses.

Validation failures never reach these handlers; they are regular 422 responses
built by the upload route.
"""

from __future__ import annotations

import logging

from fastapi import Request
from fastapi.responses import JSONResponse

from upwave.core import AppError, ErrorCode, ErrorReason

logger = logging.getLogger("upwave.exceptions")


def _request_fields(request: Request) -> dict:
    return {"path": request.url.path, "method": request.method}


async def app_error_handler(request: Request, exc: AppError) -> JSONResponse:
    cause = exc.__cause__
    logger.warning(
        "app_error",
        extra={
            **_request_fields(request),
            "status_code": exc.status_code,
            "code": exc.code.value,
            "reason": exc.reason,
            "cause": repr(cause) if cause is not None else None,
        },
    )
    return JSONResponse(status_code=exc.status_code, content=exc.to_dict())


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("unhandled_exception", extra=_request_fields(request))
    return JSONResponse(
        status_code=500,
        content={"error": {"code": ErrorCode.INTERNAL_ERROR.value, "reason": ErrorReason.INTERNAL_ERROR.value}},
    )
