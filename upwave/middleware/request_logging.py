from __future__ import annotations

import time
import uuid
import logging

from fastapi import Request
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.responses import Response

from upwave.core.request_context import set_context, clear_context


logger = logging.getLogger("upwave.http")

REQUEST_ID_HEADER = "x-request-id"


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint) -> Response:
        rid = request.headers.get(REQUEST_ID_HEADER) or uuid.uuid4().hex
        set_context(request_id=rid)

        t0 = time.perf_counter()
        try:
            # Body size matters for uploads; the form itself is parsed later by the pipeline
            logger.info(
                "http.request",
                extra={
                    "method": request.method,
                    "path": request.url.path,
                    "content_type": request.headers.get("content-type"),
                    "content_length": request.headers.get("content-length"),
                },
            )
            response = await call_next(request)

            logger.info(
                "http.response",
                extra={
                    "method": request.method,
                    "path": request.url.path,
                    "status_code": response.status_code,
                    "duration_ms": int((time.perf_counter() - t0) * 1000),
                },
            )

            response.headers[REQUEST_ID_HEADER] = rid
            return response
        finally:
            clear_context()
