"""Per-request logging middleware.

Every request gets a request id (the caller's ``x-request-id`` or a fresh
one) bound into structlog's context variables, so the adapter's own log
lines for that request carry it too.  The id is echoed back in the
response headers.
"""

from __future__ import annotations

import time
import uuid

import structlog
from fastapi import Request
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.responses import Response

from skill_gateway.adapter.verification import CERT_CHAIN_URL_HEADER, SIGNATURE_HEADER
from skill_gateway.utils.logging import get_logger

logger = get_logger(__name__)

REQUEST_ID_HEADER = "x-request-id"


def _elapsed_ms(start: float) -> float:
    return round((time.perf_counter() - start) * 1000, 2)


class LoggingMiddleware(BaseHTTPMiddleware):
    """Bind a request id, log the request and its outcome."""

    async def dispatch(
        self,
        request: Request,
        call_next: RequestResponseEndpoint,
    ) -> Response:
        request_id = request.headers.get(REQUEST_ID_HEADER) or uuid.uuid4().hex
        structlog.contextvars.bind_contextvars(
            request_id=request_id,
            method=request.method,
            path=request.url.path,
        )
        start = time.perf_counter()

        try:
            logger.info(
                "request_received",
                signed=SIGNATURE_HEADER in request.headers,
                has_cert_chain_url=CERT_CHAIN_URL_HEADER in request.headers,
                client=request.client.host if request.client else None,
            )
            try:
                response = await call_next(request)
            except Exception:
                logger.error("request_failed", elapsed_ms=_elapsed_ms(start))
                raise

            status_code = response.status_code
            log_fn = logger.info if status_code < 400 else logger.warning
            log_fn(
                "request_completed",
                status_code=status_code,
                elapsed_ms=_elapsed_ms(start),
            )
            response.headers[REQUEST_ID_HEADER] = request_id
            return response
        finally:
            structlog.contextvars.unbind_contextvars("request_id", "method", "path")
