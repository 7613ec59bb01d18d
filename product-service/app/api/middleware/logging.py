"""
Access log with per-request correlation ID.

The ID is taken from the caller's ``X-Correlation-ID`` header (so a
gateway can trace one request across services) or generated, stored
on ``request.state`` and echoed back in the response header.
"""

import logging
import time
import uuid
from typing import Any, Dict

from fastapi import Request
from starlette.middleware.base import BaseHTTPMiddleware

logger = logging.getLogger("product-service.api.requests")

CORRELATION_HEADER = "X-Correlation-ID"


def client_address(request: Request) -> str:
    """First hop from proxy headers, else the socket peer."""
    forwarded = request.headers.get("X-Forwarded-For", "")
    first_hop = forwarded.split(",")[0].strip()
    if first_hop:
        return first_hop
    return request.headers.get("X-Real-IP") or (request.client.host if request.client else "unknown")


class StructuredLoggingMiddleware(BaseHTTPMiddleware):
    """Logs one line when a request starts and one when it ends."""

    async def dispatch(self, request: Request, call_next):
        correlation_id = request.headers.get(CORRELATION_HEADER) or uuid.uuid4().hex
        request.state.correlation_id = correlation_id

        context: Dict[str, Any] = {
            "correlation_id": correlation_id,
            "method": request.method,
            "path": request.url.path,
            "client_ip": client_address(request),
        }
        route = f"{request.method} {request.url.path}"
        started = time.perf_counter()
        logger.info(f"-> {route}", extra=context)

        try:
            response = await call_next(request)
        except Exception as e:
            logger.error(
                f"x- {route}: {e}",
                extra={**context, "duration_ms": self._elapsed_ms(started)},
                exc_info=True,
            )
            raise

        logger.info(
            f"<- {route} {response.status_code}",
            extra={
                **context,
                "status_code": response.status_code,
                "duration_ms": self._elapsed_ms(started),
            },
        )
        response.headers[CORRELATION_HEADER] = correlation_id
        return response

    @staticmethod
    def _elapsed_ms(started: float) -> float:
        return round((time.perf_counter() - started) * 1000, 2)
