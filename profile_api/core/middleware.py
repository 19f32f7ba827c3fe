# profile_api/core/middleware.py

import time
import uuid

import structlog
from fastapi import Request
from starlette.middleware.base import BaseHTTPMiddleware

from profile_api.core.logging import get_logger

logger = get_logger(__name__)

CORRELATION_HEADER = "X-Correlation-ID"


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Access log with a per-request correlation id."""

    async def dispatch(self, request: Request, call_next):
        correlation_id = request.headers.get(CORRELATION_HEADER) or str(uuid.uuid4())
        method = request.method
        path = request.url.path

        structlog.contextvars.bind_contextvars(correlation_id=correlation_id)
        start_time = time.perf_counter()
        logger.info(
            "request_started",
            method=method,
            path=path,
            client_ip=request.client.host if request.client else "unknown",
        )

        try:
            response = await call_next(request)
        except Exception as e:
            logger.error(
                "request_failed",
                method=method,
                path=path,
                error=str(e),
                duration=f"{time.perf_counter() - start_time:.3f}s",
            )
            raise
        finally:
            structlog.contextvars.unbind_contextvars("correlation_id")

        logger.info(
            "request_completed",
            method=method,
            path=path,
            status_code=response.status_code,
            duration=f"{time.perf_counter() - start_time:.3f}s",
            correlation_id=correlation_id,
        )
        response.headers[CORRELATION_HEADER] = correlation_id
        return response
