"""
Request logging middleware for FastAPI using Loguru.

Every request gets an ID, exposed in the ``X-Request-ID`` response header
and bound to the log record written at the custom ``REQUEST`` level.
"""

import time
import uuid

from fastapi import Request, Response
from loguru import logger
from starlette.middleware.base import BaseHTTPMiddleware


class LoggingMiddleware(BaseHTTPMiddleware):
    """Logs method, path, status and latency of each request."""

    async def dispatch(self, request: Request, call_next) -> Response:
        request_id = request.headers.get("X-Request-ID") or str(uuid.uuid4())
        start_time = time.time()
        response = await call_next(request)

        response.headers["X-Request-ID"] = request_id
        process_time_ms = round((time.time() - start_time) * 1000, 2)

        # Get client IP with forwarded headers consideration
        client_ip = request.client.host if request.client else "unknown"
        if "X-Forwarded-For" in request.headers:
            forwarded_ips = request.headers["X-Forwarded-For"].split(",")
            if forwarded_ips:
                client_ip = forwarded_ips[0].strip()

        logger.bind(
            request_id=request_id,
            client_ip=client_ip,
        ).log(
            "REQUEST",
            f"{request.method} {request.url.path} {response.status_code} {process_time_ms}ms",
        )
        return response
