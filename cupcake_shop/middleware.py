"""
FastAPI middleware for Cupcake Shop.
"""

import logging
import uuid

from fastapi import Request
from starlette.middleware.base import BaseHTTPMiddleware

logger = logging.getLogger(__name__)


class RequestIDMiddleware(BaseHTTPMiddleware):
    """
    Middleware that adds a unique request ID to each request.
    The ID is available in request.state.request_id, returned in the
    X-Request-ID header and included in the request log line.
    """

    async def dispatch(self, request: Request, call_next):
        # Use the caller's ID when provided
        request_id = request.headers.get("X-Request-ID") or str(uuid.uuid4())
        request.state.request_id = request_id

        response = await call_next(request)
        response.headers["X-Request-ID"] = request_id

        logger.info(
            "%s %s -> %d [request_id=%s]",
            request.method,
            request.url.path,
            response.status_code,
            request_id,
        )

        return response
