"""
Request logging middleware.
"""
import time
import uuid
from typing import Callable
from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware
from triespell.utils.logger import get_logger

logger = get_logger("middleware")

REQUEST_ID_HEADER = "X-Request-ID"


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """
    Logs one line per request with method, path, status and duration.

    A caller-supplied X-Request-ID is reused, otherwise one is generated;
    either way it is echoed back on the response. Health probes are logged
    at DEBUG to keep the log readable.
    """

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        request_id = request.headers.get(REQUEST_ID_HEADER) or str(uuid.uuid4())
        request.state.request_id = request_id
        quiet = request.url.path == "/health"

        start = time.perf_counter()
        try:
            response = await call_next(request)
        except Exception as e:
            logger.error(
                "Request failed",
                request_id=request_id,
                method=request.method,
                path=request.url.path,
                duration_ms=f"{(time.perf_counter() - start) * 1000:.2f}",
                error=str(e),
                exc_info=True
            )
            raise

        fields = dict(
            request_id=request_id,
            method=request.method,
            path=request.url.path,
            status_code=response.status_code,
            duration_ms=f"{(time.perf_counter() - start) * 1000:.2f}",
        )
        if response.status_code >= 500:
            logger.warning("Request completed with server error", **fields)
        elif quiet:
            logger.debug("Request completed", **fields)
        else:
            logger.info("Request completed", **fields)

        response.headers[REQUEST_ID_HEADER] = request_id
        return response
