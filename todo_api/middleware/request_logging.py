"""Request logging with per-request correlation ids."""

import logging
import time
import uuid

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

logger = logging.getLogger("todo_api.request")

REQUEST_ID_HEADER = "X-Request-ID"
SKIP_PATHS = {"/api/health"}


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """
    Tags each request with an id (the caller's ``X-Request-ID`` or a fresh
    one), echoes it in the response and logs one line per request.
    """

    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint) -> Response:
        request_id = request.headers.get(REQUEST_ID_HEADER) or uuid.uuid4().hex
        request.state.request_id = request_id

        start_time = time.perf_counter()
        try:
            response = await call_next(request)
        except Exception:
            # The 500 body is built by the exception handler further out
            self._log(request, 500, start_time, request_id)
            raise

        response.headers[REQUEST_ID_HEADER] = request_id

        self._log(request, response.status_code, start_time, request_id)
        return response

    @staticmethod
    def _log(request: Request, status: int, start_time: float, request_id: str) -> None:
        path = request.url.path
        if path in SKIP_PATHS:
            return

        duration_ms = (time.perf_counter() - start_time) * 1000
        if status >= 500:
            log_level = logging.ERROR
        elif status >= 400:
            log_level = logging.WARNING
        else:
            log_level = logging.INFO

        logger.log(
            log_level,
            "%s %s %d %.1fms [%s]",
            request.method,
            path,
            status,
            duration_ms,
            request_id,
        )
