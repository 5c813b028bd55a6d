"""Request timing middleware."""

import logging
import time
from typing import Callable

from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware

logger = logging.getLogger(__name__)


class PerformanceMiddleware(BaseHTTPMiddleware):
    """Logs each request with its status and duration.

    Adds an X-Process-Time header to every response and warns about
    requests slower than SLOW_REQUEST_THRESHOLD. Both endpoints wait on
    Firebase round trips, so the threshold is generous.
    """

    SLOW_REQUEST_THRESHOLD = 2.0  # seconds

    EXCLUDED_PATHS = {"/health"}

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        start_time = time.perf_counter()

        response = await call_next(request)

        process_time = time.perf_counter() - start_time
        response.headers["X-Process-Time"] = f"{process_time:.4f}"

        path = request.url.path
        if path in self.EXCLUDED_PATHS:
            return response

        line = f"{request.method} {path} -> {response.status_code} in {process_time:.3f}s"
        if process_time >= self.SLOW_REQUEST_THRESHOLD:
            logger.warning(f"[SLOW REQUEST] {line}")
        else:
            logger.debug(f"[REQUEST] {line}")

        return response
