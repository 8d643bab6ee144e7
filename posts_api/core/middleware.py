"""FastAPI middleware."""

import time

from fastapi import Request, Response
from prometheus_client import Counter, Histogram
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint

from .database import get_session_maker

UNMATCHED_PATH = "unmatched"

REQUEST_COUNT = Counter(
    "http_requests_total",
    "Total count of HTTP requests",
    ["method", "path", "status"],
)
REQUEST_LATENCY = Histogram(
    "http_request_duration_seconds",
    "HTTP request latency in seconds",
    ["method", "path"],
)


class DatabaseMiddleware(BaseHTTPMiddleware):
    """Open one session per request and expose it as ``request.state.db``.

    The API only reads, so the session is closed without committing.
    """

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        async with get_session_maker()() as session:
            request.state.db = session
            return await call_next(request)


class PrometheusMiddleware(BaseHTTPMiddleware):
    """Record request counts and latencies.

    Requests are labelled with the matched route template so that unknown
    URLs share a single "unmatched" series. A request whose handler raises
    is recorded with status 500.
    """

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        method = request.method
        status_code = 500

        start_time = time.perf_counter()
        try:
            response = await call_next(request)
            status_code = response.status_code
            return response
        finally:
            elapsed = time.perf_counter() - start_time
            path = _route_path(request)
            REQUEST_COUNT.labels(method=method, path=path, status=status_code).inc()
            REQUEST_LATENCY.labels(method=method, path=path).observe(elapsed)


def _route_path(request: Request) -> str:
    # The router stores the matched route in the shared scope
    route = request.scope.get("route")
    return getattr(route, "path", None) or UNMATCHED_PATH
