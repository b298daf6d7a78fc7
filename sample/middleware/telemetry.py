"""Request instrumentation middleware."""

from __future__ import annotations

import time

from fastapi import Request
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.responses import Response

from sample.telemetry import observe_request


def _route_template(request: Request) -> str:
    """Matched route path (e.g. ``/hello``), or the raw path when nothing matched."""

    route = request.scope.get("route")
    return getattr(route, "path", None) or request.url.path


class TelemetryMiddleware(BaseHTTPMiddleware):
    """Feed request counts and latencies to Prometheus.

    Scrapes of the metrics endpoint itself are not recorded. A request that
    raises is counted with status 500 before the error continues outward.
    """

    excluded_paths = frozenset({"/metrics"})

    async def dispatch(
        self,
        request: Request,
        call_next: RequestResponseEndpoint,
    ) -> Response:
        if request.url.path in self.excluded_paths:
            return await call_next(request)

        start_time = time.perf_counter()
        status_code = 500
        try:
            response = await call_next(request)
            status_code = response.status_code
            return response
        finally:
            observe_request(
                request.method,
                _route_template(request),
                status_code,
                time.perf_counter() - start_time,
            )
