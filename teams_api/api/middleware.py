"""Request metrics middleware."""

import logging

from prometheus_client import Counter
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response
from starlette.types import ASGIApp

logger = logging.getLogger(__name__)

# Path label for requests that matched no route
UNMATCHED_PATH = "unmatched"


class MetricsMiddleware(BaseHTTPMiddleware):
    """Count every request by method, final status code and path.

    Purely observational: the response is returned unchanged and a failing
    counter never fails the request.
    """

    def __init__(self, app: ASGIApp, counter: Counter) -> None:
        super().__init__(app)
        self.counter = counter

    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint) -> Response:
        status_code = 500
        try:
            response = await call_next(request)
            status_code = response.status_code
            return response
        finally:
            self._record(request.method, status_code, route_template(request))

    def _record(self, method: str, status_code: int, path: str) -> None:
        try:
            self.counter.labels(method=method, status_code=str(status_code), path=path).inc()
        except Exception as e:
            logger.warning(f"Failed to record request metric: {e}", extra={"path": path})


def route_template(request: Request) -> str:
    """Template of the route the router matched, read once the app has run."""
    route = request.scope.get("route")
    return getattr(route, "path", None) or UNMATCHED_PATH
