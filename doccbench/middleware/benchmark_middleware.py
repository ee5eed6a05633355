"""FastAPI middleware for measuring endpoint latency.

Each /api/** request is wrapped in a Duration block metric identified by
the request method and path. Requests to the benchmark endpoints
themselves are not measured.
"""

from fastapi import Request
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.responses import Response

from doccbench.core.logging_config import get_logger
from doccbench.services.benchmark.metrics import Duration
from doccbench.services.benchmark.recording import begin_metric, end_metric

logger = get_logger(__name__)

BENCHMARK_ROUTE_PREFIX = "/api/v1/benchmark"


class BenchmarkMiddleware(BaseHTTPMiddleware):
    """Middleware that records the duration of /api/** requests."""

    async def dispatch(self, request: Request, call_next) -> Response:
        """Process request and measure latency for API routes.

        Args:
            request: Incoming HTTP request
            call_next: Next middleware/handler in the chain

        Returns:
            HTTP response from downstream handlers
        """
        path = request.url.path
        if not path.startswith("/api/") or path.startswith(BENCHMARK_ROUTE_PREFIX):
            return await call_next(request)

        # Benchmark bookkeeping is wrapped to prevent middleware errors
        metric = None
        try:
            metric = begin_metric(Duration(f"{request.method} {path}"))
        except Exception as e:
            logger.debug(f"Benchmark middleware error starting {request.method} {path}: {e}")

        response = await call_next(request)

        try:
            end_metric(metric)
            if metric is not None and metric.elapsed_ms is not None:
                logger.debug(f"{request.method} {path} took {metric.elapsed_ms:.2f}ms")
        except Exception as e:
            logger.debug(f"Benchmark middleware error for {request.method} {path}: {e}")

        return response
