from fastapi import FastAPI

from doccbench.api.v1 import router as api_router
from doccbench.core.config import settings
from doccbench.core.logging_config import get_logger
from doccbench.middleware.benchmark_middleware import BenchmarkMiddleware

logger = get_logger("app")

app = FastAPI(
    title=settings.PROJECT_NAME,
    description="Benchmark metrics for documentation builds",
    version=settings.VERSION,
)

app.add_middleware(BenchmarkMiddleware)

app.include_router(api_router)
