"""Benchmark report REST API endpoints.

Exposes the in-memory report of the active benchmark log and a health
check describing its configuration.
"""

from fastapi import APIRouter, Depends, HTTPException

from doccbench.core.config import settings
from doccbench.services.benchmark.instance import get_benchmark_log
from doccbench.services.benchmark.log import Benchmark
from doccbench.services.benchmark.models import BenchmarkHealthModel, BenchmarkReportModel

router = APIRouter(prefix="/benchmark", tags=["benchmark"])


def get_log() -> Benchmark:
    """FastAPI dependency for benchmark log injection."""
    return get_benchmark_log()


@router.get("/", response_model=BenchmarkReportModel, response_model_by_alias=True)
async def get_benchmark_report(log: Benchmark = Depends(get_log)):
    """Get the benchmark report for the current run.

    Raises:
        HTTPException: 503 if benchmarking is disabled
    """
    if not log.enabled:
        raise HTTPException(
            status_code=503,
            detail="Benchmarking is disabled. Set DOCC_BENCHMARK=YES to enable."
        )

    return log.report()


@router.get("/health", response_model=BenchmarkHealthModel)
async def get_benchmark_health(log: Benchmark = Depends(get_log)):
    """Get benchmark log status.

    Always returns 200, even when benchmarking is disabled.
    """
    return BenchmarkHealthModel(
        benchmark_enabled=log.enabled,
        metrics_filter=log.metrics_filter,
        recorded_count=len(log.metrics),
        reported_count=len(log.report().metrics),
        platform=log.platform,
        version=settings.VERSION,
    )
