"""Accessor for the process-wide benchmark log.

The shared log is built lazily, once, from the DOCC_BENCHMARK and
DOCC_BENCHMARK_FILTER settings read at startup. Code that needs an isolated
log (tests, embedded runs) either passes one explicitly to the recording
functions or scopes it with ``use_benchmark_log``.
"""

from contextlib import contextmanager
from contextvars import ContextVar
from typing import Iterator, Optional

from doccbench.core.config import settings
from doccbench.core.logging_config import get_logger
from .log import Benchmark

logger = get_logger(__name__)

# Module-level singleton instance - created on first access
_benchmark_log: Optional[Benchmark] = None

# Scoped override set by use_benchmark_log()
_scoped_log: ContextVar[Optional[Benchmark]] = ContextVar("benchmark_log", default=None)


def get_benchmark_log() -> Benchmark:
    """Get the currently active benchmark log.

    Returns:
        The scoped log if one is set, otherwise the shared log
    """
    scoped = _scoped_log.get()
    if scoped is not None:
        return scoped

    global _benchmark_log
    if _benchmark_log is None:
        _benchmark_log = Benchmark(
            enabled=settings.BENCHMARK_ENABLED,
            metrics_filter=settings.BENCHMARK_FILTER,
        )
        logger.info(
            f"Benchmark log {'enabled' if _benchmark_log.enabled else 'disabled'}"
            + (f" (filter: {_benchmark_log.metrics_filter})" if _benchmark_log.metrics_filter else "")
        )
    return _benchmark_log


def set_benchmark_log(log: Benchmark) -> None:
    """Replace the shared benchmark log.

    Args:
        log: The benchmark log instance to use
    """
    global _benchmark_log
    _benchmark_log = log


@contextmanager
def use_benchmark_log(log: Benchmark) -> Iterator[Benchmark]:
    """Make ``log`` the active benchmark log for the current context."""
    token = _scoped_log.set(log)
    try:
        yield log
    finally:
        _scoped_log.reset(token)
