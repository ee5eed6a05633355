"""Free functions for recording metrics into a benchmark log.

Every function accepts either a metric instance or a metric class, and an
optional ``benchmark_log`` that defaults to the active shared log.

Usage example:
```python
add_metric(PeakMemory)

handle = begin_metric(Duration("convert"))
convert()
end_metric(handle)

bundle = wrap_metric(Duration("load"), load_bundle)

with measure(ProcessTime("render")):
    render()
```
"""

from contextlib import contextmanager
from typing import Callable, Iterator, Optional, Type, TypeVar, Union

from doccbench.core.logging_config import get_logger
from .instance import get_benchmark_log
from .log import Benchmark
from .metric import BenchmarkBlockMetric, BenchmarkMetric

logger = get_logger(__name__)

M = TypeVar("M", bound=BenchmarkMetric)
B = TypeVar("B", bound=BenchmarkBlockMetric)
R = TypeVar("R")


def _metric_type(metric: Union[M, Type[M]], base: Type[BenchmarkMetric]) -> Type[M]:
    metric_type = metric if isinstance(metric, type) else type(metric)
    if not issubclass(metric_type, base):
        raise TypeError(f"{metric_type.__name__} is not a {base.__name__}")
    return metric_type


def _instantiate(metric: Union[M, Type[M]]) -> M:
    return metric() if isinstance(metric, type) else metric


def add_metric(metric: Union[M, Type[M]], benchmark_log: Optional[Benchmark] = None) -> None:
    """Log a one-off metric value.

    A metric class is constructed before the gate is evaluated, so its
    probe runs even when the log discards the result.

    Args:
        metric: The metric, or metric class, to add to the log
        benchmark_log: The log to record into; defaults to the active log
    """
    log = benchmark_log or get_benchmark_log()
    metric_type = _metric_type(metric, BenchmarkMetric)
    event = _instantiate(metric)

    if not log.should_log_metric_type(metric_type):
        logger.debug(f"Skipped metric {metric_type.identifier}")
        return
    log.record(event)


def begin_metric(metric: Union[B, Type[B]], benchmark_log: Optional[Benchmark] = None) -> Optional[B]:
    """Start a block metric.

    Args:
        metric: The block metric, or block metric class, to start
        benchmark_log: The log to record into; defaults to the active log

    Returns:
        The started metric to pass to end_metric(), or None if the log
        does not keep this kind of metric
    """
    log = benchmark_log or get_benchmark_log()
    metric_type = _metric_type(metric, BenchmarkBlockMetric)
    if not log.should_log_metric_type(metric_type):
        return None

    event = _instantiate(metric)
    event.begin()
    log.open_block(event)
    return event


def end_metric(event: Optional[BenchmarkBlockMetric], benchmark_log: Optional[Benchmark] = None) -> None:
    """End a block metric started with begin_metric() and add it to the log.

    Does nothing for a None handle or for a handle that is not open on the
    log, so ending the same handle twice records it once.
    """
    if event is None:
        return

    log = benchmark_log or get_benchmark_log()
    if not log.close_block(event):
        logger.debug(f"Ignored end of metric {event.metric_identifier()} that is not open")
        return
    if not log.should_log_metric_type(type(event)):
        return

    event.end()
    log.record(event)


def wrap_metric(
    metric: Union[B, Type[B]],
    body: Callable[[], R],
    benchmark_log: Optional[Benchmark] = None,
) -> R:
    """Measure ``body`` with a block metric and return its result.

    ``body`` runs exactly once whether or not the metric is kept. If it
    raises, the exception propagates and the metric is not recorded.
    """
    log = benchmark_log or get_benchmark_log()
    metric_type = _metric_type(metric, BenchmarkBlockMetric)
    if not log.should_log_metric_type(metric_type):
        return body()

    event = _instantiate(metric)
    event.begin()
    result = body()
    event.end()
    log.record(event)
    return result


@contextmanager
def measure(
    metric: Union[B, Type[B]],
    benchmark_log: Optional[Benchmark] = None,
) -> Iterator[Optional[B]]:
    """Context manager form of wrap_metric().

    Yields the running metric, or None if the log does not keep this kind
    of metric. Nothing is recorded when the block raises.
    """
    log = benchmark_log or get_benchmark_log()
    metric_type = _metric_type(metric, BenchmarkBlockMetric)
    if not log.should_log_metric_type(metric_type):
        yield None
        return

    event = _instantiate(metric)
    event.begin()
    yield event
    event.end()
    log.record(event)
