"""Block metrics measuring elapsed wall-clock and CPU time."""

import time
from typing import Callable, Optional

from ..metric import BenchmarkBlockMetric
from ..values import MetricValue


class _ElapsedTime(BenchmarkBlockMetric):
    """Measures the delta of a clock between begin() and end(), in milliseconds."""

    clock: Callable[[], float]

    def __init__(self, id: Optional[str] = None):
        self.id = id
        self.started_at: Optional[float] = None
        self.elapsed_ms: Optional[float] = None

    def begin(self) -> None:
        self.started_at = type(self).clock()
        self.elapsed_ms = None

    def end(self) -> None:
        if self.started_at is None:
            return
        self.elapsed_ms = max(0.0, (type(self).clock() - self.started_at) * 1000.0)

    @property
    def result(self) -> Optional[MetricValue]:
        if self.elapsed_ms is None:
            return None
        return MetricValue.number(self.elapsed_ms)

    def metric_identifier(self) -> str:
        if self.id is None:
            return super().metric_identifier()
        return f"{type(self).identifier}-{self.id}"


class Duration(_ElapsedTime):
    """Wall-clock duration of a block of work."""
    identifier = "duration"
    display_name = "Duration (msec)"
    clock = staticmethod(time.perf_counter)

    def metric_display_name(self) -> str:
        if self.id is None:
            return super().metric_display_name()
        return f"Duration for '{self.id}' (msec)"


class ProcessTime(_ElapsedTime):
    """CPU time spent by the process during a block of work."""
    identifier = "process-time"
    display_name = "Process CPU time (msec)"
    clock = staticmethod(time.process_time)

    def metric_display_name(self) -> str:
        if self.id is None:
            return super().metric_display_name()
        return f"Process CPU time for '{self.id}' (msec)"
