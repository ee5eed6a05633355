"""Peak memory footprint metric."""

from typing import Optional

from .. import memory_probe as probes
from ..metric import BenchmarkMetric
from ..values import MetricValue


class PeakMemory(BenchmarkMetric):
    """A peak memory footprint metric for the current process.

    The platform probe runs once, when the metric is created.
    """
    identifier = "peak-memory"
    display_name = "Peak memory footprint (bytes)"

    def __init__(self, probe: Optional[probes.MemoryProbe] = None):
        probe = probe or probes.memory_probe
        self.memory_peak: Optional[float] = probe.peak_memory()

    @property
    def result(self) -> Optional[MetricValue]:
        if self.memory_peak is None:
            return None
        return MetricValue.number(self.memory_peak)
