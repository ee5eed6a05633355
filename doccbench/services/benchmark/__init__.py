"""Benchmark metrics collection and reporting.

This package records point-in-time and block-scoped performance metrics
during a single process run, filters them through an enable flag and an
identifier prefix, and serializes the retained results into a report.
"""

from .values import MetricValue
from .metric import BenchmarkMetric, BenchmarkBlockMetric
from .metrics import PeakMemory, Duration, ProcessTime, OutputSize, ContentHash, Counter
from .log import Benchmark
from .instance import get_benchmark_log, set_benchmark_log, use_benchmark_log
from .recording import add_metric, begin_metric, end_metric, wrap_metric, measure

__all__ = [
    "MetricValue",
    "BenchmarkMetric",
    "BenchmarkBlockMetric",
    "PeakMemory",
    "Duration",
    "ProcessTime",
    "OutputSize",
    "ContentHash",
    "Counter",
    "Benchmark",
    "get_benchmark_log",
    "set_benchmark_log",
    "use_benchmark_log",
    "add_metric",
    "begin_metric",
    "end_metric",
    "wrap_metric",
    "measure",
]
