"""Benchmark - in-memory log of the metrics recorded during one run.

The log holds an ordered, append-only list of completed metrics together
with the enable flag and the optional identifier-prefix filter that decide
which metrics it keeps. It is not thread-safe: callers sharing one log
across threads must synchronize externally.
"""

import sys
import weakref
from datetime import datetime
from typing import TYPE_CHECKING, Any, Dict, List, Optional, Type

from doccbench.core.logging_config import get_logger
from .metric import BenchmarkBlockMetric, BenchmarkMetric

if TYPE_CHECKING:
    from .models import BenchmarkReportModel

logger = get_logger(__name__)

UNSUPPORTED_PLATFORM = "unsupported"


def platform_name(platform: str = sys.platform) -> str:
    """Map a ``sys.platform`` value to the name written in reports."""
    if platform == "darwin":
        return "macOS"
    if platform == "ios":
        return "iOS"
    if platform.startswith("linux"):
        return "Linux"
    if platform == "win32":
        return "Windows"
    return UNSUPPORTED_PLATFORM


class Benchmark:
    """A log that stores benchmark metric results.

    Args:
        enabled: If True, store metrics in the log.
        metrics_filter: If set, only store metrics whose kind identifier
            starts with this value. If None, all metrics are stored.
        arguments: Invocation arguments to report. Defaults to the process
            arguments (without the program path) at report time.
    """

    def __init__(
        self,
        enabled: bool = True,
        metrics_filter: Optional[str] = None,
        arguments: Optional[List[str]] = None,
    ):
        self.enabled = enabled
        self.metrics_filter = metrics_filter
        self.arguments = list(arguments) if arguments is not None else None

        # Benchmark timestamp and platform name
        self.date = datetime.now()
        self.platform = platform_name()

        # Completed metrics, in recording order
        self.metrics: List[BenchmarkMetric] = []

        # Block metrics started through this log and not yet ended; abandoned
        # handles drop out once the caller releases them
        self._open_blocks: "weakref.WeakSet[BenchmarkBlockMetric]" = weakref.WeakSet()

    def should_log_metric_type(self, metric_type: Type[BenchmarkMetric]) -> bool:
        """Gate a metric kind on the enable flag and the prefix filter.

        Always evaluated against the kind's static identifier.
        """
        return self.enabled and (
            self.metrics_filter is None or metric_type.identifier.startswith(self.metrics_filter)
        )

    def record(self, metric: BenchmarkMetric) -> None:
        """Append a completed metric to the log."""
        self.metrics.append(metric)
        logger.debug(f"Recorded metric {metric.metric_identifier()}")

    def open_block(self, metric: BenchmarkBlockMetric) -> None:
        self._open_blocks.add(metric)

    def close_block(self, metric: BenchmarkBlockMetric) -> bool:
        """Forget an open block metric. Returns False if it was not open."""
        if metric not in self._open_blocks:
            return False
        self._open_blocks.discard(metric)
        return True

    def invocation_arguments(self) -> List[str]:
        if self.arguments is not None:
            return list(self.arguments)
        return list(sys.argv[1:])

    def report(self) -> "BenchmarkReportModel":
        """Serialize the log into a BenchmarkReportModel."""
        # Import here to avoid circular imports
        from .report import build_report

        return build_report(self)

    def to_dict(self) -> Dict[str, Any]:
        return self.report().model_dump(by_alias=True)

    def to_json(self, indent: Optional[int] = 2) -> str:
        return self.report().model_dump_json(by_alias=True, indent=indent)

    def reset(self) -> None:
        """Clear all recorded state. Used for testing."""
        self.metrics.clear()
        self._open_blocks.clear()
