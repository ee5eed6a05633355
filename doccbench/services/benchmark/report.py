"""Report serializer for a benchmark log.

Walks the recorded metrics in order, drops those without a result and
produces a BenchmarkReportModel with the fixed ``date``, ``arguments``,
``platform``, ``metrics`` shape.
"""

import math
from datetime import datetime
from typing import TYPE_CHECKING, Any, List, Optional

from .metric import BenchmarkMetric
from .models import BenchmarkReportModel, BenchmarkResultModel

if TYPE_CHECKING:
    from .log import Benchmark

_MONTHS = ("Jan", "Feb", "Mar", "Apr", "May", "Jun", "Jul", "Aug", "Sep", "Oct", "Nov", "Dec")


def format_medium_date(date: datetime) -> str:
    """Format a timestamp in the en-US medium date and time style.

    Example: ``Oct 18, 2026 at 9:05:03 AM``. Always en-US rather than the
    process locale, so reports from different machines read the same.
    """
    hour = date.hour % 12 or 12
    meridiem = "AM" if date.hour < 12 else "PM"
    return (
        f"{_MONTHS[date.month - 1]} {date.day}, {date.year} at "
        f"{hour}:{date.minute:02d}:{date.second:02d} {meridiem}"
    )


def metric_result(metric: BenchmarkMetric) -> Optional[BenchmarkResultModel]:
    """Convert a recorded metric to its report entry, or None if it has no result."""
    result = metric.result
    if result is None:
        return None

    value = result.to_primitive()
    if not _is_finite(value):
        # NaN and infinity have no JSON form
        return None
    return BenchmarkResultModel(
        identifier=metric.metric_identifier(),
        display_name=metric.metric_display_name(),
        value=value,
    )


def _is_finite(value: Any) -> bool:
    if isinstance(value, float):
        return math.isfinite(value)
    if isinstance(value, list):
        return all(_is_finite(item) for item in value)
    return True


def build_report(log: "Benchmark") -> BenchmarkReportModel:
    """Build the report document for a benchmark log."""
    metrics: List[BenchmarkResultModel] = []
    for metric in log.metrics:
        entry = metric_result(metric)
        if entry is not None:
            metrics.append(entry)

    return BenchmarkReportModel(
        date=format_medium_date(log.date),
        arguments=log.invocation_arguments(),
        platform=log.platform,
        metrics=metrics,
    )
