"""Metric protocol family.

Two lifecycle variants share one contract: instantaneous metrics compute
their value when constructed, block metrics bound an interval between
``begin()`` and ``end()``. Every metric kind declares a static
``identifier`` (used for filtering) and ``display_name``; an instance may
report different values through ``metric_identifier()`` and
``metric_display_name()``, which is what ends up in the report.
"""

from abc import ABC, abstractmethod
from typing import ClassVar, Optional

from .values import MetricValue


class BenchmarkMetric(ABC):
    """Base class for every metric kind."""

    identifier: ClassVar[str]
    display_name: ClassVar[str]

    @property
    @abstractmethod
    def result(self) -> Optional[MetricValue]:
        """The measured value, or None if the measurement produced nothing."""
        ...

    def metric_identifier(self) -> str:
        """Identifier reported for this instance. Defaults to the kind's."""
        return type(self).identifier

    def metric_display_name(self) -> str:
        """Display name reported for this instance. Defaults to the kind's."""
        return type(self).display_name


class BenchmarkBlockMetric(BenchmarkMetric):
    """A metric measured between an explicit begin and end."""

    @abstractmethod
    def begin(self) -> None:
        """Capture the start snapshot."""
        ...

    @abstractmethod
    def end(self) -> None:
        """Capture the end snapshot and compute the result."""
        ...
