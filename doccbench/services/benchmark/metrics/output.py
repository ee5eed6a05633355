"""Instantaneous metrics describing produced output and work done."""

import hashlib
import os
from typing import Optional, Union

from doccbench.core.logging_config import get_logger
from ..metric import BenchmarkMetric
from ..values import MetricValue

logger = get_logger(__name__)


class _ParameterizedMetric(BenchmarkMetric):
    """Reports ``<identifier>-<id>`` when created with an id."""

    def __init__(self, id: Optional[str] = None):
        self.id = id

    def metric_identifier(self) -> str:
        if self.id is None:
            return super().metric_identifier()
        return f"{type(self).identifier}-{self.id}"

    def metric_display_name(self) -> str:
        if self.id is None:
            return super().metric_display_name()
        return f"{type(self).display_name} for '{self.id}'"


class OutputSize(_ParameterizedMetric):
    """Total size in bytes of the files below a directory."""
    identifier = "output-size"
    display_name = "Output size (bytes)"

    def __init__(self, path: Union[str, os.PathLike], id: Optional[str] = None):
        super().__init__(id)
        self.path = os.fspath(path)
        self.total_bytes = self._measure(self.path)

    @staticmethod
    def _measure(path: str) -> Optional[int]:
        if not os.path.isdir(path):
            logger.debug(f"Output directory not found: {path}")
            return None

        total = 0
        try:
            for root, _, files in os.walk(path, onerror=_raise):
                for name in files:
                    full_path = os.path.join(root, name)
                    if not os.path.islink(full_path):
                        total += os.path.getsize(full_path)
        except OSError as e:
            logger.debug(f"Cannot measure output size of {path}: {e}")
            return None
        return total

    @property
    def result(self) -> Optional[MetricValue]:
        if self.total_bytes is None:
            return None
        return MetricValue.number(self.total_bytes)


class ContentHash(_ParameterizedMetric):
    """SHA-256 digest of some produced content."""
    identifier = "content-hash"
    display_name = "Content hash"

    def __init__(self, content: Union[bytes, str], id: Optional[str] = None):
        super().__init__(id)
        data = content.encode("utf-8") if isinstance(content, str) else bytes(content)
        self.digest = hashlib.sha256(data).hexdigest()

    @property
    def result(self) -> Optional[MetricValue]:
        return MetricValue.string(self.digest)


class Counter(_ParameterizedMetric):
    """An explicit numeric value, e.g. the number of pages rendered."""
    identifier = "counter"
    display_name = "Counter"

    def __init__(self, value: Optional[float], id: Optional[str] = None):
        super().__init__(id)
        self.value = value

    @property
    def result(self) -> Optional[MetricValue]:
        if self.value is None:
            return None
        return MetricValue.number(self.value)


def _raise(error: OSError) -> None:
    raise error
