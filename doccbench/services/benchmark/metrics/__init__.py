"""Concrete metric kinds."""

from .memory import PeakMemory
from .timing import Duration, ProcessTime
from .output import ContentHash, Counter, OutputSize

__all__ = [
    "PeakMemory",
    "Duration",
    "ProcessTime",
    "OutputSize",
    "ContentHash",
    "Counter",
]
