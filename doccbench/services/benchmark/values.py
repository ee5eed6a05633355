"""MetricValue - tagged scalar result attached to a completed measurement.

A value is one of a number, a string, a boolean, or an ordered sequence of
values. Probes only produce numbers today; the other shapes exist so that
new metric kinds can report hashes, flags or lists without touching the
report serializer.
"""

from dataclasses import dataclass
from typing import Any, List, Sequence, Tuple, Union

Primitive = Union[float, str, bool, List[Any]]


@dataclass(frozen=True)
class MetricValue:
    """A tagged metric result.

    Use the ``number``/``string``/``boolean``/``sequence`` constructors
    rather than building instances directly.
    """
    kind: str
    payload: Union[float, str, bool, Tuple["MetricValue", ...]]

    NUMBER = "number"
    STRING = "string"
    BOOLEAN = "boolean"
    SEQUENCE = "sequence"

    @classmethod
    def number(cls, value: float) -> "MetricValue":
        return cls(cls.NUMBER, float(value))

    @classmethod
    def string(cls, value: str) -> "MetricValue":
        return cls(cls.STRING, str(value))

    @classmethod
    def boolean(cls, value: bool) -> "MetricValue":
        return cls(cls.BOOLEAN, bool(value))

    @classmethod
    def sequence(cls, values: Sequence["MetricValue"]) -> "MetricValue":
        items = tuple(values)
        for item in items:
            if not isinstance(item, MetricValue):
                raise TypeError(f"sequence items must be MetricValue, got {type(item).__name__}")
        return cls(cls.SEQUENCE, items)

    def to_primitive(self) -> Primitive:
        """Return the JSON-compatible primitive for this value."""
        if self.kind == self.SEQUENCE:
            return [item.to_primitive() for item in self.payload]
        return self.payload
