"""Pydantic V2 models for the serialized benchmark report.

Field declaration order is the order of keys in the serialized document.
"""

from typing import Any, List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, StrictBool

MetricResultValue = Union[StrictBool, float, str, List[Any]]


class BenchmarkResultModel(BaseModel):
    """Result of a single recorded metric."""
    model_config = ConfigDict(populate_by_name=True)

    identifier: str
    display_name: str = Field(alias="displayName")
    value: MetricResultValue


class BenchmarkReportModel(BaseModel):
    """Root document for one run's benchmark results."""
    model_config = ConfigDict(populate_by_name=True)

    date: str
    arguments: List[str]
    platform: str
    metrics: List[BenchmarkResultModel]


class BenchmarkHealthModel(BaseModel):
    """Lightweight status of the shared benchmark log."""
    model_config = ConfigDict(from_attributes=True)

    benchmark_enabled: bool
    metrics_filter: Optional[str]
    recorded_count: int
    reported_count: int
    platform: str
    version: str
