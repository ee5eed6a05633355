"""
Unit tests for the concrete metric kinds.
"""

import hashlib

import pytest

from doccbench.services.benchmark import memory_probe
from doccbench.services.benchmark.metrics import (
    ContentHash,
    Counter,
    Duration,
    OutputSize,
    PeakMemory,
    ProcessTime,
)
from doccbench.services.benchmark.values import MetricValue


class TestPeakMemory:
    """Test suite for the peak memory metric"""

    def test_probe_runs_once_at_construction(self, fixed_probe):
        probe = fixed_probe(1024.0)

        metric = PeakMemory(probe)
        assert probe.calls == 1

        assert metric.result == MetricValue.number(1024.0)
        assert metric.result == MetricValue.number(1024.0)
        assert probe.calls == 1

    def test_failed_probe_has_no_result(self, fixed_probe):
        assert PeakMemory(fixed_probe(None)).result is None

    def test_uses_platform_probe_by_default(self, fixed_probe, monkeypatch):
        monkeypatch.setattr(memory_probe, "memory_probe", fixed_probe(99.0))

        assert PeakMemory().result == MetricValue.number(99.0)

    def test_static_identity(self, fixed_probe):
        metric = PeakMemory(fixed_probe(1.0))

        assert metric.metric_identifier() == "peak-memory"
        assert metric.metric_display_name() == "Peak memory footprint (bytes)"


class TestDuration:
    """Test suite for the wall-clock duration metric"""

    def test_no_result_before_end(self):
        metric = Duration()
        assert metric.result is None

        metric.begin()
        assert metric.result is None

    def test_measures_milliseconds(self, monkeypatch):
        ticks = iter([10.0, 10.25])
        monkeypatch.setattr(Duration, "clock", staticmethod(lambda: next(ticks)))

        metric = Duration()
        metric.begin()
        metric.end()

        assert metric.result == MetricValue.number(250.0)

    def test_end_without_begin_has_no_result(self):
        metric = Duration()
        metric.end()

        assert metric.result is None

    def test_dynamic_identity(self):
        metric = Duration("convert")

        assert metric.metric_identifier() == "duration-convert"
        assert metric.metric_display_name() == "Duration for 'convert' (msec)"
        assert Duration.identifier == "duration"

    def test_static_identity_without_id(self):
        metric = Duration()

        assert metric.metric_identifier() == "duration"
        assert metric.metric_display_name() == "Duration (msec)"


def test_process_time_measures_cpu_clock(monkeypatch):
    ticks = iter([1.0, 1.5])
    monkeypatch.setattr(ProcessTime, "clock", staticmethod(lambda: next(ticks)))

    metric = ProcessTime("render")
    metric.begin()
    metric.end()

    assert metric.result == MetricValue.number(500.0)
    assert metric.metric_identifier() == "process-time-render"


class TestOutputSize:
    """Test suite for the output size metric"""

    def test_sums_file_sizes_recursively(self, tmp_path):
        (tmp_path / "data").mkdir()
        (tmp_path / "index.html").write_bytes(b"x" * 100)
        (tmp_path / "data" / "doc.json").write_bytes(b"y" * 28)

        metric = OutputSize(tmp_path, id="archive")

        assert metric.result == MetricValue.number(128)
        assert metric.metric_identifier() == "output-size-archive"
        assert metric.metric_display_name() == "Output size (bytes) for 'archive'"

    def test_empty_directory_is_zero(self, tmp_path):
        assert OutputSize(tmp_path).result == MetricValue.number(0)

    def test_missing_directory_has_no_result(self, tmp_path):
        assert OutputSize(tmp_path / "missing").result is None


def test_content_hash_is_sha256_string():
    metric = ContentHash("topic graph", id="topic-graph")

    assert metric.result == MetricValue.string(hashlib.sha256(b"topic graph").hexdigest())
    assert metric.metric_identifier() == "content-hash-topic-graph"


def test_content_hash_accepts_bytes():
    assert ContentHash(b"abc").result == ContentHash("abc").result


@pytest.mark.parametrize("value, expected", [
    (3, MetricValue.number(3)),
    (0, MetricValue.number(0)),
    (None, None),
])
def test_counter_result(value, expected):
    assert Counter(value, id="pages").result == expected
