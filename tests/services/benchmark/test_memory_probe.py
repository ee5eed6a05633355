"""
Unit tests for the platform memory probes.

Probes must never raise; every failure is reported as None.
"""

from unittest.mock import patch

import pytest

from doccbench.services.benchmark import memory_probe
from doccbench.services.benchmark.memory_probe import (
    MachTaskInfoProbe,
    NullMemoryProbe,
    ProcStatusProbe,
    PsutilPeakProbe,
    parse_peak_memory,
    select_memory_probe,
)

PROC_STATUS = """Name:\tpython3
Umask:\t0022
State:\tR (running)
VmPeak:\t  123456 kB
VmSize:\t  120000 kB
VmHWM:\t   40000 kB
"""


def test_parse_peak_memory_converts_kib_to_bytes():
    """Test that the VmPeak value is read and multiplied by 1024."""
    assert parse_peak_memory(PROC_STATUS) == 123456 * 1024.0


def test_parse_peak_memory_missing_line():
    assert parse_peak_memory("Name:\tpython3\nVmSize:\t 100 kB\n") is None


def test_parse_peak_memory_without_digits():
    assert parse_peak_memory("VmPeak:\t unknown\n") is None


def test_parse_peak_memory_uses_first_matching_line():
    status = "VmPeak:\t 10 kB\nVmPeak:\t 20 kB\n"
    assert parse_peak_memory(status) == 10240.0


def test_proc_status_probe_reads_file(tmp_path):
    status_file = tmp_path / "status"
    status_file.write_text(PROC_STATUS)

    probe = ProcStatusProbe(str(status_file))

    assert probe.peak_memory() == 123456 * 1024.0


def test_proc_status_probe_missing_file(tmp_path):
    """Test that an unreadable status file yields None instead of raising."""
    probe = ProcStatusProbe(str(tmp_path / "does-not-exist"))

    assert probe.peak_memory() is None


def test_proc_status_probe_malformed_file(tmp_path):
    status_file = tmp_path / "status"
    status_file.write_bytes(b"\xff\xfe\x00garbage")

    assert ProcStatusProbe(str(status_file)).peak_memory() is None


def test_mach_probe_missing_library():
    """Test that a library that cannot be loaded yields None."""
    probe = MachTaskInfoProbe("/nonexistent/libSystem.dylib")

    assert probe.peak_memory() is None


def test_mach_probe_missing_symbol():
    """Test that a C library without task_info (e.g. glibc) yields None."""
    with patch("doccbench.services.benchmark.memory_probe.ctypes.CDLL", side_effect=AttributeError("task_info")):
        assert MachTaskInfoProbe().peak_memory() is None


def test_psutil_probe_without_peak_field():
    """Test that platforms without peak_wset report None."""
    with patch("psutil.Process") as MockProcess:
        MockProcess.return_value.memory_info.return_value = object()
        assert PsutilPeakProbe().peak_memory() is None


def test_psutil_probe_reads_peak_working_set():
    with patch("psutil.Process") as MockProcess:
        MockProcess.return_value.memory_info.return_value.peak_wset = 2048
        assert PsutilPeakProbe().peak_memory() == 2048.0


def test_null_probe_is_always_none():
    assert NullMemoryProbe().peak_memory() is None


@pytest.mark.parametrize("platform, expected", [
    ("darwin", MachTaskInfoProbe),
    ("ios", MachTaskInfoProbe),
    ("linux", ProcStatusProbe),
    ("win32", PsutilPeakProbe),
    ("freebsd14", NullMemoryProbe),
    ("emscripten", NullMemoryProbe),
])
def test_select_memory_probe(platform, expected):
    assert isinstance(select_memory_probe(platform), expected)


def test_module_probe_matches_current_platform():
    assert type(memory_probe.memory_probe) is type(select_memory_probe())
