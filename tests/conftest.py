import pytest

from doccbench.services.benchmark import Benchmark, set_benchmark_log
from doccbench.services.benchmark import instance


@pytest.fixture
def benchmark_log():
    """Enabled benchmark log with no filter and fixed arguments."""
    return Benchmark(enabled=True, arguments=["convert", "Sample.docc"])


@pytest.fixture
def shared_log(benchmark_log):
    """Install benchmark_log as the shared log and restore the previous one afterwards."""
    previous = instance._benchmark_log
    set_benchmark_log(benchmark_log)
    yield benchmark_log
    instance._benchmark_log = previous


class FixedProbe:
    """Memory probe returning a canned value."""

    def __init__(self, value):
        self.value = value
        self.calls = 0

    def peak_memory(self):
        self.calls += 1
        return self.value


@pytest.fixture
def fixed_probe():
    return FixedProbe
