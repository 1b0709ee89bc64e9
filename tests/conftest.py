"""
Shared test fixtures for the row rendering benchmark tests.

Provides a controllable clock and a stub implementation that advances it,
so durations are exact and comparisons deterministic.
"""

import pytest

from rowbench.benchmark import BenchmarkRunner, MetricsCollector
from rowbench.implementations import ImplementationRegistry

from .helpers import FakeClock, StubImplementation


# --- Clock and collector ---

@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def memory_readings():
    """Memory probe values consumed in order; extend in tests as needed."""
    return []


@pytest.fixture
def collector(clock, memory_readings):
    """Collector on the fake clock; memory comes from ``memory_readings`` or is absent."""
    def probe():
        return memory_readings.pop(0) if memory_readings else None

    c = MetricsCollector(memory_probe=probe, clock=clock)
    yield c
    c.shutdown()


# --- Runner fixtures ---

@pytest.fixture
def registry():
    return ImplementationRegistry()


@pytest.fixture
def runner(registry, collector):
    """Runner without settle pauses."""
    return BenchmarkRunner(registry=registry, collector=collector, settle_interval=0)


@pytest.fixture
def stub(clock):
    return StubImplementation(name="Stub", clock=clock)
