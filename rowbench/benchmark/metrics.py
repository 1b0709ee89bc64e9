"""
Metrics collection for single benchmark operations.
"""

import gc
import time
import inspect
import logging
from dataclasses import dataclass
from typing import Any, Awaitable, Callable, Dict, List, Optional, Tuple, Union

import psutil

from ..config import Config

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Metrics:
    """
    Measurements taken around one operation.

    Durations are in milliseconds, memory readings in bytes. Memory fields
    are None when the platform could not report memory usage.
    """
    duration: float
    memory_before: Optional[int] = None
    memory_after: Optional[int] = None
    memory_peak: Optional[int] = None
    gc_count: Optional[int] = None

    @property
    def memory_used(self) -> Optional[int]:
        """Memory delta, only when both readings exist."""
        if self.memory_before is None or self.memory_after is None:
            return None
        return self.memory_after - self.memory_before


@dataclass(frozen=True)
class Measurement:
    """Telemetry entry recorded for every completed measurement."""
    label: str
    start: float
    duration: float


class GcObserver:
    """gc callback counting collection runs while it is registered."""

    def __init__(self):
        self.runs = 0

    def __call__(self, phase: str, info: Dict[str, Any]) -> None:
        if phase == "start":
            self.runs += 1


def process_memory() -> Optional[int]:
    """Resident set size of the current process, or None if unavailable."""
    try:
        return psutil.Process().memory_info().rss
    except (psutil.Error, OSError) as e:
        logger.debug(f"Memory introspection unavailable: {e}")
        return None


class MetricsCollector:
    """
    Measures the duration and memory footprint of single operations.

    Operations may be plain callables or return awaitables; the end
    timestamp is only taken after the awaitable has completed.

    Usage:
        collector = MetricsCollector()
        result, metrics = await collector.measure(impl.clear_rows, "clear")
        print(metrics.duration)
        collector.shutdown()
    """

    def __init__(
        self,
        memory_probe: Optional[Callable[[], Optional[int]]] = None,
        clock: Callable[[], float] = time.perf_counter,
    ):
        """
        Initialize metrics collector.

        Args:
            memory_probe: Callable returning current memory usage in bytes or
                None (default: process RSS via psutil, if enabled in Config)
            clock: Monotonic clock returning seconds
        """
        if memory_probe is None:
            memory_probe = process_memory if Config.MEASURE_MEMORY else _no_memory
        self._memory_probe = memory_probe
        self._clock = clock

        self._measurements: List[Measurement] = []
        self._closed = False

    def _snapshot_memory(self) -> Optional[int]:
        try:
            return self._memory_probe()
        except Exception as e:
            logger.debug(f"Memory probe failed: {e}")
            return None

    @property
    def measurements(self) -> List[Measurement]:
        """Telemetry recorded since the last clear()."""
        return list(self._measurements)

    async def measure(
        self,
        operation: Callable[[], Union[Any, Awaitable[Any]]],
        label: str,
    ) -> Tuple[Any, Metrics]:
        """
        Run ``operation`` once and measure it.

        Args:
            operation: Zero-argument callable, sync or returning an awaitable
            label: Name recorded in the telemetry buffer

        Returns:
            Tuple of (operation result, Metrics)

        Raises:
            Whatever ``operation`` raises, unchanged.
        """
        memory_before = self._snapshot_memory()

        # gc.callbacks is process wide; observe only while the operation runs
        observer = None if self._closed else GcObserver()
        if observer is not None:
            gc.callbacks.append(observer)
        try:
            start = self._clock()
            result = operation()
            if inspect.isawaitable(result):
                result = await result
            end = self._clock()
        finally:
            if observer is not None:
                gc.callbacks.remove(observer)

        memory_after = self._snapshot_memory()
        duration = (end - start) * 1000

        memory_peak = None
        if memory_before is not None and memory_after is not None:
            memory_peak = max(memory_before, memory_after)

        metrics = Metrics(
            duration=duration,
            memory_before=memory_before,
            memory_after=memory_after,
            memory_peak=memory_peak,
            gc_count=observer.runs if observer is not None else None,
        )

        self._measurements.append(Measurement(label=label, start=start, duration=duration))
        logger.debug(f"{label}: {duration:.3f}ms")

        return result, metrics

    def clear(self) -> None:
        """Drop recorded telemetry."""
        self._measurements = []

    def shutdown(self) -> None:
        """Stop counting gc runs and drop telemetry. Safe to call repeatedly."""
        self._closed = True
        self.clear()


def _no_memory() -> Optional[int]:
    return None
