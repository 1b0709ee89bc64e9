"""
Benchmark runner for executing row manipulation tests.
"""

import time
import asyncio
import inspect
import logging
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, List, Optional, Sequence

from ..config import Config
from ..data import RowData, generate_row_data
from ..implementations import (
    ImplementationRegistry,
    RenderableCollection,
    UnknownOperationError,
)
from .metrics import MetricsCollector
from .stats import calculate_statistics
from .suite import BenchmarkSuite, BenchmarkTest, Hook, Operation, create_standard_suite
from .comparison import ComparisonResult, build_comparison

logger = logging.getLogger(__name__)


@dataclass
class BenchmarkResult:
    """
    Result of one test, either a single run or aggregated over a suite's iterations.

    ``duration`` is in milliseconds (the mean for aggregated results).
    ``memory_used`` is None unless memory was readable before and after.
    """
    test_name: str
    implementation: str
    duration: float
    memory_used: Optional[int] = None
    timestamp: float = field(default_factory=time.time)
    iterations: int = 1
    metadata: Dict[str, Any] = field(default_factory=dict)

    @property
    def all_results(self) -> List["BenchmarkResult"]:
        """Per-iteration results behind an aggregated result."""
        return self.metadata.get("all_results", [])

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        metadata = dict(self.metadata)
        if "all_results" in metadata:
            metadata["all_results"] = [r.to_dict() for r in metadata["all_results"]]
        return {
            "test_name": self.test_name,
            "implementation": self.implementation,
            "duration_ms": self.duration,
            "memory_used": self.memory_used,
            "timestamp": self.timestamp,
            "iterations": self.iterations,
            "metadata": metadata,
        }


class ResultStore:
    """Suite results accumulated per implementation name."""

    def __init__(self):
        self._results: Dict[str, List[BenchmarkResult]] = {}

    def extend(self, name: str, results: Sequence[BenchmarkResult]) -> None:
        self._results.setdefault(name, []).extend(results)

    def get(self, name: Optional[str] = None) -> List[BenchmarkResult]:
        if name is not None:
            return list(self._results.get(name, []))
        return [r for results in self._results.values() for r in results]

    def clear(self, name: Optional[str] = None) -> None:
        if name is not None:
            self._results.pop(name, None)
        else:
            self._results.clear()


def mark_partial_update(rows: Sequence[RowData], step: int = 10) -> List[RowData]:
    """Copy of ``rows`` with every ``step``-th label (from index 0) prefixed "Updated "."""
    return [
        row.with_label(f"Updated {row.label}") if i % step == 0 else row
        for i, row in enumerate(rows)
    ]


async def _call_hook(hook: Optional[Hook]) -> None:
    if hook is None:
        return
    outcome = hook()
    if inspect.isawaitable(outcome):
        await outcome


def _notify(callback: Callable[..., None], *args: Any) -> None:
    try:
        callback(*args)
    except Exception as e:
        logger.error(f"Callback {getattr(callback, '__name__', callback)} failed: {e}")


class BenchmarkRunner:
    """
    Executes benchmarks against registered row rendering implementations.

    Features:
        - Single test runs with duration and memory measurement
        - Multi-iteration suites with mean/median/stddev aggregation
        - Cross-implementation comparison
        - Per-implementation result accumulation

    Example:
        runner = BenchmarkRunner()
        runner.register_implementation(ListTableImplementation())

        results = await runner.run_benchmark_suite("In-memory list")
        comparison = await runner.run_comparison(["In-memory list", "Indexed table"])
    """

    def __init__(
        self,
        registry: Optional[ImplementationRegistry] = None,
        collector: Optional[MetricsCollector] = None,
        row_generator: Callable[[int], List[RowData]] = generate_row_data,
        settle_interval: Optional[float] = None,
    ):
        """
        Initialize benchmark runner.

        Args:
            registry: Implementation registry (default: a new, empty one)
            collector: Metrics collector (default: a new one)
            row_generator: Produces test rows for a given count
            settle_interval: Pause between iterations in seconds (default: Config.SETTLE_INTERVAL)
        """
        self.registry = registry if registry is not None else ImplementationRegistry()
        self.collector = collector or MetricsCollector()
        self.row_generator = row_generator
        self.settle_interval = (
            Config.SETTLE_INTERVAL if settle_interval is None else settle_interval
        )
        self.store = ResultStore()

        # Callbacks
        self._on_progress: Optional[Callable[[int, int], None]] = None
        self._on_result: Optional[Callable[[BenchmarkTest, BenchmarkResult], None]] = None

    def on_progress(self, callback: Callable[[int, int], None]) -> "BenchmarkRunner":
        """
        Set progress callback.

        Args:
            callback: Function(completed, total) called after each suite test; errors are logged
        """
        self._on_progress = callback
        return self

    def on_result(
        self, callback: Callable[[BenchmarkTest, BenchmarkResult], None]
    ) -> "BenchmarkRunner":
        """
        Set result callback.

        Args:
            callback: Function(test, result) called on each aggregated suite result; errors are logged
        """
        self._on_result = callback
        return self

    def register_implementation(self, impl: RenderableCollection) -> "BenchmarkRunner":
        """Register an implementation, replacing any under the same name."""
        self.registry.register(impl)
        return self

    def implementation_names(self) -> List[str]:
        return self.registry.names()

    def _resolve_operation(
        self,
        impl: RenderableCollection,
        test: BenchmarkTest,
        data: List[RowData],
    ) -> Callable[[], Any]:
        """Bind the test's operation to the implementation and prepared data."""
        try:
            operation = Operation(test.operation)
        except ValueError:
            raise UnknownOperationError(test.operation_name) from None

        first_id = data[0].id if len(data) > 0 else "row-0"
        second_id = data[1].id if len(data) > 1 else "row-1"

        if operation is Operation.CREATE_ROWS:
            count = test.expected_rows if test.expected_rows is not None else Config.DEFAULT_ROW_COUNT
            return lambda: impl.create_rows(count)
        if operation is Operation.REPLACE_ALL:
            return lambda: impl.replace_all(data)
        if operation is Operation.PARTIAL_UPDATE:
            updated = mark_partial_update(data)
            return lambda: impl.partial_update(updated)
        if operation is Operation.SELECT_ROW:
            return lambda: impl.select_row(first_id)
        if operation is Operation.SWAP_ROWS:
            return lambda: impl.swap_rows(first_id, second_id)
        if operation is Operation.REMOVE_ROW:
            return lambda: impl.remove_row(first_id)
        if operation is Operation.CREATE_MANY_ROWS:
            return lambda: impl.create_rows(Config.LARGE_ROW_COUNT)
        if operation is Operation.APPEND_ROWS:
            appended = self.row_generator(Config.APPEND_ROW_COUNT)
            return lambda: impl.append_rows(appended)
        # Operation.CLEAR_ROWS
        return lambda: impl.clear_rows()

    async def run_single_test(
        self,
        implementation_name: str,
        test: BenchmarkTest,
        data: Optional[List[RowData]] = None,
    ) -> BenchmarkResult:
        """
        Run one test once against one implementation.

        Args:
            implementation_name: Registered implementation name
            test: Test to run
            data: Rows to operate on (default: ``test.expected_rows`` or 1000 generated rows)

        Returns:
            BenchmarkResult with iterations == 1

        Raises:
            ImplementationNotFoundError: If the implementation is not registered
            UnknownOperationError: If the test's operation is not recognized
            Exception: Anything the implementation raises, unchanged
        """
        impl = self.registry.get(implementation_name)

        if data is None:
            row_count = test.expected_rows if test.expected_rows is not None else Config.DEFAULT_ROW_COUNT
            data = self.row_generator(row_count)

        operation = self._resolve_operation(impl, test, data)

        _, metrics = await self.collector.measure(
            operation, f"{implementation_name}-{test.name}"
        )

        return BenchmarkResult(
            test_name=test.name,
            implementation=implementation_name,
            duration=metrics.duration,
            memory_used=metrics.memory_used,
            iterations=1,
            metadata={
                "operation": test.operation_name,
                "expected_rows": test.expected_rows,
                "memory_before": metrics.memory_before,
                "memory_after": metrics.memory_after,
                "memory_peak": metrics.memory_peak,
                "gc_count": metrics.gc_count,
            },
        )

    async def _run_iterations(
        self,
        implementation_name: str,
        test: BenchmarkTest,
        iterations: int,
    ) -> Optional[BenchmarkResult]:
        """Run a test repeatedly and aggregate the iterations that succeeded."""
        iteration_results: List[BenchmarkResult] = []

        for i in range(iterations):
            if i > 0 and self.settle_interval > 0:
                await asyncio.sleep(self.settle_interval)

            try:
                iteration_results.append(
                    await self.run_single_test(implementation_name, test)
                )
            except Exception as e:
                logger.error(f"Error in {test.name} (iteration {i + 1}): {e}")

        if not iteration_results:
            logger.warning(f"{test.name}: no successful iterations, skipping")
            return None

        stats = calculate_statistics([r.duration for r in iteration_results])
        first = iteration_results[0]

        metadata = dict(first.metadata)
        metadata.update({
            "std_dev": stats.std_dev,
            "median": stats.median,
            "min": stats.min,
            "max": stats.max,
            "successful_iterations": len(iteration_results),
            "all_results": iteration_results,
        })

        # iterations reports the configured count even when some were dropped
        return BenchmarkResult(
            test_name=first.test_name,
            implementation=first.implementation,
            duration=stats.mean,
            memory_used=first.memory_used,
            timestamp=first.timestamp,
            iterations=iterations,
            metadata=metadata,
        )

    async def run_benchmark_suite(
        self,
        implementation_name: str,
        suite: Optional[BenchmarkSuite] = None,
    ) -> List[BenchmarkResult]:
        """
        Run every test of a suite against one implementation.

        Failed iterations are logged and dropped; a test without any
        successful iteration produces no result.

        Args:
            implementation_name: Registered implementation name
            suite: Suite to run (default: the standard suite)

        Returns:
            One aggregated BenchmarkResult per test that produced data
        """
        self.registry.get(implementation_name)
        suite = suite or create_standard_suite(Config.ITERATIONS)

        results: List[BenchmarkResult] = []
        total = len(suite.tests)

        logger.info(f"Running benchmark suite for {implementation_name}...")

        await _call_hook(suite.setup)
        try:
            for completed, test in enumerate(suite.tests, 1):
                logger.info(f"  Running: {test.name}")

                result = await self._run_iterations(
                    implementation_name, test, suite.iterations
                )
                if result is not None:
                    results.append(result)
                    if self._on_result:
                        _notify(self._on_result, test, result)

                if self._on_progress:
                    _notify(self._on_progress, completed, total)
        finally:
            await _call_hook(suite.teardown)

        self.store.extend(implementation_name, results)
        logger.info(
            f"Suite complete for {implementation_name}: {len(results)}/{total} tests produced results"
        )

        return results

    async def run_comparison(
        self,
        implementation_names: Sequence[str],
        suite: Optional[BenchmarkSuite] = None,
    ) -> ComparisonResult:
        """
        Run the same suite across several implementations and rank them.

        Unregistered names are skipped with a warning.

        Args:
            implementation_names: Names to compare, run in this order
            suite: Suite to run (default: the standard suite)

        Returns:
            ComparisonResult
        """
        all_results: Dict[str, List[BenchmarkResult]] = {}

        logger.info(f"Running comparison across {len(implementation_names)} implementations")

        for name in implementation_names:
            if name not in self.registry:
                logger.warning(f"Implementation {name} not registered, skipping...")
                continue

            all_results[name] = await self.run_benchmark_suite(name, suite)

        comparison = build_comparison(all_results)
        if comparison.implementations:
            logger.info(f"Fastest: {comparison.fastest}, slowest: {comparison.slowest}")

        return comparison

    def get_results(self, implementation_name: Optional[str] = None) -> List[BenchmarkResult]:
        """Accumulated suite results for one implementation, or all of them."""
        return self.store.get(implementation_name)

    def clear_results(self, implementation_name: Optional[str] = None) -> None:
        """Clear accumulated results for one implementation, or all of them."""
        self.store.clear(implementation_name)
        self.collector.clear()

    def teardown(self) -> None:
        """Clear results, release the collector and clean up every implementation."""
        self.store.clear()
        self.collector.shutdown()
        self.registry.teardown()
