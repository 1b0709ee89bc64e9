"""
Benchmark tests, suites and the standard operation catalogue.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Awaitable, Callable, Optional, Tuple, Union

from ..config import Config


class Operation(str, Enum):
    """Data mutation operations every implementation supports."""
    CREATE_ROWS = "create-rows"
    REPLACE_ALL = "replace-all"
    PARTIAL_UPDATE = "partial-update"
    SELECT_ROW = "select-row"
    SWAP_ROWS = "swap-rows"
    REMOVE_ROW = "remove-row"
    CREATE_MANY_ROWS = "create-many-rows"
    APPEND_ROWS = "append-rows"
    CLEAR_ROWS = "clear-rows"


Hook = Callable[[], Union[Any, Awaitable[Any]]]


@dataclass(frozen=True)
class BenchmarkTest:
    """
    A single benchmark scenario.

    Attributes:
        name: Display name (e.g., "Create 1,000 rows")
        description: What the scenario exercises
        operation: Operation kind, an Operation or its string value
        expected_rows: Size of the data set to prepare (optional)
    """
    name: str
    description: str
    operation: Union[Operation, str]
    expected_rows: Optional[int] = None

    @property
    def operation_name(self) -> str:
        if isinstance(self.operation, Operation):
            return self.operation.value
        return str(self.operation)


@dataclass(frozen=True)
class BenchmarkSuite:
    """
    An ordered set of tests run for a number of iterations.

    ``setup`` and ``teardown`` may be plain callables or coroutine functions.
    """
    name: str
    description: str
    tests: Tuple[BenchmarkTest, ...] = ()
    iterations: int = 3
    setup: Optional[Hook] = field(default=None, compare=False)
    teardown: Optional[Hook] = field(default=None, compare=False)

    def __post_init__(self):
        if self.iterations < 1:
            raise ValueError(f"iterations must be >= 1, got {self.iterations}")
        object.__setattr__(self, "tests", tuple(self.tests))


STANDARD_TESTS = (
    BenchmarkTest(
        name="Create 1,000 rows",
        description="Create 1,000 rows in a table",
        operation=Operation.CREATE_ROWS,
        expected_rows=Config.DEFAULT_ROW_COUNT,
    ),
    BenchmarkTest(
        name="Replace all 1,000 rows",
        description="Replace all existing rows with new data",
        operation=Operation.REPLACE_ALL,
        expected_rows=Config.DEFAULT_ROW_COUNT,
    ),
    BenchmarkTest(
        name="Partial update (every 10th)",
        description="Update every 10th row in a 1,000 row table",
        operation=Operation.PARTIAL_UPDATE,
        expected_rows=Config.DEFAULT_ROW_COUNT,
    ),
    BenchmarkTest(
        name="Select row",
        description="Select and highlight a specific row",
        operation=Operation.SELECT_ROW,
    ),
    BenchmarkTest(
        name="Swap rows",
        description="Swap the position of two rows",
        operation=Operation.SWAP_ROWS,
    ),
    BenchmarkTest(
        name="Remove row",
        description="Remove a single row from the table",
        operation=Operation.REMOVE_ROW,
    ),
    BenchmarkTest(
        name="Create 10,000 rows",
        description="Create a large table with 10,000 rows",
        operation=Operation.CREATE_MANY_ROWS,
        expected_rows=Config.LARGE_ROW_COUNT,
    ),
    BenchmarkTest(
        name="Append to large table",
        description="Append 1,000 rows to an existing 10,000 row table",
        operation=Operation.APPEND_ROWS,
        expected_rows=Config.APPEND_ROW_COUNT,
    ),
    BenchmarkTest(
        name="Clear rows",
        description="Clear all rows from the table",
        operation=Operation.CLEAR_ROWS,
    ),
)


def create_standard_suite(iterations: int = 3) -> BenchmarkSuite:
    """Build the standard row manipulation suite."""
    return BenchmarkSuite(
        name="Row Manipulation Benchmark",
        description="Standard benchmark suite for row rendering implementations",
        tests=STANDARD_TESTS,
        iterations=iterations,
    )


def find_test(operation: str) -> Optional[BenchmarkTest]:
    """Standard test for an operation value, if there is one."""
    for test in STANDARD_TESTS:
        if test.operation_name == operation:
            return test
    return None
