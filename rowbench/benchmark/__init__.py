"""
Benchmark execution and reporting package.
"""

from .runner import BenchmarkRunner, BenchmarkResult, ResultStore, mark_partial_update
from .metrics import MetricsCollector, Metrics, Measurement
from .stats import Statistics, calculate_statistics
from .suite import BenchmarkSuite, BenchmarkTest, Operation, create_standard_suite
from .comparison import ComparisonResult, build_comparison
from .reporter import Reporter

__all__ = [
    "BenchmarkRunner",
    "BenchmarkResult",
    "ResultStore",
    "mark_partial_update",
    "MetricsCollector",
    "Metrics",
    "Measurement",
    "Statistics",
    "calculate_statistics",
    "BenchmarkSuite",
    "BenchmarkTest",
    "Operation",
    "create_standard_suite",
    "ComparisonResult",
    "build_comparison",
    "Reporter",
]
