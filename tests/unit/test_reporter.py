"""
Unit tests for console reporting and formatting helpers.
"""

import json

import pytest
from rich.console import Console

from rowbench.benchmark import BenchmarkResult, Reporter, build_comparison
from rowbench.benchmark.utils import format_duration, format_memory


@pytest.fixture
def console():
    return Console(record=True, width=200, color_system=None)


@pytest.fixture
def reporter(console):
    return Reporter(console)


def aggregated(name, test_name, duration, successful=3):
    return BenchmarkResult(
        test_name=test_name, implementation=name, duration=duration,
        memory_used=2048, timestamp=0.0, iterations=3,
        metadata={"std_dev": 0.5, "min": duration - 1, "max": duration + 1,
                  "successful_iterations": successful},
    )


class TestFormatting:
    """Test duration and memory formatting."""

    @pytest.mark.parametrize("ms, expected", [
        (0.5, "500.00μs"),
        (12.3, "12.30ms"),
        (2500, "2.50s"),
    ])
    def test_format_duration(self, ms, expected):
        assert format_duration(ms) == expected

    @pytest.mark.parametrize("num_bytes, expected", [
        (None, "N/A"),
        (0, "0B"),
        (512, "512B"),
        (2048, "2.00KB"),
        (3 * 1024 * 1024, "3.00MB"),
        (5 * 1024 ** 3, "5.00GB"),
        (-2048, "-2.00KB"),
    ])
    def test_format_memory(self, num_bytes, expected):
        assert format_memory(num_bytes) == expected


class TestReporter:
    """Test rendered output."""

    def test_print_results(self, reporter, console):
        reporter.print_results([aggregated("A", "Create rows", 10.0)], title="A")

        text = console.export_text()
        assert "Create rows" in text
        assert "10.00ms" in text
        assert "2.00KB" in text
        assert "Total: 10.00ms" in text

    def test_partial_iterations_shown(self, reporter, console):
        reporter.print_results([aggregated("A", "Swap", 1.0, successful=2)])
        assert "2/3" in console.export_text()

    def test_print_results_empty(self, reporter, console):
        reporter.print_results([])
        assert "No results recorded" in console.export_text()

    def test_print_comparison(self, reporter, console):
        comparison = build_comparison({
            "A": [aggregated("A", "Create rows", 1.0)],
            "B": [aggregated("B", "Create rows", 3.0)],
        })

        reporter.print_comparison(comparison)

        text = console.export_text()
        assert "Fastest: A" in text
        assert "Slowest: B" in text
        assert "Total" in text

    def test_print_empty_comparison(self, reporter, console):
        reporter.print_comparison(build_comparison({}))
        assert "No implementations were compared" in console.export_text()

    def test_print_json(self, reporter, console):
        reporter.print_json([aggregated("A", "Clear", 1.0)])

        data = json.loads(console.export_text())
        assert data[0]["test_name"] == "Clear"
