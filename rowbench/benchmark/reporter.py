"""
Console reporting for benchmark results.
Renders rich tables; results are never written to disk.
"""

import json
from typing import Any, Dict, List, Optional

from rich.console import Console
from rich.table import Table

from .comparison import ComparisonResult
from .runner import BenchmarkResult
from .utils import format_duration, format_memory


class Reporter:
    """
    Render benchmark results on the console.

    Supports:
        - Per-test result tables
        - Multi-implementation comparison tables
        - JSON dumps of the same data

    Example:
        reporter = Reporter()
        reporter.print_results(results, title="In-memory list")
        reporter.print_comparison(comparison)
    """

    def __init__(self, console: Optional[Console] = None):
        """
        Initialize reporter.

        Args:
            console: Rich console to print to (default: a new stdout console)
        """
        self.console = console or Console()

    def results_table(self, results: List[BenchmarkResult], title: str = "Results") -> Table:
        """Build a table with one row per result."""
        table = Table(title=title)
        table.add_column("Test", style="cyan")
        table.add_column("Duration", justify="right")
        table.add_column("Std Dev", justify="right")
        table.add_column("Min", justify="right")
        table.add_column("Max", justify="right")
        table.add_column("Memory", justify="right")
        table.add_column("Iterations", justify="right")

        for result in results:
            meta = result.metadata
            table.add_row(
                result.test_name,
                format_duration(result.duration),
                format_duration(meta["std_dev"]) if "std_dev" in meta else "-",
                format_duration(meta["min"]) if "min" in meta else "-",
                format_duration(meta["max"]) if "max" in meta else "-",
                format_memory(result.memory_used),
                self._format_iterations(result),
            )

        return table

    def _format_iterations(self, result: BenchmarkResult) -> str:
        successful = result.metadata.get("successful_iterations")
        if successful is None or successful == result.iterations:
            return str(result.iterations)
        return f"{successful}/{result.iterations}"

    def print_results(self, results: List[BenchmarkResult], title: str = "Results") -> None:
        """Print a results table followed by the total duration."""
        if not results:
            self.console.print("[yellow]⚠️  No results recorded.[/yellow]")
            return

        self.console.print(self.results_table(results, title))
        total = sum(r.duration for r in results)
        self.console.print(f"Total: [bold]{format_duration(total)}[/bold]")

    def comparison_table(self, comparison: ComparisonResult) -> Table:
        """Build a test x implementation table of durations."""
        table = Table(title="Implementation Comparison")
        table.add_column("Test", style="cyan")
        for name in comparison.implementations:
            table.add_column(name, justify="right")

        test_names: List[str] = []
        durations: Dict[str, Dict[str, float]] = {}
        for name, results in comparison.results.items():
            for result in results:
                if result.test_name not in test_names:
                    test_names.append(result.test_name)
                durations.setdefault(result.test_name, {})[name] = result.duration

        for test_name in test_names:
            row = durations[test_name]
            table.add_row(
                test_name,
                *[
                    format_duration(row[name]) if name in row else "-"
                    for name in comparison.implementations
                ],
            )

        table.add_row(
            "[bold]Total[/bold]",
            *[
                f"[bold]{format_duration(comparison.total_duration(name))}[/bold]"
                for name in comparison.implementations
            ],
        )
        return table

    def print_comparison(self, comparison: ComparisonResult) -> None:
        """Print the comparison table and the ranking summary."""
        if not comparison.implementations:
            self.console.print("[yellow]⚠️  No implementations were compared.[/yellow]")
            return

        self.console.print("\n[bold]Comparison Summary[/bold]\n")
        self.console.print(self.comparison_table(comparison))
        self.console.print(f"🏆 Fastest: [green]{comparison.fastest}[/green]")
        self.console.print(f"🐢 Slowest: [red]{comparison.slowest}[/red]")
        if comparison.memory_efficient:
            self.console.print(f"Memory efficient: [green]{comparison.memory_efficient}[/green]")
            self.console.print(f"Memory heavy: [red]{comparison.memory_heavy}[/red]")

    def print_json(self, payload: Any) -> None:
        """Print any ``to_dict()``-able payload (or list of them) as JSON."""
        if isinstance(payload, list):
            data = [item.to_dict() for item in payload]
        else:
            data = payload.to_dict()
        self.console.print_json(json.dumps(data, ensure_ascii=False, default=str))
