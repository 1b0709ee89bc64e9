#!/usr/bin/env python3
"""
Row Rendering Benchmark - CLI Entry Point

Usage:
    python main.py run-test --implementation list --operation create-rows
    python main.py run-suite --implementation indexed --iterations 5
    python main.py compare --implementations list,indexed
"""

import sys
import asyncio
import logging
from pathlib import Path

# Add project root to path for imports
sys.path.insert(0, str(Path(__file__).parent))

import click
from rich.console import Console
from rich.table import Table
from rich.progress import Progress, SpinnerColumn, TextColumn

from rowbench import __version__
from rowbench.config import Config
from rowbench.implementations import (
    BenchmarkError,
    get_implementation,
    list_implementations,
    IMPLEMENTATIONS,
)
from rowbench.benchmark import (
    BenchmarkRunner,
    BenchmarkTest,
    Operation,
    Reporter,
    create_standard_suite,
)
from rowbench.benchmark.suite import STANDARD_TESTS, find_test

console = Console()


def setup_logging(verbose: bool = False, debug: bool = False):
    """Configure logging level."""
    if debug:
        level = logging.DEBUG
    elif verbose:
        level = logging.INFO
    else:
        level = logging.WARNING

    logging.basicConfig(
        level=level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        force=True
    )

    logging.getLogger('rowbench').setLevel(level)


def _build_runner(keys):
    """Instantiate implementations by key and register them on a new runner."""
    runner = BenchmarkRunner()
    names = []

    for key in keys:
        try:
            impl = get_implementation(key)
        except ValueError as e:
            console.print(f"[yellow]⚠️  {key}: {e}[/yellow]")
            continue

        runner.register_implementation(impl)
        names.append(impl.name)
        console.print(f"✅ {key}: {impl.name} v{impl.version}")

    return runner, names


def _single_test(operation: str, rows) -> BenchmarkTest:
    """Catalogue test for an operation, resized when --rows is given."""
    test = find_test(operation)
    if rows is None:
        return test

    return BenchmarkTest(
        name=f"{test.name} ({rows} rows)",
        description=test.description,
        operation=test.operation,
        expected_rows=rows,
    )


@click.group()
@click.version_option(version=__version__)
@click.option('--verbose', '-v', is_flag=True, help='Enable verbose output (INFO level)')
@click.option('--debug', is_flag=True, help='Enable debug output (DEBUG level, shows every measurement)')
@click.pass_context
def cli(ctx, verbose, debug):
    """
    Row Rendering Benchmark Tool

    Measures interchangeable row rendering implementations on a fixed
    catalogue of data mutation operations and compares their cost.

    Use -v for verbose output, --debug for per-measurement logs.
    """
    ctx.ensure_object(dict)
    ctx.obj['verbose'] = verbose
    ctx.obj['debug'] = debug
    setup_logging(verbose, debug)


@cli.command('run-test')
@click.option('--implementation', '-i', required=True, help='Implementation key (e.g., list)')
@click.option('--operation', '-o', required=True,
              type=click.Choice([op.value for op in Operation]), help='Operation to measure')
@click.option('--rows', '-r', default=None, type=int, help='Rows to prepare (default: catalogue value)')
@click.option('--json', 'as_json', is_flag=True, help='Print the result as JSON')
def run_test(implementation, operation, rows, as_json):
    """
    Run a single operation once.

    Example:
        python main.py run-test -i list -o partial-update
    """
    console.print(f"\n[bold blue]Row Rendering Benchmark[/bold blue]")
    runner, names = _build_runner([implementation])
    if not names:
        console.print(f"Available implementations: {', '.join(list_implementations())}")
        sys.exit(1)

    test = _single_test(operation, rows)
    reporter = Reporter(console)

    try:
        result = asyncio.run(runner.run_single_test(names[0], test))
    except BenchmarkError as e:
        console.print(f"[red]Error: {e}[/red]")
        sys.exit(1)
    except Exception as e:
        console.print(f"[red]Benchmark failed: {e}[/red]")
        sys.exit(1)
    finally:
        runner.teardown()

    if as_json:
        reporter.print_json(result)
    else:
        reporter.print_results([result], title=names[0])


@cli.command('run-suite')
@click.option('--implementation', '-i', required=True, help='Implementation key (e.g., indexed)')
@click.option('--iterations', '-n', default=Config.ITERATIONS, type=click.IntRange(min=1),
              help='Iterations per test')
@click.option('--json', 'as_json', is_flag=True, help='Print the results as JSON')
def run_suite(implementation, iterations, as_json):
    """
    Run the standard suite for one implementation.

    Example:
        python main.py run-suite -i indexed -n 5
    """
    console.print(f"\n[bold blue]Row Rendering Benchmark[/bold blue]")
    runner, names = _build_runner([implementation])
    if not names:
        console.print(f"Available implementations: {', '.join(list_implementations())}")
        sys.exit(1)

    suite = create_standard_suite(iterations)
    console.print(f"Suite: [cyan]{suite.name}[/cyan] ({len(suite.tests)} tests x {iterations})\n")

    with Progress(
        SpinnerColumn(),
        TextColumn("[progress.description]{task.description}"),
        console=console,
    ) as progress:
        task = progress.add_task("Running benchmark...", total=len(suite.tests))
        runner.on_progress(lambda done, total: progress.update(task, completed=done))

        try:
            results = asyncio.run(runner.run_benchmark_suite(names[0], suite))
        finally:
            runner.teardown()

    reporter = Reporter(console)
    if as_json:
        reporter.print_json(results)
    else:
        reporter.print_results(results, title=names[0])


@cli.command()
@click.option('--implementations', '-i', default=','.join(IMPLEMENTATIONS),
              help='Comma-separated implementation keys')
@click.option('--iterations', '-n', default=Config.ITERATIONS, type=click.IntRange(min=1),
              help='Iterations per test')
@click.option('--json', 'as_json', is_flag=True, help='Print the comparison as JSON')
def compare(implementations, iterations, as_json):
    """
    Compare multiple implementations on the standard suite.

    Example:
        python main.py compare -i list,indexed -n 3
    """
    keys = [k.strip() for k in implementations.split(',') if k.strip()]

    console.print(f"\n[bold blue]Row Rendering Implementation Comparison[/bold blue]")
    runner, names = _build_runner(keys)

    if not names:
        console.print("[red]No implementations initialized. Exiting.[/red]")
        sys.exit(1)

    console.print("\n[bold]Running benchmarks...[/bold]\n")

    try:
        comparison = asyncio.run(
            runner.run_comparison(names, create_standard_suite(iterations))
        )
    finally:
        runner.teardown()

    reporter = Reporter(console)
    if as_json:
        reporter.print_json(comparison)
    else:
        reporter.print_comparison(comparison)


@cli.command('list-implementations')
def list_implementations_cmd():
    """List available implementations."""
    console.print("\n[bold]Available Implementations:[/bold]\n")

    table = Table()
    table.add_column("Key", style="cyan")
    table.add_column("Name")
    table.add_column("Version")

    for key, impl_class in IMPLEMENTATIONS.items():
        table.add_row(key, impl_class.name, impl_class.version)

    console.print(table)


@cli.command('list-tests')
def list_tests_cmd():
    """List the standard test catalogue."""
    console.print("\n[bold]Standard Tests:[/bold]\n")

    table = Table()
    table.add_column("Operation", style="cyan")
    table.add_column("Name")
    table.add_column("Rows", justify="right")
    table.add_column("Description")

    for test in STANDARD_TESTS:
        table.add_row(
            test.operation_name,
            test.name,
            str(test.expected_rows) if test.expected_rows is not None else "-",
            test.description,
        )

    console.print(table)


if __name__ == "__main__":
    cli()
