"""
Root Typer application for the util-suite CLI.
"""

from __future__ import annotations

import json

import typer
from rich.console import Console
from rich.table import Table
from typer import Typer

from utilsuite.core.config import get_settings
from utilsuite.core.errors import UtilSuiteError
from utilsuite.core.logging import configure_logging

console = Console()
err_console = Console(stderr=True)

app = Typer(
    name="util-suite",
    help="util-suite: edit distance, memoization and small utilities.",
    no_args_is_help=True,
    rich_markup_mode="rich",
)


# ── Version callback ─────────────────────────────────────────────────────


def _version_callback(value: bool) -> None:
    if value:
        from utilsuite import __version__

        typer.echo(f"util-suite {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: bool | None = typer.Option(  # noqa: UP007
        None,
        "--version",
        "-V",
        help="Show version and exit.",
        callback=_version_callback,
        is_eager=True,
    ),
) -> None:
    """util-suite CLI. Run the demo or call a single utility."""
    try:
        settings = get_settings()
    except UtilSuiteError as e:
        err_console.print(f"[bold red]Error[/bold red] ({e.category.value}): {e.message}")
        raise typer.Exit(code=2) from e
    configure_logging(level=settings.log_level, json_format=settings.json_logs)


# ── Commands ─────────────────────────────────────────────────────────────


@app.command("demo")
def demo(
    json_out: bool = typer.Option(False, "--json", help="Print the report as JSON."),
) -> None:
    """Run every utility once and print what each produced."""
    from utilsuite.demo import run_demo

    try:
        report = run_demo(get_settings())
    except UtilSuiteError as e:
        err_console.print(f"[bold red]Error[/bold red] ({e.category.value}): {e.message}")
        raise typer.Exit(code=1) from e

    if json_out:
        console.print_json(json.dumps(report.to_dict()))
        return

    console.print("[bold]=== util-suite demo ===[/bold]")
    for line in report.lines():
        console.print(line, markup=False, highlight=False)
    console.print("[bold]=== Demo complete ===[/bold]")


@app.command("distance")
def distance(
    source: str = typer.Argument(..., help="Source string."),
    target: str = typer.Argument(..., help="Target string."),
) -> None:
    """Print the Levenshtein distance between two strings."""
    from utilsuite.core.text import levenshtein

    typer.echo(levenshtein(source, target))


@app.command("title")
def title(text: str = typer.Argument(..., help="Text to title-case.")) -> None:
    """Title-case TEXT."""
    from utilsuite.core.text import title_case

    typer.echo(title_case(text))


@app.command("fib")
def fib(
    numbers: list[int] = typer.Argument(..., help="Indices to compute."),
    timeout_ms: int | None = typer.Option(None, "--timeout-ms", help="Batch budget."),
) -> None:
    """Compute Fibonacci numbers concurrently through a memoizing cache."""
    from utilsuite.core.cache import MemoizingCache
    from utilsuite.core.numeric import big_fib
    from utilsuite.execution.pool import invoke_all_timed, new_named_pool

    if any(n < 0 for n in numbers):
        err_console.print("[bold red]Error[/bold red]: indices must be non-negative")
        raise typer.Exit(code=1)

    settings = get_settings()
    cache = MemoizingCache(big_fib, name="big_fib")
    with new_named_pool(settings.pool_name_prefix, settings.pool_size) as pool:
        outcome = invoke_all_timed(
            pool,
            [lambda n=n: (n, cache.get(n)) for n in numbers],
            timeout_ms if timeout_ms is not None else settings.batch_timeout_ms,
        )

    table = Table(title="Fibonacci")
    table.add_column("n", justify="right")
    table.add_column("fib(n)", justify="right")
    for n, value in outcome.results:
        table.add_row(str(n), str(value))
    console.print(table)
    if outcome.timed_out:
        err_console.print(f"[yellow]{outcome.timed_out} lookup(s) did not finish in time[/yellow]")
