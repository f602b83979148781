"""Typer CLI entrypoints."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import List, NoReturn, Optional

import typer
import yaml
from rich.console import Console

from .collector import PathCollector
from .config import BenchmarkConfig, load_benchmark_config
from .errors import BenchmarkError, DirectoryNotFoundError
from .evaluation import iter_experiments
from .logging_utils import get_logger, set_global_log_level
from .report import ReportFormatter, headline, render_summary, results_to_frame
from .runners.base import RunStats

app = typer.Typer(
    add_completion=False,
    help="Benchmark grayscale/contrast/resize batches, sequential vs. threaded",
)
console = Console()
err_console = Console(stderr=True)
logger = get_logger("CLI")


def _load_config(
    config_path: Optional[Path],
    input_dir: Optional[Path] = None,
    workers: Optional[List[int]] = None,
) -> BenchmarkConfig:
    try:
        config = load_benchmark_config(config_path) if config_path else BenchmarkConfig()
        if input_dir is not None:
            config.input_dir = str(input_dir)
        if workers:
            config.parallel.worker_counts = list(workers)
        return config.validate()
    except (FileNotFoundError, TypeError, ValueError, yaml.YAMLError) as exc:
        err_console.print(f"[bold red]Invalid configuration:[/bold red] {exc}")
        raise typer.Exit(code=1) from exc


def _fail(exc: BenchmarkError) -> NoReturn:
    err_console.print(f"[bold red]error:[/bold red] {exc}")
    if isinstance(exc, DirectoryNotFoundError):
        err_console.print(
            f"Create a folder called '{exc.path}' and add the images inside."
        )
    raise typer.Exit(code=1) from exc


def _print_run(stats: RunStats, formatter: ReportFormatter) -> None:
    console.print()
    console.print(headline(stats))
    console.print(formatter.render(stats.results))


@app.command()
def run(
    config_path: Optional[Path] = typer.Option(
        None, "--config", "-c", help="Path to YAML config"
    ),
    input_dir: Optional[Path] = typer.Option(
        None, "--input-dir", "-i", help="Directory holding the source images"
    ),
    workers: Optional[List[int]] = typer.Option(
        None, "--workers", "-w", help="Worker count to benchmark (repeatable)"
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log every image"),
) -> None:
    """Run the sequential baseline and every threaded experiment."""
    if verbose:
        set_global_log_level(logging.DEBUG)
    config = _load_config(config_path, input_dir, workers)
    formatter = ReportFormatter()
    runs: List[RunStats] = []
    try:
        paths = PathCollector(config.extensions).collect(config.input_path)
        console.print("processing...")
        for stats in iter_experiments(config, paths):
            _print_run(stats, formatter)
            runs.append(stats)
    except BenchmarkError as exc:
        _fail(exc)
    console.print(render_summary(results_to_frame(runs)))


@app.command()
def collect(
    config_path: Optional[Path] = typer.Option(
        None, "--config", "-c", help="Path to YAML config"
    ),
    input_dir: Optional[Path] = typer.Option(
        None, "--input-dir", "-i", help="Directory holding the source images"
    ),
) -> None:
    """List the images a run would process."""
    config = _load_config(config_path, input_dir)
    try:
        paths = PathCollector(config.extensions).collect(config.input_path)
    except BenchmarkError as exc:
        _fail(exc)
    for path in paths:
        console.print(path, highlight=False)
    logger.info("Found %s images under %s", len(paths), config.input_path)


def main() -> None:
    app()


if __name__ == "__main__":
    main()
