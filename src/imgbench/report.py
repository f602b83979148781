"""Console rendering of benchmark results."""

from __future__ import annotations

from typing import Iterable, List

import pandas as pd
from rich.console import Console
from rich.table import Table

from .runners.base import Dimensions, RunStats, TransformResult

COLUMNS = ("path", "duration", "size", "dimensions", "new_size", "new_dimensions")


def format_megabytes(megabytes: float) -> str:
    return f"{megabytes:.2f}MB"


def format_dimensions(dimensions: Dimensions) -> str:
    width, height = dimensions
    return f"{width}x{height}"


class ReportFormatter:
    def __init__(self, title: str = "Per-image metrics"):
        self.title = title

    def row(self, result: TransformResult) -> List[str]:
        return [
            result.source_path,
            f"{result.processing_duration:.2f}s",
            format_megabytes(result.original_size_mb),
            format_dimensions(result.original_dimensions),
            format_megabytes(result.output_size_mb),
            format_dimensions(result.output_dimensions),
        ]

    def render(self, results: Iterable[TransformResult]) -> Table:
        table = Table(title=self.title, show_header=True, header_style="bold cyan")
        for column in COLUMNS:
            justify = "left" if column == "path" else "right"
            table.add_column(column, justify=justify)
        for result in results:
            table.add_row(*self.row(result))
        return table

    def render_text(self, results: Iterable[TransformResult], width: int = 160) -> str:
        console = Console(width=width, record=True, color_system=None)
        with console.capture() as capture:
            console.print(self.render(results))
        return capture.get()


def headline(stats: RunStats) -> str:
    if stats.worker_count is None:
        return (
            f"Processed {stats.images_processed} images in "
            f"{stats.duration_seconds:.4f} seconds without threads."
        )
    return (
        f"Processed {stats.images_processed} images in {stats.duration_seconds:.4f} "
        f"seconds using {stats.worker_count} threads ({stats.chunk_count} chunks)."
    )


def results_to_frame(runs: List[RunStats]) -> pd.DataFrame:
    baseline = next(
        (run.duration_seconds for run in runs if run.worker_count is None), None
    )
    rows = []
    for run in runs:
        speedup = None
        if baseline is not None and run.duration_seconds > 0:
            speedup = round(baseline / run.duration_seconds, 2)
        rows.append(
            {
                "experiment": run.label,
                "workers": run.worker_count or 1,
                "chunks": run.chunk_count,
                "images": run.images_processed,
                "seconds": round(run.duration_seconds, 4),
                "speedup": speedup,
            }
        )
    return pd.DataFrame(rows)


def render_summary(frame: pd.DataFrame) -> Table:
    table = Table(title="Benchmark summary", show_lines=False)
    for column in frame.columns:
        table.add_column(column)
    for _, row in frame.iterrows():
        table.add_row(*(str(row[col]) for col in frame.columns))
    return table
