"""Single-threaded benchmark runner."""

from __future__ import annotations

from pathlib import Path
from time import perf_counter
from typing import List, Sequence

from ..logging_utils import get_logger
from ..transform import TransformPipeline
from .base import RunStats, TransformResult


class SequentialRunner:
    def __init__(self, pipeline: TransformPipeline):
        self.pipeline = pipeline
        self.logger = get_logger("SequentialRunner")

    def run(self, paths: Sequence[str], output_dir: str | Path) -> RunStats:
        Path(output_dir).mkdir(parents=True, exist_ok=True)
        start = perf_counter()
        results: List[TransformResult] = []
        for path in paths:
            results.append(self.pipeline.process(path, output_dir))
        duration = perf_counter() - start

        self.logger.info(
            "Sequential runner transformed %s images in %.2fs", len(results), duration
        )
        return RunStats(
            runner_type="sequential",
            duration_seconds=duration,
            results=results,
        )
