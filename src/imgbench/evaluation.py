"""Run the sequential baseline followed by every threaded experiment."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, List, Optional, Sequence

from .config import BenchmarkConfig
from .runners.base import RunStats
from .runners.parallel import ParallelRunner
from .runners.sequential import SequentialRunner
from .transform import TransformPipeline


@dataclass
class BenchmarkScenario:
    name: str
    worker_count: Optional[int]


def build_scenarios(config: BenchmarkConfig) -> List[BenchmarkScenario]:
    scenarios = [BenchmarkScenario(name="sequential", worker_count=None)]
    for count in config.parallel.worker_counts:
        scenarios.append(BenchmarkScenario(name=f"parallel-{count}", worker_count=count))
    return scenarios


def iter_experiments(config: BenchmarkConfig, paths: Sequence[str]) -> Iterator[RunStats]:
    """Yield the stats of each experiment as soon as it finishes.

    Experiments never overlap. A failure inside one propagates immediately
    and nothing further runs.
    """
    pipeline = TransformPipeline(config.transform, config.input_path)
    sequential = SequentialRunner(pipeline)
    parallel = ParallelRunner(pipeline, strategy=config.parallel.strategy)
    for scenario in build_scenarios(config):
        if scenario.worker_count is None:
            yield sequential.run(paths, config.sequential_output_path)
        else:
            yield parallel.run(paths, config.parallel_output_path, scenario.worker_count)

