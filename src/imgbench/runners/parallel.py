"""Thread-per-chunk benchmark runner."""

from __future__ import annotations

import threading
from pathlib import Path
from time import perf_counter
from typing import List, Optional, Sequence

from ..logging_utils import get_logger
from ..transform import TransformPipeline
from .base import RunStats, TransformResult


def _contiguous_chunks(paths: Sequence[str], worker_count: int) -> List[List[str]]:
    chunk_size = len(paths) // worker_count
    if chunk_size == 0:
        return [[path] for path in paths]
    chunks = [
        list(paths[offset : offset + chunk_size])
        for offset in range(0, chunk_size * worker_count, chunk_size)
    ]
    # The last chunk absorbs the remainder.
    chunks[-1].extend(paths[chunk_size * worker_count :])
    return chunks


def _balanced_chunks(paths: Sequence[str], worker_count: int) -> List[List[str]]:
    chunk_size, remainder = divmod(len(paths), worker_count)
    chunks: List[List[str]] = []
    offset = 0
    for index in range(min(worker_count, len(paths))):
        size = chunk_size + (1 if index < remainder else 0)
        chunks.append(list(paths[offset : offset + size]))
        offset += size
    return chunks


def partition_paths(
    paths: Sequence[str], worker_count: int, strategy: str = "contiguous"
) -> List[List[str]]:
    """Split ``paths`` into ordered, disjoint chunks covering every path once.

    ``contiguous`` cuts ``len(paths) // worker_count`` sized chunks and lets
    the last one absorb the remainder; with more workers than paths each
    path gets its own chunk. ``balanced`` hands the remainder out one path
    at a time to the leading chunks and never exceeds ``worker_count``.
    """
    if worker_count < 1:
        raise ValueError(f"Worker count must be at least 1, got {worker_count}")
    if strategy == "contiguous":
        return _contiguous_chunks(paths, worker_count)
    if strategy == "balanced":
        return _balanced_chunks(paths, worker_count)
    raise ValueError(f"Unsupported partition strategy: {strategy}")


class ResultSink:
    """Results appended by several workers, guarded by a single lock.

    The first failure trips ``aborted`` so the remaining workers stop before
    starting their next image.
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._results: List[TransformResult] = []
        self._failures: List[BaseException] = []
        self.aborted = threading.Event()

    def add(self, result: TransformResult) -> None:
        with self._lock:
            self._results.append(result)

    def fail(self, error: BaseException) -> None:
        with self._lock:
            self._failures.append(error)
        self.aborted.set()

    @property
    def first_failure(self) -> Optional[BaseException]:
        with self._lock:
            return self._failures[0] if self._failures else None

    def snapshot(self) -> List[TransformResult]:
        with self._lock:
            return list(self._results)


class ParallelRunner:
    def __init__(self, pipeline: TransformPipeline, strategy: str = "contiguous"):
        self.pipeline = pipeline
        self.strategy = strategy
        self.logger = get_logger("ParallelRunner")

    def _work(self, chunk: List[str], output_dir: str | Path, sink: ResultSink) -> None:
        try:
            for path in chunk:
                if sink.aborted.is_set():
                    return
                sink.add(self.pipeline.process(path, output_dir))
        except Exception as exc:
            sink.fail(exc)

    def run(self, paths: Sequence[str], output_dir: str | Path, worker_count: int) -> RunStats:
        chunks = partition_paths(paths, worker_count, self.strategy)
        Path(output_dir).mkdir(parents=True, exist_ok=True)
        sink = ResultSink()

        start = perf_counter()
        workers = [
            threading.Thread(
                target=self._work,
                args=(chunk, output_dir, sink),
                name=f"worker-{index}",
            )
            for index, chunk in enumerate(chunks)
        ]
        for worker in workers:
            worker.start()
        for worker in workers:
            worker.join()
        duration = perf_counter() - start

        failure = sink.first_failure
        if failure is not None:
            raise failure

        results = sink.snapshot()
        self.logger.info(
            "Parallel runner transformed %s images with %s workers across %s chunks in %.2fs",
            len(results),
            worker_count,
            len(chunks),
            duration,
        )
        return RunStats(
            runner_type="parallel",
            duration_seconds=duration,
            results=results,
            worker_count=worker_count,
            chunk_count=len(chunks),
        )
