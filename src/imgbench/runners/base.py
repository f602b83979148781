"""Shared runner models."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional, Tuple

BYTES_PER_MEGABYTE = 1024 * 1024

Dimensions = Tuple[int, int]


@dataclass(frozen=True)
class TransformResult:
    source_path: str
    output_path: str
    processing_duration: float
    original_size_bytes: int
    original_dimensions: Dimensions
    output_size_bytes: int
    output_dimensions: Dimensions

    @property
    def original_size_mb(self) -> float:
        return self.original_size_bytes / BYTES_PER_MEGABYTE

    @property
    def output_size_mb(self) -> float:
        return self.output_size_bytes / BYTES_PER_MEGABYTE


@dataclass
class RunStats:
    runner_type: str
    duration_seconds: float
    results: List[TransformResult] = field(default_factory=list)
    worker_count: Optional[int] = None
    chunk_count: int = 1

    @property
    def images_processed(self) -> int:
        return len(self.results)

    @property
    def label(self) -> str:
        if self.worker_count is None:
            return self.runner_type
        return f"{self.runner_type}-{self.worker_count}"
