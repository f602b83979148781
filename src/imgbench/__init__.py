"""Sequential vs. threaded batch image transformation benchmark."""

from .config import (
    BenchmarkConfig,
    ParallelConfig,
    TransformConfig,
    load_benchmark_config,
)
from .cli import app

__all__ = [
    "BenchmarkConfig",
    "ParallelConfig",
    "TransformConfig",
    "load_benchmark_config",
    "app",
]
