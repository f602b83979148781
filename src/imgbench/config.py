"""Configuration dataclasses and helpers for the image benchmark."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Literal

import yaml

RESAMPLING_FILTERS = ("lanczos", "bicubic", "bilinear", "nearest")
PARTITION_STRATEGIES = ("contiguous", "balanced")


@dataclass
class TransformConfig:
    width: int = 800
    height: int = 600
    contrast: float = 30.0
    resample: Literal["lanczos", "bicubic", "bilinear", "nearest"] = "lanczos"
    allow_upscale: bool = True
    preserve_aspect_ratio: bool = False


@dataclass
class ParallelConfig:
    worker_counts: list[int] = field(default_factory=lambda: [2, 4, 7, 10])
    strategy: Literal["contiguous", "balanced"] = "contiguous"


@dataclass
class BenchmarkConfig:
    input_dir: str = "images"
    sequential_output_dir: str = "results/with_out_thread_images"
    parallel_output_dir: str = "results/with_thread_images"
    extensions: list[str] = field(
        default_factory=lambda: ["jpeg", "jpg", "png", "webp"]
    )
    transform: TransformConfig = field(default_factory=TransformConfig)
    parallel: ParallelConfig = field(default_factory=ParallelConfig)

    @property
    def input_path(self) -> Path:
        return Path(self.input_dir).expanduser()

    @property
    def sequential_output_path(self) -> Path:
        return Path(self.sequential_output_dir).expanduser()

    @property
    def parallel_output_path(self) -> Path:
        return Path(self.parallel_output_dir).expanduser()

    def validate(self) -> "BenchmarkConfig":
        if self.transform.width < 1 or self.transform.height < 1:
            raise ValueError(
                f"Target size must be positive, got {self.transform.width}x{self.transform.height}"
            )
        if self.transform.resample not in RESAMPLING_FILTERS:
            raise ValueError(f"Unsupported resampling filter: {self.transform.resample}")
        if self.parallel.strategy not in PARTITION_STRATEGIES:
            raise ValueError(f"Unsupported partition strategy: {self.parallel.strategy}")
        for count in self.parallel.worker_counts:
            if count < 1:
                raise ValueError(f"Worker count must be at least 1, got {count}")
        return self


def _load_section(data: Dict[str, Any], section_key: str, target_type: Any) -> Any:
    section = data.get(section_key, {})
    return target_type(**section)


def load_benchmark_config(path: str | Path) -> BenchmarkConfig:
    config_path = Path(path)
    if not config_path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    with config_path.open("r", encoding="utf-8") as handle:
        raw: Dict[str, Any] = yaml.safe_load(handle) or {}
    if not isinstance(raw, dict):
        raise ValueError(f"Config file must hold a mapping: {config_path}")

    defaults = BenchmarkConfig()
    config = BenchmarkConfig(
        input_dir=raw.get("input_dir", defaults.input_dir),
        sequential_output_dir=raw.get(
            "sequential_output_dir", defaults.sequential_output_dir
        ),
        parallel_output_dir=raw.get("parallel_output_dir", defaults.parallel_output_dir),
        extensions=raw.get("extensions", defaults.extensions),
        transform=_load_section(raw, "transform", TransformConfig),
        parallel=_load_section(raw, "parallel", ParallelConfig),
    )
    return config.validate()
