"""Per-image transform pipeline: grayscale, contrast, resize, save."""

from __future__ import annotations

import os
from pathlib import Path
from time import perf_counter
from typing import List

from PIL import Image

from .config import TransformConfig
from .errors import ImageOpenError, ImageSaveError, MetadataReadError
from .logging_utils import get_logger
from .runners.base import Dimensions, TransformResult

RESAMPLING = {
    "lanczos": Image.Resampling.LANCZOS,
    "bicubic": Image.Resampling.BICUBIC,
    "bilinear": Image.Resampling.BILINEAR,
    "nearest": Image.Resampling.NEAREST,
}


def contrast_table(contrast: float) -> List[int]:
    """Lookup table stretching tones around mid-grey.

    ``contrast`` is a percentage offset: 0 leaves the image untouched,
    positive values push tones away from 128, negative values pull them in.
    """
    factor = ((100.0 + contrast) / 100.0) ** 2
    table = []
    for value in range(256):
        stretched = ((value / 255.0 - 0.5) * factor + 0.5) * 255.0
        table.append(int(min(max(stretched, 0.0), 255.0)))
    return table


def to_grayscale(image: Image.Image) -> Image.Image:
    has_alpha = "A" in image.getbands() or "transparency" in image.info
    if image.mode not in ("L", "LA", "RGB", "RGBA"):
        image = image.convert("RGBA" if has_alpha else "RGB")
    return image.convert("LA" if has_alpha else "L")


def adjust_contrast(image: Image.Image, contrast: float) -> Image.Image:
    table = contrast_table(contrast)
    if image.mode == "LA":
        luminance, alpha = image.split()
        return Image.merge("LA", (luminance.point(table), alpha))
    return image.point(table)


def target_dimensions(original: Dimensions, config: TransformConfig) -> Dimensions:
    width, height = original
    target_width, target_height = config.width, config.height
    if config.preserve_aspect_ratio:
        ratio = min(target_width / width, target_height / height)
        target_width = max(1, round(width * ratio))
        target_height = max(1, round(height * ratio))
    if not config.allow_upscale and width <= target_width and height <= target_height:
        return width, height
    return target_width, target_height


def destination_path(path: str | Path, input_dir: str | Path, output_dir: str | Path) -> Path:
    """Move ``path`` from under ``input_dir`` to the same place under ``output_dir``."""
    source = Path(path)
    try:
        relative = source.relative_to(input_dir)
    except ValueError:
        relative = Path(source.name)
    return Path(output_dir) / relative


def file_size(path: str | Path) -> int:
    try:
        return os.stat(path).st_size
    except OSError as exc:
        raise MetadataReadError(path, exc) from exc


class TransformPipeline:
    def __init__(self, config: TransformConfig, input_dir: str | Path):
        self.config = config
        self.input_dir = Path(input_dir)
        self.resample = RESAMPLING[config.resample]
        self.logger = get_logger("TransformPipeline")

    def _open(self, path: str) -> Image.Image:
        try:
            image = Image.open(path)
            image.load()
        except (OSError, ValueError, Image.DecompressionBombError) as exc:
            raise ImageOpenError(path, exc) from exc
        return image

    def _save(self, image: Image.Image, source: str, destination: Path) -> None:
        try:
            image.save(destination)
        except (OSError, ValueError, KeyError) as exc:
            raise ImageSaveError(source, exc) from exc

    def process(self, path: str, output_dir: str | Path) -> TransformResult:
        """Transform one image into ``output_dir`` and measure it.

        The timer covers everything from reading the dimensions of the decoded
        image to the end of the save; opening the file and the size lookups
        afterwards are not timed. Any failure raises a ``BenchmarkError``.
        """
        image = self._open(path)
        destination = destination_path(path, self.input_dir, output_dir)
        try:
            start = perf_counter()
            original_dimensions = image.size
            transformed = adjust_contrast(to_grayscale(image), self.config.contrast)
            size = target_dimensions(original_dimensions, self.config)
            if size != transformed.size:
                transformed = transformed.resize(size, self.resample)
            self._save(transformed, path, destination)
            duration = perf_counter() - start
        finally:
            image.close()

        result = TransformResult(
            source_path=path,
            output_path=str(destination),
            processing_duration=duration,
            original_size_bytes=file_size(path),
            original_dimensions=original_dimensions,
            output_size_bytes=file_size(destination),
            output_dimensions=transformed.size,
        )
        self.logger.debug("Transformed %s in %.2fs -> %s", path, duration, destination)
        return result
