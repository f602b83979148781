from pathlib import Path
from typing import Callable, List

import pytest
from PIL import Image


@pytest.fixture
def image_dir(tmp_path: Path) -> Path:
    directory = tmp_path / "images"
    directory.mkdir()
    Image.new("RGB", (1920, 1080), (200, 120, 40)).save(directory / "a.jpg")
    Image.new("RGB", (640, 480), (10, 80, 160)).save(directory / "b.png")
    return directory


@pytest.fixture
def make_images(tmp_path: Path) -> Callable[[int], List[str]]:
    directory = tmp_path / "batch"
    directory.mkdir()

    def _make(count: int) -> List[str]:
        paths = []
        for index in range(count):
            path = directory / f"img_{index:03d}.png"
            shade = (index * 37) % 256
            Image.new("RGB", (64, 48), (shade, 255 - shade, 90)).save(path)
            paths.append(str(path))
        return paths

    return _make
