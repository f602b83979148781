"""Find the images a benchmark run will transform."""

from __future__ import annotations

from pathlib import Path
from typing import Iterable, List

from .errors import DirectoryNotFoundError
from .logging_utils import get_logger

SUPPORTED_EXTENSIONS = ("jpeg", "jpg", "png", "webp")

logger = get_logger("PathCollector")


class PathCollector:
    def __init__(self, extensions: Iterable[str] = SUPPORTED_EXTENSIONS):
        self.extensions = {ext.lower().lstrip(".") for ext in extensions}

    def matches(self, path: Path) -> bool:
        return path.suffix.lower().lstrip(".") in self.extensions

    def collect(self, directory: Path | str) -> List[str]:
        """Return the image paths directly inside ``directory``.

        Sub-directories and files with other extensions are skipped. The
        result is sorted so repeated runs feed the runners identical input.
        """
        root = Path(directory)
        try:
            entries = list(root.iterdir())
        except OSError as exc:
            raise DirectoryNotFoundError(root, exc) from exc

        paths = sorted(
            str(entry) for entry in entries if entry.is_file() and self.matches(entry)
        )
        logger.debug("Collected %s images from %s", len(paths), root)
        return paths

