"""Fatal errors raised while collecting or transforming images.

None of these are recovered inside the package. They travel up to the CLI,
which reports them and stops the whole run.
"""

from __future__ import annotations

from pathlib import Path


class BenchmarkError(Exception):
    action = "process"

    def __init__(self, path: str | Path, cause: BaseException | str):
        self.path = str(path)
        self.cause = cause
        super().__init__(f"cannot {self.action} {self.path}: {cause}")


class DirectoryNotFoundError(BenchmarkError):
    action = "read the image directory"


class ImageOpenError(BenchmarkError):
    action = "open the image"


class ImageSaveError(BenchmarkError):
    action = "save image"


class MetadataReadError(BenchmarkError):
    action = "obtain file metadata for"
