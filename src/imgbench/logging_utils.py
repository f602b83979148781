"""Rich-backed loggers shared by the collector, pipeline and runners.

Records go to stderr so they never interleave with the report tables on
stdout, and each line carries the thread name (``worker-N`` inside a
parallel run, ``MainThread`` otherwise).
"""

from __future__ import annotations

import logging

from rich.console import Console
from rich.logging import RichHandler


_CONSOLE = Console(width=120, stderr=True)
_LOGGER_CACHE: dict[str, logging.Logger] = {}


def get_logger(name: str, level: int = logging.INFO) -> logging.Logger:
    if name in _LOGGER_CACHE:
        return _LOGGER_CACHE[name]

    handler = RichHandler(console=_CONSOLE, show_path=False)
    formatter = logging.Formatter("[%(threadName)s] %(message)s")
    handler.setFormatter(formatter)

    logger = logging.getLogger(f"imgbench.{name}")
    logger.setLevel(level)
    logger.addHandler(handler)
    logger.propagate = False

    _LOGGER_CACHE[name] = logger
    return logger


def set_global_log_level(level: int) -> None:
    for logger in _LOGGER_CACHE.values():
        logger.setLevel(level)
