"""Loguru sink setup for scripts using shpclassify."""

from __future__ import annotations

import sys

from loguru import logger

LOG_FORMAT = (
    "<green>{time:HH:mm:ss}</green> | "
    "<level>{level: <8}</level> | "
    "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - "
    "<level>{message}</level>"
)


def configure_logging(level: str = "INFO", sink=sys.stderr) -> int:
    """Replace loguru sinks with a single formatted sink.

    Parameters
    ----------
    level : str
        Minimum level, e.g. ``"DEBUG"`` to trace per-polygon progress.
    sink : file-like | str | pathlib.Path
        Any sink accepted by ``loguru.logger.add``.

    Returns
    -------
    int
        Handler id of the new sink.
    """
    logger.remove()
    return logger.add(sink, format=LOG_FORMAT, level=level)
