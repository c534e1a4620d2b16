"""Logging setup for applications embedding the path finder.

The package disables its own loguru output on import; call
:func:`configure_logging` (or ``logger.enable("grid_pathfinder")``) to see it.
"""

import sys
from pathlib import Path
from typing import Optional, Union

from loguru import logger

LOG_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | "
    "<level>{level: <8}</level> | "
    "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - "
    "<level>{message}</level>"
)

FILE_FORMAT = (
    "{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {name}:{function}:{line} - {message}"
)


def configure_logging(
    level: str = "INFO", log_dir: Optional[Union[str, Path]] = None
) -> None:
    """Route grid_pathfinder logs to stderr and, optionally, a daily file.

    Args:
        level: Minimum level for every sink.
        log_dir: Directory for ``grid_pathfinder_{date}.log`` files; no file
            sink when ``None``.
    """
    logger.remove()
    logger.add(sys.stderr, level=level, format=LOG_FORMAT)

    if log_dir is not None:
        log_path = Path(log_dir)
        log_path.mkdir(parents=True, exist_ok=True)
        logger.add(
            log_path / "grid_pathfinder_{time:YYYY-MM-DD}.log",
            rotation="00:00",
            retention="7 days",
            level=level,
            encoding="utf-8",
            format=FILE_FORMAT,
        )

    logger.enable("grid_pathfinder")
