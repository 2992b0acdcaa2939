"""Logging configuration using Loguru."""

import sys
from pathlib import Path
from typing import Optional, Union

from loguru import logger

from siterisk.utils.config import get_project_root, settings


def setup_logging(level: Optional[str] = None, log_dir: Optional[Union[str, Path]] = None) -> None:
    """Route loguru to stderr and, when enabled, to rotating files.

    File sinks are written when ``logging.file_enabled`` is set or an
    explicit ``log_dir`` is passed.
    """
    cfg = settings.logging
    level = level or cfg.level
    logger.remove()

    logger.add(sys.stderr, format=cfg.format, level=level, colorize=True)

    if log_dir is None and not cfg.file_enabled:
        logger.debug(f"Logging initialized - Level: {level} (console only)")
        return

    log_dir = Path(log_dir) if log_dir is not None else get_project_root() / "logs"
    log_dir.mkdir(parents=True, exist_ok=True)

    # Full log, then errors only
    for filename, sink_level in (("siterisk.log", level), ("errors.log", "ERROR")):
        logger.add(
            log_dir / filename,
            format=cfg.format,
            level=sink_level,
            rotation=cfg.rotation,
            retention=cfg.retention,
            compression="zip",
        )

    logger.info(f"Logging initialized - Level: {level}, files in {log_dir}")
