from __future__ import annotations

import logging
from pathlib import Path

from pollers.config import load_settings


def setup_logger(name: str = "pollers", level: str | None = None) -> logging.Logger:
    settings = load_settings()

    logger = logging.getLogger(name)
    logger.setLevel((level or settings.log_level).upper())

    if logger.handlers:
        return logger  # avoid duplicate handlers

    formatter = logging.Formatter(
        fmt="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    # Console handler
    ch = logging.StreamHandler()
    ch.setFormatter(formatter)
    logger.addHandler(ch)

    # File handler, only when a log directory is configured
    if settings.logs_dir is not None:
        settings.logs_dir.mkdir(parents=True, exist_ok=True)
        log_file: Path = settings.logs_dir / "pollers.log"
        fh = logging.FileHandler(log_file)
        fh.setFormatter(formatter)
        logger.addHandler(fh)

    return logger
