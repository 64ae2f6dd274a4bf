# ffmovie/common/logging.py
from __future__ import annotations

import logging
from typing import Optional

ROOT_LOGGER = "ffmovie"


def get_logger(name: str = ROOT_LOGGER, level: Optional[int | str] = None) -> logging.Logger:
    """
    Return a logger that plays nice with Uvicorn if running under it.
    If no handlers are set, we add a basicConfig once. Without an explicit
    `level` the logger inherits from the "ffmovie" logger (see configure_logging).
    """
    logger = logging.getLogger(name)
    if not logging.getLogger().handlers and not logger.handlers:
        logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    if level is not None:
        logger.setLevel(level)
    return logger


def configure_logging(level: int | str) -> logging.Logger:
    """Set the level for every ffmovie.* logger at once, e.g. from settings.log_level."""
    if isinstance(level, str):
        level = level.upper()
    return get_logger(ROOT_LOGGER, level)
