"""Simple logging wrapper supporting optional file logging."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional, Set

from . import config_loader

_FORMAT = "%(asctime)s - %(levelname)s - %(message)s"

# names handed out by get_logger, re-levelled when the config changes
_CONFIGURED: Set[str] = set()


class _ConfigFileHandler(logging.FileHandler):
    """File handler attached because of the configured ``log_file``."""


def _sync_config_file_handler(logger: logging.Logger, file_path: Optional[str]) -> None:
    target = Path(file_path).resolve() if file_path else None
    for handler in list(logger.handlers):
        if isinstance(handler, _ConfigFileHandler):
            if target is not None and Path(handler.baseFilename) == target:
                return
            logger.removeHandler(handler)
            handler.close()
    if target is None:
        return
    target.parent.mkdir(parents=True, exist_ok=True)
    f_handler = _ConfigFileHandler(target, encoding="utf-8")
    f_handler.setFormatter(logging.Formatter(_FORMAT))
    logger.addHandler(f_handler)


def get_logger(name: str, file_path: str | None = None) -> logging.Logger:
    """Return configured logger, attaching ``file_path`` handler if provided.

    Without ``file_path`` the configured ``log_file`` is used and kept in
    sync on later calls; the level follows the configured ``log_level``.
    """

    logger = logging.getLogger(name)
    if not logger.handlers:
        handler = logging.StreamHandler()
        formatter = logging.Formatter(_FORMAT)
        handler.setFormatter(formatter)
        logger.addHandler(handler)
        if file_path:
            Path(file_path).parent.mkdir(parents=True, exist_ok=True)
            f_handler = logging.FileHandler(file_path, encoding="utf-8")
            f_handler.setFormatter(formatter)
            logger.addHandler(f_handler)
    if not file_path:
        _sync_config_file_handler(logger, config_loader.LOG_FILE)
    logger.setLevel(getattr(logging, config_loader.LOG_LEVEL, logging.INFO))
    _CONFIGURED.add(name)
    return logger


def refresh_loggers() -> None:
    """Re-apply the configured level and log file to every logger from :func:`get_logger`."""
    for name in sorted(_CONFIGURED):
        get_logger(name)
