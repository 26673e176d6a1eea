# vidmeta/common/logging.py
from __future__ import annotations

import logging

_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def _as_level(level: int | str) -> int:
    if isinstance(level, int):
        return level
    resolved = logging.getLevelName(str(level).strip().upper())
    return resolved if isinstance(resolved, int) else logging.INFO


def get_logger(name: str = "vidmeta", level: int | str = logging.INFO) -> logging.Logger:
    """
    Return the package logger. When nothing has configured the root logger yet
    (plain scripts, pytest without -p logging), install a basicConfig once;
    under uvicorn its handlers are already in place and are left alone.
    """
    lvl = _as_level(level)
    logger = logging.getLogger(name)
    if not logging.getLogger().handlers and not logger.handlers:
        logging.basicConfig(level=lvl, format=_FORMAT)
    logger.setLevel(lvl)
    return logger
