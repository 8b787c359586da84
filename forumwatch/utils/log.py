# forumwatch/utils/log.py
# Root logging for the forumwatch process: stderr always, plus a rotating
# forumwatch.log when LOG_TO_FILE=true. Configured once, on first get_logger().

from __future__ import annotations
import logging
import os
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import List, Optional

_FORMATTER = logging.Formatter(
    "%(asctime)s %(levelname)s %(name)s: %(message)s",
    datefmt="%Y-%m-%d %H:%M:%S",
)

_configured = False


def _resolve_level(level: Optional[str]) -> int:
    name = (level or os.getenv("LOG_LEVEL", "INFO")).upper()
    lvl = getattr(logging, name, None)
    return lvl if isinstance(lvl, int) else logging.INFO


def _file_handler() -> RotatingFileHandler:
    log_dir = Path(os.getenv("LOG_DIR", "logs"))
    log_dir.mkdir(parents=True, exist_ok=True)
    return RotatingFileHandler(
        log_dir / "forumwatch.log",
        maxBytes=int(os.getenv("LOG_MAX_BYTES", "1048576")),
        backupCount=int(os.getenv("LOG_BACKUPS", "5")),
        encoding="utf-8",
    )


def _handlers() -> List[logging.Handler]:
    out: List[logging.Handler] = [logging.StreamHandler()]
    if os.getenv("LOG_TO_FILE", "false").strip().lower() in ("1", "true", "yes", "on"):
        out.append(_file_handler())
    return out


def configure(level: Optional[str] = None) -> None:
    """Install forumwatch handlers on the root logger, replacing any present."""
    global _configured
    lvl = _resolve_level(level)
    root = logging.getLogger()
    for h in list(root.handlers):
        root.removeHandler(h)
    for h in _handlers():
        h.setFormatter(_FORMATTER)
        h.setLevel(lvl)
        root.addHandler(h)
    root.setLevel(lvl)
    _configured = True


def set_level(level: str) -> None:
    """Change the level of the root logger and its handlers after setup."""
    if not _configured:
        configure(level)
        return
    lvl = _resolve_level(level)
    root = logging.getLogger()
    root.setLevel(lvl)
    for h in root.handlers:
        h.setLevel(lvl)


def get_logger(name: str) -> logging.Logger:
    """Return a named logger, configuring the root on first use.

    Usage:
        from .utils.log import get_logger
        logger = get_logger("forumwatch")
    """
    if not _configured:
        configure()
    return logging.getLogger(name)
