"""Logging utilities for simplebounds.

This module centralises logging configuration so that all submodules use the
same logger instance.  By default the logger is silent (a ``NullHandler`` is
installed) and can be enabled or disabled globally via :func:`configure_logging`
or :func:`init_logging`.
"""

from __future__ import annotations

import json
import logging
import os
from typing import Any, Mapping, Optional

from .config import get

# Global project-wide logger -------------------------------------------------
logger = logging.getLogger("simplebounds")
logger.addHandler(logging.NullHandler())

ENV_LEVEL = "SIMPLEBOUNDS_LOG_LEVEL"

_LEVEL_MAP = {
    "warning": logging.WARNING,
    "info": logging.INFO,
    "debug": logging.DEBUG,
}


class _JSONFormatter(logging.Formatter):
    def format(self, record):
        base = {"level": record.levelname, "name": record.name, "msg": record.getMessage()}
        extra = getattr(record, "extra", None)
        if isinstance(extra, dict):
            base.update(extra)
        return json.dumps(base, ensure_ascii=False)


def _normalize(level: Optional[str]) -> int:
    if not level:
        return logging.WARNING
    return _LEVEL_MAP.get(str(level).strip().lower(), logging.WARNING)


def configure_logging(enabled: bool = True, level: int = logging.INFO, fmt: str = "text") -> None:
    """Configure the global ``simplebounds`` logger.

    Parameters
    ----------
    enabled:
        If ``True`` (default) a ``StreamHandler`` is installed.  If ``False``
        logging output is suppressed.
    level:
        Logging level used when enabling the handler.  Per-call messages of
        the projection and step routines are emitted at ``DEBUG`` level so
        they stay quiet inside optimizer loops unless explicitly requested.
    fmt:
        ``"text"`` or ``"json"``.
    """

    # Remove any existing handlers so configuration calls are idempotent.
    logger.handlers.clear()

    if enabled:
        handler = logging.StreamHandler()
        if fmt == "json":
            handler.setFormatter(_JSONFormatter())
        else:
            handler.setFormatter(logging.Formatter("[%(levelname)s] %(name)s: %(message)s"))
        logger.addHandler(handler)
        logger.setLevel(level)
    else:
        logger.addHandler(logging.NullHandler())
        logger.setLevel(logging.CRITICAL + 1)


def init_logging(level: int | str | None = None, fmt: str = "text") -> None:
    """Enable logging at ``level`` (``"info"``, ``"debug"`` or an int); ``"none"`` silences it.

    The ``SIMPLEBOUNDS_LOG_LEVEL`` environment variable takes precedence.
    """
    env = os.getenv(ENV_LEVEL)
    if env:
        level = env
    if isinstance(level, str) and level.strip().lower() == "none":
        configure_logging(False)
        return
    lvl = _normalize(level) if isinstance(level, str) or level is None else int(level)
    configure_logging(True, lvl, fmt)


def init_logging_from_cfg(cfg: Optional[Mapping[str, Any]]) -> None:
    """Initialise logging from the ``logging`` section of a settings mapping."""
    cfg = cfg or {}
    init_logging(get(cfg, "logging.level"), get(cfg, "logging.format", "text"))


__all__ = ["logger", "configure_logging", "init_logging", "init_logging_from_cfg"]
