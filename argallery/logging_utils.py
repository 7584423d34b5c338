"""Mini README: Application-wide logging helpers for the AR model gallery.

Structure:
    * configure_root_logger - attach the gallery handler and apply a level.
    * get_logger - module logger factory that guarantees baseline configuration.

Usage:
    Modules declare ``LOGGER = get_logger(__name__)`` at import time, which
    installs the handler at INFO. The CLI and the application factory later
    call ``configure_root_logger(settings.log_level)`` so ``ARGALLERY_LOG_LEVEL``
    takes effect; repeated calls only change the level and never stack
    handlers across uvicorn reloads.
"""

from __future__ import annotations

import logging
from typing import Optional, Union

_HANDLER_NAME = "argallery"

# Per-part multipart parser chatter drowns out upload logs at DEBUG.
_QUIET_LOGGERS = ("multipart", "python_multipart")


def _resolve_level(level: Union[int, str]) -> int:
    if isinstance(level, int):
        return level
    resolved = logging.getLevelName(level.strip().upper())
    if not isinstance(resolved, int):
        raise ValueError(f"Unknown log level: {level!r}")
    return resolved


def configure_root_logger(level: Union[int, str] = logging.INFO) -> None:
    """Install the gallery handler once and apply ``level`` to the root logger."""

    root_logger = logging.getLogger()
    root_logger.setLevel(_resolve_level(level))
    if any(handler.get_name() == _HANDLER_NAME for handler in root_logger.handlers):
        return

    handler = logging.StreamHandler()
    handler.set_name(_HANDLER_NAME)
    handler.setFormatter(
        logging.Formatter(
            "[%(asctime)s] [%(levelname)s] [pid %(process)d] %(name)s - %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )
    )
    root_logger.addHandler(handler)
    for name in _QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Return a module-specific logger."""

    if not any(
        handler.get_name() == _HANDLER_NAME for handler in logging.getLogger().handlers
    ):
        configure_root_logger()
    return logging.getLogger(name)
