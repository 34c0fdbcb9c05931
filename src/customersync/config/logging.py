"""Shared logging helpers for customersync."""

from __future__ import annotations

import logging
import os
from typing import Final

from .errors import ConfigurationError

LOG_LEVEL_ENV_VAR: Final[str] = "CUSTOMERSYNC_LOG_LEVEL"


def resolve_log_level(value: str | None = None) -> int:
    """Translate a level name (``DEBUG``, ``info`` ...) into a ``logging`` level.

    Falls back to ``CUSTOMERSYNC_LOG_LEVEL`` and then INFO when no value is given.
    """

    name = value if value is not None else os.getenv(LOG_LEVEL_ENV_VAR)
    if name is None or not name.strip():
        return logging.INFO
    level = logging.getLevelNamesMapping().get(name.strip().upper())
    if level is None:
        raise ConfigurationError(f"Unknown log level: {name}")
    return level


def configure_logging(*, level: int | None = None, force: bool = False) -> None:
    """Initialise the root logger once with a terse CLI format.

    Pass ``force=True`` to reconfigure during tests or specialised entry points.
    """

    logging.basicConfig(
        level=resolve_log_level() if level is None else level,
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
        datefmt="%H:%M:%S",
        force=force,
    )
