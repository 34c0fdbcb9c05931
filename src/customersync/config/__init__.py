"""Application configuration helpers."""

from __future__ import annotations

from .errors import ConfigurationError
from .logging import configure_logging, resolve_log_level
from .storage import DatabaseConfig, customer_store_dir, get_database_config

__all__ = [
    "ConfigurationError",
    "DatabaseConfig",
    "configure_logging",
    "customer_store_dir",
    "get_database_config",
    "resolve_log_level",
]
