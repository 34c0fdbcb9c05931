"""Locate the customer store database."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Final, Literal

DATABASE_URI_ENV_VAR: Final[str] = "DATABASE_URI"
DATA_DIR_ENV_VAR: Final[str] = "CUSTOMERSYNC_DATA_DIR"
DEFAULT_DB_FILENAME: Final[str] = "customers.db"

type DatabaseSource = Literal["argument", "environment", "data_dir"]


@dataclass(frozen=True, slots=True)
class DatabaseConfig:
    uri: str
    source: DatabaseSource


def customer_store_dir() -> Path:
    """Directory of the default SQLite customer store.

    ``CUSTOMERSYNC_DATA_DIR`` wins; otherwise the platform data home
    (``LOCALAPPDATA`` on Windows, ``XDG_DATA_HOME`` elsewhere) is used.
    """

    override = os.getenv(DATA_DIR_ENV_VAR)
    if override:
        return Path(override).expanduser().resolve()
    if os.name == "nt":
        data_home = os.getenv("LOCALAPPDATA") or Path.home() / "AppData" / "Local"
    else:
        data_home = os.getenv("XDG_DATA_HOME") or Path.home() / ".local" / "share"
    return (Path(data_home) / "customersync").expanduser().resolve()


def get_database_config(database_uri: str | None = None) -> DatabaseConfig:
    """Pick the customer store URI: argument, then ``DATABASE_URI``, then the data dir.

    Falling back to the data dir creates it so SQLite can open the file.
    """

    if database_uri:
        return DatabaseConfig(uri=database_uri, source="argument")
    env_uri = (os.getenv(DATABASE_URI_ENV_VAR) or "").strip()
    if env_uri:
        return DatabaseConfig(uri=env_uri, source="environment")
    store_dir = customer_store_dir()
    store_dir.mkdir(parents=True, exist_ok=True)
    return DatabaseConfig(
        uri=f"sqlite+pysqlite:///{store_dir / DEFAULT_DB_FILENAME}",
        source="data_dir",
    )
