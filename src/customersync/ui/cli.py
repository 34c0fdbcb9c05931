from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from signal import SIGINT, signal
from typing import TYPE_CHECKING

from dotenv import load_dotenv

from customersync.adapters.external import (
    PayloadError,
    read_external_customers,
    translate_external_customer,
)
from customersync.app import sync_external_customers
from customersync.config import ConfigurationError, configure_logging, resolve_log_level

if TYPE_CHECKING:
    from collections.abc import Sequence
    from types import FrameType

    from customersync.domain.model import ExternalCustomer

log = logging.getLogger(__name__)


def _parse_args(argv: Sequence[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Synchronise external customers")
    parser.add_argument(
        "--log-level",
        type=str,
        help="Logging level name (defaults to CUSTOMERSYNC_LOG_LEVEL or INFO)",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    sync = subparsers.add_parser("sync", help="Sync customers from a JSON-lines file")
    sync.add_argument(
        "path",
        type=Path,
        help="File with one external customer JSON object per line",
    )
    sync.add_argument(
        "--database-uri",
        type=str,
        help="SQLAlchemy database URI (defaults to DATABASE_URI or the data dir)",
    )

    return parser.parse_args(list(argv))


def _load_customers(path: Path) -> list[ExternalCustomer]:
    if not path.is_file():
        raise ValueError(f"No such input file: {path}")
    return [translate_external_customer(payload) for payload in read_external_customers(path)]


def main(argv: Sequence[str] | None = None) -> None:
    """Main application entry point."""
    args_list = list(argv) if argv is not None else list(sys.argv[1:])
    try:
        parsed_args = _parse_args(args_list)
        configure_logging(level=resolve_log_level(parsed_args.log_level))
        customers = _load_customers(parsed_args.path)
    except (ValueError, ConfigurationError):
        configure_logging()
        log.exception("CLI validation error")
        sys.exit(2)

    try:
        result = sync_external_customers(customers, database_uri=parsed_args.database_uri)
        log.info(
            "Customer sync finished: processed=%s, created=%s, updated=%s, conflicts=%s",
            result.processed,
            result.created,
            result.updated,
            ", ".join(result.conflicts) or "none",
        )
    except Exception:
        log.exception("Fatal error during sync")
        sys.exit(1)


def sigint_handler(_signal_received: int, _frame: FrameType | None) -> None:
    """Handle SIGINT (Ctrl+C) gracefully."""
    log.info("Closed by user (Ctrl+C)")
    sys.exit(0)


def run() -> None:
    load_dotenv()
    signal(SIGINT, sigint_handler)
    main()


if __name__ == "__main__":
    run()
