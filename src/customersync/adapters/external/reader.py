"""Read external customer payloads from JSON-lines files."""

from __future__ import annotations

import json
from logging import getLogger
from typing import TYPE_CHECKING

from pydantic import ValidationError

from .schema import ExternalCustomerPayload

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator
    from pathlib import Path

log = getLogger(__name__)


class PayloadError(ValueError):
    """Raised when an input line is not a valid external customer payload."""

    def __init__(self, message: str, *, line_number: int) -> None:
        super().__init__(f"line {line_number}: {message}")
        self.line_number = line_number


def parse_external_customer_lines(lines: Iterable[str]) -> Iterator[ExternalCustomerPayload]:
    for line_number, line in enumerate(lines, start=1):
        if not line.strip():
            continue
        try:
            raw = json.loads(line)
        except json.JSONDecodeError as exc:
            raise PayloadError(f"invalid JSON ({exc.msg})", line_number=line_number) from exc
        try:
            yield ExternalCustomerPayload.model_validate(raw)
        except ValidationError as exc:
            raise PayloadError(str(exc), line_number=line_number) from exc


def read_external_customers(path: Path) -> Iterator[ExternalCustomerPayload]:
    log.info("Reading external customers from %s", path)
    with path.open(encoding="utf-8") as handle:
        yield from parse_external_customer_lines(handle)
