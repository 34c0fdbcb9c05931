"""Errors raised by the customer domain model."""

from __future__ import annotations


class ConflictError(RuntimeError):
    """Incoming record contradicts an identity already held by the store."""

    def __init__(self, message: str, *, external_id: str | None = None) -> None:
        super().__init__(message)
        self.external_id = external_id
