"""Errors raised by customer synchronization."""

from __future__ import annotations

from typing import Final

from customersync.domain.model.errors import ConflictError

EXISTING_CUSTOMER_FOR_EXTERNAL_CUSTOMER: Final[str] = "Existing customer for externalCustomer"

__all__ = ["EXISTING_CUSTOMER_FOR_EXTERNAL_CUSTOMER", "ConflictError"]
