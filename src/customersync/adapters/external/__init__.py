"""Public interface for the external customer feed adapter."""

from __future__ import annotations

from .reader import PayloadError, parse_external_customer_lines, read_external_customers
from .schema import AddressPayload, ExternalCustomerPayload, ShoppingListPayload
from .translator import translate_external_customer

__all__ = [
    "AddressPayload",
    "ExternalCustomerPayload",
    "PayloadError",
    "ShoppingListPayload",
    "parse_external_customer_lines",
    "read_external_customers",
    "translate_external_customer",
]
