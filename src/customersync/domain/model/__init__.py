"""Public domain model surface."""

from __future__ import annotations

from customersync.domain.model.customer import Customer, ExternalCustomer, ShoppingList
from customersync.domain.model.enums import CustomerType
from customersync.domain.model.errors import ConflictError
from customersync.domain.model.primitives import (
    Address,
    CompanyNumber,
    ExternalId,
    InternalId,
    StoreId,
)

__all__ = [
    "Address",
    "CompanyNumber",
    "ConflictError",
    "Customer",
    "CustomerType",
    "ExternalCustomer",
    "ExternalId",
    "InternalId",
    "ShoppingList",
    "StoreId",
]
