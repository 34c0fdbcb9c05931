"""Ports for persisting customer records."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from customersync.domain.model import CompanyNumber, Customer, ExternalId, ShoppingList


@runtime_checkable
class CustomerDataLayer(Protocol):
    """Lookup and write contract the synchronization core consumes."""

    def find_by_external_id(self, external_id: ExternalId) -> Customer | None: ...

    def find_by_company_number(self, company_number: CompanyNumber) -> Customer | None: ...

    def find_by_master_external_id(self, external_id: ExternalId) -> Customer | None: ...

    def create(self, customer: Customer) -> Customer:
        """Persist a new customer and assign its internal id."""
        ...

    def update(self, customer: Customer) -> Customer: ...

    def attach_shopping_list(self, customer: Customer, shopping_list: ShoppingList) -> None: ...
