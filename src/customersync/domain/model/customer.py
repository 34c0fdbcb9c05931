"""Customer entities on both sides of the synchronization.

``ExternalCustomer`` is what the source system sends; ``Customer`` is the
record this system owns. A ``Customer`` only has an ``internal_id`` once the
store has persisted it.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from customersync.domain.model.enums import CustomerType
from customersync.domain.model.errors import ConflictError

if TYPE_CHECKING:
    from customersync.domain.model.primitives import (
        Address,
        CompanyNumber,
        ExternalId,
        InternalId,
        StoreId,
    )


@dataclass(eq=False, kw_only=True)
class ShoppingList:
    id: int | None = None
    products: list[str] = field(default_factory=list)


@dataclass(eq=False, kw_only=True)
class Customer:
    internal_id: InternalId | None = None
    external_id: ExternalId | None = None
    master_external_id: ExternalId | None = None
    customer_type: CustomerType | None = None
    company_number: CompanyNumber | None = None
    name: str | None = None
    address: Address | None = None
    bonus_points_balance: int | None = None
    preferred_store: StoreId | None = None

    _shopping_lists: list[ShoppingList] = field(default_factory=list["ShoppingList"], repr=False)

    @property
    def is_persisted(self) -> bool:
        return self.internal_id is not None

    @property
    def shopping_lists(self) -> tuple[ShoppingList, ...]:
        return tuple(self._shopping_lists)

    def add_shopping_list(self, shopping_list: ShoppingList) -> None:
        if shopping_list not in self._shopping_lists:
            self._shopping_lists.append(shopping_list)

    def assign_customer_type(self, customer_type: CustomerType) -> None:
        """Set the customer type; it may never change once set."""
        if self.customer_type is not None and self.customer_type is not customer_type:
            raise ConflictError(
                f"customer type of {self.external_id} is {self.customer_type}, "
                f"cannot change to {customer_type}",
                external_id=self.external_id,
            )
        self.customer_type = customer_type

    def link_external_id(self, external_id: ExternalId) -> None:
        """Point this record (and its cluster master) at ``external_id``."""
        self.external_id = external_id
        self.master_external_id = external_id


@dataclass(frozen=True, kw_only=True)
class ExternalCustomer:
    external_id: ExternalId
    is_company: bool = False
    company_number: CompanyNumber | None = None
    name: str | None = None
    postal_address: Address | None = None
    bonus_points_balance: int | None = None
    preferred_store: StoreId | None = None
    shopping_lists: tuple[ShoppingList, ...] = ()

    @property
    def customer_type(self) -> CustomerType:
        return CustomerType.COMPANY if self.is_company else CustomerType.PERSON
