"""Field merge policies applied by the reconciler.

Primary records get the full merge; duplicate records only follow the name.
Each policy returns the names of the fields it assigned.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from customersync.domain.model import Customer, ExternalCustomer
    from customersync.domain.ports import CustomerDataLayer


class MergePolicy(Protocol):
    """Copy data from an external customer onto a stored customer."""

    def __call__(self, external: ExternalCustomer, customer: Customer) -> tuple[str, ...]: ...


class FullMerge:
    """Merge every business field; shopping lists are attached through the data layer."""

    def __init__(self, customers: CustomerDataLayer) -> None:
        self._customers = customers

    def __call__(self, external: ExternalCustomer, customer: Customer) -> tuple[str, ...]:
        customer.assign_customer_type(external.customer_type)
        customer.name = external.name
        written = ["name", "customer_type"]
        if external.is_company:
            customer.company_number = external.company_number
            written.append("company_number")
        customer.address = external.postal_address
        written.append("address")
        if (
            not external.is_company
            and customer.bonus_points_balance != external.bonus_points_balance
        ):
            customer.bonus_points_balance = external.bonus_points_balance
            written.append("bonus_points_balance")
        customer.preferred_store = external.preferred_store
        written.append("preferred_store")
        for shopping_list in external.shopping_lists:
            self._customers.attach_shopping_list(customer, shopping_list)
        if external.shopping_lists:
            written.append("shopping_lists")
        return tuple(written)


def merge_name_only(external: ExternalCustomer, customer: Customer) -> tuple[str, ...]:
    customer.name = external.name
    return ("name",)
