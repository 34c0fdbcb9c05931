"""Translate external customer payloads into domain objects."""

from __future__ import annotations

from typing import TYPE_CHECKING

from customersync.domain.model import Address, ExternalCustomer, ShoppingList

if TYPE_CHECKING:
    from .schema import AddressPayload, ExternalCustomerPayload


def translate_external_customer(payload: ExternalCustomerPayload) -> ExternalCustomer:
    return ExternalCustomer(
        external_id=payload.external_id,
        is_company=payload.is_company,
        company_number=payload.company_number,
        name=payload.name,
        postal_address=_build_address(payload.postal_address),
        bonus_points_balance=payload.bonus_points_balance,
        preferred_store=payload.preferred_store,
        shopping_lists=tuple(
            ShoppingList(products=list(shopping_list.products))
            for shopping_list in payload.shopping_lists
        ),
    )


def _build_address(payload: AddressPayload | None) -> Address | None:
    if payload is None:
        return None
    return Address(street=payload.street, city=payload.city, postal_code=payload.postal_code)
