"""Customer data layer backed by a SQLAlchemy session."""

from __future__ import annotations

from typing import TYPE_CHECKING

from sqlalchemy import select

from customersync.adapters.sqlalchemy.mappings import customer_table
from customersync.domain.model import Customer

if TYPE_CHECKING:
    from sqlalchemy import ColumnElement
    from sqlalchemy.orm import Session

    from customersync.domain.model import CompanyNumber, ExternalId, ShoppingList


class SqlAlchemyCustomerDataLayer:
    """Lookups return the oldest matching row, except the master lookup.

    ``find_by_master_external_id`` returns the newest row of a cluster because
    duplicates are always created after their canonical record.
    """

    def __init__(self, session: Session) -> None:
        self.session = session

    def find_by_external_id(self, external_id: ExternalId) -> Customer | None:
        return self._first(customer_table.c.external_id == external_id)

    def find_by_company_number(self, company_number: CompanyNumber) -> Customer | None:
        return self._first(customer_table.c.company_number == company_number)

    def find_by_master_external_id(self, external_id: ExternalId) -> Customer | None:
        return self._first(
            customer_table.c.master_external_id == external_id,
            newest=True,
        )

    def create(self, customer: Customer) -> Customer:
        self.session.add(customer)
        self.session.flush()
        return customer

    def update(self, customer: Customer) -> Customer:
        self.session.add(customer)
        self.session.flush()
        return customer

    def attach_shopping_list(self, customer: Customer, shopping_list: ShoppingList) -> None:
        customer.add_shopping_list(shopping_list)
        self.session.add(shopping_list)
        if customer.is_persisted:
            self.session.flush()

    def _first(self, criterion: ColumnElement[bool], *, newest: bool = False) -> Customer | None:
        order = customer_table.c.internal_id.desc() if newest else customer_table.c.internal_id
        stmt = select(Customer).where(criterion).order_by(order).limit(1)
        return self.session.execute(stmt).scalars().first()


if TYPE_CHECKING:
    from typing import cast

    from customersync.domain.ports import CustomerDataLayer

    _session_stub = cast("Session", object())
    _data_layer_check: CustomerDataLayer = SqlAlchemyCustomerDataLayer(_session_stub)
