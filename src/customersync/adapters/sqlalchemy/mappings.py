"""SQLAlchemy mapping metadata for the customer domain model."""

from __future__ import annotations

import json
import logging
from functools import cache
from typing import TYPE_CHECKING, Any, cast

from sqlalchemy import (
    Column,
    Dialect,
    Enum,
    ForeignKey,
    Index,
    Integer,
    String,
    Table,
    TypeDecorator,
    orm,
)
from sqlalchemy.orm import composite, configure_mappers, relationship

from customersync.domain.model import Address, Customer, CustomerType, ShoppingList

if TYPE_CHECKING:
    from sqlalchemy.engine import Engine

log = logging.getLogger(__name__)


class ProductListType(TypeDecorator[list[str]]):
    """Store shopping list products as a JSON array in a string column."""

    impl = String
    cache_ok = True

    def process_bind_param(self, value: list[str] | None, dialect: Dialect) -> str | None:
        _ = dialect
        if value is None:
            return None
        return json.dumps(list(value))

    def process_result_value(self, value: str | None, dialect: Dialect) -> list[str]:
        _ = dialect
        if value is None:
            return []
        loaded = json.loads(value)
        if not isinstance(loaded, list):
            return []
        items = cast(list[Any], loaded)
        return [str(item) for item in items]


mapper_registry = orm.registry()
mapper_registry.metadata.naming_convention = {
    "ix": "ix_%(column_0_label)s",
    "uq": "uq_%(table_name)s_%(column_0_label)s",
    "ck": "ck_%(table_name)s_%(constraint_name)s",
    "fk": "fk_%(table_name)s_%(column_0_label)s_%(referred_table_name)s",
    "pk": "pk_%(table_name)s",
}

# external_id is not unique: a company-number relink and its new duplicate share it
customer_table = Table(
    "customer",
    mapper_registry.metadata,
    Column("internal_id", Integer, primary_key=True, autoincrement=True),
    Column("external_id", String, nullable=True),
    Column("master_external_id", String, nullable=True),
    Column("customer_type", Enum(CustomerType, native_enum=False), nullable=True),
    Column("company_number", String, nullable=True),
    Column("name", String, nullable=True),
    Column("address_street", String, nullable=True),
    Column("address_city", String, nullable=True),
    Column("address_postal_code", String, nullable=True),
    Column("bonus_points_balance", Integer, nullable=True),
    Column("preferred_store", String, nullable=True),
)

Index("ix_customer_external_id", customer_table.c.external_id)
Index("ix_customer_master_external_id", customer_table.c.master_external_id)
Index("ix_customer_company_number", customer_table.c.company_number)

shopping_list_table = Table(
    "shopping_list",
    mapper_registry.metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column("products", ProductListType, nullable=False),
)

customer_shopping_list_table = Table(
    "customer_shopping_list",
    mapper_registry.metadata,
    Column(
        "customer_id",
        Integer,
        ForeignKey("customer.internal_id", ondelete="CASCADE"),
        primary_key=True,
    ),
    Column(
        "shopping_list_id",
        Integer,
        ForeignKey("shopping_list.id", ondelete="CASCADE"),
        primary_key=True,
    ),
)


@cache
def start_mappers() -> orm.registry:
    """Configure SQLAlchemy mappers for the domain model."""

    log.info("Starting SQLAlchemy mappers")

    mapper_registry.map_imperatively(ShoppingList, shopping_list_table)

    mapper_registry.map_imperatively(
        Customer,
        customer_table,
        properties={
            "address": composite(
                Address,
                customer_table.c.address_street,
                customer_table.c.address_city,
                customer_table.c.address_postal_code,
            ),
            "_shopping_lists": relationship(
                ShoppingList,
                secondary=customer_shopping_list_table,
            ),
        },
    )

    configure_mappers()
    return mapper_registry


def create_all_tables(engine: Engine) -> None:
    """Create database tables for the mapped metadata."""

    log.info("Creating all tables")
    mapper_registry.metadata.create_all(engine)
