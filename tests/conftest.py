from __future__ import annotations

import os
from typing import TYPE_CHECKING

import pytest
from sqlalchemy import create_engine
from sqlalchemy.engine import Engine  # noqa: TC002
from sqlalchemy.orm import Session, sessionmaker

from customersync.adapters.sqlalchemy import create_all_tables, start_mappers
from customersync.adapters.sqlalchemy.unit_of_work import (
    SqlAlchemyCustomerUnitOfWork,
    shutdown,
    startup,
)
from tests.support.customers import InMemoryCustomerDataLayer

os.environ.setdefault("DATABASE_URI", "sqlite+pysqlite:///:memory:")

if TYPE_CHECKING:
    from collections.abc import Callable, Iterator


@pytest.fixture
def data_layer() -> InMemoryCustomerDataLayer:
    return InMemoryCustomerDataLayer()


@pytest.fixture
def sqlite_engine() -> Iterator[Engine]:
    engine = create_engine("sqlite+pysqlite:///:memory:", future=True)
    start_mappers()
    create_all_tables(engine)
    try:
        yield engine
    finally:
        engine.dispose()


@pytest.fixture
def sqlite_session(sqlite_engine: Engine) -> Iterator[Session]:
    session_factory = sessionmaker(bind=sqlite_engine, future=True)
    session = session_factory()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def sqlite_unit_of_work(
    sqlite_engine: Engine,
) -> Iterator[Callable[[], SqlAlchemyCustomerUnitOfWork]]:
    startup(engine=sqlite_engine, force=True)

    def factory() -> SqlAlchemyCustomerUnitOfWork:
        return SqlAlchemyCustomerUnitOfWork()

    try:
        yield factory
    finally:
        shutdown()
