"""SQLAlchemy-backed unit of work for customer synchronization."""

from __future__ import annotations

from dataclasses import dataclass
from logging import getLogger
from typing import TYPE_CHECKING, Literal

from sqlalchemy import create_engine, make_url
from sqlalchemy.orm import Session, sessionmaker

from customersync.adapters.sqlalchemy.mappings import create_all_tables, start_mappers
from customersync.adapters.sqlalchemy.repositories import SqlAlchemyCustomerDataLayer
from customersync.config import get_database_config
from customersync.domain.ports.unit_of_work import CustomerRepositories

if TYPE_CHECKING:
    from types import TracebackType

    from sqlalchemy.engine import Engine

log = getLogger(__name__)


class StartupError(RuntimeError):
    """Raised when the customer store is used before ``startup()`` or started twice."""


@dataclass(slots=True)
class _StoreState:
    engine: Engine | None = None
    session_factory: sessionmaker[Session] | None = None

    def require_session_factory(self) -> sessionmaker[Session]:
        if self.session_factory is None:
            raise StartupError(
                "Customer store not started. Call customersync.adapters.sqlalchemy."
                "unit_of_work.startup() before opening a unit of work."
            )
        return self.session_factory

    def bind(self, engine: Engine) -> None:
        self.engine = engine
        self.session_factory = sessionmaker(bind=engine, expire_on_commit=False)

    def reset(self) -> None:
        if self.engine is not None:
            self.engine.dispose()
        self.engine = None
        self.session_factory = None


_STATE = _StoreState()


def startup(
    *,
    engine: Engine | None = None,
    database_uri: str | None = None,
    force: bool = False,
) -> None:
    """Open the customer store: map the model, create missing tables, bind sessions.

    Starting twice raises ``StartupError`` unless ``force`` is set, in which
    case the previous engine is disposed first.
    """

    if _STATE.engine is not None:
        if not force:
            raise StartupError("Customer store already started. Pass force=True to restart.")
        _STATE.reset()

    if engine is None:
        config = get_database_config(database_uri)
        log.info(
            "Opening customer store %s (from %s)",
            make_url(config.uri).render_as_string(hide_password=True),
            config.source,
        )
        engine = create_engine(config.uri)

    start_mappers()
    create_all_tables(engine)
    _STATE.bind(engine)


def is_started() -> bool:
    return _STATE.session_factory is not None


def shutdown() -> None:
    """Dispose the engine and forget the store (used by tests and restarts)."""

    _STATE.reset()


class SqlAlchemyCustomerUnitOfWork:
    """One session, one transaction, one customer data layer."""

    def __init__(self) -> None:
        self.session_factory: sessionmaker[Session] = _STATE.require_session_factory()
        self._session: Session | None = None
        self._repositories: CustomerRepositories | None = None

    def __enter__(self) -> SqlAlchemyCustomerUnitOfWork:
        self.session = self.session_factory()
        self._repositories = CustomerRepositories(
            customers=SqlAlchemyCustomerDataLayer(self.session),
        )
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_value: BaseException | None,
        traceback: TracebackType | None,
    ) -> Literal[False]:
        if exc_type is not None:
            self.rollback()
        self.session.close()
        self.session = None
        self._repositories = None
        return False

    def commit(self) -> None:
        self.session.commit()

    def rollback(self) -> None:
        self.session.rollback()

    @property
    def repositories(self) -> CustomerRepositories:
        if self._repositories is None:
            raise StartupError("Unit of work session not initialised")
        return self._repositories

    @property
    def session(self) -> Session:
        if self._session is None:
            raise StartupError("Unit of work session not initialised")
        return self._session

    @session.setter
    def session(self, session: Session | None) -> None:
        if self._session is not None and session is not None:
            raise StartupError("Unit of work session already initialised")
        self._session = session


if TYPE_CHECKING:
    from customersync.domain.ports import CustomerUnitOfWork

    _uow_check: CustomerUnitOfWork = SqlAlchemyCustomerUnitOfWork()
