"""Application orchestration entry points."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field
from logging import getLogger
from typing import TYPE_CHECKING

from customersync.adapters.sqlalchemy.unit_of_work import (
    SqlAlchemyCustomerUnitOfWork,
    is_started,
    startup,
)
from customersync.domain.customer_sync import ConflictError, CustomerSync
from customersync.domain.ports.unit_of_work import CustomerUnitOfWork

if TYPE_CHECKING:
    from collections.abc import Iterable

    from customersync.domain.model import ExternalCustomer

UnitOfWorkFactory = Callable[[], CustomerUnitOfWork]


log = getLogger(__name__)


@dataclass(slots=True)
class SyncCustomersResult:
    """Outcome of synchronizing a sequence of external customers."""

    created: int = 0
    updated: int = 0
    conflicts: list[str] = field(default_factory=list)

    @property
    def processed(self) -> int:
        return self.created + self.updated + len(self.conflicts)


def sync_external_customers(
    customers: Iterable[ExternalCustomer],
    *,
    unit_of_work_factory: UnitOfWorkFactory | None = None,
    database_uri: str | None = None,
) -> SyncCustomersResult:
    """Synchronize each external customer in its own unit of work.

    A conflict rolls back only the offending customer and is reported in the
    result; any other error propagates and stops the run.
    """

    if unit_of_work_factory is None and not is_started():
        startup(database_uri=database_uri)
    effective_uow = unit_of_work_factory or SqlAlchemyCustomerUnitOfWork

    result = SyncCustomersResult()
    for external in customers:
        try:
            with effective_uow() as uow:
                created = CustomerSync(uow.repositories.customers).synchronize(external)
                uow.commit()
        except ConflictError as exc:
            log.warning("Conflict for %s: %s", external.external_id, exc)
            result.conflicts.append(external.external_id)
            continue
        if created:
            result.created += 1
        else:
            result.updated += 1

    log.info(
        "Finished customer sync: created=%s, updated=%s, conflicts=%s",
        result.created,
        result.updated,
        len(result.conflicts),
    )
    return result
