"""Synchronize one external customer into the customer store."""

from __future__ import annotations

from logging import getLogger
from typing import TYPE_CHECKING

from customersync.domain.model import Customer

from .contracts import ExistingDuplicate
from .match import CustomerMatcher
from .merge import FullMerge, merge_name_only

if TYPE_CHECKING:
    from collections.abc import Sequence

    from customersync.domain.model import ExternalCustomer
    from customersync.domain.ports import CustomerDataLayer

    from .contracts import DuplicateSlot
    from .merge import MergePolicy

log = getLogger(__name__)


class CustomerSync:
    """Match, merge and persist external customers.

    ``synchronize`` returns ``True`` when a new primary record was created and
    ``False`` when an existing one was updated. ``ConflictError`` aborts the
    call before anything is written; data layer errors propagate unchanged.
    """

    def __init__(
        self,
        customers: CustomerDataLayer,
        *,
        matcher: CustomerMatcher | None = None,
        merge_primary: MergePolicy | None = None,
        merge_duplicate: MergePolicy | None = None,
    ) -> None:
        self._customers = customers
        self._matcher = matcher or CustomerMatcher(customers)
        self._merge_primary = merge_primary or FullMerge(customers)
        self._merge_duplicate = merge_duplicate or merge_name_only

    def synchronize(self, external: ExternalCustomer) -> bool:
        result = self._matcher.match(external)

        customer = result.customer
        if customer is not None:
            written = self._merge_primary(external, customer)
            self._customers.update(customer)
            log.debug(
                "Updated customer %s matched by %s: %s",
                customer.internal_id,
                result.match_key,
                ", ".join(written),
            )
            self._sync_duplicates(external, result.duplicates)
            return False

        customer = Customer()
        customer.link_external_id(external.external_id)
        self._merge_primary(external, customer)
        self._customers.create(customer)
        log.debug("Created customer %s for %s", customer.internal_id, external.external_id)
        if result.duplicates:
            self._sync_duplicates(external, result.duplicates)
        return True

    def _sync_duplicates(
        self,
        external: ExternalCustomer,
        duplicates: Sequence[DuplicateSlot],
    ) -> None:
        for slot in duplicates:
            self._sync_duplicate(external, slot)

    def _sync_duplicate(self, external: ExternalCustomer, slot: DuplicateSlot) -> None:
        if isinstance(slot, ExistingDuplicate):
            duplicate = slot.customer
        else:
            duplicate = Customer()
            duplicate.link_external_id(external.external_id)

        self._merge_duplicate(external, duplicate)
        if duplicate.is_persisted:
            self._customers.update(duplicate)
        else:
            self._customers.create(duplicate)
        log.debug(
            "Synchronized duplicate %s of %s", duplicate.internal_id, external.external_id
        )
