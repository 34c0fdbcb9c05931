"""Resolve an incoming external customer to stored customer records.

Companies match by external id first and by company number second; persons
match by external id only. Identity conflicts raise ``ConflictError`` before
any write happens. Lookups are the only side effects besides in-memory
relinking of the matched record, which the reconciler persists later.
"""

from __future__ import annotations

from logging import getLogger
from typing import TYPE_CHECKING

from customersync.domain.model import CustomerType

from .contracts import (
    ExistingDuplicate,
    MatchedByCompanyNumber,
    MatchedByExternalId,
    MatchResult,
    NewDuplicate,
    NoMatch,
)
from .errors import EXISTING_CUSTOMER_FOR_EXTERNAL_CUSTOMER, ConflictError

if TYPE_CHECKING:
    from customersync.domain.model import Customer, ExternalCustomer, ExternalId
    from customersync.domain.ports import CustomerDataLayer

log = getLogger(__name__)


class CustomerMatcher:
    def __init__(self, customers: CustomerDataLayer) -> None:
        self._customers = customers

    def match(self, external: ExternalCustomer) -> MatchResult:
        if external.is_company:
            return self.load_company(external)
        return self.load_person(external)

    def load_company(self, external: ExternalCustomer) -> MatchResult:
        external_id = external.external_id

        found = self._customers.find_by_external_id(external_id)
        if found is not None:
            _ensure_customer_type(found, CustomerType.COMPANY, external_id)
            result = MatchResult(match=MatchedByExternalId(customer=found))
            duplicate = self._customers.find_by_master_external_id(external_id)
            # the cluster lookup may return the primary itself; it is not its own duplicate
            if duplicate is not None and duplicate is not found:
                result.duplicates.append(ExistingDuplicate(customer=duplicate))
            if found.company_number != external.company_number:
                _invalidate_match(result, found)
            return result

        if external.company_number is None:
            return MatchResult()
        found = self._customers.find_by_company_number(external.company_number)
        if found is None:
            return MatchResult()

        _ensure_customer_type(found, CustomerType.COMPANY, external_id)
        _ensure_external_id_free(found, external_id)
        found.link_external_id(external_id)
        log.debug(
            "Linked company number %s to external id %s", found.company_number, external_id
        )
        return MatchResult(
            match=MatchedByCompanyNumber(customer=found),
            duplicates=[NewDuplicate()],
        )

    def load_person(self, external: ExternalCustomer) -> MatchResult:
        external_id = external.external_id
        found = self._customers.find_by_external_id(external_id)
        if found is None:
            return MatchResult()
        _ensure_customer_type(found, CustomerType.PERSON, external_id)
        return MatchResult(match=MatchedByExternalId(customer=found))


def _invalidate_match(result: MatchResult, customer: Customer) -> None:
    # same external id, different legal entity: keep it only as an orphaned duplicate
    log.info(
        "Company number mismatch for external id %s (stored %s); demoting to duplicate",
        customer.external_id,
        customer.company_number,
    )
    customer.master_external_id = None
    result.duplicates.append(ExistingDuplicate(customer=customer))
    result.match = NoMatch()


def _ensure_customer_type(
    customer: Customer,
    expected: CustomerType,
    external_id: ExternalId,
) -> None:
    if customer.customer_type is expected:
        return
    article = "a company" if expected is CustomerType.COMPANY else "a person"
    raise ConflictError(
        f"{EXISTING_CUSTOMER_FOR_EXTERNAL_CUSTOMER} {external_id} already exists "
        f"and is not {article}",
        external_id=external_id,
    )


def _ensure_external_id_free(customer: Customer, external_id: ExternalId) -> None:
    stored = customer.external_id
    if stored is not None and stored != external_id:
        raise ConflictError(
            f"{EXISTING_CUSTOMER_FOR_EXTERNAL_CUSTOMER} {customer.company_number} "
            f"doesn't match external id {external_id} instead found {stored}",
            external_id=external_id,
        )
