"""Match result shapes shared by the matcher and the reconciler.

The primary match and its key travel together as one tagged value, so a key
without a customer (or the reverse) cannot be built. Duplicate slots are tagged
the same way: either an existing record to re-sync or a request to create one.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import StrEnum
from typing import TYPE_CHECKING, Literal

if TYPE_CHECKING:
    from customersync.domain.model import Customer


class MatchKey(StrEnum):
    """Which identity field produced the primary match."""

    EXTERNAL_ID = "external_id"
    COMPANY_NUMBER = "company_number"
    NONE = "none"


@dataclass(slots=True, kw_only=True)
class NoMatch:
    """No stored customer matched; a new one should be created."""

    match_key: Literal[MatchKey.NONE] = MatchKey.NONE


@dataclass(slots=True, kw_only=True)
class MatchedByExternalId:
    customer: Customer
    match_key: Literal[MatchKey.EXTERNAL_ID] = MatchKey.EXTERNAL_ID


@dataclass(slots=True, kw_only=True)
class MatchedByCompanyNumber:
    customer: Customer
    match_key: Literal[MatchKey.COMPANY_NUMBER] = MatchKey.COMPANY_NUMBER


type CustomerMatch = NoMatch | MatchedByExternalId | MatchedByCompanyNumber


@dataclass(slots=True, kw_only=True)
class ExistingDuplicate:
    """Stored duplicate record that must be re-synchronized."""

    customer: Customer


@dataclass(slots=True, frozen=True)
class NewDuplicate:
    """Request to create a fresh duplicate record for the incoming payload."""


type DuplicateSlot = ExistingDuplicate | NewDuplicate


@dataclass(slots=True)
class MatchResult:
    match: CustomerMatch = field(default_factory=NoMatch)
    duplicates: list[DuplicateSlot] = field(default_factory=list["DuplicateSlot"])

    @property
    def customer(self) -> Customer | None:
        if isinstance(self.match, NoMatch):
            return None
        return self.match.customer

    @property
    def match_key(self) -> MatchKey:
        return self.match.match_key

