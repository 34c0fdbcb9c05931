"""Customer synchronization core.

Flow for one incoming record:
1) match it against stored customers (external id, company number, master id)
2) surface identity conflicts before anything is written
3) merge fields onto the matched or a new primary record and persist it
4) create or update every duplicate the matcher found
"""

from __future__ import annotations

from .contracts import (
    CustomerMatch,
    DuplicateSlot,
    ExistingDuplicate,
    MatchedByCompanyNumber,
    MatchedByExternalId,
    MatchKey,
    MatchResult,
    NewDuplicate,
    NoMatch,
)
from .errors import ConflictError
from .match import CustomerMatcher
from .merge import FullMerge, MergePolicy, merge_name_only
from .sync import CustomerSync

__all__ = [
    "ConflictError",
    "CustomerMatch",
    "CustomerMatcher",
    "CustomerSync",
    "DuplicateSlot",
    "ExistingDuplicate",
    "FullMerge",
    "MatchKey",
    "MatchResult",
    "MatchedByCompanyNumber",
    "MatchedByExternalId",
    "MergePolicy",
    "NewDuplicate",
    "NoMatch",
    "merge_name_only",
]
