"""Domain port definitions for adapters."""

from __future__ import annotations

from .persistence import CustomerDataLayer
from .unit_of_work import (
    CustomerRepositories,
    CustomerUnitOfWork,
    RepositoryCollection,
    UnitOfWork,
)

__all__ = [
    "CustomerDataLayer",
    "CustomerRepositories",
    "CustomerUnitOfWork",
    "RepositoryCollection",
    "UnitOfWork",
]
