"""Domain enums (pure, dependency-light)."""

from __future__ import annotations

from enum import StrEnum


class CustomerType(StrEnum):
    PERSON = "Person"
    COMPANY = "Company"
