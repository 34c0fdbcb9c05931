"""Domain primitives: scalar aliases + small value objects."""

from __future__ import annotations

from dataclasses import dataclass

type ExternalId = str
type CompanyNumber = str
type StoreId = str
type InternalId = int


@dataclass(frozen=True)
class Address:
    street: str | None = None
    city: str | None = None
    postal_code: str | None = None

    def __composite_values__(self) -> tuple[str | None, str | None, str | None]:
        """For SQLAlchemy composite columns (adapter-side convenience)."""
        return (self.street, self.city, self.postal_code)
