"""Pydantic models for external customer payloads."""

from __future__ import annotations

from typing import Self

from pydantic import BaseModel, ConfigDict, Field, model_validator


class ExternalBaseModel(BaseModel):
    model_config = ConfigDict(extra="ignore", populate_by_name=True)


class AddressPayload(ExternalBaseModel):
    street: str | None = None
    city: str | None = None
    postal_code: str | None = Field(default=None, alias="postalCode")


class ShoppingListPayload(ExternalBaseModel):
    products: list[str] = Field(default_factory=list)


class ExternalCustomerPayload(ExternalBaseModel):
    external_id: str = Field(alias="externalId", min_length=1)
    is_company: bool = Field(default=False, alias="isCompany")
    company_number: str | None = Field(default=None, alias="companyNumber")
    name: str | None = None
    postal_address: AddressPayload | None = Field(default=None, alias="postalAddress")
    bonus_points_balance: int | None = Field(default=None, alias="bonusPointsBalance")
    preferred_store: str | None = Field(default=None, alias="preferredStore")
    shopping_lists: list[ShoppingListPayload] = Field(
        default_factory=list["ShoppingListPayload"],
        alias="shoppingLists",
    )

    @model_validator(mode="after")
    def _company_number_only_for_companies(self) -> Self:
        if self.is_company and not self.company_number:
            raise ValueError("companyNumber is required for companies")
        if not self.is_company and self.company_number:
            raise ValueError("companyNumber is only allowed for companies")
        return self
