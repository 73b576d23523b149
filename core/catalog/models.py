"""Catalog models."""
from decimal import Decimal, InvalidOperation
from typing import Union

from pydantic import BaseModel, ConfigDict, field_validator

from core.services.money import to_decimal


class Product(BaseModel):
    """Product as fetched from the catalog provider. Immutable."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    id: Union[int, str]
    name: str
    price: Decimal
    stock_quantity: int = 0  # informational, never enforced by the cart

    @field_validator("name")
    @classmethod
    def name_not_blank(cls, v: str) -> str:
        if not v or not v.strip():
            raise ValueError("name must be a non-empty string")
        return v

    @field_validator("price", mode="before")
    @classmethod
    def convert_price_to_decimal(cls, v):
        # Unparseable prices are rejected, never zeroed
        if isinstance(v, bool) or not isinstance(v, (str, int, float, Decimal)):
            raise ValueError("price must be a number")
        try:
            price = to_decimal(v) if isinstance(v, float) else Decimal(v)
        except InvalidOperation:
            raise ValueError(f"price is not a number: {v!r}")
        if not price.is_finite():
            raise ValueError("price must be finite")
        return price

    @field_validator("price")
    @classmethod
    def price_not_negative(cls, v: Decimal) -> Decimal:
        if v < 0:
            raise ValueError("price must be non-negative")
        return v
