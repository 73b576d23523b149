"""
Cart configuration.

Settings come from environment variables:
- CART_REJECT_NON_POSITIVE_QUANTITY: "1"/"true"/"yes"/"on" enables strict mode
- CART_DEFAULT_QUANTITY: quantity text a session starts with (default "1")
"""

import os
from functools import cache

from pydantic import BaseModel, ConfigDict, field_validator

_TRUTHY = {"1", "true", "yes", "on"}


class CartSettings(BaseModel):
    """Policy knobs for the cart engine and sessions."""

    model_config = ConfigDict(frozen=True)

    # Zero/negative quantities are appended as-is unless this is set
    reject_non_positive_quantity: bool = False
    default_quantity_text: str = "1"

    @field_validator("default_quantity_text", mode="before")
    @classmethod
    def strip_default_quantity(cls, v):
        return str(v).strip() or "1"

    @classmethod
    def from_env(cls) -> "CartSettings":
        """Build settings from os.environ."""
        strict = os.environ.get("CART_REJECT_NON_POSITIVE_QUANTITY", "")
        return cls(
            reject_non_positive_quantity=strict.strip().lower() in _TRUTHY,
            default_quantity_text=os.environ.get("CART_DEFAULT_QUANTITY", "1"),
        )


@cache
def get_settings() -> CartSettings:
    """Get env-derived settings (cached for the process)."""
    return CartSettings.from_env()
