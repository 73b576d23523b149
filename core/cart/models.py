"""Cart models with Decimal-based pricing."""
from dataclasses import dataclass, field, replace
from decimal import Decimal
from enum import Enum
from typing import Optional, Tuple

from core.services.money import ZERO, multiply, round_money, to_decimal


class AddLineError(str, Enum):
    """Why an add-to-cart request was rejected."""
    NO_SELECTION = "no_selection"
    INVALID_QUANTITY_FORMAT = "invalid_quantity_format"
    NON_POSITIVE_QUANTITY = "non_positive_quantity"  # strict policy only


@dataclass(frozen=True)
class LineItem:
    """One product/quantity row. Name and price are copies taken at add time."""
    product_name: str
    unit_price: Decimal
    quantity: int

    def __post_init__(self):
        object.__setattr__(self, "unit_price", to_decimal(self.unit_price))

    @property
    def total(self) -> Decimal:
        """Unit price times quantity, in cents."""
        return round_money(multiply(self.unit_price, self.quantity))


def compute_total(cart: "Cart") -> Decimal:
    """Sum of line totals; Decimal("0.00") for an empty cart."""
    return round_money(sum((item.total for item in cart.items), ZERO))


@dataclass(frozen=True)
class Cart:
    """
    Ordered line items for one screen session.

    Immutable: adding a line returns a new Cart, so the grand total can
    never be observed out of sync with the lines.
    """
    items: Tuple[LineItem, ...] = ()

    @property
    def total(self) -> Decimal:
        return compute_total(self)

    @property
    def total_items(self) -> int:
        """Total number of units in the cart."""
        return sum(item.quantity for item in self.items)

    @property
    def is_empty(self) -> bool:
        return not self.items

    def __len__(self) -> int:
        return len(self.items)

    def with_item(self, item: LineItem) -> "Cart":
        """Return a copy of this cart with ``item`` appended."""
        return replace(self, items=self.items + (item,))


@dataclass(frozen=True)
class AddLineResult:
    """Outcome of an add-to-cart request."""
    success: bool
    cart: Cart
    error: Optional[AddLineError] = None
    message: Optional[str] = None
    # Tells the UI shell to drop its product selection
    clear_selection: bool = False
    line: Optional[LineItem] = field(default=None, compare=False)
