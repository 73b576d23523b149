"""
Cart screen session.

Explicit state a UI shell drives: the product list on screen, the current
selection, the quantity text and the cart. Widgets read from the accessors
here instead of reaching into each other.
"""
from decimal import Decimal
from typing import Any, Dict, Iterable, List, Optional, Tuple

from core.catalog.models import Product
from core.logging import get_logger
from core.services.money import format_amount, to_float
from .models import AddLineResult, Cart
from .service import CartEngine

logger = get_logger(__name__)

# Column headers of the cart table
CART_COLUMNS = ("Name", "Price", "Quantity", "Total")

CartRow = Tuple[str, Decimal, int, Decimal]


class CartSession:
    """One add-to-cart screen. Not thread-safe; owned by a single screen."""

    def __init__(self, engine: Optional[CartEngine] = None):
        self.engine = engine or CartEngine()
        self._products: List[Product] = []
        self._selected_index: Optional[int] = None
        self._quantity_text = self.engine.settings.default_quantity_text
        self._cart = self.engine.reset_cart()

    # ==================== STATE ====================

    @property
    def cart(self) -> Cart:
        return self._cart

    @property
    def products(self) -> Tuple[Product, ...]:
        return tuple(self._products)

    @property
    def quantity_text(self) -> str:
        return self._quantity_text

    @property
    def selected_index(self) -> Optional[int]:
        return self._selected_index

    @property
    def selected_product(self) -> Optional[Product]:
        if self._selected_index is None:
            return None
        return self._products[self._selected_index]

    # ==================== INPUT ====================

    def load_products(self, products: Iterable[Product]) -> None:
        """Replace the product list; any selection is dropped."""
        self._products = list(products)
        self._selected_index = None

    def select(self, index: int) -> bool:
        """
        Select the product at ``index`` of the loaded list.

        Returns:
            True if selected; False (and no selection) for an invalid index
        """
        if isinstance(index, bool) or not isinstance(index, int) or not 0 <= index < len(self._products):
            logger.info(f"Ignoring selection of invalid product index {index!r}")
            self._selected_index = None
            return False
        self._selected_index = index
        return True

    def clear_selection(self) -> None:
        self._selected_index = None

    def set_quantity_text(self, text: str) -> None:
        self._quantity_text = text

    # ==================== ACTIONS ====================

    def add_to_cart(self) -> AddLineResult:
        """Add the selected product with the current quantity text."""
        result = self.engine.add_line(self.selected_product, self._quantity_text, self._cart)
        if result.success:
            self._cart = result.cart
            if result.clear_selection:
                self.clear_selection()
                self._quantity_text = self.engine.settings.default_quantity_text
        return result

    def reset(self) -> None:
        """Start over with an empty cart."""
        self._cart = self.engine.reset_cart()
        self.clear_selection()

    # ==================== VIEW ====================

    def rows(self) -> List[CartRow]:
        """(name, unit price, quantity, line total) per line, in add order."""
        return [
            (item.product_name, item.unit_price, item.quantity, item.total)
            for item in self._cart.items
        ]

    def total(self) -> Decimal:
        return self.engine.compute_total(self._cart)

    def total_text(self) -> str:
        """Grand total as a plain number string, e.g. "66.50"."""
        return format_amount(self.total())

    def summary(self) -> Dict[str, Any]:
        """Plain-data snapshot of the cart for hosts that render from dicts."""
        if self._cart.is_empty:
            return {
                "is_empty": True,
                "total_items": 0,
                "items": [],
                "total": 0.0,
            }

        return {
            "is_empty": False,
            "total_items": self._cart.total_items,
            "items": [
                {
                    "product_name": item.product_name,
                    "unit_price": to_float(item.unit_price),
                    "quantity": item.quantity,
                    "total": to_float(item.total),
                }
                for item in self._cart.items
            ],
            "total": to_float(self.total()),
        }
