"""Cart engine: add-line validation and total recompute."""
import re
from decimal import Decimal
from typing import Optional

from core.config import CartSettings, get_settings
from core.errors import (
    ERROR_INVALID_QUANTITY_FORMAT,
    ERROR_NO_SELECTION,
    ERROR_NON_POSITIVE_QUANTITY,
)
from core.logging import get_logger, safe_text
from core.catalog.models import Product
from .models import AddLineError, AddLineResult, Cart, LineItem, compute_total

logger = get_logger(__name__)

# Optional sign followed by at most ten ASCII digits, nothing else
_QUANTITY_RE = re.compile(r"[+-]?[0-9]{1,10}")

# Same range the register's integer quantity field has always accepted
MAX_QUANTITY = 2**31 - 1
MIN_QUANTITY = -(2**31)


class InvalidQuantityError(ValueError):
    """Quantity text is not a whole number in the accepted range."""

    def __init__(self, text: object) -> None:
        super().__init__(f"Invalid quantity: {safe_text(text)}")
        self.text = text


def parse_quantity(text: str) -> int:
    """
    Parse quantity text typed by the user.

    Raises:
        InvalidQuantityError: if text is not an optionally signed integer
            between MIN_QUANTITY and MAX_QUANTITY
    """
    if not isinstance(text, str) or not _QUANTITY_RE.fullmatch(text):
        raise InvalidQuantityError(text)
    try:
        quantity = int(text)
    except ValueError as e:
        raise InvalidQuantityError(text) from e
    if not MIN_QUANTITY <= quantity <= MAX_QUANTITY:
        raise InvalidQuantityError(text)
    return quantity


class CartEngine:
    """
    Validates add-to-cart requests and builds the resulting cart.

    The engine holds no cart of its own: callers pass the current cart in
    and get a new one back. Rejected requests return the input cart as-is.

    Usage:
        engine = CartEngine()
        result = engine.add_line(product, "2", engine.reset_cart())
        if result.success:
            cart = result.cart
    """

    def __init__(self, settings: Optional[CartSettings] = None):
        self.settings = settings or get_settings()

    def add_line(
        self,
        selected_product: Optional[Product],
        quantity_text: str,
        cart: Cart,
    ) -> AddLineResult:
        """Append one line for ``selected_product`` x ``quantity_text``."""
        if selected_product is None:
            logger.info("Add to cart rejected: no product selected")
            return AddLineResult(
                success=False,
                cart=cart,
                error=AddLineError.NO_SELECTION,
                message=ERROR_NO_SELECTION,
            )

        try:
            quantity = parse_quantity(quantity_text)
        except InvalidQuantityError as e:
            logger.info(f"Add to cart rejected: {e}")
            return AddLineResult(
                success=False,
                cart=cart,
                error=AddLineError.INVALID_QUANTITY_FORMAT,
                message=ERROR_INVALID_QUANTITY_FORMAT,
            )

        if quantity <= 0 and self.settings.reject_non_positive_quantity:
            logger.info(f"Add to cart rejected: non-positive quantity {quantity}")
            return AddLineResult(
                success=False,
                cart=cart,
                error=AddLineError.NON_POSITIVE_QUANTITY,
                message=ERROR_NON_POSITIVE_QUANTITY,
            )

        line = LineItem(
            product_name=selected_product.name,
            unit_price=selected_product.price,
            quantity=quantity,
        )
        new_cart = cart.with_item(line)
        logger.debug(
            f"Added {quantity} x '{safe_text(line.product_name)}', "
            f"cart total {new_cart.total}"
        )
        return AddLineResult(
            success=True,
            cart=new_cart,
            clear_selection=True,
            line=line,
        )

    def compute_total(self, cart: Cart) -> Decimal:
        """Grand total of ``cart``."""
        return compute_total(cart)

    def reset_cart(self) -> Cart:
        """Fresh empty cart."""
        return Cart()


# Singleton instance
_cart_engine: Optional[CartEngine] = None


def get_cart_engine() -> CartEngine:
    """Get CartEngine singleton built from environment settings."""
    global _cart_engine
    if _cart_engine is None:
        _cart_engine = CartEngine()
    return _cart_engine
