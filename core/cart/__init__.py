"""Cart package: models, engine, and screen session."""
from .models import AddLineError, AddLineResult, Cart, LineItem, compute_total
from .service import (
    CartEngine,
    InvalidQuantityError,
    get_cart_engine,
    parse_quantity,
)
from .session import CART_COLUMNS, CartSession

__all__ = [
    "AddLineError",
    "AddLineResult",
    "Cart",
    "LineItem",
    "compute_total",
    "CartEngine",
    "InvalidQuantityError",
    "get_cart_engine",
    "parse_quantity",
    "CART_COLUMNS",
    "CartSession",
]
