"""
POS Cart Core

This package contains the logic behind the add-to-cart screen:
- cart: line items, totals, add-line validation, screen session
- catalog: product model, name search, provider facade
- config: cart policy settings
- services.money: Decimal helpers for prices

Note: Imports are lazy so that importing ``core`` stays cheap for hosts
that only need one subpackage.
"""

__all__ = [
    "get_cart_engine",
    "CartSession",
    "search_by_name",
]


def __getattr__(name):
    """Lazy attribute access for the most used entry points."""
    if name == "get_cart_engine":
        from core.cart import get_cart_engine
        return get_cart_engine
    elif name == "CartSession":
        from core.cart import CartSession
        return CartSession
    elif name == "search_by_name":
        from core.catalog import search_by_name
        return search_by_name
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
