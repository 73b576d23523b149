"""
Catalog Service

Thin wrapper around the external catalog provider. The provider may be
backed by anything (database, API, fixture list); the cart core only ever
sees plain lists of Product, and provider failures degrade to an empty list.
"""

from decimal import Decimal
from typing import Iterable, List, Protocol, Sequence, Tuple

from core.logging import get_logger, safe_text
from .models import Product
from .search import search_by_name

logger = get_logger(__name__)

# Column headers of the products table shown next to the cart
PRODUCT_COLUMNS = ("Name", "Price", "Stock")

ProductRow = Tuple[str, Decimal, int]


class CatalogProvider(Protocol):
    """What the core needs from whoever owns the product data."""

    def get_products(self) -> Sequence[Product]:
        ...

    def search_products_by_name(self, term: str) -> Sequence[Product]:
        ...


class InMemoryCatalog:
    """Catalog provider over a fixed product list."""

    def __init__(self, products: Iterable[Product] = ()):
        self._products: Tuple[Product, ...] = tuple(products)

    def get_products(self) -> List[Product]:
        return list(self._products)

    def search_products_by_name(self, term: str) -> List[Product]:
        return search_by_name(term, self._products)


class CatalogService:
    """
    Catalog access for the cart screen.

    Provides:
    - Full product list for the products table
    - Name search delegated to the provider
    Both return [] instead of raising when the provider fails.
    """

    def __init__(self, provider: CatalogProvider):
        self.provider = provider

    def get_products(self) -> List[Product]:
        """Fetch all products, or [] if the provider is unavailable."""
        try:
            return list(self.provider.get_products() or [])
        except Exception as e:
            logger.warning(f"Catalog provider failed to list products: {e}")
            return []

    def search(self, term: str) -> List[Product]:
        """
        Search products by name through the provider.

        Args:
            term: Name fragment typed by the user

        Returns:
            Matching products, or [] on no match or provider failure
        """
        if not isinstance(term, str) or not term:
            return []
        try:
            return list(self.provider.search_products_by_name(term) or [])
        except Exception as e:
            logger.warning(
                f"Catalog search failed for '{safe_text(term)}': {e}"
            )
            return []


def product_rows(products: Iterable[Product]) -> List[ProductRow]:
    """Project products into (name, price, stock) rows for display."""
    return [(p.name, p.price, p.stock_quantity) for p in products]
