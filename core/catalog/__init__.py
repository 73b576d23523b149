"""Catalog package: product model, name search, and provider facade."""
from .models import Product
from .search import search_by_name
from .service import (
    PRODUCT_COLUMNS,
    CatalogProvider,
    CatalogService,
    InMemoryCatalog,
    product_rows,
)

__all__ = [
    "Product",
    "search_by_name",
    "PRODUCT_COLUMNS",
    "CatalogProvider",
    "CatalogService",
    "InMemoryCatalog",
    "product_rows",
]
