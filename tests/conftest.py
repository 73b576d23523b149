"""Pytest configuration and fixtures"""
import os
import pytest
from unittest.mock import Mock

# Set test environment variables
os.environ.setdefault("LOG_LEVEL", "WARNING")
os.environ.setdefault("CART_REJECT_NON_POSITIVE_QUANTITY", "")
os.environ.setdefault("CART_DEFAULT_QUANTITY", "1")

from core.cart import CartEngine, CartSession
from core.catalog import InMemoryCatalog, Product
from core.config import CartSettings


@pytest.fixture
def product_one():
    """First sample product"""
    return Product(id=1, name="Produto Teste 1", price=10.50, stock_quantity=100)


@pytest.fixture
def product_two():
    """Second sample product"""
    return Product(id=2, name="Produto Teste 2", price=25.75, stock_quantity=50)


@pytest.fixture
def sample_products(product_one, product_two):
    """Two-product catalog used by most cart tests"""
    return [product_one, product_two]


@pytest.fixture
def ab_products():
    """Catalog for the A/B checkout scenario"""
    return [
        Product(id="a", name="A", price=10.0, stock_quantity=5),
        Product(id="b", name="B", price=15.5, stock_quantity=5),
    ]


@pytest.fixture
def large_catalog():
    """Twenty products with distinct prices"""
    return [
        Product(id=i, name=f"Item {i:02d}", price=f"{i}.99", stock_quantity=i)
        for i in range(1, 21)
    ]


@pytest.fixture
def engine():
    """Engine with the default (permissive) quantity policy"""
    return CartEngine(CartSettings())


@pytest.fixture
def strict_engine():
    """Engine that rejects zero and negative quantities"""
    return CartEngine(CartSettings(reject_non_positive_quantity=True))


@pytest.fixture
def session(engine, sample_products):
    """Session with the two sample products loaded"""
    s = CartSession(engine)
    s.load_products(sample_products)
    return s


@pytest.fixture
def in_memory_catalog(sample_products):
    """In-memory catalog provider"""
    return InMemoryCatalog(sample_products)


@pytest.fixture
def failing_provider():
    """Catalog provider whose every call raises"""
    provider = Mock()
    provider.get_products.side_effect = RuntimeError("connection refused")
    provider.search_products_by_name.side_effect = RuntimeError("syntax error near DROP")
    return provider
