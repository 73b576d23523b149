"""
Tests for CartSession
"""

import pytest
from decimal import Decimal
from core.cart import CART_COLUMNS, AddLineError, CartEngine, CartSession
from core.config import CartSettings


class TestSessionDefaults:
    """Tests for a freshly opened session."""

    def test_quantity_defaults_to_one(self, engine):
        """Test quantity text starts at "1"."""
        assert CartSession(engine).quantity_text == "1"

    def test_configured_default_quantity(self):
        """Test default quantity comes from settings."""
        session = CartSession(CartEngine(CartSettings(default_quantity_text="3")))

        assert session.quantity_text == "3"

    def test_starts_empty(self, engine):
        """Test new session has an empty cart and no selection."""
        session = CartSession(engine)

        assert session.cart.is_empty
        assert session.selected_product is None
        assert session.rows() == []
        assert session.total_text() == "0.00"

    def test_cart_columns(self):
        """Test cart table column headers."""
        assert CART_COLUMNS == ("Name", "Price", "Quantity", "Total")


class TestSelection:
    """Tests for product selection."""

    def test_select_valid_index(self, session, product_two):
        """Test selecting a loaded product."""
        assert session.select(1) is True
        assert session.selected_product == product_two

    @pytest.mark.parametrize("index", [-1, 2, 102, None, "0", True, False, 1.0])
    def test_select_invalid_index(self, session, index):
        """Test invalid indexes leave nothing selected."""
        session.select(0)

        assert session.select(index) is False
        assert session.selected_product is None

    def test_load_products_drops_selection(self, session, sample_products):
        """Test reloading products clears the selection."""
        session.select(0)
        session.load_products(sample_products[:1])

        assert session.selected_index is None

    def test_products_are_read_only_view(self, session, sample_products):
        """Test products accessor is a tuple snapshot."""
        assert session.products == tuple(sample_products)


class TestAddToCart:
    """Tests for CartSession.add_to_cart."""

    def test_add_updates_rows_and_total(self, session):
        """Test a successful add shows in rows and total."""
        session.select(0)
        session.set_quantity_text("2")

        result = session.add_to_cart()

        assert result.success is True
        assert session.rows() == [("Produto Teste 1", Decimal("10.5"), 2, Decimal("21.00"))]
        assert session.total() == Decimal("21.00")
        assert session.total_text() == "21.00"

    def test_add_clears_selection_and_quantity(self, session):
        """Test selection is cleared and quantity reset after an add."""
        session.select(0)
        session.set_quantity_text("5")

        session.add_to_cart()

        assert session.selected_product is None
        assert session.quantity_text == "1"

    def test_add_without_selection(self, session):
        """Test nothing is added without a selection."""
        result = session.add_to_cart()

        assert result.error == AddLineError.NO_SELECTION
        assert session.rows() == []

    def test_invalid_quantity_keeps_state(self, session):
        """Test a rejected add keeps selection, text and cart."""
        session.select(1)
        session.set_quantity_text("abc")

        result = session.add_to_cart()

        assert result.error == AddLineError.INVALID_QUANTITY_FORMAT
        assert session.selected_index == 1
        assert session.quantity_text == "abc"
        assert session.cart.is_empty

    def test_total_text_changes_after_add(self, session):
        """Test displayed total updates after adding."""
        before = session.total_text()
        session.select(0)

        session.add_to_cart()

        assert session.total_text() != before
        assert float(session.total_text()) == pytest.approx(10.50)

    def test_add_two_products(self, session):
        """Test rows for two products in add order."""
        session.select(0)
        session.add_to_cart()
        session.select(1)
        session.add_to_cart()

        assert [row[0] for row in session.rows()] == ["Produto Teste 1", "Produto Teste 2"]
        assert session.total_text() == "36.25"

    def test_reset(self, session):
        """Test reset empties the cart."""
        session.select(0)
        session.add_to_cart()
        session.select(1)

        session.reset()

        assert session.cart.is_empty
        assert session.selected_product is None


class TestSummary:
    """Tests for CartSession.summary."""

    def test_empty_summary(self, session):
        """Test summary of an empty cart."""
        assert session.summary() == {
            "is_empty": True,
            "total_items": 0,
            "items": [],
            "total": 0.0,
        }

    def test_summary_with_items(self, session):
        """Test summary lists lines as plain numbers."""
        session.select(1)
        session.set_quantity_text("2")
        session.add_to_cart()

        summary = session.summary()

        assert summary["is_empty"] is False
        assert summary["total_items"] == 2
        assert summary["items"] == [{
            "product_name": "Produto Teste 2",
            "unit_price": 25.75,
            "quantity": 2,
            "total": 51.5,
        }]
        assert summary["total"] == 51.5
