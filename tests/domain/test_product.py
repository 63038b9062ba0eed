"""Unit tests for the Product value object and the default catalog."""

from decimal import Decimal

import pytest

from orderkit.domain.exceptions import ValidationError
from orderkit.domain.model.product import (
    DEFAULT_CATALOG,
    LAPTOP,
    PHONE,
    TABLET,
    Product,
    to_decimal,
)


class TestProduct:

    def test_price_is_coerced_to_decimal(self):
        assert Product("Pen", 2).price == Decimal("2")
        assert Product("Pen", "2.50").price == Decimal("2.50")
        assert Product("Pen", 0.1).price == Decimal("0.1")

    def test_equal_by_name_and_price(self):
        assert Product("Laptop", 1000) == LAPTOP
        assert Product("Laptop", 999) != LAPTOP

    def test_immutable(self):
        with pytest.raises(AttributeError):
            LAPTOP.price = Decimal("1")  # type: ignore[misc]

    def test_negative_price_accepted(self):
        # no validation layer: documented gap
        assert Product("Refund", -5).price == Decimal("-5")

    def test_invalid_price_rejected(self):
        with pytest.raises(ValidationError, match="Invalid price"):
            Product("Pen", "abc")

    @pytest.mark.parametrize(
        "price", [float("inf"), "Infinity", "-Infinity", "NaN", Decimal("NaN")]
    )
    def test_non_finite_price_rejected(self, price):
        with pytest.raises(ValidationError, match="Invalid price"):
            Product("X", price)


class TestCatalog:

    def test_fixed_prices(self):
        assert LAPTOP.price == 1000
        assert PHONE.price == 500
        assert TABLET.price == 300

    def test_default_catalog_order(self):
        assert [p.name for p in DEFAULT_CATALOG] == ["Laptop", "Phone", "Tablet"]

    def test_to_decimal_passes_decimal_through(self):
        d = Decimal("1.23")
        assert to_decimal(d) is d
