"""Integration tests for the PlaceOrder use case.

Uses an in-memory fake catalog.
"""

import logging

import pytest

from orderkit.application.dto import OrderSummaryDTO
from orderkit.application.place_order import PlaceOrderHandler
from orderkit.domain.exceptions import EntityNotFoundError
from orderkit.domain.model.order_state import OrderStatus
from orderkit.domain.model.product import DEFAULT_CATALOG, LAPTOP, PHONE
from orderkit.domain.service.discount import NoDiscount, SeasonalDiscount
from tests.fakes import FakeProductRepository, RecordingFormatter


def _setup() -> PlaceOrderHandler:
    return PlaceOrderHandler(FakeProductRepository(list(DEFAULT_CATALOG)))


class TestPlaceOrderHappyPath:

    def test_resolves_products_in_order(self):
        order = _setup().handle(1, "Alice", ["Laptop", "Phone"], NoDiscount(), RecordingFormatter())
        assert order.products == (LAPTOP, PHONE)
        assert order.status == OrderStatus.NEW

    def test_names_are_case_insensitive(self):
        order = _setup().handle(1, "Alice", ["laptop"], NoDiscount(), RecordingFormatter())
        assert order.products == (LAPTOP,)

    def test_repeated_names_repeat_products(self):
        order = _setup().handle(2, "Bob", ["Phone", "Phone"], NoDiscount(), RecordingFormatter())
        assert order.get_total_price() == 1000

    def test_binds_chosen_strategy_and_formatter(self):
        formatter = RecordingFormatter()
        order = _setup().handle(3, "Carol", ["Laptop", "Phone"], SeasonalDiscount(), formatter)
        assert order.get_total_price() == 1275
        assert order.render_invoice() == "invoice #3"


class TestPlaceOrderErrors:

    def test_unknown_product_rejected(self):
        with pytest.raises(EntityNotFoundError, match="Product not found: 'Toaster'"):
            _setup().handle(1, "Alice", ["Laptop", "Toaster"], NoDiscount(), RecordingFormatter())


class TestOrderSummaryDTO:

    def test_from_order(self):
        order = _setup().handle(5, "Dave", ["Laptop", "Phone"], SeasonalDiscount(), RecordingFormatter())
        order.process()
        assert OrderSummaryDTO.from_order(order) == OrderSummaryDTO(
            id=5,
            customer_name="Dave",
            status="PROCESSED",
            product_count=2,
            total="1275",
        )


class TestPlaceOrderLogging:

    def test_debug_log_names_strategy_and_formatter(self, caplog):
        caplog.set_level(logging.DEBUG, logger="orderkit.application.place_order")
        _setup().handle(6, "Erin", ["Tablet"], SeasonalDiscount(), RecordingFormatter())
        assert "discount=seasonal, format=recording" in caplog.text
