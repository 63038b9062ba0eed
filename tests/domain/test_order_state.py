"""Unit tests for the order lifecycle state machine."""

import logging

import pytest

from orderkit.domain.model.order import Order
from orderkit.domain.model.order_state import (
    CancelledState,
    NewState,
    OrderStatus,
    ProcessedState,
)
from orderkit.domain.model.product import LAPTOP
from orderkit.domain.service.discount import NoDiscount
from tests.fakes import RecordingFormatter

STATE_LOGGER = "orderkit.domain.model.order_state"


@pytest.fixture
def order() -> Order:
    return Order.create(1, "Alice", [LAPTOP], NoDiscount(), RecordingFormatter())


@pytest.fixture
def notices(caplog):
    caplog.set_level(logging.INFO, logger=STATE_LOGGER)
    return caplog


def _messages(caplog) -> list[str]:
    return [r.getMessage() for r in caplog.records if r.name == STATE_LOGGER]


class TestFromNew:

    def test_process_moves_to_processed(self, order, notices):
        order.process()
        assert order.status == OrderStatus.PROCESSED
        assert isinstance(order.state, ProcessedState)
        assert _messages(notices) == ["Processing order #1"]

    def test_cancel_moves_to_cancelled(self, order, notices):
        order.cancel()
        assert order.status == OrderStatus.CANCELLED
        assert isinstance(order.state, CancelledState)
        assert _messages(notices) == ["Cancelling order #1"]


class TestFromProcessed:

    def test_second_process_is_a_noop(self, order, notices):
        order.process()
        state = order.state
        order.process()
        assert order.state is state
        assert order.status == OrderStatus.PROCESSED
        assert "already processed" in _messages(notices)[-1]

    def test_cancel_is_refused(self, order, notices):
        order.process()
        order.cancel()
        assert order.status == OrderStatus.PROCESSED
        assert "Cannot cancel" in _messages(notices)[-1]


class TestFromCancelled:

    def test_process_is_refused(self, order, notices):
        order.cancel()
        order.process()
        assert order.status == OrderStatus.CANCELLED
        assert "Cannot process" in _messages(notices)[-1]

    def test_second_cancel_is_a_noop(self, order, notices):
        order.cancel()
        order.cancel()
        assert order.status == OrderStatus.CANCELLED
        assert "already cancelled" in _messages(notices)[-1]


class TestHandlers:

    @pytest.mark.parametrize(
        "state, status",
        [
            (NewState(), OrderStatus.NEW),
            (ProcessedState(), OrderStatus.PROCESSED),
            (CancelledState(), OrderStatus.CANCELLED),
        ],
    )
    def test_each_handler_reports_its_status(self, state, status):
        assert state.status == status

    def test_handler_rebinds_owner_state(self, order):
        NewState().cancel(order)
        assert order.status == OrderStatus.CANCELLED

    def test_refusals_never_raise(self, order):
        order.cancel()
        for _ in range(3):
            order.process()
            order.cancel()
        assert order.status == OrderStatus.CANCELLED
