"""Order lifecycle as a closed set of state handlers.

Each handler decides what ``process`` and ``cancel`` mean while the
order is in that state.  A handler that moves the order calls back into
``Order.transition_to`` with the next handler; a handler that refuses an
event only logs a notice.  Refusals are business rules, not errors, so
nothing here raises.

    NEW --process--> PROCESSED
    NEW --cancel---> CANCELLED

PROCESSED and CANCELLED are terminal.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from enum import Enum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from orderkit.domain.model.order import Order

logger = logging.getLogger(__name__)


class OrderStatus(Enum):
    NEW = "NEW"
    PROCESSED = "PROCESSED"
    CANCELLED = "CANCELLED"


class OrderState(ABC):

    status: OrderStatus

    @abstractmethod
    def process(self, order: Order) -> None:
        """Handle a ``process`` event for *order*."""

    @abstractmethod
    def cancel(self, order: Order) -> None:
        """Handle a ``cancel`` event for *order*."""

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"


class NewState(OrderState):

    status = OrderStatus.NEW

    def process(self, order: Order) -> None:
        logger.info("Processing order #%s", order.id)
        order.transition_to(ProcessedState())

    def cancel(self, order: Order) -> None:
        logger.info("Cancelling order #%s", order.id)
        order.transition_to(CancelledState())


class ProcessedState(OrderState):

    status = OrderStatus.PROCESSED

    def process(self, order: Order) -> None:
        logger.info("Order #%s is already processed", order.id)

    def cancel(self, order: Order) -> None:
        # Processed -> Cancelled is refused; pending product-owner sign-off.
        logger.info("Cannot cancel order #%s: it has already been processed", order.id)


class CancelledState(OrderState):

    status = OrderStatus.CANCELLED

    def process(self, order: Order) -> None:
        logger.info("Cannot process order #%s: it has been cancelled", order.id)

    def cancel(self, order: Order) -> None:
        logger.info("Order #%s is already cancelled", order.id)
