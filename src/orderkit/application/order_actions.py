"""Application service: drive lifecycle events on an order."""

from __future__ import annotations

from typing import Callable, Iterable

from orderkit.domain.exceptions import ValidationError
from orderkit.domain.model.order import Order

EVENTS: dict[str, Callable[[Order], None]] = {
    "process": Order.process,
    "cancel": Order.cancel,
}

ACTIONS = tuple(EVENTS)


def apply_actions(order: Order, actions: Iterable[str]) -> Order:
    """Fire each named event on *order* in sequence.

    Refused transitions are notices, not failures; only an unknown action
    name raises, and it does so before any event fires.
    """
    events: list[Callable[[Order], None]] = []
    for action in actions:
        try:
            events.append(EVENTS[action])
        except KeyError:
            raise ValidationError(
                f"Unknown action '{action}'. Expected one of: {', '.join(ACTIONS)}"
            ) from None
    for event in events:
        event(order)
    return order
