"""
Order status state machine.

Happy path is ``pending -> confirmed -> preparing -> ready -> delivered``.
``cancelled`` branches off any non-terminal state. ``delivered`` and
``cancelled`` are terminal.

The restaurant owner drives the happy path and may reject (cancel) any open
order. The customer may only cancel, and only before preparation starts.
With ``ORDER_STRICT_TRANSITIONS`` enabled the owner has to advance one step at
a time; otherwise forward jumps are allowed.
"""
from django.conf import settings

from .models import Order

HAPPY_PATH = (
    Order.PENDING,
    Order.CONFIRMED,
    Order.PREPARING,
    Order.READY,
    Order.DELIVERED,
)
TERMINAL_STATUSES = frozenset({Order.DELIVERED, Order.CANCELLED})
CUSTOMER_CANCELLABLE = frozenset({Order.PENDING, Order.CONFIRMED})
VALID_STATUSES = frozenset(value for value, _ in Order.STATUS_CHOICES)


class TransitionError(Exception):
    """A rejected status change. ``forbidden`` separates 403 from 400."""

    def __init__(self, message, forbidden=False):
        super().__init__(message)
        self.message = message
        self.forbidden = forbidden


def is_terminal(status):
    return status in TERMINAL_STATUSES


def check_transition(principal, order, restaurant, target_status, strict=None):
    """
    Raise ``TransitionError`` unless ``principal`` may move ``order`` to
    ``target_status``. Returns nothing on success.
    """
    if strict is None:
        strict = getattr(settings, "ORDER_STRICT_TRANSITIONS", False)

    is_customer = principal is not None and principal.id == order.customer_id
    is_owner = principal is not None and principal.id == restaurant.owner_id

    if not (is_customer or is_owner):
        raise TransitionError("You do not have permission to update this order", forbidden=True)

    if target_status not in VALID_STATUSES:
        raise TransitionError(f"Invalid status: {target_status}")

    current = order.status
    if is_terminal(current):
        raise TransitionError(f"Cannot change status of a {current} order")

    if target_status == current:
        raise TransitionError(f"Order is already {current}")

    if is_owner:
        if target_status == Order.CANCELLED:
            return
        if HAPPY_PATH.index(target_status) < HAPPY_PATH.index(current):
            raise TransitionError(f"Cannot move order back from {current} to {target_status}")
        if strict and HAPPY_PATH.index(target_status) != HAPPY_PATH.index(current) + 1:
            raise TransitionError(f"Cannot skip from {current} to {target_status}")
        return

    if target_status != Order.CANCELLED:
        raise TransitionError("Customers can only cancel orders", forbidden=True)
    if current not in CUSTOMER_CANCELLABLE:
        raise TransitionError("Order can no longer be cancelled")


def can_transition(principal, order, restaurant, target_status, strict=None):
    try:
        check_transition(principal, order, restaurant, target_status, strict=strict)
    except TransitionError:
        return False
    return True
