import logging
from decimal import ROUND_HALF_UP, Decimal

from django.db import transaction
from django.utils import timezone
from rest_framework.exceptions import NotFound, PermissionDenied, ValidationError

from restaurants.models import MenuItem, Restaurant

from .models import Order, OrderItem
from .permissions import can_create_order
from .transitions import TransitionError, check_transition

logger = logging.getLogger(__name__)

CENT = Decimal("0.01")
TOTAL_TOLERANCE = Decimal("0.01")


def round_money(amount):
    return Decimal(amount).quantize(CENT, rounding=ROUND_HALF_UP)


def compute_total(lines):
    """Sum of ``price * quantity`` over ``(price, quantity)`` pairs, rounded to cents."""
    return round_money(sum((Decimal(price) * quantity for price, quantity in lines), Decimal("0")))


def place_order(principal, restaurant_id, items, delivery_address, phone, special_instructions="", client_total=None):
    """
    Create a pending order from ``items`` (dicts with ``menu_item_id`` and
    ``quantity``) priced against the live menu.

    Either the whole order is written or nothing is. Name and price of each
    line are copied from the menu item at this moment. A ``client_total`` is
    only compared against the computed total, never stored.
    """
    if not can_create_order(principal):
        raise PermissionDenied("Only customers can place orders")

    if not items:
        raise ValidationError("Order must contain at least one item")
    delivery_address = (delivery_address or "").strip()
    if not delivery_address:
        raise ValidationError("Delivery address is required")
    phone = (phone or "").strip()
    if not phone:
        raise ValidationError("Phone number is required")

    with transaction.atomic():
        restaurant = Restaurant.objects.filter(pk=restaurant_id).first()
        if restaurant is None:
            raise NotFound("Restaurant not found")

        menu = MenuItem.objects.in_bulk([item["menu_item_id"] for item in items])

        lines = []
        for item in items:
            quantity = item["quantity"]
            if quantity < 1:
                raise ValidationError("Item quantity must be at least 1")
            if quantity > OrderItem.MAX_QUANTITY:
                raise ValidationError(f"Item quantity must be at most {OrderItem.MAX_QUANTITY}")

            menu_item = menu.get(item["menu_item_id"])
            if menu_item is None:
                raise ValidationError(f"Menu item {item['menu_item_id']} not found")
            if menu_item.restaurant_id != restaurant.pk:
                raise ValidationError(f"{menu_item.name} is not on the menu of {restaurant.name}")
            if not menu_item.is_available:
                raise ValidationError(f"{menu_item.name} is currently unavailable")

            lines.append((menu_item, quantity))

        total = compute_total((menu_item.price, quantity) for menu_item, quantity in lines)

        if client_total is not None:
            if abs(Decimal(str(client_total)) - total) > TOTAL_TOLERANCE:
                logger.info(
                    "Rejected order for restaurant %s: client total %s, computed %s",
                    restaurant.pk, client_total, total,
                )
                raise ValidationError("Total amount mismatch")

        order = Order.objects.create(
            customer_id=principal.id,
            restaurant=restaurant,
            status=Order.PENDING,
            total_amount=total,
            delivery_address=delivery_address,
            phone=phone,
            special_instructions=(special_instructions or "").strip(),
        )
        OrderItem.objects.bulk_create(
            [
                OrderItem(
                    order=order,
                    menu_item_id=menu_item.pk,
                    name=menu_item.name,
                    price=menu_item.price,
                    quantity=quantity,
                )
                for menu_item, quantity in lines
            ]
        )

    logger.info("Customer %s placed order %s at restaurant %s for %s", principal.id, order.pk, restaurant.pk, total)
    return order


def transition_order(principal, order, target_status):
    """
    Move ``order`` to ``target_status``.

    The write only lands if the stored status is still the one the decision
    was made on; otherwise the request is rejected and nothing changes.
    """
    current = order.status
    try:
        check_transition(principal, order, order.restaurant, target_status)
    except TransitionError as exc:
        logger.info(
            "Rejected status change of order %s from %s to %s by user %s: %s",
            order.pk, current, target_status, getattr(principal, "id", None), exc.message,
        )
        if exc.forbidden:
            raise PermissionDenied(exc.message)
        raise ValidationError(exc.message)

    now = timezone.now()
    updated = Order.objects.filter(pk=order.pk, status=current).update(status=target_status, updated_at=now)
    if not updated:
        logger.warning("Order %s changed status concurrently, dropping move to %s", order.pk, target_status)
        raise ValidationError("Order status was changed by another request, please retry")

    order.status = target_status
    order.updated_at = now
    logger.info("Order %s moved from %s to %s by user %s", order.pk, current, target_status, principal.id)
    return order
