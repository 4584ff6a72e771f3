from decimal import Decimal

import pytest
from rest_framework.exceptions import NotFound, PermissionDenied, ValidationError

from orders.models import Order, OrderItem
from orders.services import compute_total, place_order, round_money, transition_order
from users.principal import Principal

pytestmark = pytest.mark.django_db


def place(customer, restaurant, items, **kwargs):
    kwargs.setdefault("delivery_address", "1 Main Street")
    kwargs.setdefault("phone", "555-0100")
    return place_order(Principal.from_user(customer), restaurant.pk, items, **kwargs)


def test_round_money_is_half_up():
    assert round_money(Decimal("2.005")) == Decimal("2.01")
    assert round_money(Decimal("2.004")) == Decimal("2.00")
    assert compute_total([(Decimal("0.10"), 3), (Decimal("19.99"), 2)]) == Decimal("40.28")


def test_total_uses_live_menu_prices(customer, restaurant, item_a, item_b):
    order = place(customer, restaurant, [
        {"menu_item_id": item_a.pk, "quantity": 2},
        {"menu_item_id": item_b.pk, "quantity": 1},
    ])

    assert order.total_amount == Decimal("21.50")
    assert order.status == Order.PENDING
    assert order.customer == customer
    assert order.payment_method == Order.CASH_ON_DELIVERY
    lines = list(order.items.values_list("menu_item_id", "name", "price", "quantity"))
    assert lines == [
        (item_a.pk, "Margherita", Decimal("8.00"), 2),
        (item_b.pk, "Garlic Bread", Decimal("5.50"), 1),
    ]


def test_matching_client_total_is_accepted(customer, restaurant, item_a, item_b):
    order = place(
        customer, restaurant,
        [{"menu_item_id": item_a.pk, "quantity": 2}, {"menu_item_id": item_b.pk, "quantity": 1}],
        client_total=21.505,
    )

    assert order.total_amount == Decimal("21.50")


def test_mismatched_client_total_is_rejected(customer, restaurant, item_a, item_b):
    with pytest.raises(ValidationError) as excinfo:
        place(
            customer, restaurant,
            [{"menu_item_id": item_a.pk, "quantity": 2}, {"menu_item_id": item_b.pk, "quantity": 1}],
            client_total=25.00,
        )

    assert "Total amount mismatch" in str(excinfo.value.detail)
    assert not Order.objects.exists()


def test_snapshot_survives_menu_changes(customer, restaurant, item_a):
    order = place(customer, restaurant, [{"menu_item_id": item_a.pk, "quantity": 1}])

    item_a.name = "Margherita Deluxe"
    item_a.price = Decimal("11.00")
    item_a.save()
    item_a.delete()

    line = OrderItem.objects.get(order=order)
    assert line.name == "Margherita"
    assert line.price == Decimal("8.00")
    order.refresh_from_db()
    assert order.total_amount == Decimal("8.00")


@pytest.mark.parametrize("problem", ["unavailable", "foreign", "missing", "zero_quantity"])
def test_one_bad_line_rejects_whole_order(customer, restaurant, item_a, item_b, make_restaurant,
                                          make_menu_item, other_partner, problem):
    bad_line = {"menu_item_id": item_b.pk, "quantity": 1}
    if problem == "unavailable":
        item_b.is_available = False
        item_b.save()
    elif problem == "foreign":
        elsewhere = make_restaurant(other_partner, name="Elsewhere")
        bad_line["menu_item_id"] = make_menu_item(elsewhere, "Ramen", "12.00").pk
    elif problem == "missing":
        bad_line["menu_item_id"] = 999999
    else:
        bad_line["quantity"] = 0

    with pytest.raises(ValidationError):
        place(customer, restaurant, [{"menu_item_id": item_a.pk, "quantity": 1}, bad_line])

    assert not Order.objects.exists()
    assert not OrderItem.objects.exists()


def test_missing_restaurant_is_not_found(customer, item_a):
    with pytest.raises(NotFound):
        place_order(Principal.from_user(customer), 999999, [{"menu_item_id": item_a.pk, "quantity": 1}],
                    delivery_address="1 Main Street", phone="555-0100")


@pytest.mark.parametrize("field", ["delivery_address", "phone"])
def test_blank_contact_details_are_rejected(customer, restaurant, item_a, field):
    with pytest.raises(ValidationError):
        place(customer, restaurant, [{"menu_item_id": item_a.pk, "quantity": 1}], **{field: "   "})


def test_empty_order_is_rejected(customer, restaurant):
    with pytest.raises(ValidationError):
        place(customer, restaurant, [])


def test_partner_cannot_place_orders(partner, restaurant, item_a):
    with pytest.raises(PermissionDenied):
        place(partner, restaurant, [{"menu_item_id": item_a.pk, "quantity": 1}])


def test_transition_updates_status_and_timestamp(customer, partner, restaurant, item_a):
    order = place(customer, restaurant, [{"menu_item_id": item_a.pk, "quantity": 1}])
    before = order.updated_at

    transition_order(Principal.from_user(partner), order, Order.CONFIRMED)

    order.refresh_from_db()
    assert order.status == Order.CONFIRMED
    assert order.updated_at > before


def test_transition_on_stale_status_is_rejected(customer, partner, restaurant, item_a):
    order = place(customer, restaurant, [{"menu_item_id": item_a.pk, "quantity": 1}])
    stale = Order.objects.get(pk=order.pk)

    transition_order(Principal.from_user(customer), order, Order.CANCELLED)

    with pytest.raises(ValidationError):
        transition_order(Principal.from_user(partner), stale, Order.CONFIRMED)
    stale.refresh_from_db()
    assert stale.status == Order.CANCELLED


def test_rejected_transition_leaves_order_unchanged(customer, restaurant, item_a):
    order = place(customer, restaurant, [{"menu_item_id": item_a.pk, "quantity": 1}])

    with pytest.raises(PermissionDenied):
        transition_order(Principal.from_user(customer), order, Order.CONFIRMED)

    order.refresh_from_db()
    assert order.status == Order.PENDING


def test_oversized_quantity_is_rejected(customer, restaurant, item_a):
    with pytest.raises(ValidationError):
        place(customer, restaurant, [{"menu_item_id": item_a.pk, "quantity": OrderItem.MAX_QUANTITY + 1}])

    assert not Order.objects.exists()
