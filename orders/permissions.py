from rest_framework.permissions import BasePermission

from users.principal import Principal

from .transitions import can_transition


def can_create_order(principal):
    return principal is not None and principal.role == "customer"


def can_view_order(principal, order, restaurant):
    if principal is None:
        return False
    return principal.id == order.customer_id or principal.id == restaurant.owner_id


def can_transition_order(principal, order, restaurant, target_status):
    return can_transition(principal, order, restaurant, target_status)


class IsOrderParty(BasePermission):
    """
    The order's customer or the owner of the restaurant it was placed with.
    """
    message = "You do not have permission to view this order"

    def has_object_permission(self, request, view, obj):
        return can_view_order(Principal.from_user(request.user), obj, obj.restaurant)
