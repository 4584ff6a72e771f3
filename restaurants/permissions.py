from rest_framework import permissions
from rest_framework.permissions import BasePermission

from users.principal import Principal


def can_manage_restaurant(principal, restaurant):
    return principal is not None and principal.id == restaurant.owner_id


def can_manage_menu_item(principal, menu_item, restaurant):
    # Menu items have no owner of their own; ownership is the parent restaurant's.
    return can_manage_restaurant(principal, restaurant)


def can_create_restaurant(principal):
    return principal is not None and principal.role == "partner"


def can_create_menu_item(principal):
    return principal is not None and principal.role == "partner"


class RestaurantPermission(BasePermission):
    """
    Anyone may read. Partners may create; only the owner may change or delete.
    """
    message = "You do not have permission to manage this restaurant"

    def has_permission(self, request, view):
        if request.method in permissions.SAFE_METHODS:
            return True
        principal = Principal.from_user(request.user)
        if view.action == "create":
            self.message = "Only restaurant partners can create restaurants"
            return can_create_restaurant(principal)
        return principal is not None

    def has_object_permission(self, request, view, obj):
        if request.method in permissions.SAFE_METHODS:
            return True
        return can_manage_restaurant(Principal.from_user(request.user), obj)


class MenuItemPermission(BasePermission):
    """
    Anyone may read. Partners may create; the owner of the parent restaurant
    may change or delete.
    """
    message = "You do not have permission to manage this menu item"

    def has_permission(self, request, view):
        if request.method in permissions.SAFE_METHODS:
            return True
        principal = Principal.from_user(request.user)
        if view.action == "create":
            self.message = "Only restaurant partners can create menu items"
            return can_create_menu_item(principal)
        return principal is not None

    def has_object_permission(self, request, view, obj):
        if request.method in permissions.SAFE_METHODS:
            return True
        return can_manage_menu_item(Principal.from_user(request.user), obj, obj.restaurant)
