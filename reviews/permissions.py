from rest_framework import permissions
from rest_framework.permissions import BasePermission

from users.principal import Principal


def can_create_review(principal):
    return principal is not None and principal.role == "customer"


def can_manage_review(principal, review):
    return principal is not None and principal.id == review.user_id


class ReviewPermission(BasePermission):
    """
    Anyone may read reviews. Customers may write one; only its author may
    change or delete it.
    """
    message = "You can only modify your own reviews"

    def has_permission(self, request, view):
        if request.method in permissions.SAFE_METHODS:
            return True
        principal = Principal.from_user(request.user)
        if view.action == "create":
            self.message = "Only customers can write reviews"
            return can_create_review(principal)
        return principal is not None

    def has_object_permission(self, request, view, obj):
        if request.method in permissions.SAFE_METHODS:
            return True
        return can_manage_review(Principal.from_user(request.user), obj)
