from rest_framework.permissions import BasePermission

from .principal import Principal


class IsCustomer(BasePermission):
    """
    Only authenticated customers.
    """
    message = "Only customers can access this endpoint"

    def has_permission(self, request, view):
        principal = Principal.from_user(request.user)
        return principal is not None and principal.role == "customer"


class IsPartner(BasePermission):
    """
    Only authenticated restaurant partners.
    """
    message = "Only restaurant partners can access this endpoint"

    def has_permission(self, request, view):
        principal = Principal.from_user(request.user)
        return principal is not None and principal.role == "partner"
