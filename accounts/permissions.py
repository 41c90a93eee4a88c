"""Custom permissions for the application"""
from rest_framework import permissions


class HasSystemRole(permissions.BasePermission):
    """
    Allow access when the user holds one of the roles mapped to the view action.

    Views declare ``role_map = {"<action>": [roles...], "*": [roles...]}``.
    Actions without an entry fall back to ``"*"``; a view without a map only
    requires authentication. Superusers always pass.
    """

    message = 'You do not have the required role for this action.'

    def has_permission(self, request, view):
        user = request.user
        if not user or not user.is_authenticated:
            return False
        if user.is_superuser:
            return True

        role_map = getattr(view, 'role_map', None)
        if not role_map:
            return True

        action = getattr(view, 'action', None) or request.method.lower()
        roles = role_map.get(action, role_map.get('*'))
        if roles is None:
            return True
        return user.has_system_role(*roles)
