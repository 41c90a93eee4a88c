"""RBAC helpers for resolving who holds a system role."""
from rest_framework.exceptions import NotFound

from accounts.models import SystemRole, User, UserRole

# Earliest assignment wins; id breaks ties between rows created in the same instant.
DEFAULT_HOLDER_ORDERING = ("created_at", "id")


def get_users_by_role(role, *, order_by=DEFAULT_HOLDER_ORDERING):
    """Return the active users holding ``role`` in assignment order."""
    assignments = (
        UserRole.objects.filter(role=role, is_active=True, user__is_active=True)
        .select_related("user")
        .order_by(*order_by)
    )
    return [assignment.user for assignment in assignments]


def resolve_role_holder(role, *, order_by=DEFAULT_HOLDER_ORDERING) -> User:
    """Return the single user responsible for ``role``.

    The first holder under ``order_by`` is used. Raises ``NotFound`` when the
    role has no active holder.
    """
    holders = get_users_by_role(role, order_by=order_by)
    if not holders:
        label = SystemRole(role).label if role in SystemRole.values else role
        raise NotFound(f"{label}s not found")
    return holders[0]


def assign_roles(user, roles):
    """Grant ``roles`` to ``user``, reactivating previously revoked ones."""
    granted = []
    for role in roles or []:
        assignment, created = UserRole.objects.get_or_create(user=user, role=role)
        if not created and not assignment.is_active:
            assignment.is_active = True
            assignment.save(update_fields=["is_active"])
        granted.append(assignment)
    return granted
