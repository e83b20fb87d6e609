"""
Ownership scope rules shared by categories and locations.

A row with no owner is a system row: every user can see it, nobody can
change it. A row with an owner is visible to and mutable by that owner only.
"""
from django.db import models
from django.db.models import Q
from django.db.models.functions import Lower

from .utils import is_valid_uuid


def _same_user(owner_id, user_id) -> bool:
    return owner_id is not None and str(owner_id) == str(user_id)


def is_visible(row, user_id) -> bool:
    """Return True if `user_id` may read `row`."""
    return row.owner_id is None or _same_user(row.owner_id, user_id)


def is_mutable(row, user_id) -> bool:
    """Return True if `user_id` may update or delete `row`."""
    return _same_user(row.owner_id, user_id)


class ScopedQuerySet(models.QuerySet):
    """QuerySet helpers for owner-scoped rows."""

    def alive(self):
        return self.filter(deleted_at__isnull=True)

    def visible_to(self, user_id):
        return self.filter(Q(owner__isnull=True) | Q(owner_id=user_id))

    def owned_by(self, user_id):
        return self.filter(owner_id=user_id)

    def system(self):
        return self.filter(owner__isnull=True)

    def default_first(self):
        """Default rows first, then name ascending (case-insensitive)."""
        return self.order_by('-is_default', Lower('name').asc(), 'id')

    def with_name(self, name: str):
        return self.filter(name__iexact=name)

    def get_visible(self, row_id, user_id):
        """Return the row if it exists and `user_id` can see it, else None."""
        if not is_valid_uuid(row_id):
            return None
        return self.visible_to(user_id).filter(id=row_id).first()


class ScopedManager(models.Manager.from_queryset(ScopedQuerySet)):
    """Default manager: hides soft-deleted rows."""

    def get_queryset(self):
        return super().get_queryset().alive()
