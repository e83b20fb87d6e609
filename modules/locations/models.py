"""
Locations models.
"""
import uuid

from django.conf import settings
from django.db import models
from django.db.models import Q
from django.db.models.functions import Lower

from shared.scope import ScopedManager


class LocationModel(models.Model):
    """Place where assets are kept. Rows without an owner are shared defaults."""

    id = models.UUIDField(
        primary_key=True,
        default=uuid.uuid4,
        editable=False
    )
    name = models.CharField(
        max_length=100,
        db_index=True,
        verbose_name='Location name'
    )
    owner = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        null=True,
        blank=True,
        related_name='locations',
        verbose_name='Owner',
        help_text='Empty for system locations'
    )
    is_default = models.BooleanField(
        default=False,
        db_index=True,
        verbose_name='Default location'
    )
    created_at = models.DateTimeField(
        auto_now_add=True,
        verbose_name='Created at'
    )
    updated_at = models.DateTimeField(
        auto_now=True,
        verbose_name='Updated at'
    )
    deleted_at = models.DateTimeField(
        null=True,
        blank=True,
        verbose_name='Deleted at'
    )

    objects = ScopedManager()
    all_objects = models.Manager()

    class Meta:
        db_table = 'locations'
        verbose_name = 'Location'
        verbose_name_plural = 'Locations'
        ordering = ['-is_default', 'name']
        base_manager_name = 'all_objects'
        constraints = [
            models.UniqueConstraint(
                Lower('name'), 'owner',
                condition=Q(deleted_at__isnull=True),
                name='uq_locations_name_owner',
            ),
            models.UniqueConstraint(
                Lower('name'),
                condition=Q(deleted_at__isnull=True, owner__isnull=True),
                name='uq_locations_name_system',
            ),
            models.CheckConstraint(
                condition=Q(is_default=False) | Q(owner__isnull=True),
                name='ck_locations_default_is_system',
            ),
        ]

    def __str__(self):
        return self.name

    @property
    def is_deleted(self) -> bool:
        """Check if location is soft deleted."""
        return self.deleted_at is not None

    @property
    def is_custom(self) -> bool:
        return self.owner_id is not None
