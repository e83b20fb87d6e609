"""
Categories models.
"""
import uuid

from django.conf import settings
from django.db import models
from django.db.models import F, Q
from django.db.models.functions import Lower

from shared.scope import ScopedManager


class CategoryModel(models.Model):
    """
    Two-level category hierarchy.

    Rows without an owner are system rows shared by every user; rows with an
    owner are private to that user. A child always points at a top-level row.
    """

    id = models.UUIDField(
        primary_key=True,
        default=uuid.uuid4,
        editable=False
    )
    name = models.CharField(
        max_length=100,
        db_index=True,
        verbose_name='Category name'
    )
    parent = models.ForeignKey(
        'self',
        on_delete=models.PROTECT,
        null=True,
        blank=True,
        related_name='children',
        verbose_name='Parent category'
    )
    owner = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        null=True,
        blank=True,
        related_name='categories',
        verbose_name='Owner',
        help_text='Empty for system categories'
    )
    is_default = models.BooleanField(
        default=False,
        db_index=True,
        verbose_name='Default category'
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
        db_table = 'categories'
        verbose_name = 'Category'
        verbose_name_plural = 'Categories'
        ordering = ['-is_default', 'name']
        base_manager_name = 'all_objects'
        indexes = [
            models.Index(fields=['owner', 'parent'], name='idx_categories_owner_parent'),
        ]
        constraints = [
            # SQL NULLs never compare equal, so each owner/parent NULL
            # combination gets its own partial index.
            models.UniqueConstraint(
                Lower('name'), 'owner', 'parent',
                condition=Q(deleted_at__isnull=True),
                name='uq_categories_name_owner_parent',
            ),
            models.UniqueConstraint(
                Lower('name'), 'owner',
                condition=Q(deleted_at__isnull=True, parent__isnull=True),
                name='uq_categories_name_owner_root',
            ),
            models.UniqueConstraint(
                Lower('name'), 'parent',
                condition=Q(deleted_at__isnull=True, owner__isnull=True),
                name='uq_categories_name_system_parent',
            ),
            models.UniqueConstraint(
                Lower('name'),
                condition=Q(deleted_at__isnull=True, owner__isnull=True, parent__isnull=True),
                name='uq_categories_name_system_root',
            ),
            models.CheckConstraint(
                condition=Q(is_default=False) | Q(owner__isnull=True),
                name='ck_categories_default_is_system',
            ),
            models.CheckConstraint(
                condition=~Q(parent=F('id')),
                name='ck_categories_not_own_parent',
            ),
        ]

    def __str__(self):
        return self.full_path

    @property
    def is_deleted(self) -> bool:
        """Check if category is soft deleted."""
        return self.deleted_at is not None

    @property
    def is_custom(self) -> bool:
        return self.owner_id is not None

    @property
    def is_parent(self) -> bool:
        return self.parent_id is None

    @property
    def level(self) -> int:
        """0 for a top-level category, 1 for a child."""
        return 0 if self.parent_id is None else 1

    @property
    def full_path(self) -> str:
        """"Parent > Child" for a child, the bare name otherwise."""
        if self.parent_id is None:
            return self.name
        return f"{self.parent.name} > {self.name}"
