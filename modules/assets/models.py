"""
Assets models.
"""
import uuid
from decimal import Decimal

from django.conf import settings
from django.core.validators import MinValueValidator
from django.db import models
from django.db.models import Q


class AssetQuerySet(models.QuerySet):

    def alive(self):
        return self.filter(deleted_at__isnull=True)

    def owned_by(self, user_id):
        return self.filter(user_id=user_id)


class AssetManager(models.Manager.from_queryset(AssetQuerySet)):
    """Default manager: hides soft-deleted assets."""

    def get_queryset(self):
        return super().get_queryset().alive()


class AssetModel(models.Model):
    """Physical item owned by a user, filed under one category and location."""

    class Condition(models.TextChoices):
        NEW = 'new', 'New'
        GOOD = 'good', 'Good'
        FAIR = 'fair', 'Fair'
        POOR = 'poor', 'Poor'

    id = models.UUIDField(
        primary_key=True,
        default=uuid.uuid4,
        editable=False
    )
    name = models.CharField(
        max_length=100,
        verbose_name='Asset name'
    )
    description = models.CharField(
        max_length=255,
        blank=True,
        default='',
        verbose_name='Description'
    )
    price = models.DecimalField(
        max_digits=10,
        decimal_places=2,
        validators=[MinValueValidator(Decimal('0'))],
        verbose_name='Price'
    )
    condition = models.CharField(
        max_length=10,
        choices=Condition.choices,
        verbose_name='Condition'
    )
    serial_number = models.CharField(
        max_length=100,
        blank=True,
        default='',
        verbose_name='Serial number'
    )
    purchase_date = models.DateField(
        null=True,
        blank=True,
        verbose_name='Purchase date'
    )
    warranty = models.DateField(
        null=True,
        blank=True,
        verbose_name='Warranty until'
    )
    image = models.URLField(
        max_length=500,
        blank=True,
        default='',
        verbose_name='Image URL'
    )
    category = models.ForeignKey(
        'categories.CategoryModel',
        on_delete=models.PROTECT,
        related_name='assets',
        verbose_name='Category'
    )
    location = models.ForeignKey(
        'locations.LocationModel',
        on_delete=models.PROTECT,
        related_name='assets',
        verbose_name='Location'
    )
    user = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name='assets',
        verbose_name='Owner'
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

    objects = AssetManager()
    all_objects = models.Manager()

    class Meta:
        db_table = 'assets'
        verbose_name = 'Asset'
        verbose_name_plural = 'Assets'
        ordering = ['-created_at']
        base_manager_name = 'all_objects'
        indexes = [
            models.Index(fields=['user', 'category'], name='idx_assets_user_category'),
            models.Index(fields=['user', 'location'], name='idx_assets_user_location'),
            models.Index(fields=['user', '-created_at'], name='idx_assets_user_created'),
        ]
        constraints = [
            models.CheckConstraint(
                condition=Q(price__gte=0),
                name='ck_assets_price_non_negative',
            ),
        ]

    def __str__(self):
        return self.name

    @property
    def is_deleted(self) -> bool:
        """Check if asset is soft deleted."""
        return self.deleted_at is not None
