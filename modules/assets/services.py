"""
Assets business logic services.
"""
import logging
from typing import Any, Dict, Optional

from django.db import transaction
from django.db.models import QuerySet
from django.utils import timezone

from shared.exceptions import InternalError, ValidationError
from shared.storage import default_storage
from shared.utils import is_valid_uuid

from .exceptions import AssetNotFoundError, InvalidPriceRangeError
from .filters import AssetFilter, ordering_for
from .linkage import AssetLinkageService
from .models import AssetModel

logger = logging.getLogger(__name__)

ASSET_FIELDS = (
    'name',
    'description',
    'price',
    'condition',
    'serial_number',
    'purchase_date',
    'warranty',
)


class AssetService:
    """Service for a user's own assets."""

    def __init__(self, linkage: AssetLinkageService = None, storage=None):
        self.linkage = linkage or AssetLinkageService()
        self.storage = storage or default_storage

    def _owned(self, user_id) -> QuerySet:
        return (
            AssetModel.objects.owned_by(user_id)
            .select_related('category', 'category__parent', 'location')
        )

    def list_assets(self, user_id, filters: Optional[Dict[str, Any]] = None) -> QuerySet:
        """Filtered and sorted assets of the user. Pagination is left to the caller."""
        filters = {k: v for k, v in (filters or {}).items() if v not in (None, '')}

        filterset = AssetFilter(data=filters, queryset=self._owned(user_id))
        if not filterset.is_valid():
            field, errors = next(iter(filterset.errors.items()))
            raise ValidationError(str(errors[0]), field=field)

        cleaned = filterset.form.cleaned_data
        min_price, max_price = cleaned.get('min_price'), cleaned.get('max_price')
        if min_price is not None and max_price is not None and min_price > max_price:
            raise InvalidPriceRangeError()

        return filterset.qs.order_by(
            *ordering_for(filters.get('sort_by'), filters.get('sort_order'))
        )

    def get_asset(self, user_id, asset_id) -> AssetModel:
        asset = None
        if is_valid_uuid(asset_id):
            asset = self._owned(user_id).filter(id=asset_id).first()
        if asset is None:
            raise AssetNotFoundError(asset_id=asset_id)
        return asset

    def create_asset(self, user_id, data: Dict[str, Any], image=None) -> AssetModel:
        """Create an asset after checking its category and location."""
        category, location = self.linkage.validate_references(
            user_id, data.get('category_id'), data.get('location_id')
        )

        image_url = self._upload(image) if image is not None else ''
        try:
            with transaction.atomic():
                asset = AssetModel.objects.create(
                    user_id=user_id,
                    category=category,
                    location=location,
                    image=image_url,
                    **{field: data[field] for field in ASSET_FIELDS if field in data},
                )
        except Exception:
            self.linkage.schedule_image_cleanup(image_url, wait_for_commit=False)
            raise

        logger.info(f"Created asset: {asset.name} ({asset.id}) for user {user_id}")
        return asset

    @transaction.atomic
    def update_asset(self, user_id, asset_id, data: Dict[str, Any], image=None) -> AssetModel:
        """Partial update. Only supplied fields change."""
        asset = self.get_asset(user_id, asset_id)

        if data.get('category_id') is not None:
            asset.category = self.linkage.validate_category(user_id, data['category_id'])
        if data.get('location_id') is not None:
            asset.location = self.linkage.validate_location(user_id, data['location_id'])

        for field in ASSET_FIELDS:
            if field in data:
                setattr(asset, field, data[field])

        old_image = None
        new_image = self._upload(image) if image is not None else None
        if new_image is not None:
            old_image, asset.image = asset.image, new_image

        try:
            with transaction.atomic():
                asset.save()
        except Exception:
            self.linkage.schedule_image_cleanup(new_image, wait_for_commit=False)
            raise

        # the replaced image goes once the new one is committed
        self.linkage.schedule_image_cleanup(old_image)
        logger.info(f"Updated asset: {asset.id}")
        return asset

    @transaction.atomic
    def delete_asset(self, user_id, asset_id) -> bool:
        """Soft delete an asset and queue removal of its image."""
        asset = self.get_asset(user_id, asset_id)

        asset.deleted_at = timezone.now()
        asset.save(update_fields=['deleted_at', 'updated_at'])
        self.linkage.schedule_image_cleanup(asset.image)

        logger.info(f"Deleted asset: {asset.id}")
        return True

    def _upload(self, image) -> str:
        try:
            return self.storage.upload_image(image)
        except Exception as e:
            raise InternalError("Failed to upload image", cause=e)
