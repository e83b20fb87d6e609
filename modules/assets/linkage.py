"""
Links between assets and the categories/locations they are filed under.

Asset writes check that both references are visible to the owner; category
and location deletes ask here whether the user still has assets on them.
"""
import logging
from typing import List, Tuple

from django.db import transaction

from modules.categories.models import CategoryModel
from modules.locations.models import LocationModel

from .exceptions import AssetReferenceError
from .models import AssetModel

logger = logging.getLogger(__name__)


class AssetLinkageService:
    """Reference checks and usage counts for assets."""

    def validate_references(
        self,
        user_id,
        category_id,
        location_id,
    ) -> Tuple[CategoryModel, LocationModel]:
        """Return the category and location, or fail naming the bad reference."""
        category = CategoryModel.objects.get_visible(category_id, user_id)
        if category is None:
            raise AssetReferenceError('Category', category_id)

        location = LocationModel.objects.get_visible(location_id, user_id)
        if location is None:
            raise AssetReferenceError('Location', location_id)

        return category, location

    def validate_category(self, user_id, category_id) -> CategoryModel:
        category = CategoryModel.objects.get_visible(category_id, user_id)
        if category is None:
            raise AssetReferenceError('Category', category_id)
        return category

    def validate_location(self, user_id, location_id) -> LocationModel:
        location = LocationModel.objects.get_visible(location_id, user_id)
        if location is None:
            raise AssetReferenceError('Location', location_id)
        return location

    def count_by_category(self, category_id, user_id) -> int:
        return AssetModel.objects.owned_by(user_id).filter(category_id=category_id).count()

    def count_by_location(self, location_id, user_id) -> int:
        return AssetModel.objects.owned_by(user_id).filter(location_id=location_id).count()

    def list_by_category(self, category_id, user_id) -> List[AssetModel]:
        return list(
            AssetModel.objects.owned_by(user_id)
            .filter(category_id=category_id)
            .select_related('category', 'category__parent', 'location')
            .order_by('-created_at')
        )

    def list_by_location(self, location_id, user_id) -> List[AssetModel]:
        return list(
            AssetModel.objects.owned_by(user_id)
            .filter(location_id=location_id)
            .select_related('category', 'category__parent', 'location')
            .order_by('-created_at')
        )

    def schedule_image_cleanup(self, image_url: str, wait_for_commit: bool = True) -> None:
        """
        Queue removal of a stored image.

        By default the task is sent once the current transaction commits, so a
        rolled-back delete keeps its image. Pass ``wait_for_commit=False`` for
        images whose row was never written.
        """
        if not image_url:
            return

        def dispatch():
            from .tasks import cleanup_asset_image
            try:
                cleanup_asset_image.delay(image_url)
            except Exception:
                logger.warning(f"Could not queue image cleanup for {image_url}", exc_info=True)

        if wait_for_commit:
            transaction.on_commit(dispatch)
        else:
            dispatch()
