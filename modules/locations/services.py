"""
Locations business logic services.
"""
import logging
from typing import List, Dict, Any

from django.db import IntegrityError, transaction
from django.utils import timezone

from shared.cache import LOCATION_LIST, projection_cache
from shared.exceptions import ValidationError
from shared.scope import is_mutable
from shared.utils import is_unique_violation, normalize_name, same_name
from modules.assets.linkage import AssetLinkageService

from .models import LocationModel
from .exceptions import (
    LocationNotFoundError,
    LocationAlreadyExistsError,
    DefaultLocationError,
    LocationInUseError,
)
from .serializers import LocationSerializer

logger = logging.getLogger(__name__)


class LocationService:
    """Service for locations. Same scope rules as categories, without a parent."""

    def __init__(self, cache=None, linkage: AssetLinkageService = None):
        self.cache = cache or projection_cache
        self.linkage = linkage or AssetLinkageService()

    def get_locations(self, user_id) -> List[Dict[str, Any]]:
        """Visible locations, defaults first."""
        cached = self.cache.get(user_id, LOCATION_LIST)
        if cached is not None:
            return cached

        locations = LocationModel.objects.visible_to(user_id).default_first()
        data = LocationSerializer(locations, many=True).data
        self.cache.put(user_id, LOCATION_LIST, data)
        return data

    def get_location_by_id(self, user_id, location_id) -> LocationModel:
        location = LocationModel.objects.get_visible(location_id, user_id)
        if location is None:
            raise LocationNotFoundError(location_id=location_id)
        return location

    def get_location_assets(self, user_id, location_id):
        location = self.get_location_by_id(user_id, location_id)
        return location, self.linkage.list_by_location(location.id, user_id)

    @transaction.atomic
    def create_location(self, user_id, name: str) -> LocationModel:
        name = self._clean_name(name)
        if self._name_taken(user_id, name):
            raise LocationAlreadyExistsError(name=name)

        location = LocationModel(name=name, owner_id=user_id, is_default=False)
        self._save(location)

        logger.info(f"Created location: {location.name} ({location.id}) for user {user_id}")
        self._invalidate(user_id)
        return location

    @transaction.atomic
    def update_location(self, user_id, location_id, name: str) -> LocationModel:
        location = self._get_mutable(user_id, location_id, action='update')

        name = self._clean_name(name)
        if not same_name(name, location.name):
            if self._name_taken(user_id, name, exclude_id=location.id):
                raise LocationAlreadyExistsError(name=name)

        location.name = name
        self._save(location)

        logger.info(f"Updated location: {location.name} ({location.id})")
        self._invalidate(user_id)
        return location

    @transaction.atomic
    def delete_location(self, user_id, location_id) -> bool:
        location = self._get_mutable(user_id, location_id, action='delete')

        asset_count = self.linkage.count_by_location(location.id, user_id)
        if asset_count:
            raise LocationInUseError(location.id, asset_count)

        location.deleted_at = timezone.now()
        location.save(update_fields=['deleted_at', 'updated_at'])

        logger.info(f"Deleted location: {location.id}")
        self._invalidate(user_id)
        return True

    @staticmethod
    def _clean_name(name: str) -> str:
        name = normalize_name(name)
        if not name:
            raise ValidationError("Location name is required", field='name')
        return name

    def _get_mutable(self, user_id, location_id, action: str) -> LocationModel:
        location = self.get_location_by_id(user_id, location_id)
        if location.is_default or not is_mutable(location, user_id):
            raise DefaultLocationError(action=action)
        return location

    def _name_taken(self, user_id, name: str, exclude_id=None) -> bool:
        queryset = LocationModel.objects.visible_to(user_id).with_name(name)
        if exclude_id is not None:
            queryset = queryset.exclude(id=exclude_id)
        return queryset.exists()

    def _save(self, location: LocationModel) -> None:
        try:
            with transaction.atomic():
                location.save()
        except IntegrityError as e:
            if not is_unique_violation(e):
                raise
            raise LocationAlreadyExistsError(name=location.name)

    def _invalidate(self, user_id) -> None:
        self.cache.invalidate_on_commit(user_id, LOCATION_LIST)
