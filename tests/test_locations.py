"""
Tests for the location service.
"""
from unittest import mock

import pytest

from modules.locations.exceptions import (
    DefaultLocationError,
    LocationAlreadyExistsError,
    LocationInUseError,
    LocationNotFoundError,
)
from modules.locations.models import LocationModel
from modules.locations.seeds import SYSTEM_LOCATIONS, seed_system_locations


class TestLocationService:

    def test_garage_scenario(
        self, location_service, asset_service, user, other_user, technology, create_asset
    ):
        garage = location_service.create_location(user.id, 'Garage')

        with pytest.raises(LocationNotFoundError):
            location_service.get_location_by_id(other_user.id, garage.id)

        renamed = location_service.update_location(user.id, garage.id, 'Workshop')
        assert renamed.name == 'Workshop'

        asset = create_asset(user, technology, garage, name='Drill')
        with pytest.raises(LocationInUseError):
            location_service.delete_location(user.id, garage.id)

        asset_service.delete_asset(user.id, asset.id)
        assert location_service.delete_location(user.id, garage.id) is True

    def test_list_is_default_first_and_scoped(self, location_service, user, other_user, garage):
        location_service.create_location(user.id, 'attic')
        location_service.create_location(other_user.id, 'Boathouse')

        names = [row['name'] for row in location_service.get_locations(user.id)]

        assert names == ['Garage', 'attic']

    def test_duplicate_of_system_location_conflicts(self, location_service, user, garage):
        with pytest.raises(LocationAlreadyExistsError):
            location_service.create_location(user.id, 'GARAGE')

    def test_other_users_name_is_free(self, location_service, user, other_user):
        location_service.create_location(other_user.id, 'Boathouse')

        location = location_service.create_location(user.id, 'Boathouse')

        assert location.owner_id == user.id

    def test_database_race_maps_to_conflict(self, location_service, user):
        location_service.create_location(user.id, 'Shed')

        with mock.patch.object(location_service, '_name_taken', return_value=False):
            with pytest.raises(LocationAlreadyExistsError):
                location_service.create_location(user.id, 'shed')

    def test_rename_conflict(self, location_service, user):
        location_service.create_location(user.id, 'Shed')
        loft = location_service.create_location(user.id, 'Loft')

        with pytest.raises(LocationAlreadyExistsError):
            location_service.update_location(user.id, loft.id, 'shed')

    def test_default_location_is_immutable(self, location_service, user, garage):
        with pytest.raises(DefaultLocationError):
            location_service.update_location(user.id, garage.id, 'Carport')
        with pytest.raises(DefaultLocationError):
            location_service.delete_location(user.id, garage.id)

    def test_location_assets(self, location_service, user, other_user, technology, garage, create_asset):
        mine = create_asset(user, technology, garage, name='Mine')
        create_asset(other_user, technology, garage, name='Theirs')

        location, assets = location_service.get_location_assets(user.id, garage.id)

        assert location == garage
        assert assets == [mine]


@pytest.mark.django_db
class TestLocationSeeds:

    def test_seed_is_idempotent(self):
        assert seed_system_locations() == len(SYSTEM_LOCATIONS)
        assert seed_system_locations() == 0

        rows = LocationModel.objects.system()
        assert rows.count() == len(SYSTEM_LOCATIONS)
        assert all(row.is_default for row in rows)
