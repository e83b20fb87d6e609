"""
Tests for assets and their links to categories and locations.
"""
from datetime import date, timedelta
from decimal import Decimal
from unittest import mock

import pytest
from django.utils import timezone

from modules.assets.exceptions import (
    AssetNotFoundError,
    AssetReferenceError,
    InvalidPriceRangeError,
)
from modules.assets.linkage import AssetLinkageService
from modules.assets.models import AssetModel
from modules.assets.services import AssetService
from shared.exceptions import InternalError, ValidationError


@pytest.fixture
def storage():
    backend = mock.Mock()
    backend.upload_image.return_value = 'http://storage.test/test-bucket/assets/new.png'
    return backend


@pytest.fixture
def service(storage):
    return AssetService(storage=storage)


@pytest.fixture
def asset_data(technology, garage):
    return {
        'name': 'Laptop',
        'description': 'Work laptop',
        'price': Decimal('1299.00'),
        'condition': 'good',
        'serial_number': 'SN-001',
        'purchase_date': date(2024, 1, 15),
        'category_id': technology.id,
        'location_id': garage.id,
    }


class TestAssetLinkage:

    def test_validate_references_returns_rows(self, user, technology, garage):
        category, location = AssetLinkageService().validate_references(
            user.id, technology.id, garage.id
        )

        assert category == technology
        assert location == garage

    def test_category_is_checked_first(self, user, other_user, location_service):
        theirs = location_service.create_location(other_user.id, 'Boathouse')

        with pytest.raises(AssetReferenceError) as exc_info:
            AssetLinkageService().validate_references(user.id, 'bad-id', theirs.id)

        assert exc_info.value.reference == 'Category'

    def test_foreign_location_rejected(self, user, other_user, technology, location_service):
        theirs = location_service.create_location(other_user.id, 'Boathouse')

        with pytest.raises(AssetReferenceError) as exc_info:
            AssetLinkageService().validate_references(user.id, technology.id, theirs.id)

        assert exc_info.value.reference == 'Location'
        assert 'Location' in exc_info.value.message

    def test_counts_only_live_assets_of_user(
        self, user, other_user, technology, garage, create_asset, service
    ):
        create_asset(user, technology, garage, name='A')
        gone = create_asset(user, technology, garage, name='B')
        create_asset(other_user, technology, garage, name='C')
        service.delete_asset(user.id, gone.id)

        linkage = AssetLinkageService()
        assert linkage.count_by_category(technology.id, user.id) == 1
        assert linkage.count_by_location(garage.id, user.id) == 1
        assert linkage.count_by_location(garage.id, other_user.id) == 1


class TestAssetCrud:

    def test_create_and_get(self, service, user, asset_data):
        asset = service.create_asset(user.id, asset_data)

        fetched = service.get_asset(user.id, asset.id)
        assert fetched.name == 'Laptop'
        assert fetched.price == Decimal('1299.00')
        assert fetched.user_id == user.id
        assert fetched.image == ''

    def test_create_with_invisible_category(self, service, user, other_user, asset_data, category_service):
        theirs = category_service.create_category(other_user.id, 'Private')
        asset_data['category_id'] = theirs.id

        with pytest.raises(AssetReferenceError):
            service.create_asset(user.id, asset_data)

    def test_create_uploads_image(self, service, storage, user, asset_data):
        image = mock.Mock(name='photo.png')

        asset = service.create_asset(user.id, asset_data, image=image)

        storage.upload_image.assert_called_once_with(image)
        assert asset.image == 'http://storage.test/test-bucket/assets/new.png'

    def test_upload_failure_is_internal_error(self, service, storage, user, asset_data):
        storage.upload_image.side_effect = RuntimeError('s3 down')

        with pytest.raises(InternalError) as exc_info:
            service.create_asset(user.id, asset_data, image=mock.Mock())

        assert isinstance(exc_info.value.cause, RuntimeError)
        assert not AssetModel.objects.exists()

    def test_failed_insert_cleans_up_uploaded_image(self, service, user, asset_data):
        asset_data['price'] = Decimal('-1')

        with mock.patch('modules.assets.tasks.cleanup_asset_image.delay') as delay:
            with pytest.raises(Exception):
                service.create_asset(user.id, asset_data, image=mock.Mock())

        delay.assert_called_once_with('http://storage.test/test-bucket/assets/new.png')

    def test_other_users_asset_not_found(self, service, user, other_user, asset_data):
        asset = service.create_asset(user.id, asset_data)

        with pytest.raises(AssetNotFoundError):
            service.get_asset(other_user.id, asset.id)
        with pytest.raises(AssetNotFoundError):
            service.delete_asset(other_user.id, asset.id)

    def test_partial_update(self, service, user, asset_data, location_service):
        asset = service.create_asset(user.id, asset_data)
        shed = location_service.create_location(user.id, 'Shed')

        updated = service.update_asset(
            user.id, asset.id, {'location_id': shed.id, 'condition': 'fair'}
        )

        assert updated.location == shed
        assert updated.condition == 'fair'
        assert updated.name == 'Laptop'

    def test_update_rejects_foreign_location(self, service, user, other_user, asset_data, location_service):
        asset = service.create_asset(user.id, asset_data)
        theirs = location_service.create_location(other_user.id, 'Boathouse')

        with pytest.raises(AssetReferenceError):
            service.update_asset(user.id, asset.id, {'location_id': theirs.id})


class TestImageCleanup:

    def test_delete_schedules_cleanup_after_commit(
        self, service, user, asset_data, django_capture_on_commit_callbacks
    ):
        asset = service.create_asset(user.id, asset_data, image=mock.Mock())

        with mock.patch('modules.assets.tasks.cleanup_asset_image.delay') as delay:
            with django_capture_on_commit_callbacks(execute=True):
                service.delete_asset(user.id, asset.id)

        delay.assert_called_once_with(asset.image)
        assert not AssetModel.objects.filter(id=asset.id).exists()

    def test_replacing_image_cleans_old_one(
        self, service, storage, user, asset_data, django_capture_on_commit_callbacks
    ):
        asset = service.create_asset(user.id, asset_data, image=mock.Mock())
        old_image = asset.image
        storage.upload_image.return_value = 'http://storage.test/test-bucket/assets/second.png'

        with mock.patch('modules.assets.tasks.cleanup_asset_image.delay') as delay:
            with django_capture_on_commit_callbacks(execute=True):
                updated = service.update_asset(user.id, asset.id, {}, image=mock.Mock())

        assert updated.image == 'http://storage.test/test-bucket/assets/second.png'
        delay.assert_called_once_with(old_image)

    def test_dispatch_failure_does_not_fail_delete(
        self, service, user, asset_data, django_capture_on_commit_callbacks
    ):
        asset = service.create_asset(user.id, asset_data, image=mock.Mock())

        with mock.patch(
            'modules.assets.tasks.cleanup_asset_image.delay',
            side_effect=ConnectionError('broker down'),
        ):
            with django_capture_on_commit_callbacks(execute=True):
                assert service.delete_asset(user.id, asset.id) is True

    def test_cleanup_task_deletes_managed_object(self):
        from modules.assets.tasks import cleanup_asset_image

        with mock.patch('shared.storage.default_storage.delete_file', return_value=True) as delete:
            assert cleanup_asset_image('http://storage.test/test-bucket/assets/a.png') is True

        delete.assert_called_once_with('assets/a.png')

    def test_cleanup_task_skips_foreign_urls(self):
        from modules.assets.tasks import cleanup_asset_image

        with mock.patch('shared.storage.default_storage.delete_file') as delete:
            assert cleanup_asset_image('https://elsewhere.example/a.png') is False

        delete.assert_not_called()

    def test_storage_delete_failure_is_swallowed(self):
        from shared.storage import S3Storage

        storage = S3Storage(bucket_name='test-bucket')
        storage._client = mock.Mock()
        storage._client.delete_object.side_effect = RuntimeError('s3 down')

        assert storage.delete_file('assets/a.png') is False


class TestAssetListing:

    @pytest.fixture
    def assets(self, user, other_user, technology, laptops, garage, create_asset):
        rows = [
            create_asset(user, technology, garage, name='Camera', price=Decimal('300'),
                         condition='new', serial_number='CAM-1'),
            create_asset(user, laptops, garage, name='Laptop', price=Decimal('1500'),
                         condition='good', description='silver notebook'),
            create_asset(user, laptops, garage, name='Netbook', price=Decimal('100'),
                         condition='poor'),
            create_asset(other_user, technology, garage, name='Camera 2'),
        ]
        # pin creation order so newest-first is deterministic
        base = timezone.now()
        for offset, row in enumerate(rows):
            AssetModel.objects.filter(id=row.id).update(created_at=base + timedelta(minutes=offset))
        return rows

    def _names(self, queryset):
        return [asset.name for asset in queryset]

    def test_default_newest_first_and_owner_scoped(self, service, user, assets):
        assert self._names(service.list_assets(user.id)) == ['Netbook', 'Laptop', 'Camera']

    def test_search_matches_description_and_serial(self, service, user, assets):
        assert self._names(service.list_assets(user.id, {'search': 'NOTEBOOK'})) == ['Laptop']
        assert self._names(service.list_assets(user.id, {'search': 'cam-'})) == ['Camera']

    def test_filters(self, service, user, assets, laptops):
        result = service.list_assets(user.id, {'category_id': str(laptops.id), 'condition': 'poor'})
        assert self._names(result) == ['Netbook']

        result = service.list_assets(user.id, {'min_price': '200', 'max_price': '1000'})
        assert self._names(result) == ['Camera']

    def test_sorting(self, service, user, assets):
        result = service.list_assets(user.id, {'sort_by': 'price', 'sort_order': 'asc'})
        assert self._names(result) == ['Netbook', 'Camera', 'Laptop']

        result = service.list_assets(user.id, {'sort_by': 'name', 'sort_order': 'desc'})
        assert self._names(result) == ['Netbook', 'Laptop', 'Camera']

    def test_unknown_sort_falls_back(self, service, user, assets):
        result = service.list_assets(user.id, {'sort_by': 'serial_number'})
        assert self._names(result) == ['Netbook', 'Laptop', 'Camera']

    def test_price_inversion_rejected(self, service, user, assets):
        with pytest.raises(InvalidPriceRangeError):
            service.list_assets(user.id, {'min_price': '500', 'max_price': '20'})

    def test_bad_filter_value_rejected(self, service, user, assets):
        with pytest.raises(ValidationError):
            service.list_assets(user.id, {'condition': 'broken'})
