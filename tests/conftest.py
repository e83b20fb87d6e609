"""
Pytest configuration and fixtures.
"""
from decimal import Decimal

import pytest


@pytest.fixture(autouse=True)
def clear_cache():
    """Start every test with an empty cache."""
    from django.core.cache import cache
    cache.clear()
    yield
    cache.clear()


@pytest.fixture
def api_client():
    """Create an API client for testing."""
    from rest_framework.test import APIClient
    return APIClient()


@pytest.fixture
def user_model():
    """Get the custom user model."""
    from modules.users.models import UserModel
    return UserModel


@pytest.fixture
def create_user(db, user_model):
    """Factory fixture to create users."""
    def _create_user(
        email='test@example.com',
        fullname='Test User',
        password='testpass123',
        **kwargs
    ):
        return user_model.objects.create_user(
            email=email,
            fullname=fullname,
            password=password,
            **kwargs
        )
    return _create_user


@pytest.fixture
def user(create_user):
    return create_user()


@pytest.fixture
def other_user(create_user):
    return create_user(email='other@example.com', fullname='Other User')


@pytest.fixture
def authenticated_client(api_client, user):
    """Create an authenticated API client."""
    api_client.force_authenticate(user=user)
    return api_client


# Service fixtures

@pytest.fixture
def category_service():
    """Get category service instance."""
    from modules.categories.services import CategoryService
    return CategoryService()


@pytest.fixture
def location_service():
    """Get location service instance."""
    from modules.locations.services import LocationService
    return LocationService()


@pytest.fixture
def asset_service():
    """Get asset service instance."""
    from modules.assets.services import AssetService
    return AssetService()


# Model fixtures

@pytest.fixture
def technology(db):
    """System parent category."""
    from modules.categories.models import CategoryModel
    return CategoryModel.objects.create(name='Technology', is_default=True)


@pytest.fixture
def laptops(db, technology):
    """System child category under Technology."""
    from modules.categories.models import CategoryModel
    return CategoryModel.objects.create(name='Laptops', parent=technology, is_default=True)


@pytest.fixture
def garage(db):
    """System location."""
    from modules.locations.models import LocationModel
    return LocationModel.objects.create(name='Garage', is_default=True)


@pytest.fixture
def create_asset(db):
    """Factory fixture to create assets directly."""
    from modules.assets.models import AssetModel

    def _create_asset(user, category, location, name='Laptop', **kwargs):
        kwargs.setdefault('price', Decimal('999.99'))
        kwargs.setdefault('condition', AssetModel.Condition.GOOD)
        return AssetModel.objects.create(
            user=user,
            category=category,
            location=location,
            name=name,
            **kwargs
        )
    return _create_asset
