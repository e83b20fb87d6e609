"""
Tests for ownership scope rules.
"""
import uuid

import pytest
from django.db import IntegrityError, transaction

from shared.scope import is_mutable, is_visible
from shared.utils import is_unique_violation
from modules.categories.models import CategoryModel
from modules.locations.models import LocationModel


class TestScopePredicates:

    def test_system_row_visible_to_everyone_mutable_by_none(self, user, other_user, technology):
        for actor in (user, other_user):
            assert is_visible(technology, actor.id) is True
            assert is_mutable(technology, actor.id) is False

    def test_owned_row_visible_and_mutable_by_owner_only(self, user, other_user):
        location = LocationModel.objects.create(name='Shed', owner=user)

        assert is_visible(location, user.id) is True
        assert is_mutable(location, user.id) is True
        assert is_visible(location, other_user.id) is False
        assert is_mutable(location, other_user.id) is False

    def test_predicates_accept_string_ids(self, user):
        location = LocationModel.objects.create(name='Shed', owner=user)

        assert is_visible(location, str(user.id)) is True
        assert is_mutable(location, str(user.id)) is True


class TestScopedQuerySet:

    def test_visible_to_returns_system_and_own_rows(self, user, other_user, technology):
        mine = CategoryModel.objects.create(name='Mine', owner=user)
        CategoryModel.objects.create(name='Theirs', owner=other_user)

        names = set(CategoryModel.objects.visible_to(user.id).values_list('name', flat=True))

        assert names == {technology.name, mine.name}

    def test_default_manager_hides_tombstoned_rows(self, user):
        from django.utils import timezone

        row = LocationModel.objects.create(name='Gone', owner=user, deleted_at=timezone.now())

        assert not LocationModel.objects.filter(id=row.id).exists()
        assert LocationModel.all_objects.filter(id=row.id).exists()

    def test_default_first_orders_case_insensitively(self, user):
        LocationModel.objects.create(name='attic', owner=user)
        LocationModel.objects.create(name='Basement', owner=user)
        LocationModel.objects.create(name='Zoo', is_default=True)
        LocationModel.objects.create(name='Cellar', is_default=True)

        names = list(
            LocationModel.objects.visible_to(user.id)
            .default_first()
            .values_list('name', flat=True)
        )

        assert names == ['Cellar', 'Zoo', 'attic', 'Basement']

    def test_get_visible_hides_foreign_and_invalid_ids(self, user, other_user):
        theirs = LocationModel.objects.create(name='Theirs', owner=other_user)

        assert LocationModel.objects.get_visible(theirs.id, user.id) is None
        assert LocationModel.objects.get_visible('not-a-uuid', user.id) is None
        assert LocationModel.objects.get_visible(uuid.uuid4(), user.id) is None
        assert LocationModel.objects.get_visible(theirs.id, other_user.id) == theirs


@pytest.mark.django_db
class TestDatabaseConstraints:

    def test_default_row_cannot_have_owner(self, user):
        with pytest.raises(IntegrityError):
            LocationModel.objects.create(name='Bad', owner=user, is_default=True)

    def test_case_insensitive_unique_for_system_rows(self):
        CategoryModel.objects.create(name='Tools', is_default=True)
        with pytest.raises(IntegrityError):
            CategoryModel.objects.create(name='TOOLS', is_default=True)

    def test_tombstoned_name_can_be_reused(self, user):
        from django.utils import timezone

        LocationModel.objects.create(name='Shed', owner=user, deleted_at=timezone.now())
        LocationModel.objects.create(name='Shed', owner=user)

        assert LocationModel.objects.owned_by(user.id).count() == 1


class TestUniqueViolation:

    def test_duplicate_name_is_unique_violation(self, technology):
        with pytest.raises(IntegrityError) as exc_info:
            with transaction.atomic():
                CategoryModel.objects.create(name='TECHNOLOGY', is_default=True)

        assert is_unique_violation(exc_info.value)

    def test_check_constraint_is_not_unique_violation(self, user):
        with pytest.raises(IntegrityError) as exc_info:
            with transaction.atomic():
                CategoryModel.objects.create(name='Odd', owner=user, is_default=True)

        assert not is_unique_violation(exc_info.value)
