"""
Tests for seeding default data.
"""
from io import StringIO

import pytest
from django.core.management import call_command

from modules.categories.models import CategoryModel
from modules.categories.seeds import SYSTEM_CATEGORIES, seed_system_categories
from modules.locations.models import LocationModel
from modules.locations.seeds import SYSTEM_LOCATIONS


@pytest.mark.django_db
class TestSeedSystemCategories:

    def test_seed_creates_two_level_tree(self):
        expected = len(SYSTEM_CATEGORIES) + sum(len(c) for c in SYSTEM_CATEGORIES.values())

        assert seed_system_categories() == expected

        technology = CategoryModel.objects.system().get(name='Technology')
        assert technology.parent is None
        assert technology.is_default
        laptops = CategoryModel.objects.get(name='Laptops')
        assert laptops.parent == technology
        assert laptops.full_path == 'Technology > Laptops'

    def test_reseeding_creates_nothing(self):
        seed_system_categories()

        assert seed_system_categories() == 0

    def test_custom_structure_adds_missing_children(self):
        seed_system_categories({'Garden': ['Plants']})

        created = seed_system_categories({'Garden': ['Plants', 'Pots']})

        assert created == 1
        garden = CategoryModel.objects.get(name='Garden')
        assert sorted(c.name for c in garden.children.all()) == ['Plants', 'Pots']


@pytest.mark.django_db
class TestSeedDefaultsCommand:

    def test_seeds_categories_and_locations(self):
        out = StringIO()

        call_command('seed_defaults', stdout=out)

        assert CategoryModel.objects.system().filter(parent__isnull=True).count() == len(SYSTEM_CATEGORIES)
        assert LocationModel.objects.system().count() == len(SYSTEM_LOCATIONS)
        assert 'Default data seeded.' in out.getvalue()

    def test_categories_only(self):
        call_command('seed_defaults', '--categories-only', stdout=StringIO())

        assert CategoryModel.objects.exists()
        assert not LocationModel.objects.exists()
