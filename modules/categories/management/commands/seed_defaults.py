"""
Seed the system categories and locations.
"""
from django.core.management.base import BaseCommand

from modules.categories.seeds import seed_system_categories
from modules.locations.seeds import seed_system_locations


class Command(BaseCommand):
    help = 'Create the default categories and locations shared by all users'

    def add_arguments(self, parser):
        parser.add_argument(
            '--categories-only',
            action='store_true',
            help='Seed categories but not locations',
        )

    def handle(self, *args, **options):
        categories = seed_system_categories()
        self.stdout.write(f'Categories created: {categories}')

        if not options['categories_only']:
            locations = seed_system_locations()
            self.stdout.write(f'Locations created: {locations}')

        self.stdout.write(self.style.SUCCESS('Default data seeded.'))
