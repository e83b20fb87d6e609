"""
System locations available to every user.
"""
import logging

from django.db import transaction

from .models import LocationModel

logger = logging.getLogger(__name__)

SYSTEM_LOCATIONS = [
    'Living Room',
    'Bedroom',
    'Kitchen',
    'Bathroom',
    'Garage',
    'Office',
    'Storage',
    'Basement',
    'Attic',
    'Garden',
]


@transaction.atomic
def seed_system_locations(names: list = None) -> int:
    """Create missing system locations. Returns the number of rows created."""
    created = 0
    for name in names or SYSTEM_LOCATIONS:
        if LocationModel.objects.system().with_name(name).exists():
            continue
        LocationModel.objects.create(name=name, owner=None, is_default=True)
        created += 1

    logger.info(f"Seeded {created} system locations")
    return created
