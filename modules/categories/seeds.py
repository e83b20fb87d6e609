"""
System categories available to every user.
"""
import logging

from django.db import transaction

from .models import CategoryModel

logger = logging.getLogger(__name__)

SYSTEM_CATEGORIES = {
    'Technology': [
        'Computers', 'Laptops', 'Mobile Devices', 'Tablets',
        'Audio & Video', 'Gaming', 'Smart Home', 'Electronics',
    ],
    'Home & Living': [
        'Furniture', 'Appliances', 'Kitchen', 'Bathroom',
        'Bedroom', 'Living Room', 'Home Decor', 'Storage',
    ],
    'Transportation': [
        'Vehicles', 'Cars', 'Motorcycles', 'Bicycles', 'Auto Parts',
    ],
    'Tools & Equipment': [
        'Hand Tools', 'Power Tools', 'Garden Tools', 'Construction', 'Safety Equipment',
    ],
    'Personal Items': [
        'Jewelry', 'Watches', 'Clothing', 'Accessories', 'Personal Care',
    ],
    'Entertainment': [
        'Books', 'Movies & Music', 'Sports Equipment', 'Musical Instruments',
        'Art & Crafts', 'Photography', 'Games', 'Fitness Equipment',
    ],
    'Office & Business': [
        'Office Equipment', 'Computers & IT', 'Stationery', 'Documents',
    ],
    'Health & Beauty': [
        'Medical Equipment', 'Fitness', 'Beauty Products', 'Wellness',
    ],
    'Miscellaneous': [
        'Collectibles', 'Emergency Supplies', 'Seasonal Items', 'Others',
    ],
}


def _get_or_create_system(name, parent=None):
    category = (
        CategoryModel.objects.system()
        .with_name(name)
        .filter(parent=parent)
        .first()
    )
    if category is not None:
        return category, False
    category = CategoryModel.objects.create(
        name=name,
        parent=parent,
        owner=None,
        is_default=True,
    )
    return category, True


@transaction.atomic
def seed_system_categories(structure: dict = None) -> int:
    """
    Create missing system categories. Parents go first so children can be
    bound to their ids. Returns the number of rows created.
    """
    structure = structure or SYSTEM_CATEGORIES
    created = 0
    for parent_name, child_names in structure.items():
        parent, was_created = _get_or_create_system(parent_name)
        created += was_created
        for child_name in child_names:
            _, was_created = _get_or_create_system(child_name, parent=parent)
            created += was_created

    logger.info(f"Seeded {created} system categories")
    return created
