"""
Categories module exceptions.
"""
from shared.exceptions import (
    ConflictError,
    ForbiddenError,
    NotFoundError,
    ValidationError,
)


class CategoryNotFoundError(NotFoundError):
    """Raised when a category does not exist or is not visible to the user."""

    def __init__(self, category_id=None, entity_name: str = 'Category'):
        self.category_id = category_id
        super().__init__(entity_name, category_id, code='CATEGORY_NOT_FOUND')


class CategoryAlreadyExistsError(ConflictError):
    """Raised when a category with the same name exists at the same level."""

    def __init__(self, name: str):
        self.name = name
        message = f"Category '{name}' already exists at this level"
        super().__init__(message, code='CATEGORY_ALREADY_EXISTS')


class InvalidCategoryHierarchyError(ValidationError):
    """Raised when a parent assignment would break the two-level tree."""

    def __init__(self, message: str):
        super().__init__(message, field='parent_id', code='INVALID_CATEGORY_HIERARCHY')


class DefaultCategoryError(ForbiddenError):
    """Raised on an attempt to change or delete a system category."""

    def __init__(self, action: str = 'modify'):
        message = f"Cannot {action} a default category"
        super().__init__(message, code='DEFAULT_CATEGORY')


class CategoryHasChildrenError(ConflictError):
    """Raised when deleting a category that still has subcategories."""

    def __init__(self, category_id):
        self.category_id = category_id
        super().__init__(
            "Cannot delete category with subcategories",
            code='CATEGORY_HAS_CHILDREN'
        )


class CategoryInUseError(ConflictError):
    """Raised when deleting a category that still has assets."""

    def __init__(self, category_id, asset_count: int):
        self.category_id = category_id
        self.asset_count = asset_count
        super().__init__(
            f"Cannot delete category with {asset_count} asset(s)",
            code='CATEGORY_IN_USE'
        )
