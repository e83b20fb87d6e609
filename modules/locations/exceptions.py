"""
Locations module exceptions.
"""
from shared.exceptions import ConflictError, ForbiddenError, NotFoundError


class LocationNotFoundError(NotFoundError):
    """Raised when a location does not exist or is not visible to the user."""

    def __init__(self, location_id=None):
        self.location_id = location_id
        super().__init__('Location', location_id, code='LOCATION_NOT_FOUND')


class LocationAlreadyExistsError(ConflictError):
    """Raised when the user can already see a location with this name."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(
            f"Location '{name}' already exists",
            code='LOCATION_ALREADY_EXISTS'
        )


class DefaultLocationError(ForbiddenError):
    """Raised on an attempt to change or delete a system location."""

    def __init__(self, action: str = 'modify'):
        super().__init__(f"Cannot {action} a default location", code='DEFAULT_LOCATION')


class LocationInUseError(ConflictError):
    """Raised when deleting a location that still has assets."""

    def __init__(self, location_id, asset_count: int):
        self.location_id = location_id
        self.asset_count = asset_count
        super().__init__(
            f"Cannot delete location with {asset_count} asset(s)",
            code='LOCATION_IN_USE'
        )
