"""
Assets module exceptions.
"""
from shared.exceptions import NotFoundError, ValidationError


class AssetNotFoundError(NotFoundError):
    """Raised when an asset does not exist or belongs to another user."""

    def __init__(self, asset_id=None):
        self.asset_id = asset_id
        super().__init__('Asset', asset_id, code='ASSET_NOT_FOUND')


class AssetReferenceError(NotFoundError):
    """Raised when an asset points at a category or location the user cannot see."""

    def __init__(self, reference: str, reference_id):
        self.reference = reference
        self.reference_id = reference_id
        super().__init__(reference, code=f'{reference.upper()}_NOT_FOUND')


class InvalidPriceRangeError(ValidationError):
    """Raised when min_price is greater than max_price."""

    def __init__(self):
        super().__init__(
            "Min price cannot be greater than max price",
            field='min_price',
            code='INVALID_PRICE_RANGE'
        )
