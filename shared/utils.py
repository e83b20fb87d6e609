"""
Shared utility functions.
"""
import uuid


def is_valid_uuid(value) -> bool:
    """Check if value is (or parses as) a UUID."""
    if isinstance(value, uuid.UUID):
        return True
    try:
        uuid.UUID(str(value))
        return True
    except (ValueError, TypeError, AttributeError):
        return False


def normalize_name(value: str) -> str:
    """Trim surrounding whitespace from a user-supplied name."""
    return (value or '').strip()


def same_name(left: str, right: str) -> bool:
    """Case-insensitive name comparison."""
    return (left or '').casefold() == (right or '').casefold()


def is_unique_violation(exc) -> bool:
    """True when an IntegrityError was raised by a unique constraint or index."""
    pgcode = getattr(exc.__cause__, 'pgcode', None)
    if pgcode is not None:
        return pgcode == '23505'
    return 'UNIQUE constraint failed' in str(exc)
