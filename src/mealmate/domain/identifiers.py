"""Document identifier helpers."""

from bson import ObjectId

from mealmate.domain.errors import InvalidIdentifierError


def is_valid_id(value: str | None) -> bool:
    """Return true when value is a 24-character hex document id."""
    return (
        isinstance(value, str) and len(value) == 24 and ObjectId.is_valid(value)
    )


def ensure_valid_id(value: str | None, label: str = "ID") -> str:
    """Return value unchanged or raise when it is not a usable document id."""
    if not is_valid_id(value):
        raise InvalidIdentifierError(f"Invalid {label}")
    return value


def new_id() -> str:
    """Generate a fresh document id string."""
    return str(ObjectId())
