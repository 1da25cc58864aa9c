"""Meal request domain rules."""

import re
from collections.abc import Mapping
from dataclasses import dataclass

PENDING_STATUS = "pending"
DELIVERED_STATUS = "delivered"


@dataclass(frozen=True)
class MealRequestFilter:
    """Filter over meal request documents."""

    requested_by: str | None = None
    search: str | None = None

    def to_mongo(self) -> dict[str, object]:
        """Render the filter as a Mongo query document."""
        query: dict[str, object] = {}
        if self.requested_by is not None:
            query["requestedBy"] = self.requested_by
        if self.search:
            pattern = {"$regex": re.escape(self.search), "$options": "i"}
            query["$or"] = [{"userEmail": pattern}, {"userName": pattern}]
        return query

    def matches(self, request: Mapping[str, object]) -> bool:
        """Return true when the request satisfies the filter."""
        if (
            self.requested_by is not None
            and request.get("requestedBy") != self.requested_by
        ):
            return False
        if self.search:
            needle = self.search.lower()
            fields = (request.get("userEmail"), request.get("userName"))
            return any(
                isinstance(value, str) and needle in value.lower() for value in fields
            )
        return True


def build_meal_request_filter(
    email: str | None = None, search: str | None = None
) -> MealRequestFilter:
    """Build a meal request filter from optional query parameters."""
    return MealRequestFilter(requested_by=email or None, search=search or None)
