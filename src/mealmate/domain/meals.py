"""Meal query filters.

A ``MealFilter`` is the conjunction of whichever clauses the caller supplied.
It is rendered to a Mongo filter for the store and can also be evaluated
against a single document in memory.
"""

import math
import re
from collections.abc import Mapping
from dataclasses import dataclass

from mealmate.domain.errors import InvalidQueryError

ALL = "All"
OPEN_ENDED_PRICE_RANGE = "301+"
OPEN_ENDED_PRICE_FLOOR = 301.0


@dataclass(frozen=True)
class PriceRange:
    """Inclusive price bounds; ``maximum`` is None for open-ended ranges."""

    minimum: float
    maximum: float | None = None


@dataclass(frozen=True)
class MealFilter:
    """Filter over meal documents."""

    distributor_email: str | None = None
    title_contains: str | None = None
    category: str | None = None
    price: PriceRange | None = None

    def to_mongo(self) -> dict[str, object]:
        """Render the filter as a Mongo query document."""
        query: dict[str, object] = {}
        if self.distributor_email is not None:
            query["distributorEmail"] = self.distributor_email
        if self.title_contains:
            query["title"] = {
                "$regex": re.escape(self.title_contains),
                "$options": "i",
            }
        if self.category is not None:
            query["category"] = {
                "$regex": f"^{re.escape(self.category)}$",
                "$options": "i",
            }
        if self.price is not None:
            bounds: dict[str, float] = {"$gte": self.price.minimum}
            if self.price.maximum is not None:
                bounds["$lte"] = self.price.maximum
            query["price"] = bounds
        return query

    def matches(self, meal: Mapping[str, object]) -> bool:
        """Return true when the meal satisfies every clause."""
        if (
            self.distributor_email is not None
            and meal.get("distributorEmail") != self.distributor_email
        ):
            return False
        if self.title_contains:
            title = meal.get("title")
            if not isinstance(title, str):
                return False
            if self.title_contains.lower() not in title.lower():
                return False
        if self.category is not None:
            category = meal.get("category")
            if not isinstance(category, str):
                return False
            if category.lower() != self.category.lower():
                return False
        if self.price is not None:
            price = meal.get("price")
            if isinstance(price, bool) or not isinstance(price, (int, float)):
                return False
            if price < self.price.minimum:
                return False
            if self.price.maximum is not None and price > self.price.maximum:
                return False
        return True


def build_meal_filter(
    email: str | None = None,
    search: str | None = None,
    category: str | None = ALL,
    price_range: str | None = ALL,
) -> MealFilter:
    """Build a meal filter from optional query parameters."""
    return MealFilter(
        distributor_email=email or None,
        title_contains=search or None,
        category=category if category and category != ALL else None,
        price=parse_price_range(price_range),
    )


def parse_price_range(value: str | None) -> PriceRange | None:
    """Parse ``All``, ``301+`` or ``<min>-<max>`` into price bounds."""
    if value is None or value == ALL:
        return None
    cleaned = value.strip()
    if cleaned == OPEN_ENDED_PRICE_RANGE:
        return PriceRange(minimum=OPEN_ENDED_PRICE_FLOOR)
    low, separator, high = cleaned.partition("-")
    if not separator:
        raise InvalidQueryError(f"Invalid price range: {value}")
    try:
        minimum = float(low)
        maximum = float(high)
    except ValueError:
        raise InvalidQueryError(f"Invalid price range: {value}") from None
    if not (math.isfinite(minimum) and math.isfinite(maximum)) or minimum > maximum:
        raise InvalidQueryError(f"Invalid price range: {value}")
    return PriceRange(minimum=minimum, maximum=maximum)
