"""Meal listing, lookup and like counters."""

import logging
from dataclasses import dataclass
from typing import Protocol

from mealmate.domain.errors import NotFoundError
from mealmate.domain.identifiers import ensure_valid_id
from mealmate.domain.meals import ALL, MealFilter, build_meal_filter
from mealmate.domain.results import InsertResult, UpdateResult
from mealmate.domain.timestamps import utc_now_iso

_logger = logging.getLogger(__name__)


class MealRepository(Protocol):
    """Persistence interface for meals."""

    def insert_meal(self, document: dict[str, object]) -> InsertResult:
        """Insert a meal document."""

    def find_meals(self, meal_filter: MealFilter) -> list[dict[str, object]]:
        """Return meals matching the filter, newest postTime first."""

    def find_upcoming(self, after: str) -> list[dict[str, object]]:
        """Return meals with postTime after the timestamp, soonest first."""

    def get_meal(self, meal_id: str) -> dict[str, object] | None:
        """Return a meal by id, if present."""

    def increment_likes(self, meal_id: str) -> UpdateResult:
        """Atomically add one like to a meal."""

    def increment_reviews_count(self, meal_id: str) -> UpdateResult:
        """Atomically add one to a meal's review counter."""


@dataclass
class MealService:
    """Application service for meal endpoints."""

    repository: MealRepository

    def create_meal(self, document: dict[str, object]) -> InsertResult:
        """Insert a new meal; counters always start at zero."""
        payload = {**document, "likes": 0, "reviews_count": 0}
        result = self.repository.insert_meal(payload)
        _logger.info("Meal created: id=%s", result.inserted_id)
        return result

    def list_meals(
        self,
        email: str | None = None,
        search: str | None = None,
        category: str | None = ALL,
        price_range: str | None = ALL,
    ) -> list[dict[str, object]]:
        """List meals matching the optional query parameters."""
        meal_filter = build_meal_filter(
            email=email, search=search, category=category, price_range=price_range
        )
        return self.repository.find_meals(meal_filter)

    def list_upcoming(self, now: str | None = None) -> list[dict[str, object]]:
        """List meals whose postTime is still in the future."""
        return self.repository.find_upcoming(now or utc_now_iso())

    def get_meal(self, meal_id: str) -> dict[str, object]:
        """Return a meal or raise when the id is malformed or unknown."""
        ensure_valid_id(meal_id, "meal ID")
        meal = self.repository.get_meal(meal_id)
        if meal is None:
            raise NotFoundError("Meal not found")
        return meal

    def like_meal(self, meal_id: str) -> UpdateResult:
        """Add a like; unknown meals are reported as not found."""
        ensure_valid_id(meal_id, "meal ID")
        result = self.repository.increment_likes(meal_id)
        if result.matched_count == 0:
            raise NotFoundError("Meal not found")
        return result
