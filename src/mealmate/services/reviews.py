"""Meal reviews."""

import logging
from dataclasses import dataclass
from typing import Protocol

from mealmate.domain.identifiers import ensure_valid_id
from mealmate.domain.results import InsertResult
from mealmate.domain.timestamps import utc_now_iso
from mealmate.services.meals import MealRepository

_logger = logging.getLogger(__name__)


class ReviewRepository(Protocol):
    """Persistence interface for reviews."""

    def insert_review(self, document: dict[str, object]) -> InsertResult:
        """Insert a review."""

    def list_reviews(self) -> list[dict[str, object]]:
        """Return every review."""

    def list_for_meal(self, meal_id: str) -> list[dict[str, object]]:
        """Return reviews of a meal, newest first."""

    def list_by_reviewer(self, reviewer_email: str) -> list[dict[str, object]]:
        """Return reviews written by a reviewer."""


@dataclass
class ReviewService:
    """Application service for reviews."""

    repository: ReviewRepository
    meal_repository: MealRepository

    def create_review(self, document: dict[str, object]) -> InsertResult:
        """Store a review and bump the reviewed meal's counter.

        The two writes are independent: a failed or unmatched increment leaves
        the stored review in place.
        """
        meal_id = ensure_valid_id(document.get("mealId"), "meal ID")
        result = self.repository.insert_review({**document, "createdAt": utc_now_iso()})
        counted = self.meal_repository.increment_reviews_count(meal_id)
        if counted.matched_count == 0:
            _logger.warning(
                "Review %s references unknown meal %s", result.inserted_id, meal_id
            )
        return result

    def list_reviews(self) -> list[dict[str, object]]:
        """Return every review."""
        return self.repository.list_reviews()

    def list_for_meal(self, meal_id: str) -> list[dict[str, object]]:
        """Return reviews for a meal."""
        return self.repository.list_for_meal(meal_id)

    def list_by_reviewer(self, reviewer_email: str) -> list[dict[str, object]]:
        """Return reviews by reviewer email."""
        return self.repository.list_by_reviewer(reviewer_email)
