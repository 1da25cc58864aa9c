"""Mongo-backed meal repository."""

from dataclasses import dataclass

from pymongo import ASCENDING, DESCENDING
from pymongo.collection import Collection

from mealmate.adapters.mongo_documents import (
    by_id,
    insert_result,
    new_document,
    serialize_document,
    update_result,
)
from mealmate.domain.meals import MealFilter
from mealmate.domain.results import InsertResult, UpdateResult
from mealmate.services.meals import MealRepository


@dataclass
class MongoMealRepository(MealRepository):
    """Mongo implementation for meal persistence."""

    collection: Collection

    def insert_meal(self, document: dict[str, object]) -> InsertResult:
        """Insert a meal document."""
        return insert_result(self.collection.insert_one(new_document(document)))

    def find_meals(self, meal_filter: MealFilter) -> list[dict[str, object]]:
        """Return matching meals, newest postTime first."""
        cursor = self.collection.find(meal_filter.to_mongo()).sort(
            "postTime", DESCENDING
        )
        return [serialize_document(doc) for doc in cursor]

    def find_upcoming(self, after: str) -> list[dict[str, object]]:
        """Return meals scheduled after the timestamp, soonest first."""
        cursor = self.collection.find({"postTime": {"$gt": after}}).sort(
            "postTime", ASCENDING
        )
        return [serialize_document(doc) for doc in cursor]

    def get_meal(self, meal_id: str) -> dict[str, object] | None:
        """Return a meal by id, if present."""
        document = self.collection.find_one(by_id(meal_id))
        return serialize_document(document) if document else None

    def increment_likes(self, meal_id: str) -> UpdateResult:
        """Add one like."""
        return update_result(
            self.collection.update_one(by_id(meal_id), {"$inc": {"likes": 1}})
        )

    def increment_reviews_count(self, meal_id: str) -> UpdateResult:
        """Add one to the review counter."""
        return update_result(
            self.collection.update_one(by_id(meal_id), {"$inc": {"reviews_count": 1}})
        )
