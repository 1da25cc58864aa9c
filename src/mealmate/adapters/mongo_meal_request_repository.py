"""Mongo-backed meal request repository."""

from dataclasses import dataclass

from pymongo.collection import Collection

from mealmate.adapters.mongo_documents import (
    by_id,
    delete_result,
    insert_result,
    new_document,
    serialize_document,
    update_result,
)
from mealmate.domain.meal_requests import (
    DELIVERED_STATUS,
    MealRequestFilter,
)
from mealmate.domain.results import DeleteResult, InsertResult, UpdateResult
from mealmate.services.meal_requests import MealRequestRepository


@dataclass
class MongoMealRequestRepository(MealRequestRepository):
    """Mongo implementation for meal requests."""

    collection: Collection

    def insert_request(self, document: dict[str, object]) -> InsertResult:
        """Insert a meal request."""
        return insert_result(self.collection.insert_one(new_document(document)))

    def find_requests(
        self, request_filter: MealRequestFilter
    ) -> list[dict[str, object]]:
        """Return requests matching the filter."""
        cursor = self.collection.find(request_filter.to_mongo())
        return [serialize_document(doc) for doc in cursor]

    def mark_delivered(self, request_id: str) -> UpdateResult:
        """Set status to delivered unless it already is."""
        query = {**by_id(request_id), "status": {"$ne": DELIVERED_STATUS}}
        return update_result(
            self.collection.update_one(query, {"$set": {"status": DELIVERED_STATUS}})
        )

    def delete_request(self, request_id: str) -> DeleteResult:
        """Remove a request."""
        return delete_result(self.collection.delete_one(by_id(request_id)))
