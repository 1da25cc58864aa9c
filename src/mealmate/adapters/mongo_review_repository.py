"""Mongo-backed review repository."""

from dataclasses import dataclass

from pymongo import DESCENDING
from pymongo.collection import Collection

from mealmate.adapters.mongo_documents import (
    insert_result,
    new_document,
    serialize_document,
)
from mealmate.domain.results import InsertResult
from mealmate.services.reviews import ReviewRepository


@dataclass
class MongoReviewRepository(ReviewRepository):
    """Mongo implementation for reviews."""

    collection: Collection

    def insert_review(self, document: dict[str, object]) -> InsertResult:
        return insert_result(self.collection.insert_one(new_document(document)))

    def list_reviews(self) -> list[dict[str, object]]:
        return [serialize_document(doc) for doc in self.collection.find({})]

    def list_for_meal(self, meal_id: str) -> list[dict[str, object]]:
        cursor = self.collection.find({"mealId": meal_id}).sort(
            "createdAt", DESCENDING
        )
        return [serialize_document(doc) for doc in cursor]

    def list_by_reviewer(self, reviewer_email: str) -> list[dict[str, object]]:
        cursor = self.collection.find({"reviewerEmail": reviewer_email})
        return [serialize_document(doc) for doc in cursor]
