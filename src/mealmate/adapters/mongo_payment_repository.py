"""Mongo-backed payment repository."""

from dataclasses import dataclass

from pymongo import DESCENDING
from pymongo.collection import Collection

from mealmate.adapters.mongo_documents import (
    insert_result,
    new_document,
    serialize_document,
)
from mealmate.domain.results import InsertResult
from mealmate.services.payments import PaymentRepository


@dataclass
class MongoPaymentRepository(PaymentRepository):
    """Mongo implementation for payments."""

    collection: Collection

    def insert_payment(self, document: dict[str, object]) -> InsertResult:
        """Insert a payment record."""
        return insert_result(self.collection.insert_one(new_document(document)))

    def list_payments(self, email: str | None) -> list[dict[str, object]]:
        """Return payments newest first."""
        query = {"email": email} if email else {}
        cursor = self.collection.find(query).sort("date", DESCENDING)
        return [serialize_document(doc) for doc in cursor]
