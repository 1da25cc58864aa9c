"""Shared helpers for Mongo-backed repositories."""

from collections.abc import Mapping

from bson import ObjectId
from pymongo.results import DeleteResult as MongoDeleteResult
from pymongo.results import InsertOneResult, UpdateResult as MongoUpdateResult

from mealmate.domain.results import DeleteResult, InsertResult, UpdateResult


def serialize_document(document: Mapping[str, object]) -> dict[str, object]:
    """Return a JSON-friendly copy of a stored document."""
    serialized = dict(document)
    if isinstance(serialized.get("_id"), ObjectId):
        serialized["_id"] = str(serialized["_id"])
    return serialized


def new_document(document: Mapping[str, object]) -> dict[str, object]:
    """Copy a document for insertion, leaving the id to the store."""
    return {key: value for key, value in document.items() if key != "_id"}


def by_id(document_id: str) -> dict[str, object]:
    """Build an id equality filter."""
    return {"_id": ObjectId(document_id)}


def insert_result(result: InsertOneResult) -> InsertResult:
    return InsertResult(
        inserted_id=str(result.inserted_id), acknowledged=result.acknowledged
    )


def update_result(result: MongoUpdateResult) -> UpdateResult:
    return UpdateResult(
        matched_count=result.matched_count,
        modified_count=result.modified_count,
        acknowledged=result.acknowledged,
    )


def delete_result(result: MongoDeleteResult) -> DeleteResult:
    return DeleteResult(
        deleted_count=result.deleted_count, acknowledged=result.acknowledged
    )
