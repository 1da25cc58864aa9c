"""Helpers shaping write results like the store's raw results."""

from mealmate.domain.results import DeleteResult, InsertResult, UpdateResult


def insert_response(result: InsertResult) -> dict[str, object]:
    return {"acknowledged": result.acknowledged, "insertedId": result.inserted_id}


def update_response(result: UpdateResult) -> dict[str, object]:
    return {
        "acknowledged": result.acknowledged,
        "matchedCount": result.matched_count,
        "modifiedCount": result.modified_count,
    }


def delete_response(result: DeleteResult) -> dict[str, object]:
    return {"acknowledged": result.acknowledged, "deletedCount": result.deleted_count}
