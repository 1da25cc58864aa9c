"""Mongo-backed user repository."""

import re
from dataclasses import dataclass

from pymongo import ASCENDING
from pymongo.collection import Collection
from pymongo.errors import DuplicateKeyError

from mealmate.adapters.mongo_documents import by_id, new_document, update_result
from mealmate.domain.models import USER_ROLE, UserRecord
from mealmate.domain.results import UpdateResult
from mealmate.services.users import UserRepository

_SEARCH_PROJECTION = {"_id": 0, "email": 1, "createdAt": 1, "role": 1}


@dataclass
class MongoUserRepository(UserRepository):
    """Mongo implementation for user persistence."""

    collection: Collection

    def ensure_indexes(self) -> None:
        """Create the unique email index that guards against duplicate users."""
        self.collection.create_index([("email", ASCENDING)], unique=True)

    def get_by_email(
        self, email: str, *, ignore_case: bool = False
    ) -> UserRecord | None:
        """Return the user for an email, if present."""
        if ignore_case:
            query: dict[str, object] = {
                "email": {"$regex": f"^{re.escape(email)}$", "$options": "i"}
            }
        else:
            query = {"email": email}
        document = self.collection.find_one(query)
        if document is None:
            return None
        return UserRecord(
            id=str(document["_id"]),
            email=document["email"],
            role=document.get("role") or USER_ROLE,
            created_at=document.get("createdAt"),
        )

    def create_user(self, document: dict[str, object]) -> str | None:
        """Insert a user; None when the unique email index rejects it."""
        try:
            result = self.collection.insert_one(new_document(document))
        except DuplicateKeyError:
            return None
        return str(result.inserted_id)

    def search_by_email(self, fragment: str, limit: int) -> list[dict[str, object]]:
        """Return users whose email contains the fragment."""
        cursor = self.collection.find(
            {"email": {"$regex": re.escape(fragment), "$options": "i"}},
            _SEARCH_PROJECTION,
        ).limit(limit)
        return list(cursor)

    def update_role(self, user_id: str, role: str) -> UpdateResult:
        """Set the role of a user."""
        return update_result(
            self.collection.update_one(by_id(user_id), {"$set": {"role": role}})
        )
