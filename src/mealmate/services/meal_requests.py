"""Meal request lifecycle."""

from dataclasses import dataclass
from typing import Protocol

from mealmate.domain.errors import NotFoundError
from mealmate.domain.identifiers import ensure_valid_id
from mealmate.domain.meal_requests import (
    PENDING_STATUS,
    MealRequestFilter,
    build_meal_request_filter,
)
from mealmate.domain.results import DeleteResult, InsertResult, UpdateResult


class MealRequestRepository(Protocol):
    """Persistence interface for meal requests."""

    def insert_request(self, document: dict[str, object]) -> InsertResult:
        """Insert a meal request."""

    def find_requests(
        self, request_filter: MealRequestFilter
    ) -> list[dict[str, object]]:
        """Return requests matching the filter."""

    def mark_delivered(self, request_id: str) -> UpdateResult:
        """Move a pending request to delivered."""

    def delete_request(self, request_id: str) -> DeleteResult:
        """Remove a request."""


@dataclass
class MealRequestService:
    """Application service for meal requests."""

    repository: MealRequestRepository

    def create_request(self, document: dict[str, object]) -> InsertResult:
        """Insert a request in the pending state."""
        return self.repository.insert_request({**document, "status": PENDING_STATUS})

    def list_requests(
        self, email: str | None = None, search: str | None = None
    ) -> list[dict[str, object]]:
        """List requests by requester and/or user search text."""
        return self.repository.find_requests(
            build_meal_request_filter(email=email, search=search)
        )

    def serve_request(self, request_id: str) -> UpdateResult:
        """Mark a request delivered; absent or already served is not found."""
        ensure_valid_id(request_id, "request ID")
        result = self.repository.mark_delivered(request_id)
        if result.modified_count == 0:
            raise NotFoundError("Request not found or already delivered")
        return result

    def delete_request(self, request_id: str) -> DeleteResult:
        """Delete a request by id."""
        ensure_valid_id(request_id, "request ID")
        return self.repository.delete_request(request_id)
