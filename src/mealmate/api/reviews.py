"""Review endpoints."""

from __future__ import annotations

from typing import TYPE_CHECKING

from fastapi import APIRouter, Request

from mealmate.api.responses import insert_response
from mealmate.api.schemas import ReviewCreate
from mealmate.domain.errors import InvalidQueryError

if TYPE_CHECKING:
    from mealmate.containers import AppContainer

router = APIRouter(prefix="/reviews", tags=["reviews"])


@router.post("")
def create_review(review: ReviewCreate, request: Request) -> dict[str, object]:
    """Post a review and count it on the meal."""
    container: AppContainer = request.app.state.container
    return insert_response(container.review_service.create_review(review.to_document()))


@router.get("")
def list_reviews(request: Request) -> list[dict[str, object]]:
    container: AppContainer = request.app.state.container
    return container.review_service.list_reviews()


@router.get("/meal/{meal_id}")
def list_meal_reviews(meal_id: str, request: Request) -> list[dict[str, object]]:
    """List a meal's reviews, newest first."""
    container: AppContainer = request.app.state.container
    return container.review_service.list_for_meal(meal_id)


@router.get("/by-reviewer")
def list_reviewer_reviews(
    request: Request, email: str | None = None
) -> list[dict[str, object]]:
    """List reviews written by one reviewer."""
    if not email:
        raise InvalidQueryError("Email query is required")
    container: AppContainer = request.app.state.container
    return container.review_service.list_by_reviewer(email)
