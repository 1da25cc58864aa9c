"""Meal request endpoints."""

from __future__ import annotations

from typing import TYPE_CHECKING

from fastapi import APIRouter, Depends, Request

from mealmate.api.auth import require_authenticated
from mealmate.api.responses import delete_response, insert_response, update_response
from mealmate.api.schemas import MealRequestCreate

if TYPE_CHECKING:
    from mealmate.containers import AppContainer

router = APIRouter(prefix="/meal-requests", tags=["meal-requests"])


@router.post("")
def create_meal_request(
    payload: MealRequestCreate, request: Request
) -> dict[str, object]:
    """Submit a meal request."""
    container: AppContainer = request.app.state.container
    return insert_response(
        container.meal_request_service.create_request(payload.to_document())
    )


@router.get("", dependencies=[Depends(require_authenticated)])
def list_meal_requests(
    request: Request, email: str | None = None, search: str | None = None
) -> list[dict[str, object]]:
    """List meal requests."""
    container: AppContainer = request.app.state.container
    return container.meal_request_service.list_requests(email=email, search=search)


@router.patch("/{request_id}/serve", dependencies=[Depends(require_authenticated)])
def serve_meal_request(request_id: str, request: Request) -> dict[str, object]:
    """Mark a meal request delivered."""
    container: AppContainer = request.app.state.container
    return update_response(container.meal_request_service.serve_request(request_id))


@router.delete("/{request_id}")
def delete_meal_request(request_id: str, request: Request) -> dict[str, object]:
    """Remove a meal request."""
    container: AppContainer = request.app.state.container
    return delete_response(container.meal_request_service.delete_request(request_id))
