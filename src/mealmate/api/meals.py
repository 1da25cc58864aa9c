"""Meal endpoints."""

from __future__ import annotations

from typing import TYPE_CHECKING

from fastapi import APIRouter, Depends, Query, Request

from mealmate.api.auth import require_authenticated
from mealmate.api.responses import insert_response, update_response
from mealmate.api.schemas import MealCreate
from mealmate.domain.meals import ALL

if TYPE_CHECKING:
    from mealmate.containers import AppContainer

router = APIRouter(prefix="/meals", tags=["meals"])


@router.post("")
def create_meal(meal: MealCreate, request: Request) -> dict[str, object]:
    """Add a new meal."""
    container: AppContainer = request.app.state.container
    return insert_response(container.meal_service.create_meal(meal.to_document()))


@router.get("", dependencies=[Depends(require_authenticated)])
def list_meals(
    request: Request,
    email: str | None = None,
    search: str | None = None,
    category: str = ALL,
    price_range: str = Query(default=ALL, alias="priceRange"),
) -> list[dict[str, object]]:
    """List meals, latest postTime first."""
    container: AppContainer = request.app.state.container
    return container.meal_service.list_meals(
        email=email, search=search, category=category, price_range=price_range
    )


@router.get("/upcoming", dependencies=[Depends(require_authenticated)])
def list_upcoming_meals(request: Request) -> list[dict[str, object]]:
    """List meals scheduled in the future, soonest first."""
    container: AppContainer = request.app.state.container
    return container.meal_service.list_upcoming()


@router.get("/{meal_id}", dependencies=[Depends(require_authenticated)])
def get_meal(meal_id: str, request: Request) -> dict[str, object]:
    """Return a single meal."""
    container: AppContainer = request.app.state.container
    return container.meal_service.get_meal(meal_id)


@router.post("/like/{meal_id}")
def like_meal(meal_id: str, request: Request) -> dict[str, object]:
    """Add a like to a meal."""
    container: AppContainer = request.app.state.container
    return update_response(container.meal_service.like_meal(meal_id))


@router.patch("/{meal_id}/like")
def patch_meal_like(meal_id: str, request: Request) -> dict[str, object]:
    """Add a like to a meal."""
    container: AppContainer = request.app.state.container
    return update_response(container.meal_service.like_meal(meal_id))
