"""User and role endpoints."""

from __future__ import annotations

from typing import TYPE_CHECKING

from fastapi import APIRouter, Depends, Request, status
from fastapi.responses import JSONResponse

from mealmate.api.auth import require_admin, require_authenticated
from mealmate.api.responses import update_response
from mealmate.api.schemas import RoleUpdate, UserCreate
from mealmate.domain.errors import NotFoundError

if TYPE_CHECKING:
    from mealmate.containers import AppContainer

router = APIRouter(prefix="/users", tags=["users"])


@router.post("")
def create_user(user: UserCreate, request: Request) -> dict[str, object]:
    """Register a user unless the email is already known."""
    container: AppContainer = request.app.state.container
    result = container.user_service.create_user(user.to_document())
    if not result.inserted:
        return {
            "message": "User already exists",
            "inserted": False,
            "insertedId": None,
        }
    return {"acknowledged": True, "inserted": True, "insertedId": result.inserted_id}


@router.get("/search", dependencies=[Depends(require_authenticated)])
def search_users(
    request: Request, email: str | None = None
) -> list[dict[str, object]]:
    """Search users by partial email."""
    container: AppContainer = request.app.state.container
    return container.user_service.search(email)


@router.get(
    "/role/{email}", dependencies=[Depends(require_admin)], response_model=None
)
def get_user_role(
    email: str, request: Request
) -> dict[str, object] | JSONResponse:
    """Return the stored role for an email."""
    container: AppContainer = request.app.state.container
    try:
        role = container.user_service.get_role(email)
    except NotFoundError as exc:
        return JSONResponse(
            status_code=status.HTTP_404_NOT_FOUND,
            content={"role": None, "error": str(exc)},
        )
    return {"role": role}


@router.patch("/{user_id}/role", dependencies=[Depends(require_admin)])
def update_user_role(
    user_id: str, payload: RoleUpdate, request: Request
) -> dict[str, object]:
    """Change a user's role."""
    container: AppContainer = request.app.state.container
    return update_response(container.user_service.update_role(user_id, payload.role))
