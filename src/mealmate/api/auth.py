"""Bearer token authentication and role authorization.

Routes opt in with ``Depends(require_authenticated)`` or
``Depends(require_admin)``. ``require_admin`` depends on
``require_authenticated`` so the identity check always runs first and either
stage can end the request.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from fastapi import Depends, Header, HTTPException, Request, status

from mealmate.domain.errors import InvalidCredentialsError
from mealmate.domain.models import ADMIN_ROLE, VerifiedIdentity

if TYPE_CHECKING:
    from mealmate.containers import AppContainer


def extract_bearer_token(header: str | None) -> str | None:
    """Return the token from a ``Bearer <token>`` header value."""
    if not header:
        return None
    parts = header.split()
    if len(parts) != 2:
        return None
    scheme, token = parts
    if scheme.lower() != "bearer":
        return None
    return token


def require_authenticated(
    request: Request,
    authorization: str | None = Header(default=None),
) -> VerifiedIdentity:
    """Ensure the request carries a verifiable bearer token."""
    token = extract_bearer_token(authorization)
    if token is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED, detail="Unauthorized access"
        )
    container: AppContainer = request.app.state.container
    try:
        identity = container.identity_verifier.verify(token)
    except InvalidCredentialsError:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED, detail="Unauthorized access"
        ) from None
    request.state.identity = identity
    return identity


def require_admin(
    request: Request,
    identity: VerifiedIdentity = Depends(require_authenticated),
) -> VerifiedIdentity:
    """Ensure the authenticated user is stored with the admin role."""
    container: AppContainer = request.app.state.container
    role = container.user_service.get_stored_role(identity.email)
    if role != ADMIN_ROLE:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN, detail="Forbidden access"
        )
    return identity
