"""Supabase Auth identity verifier."""

from dataclasses import dataclass
from typing import Protocol

from supabase import AuthApiError, Client

from mealmate.domain.errors import InvalidCredentialsError
from mealmate.domain.models import VerifiedIdentity


class IdentityVerifier(Protocol):
    """Interface for bearer token verification."""

    def verify(self, token: str) -> VerifiedIdentity:
        """Return the identity for a token or raise InvalidCredentialsError."""


@dataclass
class SupabaseIdentityVerifier(IdentityVerifier):
    """Verify access tokens against Supabase Auth."""

    client: Client

    def verify(self, token: str) -> VerifiedIdentity:
        """Resolve the token to the user it was issued for."""
        try:
            response = self.client.auth.get_user(token)
        except AuthApiError as exc:
            raise InvalidCredentialsError(str(exc)) from exc
        user = response.user if response else None
        if user is None or not user.email:
            raise InvalidCredentialsError("Token has no associated email")
        return VerifiedIdentity(email=user.email, subject=user.id)
