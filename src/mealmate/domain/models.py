"""Domain models for users and identities."""

from dataclasses import dataclass

USER_ROLE = "user"
ADMIN_ROLE = "admin"
ALLOWED_ROLES = frozenset({USER_ROLE, ADMIN_ROLE})


@dataclass(frozen=True)
class UserRecord:
    """Represents a user stored in the database."""

    id: str
    email: str
    role: str
    created_at: str | None = None


@dataclass(frozen=True)
class VerifiedIdentity:
    """Identity returned by the identity provider for a valid bearer token."""

    email: str
    subject: str | None = None


@dataclass(frozen=True)
class CreateUserResult:
    """Outcome of a create-user call; duplicates are not errors."""

    inserted: bool
    inserted_id: str | None
