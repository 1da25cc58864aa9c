"""User-related business logic."""

import logging
from dataclasses import dataclass
from typing import Protocol

from mealmate.domain.errors import InvalidQueryError, InvalidRoleError, NotFoundError
from mealmate.domain.identifiers import ensure_valid_id
from mealmate.domain.models import (
    ALLOWED_ROLES,
    USER_ROLE,
    CreateUserResult,
    UserRecord,
)
from mealmate.domain.results import UpdateResult
from mealmate.domain.timestamps import utc_now_iso

_logger = logging.getLogger(__name__)

SEARCH_LIMIT = 10


class UserRepository(Protocol):
    """Persistence interface for user data."""

    def get_by_email(
        self, email: str, *, ignore_case: bool = False
    ) -> UserRecord | None:
        """Return the user with this email, if present."""

    def create_user(self, document: dict[str, object]) -> str | None:
        """Insert a user and return its id, or None when the email is taken."""

    def search_by_email(self, fragment: str, limit: int) -> list[dict[str, object]]:
        """Return users whose email contains the fragment, case-insensitively."""

    def update_role(self, user_id: str, role: str) -> UpdateResult:
        """Set the role of a user."""


@dataclass
class UserService:
    """Application service for user and role actions."""

    repository: UserRepository

    def create_user(self, payload: dict[str, object]) -> CreateUserResult:
        """Create a user unless one with the same email already exists."""
        email = str(payload["email"])
        if self.repository.get_by_email(email) is not None:
            return CreateUserResult(inserted=False, inserted_id=None)
        document = {
            **payload,
            "email": email,
            "role": USER_ROLE,
            "createdAt": utc_now_iso(),
        }
        inserted_id = self.repository.create_user(document)
        if inserted_id is None:
            _logger.info("Concurrent duplicate user insert ignored: email=%s", email)
            return CreateUserResult(inserted=False, inserted_id=None)
        _logger.info("User created: id=%s", inserted_id)
        return CreateUserResult(inserted=True, inserted_id=inserted_id)

    def get_role(self, email: str) -> str:
        """Return the stored role for an email, ignoring case."""
        user = self.repository.get_by_email(email, ignore_case=True)
        if user is None:
            raise NotFoundError("User not found")
        return user.role

    def get_stored_role(self, email: str) -> str | None:
        """Return the role stored under exactly this email, if any."""
        user = self.repository.get_by_email(email)
        return user.role if user else None

    def search(self, email_fragment: str | None) -> list[dict[str, object]]:
        """Search users by partial email."""
        if not email_fragment or not email_fragment.strip():
            raise InvalidQueryError("Email query is required")
        return self.repository.search_by_email(email_fragment.strip(), SEARCH_LIMIT)

    def update_role(self, user_id: str, role: str) -> UpdateResult:
        """Change a user's role."""
        if role not in ALLOWED_ROLES:
            raise InvalidRoleError("Invalid role")
        ensure_valid_id(user_id, "user ID")
        result = self.repository.update_role(user_id, role)
        _logger.info(
            "User role update: id=%s role=%s modified=%s",
            user_id,
            role,
            result.modified_count,
        )
        return result
