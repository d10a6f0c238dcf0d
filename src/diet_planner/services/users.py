"""User-related business logic."""

import logging
from dataclasses import dataclass
from typing import Protocol

from diet_planner.domain.users import LoginIdentity, UserRecord
from diet_planner.services.validation import require_text

_logger = logging.getLogger(__name__)


class UserRepository(Protocol):
    """Persistence interface for user data."""

    def get_by_open_id(self, open_id: str) -> UserRecord | None:
        """Return the user for an external identity, if present."""

    def create_user(self, payload: dict[str, object]) -> UserRecord:
        """Create and return a new user record."""

    def update_user(self, user_id: int, payload: dict[str, object]) -> UserRecord:
        """Update profile fields and the sign-in timestamp."""


@dataclass
class UserService:
    """Application service for user lifecycle actions."""

    repository: UserRepository
    owner_open_id: str | None = None

    def ensure_user(self, identity: LoginIdentity) -> UserRecord:
        """Create the user on first login, refresh the profile afterwards."""
        open_id = require_text(identity.open_id, "open_id")
        payload: dict[str, object] = {
            key: value
            for key, value in (
                ("name", identity.name),
                ("email", identity.email),
                ("login_method", identity.login_method),
            )
            if value is not None
        }
        if self.owner_open_id and open_id == self.owner_open_id:
            payload["role"] = "admin"

        existing = self.repository.get_by_open_id(open_id)
        if existing:
            return self.repository.update_user(existing.id, payload)

        created = self.repository.create_user({"open_id": open_id, **payload})
        _logger.info("Registered user id=%s", created.id)
        return created

    def get_by_open_id(self, open_id: str) -> UserRecord | None:
        """Return a user by external identity, if present."""
        return self.repository.get_by_open_id(open_id)
