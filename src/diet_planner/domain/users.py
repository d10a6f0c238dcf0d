"""Domain models for application users."""

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class UserRecord:
    """Represents a user stored in the database."""

    id: int
    open_id: str
    name: str | None
    email: str | None
    login_method: str | None
    role: str
    last_signed_in: datetime | None


@dataclass(frozen=True)
class LoginIdentity:
    """Identity payload delivered by the external login callback."""

    open_id: str
    name: str | None = None
    email: str | None = None
    login_method: str | None = None
