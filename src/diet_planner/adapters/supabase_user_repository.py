"""Supabase-backed user repository."""

from dataclasses import dataclass
from datetime import UTC, datetime

from supabase import Client

from diet_planner.adapters.supabase_errors import first_row, store_errors
from diet_planner.domain.users import UserRecord
from diet_planner.services.users import UserRepository

_USER_COLUMNS = "id, open_id, name, email, login_method, role, last_signed_in"


@dataclass
class SupabaseUserRepository(UserRepository):
    """Supabase implementation for user persistence."""

    client: Client

    def get_by_open_id(self, open_id: str) -> UserRecord | None:
        """Return the user for an external identity, if present."""
        with store_errors("load user"):
            response = (
                self.client.table("users")
                .select(_USER_COLUMNS)
                .eq("open_id", open_id)
                .limit(1)
                .execute()
            )
        if response.data:
            return _parse_user(response.data[0])
        return None

    def create_user(self, payload: dict[str, object]) -> UserRecord:
        """Create a new user row and return it."""
        now = datetime.now(tz=UTC).isoformat()
        with store_errors("create user"):
            response = (
                self.client.table("users")
                .insert({**payload, "last_signed_in": now})
                .execute()
            )
        return _parse_user(first_row(response.data, "create user"))

    def update_user(self, user_id: int, payload: dict[str, object]) -> UserRecord:
        """Update profile fields and stamp the sign-in time."""
        now = datetime.now(tz=UTC).isoformat()
        with store_errors("update user"):
            response = (
                self.client.table("users")
                .update({**payload, "last_signed_in": now, "updated_at": now})
                .eq("id", user_id)
                .execute()
            )
        return _parse_user(first_row(response.data, "update user"))


def _parse_user(row: dict[str, object]) -> UserRecord:
    last_signed_raw = row.get("last_signed_in")
    last_signed_in = (
        datetime.fromisoformat(last_signed_raw)
        if isinstance(last_signed_raw, str) and last_signed_raw
        else None
    )
    return UserRecord(
        id=int(row["id"]),
        open_id=str(row["open_id"]),
        name=row.get("name"),
        email=row.get("email"),
        login_method=row.get("login_method"),
        role=str(row.get("role") or "user"),
        last_signed_in=last_signed_in,
    )
