"""Translation of Supabase client failures into domain errors."""

from collections.abc import Iterator
from contextlib import contextmanager

import httpx
from postgrest.exceptions import APIError

from diet_planner.errors import ConflictError, UnavailableError

_UNIQUE_VIOLATION = "23505"


@contextmanager
def store_errors(action: str) -> Iterator[None]:
    """Re-raise PostgREST and transport failures as domain errors."""
    try:
        yield
    except APIError as exc:
        if exc.code == _UNIQUE_VIOLATION:
            raise ConflictError(f"Failed to {action}: duplicate value") from exc
        raise UnavailableError(f"Failed to {action}: {exc.message}") from exc
    except httpx.HTTPError as exc:
        raise UnavailableError(f"Failed to {action}: store unreachable") from exc


def first_row(data: list[dict[str, object]] | None, action: str) -> dict[str, object]:
    """Return the first returned row or fail when the store returned nothing."""
    if not data:
        raise UnavailableError(f"Failed to {action}")
    return data[0]
