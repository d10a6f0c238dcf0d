"""Input checks shared by the catalog, registry and meal list services."""

import math

from diet_planner.errors import ValidationError


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves away from zero for positives."""
    return math.floor(value + 0.5)


def require_text(value: object, field: str) -> str:
    """Return a stripped non-empty string or raise."""
    if not isinstance(value, str) or not value.strip():
        raise ValidationError(f"{field} must not be empty")
    return value.strip()


def coerce_macro(value: object, field: str) -> int:
    """Return a non-negative integer macro value.

    Numbers with a fractional part are rounded, matching the integer
    columns in the store.
    """
    if isinstance(value, bool) or not isinstance(value, int | float):
        raise ValidationError(f"{field} must be a number")
    if math.isnan(value) or math.isinf(value):
        raise ValidationError(f"{field} must be a finite number")
    if value < 0:
        raise ValidationError(f"{field} must not be negative")
    return round_half_up(value)


def coerce_optional_macro(value: object, field: str) -> int | None:
    """Like :func:`coerce_macro` but lets ``None`` through."""
    if value is None:
        return None
    return coerce_macro(value, field)


def require_quantity(value: object) -> int:
    """Return a positive gram quantity or raise."""
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValidationError("quantity must be a whole number of grams")
    if value <= 0:
        raise ValidationError("quantity must be greater than zero")
    return value
