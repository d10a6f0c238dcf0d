"""Custom food export and validate-only import."""

from diet_planner.domain.foods import Food
from diet_planner.errors import ValidationError

_MACRO_FIELDS = ("proteins", "carbs", "fats", "calories")


def export_custom_foods(foods: list[Food]) -> list[dict[str, object]]:
    """Serialize custom foods to the portable export format."""
    return [
        {
            "name": food.name,
            "proteins": food.proteins,
            "carbs": food.carbs,
            "fats": food.fats,
            "calories": food.calories,
        }
        for food in foods
    ]


def validate_import(payload: object) -> list[dict[str, object]]:
    """Check an import payload and return its records.

    Nothing is persisted: merging imported foods into an existing catalog
    has no agreed conflict policy yet.
    """
    if not isinstance(payload, list):
        raise ValidationError("Import file must contain a JSON array")
    records: list[dict[str, object]] = []
    for index, item in enumerate(payload):
        if not isinstance(item, dict):
            raise ValidationError(f"Record {index} is not an object")
        if not isinstance(item.get("name"), str):
            raise ValidationError(f"Record {index}: name must be a string")
        for field in _MACRO_FIELDS:
            value = item.get(field)
            if isinstance(value, bool) or not isinstance(value, int | float):
                raise ValidationError(f"Record {index}: {field} must be a number")
        records.append(
            {"name": item["name"], **{field: item[field] for field in _MACRO_FIELDS}}
        )
    return records
