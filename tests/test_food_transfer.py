"""Tests for custom food export and import validation."""

import pytest

from diet_planner.errors import ValidationError
from diet_planner.services.food_transfer import export_custom_foods, validate_import
from tests.conftest import Services


def test_export_contains_name_and_macros(services: Services) -> None:
    services.foods.create_custom(1, "Hummus", 8, 14, 10, 166)

    exported = export_custom_foods(services.foods.list_mine(1))

    assert exported == [
        {"name": "Hummus", "proteins": 8, "carbs": 14, "fats": 10, "calories": 166}
    ]


def test_exported_file_passes_validation(services: Services) -> None:
    services.foods.create_custom(1, "Hummus", 8, 14, 10, 166)
    services.foods.create_custom(1, "Falafel", 13, 32, 18, 333)

    exported = export_custom_foods(services.foods.list_mine(1))

    assert validate_import(exported) == exported


def test_validate_import_accepts_floats_and_ignores_extra_fields() -> None:
    tofu = {"name": "Tofu", "proteins": 8.1, "carbs": 1.9, "fats": 4.8, "calories": 76}

    records = validate_import([{**tofu, "brand": "Bio"}])

    assert records == [tofu]


def test_validate_import_does_not_persist(services: Services) -> None:
    validate_import([_record()])

    assert services.foods.list_all() == []


def _record(**overrides: object) -> dict[str, object]:
    record = {"name": "Tofu", "proteins": 8, "carbs": 2, "fats": 5, "calories": 76}
    record.update(overrides)
    return record


@pytest.mark.parametrize(
    ("payload", "message"),
    [
        (_record(), "array"),
        (["Tofu"], "Record 0"),
        ([_record(), _record(name=3)], "Record 1: name"),
        ([_record(proteins="8")], "proteins"),
        ([_record(fats=True)], "fats"),
        ([{"name": "Tofu", "proteins": 8, "carbs": 2, "fats": 5}], "calories"),
    ],
)
def test_validate_import_rejects_malformed_payloads(
    payload: object, message: str
) -> None:
    with pytest.raises(ValidationError, match=message):
        validate_import(payload)
