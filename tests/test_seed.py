"""Tests for the predefined food seed."""

from diet_planner.seed import PREDEFINED_FOODS, seed_predefined_foods
from tests.conftest import InMemoryFoodRepository, InMemoryStore, add_predefined_food


def test_seed_inserts_every_predefined_food() -> None:
    repository = InMemoryFoodRepository(InMemoryStore())

    inserted = seed_predefined_foods(repository)

    foods = repository.list_foods()
    assert inserted == len(PREDEFINED_FOODS) == 63
    assert all(not food.is_custom and food.user_id is None for food in foods)
    assert repository.search_foods("petto di pollo")[0].proteins == 31


def test_seed_is_idempotent() -> None:
    repository = InMemoryFoodRepository(InMemoryStore())
    seed_predefined_foods(repository)

    assert seed_predefined_foods(repository) == 0
    assert len(repository.list_foods()) == len(PREDEFINED_FOODS)


def test_seed_skips_existing_names_only_for_predefined_foods() -> None:
    store = InMemoryStore()
    add_predefined_food(store, "BANANA", 1, 23, 0, 89)
    repository = InMemoryFoodRepository(store)
    repository.create_food(
        {
            "name": "Mela",
            "proteins": 0,
            "carbs": 14,
            "fats": 0,
            "calories": 52,
            "is_custom": True,
            "user_id": 3,
        }
    )

    inserted = seed_predefined_foods(repository)

    assert inserted == len(PREDEFINED_FOODS) - 1
    assert [food.name for food in repository.list_foods()].count("Mela") == 2


def test_predefined_foods_have_unique_names() -> None:
    names = [name.casefold() for name, *_ in PREDEFINED_FOODS]

    assert len(names) == len(set(names))
