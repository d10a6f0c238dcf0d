"""Domain models for the food catalog."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Food:
    """A catalog food with macros per 100g.

    Predefined foods have ``is_custom`` unset and no owning user.
    """

    id: int
    name: str
    proteins: int
    carbs: int
    fats: int
    calories: int
    is_custom: bool
    user_id: int | None
