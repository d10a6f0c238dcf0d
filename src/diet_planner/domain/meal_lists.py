"""Domain models for meal lists and their items."""

from dataclasses import dataclass, field

from diet_planner.domain.nutrition import MacroTotals, ProgressStatus


@dataclass(frozen=True)
class MacroTargets:
    """Optional per-list macro goals in grams."""

    proteins: int | None = None
    carbs: int | None = None
    fats: int | None = None


@dataclass(frozen=True)
class MealList:
    """Named list of foods owned by a user."""

    id: int
    user_id: int
    name: str
    targets: MacroTargets = field(default_factory=MacroTargets)


@dataclass(frozen=True)
class MealListItem:
    """Quantity-weighted reference from a list to a food."""

    id: int
    meal_list_id: int
    food_id: int
    quantity: int


@dataclass(frozen=True)
class MealListItemView:
    """Item row joined with its food's macros per 100g."""

    id: int
    quantity: int
    food_id: int
    food_name: str
    proteins: int
    carbs: int
    fats: int
    calories: int


@dataclass(frozen=True)
class MealListSummary:
    """List with items, running totals and progress against targets."""

    meal_list: MealList
    items: list[MealListItemView]
    totals: MacroTotals
    progress: dict[str, ProgressStatus]
