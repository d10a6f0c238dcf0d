"""Meal list service: lists, their items and the summary view."""

import logging
from dataclasses import dataclass
from typing import Protocol

from diet_planner.domain.meal_lists import (
    MacroTargets,
    MealList,
    MealListItem,
    MealListItemView,
    MealListSummary,
)
from diet_planner.errors import NotFoundError, PermissionDeniedError
from diet_planner.services.foods import FoodRepository
from diet_planner.services.totals import classify_totals, compute_totals
from diet_planner.services.validation import (
    coerce_optional_macro,
    require_quantity,
    require_text,
)

_logger = logging.getLogger(__name__)


class MealListRepository(Protocol):
    """Persistence interface for meal lists and items."""

    def create_list(
        self, user_id: int, name: str, targets: MacroTargets
    ) -> MealList:
        """Insert a meal list and return it."""

    def get_list(self, list_id: int) -> MealList | None:
        """Return a meal list by id, if present."""

    def list_user_lists(self, user_id: int) -> list[MealList]:
        """Return meal lists owned by a user."""

    def delete_list(self, list_id: int) -> None:
        """Delete a meal list row."""

    def create_item(self, list_id: int, food_id: int, quantity: int) -> MealListItem:
        """Insert an item and return it."""

    def get_item(self, item_id: int) -> MealListItem | None:
        """Return an item by id, if present."""

    def list_item_views(self, list_id: int) -> list[MealListItemView]:
        """Return a list's items joined with their food macros."""

    def update_item_quantity(self, item_id: int, quantity: int) -> None:
        """Update the quantity of an item."""

    def delete_item(self, item_id: int) -> None:
        """Delete one item."""

    def delete_items_for_list(self, list_id: int) -> None:
        """Delete every item of a list."""

    def delete_items_for_food(self, food_id: int) -> None:
        """Delete every item referencing a food."""


@dataclass
class MealListService:
    """Application service for meal lists."""

    repository: MealListRepository
    food_repository: FoodRepository

    def create(
        self, owner_id: int, name: str, targets: MacroTargets | None = None
    ) -> MealList:
        """Create a named list with optional macro targets."""
        resolved = targets or MacroTargets()
        checked = MacroTargets(
            proteins=coerce_optional_macro(resolved.proteins, "target_proteins"),
            carbs=coerce_optional_macro(resolved.carbs, "target_carbs"),
            fats=coerce_optional_macro(resolved.fats, "target_fats"),
        )
        meal_list = self.repository.create_list(
            owner_id, require_text(name, "name"), checked
        )
        _logger.info("Created meal list id=%s user=%s", meal_list.id, owner_id)
        return meal_list

    def list_mine(self, owner_id: int) -> list[MealList]:
        """Return the user's lists."""
        return self.repository.list_user_lists(owner_id)

    def get_by_id(self, list_id: int) -> MealList | None:
        """Return a list by id, if present."""
        return self.repository.get_list(list_id)

    def ensure_owner(self, list_id: int, user_id: int) -> MealList:
        """Return the list when the user owns it, raise otherwise."""
        meal_list = self.repository.get_list(list_id)
        if meal_list is None:
            raise NotFoundError(f"Meal list {list_id} not found")
        if meal_list.user_id != user_id:
            raise PermissionDeniedError("You cannot access this meal list")
        return meal_list

    def delete(self, list_id: int) -> None:
        """Delete a list after its items. Ownership is checked by callers."""
        self.repository.delete_items_for_list(list_id)
        self.repository.delete_list(list_id)
        _logger.info("Deleted meal list id=%s", list_id)

    def add_item(self, list_id: int, food_id: int, quantity: int) -> MealListItem:
        """Add a food with a gram quantity to a list."""
        grams = require_quantity(quantity)
        if self.food_repository.get_food(food_id) is None:
            raise NotFoundError(f"Food {food_id} not found")
        return self.repository.create_item(list_id, food_id, grams)

    def get_item(self, item_id: int) -> MealListItem | None:
        """Return an item by id, if present."""
        return self.repository.get_item(item_id)

    def update_item_quantity(self, item_id: int, quantity: int) -> None:
        """Change the gram quantity of an item."""
        grams = require_quantity(quantity)
        if self.repository.get_item(item_id) is None:
            raise NotFoundError(f"Meal list item {item_id} not found")
        self.repository.update_item_quantity(item_id, grams)

    def remove_item(self, item_id: int) -> None:
        """Delete an item."""
        self.repository.delete_item(item_id)

    def list_items(self, list_id: int) -> list[MealListItemView]:
        """Return the list's items joined with food macros."""
        return self.repository.list_item_views(list_id)

    def get_summary(self, list_id: int) -> MealListSummary | None:
        """Return the list with totals and progress, if it exists."""
        meal_list = self.repository.get_list(list_id)
        if meal_list is None:
            return None
        items = self.repository.list_item_views(list_id)
        totals = compute_totals(items)
        return MealListSummary(
            meal_list=meal_list,
            items=items,
            totals=totals,
            progress=classify_totals(totals, meal_list.targets),
        )
