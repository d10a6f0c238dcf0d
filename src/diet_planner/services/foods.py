"""Food catalog service: predefined and user-custom foods."""

import logging
from dataclasses import dataclass
from typing import Protocol

from diet_planner.domain.foods import Food
from diet_planner.errors import NotFoundError, PermissionDeniedError
from diet_planner.services.validation import coerce_macro, require_text

_logger = logging.getLogger(__name__)


class FoodRepository(Protocol):
    """Persistence interface for the food catalog."""

    def list_foods(self) -> list[Food]:
        """Return every food."""

    def search_foods(self, term: str) -> list[Food]:
        """Return foods whose name contains term, case-insensitively."""

    def get_food(self, food_id: int) -> Food | None:
        """Return a food by id, if present."""

    def list_user_foods(self, user_id: int) -> list[Food]:
        """Return custom foods created by a user."""

    def create_food(self, payload: dict[str, object]) -> Food:
        """Insert a food row and return it."""

    def delete_food(self, food_id: int) -> None:
        """Delete a food row."""


class FoodItemReferences(Protocol):
    """Meal list items that point at a food."""

    def delete_items_for_food(self, food_id: int) -> None:
        """Delete meal list items referencing the food."""


class FoodBarcodeReferences(Protocol):
    """Barcode associations that point at a food."""

    def delete_barcodes_for_food(self, food_id: int) -> None:
        """Delete barcode associations referencing the food."""


@dataclass
class FoodCatalogService:
    """Application service for catalog reads and custom food lifecycle."""

    repository: FoodRepository
    item_references: FoodItemReferences
    barcode_references: FoodBarcodeReferences

    def list_all(self) -> list[Food]:
        """Return predefined and custom foods without filtering."""
        return self.repository.list_foods()

    def search(self, term: str | None, requesting_user_id: int) -> list[Food]:
        """Search by name among predefined foods and the requester's own."""
        if not term or not term.strip():
            return []
        return [
            food
            for food in self.repository.search_foods(term.strip())
            if not food.is_custom or food.user_id == requesting_user_id
        ]

    def get_by_id(self, food_id: int) -> Food | None:
        """Return a single food, if present."""
        return self.repository.get_food(food_id)

    def list_mine(self, owner_id: int) -> list[Food]:
        """Return the custom foods owned by a user."""
        return [
            food
            for food in self.repository.list_user_foods(owner_id)
            if food.is_custom
        ]

    def create_custom(  # noqa: PLR0913
        self,
        owner_id: int,
        name: str,
        proteins: float,
        carbs: float,
        fats: float,
        calories: float,
    ) -> Food:
        """Validate and create a custom food owned by the user."""
        payload = {
            "name": require_text(name, "name"),
            "proteins": coerce_macro(proteins, "proteins"),
            "carbs": coerce_macro(carbs, "carbs"),
            "fats": coerce_macro(fats, "fats"),
            "calories": coerce_macro(calories, "calories"),
            "is_custom": True,
            "user_id": owner_id,
        }
        food = self.repository.create_food(payload)
        _logger.info("Created custom food id=%s user=%s", food.id, owner_id)
        return food

    def delete_custom(self, food_id: int, requesting_user_id: int) -> None:
        """Delete an owned custom food and every row referencing it."""
        food = self.repository.get_food(food_id)
        if food is None:
            raise NotFoundError(f"Food {food_id} not found")
        if not food.is_custom or food.user_id != requesting_user_id:
            raise PermissionDeniedError("You cannot delete this food")
        self.item_references.delete_items_for_food(food_id)
        self.barcode_references.delete_barcodes_for_food(food_id)
        self.repository.delete_food(food_id)
        _logger.info("Deleted custom food id=%s user=%s", food_id, requesting_user_id)
