"""Supabase implementation for meal lists and their items."""

from dataclasses import dataclass

from supabase import Client

from diet_planner.adapters.supabase_errors import first_row, store_errors
from diet_planner.domain.meal_lists import (
    MacroTargets,
    MealList,
    MealListItem,
    MealListItemView,
)
from diet_planner.services.meal_lists import MealListRepository

_ITEM_VIEW_COLUMNS = (
    "id, quantity, food_id, foods!inner(id, name, proteins, carbs, fats, calories)"
)


@dataclass
class SupabaseMealListRepository(MealListRepository):
    """Supabase-backed repository for meal_lists and meal_list_items."""

    client: Client

    def create_list(self, user_id: int, name: str, targets: MacroTargets) -> MealList:
        """Insert a meal list and return it."""
        with store_errors("create meal list"):
            response = (
                self.client.table("meal_lists")
                .insert(
                    {
                        "user_id": user_id,
                        "name": name,
                        "target_proteins": targets.proteins,
                        "target_carbs": targets.carbs,
                        "target_fats": targets.fats,
                    }
                )
                .execute()
            )
        return _parse_list(first_row(response.data, "create meal list"))

    def get_list(self, list_id: int) -> MealList | None:
        """Return a meal list by id, if present."""
        with store_errors("load meal list"):
            response = (
                self.client.table("meal_lists")
                .select("*")
                .eq("id", list_id)
                .limit(1)
                .execute()
            )
        if not response.data:
            return None
        return _parse_list(response.data[0])

    def list_user_lists(self, user_id: int) -> list[MealList]:
        """Return a user's lists, oldest first."""
        with store_errors("list meal lists"):
            response = (
                self.client.table("meal_lists")
                .select("*")
                .eq("user_id", user_id)
                .order("id")
                .execute()
            )
        return [_parse_list(row) for row in response.data or []]

    def delete_list(self, list_id: int) -> None:
        """Delete a meal list row."""
        with store_errors("delete meal list"):
            self.client.table("meal_lists").delete().eq("id", list_id).execute()

    def create_item(self, list_id: int, food_id: int, quantity: int) -> MealListItem:
        """Insert an item and return it."""
        with store_errors("add meal list item"):
            response = (
                self.client.table("meal_list_items")
                .insert(
                    {"meal_list_id": list_id, "food_id": food_id, "quantity": quantity}
                )
                .execute()
            )
        return _parse_item(first_row(response.data, "add meal list item"))

    def get_item(self, item_id: int) -> MealListItem | None:
        """Return an item by id, if present."""
        with store_errors("load meal list item"):
            response = (
                self.client.table("meal_list_items")
                .select("*")
                .eq("id", item_id)
                .limit(1)
                .execute()
            )
        if not response.data:
            return None
        return _parse_item(response.data[0])

    def list_item_views(self, list_id: int) -> list[MealListItemView]:
        """Return items joined with their food's macros."""
        with store_errors("list meal list items"):
            response = (
                self.client.table("meal_list_items")
                .select(_ITEM_VIEW_COLUMNS)
                .eq("meal_list_id", list_id)
                .order("id")
                .execute()
            )
        return [_parse_item_view(row) for row in response.data or []]

    def update_item_quantity(self, item_id: int, quantity: int) -> None:
        """Update the quantity of an item."""
        with store_errors("update meal list item"):
            self.client.table("meal_list_items").update({"quantity": quantity}).eq(
                "id", item_id
            ).execute()

    def delete_item(self, item_id: int) -> None:
        """Delete one item."""
        with store_errors("remove meal list item"):
            self.client.table("meal_list_items").delete().eq("id", item_id).execute()

    def delete_items_for_list(self, list_id: int) -> None:
        """Delete every item of a list."""
        with store_errors("clear meal list"):
            self.client.table("meal_list_items").delete().eq(
                "meal_list_id", list_id
            ).execute()

    def delete_items_for_food(self, food_id: int) -> None:
        """Delete every item referencing a food."""
        with store_errors("remove food from meal lists"):
            self.client.table("meal_list_items").delete().eq(
                "food_id", food_id
            ).execute()


def _optional_int(value: object) -> int | None:
    return int(value) if value is not None else None


def _parse_list(row: dict[str, object]) -> MealList:
    return MealList(
        id=int(row["id"]),
        user_id=int(row["user_id"]),
        name=str(row.get("name", "")),
        targets=MacroTargets(
            proteins=_optional_int(row.get("target_proteins")),
            carbs=_optional_int(row.get("target_carbs")),
            fats=_optional_int(row.get("target_fats")),
        ),
    )


def _parse_item(row: dict[str, object]) -> MealListItem:
    return MealListItem(
        id=int(row["id"]),
        meal_list_id=int(row["meal_list_id"]),
        food_id=int(row["food_id"]),
        quantity=int(row["quantity"]),
    )


def _parse_item_view(row: dict[str, object]) -> MealListItemView:
    food = row.get("foods") or {}
    return MealListItemView(
        id=int(row["id"]),
        quantity=int(row["quantity"]),
        food_id=int(food.get("id", row["food_id"])),
        food_name=str(food.get("name", "")),
        proteins=int(food.get("proteins", 0)),
        carbs=int(food.get("carbs", 0)),
        fats=int(food.get("fats", 0)),
        calories=int(food.get("calories", 0)),
    )
