"""Supabase implementation of the food catalog."""

from dataclasses import dataclass

from supabase import Client

from diet_planner.adapters.supabase_errors import first_row, store_errors
from diet_planner.domain.foods import Food
from diet_planner.services.foods import FoodRepository


@dataclass
class SupabaseFoodRepository(FoodRepository):
    """Supabase-backed repository for the foods table."""

    client: Client

    def list_foods(self) -> list[Food]:
        """Return every food."""
        with store_errors("list foods"):
            response = self.client.table("foods").select("*").order("id").execute()
        return [parse_food(row) for row in response.data or []]

    def search_foods(self, term: str) -> list[Food]:
        """Return foods whose name contains the term, ignoring case."""
        with store_errors("search foods"):
            response = (
                self.client.table("foods")
                .select("*")
                .ilike("name", f"%{escape_like(term)}%")
                .order("name")
                .execute()
            )
        return [parse_food(row) for row in response.data or []]

    def get_food(self, food_id: int) -> Food | None:
        """Return a food by id, if present."""
        with store_errors("load food"):
            response = (
                self.client.table("foods")
                .select("*")
                .eq("id", food_id)
                .limit(1)
                .execute()
            )
        if not response.data:
            return None
        return parse_food(response.data[0])

    def list_user_foods(self, user_id: int) -> list[Food]:
        """Return foods created by a user."""
        with store_errors("list user foods"):
            response = (
                self.client.table("foods")
                .select("*")
                .eq("user_id", user_id)
                .order("id")
                .execute()
            )
        return [parse_food(row) for row in response.data or []]

    def create_food(self, payload: dict[str, object]) -> Food:
        """Insert a food row and return it."""
        with store_errors("create food"):
            response = self.client.table("foods").insert(payload).execute()
        return parse_food(first_row(response.data, "create food"))

    def delete_food(self, food_id: int) -> None:
        """Delete a food row."""
        with store_errors("delete food"):
            self.client.table("foods").delete().eq("id", food_id).execute()


def escape_like(term: str) -> str:
    """Escape LIKE wildcards so the term matches literally."""
    return term.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")


def parse_food(row: dict[str, object]) -> Food:
    """Parse a foods row into a domain model."""
    user_id = row.get("user_id")
    return Food(
        id=int(row["id"]),
        name=str(row.get("name", "")),
        proteins=int(row.get("proteins", 0)),
        carbs=int(row.get("carbs", 0)),
        fats=int(row.get("fats", 0)),
        calories=int(row.get("calories", 0)),
        is_custom=bool(row.get("is_custom", False)),
        user_id=int(user_id) if user_id is not None else None,
    )
