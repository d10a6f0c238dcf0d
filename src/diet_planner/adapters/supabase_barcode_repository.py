"""Supabase implementation of the barcode registry."""

from dataclasses import dataclass

from supabase import Client

from diet_planner.adapters.supabase_errors import first_row, store_errors
from diet_planner.domain.barcodes import (
    BarcodeAssociation,
    BarcodeListing,
    BarcodeMatch,
)
from diet_planner.services.barcodes import BarcodeRepository

_MATCH_COLUMNS = (
    "id, barcode, food_id, "
    "foods!inner(id, name, proteins, carbs, fats, calories, is_custom)"
)


@dataclass
class SupabaseBarcodeRepository(BarcodeRepository):
    """Supabase-backed repository for the food_barcodes table."""

    client: Client

    def get_by_barcode(self, barcode: str) -> BarcodeAssociation | None:
        """Return the association for a barcode, if any."""
        with store_errors("load barcode"):
            response = (
                self.client.table("food_barcodes")
                .select("*")
                .eq("barcode", barcode)
                .limit(1)
                .execute()
            )
        if not response.data:
            return None
        return _parse_association(response.data[0])

    def find_match(self, barcode: str) -> BarcodeMatch | None:
        """Return the association joined with its food."""
        with store_errors("find barcode"):
            response = (
                self.client.table("food_barcodes")
                .select(_MATCH_COLUMNS)
                .eq("barcode", barcode)
                .limit(1)
                .execute()
            )
        if not response.data:
            return None
        row = response.data[0]
        food = row.get("foods") or {}
        return BarcodeMatch(
            barcode_id=int(row["id"]),
            barcode=str(row["barcode"]),
            food_id=int(food.get("id", row["food_id"])),
            food_name=str(food.get("name", "")),
            proteins=int(food.get("proteins", 0)),
            carbs=int(food.get("carbs", 0)),
            fats=int(food.get("fats", 0)),
            calories=int(food.get("calories", 0)),
            is_custom=bool(food.get("is_custom", False)),
        )

    def get_association(self, association_id: int) -> BarcodeAssociation | None:
        """Return an association by id, if present."""
        with store_errors("load barcode"):
            response = (
                self.client.table("food_barcodes")
                .select("*")
                .eq("id", association_id)
                .limit(1)
                .execute()
            )
        if not response.data:
            return None
        return _parse_association(response.data[0])

    def list_user_associations(self, user_id: int) -> list[BarcodeListing]:
        """Return a user's associations with food names."""
        with store_errors("list barcodes"):
            response = (
                self.client.table("food_barcodes")
                .select("id, barcode, food_id, foods!inner(name)")
                .eq("user_id", user_id)
                .order("id")
                .execute()
            )
        return [
            BarcodeListing(
                id=int(row["id"]),
                barcode=str(row["barcode"]),
                food_id=int(row["food_id"]),
                food_name=str((row.get("foods") or {}).get("name", "")),
            )
            for row in response.data or []
        ]

    def create_association(
        self, barcode: str, food_id: int, user_id: int
    ) -> BarcodeAssociation:
        """Insert an association; the unique index rejects duplicates."""
        with store_errors("associate barcode"):
            response = (
                self.client.table("food_barcodes")
                .insert({"barcode": barcode, "food_id": food_id, "user_id": user_id})
                .execute()
            )
        return _parse_association(first_row(response.data, "associate barcode"))

    def delete_association(self, association_id: int) -> None:
        """Delete an association by id."""
        with store_errors("delete barcode"):
            self.client.table("food_barcodes").delete().eq(
                "id", association_id
            ).execute()

    def delete_barcodes_for_food(self, food_id: int) -> None:
        """Delete every association for a food."""
        with store_errors("delete food barcodes"):
            self.client.table("food_barcodes").delete().eq(
                "food_id", food_id
            ).execute()


def _parse_association(row: dict[str, object]) -> BarcodeAssociation:
    return BarcodeAssociation(
        id=int(row["id"]),
        barcode=str(row["barcode"]),
        food_id=int(row["food_id"]),
        user_id=int(row["user_id"]),
    )
