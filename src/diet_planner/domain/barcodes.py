"""Domain models for barcode associations."""

from dataclasses import dataclass


@dataclass(frozen=True)
class BarcodeAssociation:
    """Raw barcode -> food mapping row."""

    id: int
    barcode: str
    food_id: int
    user_id: int


@dataclass(frozen=True)
class BarcodeMatch:
    """Barcode lookup result joined with the associated food."""

    barcode_id: int
    barcode: str
    food_id: int
    food_name: str
    proteins: int
    carbs: int
    fats: int
    calories: int
    is_custom: bool


@dataclass(frozen=True)
class BarcodeListing:
    """A user's association joined with the food name."""

    id: int
    barcode: str
    food_id: int
    food_name: str
