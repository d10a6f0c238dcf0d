"""Nutrition domain models."""

from dataclasses import dataclass
from enum import StrEnum


@dataclass(frozen=True)
class MacroTotals:
    """Aggregated macros for a set of quantified foods."""

    proteins: float
    carbs: float
    fats: float
    calories: float


class ProgressStatus(StrEnum):
    """How a running total compares with its target."""

    NO_TARGET = "no_target"
    UNDER = "under"
    ON_TARGET = "on_target"
    OVER = "over"


@dataclass(frozen=True)
class OpenFoodFactsProduct:
    """Product fetched from Open Food Facts, macros per 100g."""

    barcode: str
    name: str
    proteins: int
    carbs: int
    fats: int
    calories: int
    brand: str | None = None
    image_url: str | None = None

    def display_name(self) -> str:
        """Return the catalog name, with the brand in parentheses if known."""
        if self.brand:
            return f"{self.name} ({self.brand})"
        return self.name
