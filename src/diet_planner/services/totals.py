"""Macro aggregation over meal list items and progress classification."""

from collections.abc import Iterable

from diet_planner.domain.meal_lists import MacroTargets, MealListItemView
from diet_planner.domain.nutrition import MacroTotals, ProgressStatus

_LOWER_PERCENT = 90
_UPPER_PERCENT = 110


def item_contribution(item: MealListItemView) -> MacroTotals:
    """Scale an item's per-100g macros to its quantity."""
    return MacroTotals(
        proteins=item.proteins * item.quantity / 100,
        carbs=item.carbs * item.quantity / 100,
        fats=item.fats * item.quantity / 100,
        calories=item.calories * item.quantity / 100,
    )


def compute_totals(items: Iterable[MealListItemView]) -> MacroTotals:
    """Sum item contributions; no rounding is applied."""
    total = MacroTotals(0.0, 0.0, 0.0, 0.0)
    for item in items:
        portion = item_contribution(item)
        total = MacroTotals(
            proteins=total.proteins + portion.proteins,
            carbs=total.carbs + portion.carbs,
            fats=total.fats + portion.fats,
            calories=total.calories + portion.calories,
        )
    return total


def classify_progress(current: float, target: float | None) -> ProgressStatus:
    """Classify a total against a target.

    90% and 110% of the target both count as on target.
    """
    if target is None or target <= 0:
        return ProgressStatus.NO_TARGET
    # compare scaled values so integer inputs stay exact at the boundaries
    if current * 100 < target * _LOWER_PERCENT:
        return ProgressStatus.UNDER
    if current * 100 > target * _UPPER_PERCENT:
        return ProgressStatus.OVER
    return ProgressStatus.ON_TARGET


def classify_totals(
    totals: MacroTotals, targets: MacroTargets
) -> dict[str, ProgressStatus]:
    """Return a progress status per targeted macro."""
    return {
        "proteins": classify_progress(totals.proteins, targets.proteins),
        "carbs": classify_progress(totals.carbs, targets.carbs),
        "fats": classify_progress(totals.fats, targets.fats),
    }
