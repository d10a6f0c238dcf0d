"""Meal list and meal list item endpoints.

Every route checks that the caller owns the list it touches.
"""

from fastapi import APIRouter, Depends

from diet_planner.api.dependencies import get_container, require_user
from diet_planner.api.schemas import (
    MealListCreate,
    MealListItemCreate,
    QuantityUpdate,
)
from diet_planner.containers import AppContainer
from diet_planner.domain.meal_lists import (
    MacroTargets,
    MealList,
    MealListItem,
    MealListItemView,
    MealListSummary,
)
from diet_planner.domain.users import UserRecord
from diet_planner.errors import NotFoundError

router = APIRouter(tags=["meal-lists"])


@router.post("/meal-lists")
async def create_meal_list(
    body: MealListCreate,
    user: UserRecord = Depends(require_user),
    container: AppContainer = Depends(get_container),
) -> dict[str, int]:
    """Create a meal list for the caller."""
    meal_list = container.meal_list_service.create(
        user.id,
        body.name,
        MacroTargets(
            proteins=body.target_proteins,
            carbs=body.target_carbs,
            fats=body.target_fats,
        ),
    )
    return {"id": meal_list.id}


@router.get("/meal-lists")
async def list_my_meal_lists(
    user: UserRecord = Depends(require_user),
    container: AppContainer = Depends(get_container),
) -> list[MealList]:
    """Return the caller's lists."""
    return container.meal_list_service.list_mine(user.id)


@router.get("/meal-lists/{list_id}")
async def get_meal_list(
    list_id: int,
    user: UserRecord = Depends(require_user),
    container: AppContainer = Depends(get_container),
) -> MealList:
    """Return one of the caller's lists."""
    return container.meal_list_service.ensure_owner(list_id, user.id)


@router.delete("/meal-lists/{list_id}")
async def delete_meal_list(
    list_id: int,
    user: UserRecord = Depends(require_user),
    container: AppContainer = Depends(get_container),
) -> dict[str, bool]:
    """Delete a list and its items."""
    container.meal_list_service.ensure_owner(list_id, user.id)
    container.meal_list_service.delete(list_id)
    return {"success": True}


@router.get("/meal-lists/{list_id}/summary")
async def get_meal_list_summary(
    list_id: int,
    user: UserRecord = Depends(require_user),
    container: AppContainer = Depends(get_container),
) -> MealListSummary:
    """Return items, running totals and progress against targets."""
    container.meal_list_service.ensure_owner(list_id, user.id)
    summary = container.meal_list_service.get_summary(list_id)
    if summary is None:
        raise NotFoundError(f"Meal list {list_id} not found")
    return summary


@router.post("/meal-lists/{list_id}/items")
async def add_meal_list_item(
    list_id: int,
    body: MealListItemCreate,
    user: UserRecord = Depends(require_user),
    container: AppContainer = Depends(get_container),
) -> dict[str, int]:
    """Add a food with a gram quantity to a list."""
    container.meal_list_service.ensure_owner(list_id, user.id)
    item = container.meal_list_service.add_item(list_id, body.food_id, body.quantity)
    return {"id": item.id}


@router.get("/meal-lists/{list_id}/items")
async def list_meal_list_items(
    list_id: int,
    user: UserRecord = Depends(require_user),
    container: AppContainer = Depends(get_container),
) -> list[MealListItemView]:
    """Return a list's items with food macros."""
    container.meal_list_service.ensure_owner(list_id, user.id)
    return container.meal_list_service.list_items(list_id)


@router.patch("/meal-list-items/{item_id}")
async def update_meal_list_item(
    item_id: int,
    body: QuantityUpdate,
    user: UserRecord = Depends(require_user),
    container: AppContainer = Depends(get_container),
) -> dict[str, bool]:
    """Change an item's gram quantity."""
    _owned_item(container, item_id, user)
    container.meal_list_service.update_item_quantity(item_id, body.quantity)
    return {"success": True}


@router.delete("/meal-list-items/{item_id}")
async def remove_meal_list_item(
    item_id: int,
    user: UserRecord = Depends(require_user),
    container: AppContainer = Depends(get_container),
) -> dict[str, bool]:
    """Remove an item from its list."""
    _owned_item(container, item_id, user)
    container.meal_list_service.remove_item(item_id)
    return {"success": True}


def _owned_item(
    container: AppContainer, item_id: int, user: UserRecord
) -> MealListItem:
    item = container.meal_list_service.get_item(item_id)
    if item is None:
        raise NotFoundError(f"Meal list item {item_id} not found")
    container.meal_list_service.ensure_owner(item.meal_list_id, user.id)
    return item
