"""Food catalog endpoints."""

from typing import Any

from fastapi import APIRouter, Body, Depends

from diet_planner.api.dependencies import get_container, require_user
from diet_planner.api.schemas import CustomFoodCreate
from diet_planner.containers import AppContainer
from diet_planner.domain.foods import Food
from diet_planner.domain.users import UserRecord
from diet_planner.services.food_transfer import export_custom_foods, validate_import

router = APIRouter(prefix="/foods", tags=["foods"])


@router.get("")
async def list_foods(container: AppContainer = Depends(get_container)) -> list[Food]:
    """Return the whole catalog."""
    return container.food_service.list_all()


@router.get("/search")
async def search_foods(
    term: str = "",
    user: UserRecord = Depends(require_user),
    container: AppContainer = Depends(get_container),
) -> list[Food]:
    """Search predefined foods and the caller's custom foods by name."""
    return container.food_service.search(term, user.id)


@router.post("/custom")
async def create_custom_food(
    body: CustomFoodCreate,
    user: UserRecord = Depends(require_user),
    container: AppContainer = Depends(get_container),
) -> dict[str, int]:
    """Create a custom food owned by the caller."""
    food = container.food_service.create_custom(
        user.id, body.name, body.proteins, body.carbs, body.fats, body.calories
    )
    return {"id": food.id}


@router.get("/custom")
async def list_my_custom_foods(
    user: UserRecord = Depends(require_user),
    container: AppContainer = Depends(get_container),
) -> list[Food]:
    """Return the caller's custom foods."""
    return container.food_service.list_mine(user.id)


@router.delete("/custom/{food_id}")
async def delete_custom_food(
    food_id: int,
    user: UserRecord = Depends(require_user),
    container: AppContainer = Depends(get_container),
) -> dict[str, bool]:
    """Delete one of the caller's custom foods."""
    container.food_service.delete_custom(food_id, user.id)
    return {"success": True}


@router.get("/custom/export")
async def export_my_custom_foods(
    user: UserRecord = Depends(require_user),
    container: AppContainer = Depends(get_container),
) -> list[dict[str, Any]]:
    """Return the caller's custom foods in the portable export format."""
    return export_custom_foods(container.food_service.list_mine(user.id))


@router.post("/custom/import/validate", dependencies=[Depends(require_user)])
async def validate_custom_food_import(
    payload: Any = Body(...),
) -> dict[str, Any]:
    """Check an export file without importing it."""
    records = validate_import(payload)
    return {"valid": True, "count": len(records)}
