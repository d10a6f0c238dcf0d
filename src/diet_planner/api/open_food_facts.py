"""Open Food Facts lookup endpoints."""

from fastapi import APIRouter, Depends

from diet_planner.api.dependencies import get_container, require_user
from diet_planner.api.schemas import ProductSave
from diet_planner.containers import AppContainer
from diet_planner.domain.nutrition import OpenFoodFactsProduct
from diet_planner.domain.users import UserRecord

router = APIRouter(prefix="/open-food-facts", tags=["open-food-facts"])


@router.get("/{barcode}", dependencies=[Depends(require_user)])
async def fetch_product(
    barcode: str, container: AppContainer = Depends(get_container)
) -> OpenFoodFactsProduct | None:
    """Look a barcode up in Open Food Facts; null when not found."""
    return await container.nutrition_service.fetch_by_barcode(barcode)


@router.post("")
async def save_product(
    body: ProductSave,
    user: UserRecord = Depends(require_user),
    container: AppContainer = Depends(get_container),
) -> dict[str, int]:
    """Import a product as a custom food and link its barcode."""
    product = OpenFoodFactsProduct(
        barcode=body.barcode,
        name=body.name,
        proteins=body.proteins,
        carbs=body.carbs,
        fats=body.fats,
        calories=body.calories,
        brand=body.brand,
    )
    food = container.nutrition_service.import_as_custom_food(user.id, product)
    return {"food_id": food.id}
