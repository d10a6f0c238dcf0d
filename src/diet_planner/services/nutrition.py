"""Open Food Facts lookup and import into the local catalog."""

import logging
import math
from dataclasses import dataclass

from diet_planner.adapters.openfoodfacts_client import OpenFoodFactsClient
from diet_planner.domain.foods import Food
from diet_planner.domain.nutrition import OpenFoodFactsProduct
from diet_planner.errors import DietPlannerError
from diet_planner.services.barcodes import BarcodeRegistryService
from diet_planner.services.foods import FoodCatalogService
from diet_planner.services.validation import round_half_up

UNKNOWN_PRODUCT_NAME = "Prodotto sconosciuto"

# local field -> Open Food Facts nutriment key
_NUTRIMENT_KEYS = {
    "proteins": "proteins",
    "carbs": "carbohydrates",
    "fats": "fat",
    "calories": "energy-kcal",
}

_logger = logging.getLogger(__name__)


@dataclass
class NutritionLookupService:
    """Read-through lookup against Open Food Facts."""

    client: OpenFoodFactsClient
    food_service: FoodCatalogService
    barcode_service: BarcodeRegistryService

    async def fetch_by_barcode(self, barcode: str) -> OpenFoodFactsProduct | None:
        """Return the product for a barcode, or None when unavailable.

        Transport errors, bad payloads and unknown products all collapse to
        None; the caller cannot tell them apart.
        """
        code = (barcode or "").strip()
        if not code:
            return None
        try:
            payload = await self.client.get_product(code)
            product = parse_product(code, payload)
        except Exception as exc:
            _logger.warning("Open Food Facts lookup failed for %s: %s", code, exc)
            return None
        if product is None:
            _logger.info("Open Food Facts has no product for %s", code)
        return product

    def import_as_custom_food(
        self, owner_id: int, product: OpenFoodFactsProduct
    ) -> Food:
        """Create a custom food from a product and link its barcode.

        The food is not rolled back when the barcode link fails.
        """
        food = self.food_service.create_custom(
            owner_id,
            product.display_name(),
            product.proteins,
            product.carbs,
            product.fats,
            product.calories,
        )
        try:
            self.barcode_service.associate(product.barcode, food.id, owner_id)
        except DietPlannerError:
            _logger.warning(
                "Imported food id=%s kept without barcode %s",
                food.id,
                product.barcode,
            )
            raise
        return food


def parse_product(
    barcode: str, payload: dict[str, object]
) -> OpenFoodFactsProduct | None:
    """Map an Open Food Facts response body to a product, if present."""
    if not isinstance(payload, dict) or payload.get("status") != 1:
        return None
    product = payload.get("product")
    if not isinstance(product, dict) or not product:
        return None
    nutriments = product.get("nutriments")
    if not isinstance(nutriments, dict):
        nutriments = {}
    macros = {
        field: round_half_up(_nutriment_per_100g(nutriments, key))
        for field, key in _NUTRIMENT_KEYS.items()
    }
    name = (
        product.get("product_name")
        or product.get("product_name_it")
        or UNKNOWN_PRODUCT_NAME
    )
    return OpenFoodFactsProduct(
        barcode=barcode,
        name=str(name),
        brand=product.get("brands") or None,
        image_url=product.get("image_url") or None,
        **macros,
    )


def _nutriment_per_100g(nutriments: dict[str, object], key: str) -> float:
    """Prefer the per-100g value, then the plain one, else zero.

    Negative or non-finite values count as missing.
    """
    for candidate in (f"{key}_100g", key):
        value = _to_float(nutriments.get(candidate))
        if value is not None and value >= 0:
            return value
    return 0.0


def _to_float(value: object) -> float | None:
    if value is None or isinstance(value, bool):
        return None
    try:
        number = float(value)
    except (TypeError, ValueError, OverflowError):
        return None
    return number if math.isfinite(number) else None
