"""Dependency container wiring for the application."""

from collections.abc import Awaitable, Callable
from dataclasses import dataclass

from supabase import create_client

from diet_planner.adapters.openfoodfacts_client import HttpxOpenFoodFactsClient
from diet_planner.adapters.supabase_barcode_repository import (
    SupabaseBarcodeRepository,
)
from diet_planner.adapters.supabase_food_repository import SupabaseFoodRepository
from diet_planner.adapters.supabase_meal_list_repository import (
    SupabaseMealListRepository,
)
from diet_planner.adapters.supabase_user_repository import SupabaseUserRepository
from diet_planner.config import Settings
from diet_planner.services.barcodes import BarcodeRegistryService
from diet_planner.services.foods import FoodCatalogService
from diet_planner.services.meal_lists import MealListService
from diet_planner.services.nutrition import NutritionLookupService
from diet_planner.services.users import UserService


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    user_service: UserService
    food_service: FoodCatalogService
    barcode_service: BarcodeRegistryService
    nutrition_service: NutritionLookupService
    meal_list_service: MealListService
    close_resources: Callable[[], Awaitable[None]]


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    supabase_client = create_client(
        resolved_settings.supabase_url, resolved_settings.supabase_service_key
    )
    user_repository = SupabaseUserRepository(supabase_client)
    food_repository = SupabaseFoodRepository(supabase_client)
    barcode_repository = SupabaseBarcodeRepository(supabase_client)
    meal_list_repository = SupabaseMealListRepository(supabase_client)

    user_service = UserService(
        user_repository, owner_open_id=resolved_settings.owner_open_id
    )
    food_service = FoodCatalogService(
        repository=food_repository,
        item_references=meal_list_repository,
        barcode_references=barcode_repository,
    )
    barcode_service = BarcodeRegistryService(
        repository=barcode_repository,
        food_repository=food_repository,
    )
    off_client = HttpxOpenFoodFactsClient.create(
        base_url=resolved_settings.open_food_facts_base_url,
        timeout_seconds=resolved_settings.open_food_facts_timeout_seconds,
    )
    nutrition_service = NutritionLookupService(
        client=off_client,
        food_service=food_service,
        barcode_service=barcode_service,
    )
    meal_list_service = MealListService(
        repository=meal_list_repository,
        food_repository=food_repository,
    )

    async def close_resources() -> None:
        await off_client.close()

    return AppContainer(
        settings=resolved_settings,
        user_service=user_service,
        food_service=food_service,
        barcode_service=barcode_service,
        nutrition_service=nutrition_service,
        meal_list_service=meal_list_service,
        close_resources=close_resources,
    )
