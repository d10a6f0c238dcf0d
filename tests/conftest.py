"""Shared test fixtures."""

import itertools
from dataclasses import dataclass, field, replace
from datetime import UTC, datetime

import pytest

from diet_planner.adapters.openfoodfacts_client import OpenFoodFactsClient
from diet_planner.config import Settings
from diet_planner.containers import AppContainer
from diet_planner.domain.barcodes import (
    BarcodeAssociation,
    BarcodeListing,
    BarcodeMatch,
)
from diet_planner.domain.foods import Food
from diet_planner.domain.meal_lists import (
    MacroTargets,
    MealList,
    MealListItem,
    MealListItemView,
)
from diet_planner.domain.users import UserRecord
from diet_planner.errors import ConflictError
from diet_planner.services.barcodes import BarcodeRegistryService, BarcodeRepository
from diet_planner.services.foods import FoodCatalogService, FoodRepository
from diet_planner.services.meal_lists import MealListRepository, MealListService
from diet_planner.services.nutrition import NutritionLookupService
from diet_planner.services.users import UserRepository, UserService

TEST_SERVICE_KEY = (
    "eyJhbGciOiJIUzI1NiIsInR5cCI6IkpXVCJ9."
    "eyJyb2xlIjoic2VydmljZV9yb2xlIn0."
    "c2lnbmF0dXJl"
)


@dataclass
class InMemoryStore:
    """Tables shared by the in-memory repositories."""

    foods: dict[int, Food] = field(default_factory=dict)
    barcodes: dict[int, BarcodeAssociation] = field(default_factory=dict)
    meal_lists: dict[int, MealList] = field(default_factory=dict)
    items: dict[int, MealListItem] = field(default_factory=dict)
    _ids: itertools.count = field(default_factory=lambda: itertools.count(1))

    def next_id(self) -> int:
        return next(self._ids)


@dataclass
class InMemoryUserRepository(UserRepository):
    """In-memory user repository for tests."""

    users: dict[str, UserRecord] = field(default_factory=dict)
    updates: list[int] = field(default_factory=list)
    _ids: itertools.count = field(default_factory=lambda: itertools.count(1))

    def get_by_open_id(self, open_id: str) -> UserRecord | None:
        return self.users.get(open_id)

    def create_user(self, payload: dict[str, object]) -> UserRecord:
        user = UserRecord(
            id=next(self._ids),
            open_id=str(payload["open_id"]),
            name=payload.get("name"),
            email=payload.get("email"),
            login_method=payload.get("login_method"),
            role=str(payload.get("role", "user")),
            last_signed_in=datetime.now(tz=UTC),
        )
        self.users[user.open_id] = user
        return user

    def update_user(self, user_id: int, payload: dict[str, object]) -> UserRecord:
        current = next(user for user in self.users.values() if user.id == user_id)
        updated = replace(current, last_signed_in=datetime.now(tz=UTC), **payload)
        self.users[updated.open_id] = updated
        self.updates.append(user_id)
        return updated


@dataclass
class InMemoryFoodRepository(FoodRepository):
    """In-memory food catalog for tests."""

    store: InMemoryStore

    def list_foods(self) -> list[Food]:
        return list(self.store.foods.values())

    def search_foods(self, term: str) -> list[Food]:
        needle = term.lower()
        return [
            food for food in self.store.foods.values() if needle in food.name.lower()
        ]

    def get_food(self, food_id: int) -> Food | None:
        return self.store.foods.get(food_id)

    def list_user_foods(self, user_id: int) -> list[Food]:
        return [food for food in self.store.foods.values() if food.user_id == user_id]

    def create_food(self, payload: dict[str, object]) -> Food:
        food = Food(id=self.store.next_id(), **payload)
        self.store.foods[food.id] = food
        return food

    def delete_food(self, food_id: int) -> None:
        self.store.foods.pop(food_id, None)


@dataclass
class InMemoryBarcodeRepository(BarcodeRepository):
    """In-memory barcode registry enforcing the unique barcode index."""

    store: InMemoryStore

    def get_by_barcode(self, barcode: str) -> BarcodeAssociation | None:
        for association in self.store.barcodes.values():
            if association.barcode == barcode:
                return association
        return None

    def find_match(self, barcode: str) -> BarcodeMatch | None:
        association = self.get_by_barcode(barcode)
        if association is None:
            return None
        food = self.store.foods[association.food_id]
        return BarcodeMatch(
            barcode_id=association.id,
            barcode=association.barcode,
            food_id=food.id,
            food_name=food.name,
            proteins=food.proteins,
            carbs=food.carbs,
            fats=food.fats,
            calories=food.calories,
            is_custom=food.is_custom,
        )

    def get_association(self, association_id: int) -> BarcodeAssociation | None:
        return self.store.barcodes.get(association_id)

    def list_user_associations(self, user_id: int) -> list[BarcodeListing]:
        return [
            BarcodeListing(
                id=association.id,
                barcode=association.barcode,
                food_id=association.food_id,
                food_name=self.store.foods[association.food_id].name,
            )
            for association in self.store.barcodes.values()
            if association.user_id == user_id
        ]

    def create_association(
        self, barcode: str, food_id: int, user_id: int
    ) -> BarcodeAssociation:
        if self.get_by_barcode(barcode) is not None:
            raise ConflictError("Failed to associate barcode: duplicate value")
        association = BarcodeAssociation(
            id=self.store.next_id(), barcode=barcode, food_id=food_id, user_id=user_id
        )
        self.store.barcodes[association.id] = association
        return association

    def delete_association(self, association_id: int) -> None:
        self.store.barcodes.pop(association_id, None)

    def delete_barcodes_for_food(self, food_id: int) -> None:
        for association_id, association in list(self.store.barcodes.items()):
            if association.food_id == food_id:
                del self.store.barcodes[association_id]


@dataclass
class InMemoryMealListRepository(MealListRepository):
    """In-memory meal lists and items for tests."""

    store: InMemoryStore

    def create_list(self, user_id: int, name: str, targets: MacroTargets) -> MealList:
        meal_list = MealList(
            id=self.store.next_id(), user_id=user_id, name=name, targets=targets
        )
        self.store.meal_lists[meal_list.id] = meal_list
        return meal_list

    def get_list(self, list_id: int) -> MealList | None:
        return self.store.meal_lists.get(list_id)

    def list_user_lists(self, user_id: int) -> list[MealList]:
        return [
            meal_list
            for meal_list in self.store.meal_lists.values()
            if meal_list.user_id == user_id
        ]

    def delete_list(self, list_id: int) -> None:
        self.store.meal_lists.pop(list_id, None)

    def create_item(self, list_id: int, food_id: int, quantity: int) -> MealListItem:
        item = MealListItem(
            id=self.store.next_id(),
            meal_list_id=list_id,
            food_id=food_id,
            quantity=quantity,
        )
        self.store.items[item.id] = item
        return item

    def get_item(self, item_id: int) -> MealListItem | None:
        return self.store.items.get(item_id)

    def list_item_views(self, list_id: int) -> list[MealListItemView]:
        views = []
        for item in self.store.items.values():
            if item.meal_list_id != list_id:
                continue
            food = self.store.foods[item.food_id]
            views.append(
                MealListItemView(
                    id=item.id,
                    quantity=item.quantity,
                    food_id=food.id,
                    food_name=food.name,
                    proteins=food.proteins,
                    carbs=food.carbs,
                    fats=food.fats,
                    calories=food.calories,
                )
            )
        return views

    def update_item_quantity(self, item_id: int, quantity: int) -> None:
        current = self.store.items[item_id]
        self.store.items[item_id] = replace(current, quantity=quantity)

    def delete_item(self, item_id: int) -> None:
        self.store.items.pop(item_id, None)

    def delete_items_for_list(self, list_id: int) -> None:
        for item_id, item in list(self.store.items.items()):
            if item.meal_list_id == list_id:
                del self.store.items[item_id]

    def delete_items_for_food(self, food_id: int) -> None:
        for item_id, item in list(self.store.items.items()):
            if item.food_id == food_id:
                del self.store.items[item_id]


@dataclass
class FakeOpenFoodFactsClient(OpenFoodFactsClient):
    """Fake Open Food Facts client with canned products keyed by barcode."""

    products: dict[str, dict[str, object]] = field(
        default_factory=lambda: {
            "8001505005707": {
                "status": 1,
                "product": {
                    "product_name": "Fette biscottate integrali",
                    "brands": "Mulino Bianco",
                    "image_url": "https://images.example/8001505005707.jpg",
                    "nutriments": {
                        "proteins_100g": 12.4,
                        "carbohydrates_100g": 66.5,
                        "fat_100g": 6.2,
                        "energy-kcal_100g": 390,
                    },
                },
            }
        }
    )
    error: Exception | None = None
    calls: list[str] = field(default_factory=list)

    async def get_product(self, barcode: str) -> dict[str, object]:
        self.calls.append(barcode)
        if self.error is not None:
            raise self.error
        return self.products.get(barcode, {"status": 0, "status_verbose": "not found"})


@dataclass
class Services:
    """Bundle of services sharing one in-memory store."""

    store: InMemoryStore
    users: UserService
    foods: FoodCatalogService
    barcodes: BarcodeRegistryService
    nutrition: NutritionLookupService
    meal_lists: MealListService
    off_client: FakeOpenFoodFactsClient


def build_services(owner_open_id: str | None = None) -> Services:
    """Wire every service over fresh in-memory repositories."""
    store = InMemoryStore()
    food_repository = InMemoryFoodRepository(store)
    barcode_repository = InMemoryBarcodeRepository(store)
    meal_list_repository = InMemoryMealListRepository(store)
    foods = FoodCatalogService(
        repository=food_repository,
        item_references=meal_list_repository,
        barcode_references=barcode_repository,
    )
    barcodes = BarcodeRegistryService(
        repository=barcode_repository, food_repository=food_repository
    )
    off_client = FakeOpenFoodFactsClient()
    return Services(
        store=store,
        users=UserService(InMemoryUserRepository(), owner_open_id=owner_open_id),
        foods=foods,
        barcodes=barcodes,
        nutrition=NutritionLookupService(
            client=off_client, food_service=foods, barcode_service=barcodes
        ),
        meal_lists=MealListService(
            repository=meal_list_repository, food_repository=food_repository
        ),
        off_client=off_client,
    )


def add_predefined_food(  # noqa: PLR0913
    store: InMemoryStore,
    name: str,
    proteins: int,
    carbs: int,
    fats: int,
    calories: int,
) -> Food:
    """Insert a seeded, ownerless food directly into the store."""
    food = Food(
        id=store.next_id(),
        name=name,
        proteins=proteins,
        carbs=carbs,
        fats=fats,
        calories=calories,
        is_custom=False,
        user_id=None,
    )
    store.foods[food.id] = food
    return food


@pytest.fixture
def settings() -> Settings:
    return Settings(
        supabase_url="https://example.supabase.co",
        supabase_service_key=TEST_SERVICE_KEY,
        auth_callback_token="callback-token",
        owner_open_id="owner-open-id",
    )


@pytest.fixture
def services() -> Services:
    return build_services(owner_open_id="owner-open-id")


@pytest.fixture
def chicken(services: Services) -> Food:
    return add_predefined_food(services.store, "Petto di pollo", 31, 0, 4, 165)


@pytest.fixture
def container(settings: Settings, services: Services) -> AppContainer:
    async def close_resources() -> None:
        return None

    return AppContainer(
        settings=settings,
        user_service=services.users,
        food_service=services.foods,
        barcode_service=services.barcodes,
        nutrition_service=services.nutrition,
        meal_list_service=services.meal_lists,
        close_resources=close_resources,
    )
