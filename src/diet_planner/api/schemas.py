"""Request bodies for the HTTP API."""

from pydantic import BaseModel


class LoginCallback(BaseModel):
    """Identity forwarded by the external login provider."""

    open_id: str
    name: str | None = None
    email: str | None = None
    login_method: str | None = None


class CustomFoodCreate(BaseModel):
    """Custom food form, macros per 100g."""

    name: str
    proteins: float
    carbs: float
    fats: float
    calories: float


class BarcodeAssociate(BaseModel):
    """Barcode to food association request."""

    barcode: str
    food_id: int


class ProductSave(BaseModel):
    """Open Food Facts product confirmed by the user for import."""

    barcode: str
    name: str
    proteins: int
    carbs: int
    fats: int
    calories: int
    brand: str | None = None


class MealListCreate(BaseModel):
    """New meal list with optional targets in grams."""

    name: str
    target_proteins: int | None = None
    target_carbs: int | None = None
    target_fats: int | None = None


class MealListItemCreate(BaseModel):
    """Food and gram quantity to add to a list."""

    food_id: int
    quantity: int


class QuantityUpdate(BaseModel):
    """New gram quantity for an item."""

    quantity: int
