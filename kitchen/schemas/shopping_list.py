"""Shopping list schemas."""

from datetime import datetime
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

Category = Literal["Produce", "Dairy", "Meat & Seafood", "Pantry", "Frozen", "Bakery", "Other"]
Source = Literal["manual", "from-recipe", "low-stock"]


class ShoppingListItemCreate(BaseModel):
    """Add an item to the shopping list."""

    name: str = Field(..., min_length=1, max_length=255)
    quantity: float | None = Field(None, gt=0)
    unit: str | None = Field(None, max_length=20)
    category: Category | None = None
    note: str | None = Field(None, max_length=500)
    source: Source = "manual"
    recipe_id: int | None = None


class ShoppingListItemUpdate(BaseModel):
    """Edit or toggle a shopping list item."""

    name: str | None = Field(None, min_length=1, max_length=255)
    checked: bool | None = None
    quantity: float | None = Field(None, gt=0)
    unit: str | None = Field(None, max_length=20)
    category: Category | None = None
    note: str | None = Field(None, max_length=500)


class ShoppingListItemResponse(BaseModel):
    """Shopping list item response."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    shopping_list_id: int
    name: str
    quantity: float | None
    unit: str | None
    category: str | None
    checked: bool
    checked_at: datetime | None
    note: str | None
    source: str
    recipe_id: int | None
    created_at: datetime


class ShoppingListResponse(BaseModel):
    """The household shopping list with its items."""

    id: int
    household_id: int
    items: list[ShoppingListItemResponse]
    unchecked_count: int


class ClearCheckedResponse(BaseModel):
    deleted: int
