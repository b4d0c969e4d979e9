"""Recipe schemas."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

# --- Recipe Ingredient ---


class RecipeIngredientCreate(BaseModel):
    """Create a recipe ingredient."""

    name: str = Field(..., min_length=1, max_length=255)
    quantity: float | None = Field(None, gt=0)
    unit: str | None = Field(None, max_length=20)  # "cup", "g", "count", ...
    note: str | None = Field(None, max_length=500)  # "optional", "to taste"
    inventory_item_label: str | None = Field(None, max_length=255)


class RecipeIngredientUpdate(BaseModel):
    """Update a recipe ingredient."""

    name: str | None = Field(None, min_length=1, max_length=255)
    quantity: float | None = Field(None, gt=0)
    unit: str | None = Field(None, max_length=20)
    note: str | None = Field(None, max_length=500)
    inventory_item_label: str | None = Field(None, max_length=255)


class RecipeIngredientResponse(BaseModel):
    """Recipe ingredient response."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    recipe_id: int
    position: int
    name: str
    quantity: float | None
    unit: str | None
    note: str | None
    inventory_item_label: str | None


# --- Recipe ---


class RecipeCreate(BaseModel):
    """Create a new recipe."""

    title: str = Field(..., min_length=1, max_length=255)
    description: str | None = Field(None, max_length=2000)
    tags: list[str] = []
    servings: int | None = Field(None, gt=0)
    total_time_minutes: int | None = Field(None, ge=0)
    instructions: str | None = Field(None, max_length=50000)
    ingredients: list[RecipeIngredientCreate] = []


class RecipeUpdate(BaseModel):
    """Update recipe metadata (not ingredients)."""

    title: str | None = Field(None, min_length=1, max_length=255)
    description: str | None = Field(None, max_length=2000)
    tags: list[str] | None = None
    servings: int | None = Field(None, gt=0)
    total_time_minutes: int | None = Field(None, ge=0)
    instructions: str | None = Field(None, max_length=50000)


class RecipeResponse(BaseModel):
    """Recipe response with ingredients."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    household_id: int
    title: str
    description: str | None
    tags: list[str]
    servings: int | None
    total_time_minutes: int | None
    instructions: str | None
    ingredients: list[RecipeIngredientResponse]
    last_cooked_at: datetime | None
    created_at: datetime
    updated_at: datetime


class RecipeListResponse(BaseModel):
    """Recipe list item (without full ingredients)."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    title: str
    description: str | None
    tags: list[str]
    servings: int | None
    total_time_minutes: int | None
    ingredient_count: int
    last_cooked_at: datetime | None
    created_at: datetime
