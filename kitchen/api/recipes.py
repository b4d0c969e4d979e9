"""Recipe API endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy import func
from sqlalchemy.orm import Session

from kitchen.api.dependencies import get_current_household
from kitchen.database import get_db
from kitchen.models.household import Household
from kitchen.models.recipe import Recipe, RecipeIngredient
from kitchen.schemas.recipe import (
    RecipeCreate,
    RecipeIngredientCreate,
    RecipeIngredientResponse,
    RecipeIngredientUpdate,
    RecipeListResponse,
    RecipeResponse,
    RecipeUpdate,
)
from kitchen.services.recipe_service import (
    build_ingredients,
    get_household_recipe,
    list_household_recipes,
)

router = APIRouter(prefix="/api/v1/recipes", tags=["recipes"])


def to_list_response(recipe: Recipe) -> RecipeListResponse:
    """Summarize a recipe for list views."""
    return RecipeListResponse(
        id=recipe.id,
        title=recipe.title,
        description=recipe.description,
        tags=recipe.tags or [],
        servings=recipe.servings,
        total_time_minutes=recipe.total_time_minutes,
        ingredient_count=len(recipe.ingredients),
        last_cooked_at=recipe.last_cooked_at,
        created_at=recipe.created_at,
    )


def clean_tags(tags: list[str]) -> list[str]:
    """Trim tags and drop blanks and repeats, keeping order."""
    result = []
    for tag in tags:
        tag = tag.strip()
        if tag and tag not in result:
            result.append(tag)
    return result


def get_household_ingredient(
    db: Session, ingredient_id: int, household: Household
) -> RecipeIngredient:
    """Get an ingredient that belongs to one of the household's recipes."""
    ingredient = (
        db.query(RecipeIngredient)
        .join(Recipe)
        .filter(
            RecipeIngredient.id == ingredient_id,
            Recipe.household_id == household.id,
            Recipe.deleted_at.is_(None),
        )
        .first()
    )
    if not ingredient:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Ingredient not found")
    return ingredient


# --- Static routes first (before /{recipe_id}) ---


@router.get("", response_model=list[RecipeListResponse])
async def list_recipes(
    household: Annotated[Household, Depends(get_current_household)],
    db: Annotated[Session, Depends(get_db)],
):
    """List all recipes for the current household."""
    return [to_list_response(recipe) for recipe in list_household_recipes(db, household.id)]


@router.post("", response_model=RecipeResponse, status_code=status.HTTP_201_CREATED)
async def create_recipe(
    recipe_data: RecipeCreate,
    household: Annotated[Household, Depends(get_current_household)],
    db: Annotated[Session, Depends(get_db)],
):
    """Create a new recipe with ingredients."""
    recipe = Recipe(
        household_id=household.id,
        title=recipe_data.title,
        description=recipe_data.description,
        tags=clean_tags(recipe_data.tags),
        servings=recipe_data.servings,
        total_time_minutes=recipe_data.total_time_minutes,
        instructions=recipe_data.instructions,
    )
    recipe.ingredients.extend(build_ingredients(recipe_data.ingredients))

    db.add(recipe)
    db.commit()
    db.refresh(recipe)
    return recipe


# --- Ingredient routes (before /{recipe_id}) ---


@router.put("/ingredients/{ingredient_id}", response_model=RecipeIngredientResponse)
async def update_ingredient(
    ingredient_id: int,
    ingredient_data: RecipeIngredientUpdate,
    household: Annotated[Household, Depends(get_current_household)],
    db: Annotated[Session, Depends(get_db)],
):
    """Update an ingredient."""
    ingredient = get_household_ingredient(db, ingredient_id, household)

    if ingredient_data.name is not None:
        ingredient.name = ingredient_data.name
    if ingredient_data.quantity is not None:
        ingredient.quantity = ingredient_data.quantity
    if ingredient_data.unit is not None:
        ingredient.unit = ingredient_data.unit
    if ingredient_data.note is not None:
        ingredient.note = ingredient_data.note
    if ingredient_data.inventory_item_label is not None:
        # Empty string clears the mapping
        ingredient.inventory_item_label = ingredient_data.inventory_item_label or None

    db.commit()
    db.refresh(ingredient)
    return ingredient


@router.delete("/ingredients/{ingredient_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_ingredient(
    ingredient_id: int,
    household: Annotated[Household, Depends(get_current_household)],
    db: Annotated[Session, Depends(get_db)],
):
    """Delete an ingredient from a recipe."""
    ingredient = get_household_ingredient(db, ingredient_id, household)
    db.delete(ingredient)
    db.commit()


# --- Dynamic recipe routes (must be last) ---


@router.get("/{recipe_id}", response_model=RecipeResponse)
async def get_recipe(
    recipe_id: int,
    household: Annotated[Household, Depends(get_current_household)],
    db: Annotated[Session, Depends(get_db)],
):
    """Get a specific recipe with all ingredients."""
    return get_household_recipe(db, recipe_id, household.id)


@router.put("/{recipe_id}", response_model=RecipeResponse)
async def update_recipe(
    recipe_id: int,
    recipe_data: RecipeUpdate,
    household: Annotated[Household, Depends(get_current_household)],
    db: Annotated[Session, Depends(get_db)],
):
    """Update recipe metadata (not ingredients)."""
    recipe = get_household_recipe(db, recipe_id, household.id)

    if recipe_data.title is not None:
        recipe.title = recipe_data.title
    if recipe_data.description is not None:
        recipe.description = recipe_data.description
    if recipe_data.tags is not None:
        recipe.tags = clean_tags(recipe_data.tags)
    if recipe_data.servings is not None:
        recipe.servings = recipe_data.servings
    if recipe_data.total_time_minutes is not None:
        recipe.total_time_minutes = recipe_data.total_time_minutes
    if recipe_data.instructions is not None:
        recipe.instructions = recipe_data.instructions

    db.commit()
    db.refresh(recipe)
    return recipe


@router.delete("/{recipe_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_recipe(
    recipe_id: int,
    household: Annotated[Household, Depends(get_current_household)],
    db: Annotated[Session, Depends(get_db)],
):
    """Soft delete a recipe."""
    recipe = get_household_recipe(db, recipe_id, household.id)
    recipe.soft_delete()
    db.commit()


@router.post(
    "/{recipe_id}/ingredients",
    response_model=RecipeIngredientResponse,
    status_code=status.HTTP_201_CREATED,
)
async def add_ingredient(
    recipe_id: int,
    ingredient_data: RecipeIngredientCreate,
    household: Annotated[Household, Depends(get_current_household)],
    db: Annotated[Session, Depends(get_db)],
):
    """Append an ingredient to a recipe."""
    recipe = get_household_recipe(db, recipe_id, household.id)

    next_position = (
        db.query(func.coalesce(func.max(RecipeIngredient.position) + 1, 0))
        .filter(RecipeIngredient.recipe_id == recipe.id)
        .scalar()
    )
    (ingredient,) = build_ingredients([ingredient_data], start_position=next_position)
    ingredient.recipe_id = recipe.id
    db.add(ingredient)
    db.commit()
    db.refresh(ingredient)
    return ingredient
