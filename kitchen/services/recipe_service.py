"""Recipe lookups and ingredient building shared by the API and the cook workflow."""

from collections.abc import Sequence

from fastapi import HTTPException, status
from sqlalchemy.orm import Session

from kitchen.models.recipe import Recipe, RecipeIngredient
from kitchen.schemas.recipe import RecipeIngredientCreate


def get_household_recipe(db: Session, recipe_id: int, household_id: int) -> Recipe:
    """Get a live recipe that belongs to the household, or 404."""
    recipe = (
        db.query(Recipe)
        .filter(
            Recipe.id == recipe_id,
            Recipe.household_id == household_id,
            Recipe.deleted_at.is_(None),
        )
        .first()
    )
    if not recipe:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Recipe not found")
    return recipe


def list_household_recipes(db: Session, household_id: int) -> list[Recipe]:
    """All live recipes of a household, most recently updated first."""
    return (
        db.query(Recipe)
        .filter(Recipe.household_id == household_id, Recipe.deleted_at.is_(None))
        .order_by(Recipe.updated_at.desc(), Recipe.id.desc())
        .all()
    )


def build_ingredients(
    data: Sequence[RecipeIngredientCreate], start_position: int = 0
) -> list[RecipeIngredient]:
    """Turn ingredient payloads into rows, numbering them in the given order."""
    return [
        RecipeIngredient(
            position=start_position + offset,
            name=ing.name,
            quantity=ing.quantity,
            unit=ing.unit,
            note=ing.note,
            inventory_item_label=ing.inventory_item_label,
        )
        for offset, ing in enumerate(data)
    ]
