"""Shopping list reconciliation: turning a recipe's gaps into list entries."""

import logging
from collections.abc import Sequence
from dataclasses import dataclass

from fastapi import HTTPException, status
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from kitchen.database import UnitOfWork
from kitchen.models.enums import ShoppingListItemSource
from kitchen.models.recipe import Recipe
from kitchen.models.shopping_list import ShoppingList, ShoppingListItem
from kitchen.services.cookability import (
    PantrySnapshotItem,
    comparison_label,
    evaluate_cookability,
    is_optional,
)
from kitchen.services.household_service import lock_household
from kitchen.services.inventory_service import load_pantry_snapshot
from kitchen.services.normalize import normalize_label
from kitchen.services.realtime import ShoppingListEventType, publish_shopping_list_event
from kitchen.services.recipe_service import get_household_recipe

logger = logging.getLogger(__name__)


@dataclass
class StagedShoppingItem:
    """A shopping list row waiting to be inserted."""

    name: str
    quantity: float | None
    unit: str | None
    recipe_id: int | None
    source: str = ShoppingListItemSource.FROM_RECIPE.value

    def to_model(self, shopping_list_id: int) -> ShoppingListItem:
        return ShoppingListItem(
            shopping_list_id=shopping_list_id,
            name=self.name,
            quantity=self.quantity,
            unit=self.unit,
            source=self.source,
            recipe_id=self.recipe_id,
            checked=False,
        )


def reconcile_missing(
    recipe: Recipe,
    pantry: Sequence[PantrySnapshotItem],
    existing_items: Sequence[ShoppingListItem],
) -> list[StagedShoppingItem]:
    """Stage a list entry for each missing ingredient not already on the list.

    Only unchecked entries count as "already on the list"; a checked entry is
    a past purchase and does not stop the ingredient being added again.
    Quantity and unit come from the first required ingredient with that label.
    """
    cookability = evaluate_cookability(recipe.ingredients, pantry)

    pending = {normalize_label(item.name) for item in existing_items if not item.checked}

    first_by_key = {}
    for ingredient in recipe.ingredients:
        key = normalize_label(comparison_label(ingredient))
        if key and not is_optional(ingredient):
            first_by_key.setdefault(key, ingredient)

    staged = []
    for label in cookability.missing_labels:
        key = normalize_label(label)
        if key in pending:
            continue
        pending.add(key)
        ingredient = first_by_key[key]
        staged.append(
            StagedShoppingItem(
                name=label,
                quantity=ingredient.quantity,
                unit=ingredient.unit,
                recipe_id=recipe.id,
            )
        )
    return staged


def find_shopping_list(db: Session, household_id: int) -> ShoppingList | None:
    return db.query(ShoppingList).filter(ShoppingList.household_id == household_id).first()


def get_or_create_shopping_list(db: Session, household_id: int) -> ShoppingList:
    """Fetch the household's shopping list, creating it if it does not exist.

    Safe against a concurrent creator: the unique household constraint makes
    the loser's insert fail inside its savepoint, and it reads the winner's row.
    """
    shopping_list = find_shopping_list(db, household_id)
    if shopping_list:
        return shopping_list

    try:
        with db.begin_nested():
            shopping_list = ShoppingList(household_id=household_id)
            db.add(shopping_list)
    except IntegrityError:
        shopping_list = db.query(ShoppingList).filter(ShoppingList.household_id == household_id).one()
    return shopping_list


class ShoppingListService:
    """Service for shopping list writes driven by recipes."""

    def __init__(self, db: Session):
        self.db = db

    def add_missing_for_recipe(self, recipe_id: int, household_id: int) -> int:
        """Put the recipe's missing ingredients on the household shopping list.

        Returns the number of items actually created, which is zero when every
        missing ingredient is already waiting on the list.
        """
        recipe = get_household_recipe(self.db, recipe_id, household_id)
        pantry = load_pantry_snapshot(self.db, household_id)

        try:
            with UnitOfWork(self.db):
                lock_household(self.db, household_id)
                shopping_list = get_or_create_shopping_list(self.db, household_id)
                staged = reconcile_missing(recipe, pantry, shopping_list.items)
                for item in staged:
                    self.db.add(item.to_model(shopping_list.id))
        except SQLAlchemyError as e:
            logger.error(f"Adding missing ingredients for recipe {recipe_id} failed: {e}")
            raise HTTPException(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                detail="Failed to add missing ingredients",
            ) from e

        logger.info(
            f"Recipe {recipe_id}: added {len(staged)} missing ingredient(s) "
            f"to shopping list {shopping_list.id}"
        )
        if staged:
            publish_shopping_list_event(
                shopping_list.id,
                ShoppingListEventType.ITEMS_ADDED,
                {"recipe_id": recipe_id, "count": len(staged)},
            )
        return len(staged)
