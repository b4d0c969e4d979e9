"""The "cook a recipe" workflow: deduct what is used, list what is missing."""

import logging
from collections.abc import Sequence
from dataclasses import dataclass, field
from datetime import UTC, datetime

from fastapi import HTTPException, status
from sqlalchemy import update
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from kitchen.database import UnitOfWork
from kitchen.models.inventory import InventoryItem
from kitchen.models.recipe import Recipe, RecipeIngredient
from kitchen.services.cookability import PantrySnapshotItem, comparison_label, is_optional
from kitchen.services.household_service import lock_household
from kitchen.services.inventory_service import load_pantry_snapshot
from kitchen.services.normalize import normalize_label
from kitchen.services.realtime import ShoppingListEventType, publish_shopping_list_event
from kitchen.services.recipe_service import get_household_recipe
from kitchen.services.shopping_list_service import StagedShoppingItem, get_or_create_shopping_list

logger = logging.getLogger(__name__)


class InventoryConflictError(Exception):
    """A planned deduction no longer fits the inventory row it targets."""

    def __init__(self, decrement: "PlannedDecrement"):
        self.decrement = decrement
        super().__init__(
            f"Inventory item {decrement.inventory_item_id} can no longer supply "
            f"{decrement.amount} {decrement.unit}"
        )


@dataclass(frozen=True)
class PlannedDecrement:
    inventory_item_id: int
    amount: float
    unit: str
    new_quantity: float  # expected quantity after this decrement, per the snapshot


@dataclass(frozen=True)
class MissingIngredient:
    name: str
    quantity: float | None = None
    unit: str | None = None


@dataclass
class CookPlan:
    """What a cook will change, computed from a snapshot before anything is written."""

    decrements: list[PlannedDecrement] = field(default_factory=list)
    missing: list[MissingIngredient] = field(default_factory=list)


@dataclass
class CookResult:
    inventory_updated: int
    missing_added: int


def plan_cook(
    ingredients: Sequence[RecipeIngredient],
    pantry: Sequence[PantrySnapshotItem],
) -> CookPlan:
    """Decide which inventory rows to draw down and which ingredients are missing.

    Matching is the same as cookability: the comparison label, normalized,
    against pantry names; optional and empty-label ingredients are ignored.
    A matched ingredient is deducted only when both sides carry the same unit
    and the row still holds enough; otherwise it is missing. There is no unit
    conversion and no partial deduction. A matched ingredient with no
    quantity or unit is used without deducting anything.
    """
    rows_by_key: dict[str, PantrySnapshotItem] = {}
    for item in pantry:
        rows_by_key.setdefault(item.key, item)

    # Rows can feed several ingredients; track what is left after each one
    remaining = {item.id: item.quantity or 0 for item in rows_by_key.values()}

    plan = CookPlan()
    for ingredient in ingredients:
        label = comparison_label(ingredient)
        key = normalize_label(label)
        if not key or is_optional(ingredient):
            continue

        row = rows_by_key.get(key)
        if row is None:
            plan.missing.append(MissingIngredient(label, ingredient.quantity, ingredient.unit))
            continue

        if not ingredient.quantity or not ingredient.unit:
            continue

        if row.unit == ingredient.unit and remaining[row.id] >= ingredient.quantity:
            remaining[row.id] -= ingredient.quantity
            plan.decrements.append(
                PlannedDecrement(
                    inventory_item_id=row.id,
                    amount=ingredient.quantity,
                    unit=ingredient.unit,
                    new_quantity=remaining[row.id],
                )
            )
        else:
            plan.missing.append(MissingIngredient(label, ingredient.quantity, ingredient.unit))

    return plan


class CookingService:
    """Service for cooking recipes against the household inventory."""

    def __init__(self, db: Session):
        self.db = db

    def cook(self, recipe_id: int, household_id: int, add_missing_to_list: bool) -> CookResult:
        """Cook a recipe: plan from a fresh snapshot, then apply the plan atomically."""
        recipe = get_household_recipe(self.db, recipe_id, household_id)
        pantry = load_pantry_snapshot(self.db, household_id)
        plan = plan_cook(recipe.ingredients, pantry)
        return self.apply_plan(recipe, household_id, plan, add_missing_to_list)

    def apply_plan(
        self,
        recipe: Recipe,
        household_id: int,
        plan: CookPlan,
        add_missing_to_list: bool,
    ) -> CookResult:
        """Apply a cook plan as one unit of work.

        Deducts inventory, optionally adds every missing ingredient to the
        shopping list (no dedupe against existing entries) and stamps the
        recipe's ``last_cooked_at``. Either all of it is committed or none:
        a decrement that no longer fits its row fails the whole cook with 409,
        a store error fails it with 500.
        """
        recipe_id = recipe.id
        shopping_list_id = None
        missing_added = 0

        try:
            with UnitOfWork(self.db):
                lock_household(self.db, household_id)

                for decrement in plan.decrements:
                    self._apply_decrement(household_id, decrement)

                if add_missing_to_list and plan.missing:
                    shopping_list = get_or_create_shopping_list(self.db, household_id)
                    shopping_list_id = shopping_list.id
                    for missing in plan.missing:
                        staged = StagedShoppingItem(
                            name=missing.name,
                            quantity=missing.quantity,
                            unit=missing.unit,
                            recipe_id=recipe_id,
                        )
                        self.db.add(staged.to_model(shopping_list_id))
                    missing_added = len(plan.missing)

                recipe.last_cooked_at = datetime.now(UTC)
                self.db.flush()
        except InventoryConflictError as e:
            logger.warning(f"Cooking recipe {recipe_id} aborted: {e}")
            raise HTTPException(
                status_code=status.HTTP_409_CONFLICT,
                detail="Inventory changed while cooking; refresh and try again",
            ) from e
        except SQLAlchemyError as e:
            logger.error(f"Cooking recipe {recipe_id} failed: {e}")
            raise HTTPException(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                detail="Failed to cook recipe",
            ) from e

        logger.info(
            f"Cooked recipe {recipe_id}: {len(plan.decrements)} inventory update(s), "
            f"{missing_added} missing item(s) added"
        )
        if shopping_list_id is not None and missing_added:
            publish_shopping_list_event(
                shopping_list_id,
                ShoppingListEventType.ITEMS_ADDED,
                {"recipe_id": recipe_id, "count": missing_added},
            )
        return CookResult(inventory_updated=len(plan.decrements), missing_added=missing_added)

    def _apply_decrement(self, household_id: int, decrement: PlannedDecrement) -> None:
        """Deduct from one row, re-checking unit and stock in the same statement."""
        result = self.db.execute(
            update(InventoryItem)
            .where(
                InventoryItem.id == decrement.inventory_item_id,
                InventoryItem.household_id == household_id,
                InventoryItem.unit == decrement.unit,
                InventoryItem.quantity >= decrement.amount,
            )
            .values(quantity=InventoryItem.quantity - decrement.amount)
            .execution_options(synchronize_session=False)
        )
        if result.rowcount != 1:
            raise InventoryConflictError(decrement)
