"""Cooking API endpoints: what can I cook, cookability, add missing, cook."""

from typing import Annotated

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from kitchen.api.dependencies import (
    get_cooking_service,
    get_current_household,
    get_shopping_list_service,
)
from kitchen.api.recipes import to_list_response
from kitchen.database import get_db
from kitchen.models.household import Household
from kitchen.schemas.cooking import (
    AddMissingRequest,
    AddMissingResponse,
    BucketCountsResponse,
    CookabilityFilter,
    CookabilityResponse,
    CookRecipeRequest,
    CookRecipeResponse,
    CookSort,
    PantrySnapshotItemResponse,
    RankedRecipeResponse,
    WhatCanICookResponse,
)
from kitchen.services.cookability import CookabilityResult, bucket_title, evaluate_cookability
from kitchen.services.cooking_service import CookingService
from kitchen.services.inventory_service import load_pantry_snapshot
from kitchen.services.ranking import collect_tags, rank_recipes, summarize_buckets
from kitchen.services.recipe_service import get_household_recipe, list_household_recipes
from kitchen.services.shopping_list_service import ShoppingListService

router = APIRouter(prefix="/api/v1/cooking", tags=["cooking"])


def to_cookability_response(recipe_id: int, result: CookabilityResult) -> CookabilityResponse:
    return CookabilityResponse(
        recipe_id=recipe_id,
        missing_count=result.missing_count,
        missing_labels=result.missing_labels,
        available_count=result.available_count,
        bucket=result.bucket,
        bucket_title=bucket_title(result.bucket),
    )


@router.get("/what-can-i-cook", response_model=WhatCanICookResponse)
def what_can_i_cook(
    household: Annotated[Household, Depends(get_current_household)],
    db: Annotated[Session, Depends(get_db)],
    q: Annotated[str | None, Query(max_length=200)] = None,
    tag: str | None = None,
    cookability: CookabilityFilter = "all",
    sort: CookSort = "best-match",
):
    """Rank the household's recipes by how cookable they are right now.

    Bucket counts always describe the whole library, not the filtered view.
    """
    recipes = list_household_recipes(db, household.id)
    pantry = load_pantry_snapshot(db, household.id)

    ranked = rank_recipes(
        recipes,
        pantry,
        query=q,
        tag=tag,
        cookability_filter=cookability,
        sort_mode=sort,
    )
    counts = summarize_buckets(recipes, pantry)

    return WhatCanICookResponse(
        recipes=[
            RankedRecipeResponse(
                recipe=to_list_response(r.recipe),
                cookability=to_cookability_response(r.recipe.id, r.cookability),
            )
            for r in ranked
        ],
        counts=BucketCountsResponse(
            cook_now=counts.cook_now, almost=counts.almost, missing=counts.missing
        ),
        suggested_tags=collect_tags(recipes),
        pantry_snapshot=[
            PantrySnapshotItemResponse(id=p.id, name=p.name, quantity=p.quantity, unit=p.unit)
            for p in pantry
        ],
    )


@router.get("/recipes/{recipe_id}/cookability", response_model=CookabilityResponse)
def get_recipe_cookability(
    recipe_id: int,
    household: Annotated[Household, Depends(get_current_household)],
    db: Annotated[Session, Depends(get_db)],
):
    """Which of the recipe's ingredients the pantry has and which are missing."""
    recipe = get_household_recipe(db, recipe_id, household.id)
    pantry = load_pantry_snapshot(db, household.id)
    return to_cookability_response(recipe.id, evaluate_cookability(recipe.ingredients, pantry))


@router.post("/add-missing-to-shopping-list", response_model=AddMissingResponse)
def add_missing_to_shopping_list(
    request: AddMissingRequest,
    household: Annotated[Household, Depends(get_current_household)],
    service: Annotated[ShoppingListService, Depends(get_shopping_list_service)],
):
    """Add the recipe's missing ingredients that are not already on the list."""
    added = service.add_missing_for_recipe(request.recipe_id, household.id)
    return AddMissingResponse(added=added)


@router.post("/cook-recipe", response_model=CookRecipeResponse)
def cook_recipe(
    request: CookRecipeRequest,
    household: Annotated[Household, Depends(get_current_household)],
    service: Annotated[CookingService, Depends(get_cooking_service)],
):
    """Cook a recipe: deduct inventory, optionally list what is missing."""
    result = service.cook(request.recipe_id, household.id, request.add_missing_to_list)
    return CookRecipeResponse(
        inventory_updated=result.inventory_updated, missing_added=result.missing_added
    )
