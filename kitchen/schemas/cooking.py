"""Cooking schemas: cookability, discovery and the cook workflow."""

from typing import Literal

from pydantic import BaseModel, Field

from kitchen.schemas.recipe import RecipeListResponse

CookabilityFilter = Literal["all", "cook-now", "almost", "missing"]
CookSort = Literal["best-match", "recent", "title-asc", "time-asc"]


class CookabilityResponse(BaseModel):
    """Cookability of one recipe against the current pantry."""

    recipe_id: int
    missing_count: int
    missing_labels: list[str]
    available_count: int
    bucket: str
    bucket_title: str


class PantrySnapshotItemResponse(BaseModel):
    id: int
    name: str
    quantity: float | None
    unit: str | None


class RankedRecipeResponse(BaseModel):
    """A recipe in the discovery list with its cookability."""

    recipe: RecipeListResponse
    cookability: CookabilityResponse


class BucketCountsResponse(BaseModel):
    cook_now: int
    almost: int
    missing: int


class WhatCanICookResponse(BaseModel):
    """Ranked recipes plus library-wide bucket counts."""

    recipes: list[RankedRecipeResponse]
    counts: BucketCountsResponse
    suggested_tags: list[str]
    pantry_snapshot: list[PantrySnapshotItemResponse]


class AddMissingRequest(BaseModel):
    """Add a recipe's missing ingredients to the shopping list."""

    recipe_id: int = Field(..., gt=0)


class AddMissingResponse(BaseModel):
    added: int


class CookRecipeRequest(BaseModel):
    """Cook a recipe."""

    recipe_id: int = Field(..., gt=0)
    add_missing_to_list: bool = True


class CookRecipeResponse(BaseModel):
    inventory_updated: int
    missing_added: int
