"""Ordering and filtering of a recipe collection for the discovery views."""

from collections.abc import Sequence
from dataclasses import dataclass
from enum import StrEnum

from kitchen.models.recipe import Recipe
from kitchen.services.cookability import (
    CookabilityBucket,
    CookabilityResult,
    PantrySnapshotItem,
    evaluate_cookability,
)

# Recipes without a declared time sort after every timed recipe
MISSING_TIME_SENTINEL = 10_000

BUCKET_RANK = {
    CookabilityBucket.COOK_NOW: 0,
    CookabilityBucket.ALMOST: 1,
    CookabilityBucket.MISSING: 2,
}


class SortMode(StrEnum):
    """Sort orders offered by the discovery views."""

    BEST_MATCH = "best-match"
    RECENT = "recent"  # historical name of best-match
    TITLE_ASC = "title-asc"
    TIME_ASC = "time-asc"


@dataclass
class RankedRecipe:
    """A recipe with the cookability it was ranked by."""

    recipe: Recipe
    cookability: CookabilityResult

    @property
    def bucket(self) -> CookabilityBucket:
        return self.cookability.bucket


@dataclass
class BucketCounts:
    cook_now: int = 0
    almost: int = 0
    missing: int = 0


def _total_time(recipe: Recipe) -> int:
    if recipe.total_time_minutes is None:
        return MISSING_TIME_SENTINEL
    return recipe.total_time_minutes


def _title_key(recipe: Recipe) -> tuple[str, str, int]:
    title = recipe.title or ""
    return (title.casefold(), title, recipe.id or 0)


def _matches_query(recipe: Recipe, query: str) -> bool:
    haystack = " ".join(
        [recipe.title or "", recipe.description or "", " ".join(recipe.tags or [])]
    ).lower()
    return query in haystack


def _parse_sort_mode(value: str | None) -> SortMode:
    """Unknown or absent modes fall back to best-match."""
    try:
        return SortMode(value)
    except ValueError:
        return SortMode.BEST_MATCH


def _parse_cookability_filter(value: str | None) -> CookabilityBucket | None:
    """None means no filter: absent, "all" or unknown values."""
    try:
        return CookabilityBucket(value)
    except ValueError:
        return None


def _sort_key(ranked: RankedRecipe, sort_mode: SortMode) -> tuple:
    recipe = ranked.recipe
    if sort_mode == SortMode.TITLE_ASC:
        return _title_key(recipe)
    if sort_mode == SortMode.TIME_ASC:
        return (_total_time(recipe), *_title_key(recipe))
    return (
        BUCKET_RANK[ranked.bucket],
        ranked.cookability.missing_count,
        _total_time(recipe),
        *_title_key(recipe),
    )


def rank_recipes(
    recipes: Sequence[Recipe],
    pantry: Sequence[PantrySnapshotItem],
    query: str | None = None,
    tag: str | None = None,
    cookability_filter: str | None = None,
    sort_mode: str | None = None,
) -> list[RankedRecipe]:
    """Filter and order recipes by text, tag, cookability and sort mode.

    Filters apply in order: free-text substring over title, description and
    tags; exact tag membership; cookability bucket (``"all"``, ``None`` or an
    unknown bucket disables it). Every sort mode ends in title then id, so the
    same input always produces the same order.
    """
    mode = _parse_sort_mode(sort_mode)

    candidates = list(recipes)

    needle = (query or "").strip().lower()
    if needle:
        candidates = [r for r in candidates if _matches_query(r, needle)]

    if tag and tag != "all":
        candidates = [r for r in candidates if tag in (r.tags or [])]

    ranked = [
        RankedRecipe(recipe=r, cookability=evaluate_cookability(r.ingredients, pantry))
        for r in candidates
    ]

    wanted = _parse_cookability_filter(cookability_filter)
    if wanted:
        ranked = [r for r in ranked if r.bucket == wanted]

    return sorted(ranked, key=lambda r: _sort_key(r, mode))


def summarize_buckets(
    recipes: Sequence[Recipe],
    pantry: Sequence[PantrySnapshotItem],
) -> BucketCounts:
    """Count recipes per bucket over the whole library, ignoring any filters."""
    counts = BucketCounts()
    for recipe in recipes:
        bucket = evaluate_cookability(recipe.ingredients, pantry).bucket
        if bucket == CookabilityBucket.COOK_NOW:
            counts.cook_now += 1
        elif bucket == CookabilityBucket.ALMOST:
            counts.almost += 1
        else:
            counts.missing += 1
    return counts


def collect_tags(recipes: Sequence[Recipe]) -> list[str]:
    """All distinct tags across the recipes, sorted."""
    return sorted({tag for recipe in recipes for tag in (recipe.tags or [])})
