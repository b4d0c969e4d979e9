"""Cookability matching of recipe ingredients against a pantry snapshot.

Everything here is pure: it reads the objects it is given and never touches
the database, so the discovery views and the cook planner agree on what is
available.
"""

import re
from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field
from enum import StrEnum

from kitchen.models.inventory import InventoryItem
from kitchen.models.recipe import RecipeIngredient
from kitchen.services.normalize import normalize_label

OPTIONAL_NOTE = re.compile(r"optional|to taste", re.IGNORECASE)

# Missing counts up to this are "almost"; anything above is "missing"
ALMOST_MAX_MISSING = 3


class CookabilityBucket(StrEnum):
    """Coarse classification of how close a recipe is to makeable."""

    COOK_NOW = "cook-now"
    ALMOST = "almost"
    MISSING = "missing"


BUCKET_TITLES = {
    CookabilityBucket.COOK_NOW: "Cook now",
    CookabilityBucket.ALMOST: "Almost",
    CookabilityBucket.MISSING: "Missing too much",
}


@dataclass(frozen=True)
class PantrySnapshotItem:
    """Point-in-time read of one inventory row."""

    id: int
    name: str
    quantity: float | None = None
    unit: str | None = None
    normalized_name: str | None = None

    @property
    def key(self) -> str:
        # Stored rows carry their key; hand-built snapshots derive it
        return self.normalized_name or normalize_label(self.name)


@dataclass
class CookabilityResult:
    """Derived, never persisted."""

    missing_count: int = 0
    missing_labels: list[str] = field(default_factory=list)
    available_count: int = 0

    @property
    def bucket(self) -> CookabilityBucket:
        return bucket_for_missing_count(self.missing_count)


def snapshot_from_inventory(rows: Iterable[InventoryItem]) -> list[PantrySnapshotItem]:
    """Capture an immutable snapshot of inventory rows."""
    return [
        PantrySnapshotItem(
            id=row.id,
            name=row.name,
            quantity=row.quantity,
            unit=row.unit,
            normalized_name=row.normalized_name,
        )
        for row in rows
    ]


def comparison_label(ingredient: RecipeIngredient) -> str:
    """Label used for matching: the explicit inventory mapping, else the name."""
    return ingredient.inventory_item_label or ingredient.name or ""


def is_optional(ingredient: RecipeIngredient) -> bool:
    """Optional and to-taste ingredients never block cooking."""
    return bool(ingredient.note and OPTIONAL_NOTE.search(ingredient.note))


def bucket_for_missing_count(missing_count: int) -> CookabilityBucket:
    """Map a missing-ingredient count to its bucket."""
    if missing_count == 0:
        return CookabilityBucket.COOK_NOW
    if missing_count <= ALMOST_MAX_MISSING:
        return CookabilityBucket.ALMOST
    return CookabilityBucket.MISSING


def bucket_title(bucket: CookabilityBucket) -> str:
    """Human-readable title of a bucket."""
    return BUCKET_TITLES[CookabilityBucket(bucket)]


def dedupe_labels(labels: Iterable[str]) -> list[str]:
    """Drop labels whose normalized form was already seen, keeping order."""
    seen: set[str] = set()
    result = []
    for label in labels:
        key = normalize_label(label)
        if key in seen:
            continue
        seen.add(key)
        result.append(label)
    return result


def evaluate_cookability(
    ingredients: Sequence[RecipeIngredient],
    pantry: Sequence[PantrySnapshotItem],
) -> CookabilityResult:
    """Classify each ingredient as available or missing against the pantry.

    Presence decides availability here, not quantity: several pantry rows
    with the same normalized name count as one. Ingredients whose label
    normalizes to nothing are ignored entirely. Missing labels keep the
    ingredient's original spelling and are reported once per normalized key.
    """
    pantry_keys = {item.key for item in pantry}

    missing: list[str] = []
    available_count = 0

    for ingredient in ingredients:
        label = comparison_label(ingredient)
        key = normalize_label(label)
        if not key:
            continue

        if is_optional(ingredient):
            available_count += 1
            continue

        if key in pantry_keys:
            available_count += 1
        else:
            missing.append(label)

    missing_labels = dedupe_labels(missing)
    return CookabilityResult(
        missing_count=len(missing_labels),
        missing_labels=missing_labels,
        available_count=available_count,
    )
