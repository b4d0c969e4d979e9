"""Inventory reads for cookability matching."""

from sqlalchemy.orm import Session

from kitchen.models.inventory import InventoryItem
from kitchen.services.cookability import PantrySnapshotItem, snapshot_from_inventory


def load_inventory(db: Session, household_id: int) -> list[InventoryItem]:
    """All inventory rows of a household, oldest first."""
    return (
        db.query(InventoryItem)
        .filter(InventoryItem.household_id == household_id)
        .order_by(InventoryItem.id)
        .all()
    )


def load_pantry_snapshot(db: Session, household_id: int) -> list[PantrySnapshotItem]:
    """Capture the household's pantry as it is right now."""
    return snapshot_from_inventory(load_inventory(db, household_id))
