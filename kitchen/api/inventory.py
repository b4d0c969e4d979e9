"""Inventory API endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from kitchen.api.dependencies import get_current_household
from kitchen.database import get_db
from kitchen.models.household import Household
from kitchen.models.inventory import InventoryItem
from kitchen.schemas.inventory import (
    InventoryItemCreate,
    InventoryItemResponse,
    InventoryItemUpdate,
)
from kitchen.services.inventory_service import load_inventory
from kitchen.services.normalize import normalize_label

router = APIRouter(prefix="/api/v1/inventory", tags=["inventory"])


def get_household_inventory_item(db: Session, item_id: int, household: Household) -> InventoryItem:
    """Get an inventory item that belongs to the household."""
    item = (
        db.query(InventoryItem)
        .filter(
            InventoryItem.id == item_id,
            InventoryItem.household_id == household.id,
        )
        .first()
    )
    if not item:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Inventory item not found")
    return item


@router.get("", response_model=list[InventoryItemResponse])
def list_inventory_items(
    household: Annotated[Household, Depends(get_current_household)],
    db: Annotated[Session, Depends(get_db)],
):
    """List all inventory items for the current household."""
    return load_inventory(db, household.id)


@router.post("", response_model=InventoryItemResponse, status_code=status.HTTP_201_CREATED)
def create_inventory_item(
    item_data: InventoryItemCreate,
    household: Annotated[Household, Depends(get_current_household)],
    db: Annotated[Session, Depends(get_db)],
):
    """Stock a new inventory item."""
    normalized = normalize_label(item_data.name)
    if not normalized:
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail="Name must contain at least one letter or digit",
        )

    item = InventoryItem(
        household_id=household.id,
        name=item_data.name.strip(),
        normalized_name=normalized,
        quantity=item_data.quantity,
        unit=item_data.unit,
        location=item_data.location,
        expires_on=item_data.expires_on,
    )
    db.add(item)
    db.commit()
    db.refresh(item)
    return item


@router.get("/{item_id}", response_model=InventoryItemResponse)
def get_inventory_item(
    item_id: int,
    household: Annotated[Household, Depends(get_current_household)],
    db: Annotated[Session, Depends(get_db)],
):
    """Get a specific inventory item."""
    return get_household_inventory_item(db, item_id, household)


@router.put("/{item_id}", response_model=InventoryItemResponse)
def update_inventory_item(
    item_id: int,
    item_data: InventoryItemUpdate,
    household: Annotated[Household, Depends(get_current_household)],
    db: Annotated[Session, Depends(get_db)],
):
    """Update an inventory item."""
    item = get_household_inventory_item(db, item_id, household)

    if item_data.name is not None:
        normalized = normalize_label(item_data.name)
        if not normalized:
            raise HTTPException(
                status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
                detail="Name must contain at least one letter or digit",
            )
        item.name = item_data.name.strip()
        item.normalized_name = normalized
    if item_data.quantity is not None:
        item.quantity = item_data.quantity
    if item_data.unit is not None:
        item.unit = item_data.unit
    if item_data.location is not None:
        item.location = item_data.location
    if item_data.expires_on is not None:
        item.expires_on = item_data.expires_on

    db.commit()
    db.refresh(item)
    return item


@router.delete("/{item_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_inventory_item(
    item_id: int,
    household: Annotated[Household, Depends(get_current_household)],
    db: Annotated[Session, Depends(get_db)],
):
    """Remove an inventory item."""
    item = get_household_inventory_item(db, item_id, household)
    db.delete(item)
    db.commit()
