"""Shopping list API endpoints."""

from datetime import UTC, datetime
from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from kitchen.api.dependencies import get_current_household
from kitchen.database import get_db
from kitchen.models.household import Household
from kitchen.models.shopping_list import ShoppingList, ShoppingListItem
from kitchen.schemas.shopping_list import (
    ClearCheckedResponse,
    ShoppingListItemCreate,
    ShoppingListItemResponse,
    ShoppingListItemUpdate,
    ShoppingListResponse,
)
from kitchen.services.realtime import ShoppingListEventType, publish_shopping_list_event
from kitchen.services.recipe_service import get_household_recipe
from kitchen.services.shopping_list_service import get_or_create_shopping_list

router = APIRouter(prefix="/api/v1/shopping-list", tags=["shopping-list"])


def get_household_list(db: Session, household: Household) -> ShoppingList:
    """Get the household's shopping list, creating it on first use."""
    shopping_list = get_or_create_shopping_list(db, household.id)
    db.commit()
    return shopping_list


def get_list_item(db: Session, item_id: int, household: Household) -> ShoppingListItem:
    """Get an item on the household's shopping list."""
    item = (
        db.query(ShoppingListItem)
        .join(ShoppingList)
        .filter(
            ShoppingListItem.id == item_id,
            ShoppingList.household_id == household.id,
        )
        .first()
    )
    if not item:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND, detail="Shopping list item not found"
        )
    return item


@router.get("", response_model=ShoppingListResponse)
def get_shopping_list(
    household: Annotated[Household, Depends(get_current_household)],
    db: Annotated[Session, Depends(get_db)],
):
    """Get the shopping list: unchecked items first, newest first within each group."""
    shopping_list = get_household_list(db, household)
    items = (
        db.query(ShoppingListItem)
        .filter(ShoppingListItem.shopping_list_id == shopping_list.id)
        .order_by(
            ShoppingListItem.checked.asc(),
            ShoppingListItem.created_at.desc(),
            ShoppingListItem.id.desc(),
        )
        .all()
    )
    return ShoppingListResponse(
        id=shopping_list.id,
        household_id=household.id,
        items=[ShoppingListItemResponse.model_validate(item) for item in items],
        unchecked_count=sum(1 for item in items if not item.checked),
    )


@router.post(
    "/items", response_model=ShoppingListItemResponse, status_code=status.HTTP_201_CREATED
)
def create_shopping_list_item(
    item_data: ShoppingListItemCreate,
    household: Annotated[Household, Depends(get_current_household)],
    db: Annotated[Session, Depends(get_db)],
):
    """Add an item to the shopping list."""
    if item_data.recipe_id is not None:
        get_household_recipe(db, item_data.recipe_id, household.id)

    shopping_list = get_household_list(db, household)
    item = ShoppingListItem(
        shopping_list_id=shopping_list.id,
        name=item_data.name.strip(),
        quantity=item_data.quantity,
        unit=item_data.unit,
        category=item_data.category,
        note=item_data.note,
        source=item_data.source,
        recipe_id=item_data.recipe_id,
        checked=False,
    )
    db.add(item)
    db.commit()
    db.refresh(item)

    publish_shopping_list_event(
        shopping_list.id, ShoppingListEventType.ITEMS_ADDED, {"item_ids": [item.id]}
    )
    return item


@router.put("/items/{item_id}", response_model=ShoppingListItemResponse)
def update_shopping_list_item(
    item_id: int,
    item_data: ShoppingListItemUpdate,
    household: Annotated[Household, Depends(get_current_household)],
    db: Annotated[Session, Depends(get_db)],
):
    """Edit an item or toggle whether it has been bought."""
    item = get_list_item(db, item_id, household)

    if item_data.name is not None:
        item.name = item_data.name.strip()
    if item_data.quantity is not None:
        item.quantity = item_data.quantity
    if item_data.unit is not None:
        item.unit = item_data.unit
    if item_data.category is not None:
        item.category = item_data.category
    if item_data.note is not None:
        item.note = item_data.note
    if item_data.checked is not None and item_data.checked != item.checked:
        item.checked = item_data.checked
        item.checked_at = datetime.now(UTC) if item_data.checked else None

    db.commit()
    db.refresh(item)

    publish_shopping_list_event(
        item.shopping_list_id, ShoppingListEventType.ITEM_UPDATED, {"item_id": item.id}
    )
    return item


@router.delete("/items/{item_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_shopping_list_item(
    item_id: int,
    household: Annotated[Household, Depends(get_current_household)],
    db: Annotated[Session, Depends(get_db)],
):
    """Remove an item from the shopping list."""
    item = get_list_item(db, item_id, household)
    shopping_list_id = item.shopping_list_id
    db.delete(item)
    db.commit()

    publish_shopping_list_event(
        shopping_list_id, ShoppingListEventType.ITEM_DELETED, {"item_id": item_id}
    )


@router.post("/clear-checked", response_model=ClearCheckedResponse)
def clear_checked_items(
    household: Annotated[Household, Depends(get_current_household)],
    db: Annotated[Session, Depends(get_db)],
):
    """Delete every checked item from the shopping list."""
    shopping_list = get_household_list(db, household)
    deleted = (
        db.query(ShoppingListItem)
        .filter(
            ShoppingListItem.shopping_list_id == shopping_list.id,
            ShoppingListItem.checked.is_(True),
        )
        .delete(synchronize_session=False)
    )
    db.commit()

    if deleted:
        publish_shopping_list_event(
            shopping_list.id, ShoppingListEventType.ITEMS_CLEARED, {"count": deleted}
        )
    return ClearCheckedResponse(deleted=deleted)
