"""Inventory schemas."""

from datetime import date, datetime
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

Location = Literal["pantry", "fridge", "freezer"]


class InventoryItemCreate(BaseModel):
    """Create an inventory item."""

    name: str = Field(..., min_length=1, max_length=255)
    quantity: float = Field(0, ge=0)
    unit: str = Field("count", min_length=1, max_length=20)
    location: Location = "pantry"
    expires_on: date | None = None


class InventoryItemUpdate(BaseModel):
    """Update an inventory item."""

    name: str | None = Field(None, min_length=1, max_length=255)
    quantity: float | None = Field(None, ge=0)
    unit: str | None = Field(None, min_length=1, max_length=20)
    location: Location | None = None
    expires_on: date | None = None


class InventoryItemResponse(BaseModel):
    """Inventory item response."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    household_id: int
    name: str
    normalized_name: str
    quantity: float
    unit: str
    location: str
    expires_on: date | None
    created_at: datetime
    updated_at: datetime
