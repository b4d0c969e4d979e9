"""Inventory item model for what the household has on hand."""

from sqlalchemy import CheckConstraint, Column, Date, Float, ForeignKey, Integer, String
from sqlalchemy.orm import relationship

from kitchen.database import Base
from kitchen.models.enums import KitchenLocation
from kitchen.models.mixins import TimestampMixin


class InventoryItem(Base, TimestampMixin):
    """One stocked ingredient with a quantity in a single unit."""

    __tablename__ = "inventory_items"
    __table_args__ = (CheckConstraint("quantity >= 0", name="ck_inventory_quantity_non_negative"),)

    id = Column(Integer, primary_key=True, index=True)
    household_id = Column(Integer, ForeignKey("households.id"), nullable=False, index=True)
    name = Column(String(255), nullable=False)  # Display name
    normalized_name = Column(String(255), nullable=False, index=True)  # Pantry snapshot matching key
    quantity = Column(Float, nullable=False, default=0)
    unit = Column(String(20), nullable=False, default="count")  # "cup", "g", "count", ...
    location = Column(String(20), nullable=False, default=KitchenLocation.PANTRY.value)
    expires_on = Column(Date, nullable=True)

    # Relationships
    household = relationship("Household", backref="inventory_items")
