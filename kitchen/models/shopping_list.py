"""Shopping list models."""

from sqlalchemy import Boolean, Column, DateTime, Float, ForeignKey, Integer, String
from sqlalchemy.orm import relationship

from kitchen.database import Base
from kitchen.models.enums import ShoppingListItemSource
from kitchen.models.mixins import TimestampMixin


class ShoppingList(Base, TimestampMixin):
    """The single shared shopping list of a household."""

    __tablename__ = "shopping_lists"

    id = Column(Integer, primary_key=True, index=True)
    # Unique so concurrent get-or-create calls converge on one list
    household_id = Column(
        Integer, ForeignKey("households.id"), nullable=False, unique=True, index=True
    )

    # Relationships
    household = relationship("Household", back_populates="shopping_list")
    items = relationship(
        "ShoppingListItem", back_populates="shopping_list", cascade="all, delete-orphan"
    )


class ShoppingListItem(Base, TimestampMixin):
    """Something the household needs to buy."""

    __tablename__ = "shopping_list_items"

    id = Column(Integer, primary_key=True, index=True)
    shopping_list_id = Column(
        Integer, ForeignKey("shopping_lists.id"), nullable=False, index=True
    )
    name = Column(String(255), nullable=False)
    quantity = Column(Float, nullable=True)
    unit = Column(String(20), nullable=True)
    category = Column(String(50), nullable=True)  # "Produce", "Dairy", ...
    checked = Column(Boolean, nullable=False, default=False, index=True)
    checked_at = Column(DateTime(timezone=True), nullable=True)
    note = Column(String(500), nullable=True)
    source = Column(String(20), nullable=False, default=ShoppingListItemSource.MANUAL.value)
    recipe_id = Column(Integer, ForeignKey("recipes.id"), nullable=True, index=True)

    # Relationships
    shopping_list = relationship("ShoppingList", back_populates="items")
    recipe = relationship("Recipe")
