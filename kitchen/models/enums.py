"""Enums for model fields."""

from enum import Enum


class HouseholdRole(str, Enum):
    """Membership roles within a household."""

    OWNER = "owner"
    MEMBER = "member"


class KitchenLocation(str, Enum):
    """Where an inventory item is stored."""

    PANTRY = "pantry"
    FRIDGE = "fridge"
    FREEZER = "freezer"


class ShoppingListItemSource(str, Enum):
    """How a shopping list item came to be on the list."""

    MANUAL = "manual"
    FROM_RECIPE = "from-recipe"
    LOW_STOCK = "low-stock"
