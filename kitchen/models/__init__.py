"""SQLAlchemy models."""

from kitchen.models.household import Household, HouseholdMember
from kitchen.models.inventory import InventoryItem
from kitchen.models.recipe import Recipe, RecipeIngredient
from kitchen.models.shopping_list import ShoppingList, ShoppingListItem
from kitchen.models.user import User

__all__ = [
    "User",
    "Household",
    "HouseholdMember",
    "InventoryItem",
    "Recipe",
    "RecipeIngredient",
    "ShoppingList",
    "ShoppingListItem",
]
