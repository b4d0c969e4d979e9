"""Pydantic schemas for API requests and responses."""

from kitchen.schemas.auth import AuthResponse, Token, UserLogin, UserRegister, UserResponse
from kitchen.schemas.inventory import InventoryItemCreate, InventoryItemResponse, InventoryItemUpdate
from kitchen.schemas.recipe import RecipeCreate, RecipeResponse, RecipeUpdate
from kitchen.schemas.shopping_list import (
    ShoppingListItemCreate,
    ShoppingListItemResponse,
    ShoppingListItemUpdate,
)

__all__ = [
    "UserRegister",
    "UserLogin",
    "Token",
    "AuthResponse",
    "UserResponse",
    "InventoryItemCreate",
    "InventoryItemUpdate",
    "InventoryItemResponse",
    "RecipeCreate",
    "RecipeUpdate",
    "RecipeResponse",
    "ShoppingListItemCreate",
    "ShoppingListItemUpdate",
    "ShoppingListItemResponse",
]
