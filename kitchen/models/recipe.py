"""Recipe and RecipeIngredient models."""

from sqlalchemy import JSON, Column, DateTime, Float, ForeignKey, Integer, String, Text
from sqlalchemy.orm import relationship

from kitchen.database import Base
from kitchen.models.mixins import SoftDeleteMixin, TimestampMixin


class Recipe(Base, TimestampMixin, SoftDeleteMixin):
    """Recipe model for storing recipe definitions."""

    __tablename__ = "recipes"

    id = Column(Integer, primary_key=True, index=True)
    household_id = Column(Integer, ForeignKey("households.id"), nullable=False, index=True)
    title = Column(String(255), nullable=False)
    description = Column(Text, nullable=True)
    tags = Column(JSON, nullable=False, default=list)  # ["dinner", "vegetarian"]
    servings = Column(Integer, nullable=True)
    total_time_minutes = Column(Integer, nullable=True)
    instructions = Column(Text, nullable=True)
    # Only written by the cook transaction
    last_cooked_at = Column(DateTime(timezone=True), nullable=True)

    # Relationships
    household = relationship("Household", backref="recipes")
    ingredients = relationship(
        "RecipeIngredient",
        back_populates="recipe",
        cascade="all, delete-orphan",
        order_by="RecipeIngredient.position",
    )


class RecipeIngredient(Base, TimestampMixin):
    """Ingredient within a recipe."""

    __tablename__ = "recipe_ingredients"

    id = Column(Integer, primary_key=True, index=True)
    recipe_id = Column(Integer, ForeignKey("recipes.id"), nullable=False, index=True)
    position = Column(Integer, nullable=False, default=0)
    name = Column(String(255), nullable=False)
    quantity = Column(Float, nullable=True)
    unit = Column(String(20), nullable=True)
    note = Column(String(500), nullable=True)  # "optional", "to taste", "finely chopped"
    # Explicit link to an inventory label, overrides name for matching
    inventory_item_label = Column(String(255), nullable=True)

    # Relationships
    recipe = relationship("Recipe", back_populates="ingredients")
