"""Household setup and lookup."""

import logging

from sqlalchemy.orm import Session

from kitchen.models.enums import HouseholdRole
from kitchen.models.household import Household, HouseholdMember
from kitchen.models.shopping_list import ShoppingList
from kitchen.models.user import User

logger = logging.getLogger(__name__)


def default_household_name(user: User) -> str:
    """Name a new user's first household after them."""
    if user.name:
        return f"{user.name}'s Kitchen"
    if user.email:
        return f"{user.email.split('@')[0]}'s Kitchen"
    return "My Kitchen"


def create_default_household(db: Session, user: User) -> Household:
    """Create a household owned by the user, with an empty shopping list."""
    household = Household(name=default_household_name(user))
    household.members.append(HouseholdMember(user_id=user.id, role=HouseholdRole.OWNER.value))
    household.shopping_list = ShoppingList()
    db.add(household)
    db.commit()
    db.refresh(household)
    logger.info(f"Created household {household.id} for user {user.id}")
    return household


def get_user_household(db: Session, user: User) -> Household | None:
    """The user's current household: their earliest membership."""
    return (
        db.query(Household)
        .join(HouseholdMember, HouseholdMember.household_id == Household.id)
        .filter(HouseholdMember.user_id == user.id)
        .order_by(HouseholdMember.id)
        .first()
    )


def lock_household(db: Session, household_id: int) -> Household:
    """Take the household's row lock for the rest of the current transaction.

    Writers of shared household state (inventory quantities, the shopping
    list) take this first so they run one at a time per household.
    """
    return db.query(Household).filter(Household.id == household_id).with_for_update().one()
