"""Household and membership models."""

from sqlalchemy import Column, ForeignKey, Integer, String, UniqueConstraint
from sqlalchemy.orm import relationship

from kitchen.database import Base
from kitchen.models.enums import HouseholdRole
from kitchen.models.mixins import TimestampMixin


class Household(Base, TimestampMixin):
    """A kitchen shared by one or more users."""

    __tablename__ = "households"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(255), nullable=False)

    # Relationships
    members = relationship(
        "HouseholdMember", back_populates="household", cascade="all, delete-orphan"
    )
    shopping_list = relationship(
        "ShoppingList", back_populates="household", uselist=False, cascade="all, delete-orphan"
    )


class HouseholdMember(Base, TimestampMixin):
    """Membership of a user in a household."""

    __tablename__ = "household_members"
    __table_args__ = (
        UniqueConstraint("household_id", "user_id", name="uq_household_member"),
    )

    id = Column(Integer, primary_key=True, index=True)
    household_id = Column(Integer, ForeignKey("households.id"), nullable=False, index=True)
    user_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)
    role = Column(String(20), nullable=False, default=HouseholdRole.MEMBER.value)

    # Relationships
    household = relationship("Household", back_populates="members")
    user = relationship("User", back_populates="memberships")
