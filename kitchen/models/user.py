"""User model."""

from sqlalchemy import Column, Integer, String
from sqlalchemy.orm import relationship

from kitchen.database import Base
from kitchen.models.mixins import TimestampMixin


class User(Base, TimestampMixin):
    """A person who signs in and cooks in one or more households.

    Emails are stored lower-cased so sign-in does not depend on how the
    address was typed.
    """

    __tablename__ = "users"

    id = Column(Integer, primary_key=True, index=True)
    email = Column(String(255), unique=True, nullable=False, index=True)
    password_hash = Column(String(255), nullable=False)
    name = Column(String(255), nullable=True)

    # Relationships
    memberships = relationship(
        "HouseholdMember", back_populates="user", order_by="HouseholdMember.id"
    )
