"""FastAPI dependencies for authentication, household and services."""

from typing import Annotated

from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.orm import Session

from kitchen.database import get_db
from kitchen.models.household import Household
from kitchen.models.user import User
from kitchen.services.auth import decode_access_token
from kitchen.services.cooking_service import CookingService
from kitchen.services.household_service import get_user_household
from kitchen.services.shopping_list_service import ShoppingListService

security = HTTPBearer()


def get_current_user(
    credentials: Annotated[HTTPAuthorizationCredentials, Depends(security)],
    db: Annotated[Session, Depends(get_db)],
) -> User:
    """Get the current authenticated user from JWT token."""
    token = credentials.credentials
    payload = decode_access_token(token)

    if payload is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid authentication credentials",
            headers={"WWW-Authenticate": "Bearer"},
        )

    user_id = payload.get("sub")
    if user_id is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid authentication credentials",
            headers={"WWW-Authenticate": "Bearer"},
        )

    user = db.query(User).filter(User.id == int(user_id)).first()
    if user is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="User not found",
            headers={"WWW-Authenticate": "Bearer"},
        )

    return user


def get_current_household(
    current_user: Annotated[User, Depends(get_current_user)],
    db: Annotated[Session, Depends(get_db)],
) -> Household:
    """Get the household the current user is cooking for."""
    household = get_user_household(db, current_user)
    if household is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="No household found")
    return household


def get_cooking_service(
    db: Annotated[Session, Depends(get_db)],
) -> CookingService:
    """Get cooking service with dependencies."""
    return CookingService(db)


def get_shopping_list_service(
    db: Annotated[Session, Depends(get_db)],
) -> ShoppingListService:
    """Get shopping list service with dependencies."""
    return ShoppingListService(db)
