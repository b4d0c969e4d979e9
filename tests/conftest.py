"""Pytest configuration and fixtures."""

import os
from unittest.mock import MagicMock

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker

import kitchen.services.realtime as realtime_module
from kitchen.database import Base, get_db
from kitchen.main import app
from kitchen.models.inventory import InventoryItem
from kitchen.models.recipe import Recipe
from kitchen.models.user import User
from kitchen.schemas.recipe import RecipeIngredientCreate
from kitchen.services.household_service import create_default_household
from kitchen.services.normalize import normalize_label
from kitchen.services.recipe_service import build_ingredients


class AuthHeaders(dict):
    """Dict subclass that also stores user and household ids."""

    def __init__(self, *args, user_id: int | None = None, household_id: int | None = None, **kwargs):
        super().__init__(*args, **kwargs)
        self.user_id = user_id
        self.household_id = household_id


# Use test database - PostgreSQL in Docker, SQLite locally
if os.getenv("DATABASE_URL"):
    # Running in Docker - use PostgreSQL test database
    SQLALCHEMY_DATABASE_URL = os.getenv("DATABASE_URL").replace("/kitchen", "/kitchen_test")
else:
    # Running locally - use SQLite
    SQLALCHEMY_DATABASE_URL = "sqlite:///./test.db"

connect_args = {"check_same_thread": False} if "sqlite" in SQLALCHEMY_DATABASE_URL else {}
engine = create_engine(SQLALCHEMY_DATABASE_URL, connect_args=connect_args)
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture(scope="session", autouse=True)
def setup_test_database():
    """Create test database schema once at the start of the test session."""
    if "postgresql" in SQLALCHEMY_DATABASE_URL:
        from sqlalchemy_utils import create_database, database_exists

        if not database_exists(SQLALCHEMY_DATABASE_URL):
            create_database(SQLALCHEMY_DATABASE_URL)

    Base.metadata.drop_all(bind=engine)
    Base.metadata.create_all(bind=engine)
    yield


@pytest.fixture(scope="function", autouse=True)
def db():
    """Create a fresh database session for each test with cleanup."""
    session = TestingSessionLocal()

    yield session

    # Clean up all data after test
    session.rollback()
    for table in reversed(Base.metadata.sorted_tables):
        session.execute(table.delete())
    session.commit()
    session.close()


@pytest.fixture
def other_session():
    """A second, independent session, like one held by a concurrent request."""
    session = TestingSessionLocal()
    yield session
    session.rollback()
    session.close()


@pytest.fixture(autouse=True)
def mock_redis():
    """Replace the Redis client so publishing never needs a server."""
    client = MagicMock()
    realtime_module._sync_redis = client
    yield client
    realtime_module._sync_redis = None


@pytest.fixture(scope="function")
def client(db):
    """Create a test client with database override."""

    def override_get_db():
        try:
            yield db
        finally:
            pass

    app.dependency_overrides[get_db] = override_get_db
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


@pytest.fixture
def auth_headers(client):
    """Register a user and return auth headers with user and household info."""
    response = client.post(
        "/api/v1/auth/register",
        json={"email": "test@example.com", "password": "testpass123", "name": "Test User"},
    )
    assert response.status_code == 201
    data = response.json()
    token = data["access_token"]

    return AuthHeaders(
        {"Authorization": f"Bearer {token}"},
        user_id=data["user"]["id"],
        household_id=data["household_id"],
    )


@pytest.fixture
def household(db):
    """A household created directly in the database, for service-level tests."""
    user = User(email="cook@example.com", password_hash="not-a-real-hash", name="Cook")
    db.add(user)
    db.commit()
    return create_default_household(db, user)


@pytest.fixture
def stock(db, household):
    """Add an inventory row to the household."""

    def _stock(name: str, quantity: float, unit: str = "count") -> InventoryItem:
        item = InventoryItem(
            household_id=household.id,
            name=name,
            normalized_name=normalize_label(name),
            quantity=quantity,
            unit=unit,
        )
        db.add(item)
        db.commit()
        return item

    return _stock


@pytest.fixture
def make_recipe(db, household):
    """Create a recipe in the household from ingredient dicts."""

    def _make_recipe(title: str, ingredients: list[dict], **fields) -> Recipe:
        fields.setdefault("tags", [])
        recipe = Recipe(household_id=household.id, title=title, **fields)
        recipe.ingredients.extend(
            build_ingredients([RecipeIngredientCreate(**ing) for ing in ingredients])
        )
        db.add(recipe)
        db.commit()
        return recipe

    return _make_recipe
