"""API endpoint tests."""

from kitchen.models.household import HouseholdMember
from kitchen.models.shopping_list import ShoppingList


def test_health_check(client):
    """Test health check endpoint."""
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json()["status"] == "healthy"


def test_register_user(client):
    """Test user registration."""
    response = client.post(
        "/api/v1/auth/register",
        json={"email": "newuser@example.com", "password": "password123", "name": "New User"},
    )
    assert response.status_code == 201
    assert "access_token" in response.json()
    assert response.json()["household_id"] is not None


def test_register_creates_household_with_shopping_list(client, db):
    """A new user owns a fresh household that already has a shopping list."""
    response = client.post(
        "/api/v1/auth/register",
        json={"email": "newuser@example.com", "password": "password123", "name": "Ada"},
    )
    data = response.json()

    member = db.query(HouseholdMember).filter(HouseholdMember.user_id == data["user"]["id"]).one()
    assert member.household_id == data["household_id"]
    assert member.role == "owner"
    assert member.household.name == "Ada's Kitchen"
    assert member.user.memberships == [member]
    assert db.query(ShoppingList).filter(ShoppingList.household_id == data["household_id"]).count() == 1


def test_register_duplicate_email(client, auth_headers):
    """Test registration with duplicate email fails."""
    response = client.post(
        "/api/v1/auth/register",
        json={"email": "test@example.com", "password": "password123", "name": "Duplicate"},
    )
    assert response.status_code == 400
    assert "already registered" in response.json()["detail"]


def test_login(client, auth_headers):
    """Test user login."""
    response = client.post(
        "/api/v1/auth/login", json={"email": "test@example.com", "password": "testpass123"}
    )
    assert response.status_code == 200
    assert "access_token" in response.json()
    assert response.json()["household_id"] == auth_headers.household_id


def test_login_wrong_password(client, auth_headers):
    """Test login with wrong password."""
    response = client.post(
        "/api/v1/auth/login", json={"email": "test@example.com", "password": "wrongpass"}
    )
    assert response.status_code == 401


def test_login_ignores_email_case(client, auth_headers):
    """The address matches however it is capitalized."""
    response = client.post(
        "/api/v1/auth/login", json={"email": "Test@Example.com", "password": "testpass123"}
    )
    assert response.status_code == 200
    assert response.json()["user"]["email"] == "test@example.com"
    assert response.json()["household_id"] == auth_headers.household_id


def test_register_duplicate_email_in_other_case(client, auth_headers):
    """Registering the same address with different capitals is a duplicate."""
    response = client.post(
        "/api/v1/auth/register",
        json={"email": "TEST@example.com", "password": "password123", "name": "Shouty"},
    )
    assert response.status_code == 400



def test_get_current_user(client, auth_headers):
    """Test getting current user info."""
    response = client.get("/api/v1/auth/me", headers=auth_headers)
    assert response.status_code == 200
    assert response.json()["id"] == auth_headers.user_id
    assert response.json()["email"] == "test@example.com"


def test_invalid_token_rejected(client):
    """Test that a forged token is refused."""
    response = client.get("/api/v1/auth/me", headers={"Authorization": "Bearer not-a-token"})
    assert response.status_code == 401


def test_households_are_isolated(client, auth_headers):
    """One household never sees another's recipes or inventory."""
    client.post(
        "/api/v1/inventory", json={"name": "Rice", "quantity": 1, "unit": "cup"}, headers=auth_headers
    )
    recipe = client.post(
        "/api/v1/recipes", json={"title": "Secret Stew"}, headers=auth_headers
    ).json()

    other = client.post(
        "/api/v1/auth/register",
        json={"email": "other@example.com", "password": "password123", "name": "Other"},
    ).json()
    other_headers = {"Authorization": f"Bearer {other['access_token']}"}

    assert client.get("/api/v1/inventory", headers=other_headers).json() == []
    assert client.get("/api/v1/recipes", headers=other_headers).json() == []
    assert client.get(f"/api/v1/recipes/{recipe['id']}", headers=other_headers).status_code == 404
    response = client.get(
        f"/api/v1/cooking/recipes/{recipe['id']}/cookability", headers=other_headers
    )
    assert response.status_code == 404
