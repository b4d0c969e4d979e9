"""Inventory API tests."""


def test_create_inventory_item(client, auth_headers):
    """Test stocking an inventory item."""
    response = client.post(
        "/api/v1/inventory",
        headers=auth_headers,
        json={"name": " Olive Oil! ", "quantity": 0.5, "unit": "l", "location": "pantry"},
    )
    assert response.status_code == 201
    data = response.json()
    assert data["name"] == "Olive Oil!"
    assert data["normalized_name"] == "olive oil"
    assert data["quantity"] == 0.5
    assert data["unit"] == "l"
    assert data["household_id"] == auth_headers.household_id


def test_create_inventory_item_defaults(client, auth_headers):
    """Test creating an inventory item with default quantity, unit and location."""
    response = client.post("/api/v1/inventory", headers=auth_headers, json={"name": "Salt"})
    assert response.status_code == 201
    data = response.json()
    assert data["quantity"] == 0
    assert data["unit"] == "count"
    assert data["location"] == "pantry"
    assert data["expires_on"] is None


def test_create_inventory_item_rejects_symbol_only_name(client, auth_headers):
    """A name with nothing to match on is refused."""
    response = client.post("/api/v1/inventory", headers=auth_headers, json={"name": "!!!"})
    assert response.status_code == 422


def test_create_inventory_item_rejects_negative_quantity(client, auth_headers):
    """Test that quantities cannot go below zero."""
    response = client.post(
        "/api/v1/inventory", headers=auth_headers, json={"name": "Rice", "quantity": -1}
    )
    assert response.status_code == 422


def test_create_inventory_item_rejects_unknown_location(client, auth_headers):
    """Test that only pantry, fridge and freezer are accepted."""
    response = client.post(
        "/api/v1/inventory", headers=auth_headers, json={"name": "Rice", "location": "garage"}
    )
    assert response.status_code == 422


def test_list_inventory_items(client, auth_headers):
    """Test listing inventory items in the order they were stocked."""
    for name in ["Sugar", "Flour", "Salt"]:
        client.post("/api/v1/inventory", headers=auth_headers, json={"name": name})

    response = client.get("/api/v1/inventory", headers=auth_headers)
    assert response.status_code == 200
    assert [i["name"] for i in response.json()] == ["Sugar", "Flour", "Salt"]


def test_get_inventory_item(client, auth_headers):
    """Test getting a specific inventory item."""
    item = client.post(
        "/api/v1/inventory", headers=auth_headers, json={"name": "Milk", "location": "fridge"}
    ).json()

    response = client.get(f"/api/v1/inventory/{item['id']}", headers=auth_headers)
    assert response.status_code == 200
    assert response.json()["location"] == "fridge"


def test_update_inventory_item(client, auth_headers):
    """Test updating quantity and expiry."""
    item = client.post(
        "/api/v1/inventory", headers=auth_headers, json={"name": "Milk", "quantity": 1, "unit": "l"}
    ).json()

    response = client.put(
        f"/api/v1/inventory/{item['id']}",
        headers=auth_headers,
        json={"quantity": 2, "expires_on": "2026-11-01"},
    )
    assert response.status_code == 200
    data = response.json()
    assert data["quantity"] == 2
    assert data["expires_on"] == "2026-11-01"
    assert data["name"] == "Milk"


def test_update_inventory_item_name_renormalizes(client, auth_headers):
    """Renaming an item updates its matching key."""
    item = client.post("/api/v1/inventory", headers=auth_headers, json={"name": "Garlic"}).json()

    response = client.put(
        f"/api/v1/inventory/{item['id']}", headers=auth_headers, json={"name": "Smoked  GARLIC"}
    )
    assert response.status_code == 200
    assert response.json()["normalized_name"] == "smoked garlic"


def test_delete_inventory_item(client, auth_headers):
    """Test removing an inventory item."""
    item = client.post("/api/v1/inventory", headers=auth_headers, json={"name": "Garlic"}).json()

    response = client.delete(f"/api/v1/inventory/{item['id']}", headers=auth_headers)
    assert response.status_code == 204

    response = client.get(f"/api/v1/inventory/{item['id']}", headers=auth_headers)
    assert response.status_code == 404


def test_inventory_item_not_found(client, auth_headers):
    """Test getting a nonexistent inventory item."""
    response = client.get("/api/v1/inventory/99999", headers=auth_headers)
    assert response.status_code == 404


def test_inventory_changes_cookability(client, auth_headers):
    """Stocking an ingredient moves a recipe into cook-now."""
    recipe = client.post(
        "/api/v1/recipes",
        headers=auth_headers,
        json={"title": "Toast", "ingredients": [{"name": "Bread"}]},
    ).json()
    url = f"/api/v1/cooking/recipes/{recipe['id']}/cookability"

    assert client.get(url, headers=auth_headers).json()["bucket"] == "almost"

    client.post("/api/v1/inventory", headers=auth_headers, json={"name": "bread"})
    assert client.get(url, headers=auth_headers).json()["bucket"] == "cook-now"
