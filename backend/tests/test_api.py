import pytest

from menucost.config import settings
from menucost.storage.repositories import create_inventory_item


@pytest.fixture(name="stocked")
def stocked_fixture(session):
    milk = create_inventory_item(session, "Whole Milk", "gallon", 1, 3.84)
    beans = create_inventory_item(session, "Espresso Beans", "lb", 3, 45.00)
    return {"milk": milk.id, "beans": beans.id}


def test_health(client):
    response = client.get("/api/health")
    assert response.status_code == 200
    assert response.json()["status"] == "ok"


def test_units_endpoint(client):
    response = client.get("/api/units")
    assert response.status_code == 200
    units = {u["unit"]: u for u in response.json()["purchase_units"]}
    assert len(units) == 8
    assert units["gallon"]["compatible_units"] == ["oz", "ml"]
    assert units["lb"]["label"] == "LB"
    assert units["pack"]["compatible_units"] == ["each"]


def test_create_inventory_item(client):
    response = client.post(
        "/api/inventory",
        json={"name": "Whole Milk", "purchase_unit": "gallon", "package_size": 1, "package_price": 3.84},
    )
    assert response.status_code == 201
    data = response.json()
    assert data["unit_price"] == pytest.approx(3.84)
    assert data["purchase_unit_label"] == "Gallon"
    assert data["compatible_units"] == ["oz", "ml"]

    duplicate = client.post("/api/inventory", json={"name": "Whole Milk", "purchase_unit": "gallon"})
    assert duplicate.status_code == 409


def test_create_inventory_item_validation(client):
    bad_unit = client.post("/api/inventory", json={"name": "Mystery", "purchase_unit": "barrel"})
    assert bad_unit.status_code == 422
    bad_size = client.post("/api/inventory", json={"name": "Zero", "purchase_unit": "lb", "package_size": 0})
    assert bad_size.status_code == 422


def test_list_get_delete_inventory(client, stocked):
    listing = client.get("/api/inventory").json()
    assert [i["name"] for i in listing] == ["Espresso Beans", "Whole Milk"]

    item = client.get(f"/api/inventory/{stocked['beans']}").json()
    assert item["unit_price"] == pytest.approx(15.0)

    assert client.delete(f"/api/inventory/{stocked['beans']}").status_code == 200
    assert client.get(f"/api/inventory/{stocked['beans']}").status_code == 404
    assert client.delete(f"/api/inventory/{stocked['beans']}").status_code == 404


def test_price_breakdown_endpoint(client, stocked):
    response = client.get(f"/api/inventory/{stocked['milk']}/breakdown")
    assert response.status_code == 200
    rows = response.json()
    assert [r["usage_unit"] for r in rows] == ["oz", "ml"]
    assert rows[0]["display"] == "$0.0300/oz"
    assert client.get("/api/inventory/999/breakdown").status_code == 404


def test_ingredient_cost_endpoint(client):
    response = client.post(
        "/api/costing/ingredient",
        json={"quantity": 2, "usage_unit": "oz", "purchase_price": 15.0, "purchase_unit": "lb"},
    )
    assert response.status_code == 200
    data = response.json()
    assert data["cost"] == pytest.approx(1.875)
    assert data["cost_display"] == "$1.88"
    assert data["price_per_unit"] == pytest.approx(0.9375)


def test_ingredient_cost_incompatible(client, monkeypatch):
    body = {"quantity": 2, "usage_unit": "oz", "purchase_price": 10.0, "purchase_unit": "case"}
    assert client.post("/api/costing/ingredient", json=body).status_code == 422

    monkeypatch.setattr(settings, "strict_unit_pairing", False)
    response = client.post("/api/costing/ingredient", json=body)
    assert response.status_code == 200
    assert response.json()["cost"] == pytest.approx(20.0)


def test_recipe_cost_endpoint(client, stocked):
    body = {
        "name": "Latte 12oz",
        "retail_price": 5.50,
        "ingredients": [
            {"inventory_item_id": stocked["beans"], "quantity": 0.8, "usage_unit": "oz"},
            {"inventory_item_id": stocked["milk"], "quantity": 25, "usage_unit": "oz"},
            {"inventory_item_id": 999, "quantity": 1, "usage_unit": "oz"},
        ],
        "modifiers": [
            {"name": "Large", "kind": "size", "price_adjustment": 0.75,
             "actions": [{"action": "multiply", "quantity": 1.15}]},
        ],
    }
    response = client.post("/api/recipes/cost", json=body)
    assert response.status_code == 200
    data = response.json()
    assert data["cost"] == pytest.approx(1.50)
    assert data["cost_display"] == "$1.50"
    assert data["unresolved_ids"] == ["999"]
    assert data["profitability"]["band"] == "healthy"
    assert data["profitability"]["food_cost_percent"] == pytest.approx(27.2727, abs=1e-3)
    assert [line["inventory_name"] for line in data["lines"]] == ["Espresso Beans", "Whole Milk", None]

    large = data["modifiers"][0]
    assert large["added_cost"] == pytest.approx(0.225)
    assert large["profitability"]["cost"] == pytest.approx(1.725)


def test_recipe_cost_rejects_bad_units(client, stocked):
    body = {
        "retail_price": 3.0,
        "ingredients": [{"inventory_item_id": stocked["milk"], "quantity": 10, "usage_unit": "g"}],
    }
    assert client.post("/api/recipes/cost", json=body).status_code == 422

    body["ingredients"][0]["usage_unit"] = "cup"
    assert client.post("/api/recipes/cost", json=body).status_code == 422


def test_templates_endpoint(client, stocked):
    response = client.get("/api/templates")
    assert response.status_code == 200
    categories = response.json()["categories"]
    latte = next(t for t in categories["Espresso Drinks"] if t["name"] == "Latte 12oz")
    assert latte["matched"] == 2
    assert latte["total"] == 2
    chai = next(t for t in categories["Non-Coffee"] if t["name"] == "Chai Latte 12oz")
    assert chai["matched"] == 1


def test_recipe_cost_reports_modifier_unresolved_ids(client, stocked):
    body = {
        "retail_price": 5.50,
        "ingredients": [{"inventory_item_id": stocked["milk"], "quantity": 10, "usage_unit": "oz"}],
        "modifiers": [
            {"name": "Extra Shot", "kind": "add", "price_adjustment": 1.0,
             "actions": [{"action": "add", "quantity": 1, "inventory_item_id": 4242, "usage_unit": "oz"}]},
        ],
    }
    response = client.post("/api/recipes/cost", json=body)
    assert response.status_code == 200
    data = response.json()
    assert data["unresolved_ids"] == []
    assert data["modifiers"][0]["added_cost"] == 0.0
    assert data["modifiers"][0]["unresolved_ids"] == ["4242"]


def test_recipe_cost_modifier_without_unit(client, stocked):
    body = {
        "retail_price": 5.50,
        "ingredients": [{"inventory_item_id": stocked["milk"], "quantity": 10, "usage_unit": "oz"}],
        "modifiers": [
            {"name": "More milk", "kind": "add", "price_adjustment": 0.5,
             "actions": [{"action": "add", "quantity": 2, "inventory_item_id": stocked["milk"]}]},
        ],
    }
    response = client.post("/api/recipes/cost", json=body)
    assert response.status_code == 200
    assert response.json()["modifiers"][0]["added_cost"] == pytest.approx(0.06)
