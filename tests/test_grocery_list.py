import json

import pytest

from prepgenie.models.grocery_list import GroceryList
from prepgenie.services.grocery_list_service import consolidate_ingredients


def post_json(client, url, payload):
    return client.post(url, data=json.dumps(payload), content_type="application/json")


def test_consolidate_merges_by_name_and_unit():
    items = consolidate_ingredients([
        ([{"name": "Egg", "quantity": 2, "unit": "pcs", "category": "protein"}], 1),
        ([{"name": "egg", "quantity": 1, "unit": "PCS", "category": "dairy"}], 1),
        ([{"name": "egg", "quantity": 1, "unit": "g"}], 1),
    ])

    assert items == [
        {"name": "Egg", "quantity": 3.0, "unit": "pcs", "category": "protein", "is_purchased": False},
        {"name": "egg", "quantity": 1.0, "unit": "g", "category": "other", "is_purchased": False},
    ]


def test_consolidate_scales_by_servings():
    items = consolidate_ingredients([
        ([{"name": "rice", "quantity": 75.5, "unit": "g", "category": "grains"}], 2),
        ([{"name": "rice", "quantity": 100, "unit": "g"}], None),
    ])
    assert items[0]["quantity"] == pytest.approx(251)


def test_consolidate_tolerates_loose_ingredients():
    items = consolidate_ingredients([
        (["salt", {"name": "  "}, {"name": "pepper", "quantity": "a pinch", "category": "Spices"}], 1),
        (None, 1),
    ])

    assert [item["name"] for item in items] == ["salt", "pepper"]
    assert items[0] == {"name": "salt", "quantity": 0.0, "unit": "", "category": "other", "is_purchased": False}
    assert items[1]["category"] == "spices"


@pytest.fixture()
def plan_with_ingredients(client, profile, meal_factory):
    meal_factory("breakfast", ingredients=[
        {"name": "Egg", "quantity": 2, "unit": "pcs", "category": "protein"},
        {"name": "spinach", "quantity": 50, "unit": "g", "category": "produce"},
    ])
    meal_factory("lunch", ingredients=[
        {"name": "egg", "quantity": 1, "unit": "pcs", "category": "protein"},
        {"name": "Rice", "quantity": 150, "unit": "g", "category": "grains"},
    ])
    meal_factory("dinner", ingredients=[
        {"name": "rice", "quantity": 100, "unit": "g"},
        {"name": "salt"},
    ])

    res = post_json(client, "/api/users/1/meal-plans/generate", {"variety_level": "low"})
    assert res.status_code == 201
    return res.get_json()


def test_generate_grocery_list_from_plan(client, plan_with_ingredients):
    plan_id = plan_with_ingredients["id"]

    res = post_json(client, f"/api/users/1/meal-plans/{plan_id}/grocery-list", {"name": "Week 1"})
    assert res.status_code == 201
    body = res.get_json()

    assert body["name"] == "Week 1"
    assert body["meal_plan_id"] == plan_id
    assert [(i["name"], i["quantity"], i["unit"], i["category"]) for i in body["items"]] == [
        ("Egg", 21, "pcs", "protein"),
        ("spinach", 350, "g", "produce"),
        ("Rice", 1750, "g", "grains"),
        ("salt", 0, "", "other"),
    ]
    assert all(item["is_purchased"] is False for item in body["items"])
    assert GroceryList.query.count() == 1


def test_grocery_list_default_name(client, plan_with_ingredients):
    res = client.post(f"/api/users/1/meal-plans/{plan_with_ingredients['id']}/grocery-list")
    assert res.status_code == 201
    assert res.get_json()["name"].startswith("Grocery list ")


def test_grocery_list_for_unknown_plan(client, profile):
    res = post_json(client, "/api/users/1/meal-plans/999/grocery-list", {})
    assert res.status_code == 404
    assert res.get_json()["error"]["code"] == "PLAN_NOT_FOUND"


def test_grocery_list_for_plan_without_ingredients(client, profile, seed_meals):
    res = post_json(client, "/api/users/1/meal-plans/generate", {"variety_level": "low"})
    plan_id = res.get_json()["id"]

    res = post_json(client, f"/api/users/1/meal-plans/{plan_id}/grocery-list", {})
    assert res.status_code == 422
    assert res.get_json()["error"]["code"] == "NO_INGREDIENTS"
    assert GroceryList.query.count() == 0


def test_list_update_and_delete_grocery_list(client, plan_with_ingredients):
    res = post_json(client, f"/api/users/1/meal-plans/{plan_with_ingredients['id']}/grocery-list", {})
    grocery_list = res.get_json()
    url = f"/api/users/1/grocery-lists/{grocery_list['id']}"

    res = client.get("/api/users/1/grocery-lists")
    assert [gl["id"] for gl in res.get_json()["items"]] == [grocery_list["id"]]

    res = client.get(f"/api/users/2/grocery-lists/{grocery_list['id']}")
    assert res.status_code == 404
    assert res.get_json()["error"]["code"] == "GROCERY_LIST_NOT_FOUND"

    items = grocery_list["items"]
    items[0]["is_purchased"] = True
    res = client.put(f"{url}/items", data=json.dumps({"items": items}), content_type="application/json")
    assert res.status_code == 200
    assert res.get_json()["items"][0]["is_purchased"] is True

    res = client.put(f"{url}/items", data=json.dumps({"items": []}), content_type="application/json")
    assert res.status_code == 400
    assert "items" in res.get_json()["error"]["fields"]

    res = client.delete(url)
    assert res.status_code == 200
    assert GroceryList.query.count() == 0


def test_grocery_list_outlives_its_plan(client, plan_with_ingredients):
    plan_id = plan_with_ingredients["id"]
    res = post_json(client, f"/api/users/1/meal-plans/{plan_id}/grocery-list", {})
    list_id = res.get_json()["id"]

    res = client.delete(f"/api/users/1/meal-plans/{plan_id}")
    assert res.status_code == 200

    res = client.get(f"/api/users/1/grocery-lists/{list_id}")
    assert res.status_code == 200
    assert res.get_json()["meal_plan_id"] is None
    assert len(res.get_json()["items"]) == 4
