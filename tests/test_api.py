import json

from prepgenie.extensions import db
from prepgenie.models.meal import Meal
from prepgenie.models.meal_plan import MealPlan


def put_json(client, url, payload):
    return client.put(url, data=json.dumps(payload), content_type="application/json")


def post_json(client, url, payload):
    return client.post(url, data=json.dumps(payload), content_type="application/json")


def test_health(client):
    res = client.get("/health")
    assert res.status_code == 200
    assert res.get_json()["database"] == "healthy"


def test_upsert_profile_computes_targets(client):
    res = put_json(client, "/api/users/7/profile", {
        "age": 30, "weight": 80, "height": 180, "gender": "male",
        "activity_level": "moderate", "goal": "maintain",
        "dietary_preference": "omnivore", "allergies": [" Dairy ", "dairy"],
    })
    assert res.status_code == 200
    body = res.get_json()
    assert body["targets"]["tdee"] == 2759
    assert body["profile"]["daily_calorie_target"] == 2759
    assert body["profile"]["allergies"] == ["dairy"]

    res = client.get("/api/users/7/profile")
    assert res.status_code == 200
    assert res.get_json()["target_protein"] == 144


def test_upsert_profile_imperial_units(client):
    res = put_json(client, "/api/users/8/profile", {
        "age": 30, "weight": 176, "height": 70, "unit_system": "imperial",
        "gender": "female", "activity_level": "light",
    })
    assert res.status_code == 200
    profile = res.get_json()["profile"]
    assert profile["weight_kg"] == 79.83
    assert profile["height_cm"] == 177.8


def test_upsert_profile_calorie_override(client):
    res = put_json(client, "/api/users/9/profile", {"daily_calorie_target": 1800})
    assert res.status_code == 200
    body = res.get_json()
    assert body["targets"] is None
    assert body["profile"]["daily_calorie_target"] == 1800
    assert body["profile"]["goal"] == "balanced"


def test_upsert_profile_validation_error(client):
    res = put_json(client, "/api/users/7/profile", {"age": 5, "goal": "bulk"})
    assert res.status_code == 400
    err = res.get_json()["error"]
    assert err["code"] == "VALIDATION_ERROR"
    assert "age" in err["fields"]
    assert "goal" in err["fields"]


def test_get_missing_profile(client):
    res = client.get("/api/users/404/profile")
    assert res.status_code == 404
    assert res.get_json()["error"]["code"] == "PROFILE_NOT_FOUND"


def test_list_and_get_meals(client, seed_meals, meal_factory):
    meal_factory("lunch", name="Private lunch", is_seed_meal=False, user_id=1)

    res = client.get("/api/meals?meal_type=breakfast&limit=5")
    assert res.status_code == 200
    body = res.get_json()
    assert body["total"] == 7
    assert len(body["items"]) == 5
    assert all(item["meal_type"] == "breakfast" for item in body["items"])

    res = client.get("/api/meals?search=Private")
    assert res.get_json()["total"] == 0

    res = client.get(f"/api/meals/{seed_meals[0].id}")
    assert res.status_code == 200
    assert res.get_json()["nutrition_per_serving"]["calories"] == 500

    res = client.get("/api/meals/99999")
    assert res.status_code == 404
    assert res.get_json()["error"]["code"] == "MEAL_NOT_FOUND"


def test_list_meals_rejects_bad_query(client):
    res = client.get("/api/meals?meal_type=brunch")
    assert res.status_code == 400


def test_user_meal_crud(client, seed_meals):
    res = post_json(client, "/api/users/1/meals", {
        "name": "Cheese toast",
        "meal_type": "breakfast",
        "calories_per_serving": 350,
        "ingredients": [{"name": "cheddar"}, {"name": "sourdough bread"}],
        "dietary_tags": ["vegetarian", "dairy_free"],
    })
    assert res.status_code == 201
    meal = res.get_json()
    assert meal["is_seed_meal"] is False
    assert meal["dietary_tags"] == ["vegetarian", "contains_dairy", "contains_gluten"]

    res = put_json(client, f"/api/users/1/meals/{meal['id']}", {"prep_time": 5})
    assert res.status_code == 200
    assert res.get_json()["prep_time"] == 5

    res = put_json(client, f"/api/users/2/meals/{meal['id']}", {"prep_time": 1})
    assert res.status_code == 403

    res = client.delete(f"/api/users/1/meals/{meal['id']}")
    assert res.status_code == 200
    assert db.session.get(Meal, meal["id"]) is None


def test_seed_meals_are_read_only(client, seed_meals):
    res = put_json(client, f"/api/users/1/meals/{seed_meals[0].id}", {"name": "Mine now"})
    assert res.status_code == 403
    assert res.get_json()["error"]["code"] == "FORBIDDEN"

    res = client.delete(f"/api/users/1/meals/{seed_meals[0].id}")
    assert res.status_code == 403


def test_generate_plan_requires_profile(client, seed_meals):
    res = post_json(client, "/api/users/1/meal-plans/generate", {})
    assert res.status_code == 409
    assert res.get_json()["error"]["code"] == "PROFILE_REQUIRED"


def test_generate_plan_without_seed_meals(client, profile):
    res = post_json(client, "/api/users/1/meal-plans/generate", {})
    assert res.status_code == 404
    assert res.get_json()["error"]["code"] == "NO_SEED_MEALS"


def test_generate_plan(client, profile, seed_meals):
    res = post_json(client, "/api/users/1/meal-plans/generate", {
        "name": "My week", "variety_level": "low", "start_date": "2026-01-05",
    })
    assert res.status_code == 201
    plan = res.get_json()

    assert plan["name"] == "My week"
    assert plan["start_date"] == "2026-01-05"
    assert plan["end_date"] == "2026-01-11"
    assert plan["shortages"] == []
    assert len(plan["items"]) == 21
    assert len({item["meal_id"] for item in plan["items"]}) == 21
    assert {item["day_of_week"] for item in plan["items"]} == set(range(7))
    assert plan["totals"]["calories"] == sum(
        item["meal"]["nutrition_per_serving"]["calories"] for item in plan["items"]
    )
    assert MealPlan.query.count() == 1


def test_generate_plan_with_snacks(client, profile, seed_meals):
    res = post_json(client, "/api/users/1/meal-plans/generate", {"meals_per_day": 5})
    assert res.status_code == 201
    items = res.get_json()["items"]
    assert len(items) == 35
    assert sum(1 for item in items if item["meal_time"] == "snack") == 14


def test_generate_plan_respects_dietary_preference(client, profile, seed_meals):
    put_json(client, "/api/users/1/profile", {"dietary_preference": "vegetarian"})

    res = post_json(client, "/api/users/1/meal-plans/generate", {})
    assert res.status_code == 201
    for item in res.get_json()["items"]:
        assert "vegetarian" in item["meal"]["dietary_tags"]


def test_generate_plan_shortage(client, profile, seed_meals):
    put_json(client, "/api/users/1/profile", {"dietary_preference": "vegan"})

    res = post_json(client, "/api/users/1/meal-plans/generate", {})
    assert res.status_code == 422
    err = res.get_json()["error"]
    assert err["code"] == "NO_CANDIDATES"
    assert len(err["shortages"]) == 21
    assert MealPlan.query.count() == 0


def test_generate_plan_partial_when_allowed(app, client, profile, meal_factory):
    app.config["PLAN_ALLOW_PARTIAL"] = True
    meal_factory("breakfast")
    meal_factory("lunch")

    res = post_json(client, "/api/users/1/meal-plans/generate", {})
    assert res.status_code == 201
    body = res.get_json()
    assert len(body["items"]) == 14
    assert {s["slot"] for s in body["shortages"]} == {"dinner"}


def test_generate_plan_falls_back_to_default_locale(client, profile, seed_meals):
    put_json(client, "/api/users/1/profile", {"locale": "ja"})

    res = post_json(client, "/api/users/1/meal-plans/generate", {})
    assert res.status_code == 201
    assert all(item["meal"]["locale"] == "en" for item in res.get_json()["items"])


def test_generate_plan_validation(client, profile, seed_meals):
    res = post_json(client, "/api/users/1/meal-plans/generate", {"meals_per_day": 6})
    assert res.status_code == 400
    assert res.get_json()["error"]["code"] == "VALIDATION_ERROR"


def _generate(client):
    res = post_json(client, "/api/users/1/meal-plans/generate", {"variety_level": "low"})
    assert res.status_code == 201
    return res.get_json()


def test_list_get_and_delete_plan(client, profile, seed_meals):
    plan = _generate(client)

    res = client.get("/api/users/1/meal-plans")
    assert res.status_code == 200
    assert [p["id"] for p in res.get_json()["items"]] == [plan["id"]]

    res = client.get(f"/api/users/1/meal-plans/{plan['id']}")
    assert res.status_code == 200
    assert len(res.get_json()["items"]) == 21

    res = client.get(f"/api/users/2/meal-plans/{plan['id']}")
    assert res.status_code == 404
    assert res.get_json()["error"]["code"] == "PLAN_NOT_FOUND"

    res = client.delete(f"/api/users/1/meal-plans/{plan['id']}")
    assert res.status_code == 200
    assert MealPlan.query.count() == 0


def test_complete_plan_item(client, profile, seed_meals):
    plan = _generate(client)
    item = plan["items"][0]
    url = f"/api/users/1/meal-plans/{plan['id']}/items/{item['id']}"

    res = client.patch(url, data=json.dumps({"is_completed": True}), content_type="application/json")
    assert res.status_code == 200
    assert res.get_json()["is_completed"] is True

    res = client.patch(url, data=json.dumps({}), content_type="application/json")
    assert res.status_code == 400

    res = client.patch(
        f"/api/users/1/meal-plans/{plan['id']}/items/99999",
        data=json.dumps({"is_completed": True}), content_type="application/json",
    )
    assert res.status_code == 404
    assert res.get_json()["error"]["code"] == "PLAN_ITEM_NOT_FOUND"


def test_swap_meal(client, profile, seed_meals):
    plan = _generate(client)
    item = plan["items"][0]
    assert item["meal_time"] == "breakfast"

    res = post_json(client, f"/api/users/1/meal-plans/{plan['id']}/items/{item['id']}/swap", {"swap_type": "budget"})
    assert res.status_code == 200
    body = res.get_json()

    new_meal = body["item"]["meal"]
    assert new_meal["id"] != item["meal_id"]
    assert new_meal["meal_type"] == "breakfast"
    assert new_meal["prep_time"] <= 30
    assert body["plan"]["totals"]["calories"] == (
        plan["totals"]["calories"]
        - item["meal"]["nutrition_per_serving"]["calories"]
        + new_meal["nutrition_per_serving"]["calories"]
    )


def test_swap_without_candidates_suggests_generation(client, profile, seed_meals):
    plan = _generate(client)
    item = plan["items"][0]

    res = post_json(
        client,
        f"/api/users/1/meal-plans/{plan['id']}/items/{item['id']}/swap",
        {"swap_type": "macro", "macro_goal": "low_fat"},
    )
    assert res.status_code == 404
    err = res.get_json()["error"]
    assert err["code"] == "NO_SWAP_CANDIDATE"
    assert err["fallback"] == "ai_generation"


def test_swap_validation(client, profile, seed_meals):
    plan = _generate(client)
    item = plan["items"][0]

    res = post_json(
        client,
        f"/api/users/1/meal-plans/{plan['id']}/items/{item['id']}/swap",
        {"swap_type": "dietary"},
    )
    assert res.status_code == 400
    assert "dietary_restriction" in res.get_json()["error"]["fields"]


def test_calorie_override_survives_later_updates(client):
    put_json(client, "/api/users/7/profile", {
        "age": 30, "weight": 80, "height": 180, "gender": "male",
        "activity_level": "moderate", "goal": "maintain", "daily_calorie_target": 2200,
    })

    res = put_json(client, "/api/users/7/profile", {"goal": "weight_loss"})
    assert res.status_code == 200
    profile = res.get_json()["profile"]
    assert profile["daily_calorie_target"] == 2200
    assert profile["manual_calorie_target"] == 2200
    assert profile["target_protein"] == 176
    assert profile["target_carbs"] == 209

    res = put_json(client, "/api/users/7/profile", {"daily_calorie_target": None})
    profile = res.get_json()["profile"]
    assert profile["manual_calorie_target"] is None
    assert profile["daily_calorie_target"] == 2259


def test_profile_cooking_preferences(client):
    res = put_json(client, "/api/users/7/profile", {
        "cooking_skill_level": "beginner", "time_available": 30, "budget_level": "low",
    })
    assert res.status_code == 200
    profile = res.get_json()["profile"]
    assert profile["cooking_skill_level"] == "beginner"
    assert profile["time_available"] == 30
    assert profile["budget_level"] == "low"

    res = put_json(client, "/api/users/7/profile", {"cooking_skill_level": "chef", "time_available": 0})
    assert res.status_code == 400
    fields = res.get_json()["error"]["fields"]
    assert "cooking_skill_level" in fields
    assert "time_available" in fields


def test_generate_plan_avoids_meals_beyond_skill(client, profile, meal_factory):
    put_json(client, "/api/users/1/profile", {"cooking_skill_level": "beginner"})
    for meal_type in ("breakfast", "lunch", "dinner"):
        meal_factory(meal_type, name=f"Hard {meal_type}", difficulty_level="hard", calories=667)
        meal_factory(meal_type, name=f"Easy {meal_type}", difficulty_level="easy", calories=400)

    res = post_json(client, "/api/users/1/meal-plans/generate", {"variety_level": "low"})
    assert res.status_code == 201
    assert all(item["meal"]["difficulty_level"] == "easy" for item in res.get_json()["items"])


def test_generate_plan_with_variety_has_no_repeats(client, profile, seed_meals):
    res = post_json(client, "/api/users/1/meal-plans/generate", {"variety_level": "high"})
    assert res.status_code == 201
    items = res.get_json()["items"]
    assert len({item["meal_id"] for item in items}) == 21
