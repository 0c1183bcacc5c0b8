from prepgenie.services.allergen_service import (
    allergen_free_tags,
    detect_allergens,
    merge_allergen_tags,
    seed_dietary_tags,
)
from prepgenie.services.matching import MealCandidate, swap_candidates


def test_detect_from_ingredient_dicts():
    ingredients = [{"name": "Whole Milk", "quantity": 200}, {"name": "Egg"}]
    assert detect_allergens(ingredients) == ["contains_dairy", "contains_eggs"]


def test_detect_from_plain_names():
    assert detect_allergens(["shrimp", "rice"]) == ["contains_shellfish"]
    assert detect_allergens([]) == []
    assert detect_allergens(None) == []


def test_detect_japanese_keywords():
    assert detect_allergens(["醤油"]) == ["contains_gluten", "contains_soy"]


def test_allergen_free_tags():
    assert "dairy_free" not in allergen_free_tags(["butter"])
    assert "nuts_free" in allergen_free_tags(["butter"])
    assert "nuts_free" not in allergen_free_tags(["walnut"])


def test_merge_adds_detected_and_drops_contradictions():
    merged = merge_allergen_tags(["Vegetarian", "dairy_free", "vegetarian"], [{"name": "cheddar cheese"}])
    assert merged == ["vegetarian", "contains_dairy"]


def test_merge_without_ingredients_keeps_tags():
    assert merge_allergen_tags(["vegan", "gluten_free"], []) == ["vegan", "gluten_free"]


def test_seed_tags_add_free_tags_for_absent_allergens():
    tags = seed_dietary_tags(["vegetarian"], [{"name": "cheddar"}, {"name": "sourdough bread"}])

    assert tags[0] == "vegetarian"
    assert "contains_dairy" in tags
    assert "contains_gluten" in tags
    assert "dairy_free" not in tags
    assert "gluten_free" not in tags
    assert "nuts_free" in tags
    assert len(tags) == len(set(tags))


def test_seed_tags_let_dietary_swaps_find_candidates():
    oats = [{"name": "rolled oats"}, {"name": "banana"}]
    toast = [{"name": "bread"}, {"name": "butter"}]
    original = MealCandidate(id="toast", meal_type="breakfast", dietary_tags=seed_dietary_tags([], toast))
    swap = MealCandidate(id="oats", meal_type="breakfast", dietary_tags=seed_dietary_tags([], oats))

    matches = swap_candidates([original, swap], original, "dietary", dietary_restriction="dairy_free")
    assert [meal.id for meal in matches] == ["oats"]
