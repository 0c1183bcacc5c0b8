from decimal import Decimal

from prepgenie import create_app
from prepgenie.extensions import db
from prepgenie.models.meal import Meal
from prepgenie.services.allergen_service import seed_dietary_tags

app = create_app()


def ing(name, quantity, unit, category):
    return {"name": name, "quantity": quantity, "unit": unit, "category": category}


# (meal_type, name, cuisine, prep, cook, calories, protein, carbs, fats, tags, ingredients, locale)
SEED_MEALS = [
    ("breakfast", "Greek Yogurt Parfait", "mediterranean", 5, 0, 320, 22, 38, 8,
     ["vegetarian", "gluten_free", "high_protein"],
     [ing("greek yogurt", 200, "g", "dairy"), ing("blueberries", 80, "g", "produce"), ing("honey", 1, "tbsp", "pantry")], "en"),
    ("breakfast", "Spinach Omelette", "western", 5, 10, 290, 24, 6, 19,
     ["vegetarian", "gluten_free", "low_carb", "high_protein"],
     [ing("egg", 3, "pcs", "protein"), ing("spinach", 60, "g", "produce"), ing("olive oil", 1, "tsp", "pantry")], "en"),
    ("breakfast", "Overnight Oats with Banana", "western", 10, 0, 380, 12, 62, 9,
     ["vegan", "vegetarian", "dairy_free"],
     [ing("rolled oats", 60, "g", "grains"), ing("oat milk", 200, "ml", "pantry"), ing("banana", 1, "pcs", "produce")], "en"),
    ("breakfast", "Tofu Scramble", "western", 10, 10, 310, 21, 14, 18,
     ["vegan", "vegetarian", "dairy_free", "gluten_free", "high_protein"],
     [ing("firm tofu", 200, "g", "protein"), ing("bell pepper", 80, "g", "produce"), ing("turmeric", 1, "tsp", "spices")], "en"),
    ("lunch", "Chicken Quinoa Bowl", "mediterranean", 15, 20, 520, 42, 48, 16,
     ["gluten_free", "dairy_free", "halal", "high_protein"],
     [ing("chicken breast", 150, "g", "protein"), ing("quinoa", 80, "g", "grains"), ing("cucumber", 80, "g", "produce")], "en"),
    ("lunch", "Salmon Poke Bowl", "japanese", 15, 0, 560, 34, 58, 20,
     ["pescatarian", "dairy_free", "high_protein"],
     [ing("salmon", 120, "g", "protein"), ing("sushi rice", 150, "g", "grains"), ing("soy sauce", 1, "tbsp", "pantry")], "en"),
    ("lunch", "Chickpea Falafel Wrap", "mediterranean", 20, 15, 540, 18, 72, 19,
     ["vegan", "vegetarian", "dairy_free"],
     [ing("chickpeas", 150, "g", "protein"), ing("tortilla", 1, "pcs", "grains"), ing("tahini", 1, "tbsp", "pantry")], "en"),
    ("lunch", "Lentil Soup", "mediterranean", 10, 30, 410, 24, 60, 7,
     ["vegan", "vegetarian", "dairy_free", "gluten_free"],
     [ing("red lentils", 100, "g", "protein"), ing("carrot", 80, "g", "produce"), ing("cumin", 1, "tsp", "spices")], "en"),
    ("dinner", "Beef Bulgogi with Rice", "korean", 20, 15, 640, 38, 70, 20,
     ["dairy_free", "high_protein"],
     [ing("beef sirloin", 150, "g", "protein"), ing("rice", 150, "g", "grains"), ing("soy sauce", 2, "tbsp", "pantry")], "en"),
    ("dinner", "Baked Cod with Vegetables", "western", 15, 25, 430, 40, 28, 15,
     ["pescatarian", "gluten_free", "dairy_free", "high_protein"],
     [ing("cod", 180, "g", "protein"), ing("zucchini", 120, "g", "produce"), ing("lemon", 1, "pcs", "produce")], "en"),
    ("dinner", "Vegetable Curry with Brown Rice", "western", 20, 30, 590, 16, 88, 18,
     ["vegan", "vegetarian", "dairy_free", "gluten_free"],
     [ing("coconut milk", 200, "ml", "pantry"), ing("cauliflower", 150, "g", "produce"), ing("brown rice", 150, "g", "grains")], "en"),
    ("dinner", "Grilled Chicken Shawarma Plate", "halal", 25, 20, 610, 48, 45, 24,
     ["halal", "high_protein"],
     [ing("chicken thigh", 180, "g", "protein"), ing("pita", 1, "pcs", "grains"), ing("garlic yogurt sauce", 50, "g", "dairy")], "en"),
    ("snack", "Apple with Almond Butter", "western", 5, 0, 210, 5, 24, 11,
     ["vegan", "vegetarian", "gluten_free", "dairy_free"],
     [ing("apple", 1, "pcs", "produce"), ing("almond butter", 1, "tbsp", "pantry")], "en"),
    ("snack", "Edamame with Sea Salt", "japanese", 5, 5, 180, 17, 13, 8,
     ["vegan", "vegetarian", "gluten_free", "dairy_free", "high_protein"],
     [ing("edamame", 150, "g", "protein"), ing("sea salt", 1, "tsp", "spices")], "en"),
    ("snack", "Cottage Cheese with Pineapple", "western", 5, 0, 190, 20, 18, 4,
     ["vegetarian", "gluten_free", "high_protein"],
     [ing("cottage cheese", 150, "g", "dairy"), ing("pineapple", 80, "g", "produce")], "en"),
    ("breakfast", "焼き鮭定食", "japanese", 10, 15, 450, 30, 55, 12,
     ["pescatarian", "dairy_free"],
     [ing("鮭", 100, "g", "protein"), ing("ご飯", 150, "g", "grains"), ing("味噌", 1, "tbsp", "pantry")], "ja"),
    ("lunch", "豆腐とわかめの味噌汁定食", "japanese", 10, 10, 420, 20, 60, 10,
     ["vegetarian", "dairy_free"],
     [ing("豆腐", 150, "g", "protein"), ing("わかめ", 10, "g", "produce"), ing("味噌", 1, "tbsp", "pantry")], "ja"),
    ("dinner", "鶏の照り焼き", "japanese", 15, 15, 580, 40, 52, 20,
     ["dairy_free", "high_protein"],
     [ing("鶏もも肉", 180, "g", "protein"), ing("醤油", 2, "tbsp", "pantry"), ing("ご飯", 150, "g", "grains")], "ja"),
]


with app.app_context():
    # ensure tables exist (non-destructive: won't alter existing columns)
    db.create_all()

    added = 0
    for (meal_type, name, cuisine, prep, cook, cal, p, c, f, tags, ingredients, locale) in SEED_MEALS:
        if Meal.query.filter_by(name=name, locale=locale, is_seed_meal=True).first():
            continue
        db.session.add(Meal(
            name=name,
            meal_type=meal_type,
            cuisine_type=cuisine,
            difficulty_level="easy",
            prep_time=prep,
            cook_time=cook,
            servings=1,
            calories_per_serving=cal,
            protein_per_serving=Decimal(str(p)),
            carbs_per_serving=Decimal(str(c)),
            fats_per_serving=Decimal(str(f)),
            ingredients=ingredients,
            instructions=[],
            dietary_tags=seed_dietary_tags(tags, ingredients),
            tags=[],
            locale=locale,
            is_seed_meal=True,
        ))
        added += 1

    db.session.commit()

    app.logger.info("Seed completed: %d meals added", added)
    print(f"Seed completed: {added} meals added.")
