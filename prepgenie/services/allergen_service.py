"""
Allergen Service

Derives explicit ``contains_<allergen>`` tags from ingredient names so that
user-created and seeded meals carry the tags the dietary filter relies on.
"""

from typing import Any, Dict, Iterable, List, Union

from prepgenie.services.meal_constants import CONTAINS_TAG_PREFIX, FREE_TAG_SUFFIX

# Keyword lists per allergen (English and Japanese)
ALLERGEN_KEYWORDS = {
    "dairy": [
        "milk", "cheese", "butter", "cream", "yogurt", "whey", "ghee", "paneer",
        "ricotta", "mozzarella", "parmesan", "feta", "cheddar", "buttermilk",
        "custard", "ミルク", "チーズ", "バター", "クリーム", "ヨーグルト", "牛乳", "生クリーム",
    ],
    "gluten": [
        "flour", "bread", "pasta", "wheat", "barley", "rye", "soy sauce", "teriyaki",
        "udon", "ramen", "noodle", "tortilla", "pita", "couscous", "bulgur", "seitan",
        "breadcrumb", "crouton", "panko", "小麦粉", "パン", "パスタ", "うどん", "ラーメン",
        "醤油", "しょうゆ",
    ],
    "nuts": [
        "almond", "walnut", "cashew", "peanut", "pistachio", "hazelnut", "pecan",
        "macadamia", "pine nut", "brazil nut", "chestnut", "アーモンド", "くるみ",
        "カシューナッツ", "ピーナッツ", "ピスタチオ", "落花生",
    ],
    "eggs": [
        "egg", "mayonnaise", "mayo", "meringue", "custard", "aioli",
        "卵", "たまご", "マヨネーズ",
    ],
    "shellfish": [
        "shrimp", "prawn", "crab", "lobster", "clam", "mussel", "oyster", "scallop",
        "crawfish", "crayfish", "squid", "calamari", "octopus", "エビ", "海老", "カニ",
        "蟹", "ホタテ", "イカ", "タコ", "あさり", "しじみ",
    ],
    "soy": [
        "soy", "tofu", "edamame", "miso", "tempeh", "soybean",
        "豆腐", "味噌", "みそ", "テンペ", "枝豆", "大豆", "醤油",
    ],
    "fish": [
        "salmon", "tuna", "cod", "fish sauce", "anchovy", "dashi", "sardine", "mackerel",
        "tilapia", "trout", "halibut", "bass", "snapper", "bonito", "katsuobushi",
        "サーモン", "マグロ", "鮭", "サバ", "鯖", "かつお", "鰹", "だし", "出汁", "魚",
    ],
    "sesame": ["sesame", "tahini", "ごま", "ゴマ", "胡麻", "タヒニ"],
}

Ingredient = Union[str, Dict[str, Any]]


def _ingredient_name(ingredient: Ingredient) -> str:
    if isinstance(ingredient, dict):
        return str(ingredient.get("name") or "")
    return str(ingredient or "")


def detect_allergens(ingredients: Iterable[Ingredient]) -> List[str]:
    """
    Detect allergens from ingredient names.

    Args:
        ingredients: Ingredient dicts with a ``name`` key, or plain names

    Returns:
        Sorted tags like ['contains_dairy', 'contains_gluten']
    """
    found = set()
    for ingredient in ingredients or []:
        name = _ingredient_name(ingredient).lower()
        if not name:
            continue
        for allergen, keywords in ALLERGEN_KEYWORDS.items():
            if any(keyword.lower() in name for keyword in keywords):
                found.add(f"{CONTAINS_TAG_PREFIX}{allergen}")
    return sorted(found)


def allergen_free_tags(ingredients: Iterable[Ingredient]) -> List[str]:
    detected = set(detect_allergens(ingredients))
    return [
        f"{allergen}{FREE_TAG_SUFFIX}"
        for allergen in ALLERGEN_KEYWORDS
        if f"{CONTAINS_TAG_PREFIX}{allergen}" not in detected
    ]


def merge_allergen_tags(dietary_tags: Iterable[str], ingredients: Iterable[Ingredient]) -> List[str]:
    """
    Add detected ``contains_*`` tags to existing dietary tags.

    A detected allergen also drops a contradicting ``<allergen>_free`` tag.
    Order of the existing tags is kept.
    """
    detected = detect_allergens(ingredients)
    contradicted = {
        tag[len(CONTAINS_TAG_PREFIX):] + FREE_TAG_SUFFIX for tag in detected
    }

    merged = []
    for tag in dietary_tags or []:
        tag = str(tag).strip().lower()
        if tag and tag not in contradicted and tag not in merged:
            merged.append(tag)
    for tag in detected:
        if tag not in merged:
            merged.append(tag)
    return merged


def seed_dietary_tags(dietary_tags: Iterable[str], ingredients: Iterable[Ingredient]) -> List[str]:
    """
    Tags for a curated seed meal: the merged ``contains_*`` tags plus an
    ``<allergen>_free`` tag for every allergen not found in the ingredients.
    """
    tags = list(dietary_tags or []) + allergen_free_tags(ingredients)
    return merge_allergen_tags(tags, ingredients)
