"""
Meal Service Constants

Contains all constants and configuration values used by the meal matching
engine and the services around it.
"""

from prepgenie.utils.enums import Allergen

# Slot order inside a day; snacks are appended for 4 and 5 meals per day
MAIN_MEAL_SLOTS = ["breakfast", "lunch", "dinner"]
SNACK_SLOT = "snack"
DAYS_PER_WEEK = 7

DEFAULT_MEALS_PER_DAY = 3
MIN_MEALS_PER_DAY = 3
MAX_MEALS_PER_DAY = 5

# Nutrition defaults
DEFAULT_CALORIE_TARGET = 2000

# Scoring
BASE_SCORE = 100.0
REPEAT_PENALTY = 50.0

MUSCLE_GAIN_PROTEIN_MIN_G = 30.0
MUSCLE_GAIN_PROTEIN_BONUS = 20.0

WEIGHT_LOSS_CARBS_MAX_G = 30.0
WEIGHT_LOSS_LOW_CARB_BONUS = 15.0
WEIGHT_LOSS_PROTEIN_MIN_G = 25.0
WEIGHT_LOSS_HIGH_PROTEIN_BONUS = 15.0

# Calorie proximity: full bonus at the per-meal target, reaching 0 at 300 kcal away
CALORIE_PROXIMITY_MAX_BONUS = 30.0
CALORIE_PROXIMITY_KCAL_PER_POINT = 10.0

# Profile terms, applied only when the profile states the level
SKILL_RANKS = {"beginner": 1, "intermediate": 2, "advanced": 3}
DIFFICULTY_RANKS = {"easy": 1, "medium": 2, "hard": 3}
UNKNOWN_DIFFICULTY = "medium"
SKILL_MATCH_BONUS = 10.0
SKILL_MISMATCH_PENALTY = 15.0

UNKNOWN_PREP_MINUTES = 30
OVER_TIME_PENALTY = 20.0
QUICK_MEAL_BONUS = 5.0

UNKNOWN_INGREDIENT_COUNT = 5
LOW_BUDGET_MAX_INGREDIENTS = 10
LOW_BUDGET_PENALTY = 10.0
HIGH_BUDGET_MIN_INGREDIENTS = 8
HIGH_BUDGET_BONUS = 5.0

# Variety windows (top-N candidates eligible for a random pick)
VARIETY_WINDOWS = {"low": 1, "medium": 3, "high": 5}

# Relaxation levels recorded on each plan slot
RELAXATION_STRICT = "strict"
RELAXATION_DIETARY_ONLY = "dietary_only"
RELAXATION_UNFILTERED = "unfiltered"

# Swap selection
DEFAULT_SWAP_WINDOW = 10
BUDGET_MAX_PREP_MINUTES = 30
MACRO_HIGH_PROTEIN_MIN_G = 25.0
MACRO_LOW_CARB_MAX_G = 20.0
MACRO_LOW_FAT_MAX_G = 10.0

# Grocery lists
DEFAULT_GROCERY_CATEGORY = "other"

# Dietary preference -> tag a meal must carry
PREFERENCE_TAGS = {
    "vegetarian": "vegetarian",
    "vegan": "vegan",
    "pescatarian": "pescatarian",
    "halal": "halal",
}

KNOWN_ALLERGENS = [allergen.value for allergen in Allergen]
CONTAINS_TAG_PREFIX = "contains_"
FREE_TAG_SUFFIX = "_free"

# Nutrition calculation constants
CALORIES_PER_GRAM_PROTEIN = 4.0
CALORIES_PER_GRAM_CARBS = 4.0
CALORIES_PER_GRAM_FAT = 9.0

ACTIVITY_MULTIPLIERS = {
    "sedentary": 1.2,
    "light": 1.375,
    "moderate": 1.55,
    "active": 1.725,
    "very_active": 1.9,
}

GOAL_CALORIE_ADJUSTMENTS = {
    "weight_loss": -500,
    "maintain": 0,
    "muscle_gain": 300,
    "balanced": 0,
}

PROTEIN_G_PER_KG = {
    "weight_loss": 2.2,
    "muscle_gain": 2.0,
}
DEFAULT_PROTEIN_G_PER_KG = 1.8

MUSCLE_GAIN_FAT_SHARE = 0.25
DEFAULT_FAT_SHARE = 0.3

# Healthy ranges, percent of calories
PROTEIN_PCT_RANGE = (15, 35)
FAT_PCT_RANGE = (20, 35)
CARBS_PCT_RANGE = (45, 65)
