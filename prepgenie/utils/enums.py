from enum import Enum


class MealType(str, Enum):
    BREAKFAST = "breakfast"
    LUNCH = "lunch"
    DINNER = "dinner"
    SNACK = "snack"


class DietaryPreference(str, Enum):
    OMNIVORE = "omnivore"
    VEGETARIAN = "vegetarian"
    VEGAN = "vegan"
    PESCATARIAN = "pescatarian"
    HALAL = "halal"


class Goal(str, Enum):
    WEIGHT_LOSS = "weight_loss"
    MAINTAIN = "maintain"
    MUSCLE_GAIN = "muscle_gain"
    BALANCED = "balanced"


class Allergen(str, Enum):
    DAIRY = "dairy"
    GLUTEN = "gluten"
    NUTS = "nuts"
    EGGS = "eggs"
    SHELLFISH = "shellfish"
    SOY = "soy"
    FISH = "fish"
    SESAME = "sesame"


class SwapType(str, Enum):
    BUDGET = "budget"
    SPEED = "speed"
    DIETARY = "dietary"
    MACRO = "macro"


class DietaryRestriction(str, Enum):
    DAIRY_FREE = "dairy_free"
    GLUTEN_FREE = "gluten_free"
    VEGAN = "vegan"
    LOW_FODMAP = "low_fodmap"


class MacroGoal(str, Enum):
    HIGH_PROTEIN = "high_protein"
    LOW_CARB = "low_carb"
    LOW_FAT = "low_fat"


class CookingSkill(str, Enum):
    BEGINNER = "beginner"
    INTERMEDIATE = "intermediate"
    ADVANCED = "advanced"


class Difficulty(str, Enum):
    EASY = "easy"
    MEDIUM = "medium"
    HARD = "hard"


class BudgetLevel(str, Enum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


class GroceryCategory(str, Enum):
    PRODUCE = "produce"
    PROTEIN = "protein"
    DAIRY = "dairy"
    GRAINS = "grains"
    PANTRY = "pantry"
    SPICES = "spices"
    FROZEN = "frozen"
    BEVERAGES = "beverages"
    SNACKS = "snacks"
    OTHER = "other"


class VarietyLevel(str, Enum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


class CuisineType(str, Enum):
    JAPANESE = "japanese"
    KOREAN = "korean"
    MEDITERRANEAN = "mediterranean"
    WESTERN = "western"
    HALAL = "halal"
    ANY = "any"


class Gender(str, Enum):
    MALE = "male"
    FEMALE = "female"
    OTHER = "other"


class ActivityLevel(str, Enum):
    SEDENTARY = "sedentary"
    LIGHT = "light"
    MODERATE = "moderate"
    ACTIVE = "active"
    VERY_ACTIVE = "very_active"


class Locale(str, Enum):
    EN = "en"
    JA = "ja"


def values(enum_cls):
    return [e.value for e in enum_cls]
