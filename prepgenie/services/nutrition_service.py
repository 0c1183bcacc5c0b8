"""
Nutrition Service

Handles nutritional calculations and targets based on the user profile:
- BMR (Mifflin-St Jeor) and TDEE
- Goal-adjusted calorie and macronutrient targets
- Macro split validation
- Unit conversions for imperial input
"""

from typing import Any, Dict, List, Optional

from prepgenie.models.profile import UserProfile
from prepgenie.services.meal_constants import (
    ACTIVITY_MULTIPLIERS,
    CALORIES_PER_GRAM_CARBS,
    CALORIES_PER_GRAM_FAT,
    CALORIES_PER_GRAM_PROTEIN,
    CARBS_PCT_RANGE,
    DEFAULT_FAT_SHARE,
    DEFAULT_PROTEIN_G_PER_KG,
    FAT_PCT_RANGE,
    GOAL_CALORIE_ADJUSTMENTS,
    MUSCLE_GAIN_FAT_SHARE,
    PROTEIN_G_PER_KG,
    PROTEIN_PCT_RANGE,
)


def calculate_bmr(age: float, weight_kg: float, height_cm: float, gender: str) -> float:
    """
    Basal Metabolic Rate using the Mifflin-St Jeor equation.

    Men:   10 * kg + 6.25 * cm - 5 * age + 5
    Women: 10 * kg + 6.25 * cm - 5 * age - 161
    Other: average of both
    """
    base = 10 * weight_kg + 6.25 * height_cm - 5 * age

    if gender == "male":
        return base + 5
    if gender == "female":
        return base - 161
    return (base + 5 + base - 161) / 2


def calculate_tdee(age: float, weight_kg: float, height_cm: float, gender: str, activity_level: str) -> int:
    """Total Daily Energy Expenditure: BMR times the activity multiplier."""
    if activity_level not in ACTIVITY_MULTIPLIERS:
        raise ValueError(f"Unknown activity level: {activity_level}")
    bmr = calculate_bmr(age, weight_kg, height_cm, gender)
    return round(bmr * ACTIVITY_MULTIPLIERS[activity_level])


def calculate_macros(tdee: float, goal: str, weight_kg: float) -> Dict[str, int]:
    """
    Calorie and macro targets for a goal.

    Protein is set per kg of body weight, fat as a share of calories and
    carbs take the remaining calories.
    """
    calories = int(tdee + GOAL_CALORIE_ADJUSTMENTS.get(goal, 0))
    return macros_for_calories(calories, goal, weight_kg)


def macros_for_calories(calories: int, goal: str, weight_kg: float) -> Dict[str, int]:
    """Split a fixed calorie target into protein, fat and carb grams."""
    protein_g = round(weight_kg * PROTEIN_G_PER_KG.get(goal, DEFAULT_PROTEIN_G_PER_KG))
    protein_calories = protein_g * CALORIES_PER_GRAM_PROTEIN

    fat_share = MUSCLE_GAIN_FAT_SHARE if goal == "muscle_gain" else DEFAULT_FAT_SHARE
    fat_calories = round(calories * fat_share)
    fat_g = round(fat_calories / CALORIES_PER_GRAM_FAT)

    carbs_g = round((calories - protein_calories - fat_calories) / CALORIES_PER_GRAM_CARBS)

    return {
        "calories": calories,
        "protein": int(protein_g),
        "carbs": int(carbs_g),
        "fats": int(fat_g),
    }


def calculate_macro_percentages(macros: Dict[str, float]) -> Dict[str, int]:
    calories = macros.get("calories") or 0
    if calories <= 0:
        return {"protein": 0, "carbs": 0, "fats": 0}

    return {
        "protein": round(macros["protein"] * CALORIES_PER_GRAM_PROTEIN / calories * 100),
        "carbs": round(macros["carbs"] * CALORIES_PER_GRAM_CARBS / calories * 100),
        "fats": round(macros["fats"] * CALORIES_PER_GRAM_FAT / calories * 100),
    }


def validate_macros(macros: Dict[str, float]) -> Dict[str, Any]:
    """Check the macro split against recommended ranges."""
    warnings: List[str] = []
    pct = calculate_macro_percentages(macros)

    if pct["protein"] < PROTEIN_PCT_RANGE[0]:
        warnings.append(f"Protein is below recommended minimum ({PROTEIN_PCT_RANGE[0]}%)")
    if pct["protein"] > PROTEIN_PCT_RANGE[1]:
        warnings.append(f"Protein exceeds recommended maximum ({PROTEIN_PCT_RANGE[1]}%)")

    if pct["fats"] < FAT_PCT_RANGE[0]:
        warnings.append(f"Fat is below recommended minimum ({FAT_PCT_RANGE[0]}%)")
    if pct["fats"] > FAT_PCT_RANGE[1]:
        warnings.append(f"Fat exceeds recommended maximum ({FAT_PCT_RANGE[1]}%)")

    if pct["carbs"] < CARBS_PCT_RANGE[0]:
        warnings.append(f"Carbs are below recommended minimum ({CARBS_PCT_RANGE[0]}%)")
    if pct["carbs"] > CARBS_PCT_RANGE[1]:
        warnings.append(f"Carbs exceed recommended maximum ({CARBS_PCT_RANGE[1]}%)")

    return {"is_valid": not warnings, "warnings": warnings}


def lbs_to_kg(lbs: float) -> float:
    return round(lbs * 0.453592, 2)


def inches_to_cm(inches: float) -> float:
    return round(inches * 2.54, 2)


def has_body_metrics(profile: UserProfile) -> bool:
    return all(
        getattr(profile, field) is not None
        for field in ("age", "weight_kg", "height_cm", "gender", "activity_level")
    )


def calculate_nutritional_targets(profile: UserProfile) -> Optional[Dict[str, int]]:
    """
    Calculate daily targets for a stored profile.

    Returns:
        Dictionary with tdee, calories, protein, carbs, fats, or None when
        the profile is missing body metrics
    """
    if not has_body_metrics(profile):
        return None

    weight = float(profile.weight_kg)
    tdee = calculate_tdee(
        profile.age, weight, float(profile.height_cm),
        profile.gender, profile.activity_level,
    )
    macros = calculate_macros(tdee, profile.goal or "balanced", weight)
    return {"tdee": tdee, **macros}


def apply_nutritional_targets(profile: UserProfile, calorie_override: Optional[int] = None) -> Optional[Dict[str, int]]:
    """
    Store computed targets on the profile.

    A manual calorie target (``calorie_override``, else the profile's stored
    ``manual_calorie_target``) replaces the computed calories, and the macro
    targets are split from it instead.

    Returns:
        The targets that were stored, or None when body metrics are missing
    """
    override = calorie_override or profile.manual_calorie_target
    targets = calculate_nutritional_targets(profile)

    if targets is not None and override:
        macros = macros_for_calories(int(override), profile.goal or "balanced", float(profile.weight_kg))
        targets = {"tdee": targets["tdee"], **macros}

    if targets is not None:
        profile.tdee = targets["tdee"]
        profile.daily_calorie_target = targets["calories"]
        profile.target_protein = targets["protein"]
        profile.target_carbs = targets["carbs"]
        profile.target_fats = targets["fats"]
    elif override:
        profile.daily_calorie_target = int(override)

    return targets
