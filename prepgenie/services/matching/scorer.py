"""
Meal Scorer

Relative fitness of a meal for a profile inside one candidate pool.
Higher is better. The score is a sum of independent terms:

    base
    - repeat penalty          (meal already placed in this plan)
    + goal alignment bonus    (muscle_gain / weight_loss only)
    + calorie proximity bonus (closeness to the per-meal calorie target)
    +/- skill term            (only when the profile states a cooking skill)
    +/- time term             (only when the profile states time available)
    +/- budget term           (only when the profile states a budget level)

With the constants in ``meal_constants`` the lowest reachable score is
BASE_SCORE - REPEAT_PENALTY - SKILL_MISMATCH_PENALTY - OVER_TIME_PENALTY
- LOW_BUDGET_PENALTY, so scores never go negative.
"""

import math
from typing import AbstractSet, Optional

from prepgenie.services.meal_constants import (
    BASE_SCORE,
    REPEAT_PENALTY,
    DEFAULT_MEALS_PER_DAY,
    MUSCLE_GAIN_PROTEIN_MIN_G,
    MUSCLE_GAIN_PROTEIN_BONUS,
    WEIGHT_LOSS_CARBS_MAX_G,
    WEIGHT_LOSS_LOW_CARB_BONUS,
    WEIGHT_LOSS_PROTEIN_MIN_G,
    WEIGHT_LOSS_HIGH_PROTEIN_BONUS,
    CALORIE_PROXIMITY_MAX_BONUS,
    CALORIE_PROXIMITY_KCAL_PER_POINT,
    SKILL_RANKS,
    DIFFICULTY_RANKS,
    UNKNOWN_DIFFICULTY,
    SKILL_MATCH_BONUS,
    SKILL_MISMATCH_PENALTY,
    UNKNOWN_PREP_MINUTES,
    OVER_TIME_PENALTY,
    QUICK_MEAL_BONUS,
    UNKNOWN_INGREDIENT_COUNT,
    LOW_BUDGET_MAX_INGREDIENTS,
    LOW_BUDGET_PENALTY,
    HIGH_BUDGET_MIN_INGREDIENTS,
    HIGH_BUDGET_BONUS,
)
from prepgenie.services.matching.records import MatchProfile, MealCandidate


def nutrient(value) -> float:
    """Missing, non-numeric or non-finite nutrition values count as 0."""
    try:
        number = float(value)
    except (TypeError, ValueError):
        return 0.0
    return number if math.isfinite(number) else 0.0


def per_meal_calorie_target(profile: MatchProfile, meals_per_day: Optional[int] = None) -> float:
    if not meals_per_day or meals_per_day <= 0:
        meals_per_day = DEFAULT_MEALS_PER_DAY
    return profile.calorie_target / meals_per_day


def goal_bonus(meal: MealCandidate, goal: str) -> float:
    protein = nutrient(meal.protein_g)
    carbs = nutrient(meal.carbs_g)

    if goal == "muscle_gain":
        return MUSCLE_GAIN_PROTEIN_BONUS if protein >= MUSCLE_GAIN_PROTEIN_MIN_G else 0.0

    if goal == "weight_loss":
        bonus = 0.0
        if carbs <= WEIGHT_LOSS_CARBS_MAX_G:
            bonus += WEIGHT_LOSS_LOW_CARB_BONUS
        if protein >= WEIGHT_LOSS_PROTEIN_MIN_G:
            bonus += WEIGHT_LOSS_HIGH_PROTEIN_BONUS
        return bonus

    return 0.0


def calorie_proximity_bonus(calories: float, target: float) -> float:
    distance = abs(calories - target)
    return max(0.0, CALORIE_PROXIMITY_MAX_BONUS - distance / CALORIE_PROXIMITY_KCAL_PER_POINT)


def difficulty_rank(meal: MealCandidate) -> int:
    level = (meal.difficulty_level or UNKNOWN_DIFFICULTY).lower()
    return DIFFICULTY_RANKS.get(level, DIFFICULTY_RANKS[UNKNOWN_DIFFICULTY])


def within_skill(meal: MealCandidate, profile: MatchProfile) -> bool:
    """True when the profile states no skill, or the meal is not harder than it."""
    if not profile.cooking_skill_level:
        return True
    return difficulty_rank(meal) <= SKILL_RANKS[profile.cooking_skill_level]


def skill_term(meal: MealCandidate, profile: MatchProfile) -> float:
    if not profile.cooking_skill_level:
        return 0.0
    return SKILL_MATCH_BONUS if within_skill(meal, profile) else -SKILL_MISMATCH_PENALTY


def time_term(meal: MealCandidate, profile: MatchProfile) -> float:
    available = profile.time_available
    if not available:
        return 0.0
    prep = meal.prep_time if meal.prep_time is not None else UNKNOWN_PREP_MINUTES
    if prep > available:
        return -OVER_TIME_PENALTY
    if prep <= available / 2:
        return QUICK_MEAL_BONUS
    return 0.0


def budget_term(meal: MealCandidate, profile: MatchProfile) -> float:
    count = meal.ingredient_count if meal.ingredient_count is not None else UNKNOWN_INGREDIENT_COUNT
    if profile.budget_level == "low" and count > LOW_BUDGET_MAX_INGREDIENTS:
        return -LOW_BUDGET_PENALTY
    if profile.budget_level == "high" and count > HIGH_BUDGET_MIN_INGREDIENTS:
        return HIGH_BUDGET_BONUS
    return 0.0


def score_meal(
    meal: MealCandidate,
    profile: MatchProfile,
    used_meal_ids: AbstractSet = frozenset(),
    meals_per_day: Optional[int] = None,
) -> float:
    score = BASE_SCORE

    if used_meal_ids and meal.id in used_meal_ids:
        score -= REPEAT_PENALTY

    score += goal_bonus(meal, profile.goal)

    target = per_meal_calorie_target(profile, meals_per_day)
    score += calorie_proximity_bonus(nutrient(meal.calories), target)

    score += skill_term(meal, profile)
    score += time_term(meal, profile)
    score += budget_term(meal, profile)

    return score
