"""
Swap Candidate Selector

Picks one replacement for a meal already in a plan. Unlike the weekly
matcher the final pick is random within a small window, so repeated swap
requests for the same meal produce different suggestions.
"""

import random
from typing import List, Optional, Sequence

from prepgenie.services.meal_constants import (
    BUDGET_MAX_PREP_MINUTES,
    DEFAULT_SWAP_WINDOW,
    MACRO_HIGH_PROTEIN_MIN_G,
    MACRO_LOW_CARB_MAX_G,
    MACRO_LOW_FAT_MAX_G,
)
from prepgenie.services.matching.dietary_filter import is_admissible
from prepgenie.services.matching.records import InvalidMatchInput, MatchProfile, MealCandidate, plain_value
from prepgenie.services.matching.scorer import nutrient
from prepgenie.utils.enums import DietaryRestriction, MacroGoal, SwapType, values


def _same_slot(meal: MealCandidate, original: MealCandidate) -> bool:
    return (
        meal.id != original.id
        and (meal.meal_type or "").lower() == (original.meal_type or "").lower()
        and meal.locale == original.locale
    )


def _macro_predicate(macro_goal: str):
    # a meal with an unknown value for the macro never qualifies
    if macro_goal == MacroGoal.HIGH_PROTEIN.value:
        return lambda meal: meal.protein_g is not None and nutrient(meal.protein_g) >= MACRO_HIGH_PROTEIN_MIN_G
    if macro_goal == MacroGoal.LOW_CARB.value:
        return lambda meal: meal.carbs_g is not None and nutrient(meal.carbs_g) <= MACRO_LOW_CARB_MAX_G
    return lambda meal: meal.fats_g is not None and nutrient(meal.fats_g) <= MACRO_LOW_FAT_MAX_G


def swap_candidates(
    pool: Sequence[MealCandidate],
    original: MealCandidate,
    swap_type: str,
    dietary_restriction: Optional[str] = None,
    macro_goal: Optional[str] = None,
    profile: Optional[MatchProfile] = None,
) -> List[MealCandidate]:
    """All meals that qualify for the swap, in preference order."""
    swap_type = plain_value(swap_type)
    dietary_restriction = plain_value(dietary_restriction)
    macro_goal = plain_value(macro_goal)

    if swap_type not in values(SwapType):
        raise InvalidMatchInput(f"Unknown swap type: {swap_type!r}")
    if swap_type == SwapType.DIETARY.value:
        if not dietary_restriction:
            raise InvalidMatchInput("Dietary restriction required for dietary swap")
        if dietary_restriction not in values(DietaryRestriction):
            raise InvalidMatchInput(f"Unknown dietary restriction: {dietary_restriction!r}")
    if swap_type == SwapType.MACRO.value:
        if not macro_goal:
            raise InvalidMatchInput("Macro goal required for macro swap")
        if macro_goal not in values(MacroGoal):
            raise InvalidMatchInput(f"Unknown macro goal: {macro_goal!r}")

    base = [meal for meal in pool if _same_slot(meal, original)]
    if profile is not None:
        base = [meal for meal in base if is_admissible(meal, profile)]

    if swap_type == SwapType.BUDGET.value:
        matches = [
            meal for meal in base
            if meal.prep_time is not None and meal.prep_time <= BUDGET_MAX_PREP_MINUTES
        ]
        matches.sort(key=lambda meal: meal.prep_time)
        return matches

    if swap_type == SwapType.SPEED.value:
        if original.prep_time is None:
            return []
        matches = [
            meal for meal in base
            if meal.prep_time is not None and meal.prep_time < original.prep_time
        ]
        matches.sort(key=lambda meal: meal.prep_time)
        return matches

    if swap_type == SwapType.DIETARY.value:
        return [meal for meal in base if dietary_restriction in meal.dietary_tags]

    predicate = _macro_predicate(macro_goal)
    return [meal for meal in base if predicate(meal)]


def find_swap_candidate(
    pool: Sequence[MealCandidate],
    original: MealCandidate,
    swap_type: str,
    dietary_restriction: Optional[str] = None,
    macro_goal: Optional[str] = None,
    profile: Optional[MatchProfile] = None,
    rng=None,
    window: int = DEFAULT_SWAP_WINDOW,
) -> Optional[MealCandidate]:
    """
    Pick a replacement meal at random from the best ``window`` matches.

    Returns None when nothing in the pool qualifies; the caller is then
    expected to fall back to generating a new meal.
    """
    if not isinstance(original, MealCandidate):
        raise InvalidMatchInput("original meal must be a MealCandidate")

    matches = swap_candidates(pool, original, swap_type, dietary_restriction, macro_goal, profile)
    if not matches:
        return None

    top = matches[:max(1, window)]
    if rng is None:
        rng = random.Random()
    return top[rng.randrange(len(top))]
