"""
Weekly Plan Matcher

Builds a 7-day plan from a candidate pool without any AI call.

For every day and every slot (breakfast, lunch, dinner, then snacks):
1. Take the pool's meals of that slot's meal type.
2. Keep admissible meals that also satisfy the cuisine and prep-time settings
   and, when the profile states a cooking skill, are not too difficult.
   If none remain, drop those filters but keep dietary filtering.
   If still none, fall back to the unfiltered slot pool, but only when
   ``PlanSettings.allow_unfiltered_fallback`` is set.
3. Score the candidates against the meals already used in this plan and
   pick the best one (first seen wins on ties). With a medium or high
   variety level and an injected rng the pick is random among the top
   unused candidates; used meals only enter the window once every
   candidate has been used.

A slot that cannot be filled stays in the day with ``meal=None`` and is
reported in ``WeeklyPlan.shortages``; the caller decides what to do with it.
"""

import logging
from typing import Dict, List, Optional, Sequence, Tuple

from prepgenie.services.meal_constants import (
    DAYS_PER_WEEK,
    MAIN_MEAL_SLOTS,
    SNACK_SLOT,
    VARIETY_WINDOWS,
    RELAXATION_STRICT,
    RELAXATION_DIETARY_ONLY,
    RELAXATION_UNFILTERED,
)
from prepgenie.services.matching.dietary_filter import filter_admissible
from prepgenie.services.matching.records import (
    DayPlan,
    InvalidMatchInput,
    MatchProfile,
    MealCandidate,
    PlanSettings,
    PlanSlot,
    SlotShortage,
    WeeklyPlan,
)
from prepgenie.services.matching.scorer import nutrient, score_meal, within_skill

logger = logging.getLogger(__name__)


def slot_labels(meals_per_day: int) -> List[str]:
    labels = list(MAIN_MEAL_SLOTS)
    labels.extend([SNACK_SLOT] * max(0, meals_per_day - len(MAIN_MEAL_SLOTS)))
    return labels


def group_by_meal_type(pool: Sequence[MealCandidate]) -> Dict[str, List[MealCandidate]]:
    grouped: Dict[str, List[MealCandidate]] = {}
    for meal in pool:
        grouped.setdefault((meal.meal_type or "other").lower(), []).append(meal)
    return grouped


def passes_settings(meal: MealCandidate, settings: PlanSettings) -> bool:
    cuisine = settings.cuisine_filter
    if cuisine and (meal.cuisine_type or "").lower() != cuisine.lower():
        return False
    if settings.prep_time_max is not None:
        if meal.prep_time is None or meal.prep_time > settings.prep_time_max:
            return False
    return True


def candidates_for_slot(
    slot_pool: Sequence[MealCandidate],
    profile: MatchProfile,
    settings: PlanSettings,
) -> Tuple[List[MealCandidate], Optional[str]]:
    """Return the candidates for one slot and the relaxation level used to get them."""
    admissible = filter_admissible(slot_pool, profile)

    strict = [
        meal for meal in admissible
        if passes_settings(meal, settings) and within_skill(meal, profile)
    ]
    if strict:
        return strict, RELAXATION_STRICT

    if admissible:
        return admissible, RELAXATION_DIETARY_ONLY

    if settings.allow_unfiltered_fallback and slot_pool:
        return list(slot_pool), RELAXATION_UNFILTERED

    return [], None


def rank_candidates(
    candidates: Sequence[MealCandidate],
    profile: MatchProfile,
    used_meal_ids: set,
    meals_per_day: int,
) -> List[Tuple[float, MealCandidate]]:
    scored = [
        (score_meal(meal, profile, used_meal_ids, meals_per_day), meal)
        for meal in candidates
    ]
    # sort is stable, so equal scores keep input order
    scored.sort(key=lambda item: item[0], reverse=True)
    return scored


def pick_candidate(ranked, settings: PlanSettings, used_meal_ids: set, rng=None) -> Tuple[float, MealCandidate]:
    window = VARIETY_WINDOWS[settings.variety_level]
    if rng is None or window <= 1:
        return ranked[0]

    unused = [entry for entry in ranked if entry[1].id not in used_meal_ids]
    eligible = unused or ranked
    return eligible[rng.randrange(min(window, len(eligible)))]


def _apply_totals(plan: WeeklyPlan) -> None:
    for day in plan.days:
        for meal in day.meals:
            plan.total_calories += nutrient(meal.calories)
            plan.total_protein += nutrient(meal.protein_g)
            plan.total_carbs += nutrient(meal.carbs_g)
            plan.total_fats += nutrient(meal.fats_g)


def build_weekly_plan(
    pool: Sequence[MealCandidate],
    profile: MatchProfile,
    settings: Optional[PlanSettings] = None,
    rng=None,
) -> WeeklyPlan:
    """
    Assemble a weekly plan from ``pool``.

    Args:
        pool: Ordered candidate meals; order decides ties
        profile: Dietary preference, allergies, goal, calorie target and
            optional cooking skill, time available and budget level
        settings: Meals per day and optional cuisine / prep-time constraints
        rng: Optional source with ``randrange``; only used when the variety
            level is medium or high

    Returns:
        WeeklyPlan with 7 days of ``settings.meals_per_day`` slots each

    Raises:
        InvalidMatchInput: If profile, settings or pool entries have the wrong type
    """
    if not isinstance(profile, MatchProfile):
        raise InvalidMatchInput("profile must be a MatchProfile")
    if settings is None:
        settings = PlanSettings()
    if not isinstance(settings, PlanSettings):
        raise InvalidMatchInput("settings must be PlanSettings")

    pool = list(pool or [])
    if not all(isinstance(meal, MealCandidate) for meal in pool):
        raise InvalidMatchInput("pool must contain MealCandidate records")

    grouped = group_by_meal_type(pool)
    labels = slot_labels(settings.meals_per_day)

    # Filtering does not depend on the used set, so it runs once per slot type
    slot_candidates = {
        label: candidates_for_slot(grouped.get(label, []), profile, settings)
        for label in dict.fromkeys(labels)
    }
    for label, (candidates, relaxation) in slot_candidates.items():
        if relaxation and relaxation != RELAXATION_STRICT:
            logger.debug("Slot %s relaxed to %s (%d candidates)", label, relaxation, len(candidates))

    used_meal_ids = set()
    plan = WeeklyPlan()

    for day in range(DAYS_PER_WEEK):
        day_plan = DayPlan(day=day)

        for label in labels:
            candidates, relaxation = slot_candidates[label]
            if not candidates:
                day_plan.slots.append(PlanSlot(label=label))
                plan.shortages.append(SlotShortage(day=day, slot=label))
                continue

            ranked = rank_candidates(candidates, profile, used_meal_ids, settings.meals_per_day)
            score, meal = pick_candidate(ranked, settings, used_meal_ids, rng)

            used_meal_ids.add(meal.id)
            day_plan.slots.append(PlanSlot(label=label, meal=meal, relaxation=relaxation, score=score))

        plan.days.append(day_plan)

    _apply_totals(plan)

    if plan.shortages:
        logger.info("Weekly plan has %d unfilled slots", len(plan.shortages))

    return plan
