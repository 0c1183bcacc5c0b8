"""
Meal Plan Service

Generates instant weekly meal plans from seed meals and manages stored plans.
"""

import logging
from datetime import date, timedelta
from typing import Any, Dict, List, Optional, Tuple

from sqlalchemy import desc
from sqlalchemy.exc import SQLAlchemyError

from prepgenie.extensions import db
from prepgenie.models.meal_plan import MealPlan, MealPlanItem
from prepgenie.models.profile import UserProfile
from prepgenie.services.errors import NoCandidatesError, NotFoundError, ProfileRequiredError
from prepgenie.services.matching import PlanSettings, SlotShortage, build_weekly_plan
from prepgenie.services.meal_constants import DAYS_PER_WEEK
from prepgenie.services.meal_helpers import to_candidate, to_match_profile
from prepgenie.services.meal_service import load_seed_pool

logger = logging.getLogger(__name__)


def _require_profile(user_id: int) -> UserProfile:
    profile = db.session.get(UserProfile, user_id)
    if not profile:
        raise ProfileRequiredError("Create a profile before generating a meal plan")
    return profile


def generate_instant_plan(
    user_id: int,
    settings_data: Dict[str, Any],
    allow_unfiltered: bool = False,
    allow_partial: bool = False,
    rng=None,
    fallback_locale: str = "en",
) -> Tuple[MealPlan, List[SlotShortage]]:
    """
    Build and store a 7-day plan from seed meals.

    Args:
        user_id: Owner of the plan
        settings_data: Output of ``MealPlanSettingsSchema().load``
        allow_unfiltered: Let empty slots fall back to meals that ignore dietary filtering
        allow_partial: Store the plan even if some slots stay empty
        rng: Random source for the variety window
        fallback_locale: Locale used when the profile's locale has no seed meals

    Returns:
        Tuple of (stored MealPlan, unfilled slots)

    Raises:
        ProfileRequiredError: If the user has no profile
        NotFoundError: If there are no seed meals at all
        NoCandidatesError: If slots stay empty and partial plans are not allowed
        InvalidMatchInput: If the profile or settings cannot be matched against
    """
    profile = _require_profile(user_id)

    meals = load_seed_pool(profile.locale or fallback_locale, fallback_locale)
    if not meals:
        raise NotFoundError("No seed meals available", code="NO_SEED_MEALS")

    settings = PlanSettings(
        meals_per_day=settings_data.get("meals_per_day"),
        cuisine_type=settings_data.get("cuisine_type"),
        prep_time_max=settings_data.get("prep_time_max"),
        variety_level=settings_data.get("variety_level") or "low",
        allow_unfiltered_fallback=allow_unfiltered,
    )

    weekly = build_weekly_plan(
        [to_candidate(meal) for meal in meals],
        to_match_profile(profile),
        settings,
        rng=rng,
    )

    if weekly.shortages and not allow_partial:
        raise NoCandidatesError(
            "Not enough meals match the profile to fill the plan",
            shortages=shortages_payload(weekly.shortages),
        )

    start = settings_data.get("start_date") or date.today()
    plan = MealPlan(
        user_id=user_id,
        name=settings_data.get("name") or f"Weekly plan {start.isoformat()}",
        type="weekly",
        start_date=start,
        end_date=start + timedelta(days=DAYS_PER_WEEK - 1),
        total_calories=int(round(weekly.total_calories)),
        total_protein=round(weekly.total_protein, 2),
        total_carbs=round(weekly.total_carbs, 2),
        total_fats=round(weekly.total_fats, 2),
    )

    meal_map = {meal.id: meal for meal in meals}
    for day in weekly.days:
        for slot in day.slots:
            if slot.meal is None:
                continue
            plan.items.append(MealPlanItem(
                meal=meal_map[slot.meal.id],
                day_of_week=day.day,
                meal_time=slot.label,
                servings=1,
            ))

    try:
        db.session.add(plan)
        db.session.commit()
    except SQLAlchemyError:
        db.session.rollback()
        raise

    logger.info(
        "Generated meal plan %s for user %s (%d items, %d unfilled)",
        plan.id, user_id, len(plan.items), len(weekly.shortages),
    )
    return plan, weekly.shortages


def list_plans(user_id: int, limit: int = 20) -> List[MealPlan]:
    return (
        MealPlan.query
        .filter_by(user_id=user_id)
        .order_by(desc(MealPlan.created_at), desc(MealPlan.id))
        .limit(limit)
        .all()
    )


def get_plan(user_id: int, plan_id: int) -> MealPlan:
    plan = MealPlan.query.filter_by(id=plan_id, user_id=user_id).first()
    if not plan:
        raise NotFoundError("Meal plan does not exist", code="PLAN_NOT_FOUND")
    return plan


def get_plan_item(plan: MealPlan, item_id: int) -> MealPlanItem:
    for item in plan.items:
        if item.id == item_id:
            return item
    raise NotFoundError("Meal plan item does not exist", code="PLAN_ITEM_NOT_FOUND")


def delete_plan(user_id: int, plan_id: int) -> None:
    plan = get_plan(user_id, plan_id)
    try:
        db.session.delete(plan)
        db.session.commit()
    except SQLAlchemyError:
        db.session.rollback()
        raise


def set_item_completed(user_id: int, plan_id: int, item_id: int, is_completed: bool) -> MealPlanItem:
    plan = get_plan(user_id, plan_id)
    item = get_plan_item(plan, item_id)
    item.is_completed = bool(is_completed)
    try:
        db.session.commit()
    except SQLAlchemyError:
        db.session.rollback()
        raise
    return item


def recompute_totals(plan: MealPlan) -> Dict[str, float]:
    """Recalculate plan totals from its items; does not commit."""
    totals = {"calories": 0.0, "protein": 0.0, "carbs": 0.0, "fats": 0.0}
    for item in plan.items:
        meal = item.meal
        if meal is None:
            continue
        servings = item.servings or 1
        totals["calories"] += float(meal.calories_per_serving or 0) * servings
        totals["protein"] += float(meal.protein_per_serving or 0) * servings
        totals["carbs"] += float(meal.carbs_per_serving or 0) * servings
        totals["fats"] += float(meal.fats_per_serving or 0) * servings

    plan.total_calories = int(round(totals["calories"]))
    plan.total_protein = round(totals["protein"], 2)
    plan.total_carbs = round(totals["carbs"], 2)
    plan.total_fats = round(totals["fats"], 2)
    return totals


def shortages_payload(shortages: Optional[List[SlotShortage]]) -> List[Dict[str, Any]]:
    return [{"day": s.day, "slot": s.slot} for s in shortages or []]
