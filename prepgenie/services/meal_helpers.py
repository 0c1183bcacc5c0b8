"""
Meal Helper Functions

Conversions between database rows, matching records and response payloads.
"""

from typing import Any, Dict, Optional

from prepgenie.models.grocery_list import GroceryList
from prepgenie.models.meal import Meal
from prepgenie.models.meal_plan import MealPlan, MealPlanItem
from prepgenie.models.profile import UserProfile
from prepgenie.services.matching import MatchProfile, MealCandidate


def _float_or_none(value) -> Optional[float]:
    return float(value) if value is not None else None


def to_candidate(meal: Meal) -> MealCandidate:
    return MealCandidate(
        id=meal.id,
        meal_type=meal.meal_type,
        name=meal.name,
        calories=_float_or_none(meal.calories_per_serving),
        protein_g=_float_or_none(meal.protein_per_serving),
        carbs_g=_float_or_none(meal.carbs_per_serving),
        fats_g=_float_or_none(meal.fats_per_serving),
        prep_time=meal.prep_time,
        dietary_tags=meal.dietary_tags or [],
        cuisine_type=meal.cuisine_type,
        difficulty_level=meal.difficulty_level,
        ingredient_count=len(meal.ingredients) if meal.ingredients is not None else None,
        locale=meal.locale,
        is_seed_meal=bool(meal.is_seed_meal),
        user_id=meal.user_id,
    )


def to_match_profile(profile: UserProfile) -> MatchProfile:
    return MatchProfile(
        dietary_preference=profile.dietary_preference,
        allergies=tuple(profile.allergies or []),
        goal=profile.goal,
        daily_calorie_target=profile.daily_calorie_target,
        locale=profile.locale,
        cooking_skill_level=profile.cooking_skill_level,
        time_available=profile.time_available,
        budget_level=profile.budget_level,
    )


def serialize_meal(meal: Meal) -> Dict[str, Any]:
    return {
        "id": meal.id,
        "user_id": meal.user_id,
        "name": meal.name,
        "description": meal.description,
        "meal_type": meal.meal_type,
        "cuisine_type": meal.cuisine_type,
        "difficulty_level": meal.difficulty_level,
        "prep_time": meal.prep_time,
        "cook_time": meal.cook_time,
        "servings": meal.servings,
        "nutrition_per_serving": {
            "calories": meal.calories_per_serving,
            "protein": _float_or_none(meal.protein_per_serving),
            "carbs": _float_or_none(meal.carbs_per_serving),
            "fats": _float_or_none(meal.fats_per_serving),
        },
        "ingredients": meal.ingredients or [],
        "instructions": meal.instructions or [],
        "dietary_tags": meal.dietary_tags or [],
        "tags": meal.tags or [],
        "locale": meal.locale,
        "is_seed_meal": meal.is_seed_meal,
        "is_ai_generated": meal.is_ai_generated,
    }


def serialize_profile(profile: UserProfile) -> Dict[str, Any]:
    return {
        "user_id": profile.user_id,
        "age": profile.age,
        "weight_kg": _float_or_none(profile.weight_kg),
        "height_cm": _float_or_none(profile.height_cm),
        "gender": profile.gender,
        "activity_level": profile.activity_level,
        "goal": profile.goal,
        "dietary_preference": profile.dietary_preference,
        "allergies": profile.allergies or [],
        "cooking_skill_level": profile.cooking_skill_level,
        "time_available": profile.time_available,
        "budget_level": profile.budget_level,
        "locale": profile.locale,
        "tdee": profile.tdee,
        "daily_calorie_target": profile.daily_calorie_target,
        "manual_calorie_target": profile.manual_calorie_target,
        "target_protein": profile.target_protein,
        "target_carbs": profile.target_carbs,
        "target_fats": profile.target_fats,
        "updated_at": profile.updated_at.isoformat() if profile.updated_at else None,
    }


def serialize_plan_item(item: MealPlanItem) -> Dict[str, Any]:
    return {
        "id": item.id,
        "meal_id": item.meal_id,
        "day_of_week": item.day_of_week,
        "meal_time": item.meal_time,
        "servings": item.servings,
        "is_completed": item.is_completed,
        "meal": serialize_meal(item.meal) if item.meal else None,
    }


def serialize_plan(plan: MealPlan, include_items: bool = False) -> Dict[str, Any]:
    payload = {
        "id": plan.id,
        "user_id": plan.user_id,
        "name": plan.name,
        "type": plan.type,
        "start_date": plan.start_date.isoformat() if plan.start_date else None,
        "end_date": plan.end_date.isoformat() if plan.end_date else None,
        "totals": {
            "calories": int(plan.total_calories or 0),
            "protein": float(plan.total_protein or 0),
            "carbs": float(plan.total_carbs or 0),
            "fats": float(plan.total_fats or 0),
        },
        "created_at": plan.created_at.isoformat() if plan.created_at else None,
    }
    if include_items:
        payload["items"] = [serialize_plan_item(item) for item in plan.items]
    return payload


def serialize_grocery_list(grocery_list: GroceryList) -> Dict[str, Any]:
    return {
        "id": grocery_list.id,
        "user_id": grocery_list.user_id,
        "meal_plan_id": grocery_list.meal_plan_id,
        "name": grocery_list.name,
        "items": grocery_list.items or [],
        "estimated_cost": _float_or_none(grocery_list.estimated_cost),
        "created_at": grocery_list.created_at.isoformat() if grocery_list.created_at else None,
    }
