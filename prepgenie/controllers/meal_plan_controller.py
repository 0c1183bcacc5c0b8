"""
Meal Plan Controller Module

Handles meal plan endpoints:
- Instant weekly plan generation from seed meals
- Plan listing, detail and deletion
- Marking plan items completed
- Swapping a single meal in a plan
"""

import random

from flask import current_app
from marshmallow import ValidationError
from sqlalchemy.exc import SQLAlchemyError

from prepgenie.schemas.meal_plan_schema import (
    MealPlanSettingsSchema,
    SwapMealSchema,
    UpdateMealPlanItemSchema,
)
from prepgenie.services.errors import ServiceError
from prepgenie.services.matching import InvalidMatchInput
from prepgenie.services.meal_helpers import serialize_plan, serialize_plan_item
from prepgenie.services.meal_plan_service import (
    delete_plan,
    generate_instant_plan,
    get_plan,
    list_plans,
    set_item_completed,
    shortages_payload,
)
from prepgenie.services.swap_service import swap_meal
from prepgenie.utils.http import ok, error, json_body, arg_int, service_error, validation_error


def generate_plan_handler(user_id: int):
    """
    Generate and store an instant 7-day plan.

    Body Parameters (all optional):
        - name: Plan name
        - cuisine_type: Preferred cuisine, or "any"
        - meals_per_day: 3, 4 or 5
        - variety_level: low/medium/high
        - prep_time_max: Maximum prep minutes (10-120)
        - start_date: ISO date, defaults to today
    """
    try:
        settings_data = MealPlanSettingsSchema().load(json_body())
    except ValidationError as e:
        return validation_error(e)

    cfg = current_app.config
    try:
        plan, shortages = generate_instant_plan(
            user_id,
            settings_data,
            allow_unfiltered=cfg.get("PLAN_ALLOW_UNFILTERED_FALLBACK", False),
            allow_partial=cfg.get("PLAN_ALLOW_PARTIAL", False),
            rng=random.Random(),
            fallback_locale=cfg.get("DEFAULT_LOCALE", "en"),
        )
    except ServiceError as e:
        return service_error(e)
    except InvalidMatchInput as e:
        return error("INVALID_INPUT", str(e), 400)
    except SQLAlchemyError as e:
        current_app.logger.exception("Failed to store meal plan for user %s", user_id)
        return error("UNKNOWN_ERROR", str(e), 500)

    payload = serialize_plan(plan, include_items=True)
    payload["shortages"] = shortages_payload(shortages)
    return ok(payload, 201)


def list_plans_handler(user_id: int):
    limit = arg_int("limit", 20, 1, 100)
    return ok({"items": [serialize_plan(plan) for plan in list_plans(user_id, limit)]})


def get_plan_handler(user_id: int, plan_id: int):
    try:
        plan = get_plan(user_id, plan_id)
    except ServiceError as e:
        return service_error(e)
    return ok(serialize_plan(plan, include_items=True))


def delete_plan_handler(user_id: int, plan_id: int):
    try:
        delete_plan(user_id, plan_id)
    except ServiceError as e:
        return service_error(e)
    except SQLAlchemyError as e:
        current_app.logger.exception("Failed to delete meal plan %s", plan_id)
        return error("UNKNOWN_ERROR", str(e), 500)

    return ok({"message": "Meal plan deleted successfully"})


def update_plan_item_handler(user_id: int, plan_id: int, item_id: int):
    try:
        data = UpdateMealPlanItemSchema().load(json_body())
    except ValidationError as e:
        return validation_error(e)

    try:
        item = set_item_completed(user_id, plan_id, item_id, data["is_completed"])
    except ServiceError as e:
        return service_error(e)
    except SQLAlchemyError as e:
        current_app.logger.exception("Failed to update plan item %s", item_id)
        return error("UNKNOWN_ERROR", str(e), 500)

    return ok(serialize_plan_item(item))


def swap_item_handler(user_id: int, plan_id: int, item_id: int):
    """
    Swap one meal in a plan.

    Body Parameters:
        - swap_type (required): budget/speed/dietary/macro
        - dietary_restriction: Required for dietary swaps
        - macro_goal: Required for macro swaps
    """
    try:
        data = SwapMealSchema().load(json_body())
    except ValidationError as e:
        return validation_error(e)

    try:
        item = swap_meal(
            user_id,
            plan_id,
            item_id,
            data["swap_type"],
            dietary_restriction=data.get("dietary_restriction"),
            macro_goal=data.get("macro_goal"),
            rng=random.Random(),
            window=current_app.config.get("SWAP_CANDIDATE_WINDOW", 10),
        )
    except ServiceError as e:
        return service_error(e)
    except InvalidMatchInput as e:
        return error("INVALID_INPUT", str(e), 400)
    except SQLAlchemyError as e:
        current_app.logger.exception("Failed to swap plan item %s", item_id)
        return error("UNKNOWN_ERROR", str(e), 500)

    return ok({
        "item": serialize_plan_item(item),
        "plan": serialize_plan(item.meal_plan),
    })
