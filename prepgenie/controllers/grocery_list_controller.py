"""
Grocery List Controller Module

Handles grocery list endpoints:
- Generating a list from a stored meal plan
- Listing, reading and deleting lists
- Replacing list items (e.g. marking them purchased)
"""

from flask import current_app
from marshmallow import ValidationError
from sqlalchemy.exc import SQLAlchemyError

from prepgenie.schemas.grocery_list_schema import GenerateGroceryListSchema, UpdateGroceryListSchema
from prepgenie.services.errors import ServiceError
from prepgenie.services.grocery_list_service import (
    delete_grocery_list,
    generate_grocery_list,
    get_grocery_list,
    list_grocery_lists,
    update_grocery_items,
)
from prepgenie.services.meal_helpers import serialize_grocery_list
from prepgenie.utils.http import ok, error, json_body, arg_int, service_error, validation_error


def generate_grocery_list_handler(user_id: int, plan_id: int):
    """
    Build a grocery list from a meal plan.

    Body Parameters (optional):
        - name: List name, defaults to "Grocery list <date>"
    """
    try:
        data = GenerateGroceryListSchema().load(json_body())
    except ValidationError as e:
        return validation_error(e)

    try:
        grocery_list = generate_grocery_list(user_id, plan_id, data.get("name"))
    except ServiceError as e:
        return service_error(e)
    except SQLAlchemyError as e:
        current_app.logger.exception("Failed to create grocery list for plan %s", plan_id)
        return error("UNKNOWN_ERROR", str(e), 500)

    return ok(serialize_grocery_list(grocery_list), 201)


def list_grocery_lists_handler(user_id: int):
    limit = arg_int("limit", 20, 1, 100)
    return ok({"items": [serialize_grocery_list(gl) for gl in list_grocery_lists(user_id, limit)]})


def get_grocery_list_handler(user_id: int, list_id: int):
    try:
        grocery_list = get_grocery_list(user_id, list_id)
    except ServiceError as e:
        return service_error(e)
    return ok(serialize_grocery_list(grocery_list))


def update_grocery_list_handler(user_id: int, list_id: int):
    """
    Replace the items of a grocery list.

    Body Parameters:
        - items (required): [{name, quantity, unit, category, is_purchased}]
    """
    try:
        data = UpdateGroceryListSchema().load(json_body())
    except ValidationError as e:
        return validation_error(e)

    try:
        grocery_list = update_grocery_items(user_id, list_id, data["items"])
    except ServiceError as e:
        return service_error(e)
    except SQLAlchemyError as e:
        current_app.logger.exception("Failed to update grocery list %s", list_id)
        return error("UNKNOWN_ERROR", str(e), 500)

    return ok(serialize_grocery_list(grocery_list))


def delete_grocery_list_handler(user_id: int, list_id: int):
    try:
        delete_grocery_list(user_id, list_id)
    except ServiceError as e:
        return service_error(e)
    except SQLAlchemyError as e:
        current_app.logger.exception("Failed to delete grocery list %s", list_id)
        return error("UNKNOWN_ERROR", str(e), 500)

    return ok({"message": "Grocery list deleted successfully"})
