"""
Meal Controller Module

Handles the seed meal catalog and user-owned meal CRUD.
"""

from flask import current_app, request
from marshmallow import ValidationError
from sqlalchemy.exc import SQLAlchemyError

from prepgenie.schemas.meal_schema import CreateMealSchema, ListMealQuerySchema, UpdateMealSchema
from prepgenie.services.errors import ServiceError
from prepgenie.services.meal_helpers import serialize_meal
from prepgenie.services.meal_service import (
    create_user_meal,
    delete_user_meal,
    get_meal,
    list_seed_meals,
    update_user_meal,
)
from prepgenie.utils.http import ok, error, json_body, service_error, validation_error


def list_meals_handler():
    """
    List seed meals.

    Query Parameters:
        - page, limit: Pagination
        - search: Name search
        - meal_type: breakfast/lunch/dinner/snack
        - locale: en/ja
    """
    try:
        query = ListMealQuerySchema().load(request.args.to_dict())
    except ValidationError as e:
        return validation_error(e)

    return ok(list_seed_meals(**query))


def get_meal_handler(meal_id: int):
    try:
        meal = get_meal(meal_id)
    except ServiceError as e:
        return service_error(e)
    return ok(serialize_meal(meal))


def create_meal_handler(user_id: int):
    try:
        data = CreateMealSchema().load(json_body())
    except ValidationError as e:
        return validation_error(e)

    try:
        meal = create_user_meal(user_id, data)
    except SQLAlchemyError as e:
        current_app.logger.exception("Failed to create meal for user %s", user_id)
        return error("UNKNOWN_ERROR", str(e), 500)

    return ok(serialize_meal(meal), 201)


def update_meal_handler(user_id: int, meal_id: int):
    try:
        data = UpdateMealSchema().load(json_body())
    except ValidationError as e:
        return validation_error(e)

    try:
        meal = update_user_meal(user_id, meal_id, data)
    except ServiceError as e:
        return service_error(e)
    except SQLAlchemyError as e:
        current_app.logger.exception("Failed to update meal %s", meal_id)
        return error("UNKNOWN_ERROR", str(e), 500)

    return ok(serialize_meal(meal))


def delete_meal_handler(user_id: int, meal_id: int):
    try:
        delete_user_meal(user_id, meal_id)
    except ServiceError as e:
        return service_error(e)
    except SQLAlchemyError as e:
        current_app.logger.exception("Failed to delete meal %s", meal_id)
        return error("UNKNOWN_ERROR", str(e), 500)

    return ok({"message": "Meal deleted successfully"})
