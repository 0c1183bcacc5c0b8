from flask import current_app
from marshmallow import ValidationError
from sqlalchemy.exc import SQLAlchemyError

from prepgenie.schemas.profile_schema import UserProfileSchema
from prepgenie.services.errors import ServiceError
from prepgenie.services.meal_helpers import serialize_profile
from prepgenie.services.profile_service import get_profile, upsert_profile
from prepgenie.utils.http import ok, error, json_body, service_error, validation_error


def upsert_profile_handler(user_id: int):
    """
    Create or update a user's profile and recompute nutritional targets.

    Body Parameters (all optional):
        - age, weight, height, unit_system (metric/imperial)
        - gender, activity_level, goal, dietary_preference
        - allergies: list of allergy names
        - locale
        - daily_calorie_target: manual override
    """
    try:
        data = UserProfileSchema().load(json_body())
    except ValidationError as e:
        return validation_error(e)

    try:
        profile, targets, warnings = upsert_profile(user_id, data)
    except SQLAlchemyError as e:
        current_app.logger.exception("Failed to save profile for user %s", user_id)
        return error("UNKNOWN_ERROR", str(e), 500)

    return ok({
        "profile": serialize_profile(profile),
        "targets": targets,
        "warnings": warnings,
    })


def get_profile_handler(user_id: int):
    try:
        profile = get_profile(user_id)
    except ServiceError as e:
        return service_error(e)
    return ok(serialize_profile(profile))
