"""
Profile Service

Creates and updates user profiles and keeps their nutritional targets in sync.
"""

import logging
from typing import Any, Dict, Optional, Tuple

from sqlalchemy.exc import SQLAlchemyError

from prepgenie.extensions import db
from prepgenie.models.profile import UserProfile
from prepgenie.services.errors import NotFoundError
from prepgenie.services.nutrition_service import (
    apply_nutritional_targets,
    inches_to_cm,
    lbs_to_kg,
    validate_macros,
)

logger = logging.getLogger(__name__)

PROFILE_FIELDS = [
    "age", "gender", "activity_level", "goal", "dietary_preference", "locale",
    "cooking_skill_level", "time_available", "budget_level",
]


def get_profile(user_id: int) -> UserProfile:
    profile = db.session.get(UserProfile, user_id)
    if not profile:
        raise NotFoundError("Profile does not exist", code="PROFILE_NOT_FOUND")
    return profile


def upsert_profile(user_id: int, data: Dict[str, Any]) -> Tuple[UserProfile, Optional[Dict[str, int]], list]:
    """
    Create or update a profile from validated input.

    Args:
        user_id: Owner of the profile
        data: Output of ``UserProfileSchema().load``

    Returns:
        Tuple of (profile, computed targets or None, macro warnings)
    """
    profile = db.session.get(UserProfile, user_id)
    if not profile:
        profile = UserProfile(user_id=user_id)
        db.session.add(profile)

    for field in PROFILE_FIELDS:
        if field in data:
            setattr(profile, field, data[field])

    imperial = data.get("unit_system") == "imperial"
    if "weight" in data:
        profile.weight_kg = lbs_to_kg(data["weight"]) if imperial else data["weight"]
    if "height" in data:
        profile.height_cm = inches_to_cm(data["height"]) if imperial else data["height"]

    if "allergies" in data:
        allergies = []
        for allergy in data["allergies"] or []:
            # unknown allergies are kept; the filter only acts on known allergen keys
            key = allergy.strip().lower()
            if key and key not in allergies:
                allergies.append(key)
        profile.allergies = allergies

    if "daily_calorie_target" in data:
        profile.manual_calorie_target = data["daily_calorie_target"]
        if data["daily_calorie_target"] is None:
            profile.daily_calorie_target = None

    targets = apply_nutritional_targets(profile)

    warnings = []
    if targets is not None:
        warnings = validate_macros(targets)["warnings"]

    try:
        db.session.commit()
    except SQLAlchemyError:
        db.session.rollback()
        raise

    logger.info("Profile saved for user %s", user_id)
    return profile, targets, warnings
