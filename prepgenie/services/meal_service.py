"""
Meal Service

Handles meal CRUD operations and loading candidate pools for the matcher.
"""

import logging
from typing import Any, Dict, List, Optional

from sqlalchemy.exc import SQLAlchemyError

from prepgenie.extensions import db
from prepgenie.models.meal import Meal
from prepgenie.models.meal_plan import MealPlanItem
from prepgenie.services.allergen_service import merge_allergen_tags
from prepgenie.services.errors import ForbiddenError, NotFoundError
from prepgenie.services.meal_helpers import serialize_meal

logger = logging.getLogger(__name__)

MEAL_FIELDS = [
    "name", "description", "meal_type", "cuisine_type", "difficulty_level",
    "prep_time", "cook_time", "servings", "calories_per_serving",
    "protein_per_serving", "carbs_per_serving", "fats_per_serving",
    "ingredients", "instructions", "dietary_tags", "tags", "locale",
]


def list_seed_meals(
    page: int = 1,
    limit: int = 20,
    search: Optional[str] = None,
    meal_type: Optional[str] = None,
    locale: Optional[str] = None
) -> Dict[str, Any]:
    """
    List seed meals with search, filter, and pagination.

    Args:
        page: Page number
        limit: Items per page
        search: Search term for the meal name
        meal_type: Filter by meal type
        locale: Filter by locale

    Returns:
        Dictionary with items, pagination info
    """
    query = Meal.query.filter(Meal.is_seed_meal.is_(True))

    if search:
        query = query.filter(Meal.name.ilike(f"%{search}%"))

    if meal_type:
        query = query.filter(Meal.meal_type == meal_type)

    if locale:
        query = query.filter(Meal.locale == locale)

    query = query.order_by(Meal.meal_type, Meal.name)

    pagination = query.paginate(page=page, per_page=limit, error_out=False)

    return {
        "items": [serialize_meal(meal) for meal in pagination.items],
        "total": pagination.total,
        "page": page,
        "limit": limit,
        "pages": pagination.pages
    }


def get_meal(meal_id: int) -> Meal:
    meal = db.session.get(Meal, meal_id)
    if not meal:
        raise NotFoundError("Meal does not exist", code="MEAL_NOT_FOUND")
    return meal


def get_owned_meal(user_id: int, meal_id: int) -> Meal:
    """Fetch a meal the user may modify; seed meals are read-only."""
    meal = get_meal(meal_id)
    if meal.is_seed_meal or meal.user_id != user_id:
        raise ForbiddenError("Meal is not owned by this user")
    return meal


def create_user_meal(user_id: int, data: Dict[str, Any]) -> Meal:
    """
    Create a user-owned meal.

    Allergen tags detected from the ingredient names are merged into the
    meal's dietary tags.
    """
    meal = Meal(user_id=user_id, is_seed_meal=False, is_ai_generated=False)
    for field in MEAL_FIELDS:
        if field in data:
            setattr(meal, field, data[field])

    meal.dietary_tags = merge_allergen_tags(data.get("dietary_tags") or [], data.get("ingredients") or [])

    try:
        db.session.add(meal)
        db.session.commit()
    except SQLAlchemyError:
        db.session.rollback()
        raise

    logger.info("Meal %s created by user %s", meal.id, user_id)
    return meal


def update_user_meal(user_id: int, meal_id: int, data: Dict[str, Any]) -> Meal:
    meal = get_owned_meal(user_id, meal_id)

    for field in MEAL_FIELDS:
        if field in data:
            setattr(meal, field, data[field])

    if "dietary_tags" in data or "ingredients" in data:
        meal.dietary_tags = merge_allergen_tags(meal.dietary_tags or [], meal.ingredients or [])

    try:
        db.session.commit()
    except SQLAlchemyError:
        db.session.rollback()
        raise

    return meal


def delete_user_meal(user_id: int, meal_id: int) -> None:
    meal = get_owned_meal(user_id, meal_id)

    # plans must keep pointing at real rows
    if MealPlanItem.query.filter_by(meal_id=meal.id).first():
        raise ForbiddenError("Meal is used in a meal plan", code="MEAL_IN_USE")

    try:
        db.session.delete(meal)
        db.session.commit()
    except SQLAlchemyError:
        db.session.rollback()
        raise


def load_seed_pool(locale: str, fallback_locale: str = "en") -> List[Meal]:
    """
    Load seed meals for a locale in a stable order.

    Falls back to ``fallback_locale`` when the locale has no seed meals.
    """
    def _query(loc):
        return (
            Meal.query
            .filter(Meal.is_seed_meal.is_(True), Meal.locale == loc)
            .order_by(Meal.id)
            .all()
        )

    meals = _query(locale)
    if not meals and locale != fallback_locale:
        logger.info("No seed meals for locale %s, falling back to %s", locale, fallback_locale)
        meals = _query(fallback_locale)
    return meals


def load_swap_pool(user_id: int, meal_type: str, locale: str) -> List[Meal]:
    """Seed meals plus the user's own meals of one meal type and locale."""
    return (
        Meal.query
        .filter(
            Meal.meal_type == meal_type,
            Meal.locale == locale,
            db.or_(Meal.is_seed_meal.is_(True), Meal.user_id == user_id),
        )
        .order_by(Meal.id)
        .all()
    )
