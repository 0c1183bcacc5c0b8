"""
Swap Service

Replaces a single meal in a stored plan with a matching alternative.
"""

import logging
from typing import Optional

from sqlalchemy.exc import SQLAlchemyError

from prepgenie.extensions import db
from prepgenie.models.meal_plan import MealPlanItem
from prepgenie.models.profile import UserProfile
from prepgenie.services.errors import NotFoundError
from prepgenie.services.matching import find_swap_candidate
from prepgenie.services.meal_constants import DEFAULT_SWAP_WINDOW
from prepgenie.services.meal_helpers import to_candidate, to_match_profile
from prepgenie.services.meal_plan_service import get_plan, get_plan_item, recompute_totals
from prepgenie.services.meal_service import load_swap_pool

logger = logging.getLogger(__name__)


def swap_meal(
    user_id: int,
    plan_id: int,
    item_id: int,
    swap_type: str,
    dietary_restriction: Optional[str] = None,
    macro_goal: Optional[str] = None,
    rng=None,
    window: int = DEFAULT_SWAP_WINDOW,
) -> MealPlanItem:
    """
    Swap the meal of one plan item.

    The pool is the seed meals plus the user's own meals with the same meal
    type and locale. When the user has a profile, its dietary preference and
    allergies also apply to the replacement.

    Raises:
        NotFoundError: If the plan or item does not exist, or with code
            NO_SWAP_CANDIDATE when nothing qualifies
        InvalidMatchInput: If the swap request is malformed
    """
    plan = get_plan(user_id, plan_id)
    item = get_plan_item(plan, item_id)
    original = item.meal

    profile = db.session.get(UserProfile, user_id)
    match_profile = to_match_profile(profile) if profile else None

    pool = load_swap_pool(user_id, original.meal_type, original.locale)
    candidate = find_swap_candidate(
        [to_candidate(meal) for meal in pool],
        to_candidate(original),
        swap_type,
        dietary_restriction=dietary_restriction,
        macro_goal=macro_goal,
        profile=match_profile,
        rng=rng,
        window=window,
    )

    if candidate is None:
        logger.info("No %s swap candidate for plan item %s", swap_type, item_id)
        raise NotFoundError(
            "No suitable swap candidates found",
            code="NO_SWAP_CANDIDATE",
            fallback="ai_generation",
        )

    item.meal = next(meal for meal in pool if meal.id == candidate.id)
    recompute_totals(plan)

    try:
        db.session.commit()
    except SQLAlchemyError:
        db.session.rollback()
        raise

    logger.info("Swapped plan item %s from meal %s to %s", item_id, original.id, candidate.id)
    return item
