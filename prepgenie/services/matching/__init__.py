from .records import (
    DayPlan,
    InvalidMatchInput,
    MatchProfile,
    MealCandidate,
    PlanSettings,
    PlanSlot,
    SlotShortage,
    WeeklyPlan,
)
from .dietary_filter import filter_admissible, is_admissible, normalize_allergy
from .scorer import score_meal, per_meal_calorie_target
from .plan_matcher import build_weekly_plan
from .swap_selector import find_swap_candidate, swap_candidates

__all__ = [
    "DayPlan",
    "InvalidMatchInput",
    "MatchProfile",
    "MealCandidate",
    "PlanSettings",
    "PlanSlot",
    "SlotShortage",
    "WeeklyPlan",
    "filter_admissible",
    "is_admissible",
    "normalize_allergy",
    "score_meal",
    "per_meal_calorie_target",
    "build_weekly_plan",
    "find_swap_candidate",
    "swap_candidates",
]
