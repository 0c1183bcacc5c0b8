"""
Matching Records

Plain, immutable data handed to and returned from the matching engine.
Nothing here touches Flask or the database; the plan and swap services
convert ORM rows into these records before calling the engine.
"""

from collections.abc import Iterable
from dataclasses import dataclass, field
from typing import FrozenSet, List, Optional, Tuple

from prepgenie.services.meal_constants import (
    DEFAULT_CALORIE_TARGET,
    DEFAULT_MEALS_PER_DAY,
    MIN_MEALS_PER_DAY,
    MAX_MEALS_PER_DAY,
    VARIETY_WINDOWS,
)
from prepgenie.utils.enums import BudgetLevel, CookingSkill, DietaryPreference, Goal, values


class InvalidMatchInput(ValueError):
    """Raised when a profile, settings or swap request cannot be matched against."""


def plain_value(value):
    # Enum members hash by name, so unwrap them before dictionary lookups
    return getattr(value, "value", value)


@dataclass(frozen=True)
class MealCandidate:
    id: object
    meal_type: str
    name: str = ""
    calories: Optional[float] = None
    protein_g: Optional[float] = None
    carbs_g: Optional[float] = None
    fats_g: Optional[float] = None
    prep_time: Optional[int] = None
    dietary_tags: FrozenSet[str] = field(default_factory=frozenset)
    cuisine_type: Optional[str] = None
    difficulty_level: Optional[str] = None
    ingredient_count: Optional[int] = None
    locale: str = "en"
    is_seed_meal: bool = False
    user_id: Optional[int] = None

    def __post_init__(self):
        # Accept any iterable (or None) of tags and store a normalized frozenset
        tags = self.dietary_tags or ()
        object.__setattr__(self, "dietary_tags", frozenset(str(t).lower() for t in tags))


@dataclass(frozen=True)
class MatchProfile:
    dietary_preference: str = DietaryPreference.OMNIVORE.value
    allergies: Tuple[str, ...] = ()
    goal: str = Goal.BALANCED.value
    daily_calorie_target: Optional[float] = None
    locale: str = "en"
    cooking_skill_level: Optional[str] = None
    time_available: Optional[int] = None
    budget_level: Optional[str] = None

    def __post_init__(self):
        # None and "" are rejected, never defaulted
        preference = plain_value(self.dietary_preference)
        if preference not in values(DietaryPreference):
            raise InvalidMatchInput(f"Unknown dietary preference: {self.dietary_preference!r}")
        object.__setattr__(self, "dietary_preference", preference)

        goal = plain_value(self.goal)
        if goal not in values(Goal):
            raise InvalidMatchInput(f"Unknown goal: {self.goal!r}")
        object.__setattr__(self, "goal", goal)

        skill = plain_value(self.cooking_skill_level)
        if skill is not None and skill not in values(CookingSkill):
            raise InvalidMatchInput(f"Unknown cooking skill level: {self.cooking_skill_level!r}")
        object.__setattr__(self, "cooking_skill_level", skill)

        budget = plain_value(self.budget_level)
        if budget is not None and budget not in values(BudgetLevel):
            raise InvalidMatchInput(f"Unknown budget level: {self.budget_level!r}")
        object.__setattr__(self, "budget_level", budget)

        minutes = self.time_available
        if minutes is not None:
            if isinstance(minutes, bool) or not isinstance(minutes, int) or minutes <= 0:
                raise InvalidMatchInput(f"time_available must be a positive integer, got {minutes!r}")

        allergies = self.allergies if self.allergies is not None else ()
        if isinstance(allergies, str) or not isinstance(allergies, Iterable):
            raise InvalidMatchInput("allergies must be a list of strings")
        allergies = tuple(allergies)
        if not all(isinstance(a, str) for a in allergies):
            raise InvalidMatchInput("allergies must be a list of strings")
        object.__setattr__(self, "allergies", allergies)

        target = self.daily_calorie_target
        if target is not None:
            if isinstance(target, bool) or not isinstance(target, (int, float)) or target <= 0:
                raise InvalidMatchInput(f"daily_calorie_target must be positive, got {target!r}")

    @property
    def calorie_target(self) -> float:
        return float(self.daily_calorie_target or DEFAULT_CALORIE_TARGET)


@dataclass(frozen=True)
class PlanSettings:
    meals_per_day: Optional[int] = DEFAULT_MEALS_PER_DAY
    cuisine_type: Optional[str] = None
    prep_time_max: Optional[int] = None
    variety_level: str = "low"
    allow_unfiltered_fallback: bool = False

    def __post_init__(self):
        meals = self.meals_per_day
        if meals is None:
            meals = DEFAULT_MEALS_PER_DAY
        if isinstance(meals, bool) or not isinstance(meals, int):
            raise InvalidMatchInput(f"meals_per_day must be an integer, got {meals!r}")
        if not MIN_MEALS_PER_DAY <= meals <= MAX_MEALS_PER_DAY:
            raise InvalidMatchInput(
                f"meals_per_day must be between {MIN_MEALS_PER_DAY} and {MAX_MEALS_PER_DAY}, got {meals}"
            )
        object.__setattr__(self, "meals_per_day", meals)

        if self.prep_time_max is not None and self.prep_time_max <= 0:
            raise InvalidMatchInput(f"prep_time_max must be positive, got {self.prep_time_max!r}")

        object.__setattr__(self, "cuisine_type", plain_value(self.cuisine_type))
        object.__setattr__(self, "variety_level", plain_value(self.variety_level))
        if self.variety_level not in VARIETY_WINDOWS:
            raise InvalidMatchInput(f"Unknown variety level: {self.variety_level!r}")

    @property
    def cuisine_filter(self) -> Optional[str]:
        if not self.cuisine_type or self.cuisine_type == "any":
            return None
        return self.cuisine_type


@dataclass
class PlanSlot:
    label: str
    meal: Optional[MealCandidate] = None
    relaxation: Optional[str] = None
    score: Optional[float] = None


@dataclass
class DayPlan:
    day: int
    slots: List[PlanSlot] = field(default_factory=list)

    @property
    def meals(self) -> List[MealCandidate]:
        return [slot.meal for slot in self.slots if slot.meal is not None]


@dataclass(frozen=True)
class SlotShortage:
    day: int
    slot: str

    def __str__(self):
        return f"no candidates for slot {self.slot} on day {self.day}"


@dataclass
class WeeklyPlan:
    days: List[DayPlan] = field(default_factory=list)
    shortages: List[SlotShortage] = field(default_factory=list)
    total_calories: float = 0.0
    total_protein: float = 0.0
    total_carbs: float = 0.0
    total_fats: float = 0.0

    @property
    def is_complete(self) -> bool:
        return not self.shortages

    def selected_meal_ids(self) -> List[object]:
        return [meal.id for day in self.days for meal in day.meals]
