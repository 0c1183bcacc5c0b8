"""
Dietary Filter

Decides whether a meal is admissible for a profile.

Two rules with different defaults:
- Dietary preference is strict: a vegetarian/vegan/pescatarian/halal profile
  only accepts meals that carry the matching tag. A missing tag is unknown,
  and unknown is treated as unsafe.
- Allergies are permissive: a meal is rejected only when it carries the
  explicit ``contains_<allergen>`` tag. A meal with no allergen tags at all is
  accepted, so untagged meals are never filtered for allergens.
"""

from typing import Iterable, List, Optional, Set

from prepgenie.services.meal_constants import (
    CONTAINS_TAG_PREFIX,
    KNOWN_ALLERGENS,
    PREFERENCE_TAGS,
)
from prepgenie.services.matching.records import MatchProfile, MealCandidate


def _build_allergy_aliases():
    aliases = {}
    for key in KNOWN_ALLERGENS:
        aliases[key] = key
        if key.endswith("s"):
            aliases[key[:-1]] = key
        else:
            aliases[key + "s"] = key
    return aliases


ALLERGY_ALIASES = _build_allergy_aliases()


def normalize_allergy(allergy: str) -> Optional[str]:
    """Map a free-form allergy string to a known allergen key, or None."""
    if not isinstance(allergy, str):
        return None
    normalized = allergy.strip().lower().replace("-", "_").replace(" ", "_")
    return ALLERGY_ALIASES.get(normalized)


def allergen_keys(allergies: Iterable[str]) -> Set[str]:
    keys = set()
    for allergy in allergies or ():
        key = normalize_allergy(allergy)
        if key:
            keys.add(key)
    return keys


def passes_preference(meal: MealCandidate, preference: str) -> bool:
    required_tag = PREFERENCE_TAGS.get(preference)
    if required_tag is None:
        # omnivore
        return True
    return required_tag in meal.dietary_tags


def passes_allergies(meal: MealCandidate, allergen_set: Set[str]) -> bool:
    return not any(
        f"{CONTAINS_TAG_PREFIX}{allergen}" in meal.dietary_tags
        for allergen in allergen_set
    )


def is_admissible(meal: MealCandidate, profile: MatchProfile) -> bool:
    return (
        passes_preference(meal, profile.dietary_preference)
        and passes_allergies(meal, allergen_keys(profile.allergies))
    )


def filter_admissible(meals: Iterable[MealCandidate], profile: MatchProfile) -> List[MealCandidate]:
    """Keep admissible meals, preserving input order."""
    allergen_set = allergen_keys(profile.allergies)
    return [
        meal for meal in meals
        if passes_preference(meal, profile.dietary_preference)
        and passes_allergies(meal, allergen_set)
    ]
