import math

import pytest

from prepgenie.services.matching import MatchProfile, per_meal_calorie_target, score_meal
from prepgenie.services.matching.scorer import calorie_proximity_bonus, nutrient


def test_nutrient_treats_bad_values_as_zero():
    assert nutrient(None) == 0
    assert nutrient("abc") == 0
    assert nutrient(math.nan) == 0
    assert nutrient(math.inf) == 0
    assert nutrient("12.5") == 12.5


def test_per_meal_target_uses_default_when_missing():
    assert per_meal_calorie_target(MatchProfile(), 4) == 500
    assert per_meal_calorie_target(MatchProfile(daily_calorie_target=1800)) == 600
    assert per_meal_calorie_target(MatchProfile(daily_calorie_target=1800), 0) == 600


def test_calorie_proximity_bonus_range():
    assert calorie_proximity_bonus(500, 500) == 30
    assert calorie_proximity_bonus(600, 500) == 20
    assert calorie_proximity_bonus(900, 500) == 0


def test_score_near_per_meal_target_beats_far(candidate):
    profile = MatchProfile(daily_calorie_target=2000)
    near = candidate(calories=667)
    far = candidate(calories=1000)

    assert score_meal(near, profile, meals_per_day=3) > score_meal(far, profile, meals_per_day=3)
    assert score_meal(far, profile, meals_per_day=3) == pytest.approx(100)


def test_repeat_penalty(candidate):
    profile = MatchProfile(daily_calorie_target=1500)
    meal = candidate(calories=500)

    fresh = score_meal(meal, profile, frozenset())
    repeated = score_meal(meal, profile, {meal.id})
    assert fresh == pytest.approx(130)
    assert fresh - repeated == pytest.approx(50)


def test_muscle_gain_rewards_protein(candidate):
    profile = MatchProfile(goal="muscle_gain")
    high = candidate(id="high", protein_g=35)
    low = candidate(id="low", protein_g=20)

    assert score_meal(high, profile) - score_meal(low, profile) == pytest.approx(20)


def test_weight_loss_rewards_low_carb_and_high_protein(candidate):
    profile = MatchProfile(goal="weight_loss", daily_calorie_target=1500)
    lean = candidate(calories=500, carbs_g=20, protein_g=30)
    heavy = candidate(calories=500, carbs_g=60, protein_g=10)

    assert score_meal(lean, profile) == pytest.approx(160)
    assert score_meal(heavy, profile) == pytest.approx(130)


def test_missing_nutrition_does_not_crash(candidate):
    profile = MatchProfile(goal="weight_loss")
    meal = candidate(calories=None, protein_g=None, carbs_g=None, fats_g=None)

    # zero carbs still counts as low carb
    assert score_meal(meal, profile) == pytest.approx(115)


def test_profile_terms_are_off_by_default(candidate):
    profile = MatchProfile()
    plain = candidate(difficulty_level="hard", prep_time=90, ingredient_count=15)
    simple = candidate(difficulty_level="easy", prep_time=5, ingredient_count=3)

    assert score_meal(plain, profile) == score_meal(simple, profile)


def test_skill_term(candidate):
    profile = MatchProfile(cooking_skill_level="beginner")
    easy = candidate(difficulty_level="easy")
    hard = candidate(difficulty_level="hard")
    unknown = candidate(difficulty_level=None)

    assert score_meal(easy, profile) - score_meal(hard, profile) == pytest.approx(25)
    # unknown difficulty counts as medium, too hard for a beginner
    assert score_meal(unknown, profile) == pytest.approx(score_meal(hard, profile))
    assert score_meal(unknown, MatchProfile(cooking_skill_level="intermediate")) == pytest.approx(
        score_meal(easy, profile)
    )


def test_time_term(candidate):
    profile = MatchProfile(time_available=40)
    base = score_meal(candidate(prep_time=30), profile)

    assert score_meal(candidate(prep_time=60), profile) - base == pytest.approx(-20)
    assert score_meal(candidate(prep_time=20), profile) - base == pytest.approx(5)
    # unknown prep time counts as 30 minutes
    assert score_meal(candidate(prep_time=None), profile) == pytest.approx(base)


def test_budget_term(candidate):
    unknown = candidate(ingredient_count=None)
    many = candidate(ingredient_count=12)
    some = candidate(ingredient_count=9)

    low = MatchProfile(budget_level="low")
    assert score_meal(many, low) - score_meal(unknown, low) == pytest.approx(-10)
    assert score_meal(some, low) == pytest.approx(score_meal(unknown, low))

    high = MatchProfile(budget_level="high")
    assert score_meal(some, high) - score_meal(unknown, high) == pytest.approx(5)


def test_on_target_unused_aligned_meal_ranks_first_with_profile_terms(candidate):
    profile = MatchProfile(
        goal="muscle_gain",
        daily_calorie_target=2100,
        cooking_skill_level="intermediate",
        time_available=45,
        budget_level="low",
    )
    best = candidate(id="best", calories=700, protein_g=35, difficulty_level="medium", prep_time=30)
    off_target = candidate(id="off", calories=1100, protein_g=35, difficulty_level="medium", prep_time=30)
    used = candidate(id="used", calories=700, protein_g=35, difficulty_level="medium", prep_time=30)
    misaligned = candidate(id="mis", calories=700, protein_g=10, difficulty_level="medium", prep_time=30)

    best_score = score_meal(best, profile, {"used"}, 3)
    assert best_score > score_meal(off_target, profile, {"used"}, 3)
    assert best_score > score_meal(used, profile, {"used"}, 3)
    assert best_score > score_meal(misaligned, profile, {"used"}, 3)


def test_worst_case_score_is_not_negative(candidate):
    profile = MatchProfile(cooking_skill_level="beginner", time_available=20, budget_level="low")
    worst = candidate(
        id="worst", calories=5000, protein_g=0, difficulty_level="hard",
        prep_time=120, ingredient_count=20,
    )
    assert score_meal(worst, profile, {"worst"}) == pytest.approx(5)
