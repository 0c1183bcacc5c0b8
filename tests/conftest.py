import itertools
from decimal import Decimal

import pytest

from prepgenie import create_app
from prepgenie.extensions import db
from prepgenie.models.meal import Meal
from prepgenie.models.profile import UserProfile
from prepgenie.services.matching import MealCandidate

_ids = itertools.count(1)


@pytest.fixture()
def app():
    app = create_app("testing")
    with app.app_context():
        db.create_all()
        yield app
        db.session.remove()
        db.drop_all()


@pytest.fixture()
def client(app):
    return app.test_client()


def make_candidate(meal_type="breakfast", **kwargs):
    """Build a MealCandidate with sensible defaults for engine tests."""
    kwargs.setdefault("id", next(_ids))
    kwargs.setdefault("name", f"Meal {kwargs['id']}")
    kwargs.setdefault("calories", 600)
    kwargs.setdefault("protein_g", 20)
    kwargs.setdefault("carbs_g", 50)
    kwargs.setdefault("fats_g", 15)
    kwargs.setdefault("prep_time", 15)
    return MealCandidate(meal_type=meal_type, **kwargs)


@pytest.fixture()
def candidate():
    return make_candidate


def add_meal(meal_type="breakfast", name=None, **kwargs):
    meal = Meal(
        name=name or f"{meal_type} {next(_ids)}",
        meal_type=meal_type,
        cuisine_type=kwargs.pop("cuisine_type", "western"),
        prep_time=kwargs.pop("prep_time", 15),
        calories_per_serving=kwargs.pop("calories", 600),
        protein_per_serving=Decimal(str(kwargs.pop("protein", 20))),
        carbs_per_serving=Decimal(str(kwargs.pop("carbs", 50))),
        fats_per_serving=Decimal(str(kwargs.pop("fats", 15))),
        dietary_tags=kwargs.pop("dietary_tags", []),
        ingredients=kwargs.pop("ingredients", []),
        locale=kwargs.pop("locale", "en"),
        is_seed_meal=kwargs.pop("is_seed_meal", True),
        user_id=kwargs.pop("user_id", None),
        **kwargs,
    )
    db.session.add(meal)
    db.session.commit()
    return meal


@pytest.fixture()
def seed_meals(app):
    """Seven distinct seed meals for each main slot, plus snacks."""
    meals = []
    for meal_type in ("breakfast", "lunch", "dinner", "snack"):
        for i in range(7):
            meals.append(add_meal(
                meal_type,
                name=f"{meal_type} {i}",
                calories=500 + i * 20,
                prep_time=10 + i * 5,
                dietary_tags=["vegetarian"] if i % 2 == 0 else [],
            ))
    return meals


@pytest.fixture()
def profile(app):
    profile = UserProfile(
        user_id=1,
        goal="maintain",
        dietary_preference="omnivore",
        allergies=[],
        daily_calorie_target=2000,
        locale="en",
    )
    db.session.add(profile)
    db.session.commit()
    return profile


@pytest.fixture()
def meal_factory(app):
    return add_meal
