from flask import Blueprint
from prepgenie.controllers.meal_controller import (
    list_meals_handler,
    get_meal_handler,
    create_meal_handler,
    update_meal_handler,
    delete_meal_handler,
)

meal_bp = Blueprint("meal", __name__, url_prefix="/api")

@meal_bp.get("/meals")
def list_meals():
    return list_meals_handler()


@meal_bp.get("/meals/<int:meal_id>")
def get_meal(meal_id):
    return get_meal_handler(meal_id)


# User-owned meals
@meal_bp.post("/users/<int:user_id>/meals")
def create_meal(user_id):
    return create_meal_handler(user_id)

@meal_bp.put("/users/<int:user_id>/meals/<int:meal_id>")
def update_meal(user_id, meal_id):
    return update_meal_handler(user_id, meal_id)

@meal_bp.delete("/users/<int:user_id>/meals/<int:meal_id>")
def delete_meal(user_id, meal_id):
    return delete_meal_handler(user_id, meal_id)
