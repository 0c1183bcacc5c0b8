from flask import Blueprint
from prepgenie.controllers.meal_plan_controller import (
    generate_plan_handler,
    list_plans_handler,
    get_plan_handler,
    delete_plan_handler,
    update_plan_item_handler,
    swap_item_handler,
)
from prepgenie.controllers.grocery_list_controller import generate_grocery_list_handler

meal_plan_bp = Blueprint("meal_plan", __name__, url_prefix="/api/users/<int:user_id>/meal-plans")

@meal_plan_bp.post("/generate")
def generate_plan(user_id):
    return generate_plan_handler(user_id)


@meal_plan_bp.get("")
def list_plans(user_id):
    return list_plans_handler(user_id)


@meal_plan_bp.get("/<int:plan_id>")
def get_plan(user_id, plan_id):
    return get_plan_handler(user_id, plan_id)


@meal_plan_bp.delete("/<int:plan_id>")
def delete_plan(user_id, plan_id):
    return delete_plan_handler(user_id, plan_id)


@meal_plan_bp.patch("/<int:plan_id>/items/<int:item_id>")
def update_plan_item(user_id, plan_id, item_id):
    return update_plan_item_handler(user_id, plan_id, item_id)


@meal_plan_bp.post("/<int:plan_id>/items/<int:item_id>/swap")
def swap_item(user_id, plan_id, item_id):
    return swap_item_handler(user_id, plan_id, item_id)


@meal_plan_bp.post("/<int:plan_id>/grocery-list")
def generate_grocery_list(user_id, plan_id):
    return generate_grocery_list_handler(user_id, plan_id)
