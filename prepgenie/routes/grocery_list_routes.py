from flask import Blueprint
from prepgenie.controllers.grocery_list_controller import (
    list_grocery_lists_handler,
    get_grocery_list_handler,
    update_grocery_list_handler,
    delete_grocery_list_handler,
)

grocery_list_bp = Blueprint("grocery_list", __name__, url_prefix="/api/users/<int:user_id>/grocery-lists")

@grocery_list_bp.get("")
def list_grocery_lists(user_id):
    return list_grocery_lists_handler(user_id)


@grocery_list_bp.get("/<int:list_id>")
def get_grocery_list(user_id, list_id):
    return get_grocery_list_handler(user_id, list_id)


@grocery_list_bp.put("/<int:list_id>/items")
def update_grocery_list(user_id, list_id):
    return update_grocery_list_handler(user_id, list_id)


@grocery_list_bp.delete("/<int:list_id>")
def delete_grocery_list(user_id, list_id):
    return delete_grocery_list_handler(user_id, list_id)
