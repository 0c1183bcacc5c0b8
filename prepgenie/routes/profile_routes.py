from flask import Blueprint
from prepgenie.controllers.profile_controller import get_profile_handler, upsert_profile_handler

profile_bp = Blueprint("profile", __name__, url_prefix="/api/users")

@profile_bp.get("/<int:user_id>/profile")
def get_profile(user_id):
    return get_profile_handler(user_id)


@profile_bp.put("/<int:user_id>/profile")
def upsert_profile(user_id):
    return upsert_profile_handler(user_id)
