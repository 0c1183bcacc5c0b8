"""
Grocery List Service

Builds shopping lists from stored meal plans and manages them.
"""

import logging
from datetime import date
from typing import Any, Dict, Iterable, List, Optional, Tuple

from sqlalchemy import desc
from sqlalchemy.exc import SQLAlchemyError

from prepgenie.extensions import db
from prepgenie.models.grocery_list import GroceryList
from prepgenie.services.errors import EmptyGroceryListError, NotFoundError
from prepgenie.services.meal_constants import DEFAULT_GROCERY_CATEGORY
from prepgenie.services.meal_plan_service import get_plan
from prepgenie.utils.enums import GroceryCategory, values

logger = logging.getLogger(__name__)


def _quantity(value) -> float:
    try:
        return float(value)
    except (TypeError, ValueError):
        return 0.0


def _category(value) -> str:
    category = str(value or "").strip().lower()
    return category if category in values(GroceryCategory) else DEFAULT_GROCERY_CATEGORY


def consolidate_ingredients(entries: Iterable[Tuple[Any, int]]) -> List[Dict[str, Any]]:
    """
    Merge the ingredients of several meals into one shopping list.

    Args:
        entries: (meal ingredients, servings) pairs; ingredients are dicts with
            name, quantity, unit and category, or plain names

    Returns:
        Items in first-seen order. Ingredients with the same name and unit
        (case-insensitive) are merged, quantities are multiplied by servings,
        and the first category seen is kept.
    """
    merged: Dict[str, Dict[str, Any]] = {}

    for ingredients, servings in entries:
        servings = servings or 1
        for ingredient in ingredients or []:
            if not isinstance(ingredient, dict):
                ingredient = {"name": ingredient}

            name = str(ingredient.get("name") or "").strip()
            if not name:
                continue
            unit = str(ingredient.get("unit") or "").strip()
            quantity = _quantity(ingredient.get("quantity")) * servings

            key = f"{name}-{unit}".lower()
            if key in merged:
                merged[key]["quantity"] += quantity
                continue

            merged[key] = {
                "name": name,
                "quantity": quantity,
                "unit": unit,
                "category": _category(ingredient.get("category")),
                "is_purchased": False,
            }

    items = list(merged.values())
    for item in items:
        item["quantity"] = round(item["quantity"], 2)
    return items


def generate_grocery_list(user_id: int, plan_id: int, name: Optional[str] = None) -> GroceryList:
    """
    Create a grocery list from every item of a stored meal plan.

    Raises:
        NotFoundError: If the plan does not exist for this user
        EmptyGroceryListError: If the plan's meals list no ingredients
    """
    plan = get_plan(user_id, plan_id)

    items = consolidate_ingredients(
        (item.meal.ingredients if item.meal else None, item.servings)
        for item in plan.items
    )
    if not items:
        raise EmptyGroceryListError("Meal plan has no ingredients to shop for")

    grocery_list = GroceryList(
        user_id=user_id,
        meal_plan_id=plan.id,
        name=name or f"Grocery list {date.today().isoformat()}",
        items=items,
    )

    try:
        db.session.add(grocery_list)
        db.session.commit()
    except SQLAlchemyError:
        db.session.rollback()
        raise

    logger.info("Grocery list %s created from plan %s (%d items)", grocery_list.id, plan_id, len(items))
    return grocery_list


def list_grocery_lists(user_id: int, limit: int = 20) -> List[GroceryList]:
    return (
        GroceryList.query
        .filter_by(user_id=user_id)
        .order_by(desc(GroceryList.created_at), desc(GroceryList.id))
        .limit(limit)
        .all()
    )


def get_grocery_list(user_id: int, list_id: int) -> GroceryList:
    grocery_list = GroceryList.query.filter_by(id=list_id, user_id=user_id).first()
    if not grocery_list:
        raise NotFoundError("Grocery list does not exist", code="GROCERY_LIST_NOT_FOUND")
    return grocery_list


def update_grocery_items(user_id: int, list_id: int, items: List[Dict[str, Any]]) -> GroceryList:
    """Replace the items of a grocery list, e.g. after ticking purchases off."""
    grocery_list = get_grocery_list(user_id, list_id)
    grocery_list.items = items

    try:
        db.session.commit()
    except SQLAlchemyError:
        db.session.rollback()
        raise

    return grocery_list


def delete_grocery_list(user_id: int, list_id: int) -> None:
    grocery_list = get_grocery_list(user_id, list_id)
    try:
        db.session.delete(grocery_list)
        db.session.commit()
    except SQLAlchemyError:
        db.session.rollback()
        raise
