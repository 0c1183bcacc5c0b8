from .profile import UserProfile
from .meal import Meal
from .meal_plan import MealPlan, MealPlanItem
from .grocery_list import GroceryList

__all__ = ["UserProfile", "Meal", "MealPlan", "MealPlanItem", "GroceryList"]
