from marshmallow import Schema, fields, validate
from prepgenie.utils.enums import (
    ActivityLevel, BudgetLevel, CookingSkill, DietaryPreference, Gender, Goal, Locale, values,
)


class UserProfileSchema(Schema):
    age = fields.Int(validate=validate.Range(min=13, max=120))
    weight = fields.Float(validate=validate.Range(min=1, max=700))
    height = fields.Float(validate=validate.Range(min=30, max=300))
    unit_system = fields.Str(load_default="metric", validate=validate.OneOf(["metric", "imperial"]))
    gender = fields.Str(validate=validate.OneOf(values(Gender)))
    activity_level = fields.Str(validate=validate.OneOf(values(ActivityLevel)))
    goal = fields.Str(validate=validate.OneOf(values(Goal)))
    dietary_preference = fields.Str(validate=validate.OneOf(values(DietaryPreference)))
    allergies = fields.List(fields.Str(validate=validate.Length(min=1, max=50)))
    cooking_skill_level = fields.Str(allow_none=True, validate=validate.OneOf(values(CookingSkill)))
    # Minutes per day available for cooking
    time_available = fields.Int(allow_none=True, validate=validate.Range(min=1, max=600))
    budget_level = fields.Str(allow_none=True, validate=validate.OneOf(values(BudgetLevel)))
    locale = fields.Str(validate=validate.OneOf(values(Locale)))
    # Manual override of the computed calorie target; null clears it
    daily_calorie_target = fields.Int(allow_none=True, validate=validate.Range(min=800, max=6000))
