from marshmallow import Schema, fields, validate, validates_schema, ValidationError
from prepgenie.utils.enums import (
    CuisineType, DietaryRestriction, MacroGoal, SwapType, VarietyLevel, values,
)


class MealPlanSettingsSchema(Schema):
    name = fields.Str(allow_none=True, validate=validate.Length(min=1, max=100))
    cuisine_type = fields.Str(load_default=CuisineType.ANY.value, validate=validate.OneOf(values(CuisineType)))
    meals_per_day = fields.Int(load_default=3, validate=validate.OneOf([3, 4, 5]))
    variety_level = fields.Str(load_default=VarietyLevel.MEDIUM.value, validate=validate.OneOf(values(VarietyLevel)))
    prep_time_max = fields.Int(allow_none=True, load_default=None, validate=validate.Range(min=10, max=120))
    start_date = fields.Date(allow_none=True, load_default=None)


class SwapMealSchema(Schema):
    swap_type = fields.Str(required=True, validate=validate.OneOf(values(SwapType)))
    dietary_restriction = fields.Str(allow_none=True, validate=validate.OneOf(values(DietaryRestriction)))
    macro_goal = fields.Str(allow_none=True, validate=validate.OneOf(values(MacroGoal)))

    @validates_schema
    def validate_swap_requirements(self, data, **kwargs):
        swap_type = data.get("swap_type")
        if swap_type == SwapType.DIETARY.value and not data.get("dietary_restriction"):
            raise ValidationError(
                {"dietary_restriction": ["Dietary restriction required for dietary swap"]}
            )
        if swap_type == SwapType.MACRO.value and not data.get("macro_goal"):
            raise ValidationError({"macro_goal": ["Macro goal required for macro swap"]})


class UpdateMealPlanItemSchema(Schema):
    is_completed = fields.Bool(required=True)
