from marshmallow import Schema, fields, validate
from prepgenie.utils.enums import CuisineType, Difficulty, Locale, MealType, values


class IngredientSchema(Schema):
    name = fields.Str(required=True, validate=validate.Length(min=1, max=150))
    quantity = fields.Float(allow_none=True, validate=validate.Range(min=0))
    unit = fields.Str(allow_none=True)
    category = fields.Str(allow_none=True)


class CreateMealSchema(Schema):
    name = fields.Str(required=True, validate=validate.Length(min=1, max=150))
    description = fields.Str(allow_none=True)
    meal_type = fields.Str(required=True, validate=validate.OneOf(values(MealType)))
    cuisine_type = fields.Str(allow_none=True, validate=validate.OneOf(values(CuisineType)))
    difficulty_level = fields.Str(allow_none=True, validate=validate.OneOf(values(Difficulty)))
    prep_time = fields.Int(allow_none=True, validate=validate.Range(min=0, max=600))
    cook_time = fields.Int(allow_none=True, validate=validate.Range(min=0, max=600))
    servings = fields.Int(load_default=1, validate=validate.Range(min=1, max=50))
    calories_per_serving = fields.Int(allow_none=True, validate=validate.Range(min=0))
    protein_per_serving = fields.Float(allow_none=True, validate=validate.Range(min=0))
    carbs_per_serving = fields.Float(allow_none=True, validate=validate.Range(min=0))
    fats_per_serving = fields.Float(allow_none=True, validate=validate.Range(min=0))
    ingredients = fields.List(fields.Nested(IngredientSchema), load_default=[])
    instructions = fields.List(fields.Str(), load_default=[])
    dietary_tags = fields.List(fields.Str(), load_default=[])
    tags = fields.List(fields.Str(), load_default=[])
    locale = fields.Str(load_default=Locale.EN.value, validate=validate.OneOf(values(Locale)))


class UpdateMealSchema(Schema):
    name = fields.Str(validate=validate.Length(min=1, max=150))
    description = fields.Str(allow_none=True)
    meal_type = fields.Str(validate=validate.OneOf(values(MealType)))
    cuisine_type = fields.Str(allow_none=True, validate=validate.OneOf(values(CuisineType)))
    difficulty_level = fields.Str(allow_none=True, validate=validate.OneOf(values(Difficulty)))
    prep_time = fields.Int(allow_none=True, validate=validate.Range(min=0, max=600))
    cook_time = fields.Int(allow_none=True, validate=validate.Range(min=0, max=600))
    servings = fields.Int(validate=validate.Range(min=1, max=50))
    calories_per_serving = fields.Int(allow_none=True, validate=validate.Range(min=0))
    protein_per_serving = fields.Float(allow_none=True, validate=validate.Range(min=0))
    carbs_per_serving = fields.Float(allow_none=True, validate=validate.Range(min=0))
    fats_per_serving = fields.Float(allow_none=True, validate=validate.Range(min=0))
    ingredients = fields.List(fields.Nested(IngredientSchema))
    instructions = fields.List(fields.Str())
    dietary_tags = fields.List(fields.Str())
    tags = fields.List(fields.Str())
    locale = fields.Str(validate=validate.OneOf(values(Locale)))


class ListMealQuerySchema(Schema):
    page = fields.Int(load_default=1, validate=validate.Range(min=1))
    limit = fields.Int(load_default=20, validate=validate.Range(min=1, max=100))
    search = fields.Str(allow_none=True, load_default=None)
    meal_type = fields.Str(allow_none=True, load_default=None, validate=validate.OneOf(values(MealType)))
    locale = fields.Str(allow_none=True, load_default=None, validate=validate.OneOf(values(Locale)))
