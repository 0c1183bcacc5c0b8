from marshmallow import Schema, fields, validate
from prepgenie.utils.enums import GroceryCategory, values


class GroceryItemSchema(Schema):
    name = fields.Str(required=True, validate=validate.Length(min=1, max=150))
    quantity = fields.Float(required=True, validate=validate.Range(min=0))
    unit = fields.Str(load_default="")
    category = fields.Str(load_default=GroceryCategory.OTHER.value, validate=validate.OneOf(values(GroceryCategory)))
    is_purchased = fields.Bool(load_default=False)


class GenerateGroceryListSchema(Schema):
    name = fields.Str(allow_none=True, validate=validate.Length(min=1, max=100))


class UpdateGroceryListSchema(Schema):
    items = fields.List(fields.Nested(GroceryItemSchema), required=True, validate=validate.Length(min=1))
