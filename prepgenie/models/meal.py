from prepgenie.extensions import db


class Meal(db.Model):
    __tablename__ = "meals"

    id = db.Column(db.Integer, primary_key=True)
    # NULL for system-curated seed meals
    user_id = db.Column(db.Integer, nullable=True, index=True)
    name = db.Column(db.String(150), nullable=False)
    description = db.Column(db.Text)
    meal_type = db.Column(db.String(20), nullable=False, index=True)
    cuisine_type = db.Column(db.String(30))
    difficulty_level = db.Column(db.String(20))
    prep_time = db.Column(db.Integer)
    cook_time = db.Column(db.Integer)
    servings = db.Column(db.Integer, nullable=False, default=1)
    calories_per_serving = db.Column(db.Integer)
    protein_per_serving = db.Column(db.Numeric(8,2))
    carbs_per_serving = db.Column(db.Numeric(8,2))
    fats_per_serving = db.Column(db.Numeric(8,2))
    ingredients = db.Column(db.JSON)
    instructions = db.Column(db.JSON)
    dietary_tags = db.Column(db.JSON)
    tags = db.Column(db.JSON)
    locale = db.Column(db.String(5), nullable=False, default="en", index=True)
    is_seed_meal = db.Column(db.Boolean, nullable=False, default=False, index=True)
    is_ai_generated = db.Column(db.Boolean, nullable=False, default=False)
    created_at = db.Column(db.DateTime, server_default=db.func.now(), nullable=False)
    updated_at = db.Column(db.DateTime, server_default=db.func.now(), onupdate=db.func.now(), nullable=False)
