from prepgenie.extensions import db


class UserProfile(db.Model):
    __tablename__ = "user_profiles"

    user_id = db.Column(db.Integer, primary_key=True, autoincrement=False)
    age = db.Column(db.Integer)
    weight_kg = db.Column(db.Numeric(6,2))
    height_cm = db.Column(db.Numeric(6,2))
    gender = db.Column(db.String(10))
    activity_level = db.Column(db.String(20))
    goal = db.Column(db.String(20), nullable=False, default="balanced")
    dietary_preference = db.Column(db.String(20), nullable=False, default="omnivore")
    allergies = db.Column(db.JSON)
    cooking_skill_level = db.Column(db.String(20))
    time_available = db.Column(db.Integer)  # minutes per day
    budget_level = db.Column(db.String(10))
    tdee = db.Column(db.Integer)
    daily_calorie_target = db.Column(db.Integer)
    # kept across updates; the computed target is used while this is NULL
    manual_calorie_target = db.Column(db.Integer)
    target_protein = db.Column(db.Integer)
    target_carbs = db.Column(db.Integer)
    target_fats = db.Column(db.Integer)
    locale = db.Column(db.String(5), nullable=False, default="en")
    updated_at = db.Column(db.DateTime, server_default=db.func.now(), onupdate=db.func.now(), nullable=False)
