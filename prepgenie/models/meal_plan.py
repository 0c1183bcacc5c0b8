from prepgenie.extensions import db


class MealPlan(db.Model):
    __tablename__ = "meal_plans"

    id = db.Column(db.Integer, primary_key=True)
    user_id = db.Column(db.Integer, db.ForeignKey("user_profiles.user_id"), nullable=False, index=True)
    name = db.Column(db.String(100), nullable=False)
    type = db.Column(db.String(10), nullable=False, default="weekly")
    start_date = db.Column(db.Date)
    end_date = db.Column(db.Date)
    total_calories = db.Column(db.Integer, nullable=False, default=0)
    total_protein = db.Column(db.Numeric(10,2), nullable=False, default=0)
    total_carbs = db.Column(db.Numeric(10,2), nullable=False, default=0)
    total_fats = db.Column(db.Numeric(10,2), nullable=False, default=0)
    created_at = db.Column(db.DateTime, server_default=db.func.now(), nullable=False)

    items = db.relationship(
        "MealPlanItem", backref="meal_plan", lazy=True,
        cascade="all, delete-orphan", order_by="MealPlanItem.id",
    )
    # grocery lists outlive their plan; the ORM nulls meal_plan_id on delete
    grocery_lists = db.relationship("GroceryList", backref="meal_plan", lazy=True)


class MealPlanItem(db.Model):
    __tablename__ = "meal_plan_items"

    id = db.Column(db.Integer, primary_key=True)
    meal_plan_id = db.Column(db.Integer, db.ForeignKey("meal_plans.id", ondelete="CASCADE"), nullable=False, index=True)
    meal_id = db.Column(db.Integer, db.ForeignKey("meals.id"), nullable=False)
    day_of_week = db.Column(db.Integer, nullable=False)  # 0-6, first day of the plan is 0
    meal_time = db.Column(db.String(20), nullable=False)
    servings = db.Column(db.Integer, nullable=False, default=1)
    is_completed = db.Column(db.Boolean, nullable=False, default=False)

    meal = db.relationship("Meal")
