from prepgenie.extensions import db


class GroceryList(db.Model):
    __tablename__ = "grocery_lists"

    id = db.Column(db.Integer, primary_key=True)
    user_id = db.Column(db.Integer, db.ForeignKey("user_profiles.user_id"), nullable=False, index=True)
    meal_plan_id = db.Column(db.Integer, db.ForeignKey("meal_plans.id", ondelete="SET NULL"), nullable=True, index=True)
    name = db.Column(db.String(100), nullable=False)
    # [{name, quantity, unit, category, is_purchased}]
    items = db.Column(db.JSON, nullable=False, default=list)
    estimated_cost = db.Column(db.Numeric(10,2))
    created_at = db.Column(db.DateTime, server_default=db.func.now(), nullable=False)
    updated_at = db.Column(db.DateTime, server_default=db.func.now(), onupdate=db.func.now(), nullable=False)
