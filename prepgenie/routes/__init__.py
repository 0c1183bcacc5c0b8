from .home_routes import home_bp
from .profile_routes import profile_bp
from .meal_routes import meal_bp
from .meal_plan_routes import meal_plan_bp
from .grocery_list_routes import grocery_list_bp

def register_routes(app):
    app.register_blueprint(home_bp)
    app.register_blueprint(profile_bp)
    app.register_blueprint(meal_bp)
    app.register_blueprint(meal_plan_bp)
    app.register_blueprint(grocery_list_bp)
