import logging

from flask import Flask

from prepgenie.config import get_config
from prepgenie.extensions import db, migrate, cors
from prepgenie.routes import register_routes


def create_app(config_name=None):
    app = Flask(__name__)
    app.config.from_object(get_config(config_name))

    app.logger.setLevel(getattr(logging, str(app.config.get("LOG_LEVEL", "INFO")).upper(), logging.INFO))

    # Initialize database
    db.init_app(app)

    # Initialize Flask-Migrate
    migrate.init_app(app, db)

    # CORS Configuration
    cors.init_app(app,
                  origins=app.config["CORS_ORIGINS"],
                  supports_credentials=True,
                  allow_headers=["Content-Type"],
                  methods=["GET", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"],
                  expose_headers=["Content-Type"])

    # Import models so they are registered on the metadata
    from prepgenie import models  # noqa: F401

    register_routes(app)

    return app
