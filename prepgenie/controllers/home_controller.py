from flask import jsonify
from sqlalchemy.exc import SQLAlchemyError

from prepgenie.extensions import db


def home_index():
    return jsonify({
        "message": "PrepGenie meal planning API",
    })


def health_check():
    db_status = "healthy"
    try:
        # Ping the database
        db.session.execute(db.text("SELECT 1"))
    except SQLAlchemyError as e:
        db.session.rollback()
        db_status = f"unhealthy: {str(e)}"

    return jsonify({
        "status": "online",
        "database": db_status,
    })
