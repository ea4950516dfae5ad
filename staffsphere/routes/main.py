from datetime import datetime, timezone

from flask import Blueprint, current_app, jsonify
from sqlalchemy import text

from ..extensions import db

bp = Blueprint("main", __name__)


# Health check endpoint
@bp.get("/api/health")
def health():
    db_status = "disconnected"
    try:
        with db.engine.connect() as con:
            con.execute(text("SELECT 1"))
        db_status = "connected"
    except Exception as e:
        current_app.logger.warning(f"Health check could not reach the database: {e}")
        db_status = f"failed: {e}"

    return (
        jsonify(
            {
                "status": "ok",
                "time": datetime.now(timezone.utc).isoformat(),
                "database": db_status,
                "version": current_app.config.get("APP_VERSION", "unknown"),
                "environment": current_app.config.get("FLASK_ENV", "unknown"),
            }
        ),
        200,
    )


# Basic route
@bp.get("/")
def index():
    return jsonify(
        {
            "message": "StaffSphere API is running",
            "version": current_app.config.get("APP_VERSION", "unknown"),
        }
    )
