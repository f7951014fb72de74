# medtrack/controllers/health_controller.py
from flask import current_app

from medtrack.helpers import api_response
from medtrack.services import get_gateway


def health():
    try:
        get_gateway().ping()
        return api_response(True, "OK", {"database": "connected"})
    except Exception:
        current_app.logger.exception("Database health check failed")
        return api_response(False, "Database connection failed", {"database": "unavailable"}, 500)
