# medtrack/helpers.py
from datetime import date, datetime, time
from decimal import Decimal
from functools import wraps

from flask import current_app
from sqlalchemy.exc import DataError, IntegrityError

from medtrack.errors import ApiError
from medtrack.extensions import db


def api_response(success, message, data=None, status_code=200):
    return {
        "success": success,
        "message": message,
        "data": data
    }, status_code


def error_response(message, status_code):
    return {"success": False, "message": message}, status_code


def to_json_value(value):
    """Render dates, times and decimals the way the API exposes them (ISO-8601 / float)."""
    if isinstance(value, (datetime, date, time)):
        return value.isoformat()
    if isinstance(value, Decimal):
        return float(value)
    return value


def row_to_dict(row):
    """Turn a SQLAlchemy result row into a JSON-ready dict keyed by its labels."""
    return {key: to_json_value(value) for key, value in row._asdict().items()}


def handles_errors(failure_message):
    """
    Map everything a controller can raise to a JSON error response.

    ApiError subclasses keep their own status and message. Storage
    constraint violations become a 400. Anything else is logged with its
    traceback and answered with ``failure_message`` and a 500, so no SQL or
    stack detail leaves the process.
    """
    def decorator(fn):
        @wraps(fn)
        def wrapper(*args, **kwargs):
            try:
                return fn(*args, **kwargs)
            except ApiError as e:
                return error_response(e.message, e.status_code)
            except (IntegrityError, DataError) as e:
                db.session.rollback()
                current_app.logger.warning("%s: %s", failure_message, e.orig)
                return error_response("Invalid request data", 400)
            except Exception:
                db.session.rollback()
                current_app.logger.exception(failure_message)
                return error_response(failure_message, 500)
        return wrapper
    return decorator
