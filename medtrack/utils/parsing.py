# medtrack/utils/parsing.py
from datetime import date, time

from flask import request

from medtrack.errors import ValidationFailure


def json_body():
    """Request JSON as a dict; a missing body is empty, anything but an object is rejected."""
    data = request.get_json(silent=True)
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ValidationFailure("Request body must be a JSON object")
    return data


def parse_date(value, field):
    """Parse an ISO date (YYYY-MM-DD); empty values become None."""
    if value in (None, ""):
        return None
    if isinstance(value, date):
        return value
    try:
        return date.fromisoformat(str(value))
    except ValueError:
        raise ValidationFailure(f"Invalid date for {field}: {value}")


def parse_time(value, field):
    """Parse a time of day given as HH:MM or HH:MM:SS, without a UTC offset."""
    if not isinstance(value, time):
        try:
            value = time.fromisoformat(str(value))
        except ValueError:
            raise ValidationFailure(f"Invalid time for {field}: {value}")
    if value.tzinfo is not None:
        raise ValidationFailure(f"{field} must not carry a UTC offset")
    return value


def parse_int(value, field, default=None, minimum=None, maximum=None):
    if value is None or value == "":
        if default is None:
            raise ValidationFailure(f"Missing field: {field}")
        return default
    if isinstance(value, bool):
        raise ValidationFailure(f"Invalid integer for {field}: {value}")
    if isinstance(value, float) and not value.is_integer():
        raise ValidationFailure(f"Invalid integer for {field}: {value}")
    try:
        number = int(value)
    except (TypeError, ValueError, OverflowError):
        raise ValidationFailure(f"Invalid integer for {field}: {value}")
    if minimum is not None and number < minimum:
        raise ValidationFailure(f"{field} must be at least {minimum}")
    if maximum is not None and number > maximum:
        raise ValidationFailure(f"{field} must be at most {maximum}")
    return number


def require_fields(data, fields):
    missing = [f for f in fields if data.get(f) in (None, "")]
    if missing:
        raise ValidationFailure(f"Missing fields: {missing}")


def require_strings(data, fields):
    wrong = [f for f in fields if data.get(f) is not None and not isinstance(data[f], str)]
    if wrong:
        raise ValidationFailure(f"Fields must be strings: {wrong}")
