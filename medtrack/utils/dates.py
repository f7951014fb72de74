# medtrack/utils/dates.py
from datetime import datetime, timedelta


def today_bounds(now=None):
    """Half-open [start, end) range covering the current UTC day."""
    now = now or datetime.utcnow()
    start = datetime(now.year, now.month, now.day)
    return start, start + timedelta(days=1)


def days_ago(days, now=None):
    return (now or datetime.utcnow()) - timedelta(days=days)
