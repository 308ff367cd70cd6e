"""
Time helpers.

Timestamps are stored in UTC; the calendar day used for streak bookkeeping is
taken in ``SYSTEM_TIMEZONE``.
"""
from datetime import date, datetime, timezone

import pytz
from flask import current_app, has_app_context


def utcnow() -> datetime:
    """
    Get the current timezone-aware UTC datetime.
    Always use this instead of datetime.utcnow() or datetime.now().
    """
    return datetime.now(timezone.utc)


def _system_timezone():
    tz_name = 'UTC'
    if has_app_context():
        tz_name = current_app.config.get('SYSTEM_TIMEZONE', 'UTC')
    try:
        return pytz.timezone(tz_name)
    except pytz.UnknownTimeZoneError:
        return pytz.UTC


def to_system_timezone(dt: datetime) -> datetime:
    """Convert a (naive-as-UTC or aware) datetime into the system timezone."""
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=timezone.utc)
    return dt.astimezone(_system_timezone())


def local_today() -> date:
    """Today's calendar date in the system timezone."""
    return to_system_timezone(utcnow()).date()


def isoformat(dt: datetime) -> str:
    """ISO-8601 text for a stored timestamp, treating naive values as UTC."""
    if dt is None:
        return None
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=timezone.utc)
    return dt.isoformat()
