"""Date parsing utilities."""

from datetime import date, datetime, timedelta, UTC
from typing import Optional
from dateutil import parser as date_parser
from dateutil.relativedelta import relativedelta


def parse_date(date_str: str) -> date:
    """Parse a date string into a date object.

    Supports various formats including relative dates:
    - Absolute dates: "2024-01-15", "January 15, 2024", etc.
    - Relative dates: "today", "yesterday", "last month", "this year", etc.

    Args:
        date_str: Date string in various formats

    Returns:
        Date object

    Raises:
        ValueError: If date string cannot be parsed
    """
    date_str = date_str.strip().lower()
    today = date.today()

    relative_dates = {
        "today": today,
        "yesterday": today - timedelta(days=1),
    }

    if date_str in relative_dates:
        return relative_dates[date_str]

    if date_str.startswith("last "):
        period = date_str[5:]
        if period == "month":
            return (today - relativedelta(months=1)).replace(day=1)
        elif period == "year":
            return today.replace(month=1, day=1) - relativedelta(years=1)
        elif period == "week":
            # Monday of last week
            return today - timedelta(days=today.weekday() + 7)

    elif date_str.startswith("this "):
        period = date_str[5:]
        if period == "month":
            return today.replace(day=1)
        elif period == "year":
            return today.replace(month=1, day=1)
        elif period == "week":
            return today - timedelta(days=today.weekday())

    try:
        dt = date_parser.parse(date_str)
        return dt.date()
    except (ValueError, OverflowError) as e:
        raise ValueError(f"Could not parse date '{date_str}': {e}")


def parse_timestamp(value: Optional[str]) -> Optional[datetime]:
    """Parse a stored record date into a timezone-aware datetime.

    Naive values are taken as UTC so date-only and full ISO timestamps
    compare against each other.

    Returns:
        Aware datetime, or None if the value is missing or unparsable
    """
    if not value or not value.strip():
        return None
    value = value.strip()
    try:
        dt = date_parser.isoparse(value)
    except ValueError:
        try:
            dt = date_parser.parse(value)
        except (ValueError, OverflowError):
            return None
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=UTC)
    return dt


def utc_timestamp(moment: Optional[datetime] = None) -> str:
    """Format a moment as ISO-8601 UTC with milliseconds and a trailing Z."""
    moment = moment or datetime.now(UTC)
    if moment.tzinfo is None:
        moment = moment.replace(tzinfo=UTC)
    moment = moment.astimezone(UTC)
    return moment.strftime("%Y-%m-%dT%H:%M:%S.") + f"{moment.microsecond // 1000:03d}Z"


def date_to_timestamp(day: date) -> str:
    """Format a calendar date as a UTC midnight timestamp."""
    return utc_timestamp(datetime(day.year, day.month, day.day, tzinfo=UTC))
