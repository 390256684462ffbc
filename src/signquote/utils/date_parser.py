"""Date parsing utilities."""

from datetime import date, timedelta
from dateutil import parser as date_parser

from signquote.domain.errors import ValidationError


def parse_date(date_str: str) -> date:
    """Parse a date string into a date object.

    Supports:
    - ISO dates: "2024-01-15"
    - Day-first dates as written locally: "15/05/2023", "15 May 2023"
    - Relative dates: "today", "yesterday", "tomorrow" ("hoy", "ayer", "mañana")

    Args:
        date_str: Date string

    Returns:
        Date object

    Raises:
        ValidationError: If date string cannot be parsed
    """
    date_str = date_str.strip().lower()
    today = date.today()

    relative_dates = {
        "today": today,
        "hoy": today,
        "yesterday": today - timedelta(days=1),
        "ayer": today - timedelta(days=1),
        "tomorrow": today + timedelta(days=1),
        "mañana": today + timedelta(days=1),
    }

    if date_str in relative_dates:
        return relative_dates[date_str]

    # ISO first: dayfirst parsing would swap month and day in "2024-01-05"
    try:
        return date.fromisoformat(date_str)
    except ValueError:
        pass

    try:
        dt = date_parser.parse(date_str, dayfirst=True)
        return dt.date()
    except (ValueError, OverflowError) as e:
        raise ValidationError(f"Could not parse date '{date_str}': {e}")
