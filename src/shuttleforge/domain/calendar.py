"""Calendar arithmetic over time-zone-naive dates.

All comparisons are midnight-to-midnight on :class:`datetime.date` values,
so daylight-saving transitions and wall-clock offsets can never shift a
result by a day.
"""

from __future__ import annotations

from datetime import date, timedelta

DateLike = date | str


def parse_date(value: DateLike) -> date:
    """Coerce an ISO ``YYYY-MM-DD`` string (or a date) to a :class:`date`.

    Raises:
        ValueError: If *value* is a string that is not a calendar date.
    """
    if isinstance(value, date):
        return value
    return date.fromisoformat(value.strip())


def days_between(a: DateLike, b: DateLike) -> int:
    """Signed number of whole calendar days from *a* to *b* (``b - a``)."""
    return (parse_date(b) - parse_date(a)).days


def add_days(value: DateLike, days: int) -> date:
    """Shift *value* by *days* calendar days (negative shifts go back)."""
    return parse_date(value) + timedelta(days=days)


def format_mmddyy(value: DateLike | None) -> str:
    """Render a date as ``MM/DD/YY`` for display. ``None`` renders empty.

    Examples:
        >>> format_mmddyy("2025-10-27")
        '10/27/25'
    """
    if value is None or value == "":
        return ""
    return parse_date(value).strftime("%m/%d/%y")
