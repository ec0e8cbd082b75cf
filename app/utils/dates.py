"""날짜 파싱 유틸리티.

Date parsing helpers for query/form parameters.

Dates travel over the wire as ``yyyy-MM-dd`` strings.
"""

from datetime import date, datetime

DATE_FORMAT: str = "%Y-%m-%d"


def parse_date(value: str) -> date:
    """Parse a ``yyyy-MM-dd`` string into a date.

    Args:
        value: Date string, e.g. "2024-03-15"

    Returns:
        date: Parsed calendar date

    Raises:
        ValueError: When the string is empty, malformed, or not a real date
    """
    if not value or not value.strip():
        raise ValueError("date value is empty")
    return datetime.strptime(value.strip(), DATE_FORMAT).date()
