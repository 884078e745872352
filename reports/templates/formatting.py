"""
Japanese date formatting for résumé reports.
"""

from datetime import date, datetime

# Formats a browser date input or a hand-typed date may arrive in
BIRTH_DATE_FORMATS = (
    '%Y-%m-%d',
    '%Y/%m/%d',
    '%Y.%m.%d',
    '%Y-%m-%dT%H:%M',
    '%Y-%m-%dT%H:%M:%S',
    '%Y-%m-%d %H:%M:%S',
)


def format_japanese_date(value: date) -> str:
    """Format a date as e.g. '1998年4月12日'."""
    return f"{value.year}年{value.month}月{value.day}日"


def format_as_of_date(value: date) -> str:
    """Format the render date stamp, e.g. '2025年11月30日現在'."""
    return f"{format_japanese_date(value)}現在"


def parse_birth_date(value: str):
    """
    Parse a birth date string.

    Returns:
        date, or None if the string is not a calendar date in a known format
    """
    text = value.strip()
    for fmt in BIRTH_DATE_FORMATS:
        try:
            return datetime.strptime(text, fmt).date()
        except ValueError:
            continue
    return None


def format_birth_date(value) -> str:
    """
    Format a submitted birth date for display.

    Parseable dates become the long Japanese form; anything else is shown
    verbatim.
    """
    if not value:
        return ''
    parsed = parse_birth_date(value)
    if parsed is None:
        return value
    return format_japanese_date(parsed)
