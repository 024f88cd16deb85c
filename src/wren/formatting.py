"""Date formatting table used by page templates.

Only the formats listed in ``DATE_FORMATS`` are supported; anything else
falls back to ``YYYY-MM-DD``.
"""

from datetime import date, datetime

MONTH_NAMES = (
    "一月", "二月", "三月", "四月", "五月", "六月",
    "七月", "八月", "九月", "十月", "十一月", "十二月",
)

DATE_FORMATS = ("YYYY-MM-DD", "YYYY年MM月DD日", "MM月DD日", "YYYY", "MM", "month-name")


def parse_date(value: str | date) -> date:
    """Parse an ISO-8601 date or datetime string into a ``date``."""
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    text = value.strip()
    try:
        return date.fromisoformat(text)
    except ValueError:
        return datetime.fromisoformat(text).date()


def format_date(value: str | date, fmt: str = "YYYY-MM-DD") -> str:
    """Format a date with one of the site's fixed formats.

    Example:
        {{ post.date | format_date("YYYY年MM月DD日") }}  → "2024年06月01日"

    """
    d = parse_date(value)
    year = str(d.year)
    month = f"{d.month:02d}"
    day = f"{d.day:02d}"

    match fmt:
        case "YYYY年MM月DD日":
            return f"{year}年{month}月{day}日"
        case "MM月DD日":
            return f"{month}月{day}日"
        case "YYYY":
            return year
        case "MM":
            return month
        case "month-name":
            return MONTH_NAMES[d.month - 1]
        case _:
            return f"{year}-{month}-{day}"
