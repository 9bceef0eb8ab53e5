"""
Academic Calendar Helpers

A session runs from April of year N to March of year N+1 and is written
"N-(N+1)", e.g. "2024-2025".
"""
import calendar
import datetime
import re

from services.errors import InvalidMonthError, InvalidSessionError

CALENDAR_MONTHS = [
    "January", "February", "March", "April", "May", "June",
    "July", "August", "September", "October", "November", "December",
]

# Order in which fees fall due within a session
ACADEMIC_MONTHS = CALENDAR_MONTHS[3:] + CALENDAR_MONTHS[:3]

QUARTERS = {
    "Quarter 1": ["April", "May", "June"],
    "Quarter 2": ["July", "August", "September"],
    "Quarter 3": ["October", "November", "December"],
    "Quarter 4": ["January", "February", "March"],
}

_SESSION_RE = re.compile(r"([0-9]{4})-([0-9]{4})")


def month_number(month: str) -> int:
    """1-based calendar number of a month name (January = 1)."""
    try:
        return CALENDAR_MONTHS.index(month) + 1
    except ValueError:
        raise InvalidMonthError(f"Unknown month: {month!r}") from None


def parse_session(session: str):
    """Split "2024-2025" into (2024, 2025)."""
    match = _SESSION_RE.fullmatch(session or "")
    if not match:
        raise InvalidSessionError(f"Session must look like YYYY-YYYY, got {session!r}")

    first, second = int(match.group(1)), int(match.group(2))
    if second != first + 1:
        raise InvalidSessionError(f"Session years must be consecutive, got {session!r}")
    return first, second


def resolve_year(month: str, session: str) -> int:
    """Calendar year a month falls in for the given session."""
    first, second = parse_session(session)
    # April (4) onwards belongs to the first year
    return first if month_number(month) >= 4 else second


def month_end(month: str, session: str) -> datetime.date:
    year = resolve_year(month, session)
    number = month_number(month)
    last_day = calendar.monthrange(year, number)[1]
    return datetime.date(year, number, last_day)


def current_session(today: datetime.date) -> str:
    """Session that contains the given day."""
    start = today.year if today.month >= 4 else today.year - 1
    return f"{start}-{start + 1}"
