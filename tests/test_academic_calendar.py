import datetime

import pytest

from services.academic_calendar import (
    ACADEMIC_MONTHS, QUARTERS, current_session, month_end, month_number, parse_session, resolve_year,
)
from services.errors import InvalidMonthError, InvalidSessionError


def test_academic_order_starts_in_april():
    assert ACADEMIC_MONTHS[0] == "April"
    assert ACADEMIC_MONTHS[-1] == "March"
    assert len(ACADEMIC_MONTHS) == 12
    assert sum(QUARTERS.values(), []) == ACADEMIC_MONTHS


def test_parse_session():
    assert parse_session("2024-2025") == (2024, 2025)


@pytest.mark.parametrize("bad", [
    "2024-25", "2024/2025", "2024-2026", "", "abcd-efgh", "2024-2025\n", " 2024-2025", "\u0662\u0660\u0662\u0664-\u0662\u0660\u0662\u0665",
])
def test_parse_session_rejects_malformed(bad):
    with pytest.raises(InvalidSessionError):
        parse_session(bad)


def test_resolve_year_splits_at_april():
    assert resolve_year("April", "2024-2025") == 2024
    assert resolve_year("December", "2024-2025") == 2024
    assert resolve_year("January", "2024-2025") == 2025
    assert resolve_year("March", "2024-2025") == 2025


def test_unknown_month_fails_fast():
    with pytest.raises(InvalidMonthError):
        month_number("Sept")
    with pytest.raises(ValueError):
        resolve_year("april", "2024-2025")


def test_month_end_handles_leap_february():
    assert month_end("February", "2023-2024") == datetime.date(2024, 2, 29)
    assert month_end("February", "2024-2025") == datetime.date(2025, 2, 28)
    assert month_end("July", "2024-2025") == datetime.date(2024, 7, 31)


def test_current_session():
    assert current_session(datetime.date(2024, 4, 1)) == "2024-2025"
    assert current_session(datetime.date(2025, 3, 31)) == "2024-2025"
