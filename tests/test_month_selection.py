import random

import pytest

from services.academic_calendar import ACADEMIC_MONTHS
from services.errors import SelectionError
from services.fee_records import MonthlyFeeRecord
from services.month_selection import eligible_months, first_unpaid_index, toggle_month, validate_selection


def make_records(paid=(), amount=5000):
    return {
        m: MonthlyFeeRecord(m, amount, "paid" if m in paid else "pending")
        for m in ACADEMIC_MONTHS
    }


@pytest.fixture
def records():
    return make_records(paid=("April", "May", "June"))


def test_first_unpaid_index(records):
    assert first_unpaid_index(records) == 3
    assert first_unpaid_index(make_records()) == 0
    assert first_unpaid_index(make_records(paid=ACADEMIC_MONTHS)) == 12


def test_select_fills_gap_from_first_unpaid(records):
    anchor = first_unpaid_index(records)
    selection = toggle_month([], ACADEMIC_MONTHS, anchor, "September")
    assert selection == ["July", "August", "September"]


def test_deselect_cuts_tail(records):
    anchor = first_unpaid_index(records)
    selection = toggle_month(["July", "August", "September"], ACADEMIC_MONTHS, anchor, "August")
    assert selection == ["July"]


def test_deselect_first_clears(records):
    anchor = first_unpaid_index(records)
    assert toggle_month(["July", "August"], ACADEMIC_MONTHS, anchor, "July") == []


def test_select_then_deselect_restores(records):
    anchor = first_unpaid_index(records)
    for before in ([], ["July"], ["July", "August"]):
        next_month = ACADEMIC_MONTHS[anchor + len(before)]
        selected = toggle_month(before, ACADEMIC_MONTHS, anchor, next_month)
        assert toggle_month(selected, ACADEMIC_MONTHS, anchor, next_month) == before


def test_month_before_anchor_is_noop(records):
    anchor = first_unpaid_index(records)
    assert toggle_month(["July"], ACADEMIC_MONTHS, anchor, "May") == ["July"]


def test_toggle_does_not_mutate_input(records):
    selection = ["July"]
    toggle_month(selection, ACADEMIC_MONTHS, 3, "October")
    assert selection == ["July"]


def test_random_clicks_stay_contiguous(records):
    rng = random.Random(7)
    anchor = first_unpaid_index(records)
    selection = []
    for _ in range(200):
        selection = toggle_month(selection, ACADEMIC_MONTHS, anchor, rng.choice(ACADEMIC_MONTHS[anchor:]))
        assert selection == ACADEMIC_MONTHS[anchor:anchor + len(selection)]


def test_eligible_months(records):
    assert eligible_months(records) == ACADEMIC_MONTHS[3:]
    assert eligible_months(make_records(paid=ACADEMIC_MONTHS)) == []


def test_eligible_run_stops_at_later_paid_month():
    records = make_records(paid=("April", "June"))
    assert eligible_months(records) == ["May"]


def test_validate_selection_accepts_anchored_run(records):
    validate_selection(["July", "August"], records)


@pytest.mark.parametrize("selection", [
    [],
    ["August"],
    ["July", "September"],
    ["June", "July"],
    ["July", "Jully"],
])
def test_validate_selection_rejects(records, selection):
    with pytest.raises(SelectionError):
        validate_selection(selection, records)
