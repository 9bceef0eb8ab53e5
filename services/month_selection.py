"""
Sequential Month Selection

Fees must be paid in order: a selection always starts at the first unpaid
month and runs without gaps. Selecting a later month pulls in every unpaid
month before it; deselecting a month drops it and everything after it.
"""
from services.academic_calendar import ACADEMIC_MONTHS
from services.errors import SelectionError
from services.fee_status import PAID


def first_unpaid_index(records, months=ACADEMIC_MONTHS) -> int:
    """
    Index into `months` of the first record that is not paid.

    `records` maps month name -> record (anything with `payment_state`).
    Months without a record count as unpaid. Returns len(months) when
    everything is paid.
    """
    for idx, month in enumerate(months):
        record = records.get(month)
        if record is None or record.payment_state != PAID:
            return idx
    return len(months)


def toggle_month(selection, all_months, first_unpaid_index: int, month: str) -> list:
    """Return the selection after the user clicks `month`."""
    idx = all_months.index(month)
    if idx < first_unpaid_index:
        return list(selection)

    if month in selection:
        return list(all_months[first_unpaid_index:idx])
    return list(all_months[first_unpaid_index:idx + 1])


def eligible_months(records, months=ACADEMIC_MONTHS) -> list:
    """
    Months a user may click: the unbroken run of unpaid months starting at
    the first unpaid one. A paid month later in the session (set by hand by
    an accountant) ends the run.
    """
    eligible = []
    for month in months[first_unpaid_index(records, months):]:
        record = records.get(month)
        if record is not None and record.payment_state == PAID:
            break
        eligible.append(month)
    return eligible


def validate_selection(selection, records, months=ACADEMIC_MONTHS):
    """
    Check a submitted selection before recording a payment.

    Raises SelectionError unless the selection is non-empty, contains only
    unpaid months and equals the contiguous run starting at the first unpaid
    month.
    """
    if not selection:
        raise SelectionError("No months selected")

    for month in selection:
        if month not in months:
            raise SelectionError(f"Unknown month: {month}")
        record = records.get(month)
        if record is None:
            raise SelectionError(f"No fee record for {month}")
        if record.payment_state == PAID:
            raise SelectionError(f"{month} is already paid")

    start = first_unpaid_index(records, months)
    expected = list(months[start:start + len(selection)])
    if list(selection) != expected:
        raise SelectionError(
            f"Months must be paid in order starting from {months[start]}"
        )
