"""
Errors raised by the fee core.

All of them are ValueError subclasses: they signal malformed input from the
caller, never a recoverable runtime condition.
"""


class InvalidMonthError(ValueError):
    """Month name is not one of the twelve recognised names."""


class InvalidSessionError(ValueError):
    """Academic session is not of the form YYYY-YYYY."""


class SelectionError(ValueError):
    """Submitted month selection breaks the pay-in-order rule."""
