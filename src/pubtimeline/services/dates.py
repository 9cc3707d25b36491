"""Calendar helpers for the raw date strings found on article pages."""

from __future__ import annotations

from datetime import date, datetime

from dateutil import parser as dateparser

# Two defaults that disagree on year and month: a component the parser filled
# from the default comes out different between the two passes.
_PROBE_DEFAULTS = (datetime(2000, 1, 1), datetime(2001, 2, 1))


class MissingDateError(ValueError):
    """Raised when a day distance is requested for an unresolved date."""


def parse_full(raw: str | None) -> date | None:
    """Resolve ``raw`` to a calendar date, or ``None`` when it cannot be.

    Accepts anything python-dateutil understands as long as both month and
    year are present; a missing day resolves to the first of the month, so
    ``"March 2020"`` becomes ``2020-03-01``.
    """
    if not raw or not raw.strip():
        return None
    try:
        first, second = (dateparser.parse(raw, default=d) for d in _PROBE_DEFAULTS)
    except (ValueError, OverflowError):
        return None
    if (first.year, first.month) != (second.year, second.month):
        return None
    return first.date()


def month_year(raw: str | None) -> tuple[str, str]:
    """Return the textual ``(month, year)`` of ``raw``.

    ``"15 March 2021"`` and ``"March 2021"`` both give ``("March", "2021")``;
    any other token count gives ``("", "")``. The text does not have to be a
    valid date.
    """
    tokens = (raw or "").split()
    if len(tokens) == 3:
        return tokens[1], tokens[2]
    if len(tokens) == 2:
        return tokens[0], tokens[1]
    return "", ""


def day_distance(start: date | None, end: date | None) -> int:
    """Whole days from ``start`` to ``end``, never negative.

    A negative span (for example an issue date known only to the month that
    precedes a fully dated publication) collapses to 0.
    """
    if start is None or end is None:
        raise MissingDateError("day_distance requires two resolved dates")
    return max(0, (end - start).days)
