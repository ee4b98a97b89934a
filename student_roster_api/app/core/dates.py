"""
Calendar date value type and birth date parsing.

Birth dates travel through the API as canonical ``YYYY-MM-DD`` text.
``parse_birth_date`` turns that text into a ``CalendarDate`` or raises
one of the ``BirthDateError`` subclasses below:

* ``FormatError`` – the text is not shaped like ``DDDD-DD-DD``.
* ``InvalidDateError`` – the shape is right but the date does not exist
  in the Gregorian calendar (``2021-02-30``, ``2023-02-29``...).

``CalendarDate`` has no time-of-day or timezone component.  All
arithmetic the birthday logic needs (comparison, day differences,
adding days and leap-day aware birthday placement) lives here so the
services never manipulate ``datetime`` objects directly.
"""

from __future__ import annotations

import calendar
import re
from dataclasses import dataclass
from datetime import date, timedelta

_DATE_PATTERN = re.compile(r"([0-9]{4})-([0-9]{2})-([0-9]{2})")


class BirthDateError(ValueError):
    """Base class for rejected birth date text."""

    def __init__(self, text: str, message: str) -> None:
        super().__init__(message)
        self.text = text


class FormatError(BirthDateError):
    """Text does not match the ``YYYY-MM-DD`` pattern."""

    def __init__(self, text: str) -> None:
        super().__init__(text, f"{text!r} is not in YYYY-MM-DD format")


class InvalidDateError(BirthDateError):
    """Text matches the pattern but names a non-existent date."""

    def __init__(self, text: str) -> None:
        super().__init__(text, f"{text!r} is not a valid calendar date")


def is_leap_year(year: int) -> bool:
    return calendar.isleap(year)


@dataclass(frozen=True, order=True)
class CalendarDate:
    """Immutable timezone-naive calendar date.

    Field order makes the generated comparisons chronological.  Instances
    should be built through ``parse_birth_date``, ``from_date`` or
    ``today`` so that they are always valid dates.
    """

    year: int
    month: int
    day: int

    @classmethod
    def from_date(cls, value: date) -> "CalendarDate":
        return cls(value.year, value.month, value.day)

    @classmethod
    def today(cls) -> "CalendarDate":
        return cls.from_date(date.today())

    def to_date(self) -> date:
        return date(self.year, self.month, self.day)

    def add_days(self, days: int) -> "CalendarDate":
        return CalendarDate.from_date(self.to_date() + timedelta(days=days))

    def days_until(self, other: "CalendarDate") -> int:
        """Whole days from this date to ``other`` (negative if ``other`` is earlier)."""
        return (other.to_date() - self.to_date()).days

    def birthday_in_year(self, year: int) -> "CalendarDate":
        """Return this date's month/day placed in ``year``.

        A 29 February birthday falls on 28 February in non-leap years.
        """
        if self.month == 2 and self.day == 29 and not is_leap_year(year):
            return CalendarDate(year, 2, 28)
        return CalendarDate(year, self.month, self.day)

    def isoformat(self) -> str:
        return f"{self.year:04d}-{self.month:02d}-{self.day:02d}"

    def __str__(self) -> str:
        return self.isoformat()


# Both roles share the same representation; the names document intent.
BirthDate = CalendarDate
ReferenceDate = CalendarDate


def parse_birth_date(text: str) -> CalendarDate:
    """Parse canonical ``YYYY-MM-DD`` text into a ``CalendarDate``.

    Raises ``FormatError`` when the text is not shaped like a date and
    ``InvalidDateError`` when the shape is right but the day does not
    exist (month out of range, day past month end, 29 February in a
    common year, year zero).
    """
    match = _DATE_PATTERN.fullmatch(text) if isinstance(text, str) else None
    if match is None:
        raise FormatError(str(text))
    year, month, day = (int(part) for part in match.groups())
    try:
        parsed = date(year, month, day)
    except ValueError:
        raise InvalidDateError(text) from None
    return CalendarDate.from_date(parsed)
