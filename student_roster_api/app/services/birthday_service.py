"""
Date derivations for student records.

Every function here is pure: it takes the records and an explicit
reference date ("today" for the caller) and returns new values.  The
clock is never read in this module, and nothing here logs or touches
the store, so the same snapshot can be enriched by any number of
requests at once.

Birthdays are placed in a target year with
``CalendarDate.birthday_in_year``, which moves 29 February to
28 February in common years.
"""

from __future__ import annotations

from typing import Iterable, List

from ..core.dates import BirthDate, CalendarDate, ReferenceDate
from ..core.store import Student
from ..schemas.student import StudentRead, UpcomingBirthdayRead


def calculate_age(birth_date: BirthDate, reference: ReferenceDate) -> int:
    """Return completed years between ``birth_date`` and ``reference``.

    The age goes up on the birthday itself.  Birth dates after the
    reference date are the caller's problem and give a negative result.
    """
    years = reference.year - birth_date.year
    if (reference.month, reference.day) < (birth_date.month, birth_date.day):
        years -= 1
    return years


def in_birth_month(birth_date: BirthDate, month: int) -> bool:
    # ``month`` is expected to be 1..12; the endpoint validates it.
    return birth_date.month == month


def next_birthday(birth_date: BirthDate, reference: ReferenceDate) -> CalendarDate:
    """First occurrence of the birthday on or after ``reference``."""
    candidate = birth_date.birthday_in_year(reference.year)
    if candidate < reference:
        candidate = birth_date.birthday_in_year(reference.year + 1)
    return candidate


def enrich(student: Student, reference: CalendarDate) -> StudentRead:
    return StudentRead(
        id=student.id,
        name=student.name,
        birth_date=student.birth_date.isoformat(),
        age=calculate_age(student.birth_date, reference),
    )


def filter_by_birth_month(
    students: Iterable[Student], month: int, reference: CalendarDate
) -> List[StudentRead]:
    return [enrich(s, reference) for s in students if in_birth_month(s.birth_date, month)]


def upcoming_birthdays(
    students: Iterable[Student], reference: ReferenceDate, window_days: int
) -> List[UpcomingBirthdayRead]:
    """Students whose next birthday is within ``window_days`` of ``reference``.

    The window is closed at both ends: a birthday today counts (0 days)
    and so does one exactly ``window_days`` away.  Results are ordered
    by days remaining; ``sorted`` is stable, so students sharing a day
    keep their input order.
    """
    upcoming = []
    for student in students:
        candidate = next_birthday(student.birth_date, reference)
        days = reference.days_until(candidate)
        if not 0 <= days <= window_days:
            continue
        age = calculate_age(student.birth_date, reference)
        upcoming.append(
            UpcomingBirthdayRead(
                id=student.id,
                name=student.name,
                birth_date=student.birth_date.isoformat(),
                age=age,
                next_birthday=candidate.isoformat(),
                days_until_birthday=days,
                will_turn=age + 1,
            )
        )
    return sorted(upcoming, key=lambda item: item.days_until_birthday)
