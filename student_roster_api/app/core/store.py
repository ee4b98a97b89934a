"""
In-memory storage for student records.

The roster lives in a ``StudentStore`` owned by this module.  Records
are frozen ``Student`` dataclasses: updates replace a record instead of
mutating it, and readers receive tuple snapshots, so nothing handed to
the birthday logic can change underneath it.  Nothing is persisted;
restarting the process restores the seed roster.

Identifiers come from a counter that only moves forward, so an id
freed by a delete is never handed out again.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from typing import Dict, Optional, Tuple

from .config import settings
from .dates import CalendarDate, parse_birth_date

logger = logging.getLogger(__name__)

# Demo roster loaded when ``SEED_DEMO_DATA`` is enabled.
DEMO_STUDENTS: Tuple[Tuple[str, str], ...] = (
    ("Ten Lee", "1996-02-27"),
    ("Doyoung", "1996-02-01"),
    ("Jaemin", "2000-08-13"),
    ("Jeno", "2000-04-23"),
    ("Haechan", "2000-06-06"),
)

_UNSET = object()


@dataclass(frozen=True)
class Student:
    """A stored person: identity, display name and birth date."""

    id: int
    name: str
    birth_date: CalendarDate


class StudentStore:
    """Ordered, id-addressable collection of ``Student`` records."""

    def __init__(self, seed: bool = False) -> None:
        self._students: Dict[int, Student] = {}
        self._next_id = 1
        self._seed = seed
        if seed:
            self._load_demo_data()

    def _load_demo_data(self) -> None:
        for name, birth_date in DEMO_STUDENTS:
            self.create(name, parse_birth_date(birth_date))
        logger.debug("Seeded store with %d demo students", len(DEMO_STUDENTS))

    def snapshot(self) -> Tuple[Student, ...]:
        """Return every record in insertion order."""
        return tuple(self._students.values())

    def get(self, student_id: int) -> Optional[Student]:
        return self._students.get(student_id)

    def create(self, name: str, birth_date: CalendarDate) -> Student:
        student = Student(id=self._next_id, name=name, birth_date=birth_date)
        self._students[student.id] = student
        self._next_id += 1
        return student

    def update(self, student_id: int, name=_UNSET, birth_date=_UNSET) -> Optional[Student]:
        """Replace the given fields of a record; omitted fields are kept.

        Returns the new record, or ``None`` if no record has this id.
        """
        current = self._students.get(student_id)
        if current is None:
            return None
        changes = {}
        if name is not _UNSET:
            changes["name"] = name
        if birth_date is not _UNSET:
            changes["birth_date"] = birth_date
        updated = replace(current, **changes)
        self._students[student_id] = updated
        return updated

    def delete(self, student_id: int) -> Optional[Student]:
        """Remove a record and return it, or ``None`` if absent."""
        return self._students.pop(student_id, None)

    def reset(self) -> None:
        """Drop all records and restart ids, reseeding if configured."""
        self._students.clear()
        self._next_id = 1
        if self._seed:
            self._load_demo_data()

    def __len__(self) -> int:
        return len(self._students)


store = StudentStore(seed=settings.seed_demo_data)


def get_store() -> StudentStore:
    """FastAPI dependency returning the process-wide store."""
    return store
