"""
Service layer for students.

``StudentService`` sits between the API handlers and the in-memory
store.  Reads take a snapshot of the store and pass it, together with
the caller's reference date, to the functions in ``birthday_service``.
Writes parse the submitted ``birthDate`` text first; ``FormatError`` and
``InvalidDateError`` propagate to the caller untouched so the API layer
can choose the HTTP response.
"""

from __future__ import annotations

import logging
from typing import List, Optional

from ..core.dates import BirthDateError, CalendarDate, parse_birth_date
from ..core.store import StudentStore
from ..schemas.student import StudentCreate, StudentRead, StudentUpdate, UpcomingBirthdayRead
from . import birthday_service


class StudentService:
    """Operations on the student roster."""

    @classmethod
    async def list_students(cls, store: StudentStore, reference: CalendarDate) -> List[StudentRead]:
        return [birthday_service.enrich(s, reference) for s in store.snapshot()]

    @classmethod
    async def get_student(
        cls, store: StudentStore, student_id: int, reference: CalendarDate
    ) -> Optional[StudentRead]:
        student = store.get(student_id)
        if student is None:
            return None
        return birthday_service.enrich(student, reference)

    @classmethod
    async def create_student(
        cls, store: StudentStore, data: StudentCreate, reference: CalendarDate
    ) -> StudentRead:
        """Validate the birth date, store a new student and return it enriched.

        ``data.name`` and ``data.birth_date`` must already be checked for
        presence by the caller.
        """
        logger = logging.getLogger(__name__)
        try:
            birth_date = parse_birth_date(data.birth_date)
        except BirthDateError as exc:
            logger.warning("Rejected new student %r: %s", data.name, exc)
            raise
        student = store.create(data.name, birth_date)
        logger.info("Created student %s", student.id)
        return birthday_service.enrich(student, reference)

    @classmethod
    async def update_student(
        cls, store: StudentStore, student_id: int, data: StudentUpdate, reference: CalendarDate
    ) -> Optional[StudentRead]:
        """Apply a partial update.

        Only fields present in the request body are changed.  Returns
        ``None`` when the student does not exist.
        """
        logger = logging.getLogger(__name__)
        if store.get(student_id) is None:
            return None
        changes = {}
        provided = data.model_dump(exclude_unset=True)
        if "name" in provided:
            changes["name"] = provided["name"]
        if "birth_date" in provided:
            try:
                changes["birth_date"] = parse_birth_date(provided["birth_date"])
            except BirthDateError as exc:
                logger.warning("Rejected update of student %s: %s", student_id, exc)
                raise
        student = store.update(student_id, **changes)
        logger.info("Updated student %s (%s)", student_id, ", ".join(sorted(changes)) or "no changes")
        return birthday_service.enrich(student, reference)

    @classmethod
    async def delete_student(
        cls, store: StudentStore, student_id: int, reference: CalendarDate
    ) -> Optional[StudentRead]:
        """Remove a student and return the removed record enriched, or ``None``."""
        student = store.delete(student_id)
        if student is None:
            return None
        logging.getLogger(__name__).info("Deleted student %s", student_id)
        return birthday_service.enrich(student, reference)

    @classmethod
    async def list_by_birth_month(
        cls, store: StudentStore, month: int, reference: CalendarDate
    ) -> List[StudentRead]:
        return birthday_service.filter_by_birth_month(store.snapshot(), month, reference)

    @classmethod
    async def list_upcoming_birthdays(
        cls, store: StudentStore, reference: CalendarDate, window_days: int
    ) -> List[UpcomingBirthdayRead]:
        return birthday_service.upcoming_birthdays(store.snapshot(), reference, window_days)
