"""
Student endpoints for API v1.

CRUD routes for the roster plus two read-only views: students born in
a given month and students with a birthday coming up.  Every response
is computed from the stored records at request time against the
reference date supplied by ``get_reference_date``.

Invalid ``birthDate`` values are answered with HTTP 400 and a message
that tells format problems apart from impossible dates.
"""

from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query, status

from student_roster_api.app.api.deps import StudentStore, get_reference_date, get_store
from student_roster_api.app.core.config import settings
from student_roster_api.app.core.dates import BirthDateError, CalendarDate, FormatError
from student_roster_api.app.schemas.student import (
    BirthMonthStudents,
    StudentCreate,
    StudentDeleted,
    StudentRead,
    StudentUpdate,
    UpcomingBirthdays,
)
from student_roster_api.app.services.student_service import StudentService

router = APIRouter()

NOT_FOUND = "Student not found"


def _birth_date_error(exc: BirthDateError) -> HTTPException:
    if isinstance(exc, FormatError):
        detail = "birthDate must be in YYYY-MM-DD format"
    else:
        detail = "Invalid birthDate"
    return HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=detail)


@router.get("", response_model=List[StudentRead])
async def list_students(
    store: StudentStore = Depends(get_store),
    today: CalendarDate = Depends(get_reference_date),
) -> List[StudentRead]:
    """Return every student with their current age."""
    return await StudentService.list_students(store, today)


# The two views below must be declared before ``/{student_id}``.
@router.get("/birth-month/{month}", response_model=BirthMonthStudents)
async def list_by_birth_month(
    month: int,
    store: StudentStore = Depends(get_store),
    today: CalendarDate = Depends(get_reference_date),
) -> BirthMonthStudents:
    """Return students born in ``month`` (1 = January), regardless of year."""
    if month < 1 or month > 12:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST, detail="Month must be between 1 and 12"
        )
    students = await StudentService.list_by_birth_month(store, month, today)
    return BirthMonthStudents(month=month, count=len(students), students=students)


@router.get("/upcoming-birthdays", response_model=UpcomingBirthdays)
async def list_upcoming_birthdays(
    days: Optional[int] = Query(None, ge=0, le=366, description="Window size in days"),
    store: StudentStore = Depends(get_store),
    today: CalendarDate = Depends(get_reference_date),
) -> UpcomingBirthdays:
    """Return students whose next birthday is within ``days`` days, soonest first.

    The window includes both today and its last day.  When ``days`` is
    omitted the configured default (30) applies.
    """
    window = settings.upcoming_window_days if days is None else days
    students = await StudentService.list_upcoming_birthdays(store, today, window)
    return UpcomingBirthdays(count=len(students), students=students)


@router.get("/{student_id}", response_model=StudentRead)
async def get_student(
    student_id: int,
    store: StudentStore = Depends(get_store),
    today: CalendarDate = Depends(get_reference_date),
) -> StudentRead:
    student = await StudentService.get_student(store, student_id, today)
    if student is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=NOT_FOUND)
    return student


@router.post("", response_model=StudentRead, status_code=status.HTTP_201_CREATED)
async def create_student(
    student_in: StudentCreate,
    store: StudentStore = Depends(get_store),
    today: CalendarDate = Depends(get_reference_date),
) -> StudentRead:
    """Add a student.  Both ``name`` and ``birthDate`` are required."""
    if not student_in.name or not student_in.birth_date:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST, detail="Name and birthDate are required"
        )
    try:
        return await StudentService.create_student(store, student_in, today)
    except BirthDateError as exc:
        raise _birth_date_error(exc) from exc


@router.put("/{student_id}", response_model=StudentRead)
async def update_student(
    student_id: int,
    student_in: StudentUpdate,
    store: StudentStore = Depends(get_store),
    today: CalendarDate = Depends(get_reference_date),
) -> StudentRead:
    """Update the provided fields of a student."""
    if "name" in student_in.model_fields_set and not student_in.name:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Name cannot be empty")
    try:
        student = await StudentService.update_student(store, student_id, student_in, today)
    except BirthDateError as exc:
        raise _birth_date_error(exc) from exc
    if student is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=NOT_FOUND)
    return student


@router.delete("/{student_id}", response_model=StudentDeleted)
async def delete_student(
    student_id: int,
    store: StudentStore = Depends(get_store),
    today: CalendarDate = Depends(get_reference_date),
) -> StudentDeleted:
    """Delete a student and echo the removed record."""
    student = await StudentService.delete_student(store, student_id, today)
    if student is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=NOT_FOUND)
    return StudentDeleted(message="Student deleted", deleted_student=student)
