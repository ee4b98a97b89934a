"""
Pydantic schemas for students.

Request bodies accept ``birthDate`` as raw text; parsing and calendar
validation happen in the service layer so that malformed dates can be
reported with specific messages instead of a generic 422.  Response
models are the enriched views of a student: ``age`` is always present,
and the upcoming birthdays view adds ``nextBirthday``,
``daysUntilBirthday`` and ``willTurn``.  Field names are snake_case in
Python and camelCase on the wire.
"""

from typing import List, Optional

from pydantic import BaseModel, Field


class StudentCreate(BaseModel):
    """Schema for creating a student.

    Both fields are optional at the schema level; the endpoint rejects
    a body missing either one with HTTP 400.
    """

    name: Optional[str] = Field(None, examples=["Mark Lee"])
    birth_date: Optional[str] = Field(None, alias="birthDate", examples=["1999-08-02"])

    model_config = {"populate_by_name": True}


class StudentUpdate(BaseModel):
    """Schema for updating a student.

    All fields are optional; only provided fields will be updated.
    """

    name: Optional[str] = None
    birth_date: Optional[str] = Field(None, alias="birthDate")

    model_config = {"populate_by_name": True}


class StudentRead(BaseModel):
    """A student with their current age."""

    id: int
    name: str
    birth_date: str = Field(..., alias="birthDate", examples=["1996-02-27"])
    age: int

    model_config = {"populate_by_name": True}


class UpcomingBirthdayRead(StudentRead):
    """A student whose next birthday falls inside the requested window."""

    next_birthday: str = Field(..., alias="nextBirthday")
    days_until_birthday: int = Field(..., alias="daysUntilBirthday", ge=0)
    will_turn: int = Field(..., alias="willTurn")


class BirthMonthStudents(BaseModel):
    month: int
    count: int
    students: List[StudentRead]


class UpcomingBirthdays(BaseModel):
    count: int
    students: List[UpcomingBirthdayRead]


class StudentDeleted(BaseModel):
    message: str
    deleted_student: StudentRead = Field(..., alias="deletedStudent")

    model_config = {"populate_by_name": True}
