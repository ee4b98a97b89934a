"""
Shared FastAPI dependencies.

``get_reference_date`` is the only place the API reads the clock.
Tests replace it through ``app.dependency_overrides`` to pin "today".
"""

from ..core.dates import CalendarDate
from ..core.store import StudentStore, get_store

__all__ = ["get_reference_date", "get_store", "StudentStore"]


def get_reference_date() -> CalendarDate:
    return CalendarDate.today()
