"""Shared pytest fixtures.

Endpoint tests run against a freshly seeded store and a pinned
reference date, both injected through ``app.dependency_overrides``.
"""

import os
import sys

import pytest
from fastapi.testclient import TestClient

# Make ``student_roster_api`` importable when running from a checkout.
PROJECT_ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if PROJECT_ROOT not in sys.path:
    sys.path.insert(0, PROJECT_ROOT)

from student_roster_api.app.api.deps import get_reference_date, get_store  # noqa: E402
from student_roster_api.app.core.dates import CalendarDate  # noqa: E402
from student_roster_api.app.core.store import StudentStore  # noqa: E402
from student_roster_api.app.main import app  # noqa: E402

# A week before Ten Lee's birthday, in a leap year.
TODAY = CalendarDate(2024, 2, 20)


@pytest.fixture
def store() -> StudentStore:
    return StudentStore(seed=True)


@pytest.fixture
def client(store):
    app.dependency_overrides[get_store] = lambda: store
    app.dependency_overrides[get_reference_date] = lambda: TODAY
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()
