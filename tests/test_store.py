"""Tests for the in-memory student store."""

import dataclasses

import pytest

from student_roster_api.app.core.dates import CalendarDate
from student_roster_api.app.core.store import DEMO_STUDENTS, Student, StudentStore


def test_seeded_store_holds_demo_roster(store: StudentStore) -> None:
    students = store.snapshot()
    assert [s.id for s in students] == [1, 2, 3, 4, 5]
    assert [s.name for s in students] == [name for name, _ in DEMO_STUDENTS]
    assert students[0].birth_date == CalendarDate(1996, 2, 27)


def test_empty_store() -> None:
    assert StudentStore().snapshot() == ()
    assert len(StudentStore()) == 0


def test_create_assigns_increasing_ids() -> None:
    store = StudentStore()
    first = store.create("A", CalendarDate(2000, 1, 1))
    second = store.create("B", CalendarDate(2001, 1, 1))
    assert (first.id, second.id) == (1, 2)
    assert store.get(2) == second


def test_ids_are_not_reused_after_delete(store: StudentStore) -> None:
    store.delete(5)
    created = store.create("Mark", CalendarDate(1999, 8, 2))
    assert created.id == 6
    assert [s.id for s in store.snapshot()] == [1, 2, 3, 4, 6]


def test_update_changes_only_given_fields(store: StudentStore) -> None:
    updated = store.update(1, name="Ten")
    assert updated == Student(id=1, name="Ten", birth_date=CalendarDate(1996, 2, 27))
    updated = store.update(1, birth_date=CalendarDate(1996, 3, 1))
    assert updated.name == "Ten"
    assert updated.birth_date == CalendarDate(1996, 3, 1)
    assert store.get(1) == updated


def test_update_missing_returns_none(store: StudentStore) -> None:
    assert store.update(42, name="Nobody") is None


def test_delete_returns_removed_record(store: StudentStore) -> None:
    removed = store.delete(2)
    assert removed.name == "Doyoung"
    assert store.get(2) is None
    assert store.delete(2) is None


def test_snapshot_is_detached_from_later_writes(store: StudentStore) -> None:
    before = store.snapshot()
    store.update(1, name="Changed")
    store.delete(3)
    assert before[0].name == "Ten Lee"
    assert len(before) == 5


def test_records_are_immutable(store: StudentStore) -> None:
    with pytest.raises(dataclasses.FrozenInstanceError):
        store.get(1).name = "Mutated"


def test_reset_restores_seed(store: StudentStore) -> None:
    store.delete(1)
    store.create("Extra", CalendarDate(2010, 10, 10))
    store.reset()
    assert [s.id for s in store.snapshot()] == [1, 2, 3, 4, 5]
    assert store.create("Next", CalendarDate(2010, 10, 10)).id == 6
