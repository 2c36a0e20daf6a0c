# tests/test_memory_store.py

import datetime
import json
import os

import pytest

from models.course import Course
from models.department import Department
from models.enrollment import Enrollment
from models.student import Student
from store.base import StoreError, TransactionsUnsupportedError
from store.change_stager import ChangeKind, ChangeStager
from store.memory_store import SNAPSHOT_FILENAME, InMemoryStore

# === change stager ===


def test_stager_preserves_order_and_filters_by_table():
    stager = ChangeStager()
    stager.stage(ChangeKind.ADD, "departments", "a")
    stager.stage(ChangeKind.DELETE, "courses", 3)
    stager.stage(ChangeKind.UPDATE, "departments", "b")

    assert len(stager) == 3
    assert [c.payload for c in stager.pending("departments")] == ["a", "b"]

    stager.clear()
    assert stager.is_empty()


# === staging and saving ===


def test_add_is_invisible_until_save():
    store = InMemoryStore()
    department = Department(None, "Physics")

    store.departments.add(department)

    assert store.has_staged_changes
    assert store.departments.find_all() == []

    assert store.save() == 1
    assert department.id == 1
    assert store.departments.find_by_id(1).name == "Physics"
    assert not store.has_staged_changes


def test_ids_increment_per_table():
    store = InMemoryStore()
    first, second = Department(None, "Physics"), Department(None, "Chemistry")

    store.departments.add(first)
    store.departments.add(second)
    store.save()

    assert (first.id, second.id) == (1, 2)


def test_find_returns_detached_copies():
    store = InMemoryStore()
    store.departments.add(Department(None, "Physics"))
    store.save()

    copy = store.departments.find_by_id(1)
    copy.name = "Changed"

    assert store.departments.find_by_id(1).name == "Physics"


def test_discard_drops_staged_changes():
    store = InMemoryStore()
    store.departments.add(Department(None, "Physics"))

    store.discard()

    assert store.save() == 0
    assert store.departments.find_all() == []


def test_failed_save_applies_nothing():
    store = InMemoryStore()
    store.enrollments.add(Enrollment(1, 1, datetime.date(2025, 9, 1)))
    store.save()

    store.departments.add(Department(None, "Physics"))
    store.enrollments.add(Enrollment(1, 1, datetime.date(2025, 9, 2)))

    with pytest.raises(StoreError):
        store.save()

    assert store.departments.find_all() == []
    assert len(store.enrollments.find_all()) == 1
    assert not store.has_staged_changes


def test_update_and_delete_missing_records_raise():
    store = InMemoryStore()

    store.departments.update(Department(9, "Ghost"))
    with pytest.raises(StoreError):
        store.save()

    store.departments.delete(9)
    with pytest.raises(StoreError):
        store.save()


def test_memory_store_has_no_transactions():
    store = InMemoryStore()

    assert not store.supports_transactions()
    with pytest.raises(TransactionsUnsupportedError):
        store.begin()


# === json snapshot ===


def test_save_writes_snapshot_and_load_restores_it(tmp_path):
    store = InMemoryStore(str(tmp_path))
    department = Department(None, "Physics")
    store.departments.add(department)
    store.save()

    student = Student(
        None, "S001", "Alice Nguyen", "alice@example.edu", department.id,
        datetime.date(2000, 1, 15),
    )
    store.students.add(student)
    store.save()

    store.enrollments.add(Enrollment(student.id, 1, datetime.date(2025, 9, 1), 9.0))
    store.save()

    with open(os.path.join(tmp_path, SNAPSHOT_FILENAME)) as f:
        assert json.load(f)["students"][0]["date_of_birth"] == "2000-01-15"

    restored = InMemoryStore.load(str(tmp_path))

    assert restored.dir_path == str(tmp_path)
    assert restored.departments.find_by_id(department.id).name == "Physics"
    assert restored.students.find_by_id(student.id).email == "alice@example.edu"
    assert restored.enrollments.find_by_id((student.id, 1)).grade == 9.0

    # ids continue after the highest restored id
    second = Department(None, "Chemistry")
    restored.departments.add(second)
    restored.save()
    assert second.id == department.id + 1


def test_load_from_empty_directory(tmp_path):
    store = InMemoryStore.load(str(tmp_path))

    assert store.departments.find_all() == []


def test_load_malformed_snapshot_raises(tmp_path):
    with open(os.path.join(tmp_path, SNAPSHOT_FILENAME), "w") as f:
        f.write("{not json")

    with pytest.raises(StoreError):
        InMemoryStore.load(str(tmp_path))


def test_load_snapshot_with_non_list_table_raises(tmp_path):
    with open(os.path.join(tmp_path, SNAPSHOT_FILENAME), "w") as f:
        json.dump({"departments": {"id": 1}}, f)

    with pytest.raises(StoreError):
        InMemoryStore.load(str(tmp_path))


def test_failed_snapshot_write_keeps_previous_snapshot(tmp_path, monkeypatch):
    store = InMemoryStore(str(tmp_path))
    store.departments.add(Department(None, "Mathematics"))
    store.save()

    real_dump = json.dump

    def dump_then_fail(obj, fp, **kwargs):
        # leave a truncated document behind before failing
        fp.write('{"departments": [')
        raise OSError("disk full")

    monkeypatch.setattr(json, "dump", dump_then_fail)

    store.departments.add(Department(None, "Physics"))
    store.courses.add(Course(None, "MATH101", "Calculus", 5, 1))
    with pytest.raises(StoreError):
        store.save()

    monkeypatch.setattr(json, "dump", real_dump)

    assert [d.name for d in store.departments.find_all()] == ["Mathematics"]
    assert store.courses.find_all() == []
    assert os.listdir(tmp_path) == [SNAPSHOT_FILENAME]

    restored = InMemoryStore.load(str(tmp_path))

    assert [d.name for d in restored.departments.find_all()] == ["Mathematics"]
    assert restored.courses.find_all() == []


def test_failed_snapshot_replace_removes_temp_file(tmp_path, monkeypatch):
    store = InMemoryStore(str(tmp_path))
    store.departments.add(Department(None, "Mathematics"))
    store.save()

    def refuse_replace(src, dst):
        raise PermissionError(f"cannot replace {dst}")

    monkeypatch.setattr(os, "replace", refuse_replace)

    store.departments.add(Department(None, "Physics"))
    with pytest.raises(StoreError):
        store.save()

    monkeypatch.undo()

    assert os.listdir(tmp_path) == [SNAPSHOT_FILENAME]
    restored = InMemoryStore.load(str(tmp_path))
    assert [d.name for d in restored.departments.find_all()] == ["Mathematics"]
