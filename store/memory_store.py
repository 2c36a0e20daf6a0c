# store/memory_store.py

"""
Non-transactional entity store backed by plain dictionaries.

Records are stored per table in dictionaries keyed by their `key`. Writes are
staged in a `ChangeStager` and applied on `save()` against a working copy of
the tables; the copy only replaces the live tables once every change has
applied, so `save()` is all-or-nothing.

When constructed with a `dir_path`, every successful save also replaces a JSON
snapshot of all tables in that directory, and `InMemoryStore.load()` restores
a store from such a snapshot.
"""

from __future__ import annotations

import json
import os
from typing import Any

from models.course import Course
from models.department import Department
from models.enrollment import Enrollment
from models.student import Student
from models.types import RecordType
from store.base import EntityStore, Repository, StoreError
from store.change_stager import ChangeKind, ChangeStager, StagedChange

_TABLES: dict[str, type] = {
    "departments": Department,
    "courses": Course,
    "students": Student,
    "enrollments": Enrollment,
}

SNAPSHOT_FILENAME = "course_management.json"

# tables whose records receive an auto-incremented integer id
_ID_TABLES = ("departments", "courses", "students")


def _copy(record: RecordType) -> RecordType:
    return type(record).from_dict(record.to_dict())


class MemoryRepository(Repository[RecordType]):

    def __init__(self, store: InMemoryStore, table: str, record_name: str):
        self._store = store
        self._table = table
        self.record_name = record_name

    def find_by_id(self, key: Any) -> RecordType | None:
        record = self._store._tables[self._table].get(key)
        return _copy(record) if record is not None else None

    def find_all(self) -> list[RecordType]:
        return [_copy(r) for r in self._store._tables[self._table].values()]

    def add(self, record: RecordType) -> None:
        self._store._stager.stage(ChangeKind.ADD, self._table, record)

    def update(self, record: RecordType) -> None:
        self._store._stager.stage(ChangeKind.UPDATE, self._table, record)

    def delete(self, key: Any) -> None:
        self._store._stager.stage(ChangeKind.DELETE, self._table, key)


class InMemoryStore(EntityStore):

    def __init__(self, dir_path: str | None = None):
        self._tables: dict[str, dict[Any, Any]] = {name: {} for name in _TABLES}
        self._next_ids: dict[str, int] = {name: 1 for name in _ID_TABLES}
        self._stager = ChangeStager()
        self._dir_path = dir_path

        self.departments = MemoryRepository(self, "departments", "department")
        self.courses = MemoryRepository(self, "courses", "course")
        self.students = MemoryRepository(self, "students", "student")
        self.enrollments = MemoryRepository(self, "enrollments", "enrollment")

    # === properties ===

    @property
    def dir_path(self) -> str | None:
        return self._dir_path

    @property
    def has_staged_changes(self) -> bool:
        return not self._stager.is_empty()

    def supports_transactions(self) -> bool:
        return False

    # === public classmethods ===

    @classmethod
    def load(cls, dir_path: str) -> InMemoryStore:
        """
        Restores a store from a JSON snapshot directory.

        Args:
            dir_path (str): Directory holding the snapshot file. A missing file is
                treated as an empty store.

        Returns:
            A store bound to `dir_path`, so subsequent saves rewrite the snapshot.

        Raises:
            StoreError: If the snapshot file cannot be read or holds malformed records.
        """

        def read_json(path: str) -> dict[str, Any]:
            if not os.path.exists(path):
                return {}

            with open(path, "r") as f:
                data = json.load(f)

            if not isinstance(data, dict):
                raise ValueError(f"Expected {SNAPSHOT_FILENAME} to contain an object.")

            return data

        store = cls(dir_path)

        try:
            snapshot = read_json(os.path.join(dir_path, SNAPSHOT_FILENAME))

            for table, record_cls in _TABLES.items():
                records = snapshot.get(table, [])

                if not isinstance(records, list):
                    raise ValueError(f"Expected table {table} to contain a list.")

                for record_dict in records:
                    store._stager.stage(
                        ChangeKind.ADD, table, record_cls.from_dict(record_dict)
                    )

            store._apply_staged(write_snapshot=False)

        except json.JSONDecodeError as e:
            raise StoreError("Failed to parse JSON data", e) from e

        except (KeyError, TypeError, ValueError, OSError) as e:
            raise StoreError(f"Failed to load store from {dir_path}", e) from e

        return store

    # === persistence ===

    def save(self) -> int:
        return self._apply_staged(write_snapshot=self._dir_path is not None)

    def discard(self) -> None:
        self._stager.clear()

    def _apply_staged(self, write_snapshot: bool) -> int:
        """
        Applies every staged change against a working copy of the tables.

        Returns:
            The number of changes applied.

        Raises:
            StoreError: If any change fails. The live tables are left untouched
                and the staged changes are dropped.

        Notes:
            - Ids are assigned to added records (and written back onto the caller's
              objects) only after the whole batch has applied.
        """
        pending = self._stager.pending()
        self._stager.clear()

        tables = {name: dict(rows) for name, rows in self._tables.items()}
        next_ids = dict(self._next_ids)
        assigned: list[tuple[Any, int]] = []

        try:
            for change in pending:
                self._apply_change(change, tables, next_ids, assigned)

            if write_snapshot:
                self._write_snapshot(tables)

        except StoreError:
            raise

        except (OSError, TypeError, ValueError) as e:
            raise StoreError("Failed to write data to disk", e) from e

        self._tables = tables
        self._next_ids = next_ids

        for record, new_id in assigned:
            record.id = new_id

        return len(pending)

    def _apply_change(
        self,
        change: StagedChange,
        tables: dict[str, dict[Any, Any]],
        next_ids: dict[str, int],
        assigned: list[tuple[Any, int]],
    ) -> None:
        rows = tables[change.table]
        record_name = change.table.rstrip("s")

        match change.kind:
            case ChangeKind.ADD:
                record = _copy(change.payload)

                if change.table in _ID_TABLES:
                    if record.id is None:
                        record.id = next_ids[change.table]
                        assigned.append((change.payload, record.id))
                    next_ids[change.table] = max(next_ids[change.table], record.id + 1)

                if record.key in rows:
                    raise StoreError(
                        f"Duplicate key {record.key} for {record_name} record."
                    )

                rows[record.key] = record

            case ChangeKind.UPDATE:
                record = _copy(change.payload)

                if record.key not in rows:
                    raise StoreError(
                        f"No matching {record_name} record found for {record.key}."
                    )

                rows[record.key] = record

            case ChangeKind.DELETE:
                if change.payload not in rows:
                    raise StoreError(
                        f"No matching {record_name} record could be found for deletion: {change.payload}."
                    )

                del rows[change.payload]

    def _write_snapshot(self, tables: dict[str, dict[Any, Any]]) -> None:
        """
        Serializes every table into the snapshot file.

        The snapshot is written to a temporary file beside the live one and only
        moved over it with `os.replace()` once fully written, so a failed write
        leaves the previous snapshot in place.
        """
        data = {
            table: [r.to_dict() for r in sorted(rows.values(), key=lambda r: r.key)]
            for table, rows in tables.items()
        }

        os.makedirs(self._dir_path, exist_ok=True)

        path = os.path.join(self._dir_path, SNAPSHOT_FILENAME)
        tmp_path = f"{path}.tmp"

        try:
            with open(tmp_path, "w") as f:
                json.dump(data, f, indent=2, sort_keys=True)

            os.replace(tmp_path, path)

        finally:
            if os.path.isfile(tmp_path):
                os.remove(tmp_path)
