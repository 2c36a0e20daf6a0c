# store/sql_store.py

"""
Transactional entity store backed by SQLAlchemy.

Uses the SQLAlchemy 2.0 ORM with a single long-lived `Session`. Repository
writes are staged in the session and flushed by `save()`. Outside an explicit
transaction `save()` also commits; inside one, the flush stays pending until
`Transaction.commit()` or is undone by `Transaction.rollback()`.

Every `SQLAlchemyError` raised by the driver is converted into a `StoreError`.

Example:
    >>> store = SqlStore("sqlite://")
    >>> store.departments.add(Department(None, "Information Technology"))
    >>> store.save()
    1
"""

from __future__ import annotations

import logging
from contextlib import contextmanager
from typing import Any, Iterator

from sqlalchemy import create_engine, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from models.types import RecordType
from store.base import EntityStore, Repository, StoreError, Transaction
from store.sql_tables import Base, CourseRow, DepartmentRow, EnrollmentRow, StudentRow

logger = logging.getLogger(__name__)


class SqlRepository(Repository[RecordType]):

    def __init__(self, store: SqlStore, row_cls: type, record_name: str):
        self._store = store
        self._row_cls = row_cls
        self.record_name = record_name

    @property
    def _session(self) -> Session:
        return self._store._session

    def find_by_id(self, key: Any) -> RecordType | None:
        if key is None:
            return None

        with self._store._translate_errors(f"finding {self.record_name}"):
            row = self._session.get(self._row_cls, key)
            return row.to_record() if row is not None else None

    def find_all(self) -> list[RecordType]:
        with self._store._translate_errors(f"listing {self.record_name} records"):
            rows = self._session.scalars(select(self._row_cls)).all()
            return [row.to_record() for row in rows]

    def add(self, record: RecordType) -> None:
        row = self._row_cls.from_record(record)
        self._session.add(row)
        self._store._staged_count += 1

        if hasattr(record, "id"):
            self._store._added.append((record, row))

    def update(self, record: RecordType) -> None:
        with self._store._translate_errors(f"updating {self.record_name}"):
            row = self._session.get(self._row_cls, record.key)

        if row is None:
            raise StoreError(
                f"No matching {self.record_name} record found for {record.key}."
            )

        row.apply(record)
        self._store._staged_count += 1

    def delete(self, key: Any) -> None:
        with self._store._translate_errors(f"deleting {self.record_name}"):
            row = self._session.get(self._row_cls, key)

        if row is None:
            raise StoreError(
                f"No matching {self.record_name} record could be found for deletion: {key}."
            )

        self._session.delete(row)
        self._store._staged_count += 1


class SqlTransaction(Transaction):

    def __init__(self, store: SqlStore):
        self._store = store
        self._active = True

    @property
    def is_active(self) -> bool:
        return self._active

    def commit(self) -> None:
        self._require_active()
        self._active = False
        self._store._end_transaction(commit=True)

    def rollback(self) -> None:
        self._require_active()
        self._active = False
        self._store._end_transaction(commit=False)

    def _require_active(self) -> None:
        if not self._active:
            raise StoreError("Transaction is no longer active.")


class SqlStore(EntityStore):

    def __init__(self, database_url: str, echo: bool = False):
        try:
            self._engine = create_engine(database_url, echo=echo)
            Base.metadata.create_all(self._engine)

        except SQLAlchemyError as e:
            raise StoreError(f"Could not open database {database_url}", e) from e

        self._session = Session(self._engine, expire_on_commit=False)
        self._transaction: SqlTransaction | None = None
        self._staged_count = 0
        self._added: list[tuple[Any, Any]] = []

        self.departments = SqlRepository(self, DepartmentRow, "department")
        self.courses = SqlRepository(self, CourseRow, "course")
        self.students = SqlRepository(self, StudentRow, "student")
        self.enrollments = SqlRepository(self, EnrollmentRow, "enrollment")

    def supports_transactions(self) -> bool:
        return True

    @property
    def in_transaction(self) -> bool:
        return self._transaction is not None

    # === transactions ===

    def begin(self) -> Transaction:
        if self._transaction is not None:
            raise StoreError("A transaction is already in progress.")

        # close the implicit read transaction so the new scope starts clean
        with self._translate_errors("beginning transaction"):
            self._session.rollback()

        self._reset_staging()
        self._transaction = SqlTransaction(self)

        return self._transaction

    def _end_transaction(self, commit: bool) -> None:
        self._transaction = None

        try:
            if commit:
                self._session.commit()
            else:
                self._session.rollback()

        except SQLAlchemyError as e:
            self._session.rollback()
            raise StoreError("Transaction failed", e) from e

        finally:
            self._reset_staging()

    # === persistence ===

    def save(self) -> int:
        try:
            self._session.flush()

            if self._transaction is None:
                self._session.commit()

        except SQLAlchemyError as e:
            if self._transaction is None:
                self._session.rollback()
            self._reset_staging()
            raise StoreError("Failed to save changes", e) from e

        for record, row in self._added:
            record.id = row.id

        count = self._staged_count
        self._reset_staging()

        logger.debug("Flushed %d staged changes", count)

        return count

    def discard(self) -> None:
        """
        Drops unsaved changes. Inside a transaction this rolls the whole transaction back.
        """
        if self._transaction is not None:
            self._transaction.rollback()
            return

        with self._translate_errors("discarding changes"):
            self._session.rollback()

        self._reset_staging()

    def close(self) -> None:
        if self._transaction is not None:
            self._transaction.rollback()

        self._session.close()
        self._engine.dispose()

    # === helper methods ===

    def _reset_staging(self) -> None:
        self._staged_count = 0
        self._added = []

    @contextmanager
    def _translate_errors(self, action: str) -> Iterator[None]:
        try:
            yield
        except SQLAlchemyError as e:
            raise StoreError(f"Database error while {action}", e) from e
