# store/base.py

"""
Abstractions for the entity store consumed by the services.

An `EntityStore` exposes one typed `Repository` per record kind. Repository
writes (`add`, `update`, `delete`) are staged and only become visible after
`EntityStore.save()`. Stores that can scope several saves in one atomic unit
report it through `supports_transactions()` and hand out `Transaction` objects
from `begin()`.

Records handed out by a repository are detached copies: mutating one has no
effect on the store until it is passed back through `update()` and saved.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Generic

from models.course import Course
from models.department import Department
from models.enrollment import Enrollment
from models.student import Student
from models.types import RecordType


class StoreError(Exception):
    """
    Raised for any store-level failure (I/O, constraint, driver errors).

    Attributes:
        message: Human-readable error description.
        original_error: The underlying exception, if any.
    """

    def __init__(self, message: str, original_error: Exception | None = None):
        super().__init__(message)
        self.message = message
        self.original_error = original_error

    def __str__(self) -> str:
        if self.original_error:
            return f"{self.message}: {self.original_error}"
        return self.message


class TransactionsUnsupportedError(StoreError):
    """Raised by `begin()` on stores without transaction support."""


class Repository(ABC, Generic[RecordType]):
    """
    Typed access to a single record kind.

    Keys are the record's `key` property: an integer id for departments,
    courses, and students; a `(student_id, course_id)` tuple for enrollments.
    """

    record_name: str = "record"

    @abstractmethod
    def find_by_id(self, key: Any) -> RecordType | None: ...

    @abstractmethod
    def find_all(self) -> list[RecordType]: ...

    @abstractmethod
    def add(self, record: RecordType) -> None: ...

    @abstractmethod
    def update(self, record: RecordType) -> None: ...

    @abstractmethod
    def delete(self, key: Any) -> None: ...


class Transaction(ABC):
    """
    Handle for an open transaction.

    Exactly one of `commit()` or `rollback()` should be called. Used as a
    context manager, an uncommitted transaction is rolled back on exit.
    """

    @abstractmethod
    def commit(self) -> None: ...

    @abstractmethod
    def rollback(self) -> None: ...

    @property
    @abstractmethod
    def is_active(self) -> bool: ...

    def __enter__(self) -> Transaction:
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        if self.is_active:
            self.rollback()


class EntityStore(ABC):
    departments: Repository[Department]
    courses: Repository[Course]
    students: Repository[Student]
    enrollments: Repository[Enrollment]

    @abstractmethod
    def save(self) -> int:
        """
        Applies all staged changes.

        Returns:
            The number of staged changes that were applied.

        Raises:
            StoreError: If any change cannot be applied. No change is applied in that case.
        """

    @abstractmethod
    def discard(self) -> None:
        """Drops staged changes that have not been saved."""

    @abstractmethod
    def supports_transactions(self) -> bool: ...

    def begin(self) -> Transaction:
        """
        Opens a transaction spanning subsequent reads and saves.

        Raises:
            TransactionsUnsupportedError: If the store has no transaction support.
        """
        raise TransactionsUnsupportedError(
            f"{type(self).__name__} does not support transactions."
        )

    def close(self) -> None:
        pass
