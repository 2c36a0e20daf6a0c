# models/course.py

"""
Represents a course offered by a department.

A course carries an optional course code, a title, a credit count, and two
status flags. Inactive or archived courses are frozen: `CourseService` refuses
updates to them, and `EnrollmentService` refuses new enrollments in inactive ones.
"""

from __future__ import annotations


class Course:

    def __init__(
        self,
        id: int | None,
        code: str | None,
        title: str | None,
        credits: int | None,
        department_id: int | None,
        active: bool = True,
        archived: bool = False,
    ):
        self._id: int | None = id
        self._code: str | None = code
        self._title: str | None = title
        self._credits: int | None = credits
        self._department_id: int | None = department_id
        self._is_active: bool = active
        self._is_archived: bool = archived

    # === properties ===

    @property
    def id(self) -> int | None:
        return self._id

    @id.setter
    def id(self, id: int) -> None:
        self._id = id

    @property
    def key(self) -> int | None:
        return self._id

    @property
    def code(self) -> str | None:
        return self._code

    @code.setter
    def code(self, code: str | None) -> None:
        self._code = code

    @property
    def title(self) -> str | None:
        return self._title

    @title.setter
    def title(self, title: str | None) -> None:
        self._title = title

    @property
    def credits(self) -> int | None:
        return self._credits

    @credits.setter
    def credits(self, credits: int | None) -> None:
        self._credits = credits

    @property
    def department_id(self) -> int | None:
        return self._department_id

    @department_id.setter
    def department_id(self, department_id: int | None) -> None:
        self._department_id = department_id

    @property
    def is_active(self) -> bool:
        return self._is_active

    @is_active.setter
    def is_active(self, active: bool) -> None:
        self._is_active = active

    @property
    def is_archived(self) -> bool:
        return self._is_archived

    @is_archived.setter
    def is_archived(self, archived: bool) -> None:
        self._is_archived = archived

    @property
    def is_locked(self) -> bool:
        return not self._is_active or self._is_archived

    @property
    def status(self) -> str:
        if self._is_archived:
            return "'ARCHIVED'"
        return "'ACTIVE'" if self._is_active else "'INACTIVE'"

    # === persistence and import ===

    def to_dict(self) -> dict:
        return {
            "id": self._id,
            "code": self._code,
            "title": self._title,
            "credits": self._credits,
            "department_id": self._department_id,
            "active": self._is_active,
            "archived": self._is_archived,
        }

    @classmethod
    def from_dict(cls, data: dict) -> Course:
        return cls(
            id=data["id"],
            code=data.get("code"),
            title=data.get("title"),
            credits=data.get("credits"),
            department_id=data.get("department_id"),
            active=data.get("active", True),
            archived=data.get("archived", False),
        )

    # === dunder methods ===

    def __repr__(self) -> str:
        return f"Course({self._id}, {self._code}, {self._title}, {self._credits}, {self._department_id}, {self._is_active}, {self._is_archived})"

    def __str__(self) -> str:
        return f"COURSE: code: {self._code}, title: {self._title}, id: {self._id}"
