# models/enrollment.py

"""
Represents a student's enrollment in a specific course.

An `Enrollment` is identified by its (student_id, course_id) pair; there is at
most one per pair. It records the enrollment date, an optional grade on a 0-10
scale, and a `finalized` flag that locks the grade once set.

Notes:
- Enrollments are only created by `EnrollmentService.enroll()`.
- Grade validation is exposed via `validate_grade_input()`; the grading window
  and finalization rules are enforced by `EnrollmentService`.
"""

from __future__ import annotations

import datetime
import math
from typing import Any

GRADE_MIN = 0.0
GRADE_MAX = 10.0


class Enrollment:

    def __init__(
        self,
        student_id: int,
        course_id: int,
        enroll_date: datetime.date | None,
        grade: float | None = None,
        finalized: bool = False,
    ):
        self._student_id = student_id
        self._course_id = course_id
        self._enroll_date = enroll_date
        self._grade = grade
        self._is_finalized = finalized

    # === properties ===

    @property
    def student_id(self) -> int:
        return self._student_id

    @property
    def course_id(self) -> int:
        return self._course_id

    @property
    def key(self) -> tuple[int, int]:
        return (self._student_id, self._course_id)

    @property
    def enroll_date(self) -> datetime.date | None:
        return self._enroll_date

    @property
    def grade(self) -> float | None:
        return self._grade

    @grade.setter
    def grade(self, grade: float | None) -> None:
        self._grade = None if grade is None else Enrollment.validate_grade_input(grade)

    @property
    def is_graded(self) -> bool:
        return self._grade is not None

    @property
    def is_finalized(self) -> bool:
        return self._is_finalized

    @property
    def finalized_status(self) -> str:
        return "'FINALIZED'" if self._is_finalized else "'OPEN'"

    def finalize(self) -> None:
        self._is_finalized = True

    # === persistence and import ===

    def to_dict(self) -> dict:
        return {
            "student_id": self._student_id,
            "course_id": self._course_id,
            "enroll_date": self._enroll_date.isoformat() if self._enroll_date else None,
            "grade": self._grade,
            "finalized": self._is_finalized,
        }

    @classmethod
    def from_dict(cls, data: dict) -> Enrollment:
        date_raw = data.get("enroll_date")

        return cls(
            student_id=data["student_id"],
            course_id=data["course_id"],
            enroll_date=datetime.date.fromisoformat(date_raw) if date_raw else None,
            grade=data.get("grade"),
            finalized=data.get("finalized", False),
        )

    # === dunder methods ===

    def __repr__(self) -> str:
        return f"Enrollment({self._student_id}, {self._course_id}, {self._enroll_date}, {self._grade}, {self._is_finalized})"

    def __str__(self) -> str:
        return f"ENROLLMENT: student id: {self._student_id}, course id: {self._course_id}"

    # === data validators ===

    @staticmethod
    def validate_grade_input(grade: Any) -> float:
        """
        Validates and normalizes input for an `Enrollment` grade.

        Accepts any input, and then:
            - Casts to float.
            - Ensures the number is finite.
            - Ensures it lies within 0-10 inclusive.

        Args:
            grade (Any): The input value to validate.

        Returns:
            The normalized grade (float).

        Raises:
            TypeError: If the input cannot be cast to float.
            ValueError: If the input is non-finite or outside 0-10.
        """
        if isinstance(grade, bool):
            raise TypeError("Invalid input. Grade must be a number.")

        try:
            grade = float(grade)

        except (TypeError, ValueError):
            raise TypeError("Invalid input. Grade must be a number.") from None

        if not math.isfinite(grade):
            raise ValueError("Invalid input. Grade must be a finite number.")

        if grade < GRADE_MIN or grade > GRADE_MAX:
            raise ValueError("Invalid input. Grade must be between 0 and 10.")

        return grade
