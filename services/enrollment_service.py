# services/enrollment_service.py

"""
The enrollment and grading engine.

`enroll()` runs ten ordered checks and reports the first one that fails:

1. The student exists.
2. The course exists.
3. The student is active.
4. The student has a date of birth and is at least 18 on the enrollment date.
5. The course is active.
6. The course carries at least 1 credit.
7. The student is not already enrolled in the course.
8. The student holds fewer than 5 enrollments.
9. The enrollment date is not before today.
10. The student and the course belong to the same department.

Grades are assigned on a 0-10 scale within 30 days of the enrollment date and
are frozen once finalized.

Every write holds the service lock across the whole check-then-write
sequence, and on stores that support transactions the sequence also runs
inside one transaction.
"""

from __future__ import annotations

import datetime
import threading
from typing import Any, Callable

from core.response import ErrorCode, Response
from core.utils import age_at, as_date, days_between
from models.enrollment import Enrollment
from services.rules import RecordService, RuleViolation, require
from store.base import EntityStore

MIN_AGE_FOR_ENROLLMENT = 18
MAX_COURSES_PER_STUDENT = 5
MIN_CREDITS_TO_ENROLL = 1
GRADING_PERIOD_DAYS = 30


class EnrollmentService(RecordService):
    entity_name = "enrollment"

    def __init__(
        self,
        store: EntityStore,
        today: Callable[[], datetime.date] = datetime.date.today,
        lock: threading.RLock | None = None,
    ):
        super().__init__(store, lock)
        self._today = today

    # === enrollment ===

    def enroll(
        self,
        student_id: int,
        course_id: int,
        enroll_date: datetime.date | datetime.datetime,
    ) -> Response:
        """
        Enrolls a student in a course.

        Args:
            student_id (int): The id of the student to enroll.
            course_id (int): The id of the course.
            enroll_date (datetime.date | datetime.datetime): The enrollment date. A datetime
                is reduced to its calendar date.

        Returns:
            Response: A structured response with the following contract:
                - success (bool): True if every check passed and the enrollment was saved.
                - message (str):
                    - On success, "Student enrolled successfully."
                    - On failure, the message of the first failed check, or
                      "Error enrolling student: <detail>" for store failures.
                - error (ErrorCode | None): The failed check's code, `PERSISTENCE_ERROR`,
                  or `INTERNAL_ERROR`.
                - data (dict): On success, "record" holds the new `Enrollment`.

        Notes:
            - Exactly one enrollment is persisted on success; on failure the store is unchanged.
        """

        def validate() -> Enrollment:
            date = as_date(enroll_date)

            student = self._store.students.find_by_id(student_id)
            require(
                student is not None,
                "Student not found.",
                ErrorCode.STUDENT_NOT_FOUND,
            )

            course = self._store.courses.find_by_id(course_id)
            require(
                course is not None,
                "Course not found.",
                ErrorCode.COURSE_NOT_FOUND,
            )

            require(
                student.is_active,
                "Student is inactive and cannot enroll.",
                ErrorCode.STUDENT_INACTIVE,
            )

            self.require_minimum_age(student.date_of_birth, date)

            require(
                course.is_active,
                "Course is inactive. Enrollment is not allowed.",
                ErrorCode.COURSE_INACTIVE,
            )
            require(
                course.credits is not None and course.credits >= MIN_CREDITS_TO_ENROLL,
                "Course must have at least 1 credit to allow enrollment.",
                ErrorCode.COURSE_NO_CREDITS,
            )

            enrollments = self._find_for_student(student_id)

            require(
                not any(e.course_id == course_id for e in enrollments),
                "A student cannot enroll in the same course more than once.",
                ErrorCode.DUPLICATE_ENROLLMENT,
            )
            require(
                len(enrollments) < MAX_COURSES_PER_STUDENT,
                "A student can enroll in a maximum of 5 courses.",
                ErrorCode.MAX_COURSES_EXCEEDED,
            )
            require(
                date >= self._today(),
                "Enrollment date cannot be in the past.",
                ErrorCode.PAST_ENROLL_DATE,
            )
            require(
                student.department_id is not None
                and course.department_id is not None
                and student.department_id == course.department_id,
                "A student can enroll only in courses of the same department.",
                ErrorCode.DEPARTMENT_MISMATCH,
            )

            return Enrollment(student_id, course_id, date)

        return self._run(
            "enrolling",
            validate,
            self._store.enrollments.add,
            "Student enrolled successfully.",
            subject="student",
        )

    # === grading ===

    def assign_grade(self, student_id: int, course_id: int, grade: Any) -> Response:
        """
        Assigns a grade to an existing enrollment.

        Args:
            student_id (int): The enrolled student's id.
            course_id (int): The course id.
            grade (Any): The grade, a finite number between 0 and 10 inclusive.

        Returns:
            Response: Success with the graded `Enrollment` in `data["record"]`, or the
            first failed check, in order: enrollment exists, grade in range, grade not
            finalized, within the grading period.
        """
        return self._grade(
            student_id, course_id, grade, "assigning", "Grade assigned successfully."
        )

    def update_grade(self, student_id: int, course_id: int, grade: Any) -> Response:
        """
        Replaces the grade of an existing enrollment.

        Applies the same checks, in the same order, as `assign_grade()`.
        """
        return self._grade(
            student_id, course_id, grade, "updating", "Grade updated successfully."
        )

    def finalize_grade(self, student_id: int, course_id: int) -> Response:
        """
        Locks an enrollment's grade so it can no longer change.

        Returns:
            Response: Success with the finalized `Enrollment` in `data["record"]`.
                Fails if the enrollment does not exist, has no grade yet, or is
                already finalized.
        """

        def validate() -> Enrollment:
            enrollment = self._store.enrollments.find_by_id((student_id, course_id))
            require(
                enrollment is not None,
                "Enrollment not found.",
                ErrorCode.ENROLLMENT_NOT_FOUND,
            )
            require(
                enrollment.is_graded,
                "Grade must be assigned before it can be finalized.",
                ErrorCode.VALIDATION_FAILED,
            )
            require(
                not enrollment.is_finalized,
                "Grade is already finalized.",
                ErrorCode.GRADE_FINALIZED,
            )

            enrollment.finalize()
            return enrollment

        return self._run(
            "finalizing",
            validate,
            self._store.enrollments.update,
            "Grade finalized successfully.",
            subject="grade",
        )

    # === queries ===

    def get_all(self) -> Response:
        return self._get_all(self._store.enrollments.find_all)

    def get_for_student(self, student_id: int) -> Response:
        """
        Lists one student's enrollments.

        Returns:
            Response: On success `data["records"]` holds the (possibly empty) list.
        """
        return self._get_all(lambda: self._find_for_student(student_id))

    # === data validators ===

    def require_minimum_age(
        self, date_of_birth: datetime.date | None, enroll_date: datetime.date
    ) -> None:
        require(
            date_of_birth is not None,
            "Student must be at least 18 years old at enrollment. Date of birth is required.",
            ErrorCode.STUDENT_UNDERAGE,
        )
        require(
            age_at(date_of_birth, enroll_date) >= MIN_AGE_FOR_ENROLLMENT,
            "Student must be at least 18 years old at enrollment.",
            ErrorCode.STUDENT_UNDERAGE,
        )

    def require_within_grading_period(self, enroll_date: datetime.date | None) -> None:
        require(
            enroll_date is not None
            and days_between(enroll_date, self._today()) <= GRADING_PERIOD_DAYS,
            "Grade can be assigned only within the grading period (30 days from enrollment).",
            ErrorCode.GRADING_WINDOW_EXPIRED,
        )

    # === helper methods ===

    def _grade(
        self,
        student_id: int,
        course_id: int,
        grade: Any,
        verb: str,
        success_message: str,
    ) -> Response:

        def validate() -> Enrollment:
            enrollment = self._store.enrollments.find_by_id((student_id, course_id))
            require(
                enrollment is not None,
                "Grade can be assigned only after enrollment exists.",
                ErrorCode.ENROLLMENT_NOT_FOUND,
            )

            try:
                value = Enrollment.validate_grade_input(grade)
            except (TypeError, ValueError):
                raise RuleViolation(
                    "Grade value must be within a valid range (0-10).",
                    ErrorCode.GRADE_OUT_OF_RANGE,
                ) from None

            require(
                not enrollment.is_finalized,
                "Grade cannot be updated once it is finalized.",
                ErrorCode.GRADE_FINALIZED,
            )
            self.require_within_grading_period(enrollment.enroll_date)

            enrollment.grade = value
            return enrollment

        return self._run(
            verb,
            validate,
            self._store.enrollments.update,
            success_message,
            subject="grade",
        )

    def _find_for_student(self, student_id: int) -> list[Enrollment]:
        return [
            e for e in self._store.enrollments.find_all() if e.student_id == student_id
        ]
