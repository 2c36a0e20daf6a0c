# services/student_service.py

"""
Validation and persistence rules for `Student` records.

Rules, checked in order:
- The full name is required and at least 3 characters long.
- A student must belong to exactly one existing department.
- Student codes, when given, are unique (case-insensitive).
- Emails, when given, are well-formed and unique (case-insensitive).
- A student cannot be deleted while enrolled in any course.
"""

from core.response import ErrorCode, Response
from core.utils import is_blank
from models.student import Student
from services.rules import RecordService, RuleViolation, require, require_unique

MIN_FULL_NAME_LENGTH = 3


class StudentService(RecordService):
    entity_name = "student"

    def create(self, student: Student) -> Response:
        """
        Validates and adds a new `Student`.

        Args:
            student (Student): The student to add. Its id is assigned on save.

        Returns:
            Response: Success with `data["record"]`, or the first violated rule.

        Notes:
            - A provided email is normalized to lower case before it is stored.
        """

        def validate() -> Student:
            self._validate(student)
            return student

        return self._run(
            "creating",
            validate,
            self._store.students.add,
            "Student created successfully.",
        )

    def update(self, student: Student) -> Response:
        """
        Validates and saves changes to an existing `Student`.

        Args:
            student (Student): The student with its new values; `id` selects the stored record.

        Returns:
            Response: Success with `data["record"]`, or the first violated rule.
        """

        def validate() -> Student:
            require(
                self._store.students.find_by_id(student.id) is not None,
                "Student not found.",
                ErrorCode.STUDENT_NOT_FOUND,
            )
            self._validate(student, exclude_id=student.id)
            return student

        return self._run(
            "updating",
            validate,
            self._store.students.update,
            "Student updated successfully.",
        )

    def delete(self, student_id: int) -> Response:
        """
        Deletes a `Student` that has no enrollments.

        Args:
            student_id (int): The id of the student to delete.

        Returns:
            Response: Success with the deleted record in `data["record"]`, or the first violated rule.
        """

        def validate() -> Student:
            student = self._store.students.find_by_id(student_id)
            require(
                student is not None,
                "Student not found.",
                ErrorCode.STUDENT_NOT_FOUND,
            )
            require(
                not any(
                    e.student_id == student_id
                    for e in self._store.enrollments.find_all()
                ),
                "A student cannot be deleted if the student has enrollments.",
                ErrorCode.HAS_DEPENDENTS,
            )
            return student

        return self._run(
            "deleting",
            validate,
            lambda student: self._store.students.delete(student.key),
            "Student deleted successfully.",
        )

    def get_all(self) -> Response:
        return self._get_all(self._store.students.find_all)

    # === data validators ===

    def _validate(self, student: Student, exclude_id: int | None = None) -> None:
        require(
            not is_blank(student.full_name),
            "Student full name cannot be null or empty.",
            ErrorCode.MISSING_REQUIRED_FIELD,
        )
        require(
            len(student.full_name.strip()) >= MIN_FULL_NAME_LENGTH,
            "Student full name must be at least 3 characters.",
            ErrorCode.INVALID_FIELD_VALUE,
        )
        self.require_existing_department(student.department_id)

        students = self._store.students.find_all()

        require_unique(
            students,
            student.code,
            lambda s: s.code,
            "StudentCode must be unique.",
            ErrorCode.DUPLICATE_CODE,
            exclude_key=exclude_id,
        )

        email = None

        if not is_blank(student.email):
            try:
                email = Student.validate_email_input(student.email)
            except ValueError as e:
                raise RuleViolation(str(e), ErrorCode.INVALID_FIELD_VALUE) from None

            require_unique(
                students,
                email,
                lambda s: s.email,
                "Student email must be unique.",
                ErrorCode.DUPLICATE_EMAIL,
                exclude_key=exclude_id,
            )

        # the caller's record is only normalized once every check has passed
        student.email = email

    def require_existing_department(self, department_id: int | None) -> None:
        require(
            department_id is not None,
            "Student must belong to exactly one department.",
            ErrorCode.MISSING_REQUIRED_FIELD,
        )
        require(
            self._store.departments.find_by_id(department_id) is not None,
            "Department not found.",
            ErrorCode.DEPARTMENT_NOT_FOUND,
        )
