# services/course_service.py

"""
Validation and persistence rules for `Course` records.

Rules, checked in order:
- A course must belong to exactly one existing department.
- Course codes, when given, are unique (case-insensitive).
- Credits must be an integer between 1 and 6.
- Inactive or archived courses cannot be updated.
- A course cannot be deleted while students are enrolled in it.
"""

from core.response import ErrorCode, Response
from models.course import Course
from services.rules import RecordService, require, require_unique

MIN_CREDITS = 1
MAX_CREDITS = 6


class CourseService(RecordService):
    entity_name = "course"

    def create(self, course: Course) -> Response:
        """
        Validates and adds a new `Course`.

        Args:
            course (Course): The course to add. Its id is assigned on save.

        Returns:
            Response: Success with `data["record"]`, or the first violated rule.
        """

        def validate() -> Course:
            self.require_existing_department(course.department_id)
            self.require_unique_course_code(course.code)
            self.require_valid_credits(course.credits)
            return course

        return self._run(
            "creating",
            validate,
            self._store.courses.add,
            "Course created successfully.",
        )

    def update(self, course: Course) -> Response:
        """
        Validates and saves changes to an existing, still-editable `Course`.

        Args:
            course (Course): The course with its new values; `id` selects the stored record.

        Returns:
            Response: Success with `data["record"]`, or the first violated rule.

        Notes:
            - The active/archived check reads the stored record, so a course that is
              already inactive or archived stays frozen even if `course` flips the flags back.
        """

        def validate() -> Course:
            existing = self._store.courses.find_by_id(course.id)
            require(
                existing is not None,
                "Course not found.",
                ErrorCode.COURSE_NOT_FOUND,
            )
            require(
                not existing.is_locked,
                "A course cannot be updated if it is inactive or archived.",
                ErrorCode.ARCHIVED_RECORD,
            )
            self.require_existing_department(course.department_id)
            self.require_unique_course_code(course.code, exclude_id=course.id)
            self.require_valid_credits(course.credits)
            return course

        return self._run(
            "updating",
            validate,
            self._store.courses.update,
            "Course updated successfully.",
        )

    def delete(self, course_id: int) -> Response:
        """
        Deletes a `Course` that has no enrollments.

        Args:
            course_id (int): The id of the course to delete.

        Returns:
            Response: Success with the deleted record in `data["record"]`, or the first violated rule.
        """

        def validate() -> Course:
            course = self._store.courses.find_by_id(course_id)
            require(
                course is not None,
                "Course not found.",
                ErrorCode.COURSE_NOT_FOUND,
            )
            require(
                not any(
                    e.course_id == course_id for e in self._store.enrollments.find_all()
                ),
                "A course cannot be deleted if students are enrolled.",
                ErrorCode.HAS_DEPENDENTS,
            )
            return course

        return self._run(
            "deleting",
            validate,
            lambda course: self._store.courses.delete(course.key),
            "Course deleted successfully.",
        )

    def get_all(self) -> Response:
        return self._get_all(self._store.courses.find_all)

    # === data validators ===

    def require_existing_department(self, department_id: int | None) -> None:
        require(
            department_id is not None,
            "Course must belong to exactly one department.",
            ErrorCode.MISSING_REQUIRED_FIELD,
        )
        require(
            self._store.departments.find_by_id(department_id) is not None,
            "Department not found.",
            ErrorCode.DEPARTMENT_NOT_FOUND,
        )

    def require_unique_course_code(
        self, code: str | None, exclude_id: int | None = None
    ) -> None:
        require_unique(
            self._store.courses.find_all(),
            code,
            lambda c: c.code,
            "CourseCode must be unique.",
            ErrorCode.DUPLICATE_CODE,
            exclude_key=exclude_id,
        )

    def require_valid_credits(self, credits: int | None) -> None:
        require(
            isinstance(credits, int)
            and not isinstance(credits, bool)
            and MIN_CREDITS <= credits <= MAX_CREDITS,
            "Course credits must be between 1 and 6.",
            ErrorCode.INVALID_FIELD_VALUE,
        )
