# services/department_service.py

"""
Validation and persistence rules for `Department` records.

Rules, checked in order:
- A department name cannot be empty or shorter than 3 characters.
- Department names are unique, compared case-insensitively.
- A department cannot be deleted while students or courses still reference it.
"""

from core.response import ErrorCode, Response
from models.department import Department
from services.rules import RecordService, require, require_min_length, require_unique

MIN_DEPARTMENT_NAME_LENGTH = 3


class DepartmentService(RecordService):
    entity_name = "department"

    def create(self, department: Department) -> Response:
        """
        Validates and adds a new `Department`.

        Args:
            department (Department): The department to add. Its id is assigned on save.

        Returns:
            Response: Success with `data["record"]`, or the first violated rule.
        """

        def validate() -> Department:
            self.require_valid_name(department.name)
            self.require_unique_department_name(department.name)
            return department

        return self._run(
            "creating",
            validate,
            self._store.departments.add,
            "Department created successfully.",
        )

    def update(self, department: Department) -> Response:
        """
        Validates and saves changes to an existing `Department`.

        Args:
            department (Department): The department with its new values; `id` selects the stored record.

        Returns:
            Response: Success with `data["record"]`, or the first violated rule.
        """

        def validate() -> Department:
            existing = self._store.departments.find_by_id(department.id)
            require(
                existing is not None,
                "Department not found.",
                ErrorCode.DEPARTMENT_NOT_FOUND,
            )
            self.require_valid_name(department.name)
            self.require_unique_department_name(
                department.name, exclude_id=department.id
            )
            return department

        return self._run(
            "updating",
            validate,
            self._store.departments.update,
            "Department updated successfully.",
        )

    def delete(self, department_id: int) -> Response:
        """
        Deletes a `Department` that no student or course references.

        Args:
            department_id (int): The id of the department to delete.

        Returns:
            Response: Success with the deleted record in `data["record"]`, or the first violated rule.
        """

        def validate() -> Department:
            department = self._store.departments.find_by_id(department_id)
            require(
                department is not None,
                "Department not found.",
                ErrorCode.DEPARTMENT_NOT_FOUND,
            )
            require(
                not any(
                    s.department_id == department_id
                    for s in self._store.students.find_all()
                ),
                "A department cannot be deleted if it has students.",
                ErrorCode.HAS_DEPENDENTS,
            )
            require(
                not any(
                    c.department_id == department_id
                    for c in self._store.courses.find_all()
                ),
                "A department cannot be deleted if it has courses.",
                ErrorCode.HAS_DEPENDENTS,
            )
            return department

        return self._run(
            "deleting",
            validate,
            lambda department: self._store.departments.delete(department.key),
            "Department deleted successfully.",
        )

    def get_all(self) -> Response:
        return self._get_all(self._store.departments.find_all)

    # === data validators ===

    def require_valid_name(self, name: str | None) -> None:
        require_min_length(
            name,
            MIN_DEPARTMENT_NAME_LENGTH,
            "Department name cannot be empty or shorter than 3 characters.",
            ErrorCode.INVALID_FIELD_VALUE,
        )

    def require_unique_department_name(
        self, name: str, exclude_id: int | None = None
    ) -> None:
        require_unique(
            self._store.departments.find_all(),
            name,
            lambda d: d.name,
            "Department name must be unique.",
            ErrorCode.DUPLICATE_NAME,
            exclude_key=exclude_id,
        )
