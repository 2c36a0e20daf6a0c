# tests/test_department_service.py

import pytest

from core.response import ErrorCode
from models.department import Department


def test_create_department(services, store):
    response = services.departments.create(Department(None, "Physics", "Matter"))

    assert response.success
    assert response.message == "Department created successfully."

    record = response.data["record"]
    assert store.departments.find_by_id(record.id).name == "Physics"


@pytest.mark.parametrize("name", ["", "   ", "AB", " AB "])
def test_create_rejects_short_or_blank_name(services, store, name):
    response = services.departments.create(Department(None, name))

    assert not response.success
    assert response.error is ErrorCode.INVALID_FIELD_VALUE
    assert response.message == "Department name cannot be empty or shorter than 3 characters."
    assert store.departments.find_all() == []


def test_create_rejects_duplicate_name_case_insensitively(services, store):
    services.departments.create(Department(None, "Physics"))

    response = services.departments.create(Department(None, "  PHYSICS "))

    assert not response.success
    assert response.error is ErrorCode.DUPLICATE_NAME
    assert response.message == "Department name must be unique."
    assert len(store.departments.find_all()) == 1


def test_update_department(services, store, math_department):
    math_department.name = "Applied Mathematics"

    response = services.departments.update(math_department)

    assert response.success
    assert response.message == "Department updated successfully."
    assert store.departments.find_by_id(math_department.id).name == "Applied Mathematics"


def test_update_keeps_own_name(services, math_department):
    math_department.description = "Numbers"

    assert services.departments.update(math_department).success


def test_update_rejects_name_of_other_department(services, store, math_department):
    services.departments.create(Department(None, "Physics"))
    math_department.name = "physics"

    response = services.departments.update(math_department)

    assert response.error is ErrorCode.DUPLICATE_NAME
    assert store.departments.find_by_id(math_department.id).name == "Mathematics"


def test_update_missing_department(services):
    response = services.departments.update(Department(99, "Nowhere"))

    assert response.error is ErrorCode.DEPARTMENT_NOT_FOUND
    assert response.message == "Department not found."


def test_delete_department(services, store, math_department):
    response = services.departments.delete(math_department.id)

    assert response.success
    assert response.message == "Department deleted successfully."
    assert store.departments.find_by_id(math_department.id) is None


def test_delete_department_with_students_fails(services, store, sample_student, it_department):
    response = services.departments.delete(it_department.id)

    assert not response.success
    assert response.error is ErrorCode.HAS_DEPENDENTS
    assert response.message == "A department cannot be deleted if it has students."
    assert store.departments.find_by_id(it_department.id) is not None
    assert store.students.find_by_id(sample_student.id) is not None


def test_delete_department_with_courses_fails(services, store, sample_course, it_department):
    response = services.departments.delete(it_department.id)

    assert response.error is ErrorCode.HAS_DEPENDENTS
    assert response.message == "A department cannot be deleted if it has courses."
    assert store.courses.find_by_id(sample_course.id) is not None


def test_delete_missing_department(services):
    assert services.departments.delete(99).error is ErrorCode.DEPARTMENT_NOT_FOUND


def test_get_all_departments(services, it_department, math_department):
    response = services.departments.get_all()

    assert response.success
    assert response.message == "Found 2 department(s)."
    assert {d.name for d in response.data["records"]} == {"IT", "Mathematics"}
