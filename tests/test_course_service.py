# tests/test_course_service.py

import pytest

from conftest import TODAY
from core.response import ErrorCode
from models.course import Course


def test_create_course(services, store, it_department):
    response = services.courses.create(
        Course(None, "CS102", "Data Structures", 4, it_department.id)
    )

    assert response.success
    assert response.message == "Course created successfully."
    assert store.courses.find_by_id(response.data["record"].id).code == "CS102"


def test_create_course_without_code(services, it_department):
    assert services.courses.create(Course(None, None, "Seminar", 1, it_department.id)).success


def test_duplicate_course_code_is_rejected_case_insensitively(services, store, sample_course):
    response = services.courses.create(
        Course(None, "cs101", "Another Intro", 3, sample_course.department_id)
    )

    assert not response.success
    assert response.error is ErrorCode.DUPLICATE_CODE
    assert response.message == "CourseCode must be unique."

    courses = store.courses.find_all()
    assert len(courses) == 1
    assert courses[0].title == "Intro to Programming"
    assert courses[0].code == "CS101"


def test_create_requires_department(services):
    response = services.courses.create(Course(None, "CS1", "Intro", 3, None))

    assert response.error is ErrorCode.MISSING_REQUIRED_FIELD
    assert response.message == "Course must belong to exactly one department."


def test_create_requires_existing_department(services):
    response = services.courses.create(Course(None, "CS1", "Intro", 3, 99))

    assert response.error is ErrorCode.DEPARTMENT_NOT_FOUND
    assert response.message == "Department not found."


@pytest.mark.parametrize("credits", [0, 7, -1, None, True, 2.5])
def test_create_rejects_invalid_credits(services, store, it_department, credits):
    response = services.courses.create(Course(None, "CS1", "Intro", credits, it_department.id))

    assert response.error is ErrorCode.INVALID_FIELD_VALUE
    assert response.message == "Course credits must be between 1 and 6."
    assert store.courses.find_all() == []


@pytest.mark.parametrize("credits", [1, 6])
def test_create_accepts_credit_bounds(services, it_department, credits):
    assert services.courses.create(Course(None, None, "Intro", credits, it_department.id)).success


def test_update_course(services, store, sample_course):
    sample_course.title = "Programming I"
    sample_course.credits = 4

    response = services.courses.update(sample_course)

    assert response.success
    assert response.message == "Course updated successfully."
    stored = store.courses.find_by_id(sample_course.id)
    assert (stored.title, stored.credits) == ("Programming I", 4)


def test_update_can_deactivate_an_active_course(services, store, sample_course):
    sample_course.is_active = False

    assert services.courses.update(sample_course).success
    assert not store.courses.find_by_id(sample_course.id).is_active


@pytest.mark.parametrize("active, archived", [(False, False), (True, True)])
def test_update_locked_course_fails(services, store, make_course, active, archived):
    course = make_course("HIST1", active=active, archived=archived)
    course.is_active = True
    course.is_archived = False
    course.title = "Reopened"

    response = services.courses.update(course)

    assert response.error is ErrorCode.ARCHIVED_RECORD
    assert response.message == "A course cannot be updated if it is inactive or archived."
    assert store.courses.find_by_id(course.id).title == "Course HIST1"


def test_update_missing_course(services, it_department):
    response = services.courses.update(Course(99, None, "Ghost", 3, it_department.id))

    assert response.error is ErrorCode.COURSE_NOT_FOUND
    assert response.message == "Course not found."


def test_update_rejects_code_of_other_course(services, store, sample_course, make_course):
    other = make_course("CS201")
    other.code = "Cs101"

    response = services.courses.update(other)

    assert response.error is ErrorCode.DUPLICATE_CODE
    assert store.courses.find_by_id(other.id).code == "CS201"


def test_delete_course(services, store, sample_course):
    response = services.courses.delete(sample_course.id)

    assert response.success
    assert response.message == "Course deleted successfully."
    assert store.courses.find_by_id(sample_course.id) is None


def test_delete_course_with_enrollments_fails(services, store, sample_course, enrolled):
    response = services.courses.delete(sample_course.id)

    assert response.error is ErrorCode.HAS_DEPENDENTS
    assert response.message == "A course cannot be deleted if students are enrolled."
    assert store.courses.find_by_id(sample_course.id) is not None
    assert store.enrollments.find_by_id(enrolled.key).enroll_date == TODAY


def test_get_all_courses(services, sample_course):
    response = services.courses.get_all()

    assert response.message == "Found 1 course(s)."
    assert [c.code for c in response.data["records"]] == ["CS101"]
