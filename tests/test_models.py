# tests/test_models.py

import datetime
import math

import pytest

from models.course import Course
from models.department import Department
from models.enrollment import Enrollment
from models.student import Student

# === department ===


def test_department_to_dict():
    data = Department(1, "Information Technology", "Computing").to_dict()

    assert data == {
        "id": 1,
        "name": "Information Technology",
        "description": "Computing",
    }


def test_department_from_dict():
    department = Department.from_dict({"id": 4, "name": "Physics"})

    assert department.id == 4
    assert department.key == 4
    assert department.name == "Physics"
    assert department.description is None


# === course ===


def test_course_from_dict_defaults():
    course = Course.from_dict({"id": 2, "code": "CS101", "credits": 3})

    assert course.title is None
    assert course.department_id is None
    assert course.is_active
    assert not course.is_archived
    assert course.status == "'ACTIVE'"


def test_course_is_locked_when_inactive_or_archived():
    course = Course(1, "CS101", "Intro", 3, 1)
    assert not course.is_locked

    course.is_active = False
    assert course.is_locked
    assert course.status == "'INACTIVE'"

    course.is_active = True
    course.is_archived = True
    assert course.is_locked
    assert course.status == "'ARCHIVED'"


# === student ===


def test_student_to_dict_serializes_date_of_birth():
    student = Student(
        7, "S007", "Dana Kim", "dana@example.edu", 1, datetime.date(2001, 3, 9)
    )
    data = student.to_dict()

    assert data["date_of_birth"] == "2001-03-09"
    assert data["active"]


def test_student_from_dict_round_trip():
    original = Student(
        7, "S007", "Dana Kim", "dana@example.edu", 1, datetime.date(2001, 3, 9), False
    )
    student = Student.from_dict(original.to_dict())

    assert student.id == 7
    assert student.code == "S007"
    assert student.full_name == "Dana Kim"
    assert student.date_of_birth == datetime.date(2001, 3, 9)
    assert not student.is_active
    assert student.status == "'INACTIVE'"


def test_student_email_setter_normalizes():
    student = Student(1, None, "Dana Kim", None, 1)
    student.email = "  Dana.Kim@Example.EDU "

    assert student.email == "dana.kim@example.edu"


@pytest.mark.parametrize("email", ["dana", "dana@example", "da na@example.edu", "a@b@c.d"])
def test_student_email_setter_rejects_malformed(email):
    student = Student(1, None, "Dana Kim", None, 1)

    with pytest.raises(ValueError):
        student.email = email


def test_student_toggle_active_status():
    student = Student(1, None, "Dana Kim", None, 1)

    student.toggle_active_status()
    assert not student.is_active

    student.toggle_active_status()
    assert student.is_active


# === enrollment ===


def test_enrollment_key_and_defaults():
    enrollment = Enrollment(3, 5, datetime.date(2025, 9, 1))

    assert enrollment.key == (3, 5)
    assert enrollment.grade is None
    assert not enrollment.is_graded
    assert not enrollment.is_finalized
    assert enrollment.finalized_status == "'OPEN'"


def test_enrollment_round_trip():
    enrollment = Enrollment(3, 5, datetime.date(2025, 9, 1), 8.5, True)
    restored = Enrollment.from_dict(enrollment.to_dict())

    assert restored.key == (3, 5)
    assert restored.enroll_date == datetime.date(2025, 9, 1)
    assert restored.grade == 8.5
    assert restored.is_finalized


def test_enrollment_finalize():
    enrollment = Enrollment(3, 5, datetime.date(2025, 9, 1), 7.0)
    enrollment.finalize()

    assert enrollment.is_finalized
    assert enrollment.finalized_status == "'FINALIZED'"


@pytest.mark.parametrize("grade", [0, 10, 5.25, "7.5"])
def test_validate_grade_input_accepts(grade):
    assert Enrollment.validate_grade_input(grade) == float(grade)


@pytest.mark.parametrize("grade", [-0.01, 10.01, math.inf, math.nan])
def test_validate_grade_input_rejects_out_of_range(grade):
    with pytest.raises(ValueError):
        Enrollment.validate_grade_input(grade)


@pytest.mark.parametrize("grade", [True, None, "ten", [8]])
def test_validate_grade_input_rejects_non_numbers(grade):
    with pytest.raises(TypeError):
        Enrollment.validate_grade_input(grade)
