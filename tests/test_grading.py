# tests/test_grading.py

import pytest

from core.response import ErrorCode


def test_assign_grade(services, store, enrolled):
    response = services.enrollments.assign_grade(*enrolled.key, 8.5)

    assert response.success
    assert response.message == "Grade assigned successfully."
    assert store.enrollments.find_by_id(enrolled.key).grade == 8.5


def test_update_grade(services, store, enrolled):
    services.enrollments.assign_grade(*enrolled.key, 6)

    response = services.enrollments.update_grade(*enrolled.key, 7.75)

    assert response.success
    assert response.message == "Grade updated successfully."
    assert store.enrollments.find_by_id(enrolled.key).grade == 7.75


@pytest.mark.parametrize("grade", [0, 10])
def test_grade_bounds_are_inclusive(services, store, enrolled, grade):
    assert services.enrollments.assign_grade(*enrolled.key, grade).success
    assert store.enrollments.find_by_id(enrolled.key).grade == grade


@pytest.mark.parametrize("grade", [-0.01, 10.01, float("nan"), "ten", None])
@pytest.mark.parametrize("operation", ["assign_grade", "update_grade"])
def test_grade_out_of_range(services, store, enrolled, grade, operation):
    response = getattr(services.enrollments, operation)(*enrolled.key, grade)

    assert response.error is ErrorCode.GRADE_OUT_OF_RANGE
    assert response.message == "Grade value must be within a valid range (0-10)."
    assert store.enrollments.find_by_id(enrolled.key).grade is None


@pytest.mark.parametrize("operation", ["assign_grade", "update_grade"])
def test_grade_requires_enrollment(services, sample_student, sample_course, operation):
    response = getattr(services.enrollments, operation)(
        sample_student.id, sample_course.id, 9
    )

    assert response.error is ErrorCode.ENROLLMENT_NOT_FOUND
    assert response.message == "Grade can be assigned only after enrollment exists."


def test_grading_on_day_thirty_succeeds(services, clock, enrolled):
    clock.advance(30)

    assert services.enrollments.assign_grade(*enrolled.key, 9).success


@pytest.mark.parametrize("operation", ["assign_grade", "update_grade"])
def test_grading_on_day_thirty_one_fails(services, store, clock, enrolled, operation):
    clock.advance(31)

    response = getattr(services.enrollments, operation)(*enrolled.key, 9)

    assert response.error is ErrorCode.GRADING_WINDOW_EXPIRED
    assert response.message == (
        "Grade can be assigned only within the grading period (30 days from enrollment)."
    )
    assert store.enrollments.find_by_id(enrolled.key).grade is None


def test_range_is_checked_before_the_window(services, clock, enrolled):
    clock.advance(45)

    response = services.enrollments.assign_grade(*enrolled.key, 11)

    assert response.error is ErrorCode.GRADE_OUT_OF_RANGE


# === finalization ===


def test_finalize_grade(services, store, enrolled):
    services.enrollments.assign_grade(*enrolled.key, 8)

    response = services.enrollments.finalize_grade(*enrolled.key)

    assert response.success
    assert response.message == "Grade finalized successfully."
    assert store.enrollments.find_by_id(enrolled.key).is_finalized


@pytest.mark.parametrize("operation", ["assign_grade", "update_grade"])
def test_finalized_grade_cannot_change(services, store, enrolled, operation):
    services.enrollments.assign_grade(*enrolled.key, 8)
    services.enrollments.finalize_grade(*enrolled.key)

    response = getattr(services.enrollments, operation)(*enrolled.key, 9)

    assert response.error is ErrorCode.GRADE_FINALIZED
    assert response.message == "Grade cannot be updated once it is finalized."
    assert store.enrollments.find_by_id(enrolled.key).grade == 8


def test_finalized_is_reported_before_the_window(services, clock, enrolled):
    services.enrollments.assign_grade(*enrolled.key, 8)
    services.enrollments.finalize_grade(*enrolled.key)
    clock.advance(60)

    response = services.enrollments.update_grade(*enrolled.key, 9)

    assert response.error is ErrorCode.GRADE_FINALIZED


def test_finalize_requires_a_grade(services, store, enrolled):
    response = services.enrollments.finalize_grade(*enrolled.key)

    assert response.error is ErrorCode.VALIDATION_FAILED
    assert response.message == "Grade must be assigned before it can be finalized."
    assert not store.enrollments.find_by_id(enrolled.key).is_finalized


def test_finalize_twice_fails(services, enrolled):
    services.enrollments.assign_grade(*enrolled.key, 8)
    services.enrollments.finalize_grade(*enrolled.key)

    response = services.enrollments.finalize_grade(*enrolled.key)

    assert response.error is ErrorCode.GRADE_FINALIZED
    assert response.message == "Grade is already finalized."


def test_finalize_missing_enrollment(services):
    response = services.enrollments.finalize_grade(1, 1)

    assert response.error is ErrorCode.ENROLLMENT_NOT_FOUND
    assert response.message == "Enrollment not found."
