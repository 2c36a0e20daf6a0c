# tests/test_response.py

import pytest

from core.response import ErrorCode, Response


def test_succeed_defaults():
    response = Response.succeed("Student enrolled successfully.")

    assert response.success
    assert response.error is None
    assert response.data == {}
    assert str(response) == "Success: Student enrolled successfully."


def test_fail_carries_error_code():
    response = Response.fail("Course not found.", ErrorCode.COURSE_NOT_FOUND)

    assert not response.success
    assert response.error is ErrorCode.COURSE_NOT_FOUND
    assert str(response) == "Error: Course not found."


def test_fail_requires_message():
    with pytest.raises(ValueError):
        Response.fail("")


def test_to_dict_and_from_dict():
    response = Response.fail(
        "Grade is already finalized.", ErrorCode.GRADE_FINALIZED, {"course_id": 2}
    )
    payload = response.to_dict()

    assert payload["error"] == "GRADE_FINALIZED"

    restored = Response.from_dict(payload)

    assert not restored.success
    assert restored.error is ErrorCode.GRADE_FINALIZED
    assert restored.message == "Grade is already finalized."
    assert restored.data == {"course_id": 2}
