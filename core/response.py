# core/response.py

from __future__ import annotations

from enum import Enum


class ErrorCode(Enum):
    # === Not Found ===
    NOT_FOUND = "NOT_FOUND"
    DEPARTMENT_NOT_FOUND = "DEPARTMENT_NOT_FOUND"
    COURSE_NOT_FOUND = "COURSE_NOT_FOUND"
    STUDENT_NOT_FOUND = "STUDENT_NOT_FOUND"
    ENROLLMENT_NOT_FOUND = "ENROLLMENT_NOT_FOUND"

    # === Constraint Violations ===
    DUPLICATE_NAME = "DUPLICATE_NAME"
    DUPLICATE_CODE = "DUPLICATE_CODE"
    DUPLICATE_EMAIL = "DUPLICATE_EMAIL"
    DUPLICATE_ENROLLMENT = "DUPLICATE_ENROLLMENT"

    # record is still referenced by students, courses, or enrollments
    HAS_DEPENDENTS = "HAS_DEPENDENTS"

    # === Validation Failures ===
    # required argument or attribute is missing
    MISSING_REQUIRED_FIELD = "MISSING_REQUIRED_FIELD"

    # field value is out of bounds or incorrectly formatted
    INVALID_FIELD_VALUE = "INVALID_FIELD_VALUE"

    # the value is valid in isolation, but violates system rules
    VALIDATION_FAILED = "VALIDATION_FAILED"

    # --- enrollment rules ---
    STUDENT_INACTIVE = "STUDENT_INACTIVE"
    STUDENT_UNDERAGE = "STUDENT_UNDERAGE"
    COURSE_INACTIVE = "COURSE_INACTIVE"
    COURSE_NO_CREDITS = "COURSE_NO_CREDITS"
    MAX_COURSES_EXCEEDED = "MAX_COURSES_EXCEEDED"
    PAST_ENROLL_DATE = "PAST_ENROLL_DATE"
    DEPARTMENT_MISMATCH = "DEPARTMENT_MISMATCH"

    # --- grading rules ---
    GRADE_OUT_OF_RANGE = "GRADE_OUT_OF_RANGE"
    GRADE_FINALIZED = "GRADE_FINALIZED"
    GRADING_WINDOW_EXPIRED = "GRADING_WINDOW_EXPIRED"

    # === State Restrictions ===
    ARCHIVED_RECORD = "ARCHIVED_RECORD"

    # === Internal Faults ===
    PERSISTENCE_ERROR = "PERSISTENCE_ERROR"
    INTERNAL_ERROR = "INTERNAL_ERROR"


class Response:
    """
    Standard Response object returned by every service operation.

    Attributes:
        success (bool): Indicates whether the operation succeeded.
        message (str): Human-readable explanation, always populated on failure.
        error (ErrorCode | str | None): Optional machine-readable error identifier.
        data (dict): Optional payload, varies by operation.
    """

    def __init__(
        self,
        success: bool,
        message: str = "",
        error: ErrorCode | str | None = None,
        data: dict | None = None,
    ):
        self._success = success
        self._message = message
        self._error = error
        self._data = data or {}

    # === properties ===

    @property
    def success(self) -> bool:
        return self._success

    @property
    def message(self) -> str:
        return self._message

    @property
    def error(self) -> ErrorCode | str | None:
        return self._error

    @property
    def data(self) -> dict:
        return self._data

    # === public classmethods ===

    @classmethod
    def succeed(
        cls,
        message: str = "",
        data: dict | None = None,
    ) -> Response:
        return cls(
            success=True,
            message=message,
            error=None,
            data=data,
        )

    @classmethod
    def fail(
        cls,
        message: str,
        error: ErrorCode | str | None = ErrorCode.VALIDATION_FAILED,
        data: dict | None = None,
    ) -> Response:
        if not message:
            raise ValueError("A failed Response requires a message.")

        return cls(
            success=False,
            message=message,
            error=error,
            data=data,
        )

    # === persistence and import ===

    def to_dict(self) -> dict:
        return {
            "success": self.success,
            "error": self.error.value if isinstance(self.error, Enum) else self.error,
            "message": self.message,
            "data": self.data,
        }

    @classmethod
    def from_dict(cls, payload: dict) -> Response:
        error = payload.get("error")

        if error in ErrorCode._value2member_map_:
            error = ErrorCode(error)

        return cls(
            success=payload["success"],
            error=error,
            message=payload.get("message", ""),
            data=payload.get("data", {}),
        )

    # === dunder methods ===

    def __repr__(self) -> str:
        return f"Response({self._success}, {self._message!r}, {self._error})"

    def __str__(self) -> str:
        if self.success:
            return f"Success: {self.message}"
        else:
            return f"Error: {self.message}"
