# models/student.py

"""
Represents a student belonging to a department.

Stores identifying information such as the student code, full name, email,
and date of birth. Supports toggling between active and inactive status;
inactive students cannot enroll in new courses.

Includes functionality for:
- Validating and normalizing email input
- Serializing to and from JSON-compatible dictionaries
- Mutating individual fields via property access
"""

from __future__ import annotations

import datetime
import re


class Student:

    def __init__(
        self,
        id: int | None,
        code: str | None,
        full_name: str | None,
        email: str | None,
        department_id: int | None,
        date_of_birth: datetime.date | None = None,
        active: bool = True,
    ):
        self._id: int | None = id
        self._code: str | None = code
        self._full_name: str | None = full_name
        self._email: str | None = email
        self._department_id: int | None = department_id
        self._date_of_birth: datetime.date | None = date_of_birth
        self._is_active: bool = active

    # === properties ===

    @property
    def id(self) -> int | None:
        return self._id

    @id.setter
    def id(self, id: int) -> None:
        self._id = id

    @property
    def key(self) -> int | None:
        return self._id

    @property
    def code(self) -> str | None:
        return self._code

    @code.setter
    def code(self, code: str | None) -> None:
        self._code = code

    @property
    def full_name(self) -> str | None:
        return self._full_name

    @full_name.setter
    def full_name(self, full_name: str | None) -> None:
        self._full_name = full_name

    @property
    def email(self) -> str | None:
        return self._email

    @email.setter
    def email(self, email: str | None) -> None:
        self._email = Student.validate_email_input(email) if email else None

    @property
    def department_id(self) -> int | None:
        return self._department_id

    @department_id.setter
    def department_id(self, department_id: int | None) -> None:
        self._department_id = department_id

    @property
    def date_of_birth(self) -> datetime.date | None:
        return self._date_of_birth

    @date_of_birth.setter
    def date_of_birth(self, date_of_birth: datetime.date | None) -> None:
        self._date_of_birth = date_of_birth

    @property
    def is_active(self) -> bool:
        return self._is_active

    @is_active.setter
    def is_active(self, active: bool) -> None:
        self._is_active = active

    @property
    def status(self) -> str:
        return "'ACTIVE'" if self._is_active else "'INACTIVE'"

    def toggle_active_status(self) -> None:
        self._is_active = not self._is_active

    # === persistence and import ===

    def to_dict(self) -> dict:
        return {
            "id": self._id,
            "code": self._code,
            "full_name": self._full_name,
            "email": self._email,
            "department_id": self._department_id,
            "date_of_birth": (
                self._date_of_birth.isoformat() if self._date_of_birth else None
            ),
            "active": self._is_active,
        }

    @classmethod
    def from_dict(cls, data: dict) -> Student:
        dob_raw = data.get("date_of_birth")

        return cls(
            id=data["id"],
            code=data.get("code"),
            full_name=data.get("full_name"),
            email=data.get("email"),
            department_id=data.get("department_id"),
            date_of_birth=datetime.date.fromisoformat(dob_raw) if dob_raw else None,
            active=data.get("active", True),
        )

    # === dunder methods ===

    def __repr__(self) -> str:
        return f"Student({self._id}, {self._code}, {self._full_name}, {self._email}, {self._department_id}, {self._is_active})"

    def __str__(self) -> str:
        return f"STUDENT: name: {self._full_name}, code: {self._code}, id: {self._id}"

    # === data validators ===

    @staticmethod
    def validate_email_input(email: str) -> str:
        """
        Validates and normalizes a Student email address.

        Normalizes the input by stripping whitespace and converting to lowercase.
        Ensures the email:
            - Contains exactly one '@' symbol
            - Has non-whitespace characters on both sides of the '@'
            - Contains at least one '.' after the '@' to separate the domain and TLD

        Args:
            email: The input email string to validate.

        Returns:
            A normalized, lowercase version of the email if valid.

        Raises:
            ValueError: If the email does not conform to the expected format.
        """
        email = email.strip().lower()
        if not re.fullmatch(r"^[^@\s]+@[^@\s]+\.[^@\s]+$", email):
            raise ValueError(
                "Invalid input. Email must be a valid address with one @ and a domain."
            )
        return email
