# models/department.py

"""
Represents an academic department.

Departments own courses and students. Name uniqueness and the rule that a
department cannot be deleted while still referenced are enforced by
`DepartmentService`, not here.
"""

from __future__ import annotations


class Department:

    def __init__(
        self,
        id: int | None,
        name: str,
        description: str | None = None,
    ):
        self._id: int | None = id
        self._name: str = name
        self._description: str | None = description

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
    def name(self) -> str:
        return self._name

    @name.setter
    def name(self, name: str) -> None:
        self._name = name

    @property
    def description(self) -> str | None:
        return self._description

    @description.setter
    def description(self, description: str | None) -> None:
        self._description = description

    # === persistence and import ===

    def to_dict(self) -> dict:
        return {
            "id": self._id,
            "name": self._name,
            "description": self._description,
        }

    @classmethod
    def from_dict(cls, data: dict) -> Department:
        return cls(
            id=data["id"],
            name=data["name"],
            description=data.get("description"),
        )

    # === dunder methods ===

    def __repr__(self) -> str:
        return f"Department({self._id}, {self._name})"

    def __str__(self) -> str:
        return f"DEPARTMENT: name: {self._name}, id: {self._id}"
