# store/change_stager.py

"""
Utility class for staging record changes before committing them to a store.

`ChangeStager` keeps an ordered list of proposed additions, updates, and
deletions that have not yet been applied. The in-memory store applies the whole
list on `save()` or drops it on `discard()`, so a failed operation never
leaves partial writes behind.

The stager supports:
    - Staging single changes in call order
    - Clearing all staged changes without touching the store
    - Listing pending changes, optionally filtered to one table
"""

from __future__ import annotations

from enum import Enum
from typing import Any, NamedTuple


class ChangeKind(str, Enum):
    ADD = "Add"
    UPDATE = "Update"
    DELETE = "Delete"


class StagedChange(NamedTuple):
    kind: ChangeKind
    table: str
    # the record for ADD/UPDATE, the key for DELETE
    payload: Any


class ChangeStager:
    """
    A temporary, ordered store of proposed changes.

    Notes:
        - No validation is performed here; the store validates keys when applying.
        - Order is preserved so that e.g. an add followed by an update of the same
          record applies in the order the caller staged them.
    """

    def __init__(self):
        self._staged: list[StagedChange] = []

    def stage(self, kind: ChangeKind, table: str, payload: Any) -> None:
        """
        Append a change to the staging list.

        Args:
            kind (ChangeKind): Whether the change adds, updates, or deletes.
            table (str): The table the change targets (e.g. "students").
            payload (Any): The record for additions and updates, the key for deletions.
        """
        self._staged.append(StagedChange(kind, table, payload))

    def clear(self) -> None:
        """Remove all staged changes."""
        self._staged.clear()

    def is_empty(self) -> bool:
        return not self._staged

    def pending(self, table: str | None = None) -> list[StagedChange]:
        """
        Get a copy of the staged changes in the order they were staged.

        Args:
            table (str | None): If provided, only include changes for this table.
        """
        if table is None:
            return list(self._staged)

        return [change for change in self._staged if change.table == table]

    def __len__(self) -> int:
        return len(self._staged)
