# services/rules.py

"""
Shared rule-evaluation plumbing for the record services.

Every service check either passes silently or raises `RuleViolation`, which
carries the human-readable message and the `ErrorCode` of the failed rule.
Services catch it at the operation boundary and convert it into a failed
`Response`, so callers never need to handle exceptions for expected outcomes.

`RecordService` holds the store and the single write path shared by every
service: check, stage, save, and commit; on any failure roll back, discard the
staged changes, and report the fault as a `Response`.
"""

from __future__ import annotations

import threading
from typing import Any, Callable

from core.logging_config import get_logger
from core.response import ErrorCode, Response
from core.utils import is_blank, normalize
from store.base import EntityStore, StoreError, Transaction

logger = get_logger(__name__)


class RuleViolation(ValueError):
    """
    Raised when a business rule rejects an operation.

    Attributes:
        message: Human-readable description of the violated rule.
        error: The `ErrorCode` identifying the rule.
    """

    def __init__(self, message: str, error: ErrorCode = ErrorCode.VALIDATION_FAILED):
        super().__init__(message)
        self.message = message
        self.error = error

    def to_response(self) -> Response:
        return Response.fail(message=self.message, error=self.error)


def require(condition: bool, message: str, error: ErrorCode) -> None:
    if not condition:
        raise RuleViolation(message, error)


def require_min_length(
    text: str | None, min_length: int, message: str, error: ErrorCode
) -> None:
    require(not is_blank(text) and len(text.strip()) >= min_length, message, error)


def require_unique(
    records: list[Any],
    value: str | None,
    attribute: Callable[[Any], str | None],
    message: str,
    error: ErrorCode,
    exclude_key: Any = None,
) -> None:
    """
    Validates that no record shares `value` under a case-insensitive comparison.

    Args:
        records (list[Any]): The current records to compare against.
        value (str | None): The candidate value. Blank values are never checked.
        attribute (Callable[[Any], str | None]): Extracts the compared value from a record.
        message (str): The violation message.
        error (ErrorCode): The violation code.
        exclude_key (Any): Key of the record being updated, which may keep its own value.

    Raises:
        RuleViolation: If another record already holds the value.
    """
    if is_blank(value):
        return

    normalized = normalize(value)

    for record in records:
        if exclude_key is not None and record.key == exclude_key:
            continue

        if normalize(attribute(record)) == normalized:
            raise RuleViolation(message, error)


class RecordService:
    """
    Base class for services that validate and persist records.

    Attributes:
        store (EntityStore): The store every check reads from and every write goes to.
        lock: Held for the whole of every write. Services sharing a store should
            share one lock so their check-then-write sequences never interleave.
    """

    entity_name: str = "record"

    def __init__(self, store: EntityStore, lock: threading.RLock | None = None):
        self._store = store
        self._lock = lock if lock is not None else threading.RLock()

    @property
    def store(self) -> EntityStore:
        return self._store

    # === shared operations ===

    def _get_all(self, find_all: Callable[[], list[Any]]) -> Response:
        """
        Fetches all records of one kind.

        Returns:
            Response: On success `data["records"]` holds the (possibly empty) list.
                On a store failure, a failed response with `ErrorCode.PERSISTENCE_ERROR`.

        Notes:
            - This method is read-only and never raises.
        """
        try:
            records = find_all()

        except StoreError as e:
            logger.warning("list_failed", entity=self.entity_name, error=str(e))
            return Response.fail(
                message=f"Error listing {self.entity_name}s: {e}",
                error=ErrorCode.PERSISTENCE_ERROR,
            )

        return Response.succeed(
            message=f"Found {len(records)} {self.entity_name}(s).",
            data={"records": records},
        )

    def _run(
        self,
        verb: str,
        validate: Callable[[], Any],
        stage: Callable[[Any], None],
        success_message: str,
        subject: str | None = None,
    ) -> Response:
        """
        Validates, stages, and saves a single write operation.

        Args:
            verb (str): Gerund used in fault messages (e.g. "creating").
            validate (Callable[[], Any]): Runs every rule check in order and returns the
                value handed to `stage` (usually the record to write).
            stage (Callable[[Any], None]): Stages the write against the store.
            success_message (str): Message returned on success.
            subject (str | None): Noun used in fault messages; defaults to `entity_name`.

        Returns:
            Response: A structured response with the following contract:
                - success (bool): True if every rule passed and the save succeeded.
                - message (str):
                    - On success, `success_message`.
                    - On rule failure, the violated rule's message.
                    - On a store failure, "Error <verb> <subject>: <detail>".
                - error (ErrorCode | None):
                    - The violated rule's code.
                    - `ErrorCode.PERSISTENCE_ERROR` for store failures.
                    - `ErrorCode.INTERNAL_ERROR` for unexpected errors.
                - data (dict): On success, "record" holds the written record.

        Notes:
            - On stores that support transactions, the checks and the write run
              inside one transaction that is committed only after a successful save.
            - On every failure path the transaction is rolled back and staged
              changes are discarded, so a failed call leaves the store exactly as it was.
            - The service lock is held from the start of the transaction until the
              commit or rollback.
        """
        subject = subject or self.entity_name

        with self._lock:
            transaction = None

            try:
                if self._store.supports_transactions():
                    transaction = self._store.begin()

                record = validate()
                stage(record)
                self._store.save()

                if transaction is not None:
                    transaction.commit()

            except RuleViolation as e:
                self._abort(transaction)
                logger.debug("rule_rejected", entity=subject, verb=verb, rule=e.error.name)
                return e.to_response()

            except StoreError as e:
                self._abort(transaction)
                logger.warning("persistence_failed", entity=subject, verb=verb, error=str(e))
                return Response.fail(
                    message=f"Error {verb} {subject}: {e}",
                    error=ErrorCode.PERSISTENCE_ERROR,
                )

            except Exception as e:
                self._abort(transaction)
                logger.exception("unexpected_error", entity=subject, verb=verb)
                return Response.fail(
                    message=f"Unexpected error: {e}",
                    error=ErrorCode.INTERNAL_ERROR,
                )

            logger.info("record_written", entity=subject, verb=verb)

            return Response.succeed(message=success_message, data={"record": record})

    def _abort(self, transaction: Transaction | None) -> None:
        try:
            if transaction is not None and transaction.is_active:
                transaction.rollback()
            self._store.discard()

        except StoreError as e:
            logger.warning("rollback_failed", entity=self.entity_name, error=str(e))
