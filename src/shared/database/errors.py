"""Typed persistence errors raised by repositories instead of raw driver messages."""
import logging
from enum import StrEnum

from sqlalchemy.exc import IntegrityError

logger = logging.getLogger(__name__)


class ConstraintKind(StrEnum):
    """Kind of integrity constraint a write violated."""
    UNIQUE = "unique"
    NOT_NULL = "not_null"
    FOREIGN_KEY = "foreign_key"
    CHECK = "check"
    UNKNOWN = "unknown"


class ConstraintViolation(Exception):
    """Raised when a write violates a database integrity constraint."""

    def __init__(self, kind: ConstraintKind, detail: str, columns: list[str] | None = None):
        """
        Initialize the exception.

        Args:
            kind: The violated constraint kind
            detail: Driver message, kept for logs only
            columns: Table-qualified columns involved, when the driver reports them
        """
        super().__init__(f"{kind.value} constraint violated: {detail}")
        self.kind = kind
        self.detail = detail
        self.columns = columns or []


# SQLite extended result codes, exposed by sqlite3 as `sqlite_errorname`
SQLITE_ERROR_KINDS = {
    "SQLITE_CONSTRAINT_UNIQUE": ConstraintKind.UNIQUE,
    "SQLITE_CONSTRAINT_PRIMARYKEY": ConstraintKind.UNIQUE,
    "SQLITE_CONSTRAINT_NOTNULL": ConstraintKind.NOT_NULL,
    "SQLITE_CONSTRAINT_FOREIGNKEY": ConstraintKind.FOREIGN_KEY,
    "SQLITE_CONSTRAINT_CHECK": ConstraintKind.CHECK,
}

# Fallback for drivers that only give us text
MESSAGE_KINDS = [
    ("unique constraint", ConstraintKind.UNIQUE),
    ("not null constraint", ConstraintKind.NOT_NULL),
    ("foreign key constraint", ConstraintKind.FOREIGN_KEY),
    ("check constraint", ConstraintKind.CHECK),
]


def _columns_from_message(message: str) -> list[str]:
    # e.g. "UNIQUE constraint failed: clients.email"
    _, sep, tail = message.partition("failed:")
    if not sep:
        return []
    return [column.strip() for column in tail.split(",") if column.strip()]


def classify_integrity_error(error: IntegrityError) -> ConstraintViolation:
    """
    Convert a SQLAlchemy IntegrityError into a ConstraintViolation.

    The structured SQLite error name is used when the driver provides one; the
    message is only inspected when it does not.

    Args:
        error: The IntegrityError raised by SQLAlchemy

    Returns:
        A ConstraintViolation describing the failure
    """
    orig = error.orig
    message = str(orig) if orig is not None else str(error)

    error_name = getattr(orig, "sqlite_errorname", None)
    if error_name is not None:
        kind = SQLITE_ERROR_KINDS.get(error_name, ConstraintKind.UNKNOWN)
        if kind is ConstraintKind.UNKNOWN:
            logger.warning("Unrecognised SQLite constraint error %s", error_name)
        return ConstraintViolation(kind, message, _columns_from_message(message))

    normalized = message.lower()
    for needle, kind in MESSAGE_KINDS:
        if needle in normalized:
            return ConstraintViolation(kind, message, _columns_from_message(message))

    logger.warning("Could not classify integrity error: %s", message)
    return ConstraintViolation(ConstraintKind.UNKNOWN, message)
