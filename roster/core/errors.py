"""Error Hierarchy: typed, categorized exceptions for all roster failure modes.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Domain errors are recoverable; storage errors are critical

Design Decisions:
    - Single hierarchy with RosterError base: the shell catches one type
    - ErrorContext as dataclass: structured detail without coupling to logging
"""

from dataclasses import dataclass
from enum import Enum


class ErrorSeverity(str, Enum):
    """Error severity for observability and shell handling."""
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


class ErrorCategory(str, Enum):
    """High-level error categories."""
    VALIDATION = "validation"
    RESOURCE_NOT_FOUND = "resource_not_found"
    CONFLICT = "conflict"
    DATA_FORMAT = "data_format"
    STORAGE = "storage"


@dataclass
class ErrorContext:
    """Where the error happened, for log lines and diagnostics."""
    roll_number: int | None = None
    line_number: int | None = None
    path: str | None = None
    field_name: str | None = None
    user_message: str | None = None


class RosterError(Exception):
    """Base exception for all roster errors."""

    def __init__(
        self,
        message: str,
        code: str,
        category: ErrorCategory,
        severity: ErrorSeverity = ErrorSeverity.ERROR,
        context: ErrorContext | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.category = category
        self.severity = severity
        self.context = context or ErrorContext()

    @property
    def recoverable(self) -> bool:
        return self.severity != ErrorSeverity.CRITICAL


# ─── Domain Errors ──────────────────────────────────────────────

class DuplicateRollNumberError(RosterError):
    """Add attempted with a roll number already in the roster."""
    def __init__(self, roll_number: int, context: ErrorContext | None = None):
        ctx = context or ErrorContext()
        ctx.roll_number = roll_number
        super().__init__(
            f"Roll No {roll_number} already exists",
            "DUPLICATE_KEY", ErrorCategory.CONFLICT,
            ErrorSeverity.ERROR, ctx,
        )
        self.roll_number = roll_number


class StudentNotFoundError(RosterError):
    """No student matches the requested roll number or name."""
    def __init__(
        self,
        roll_number: int | None = None,
        name: str | None = None,
        context: ErrorContext | None = None,
    ):
        ctx = context or ErrorContext()
        ctx.roll_number = roll_number
        if roll_number is not None:
            message = f"Student with Roll No {roll_number} not found"
        else:
            message = f"No student named '{name}' found"
        super().__init__(
            message, "NOT_FOUND", ErrorCategory.RESOURCE_NOT_FOUND,
            ErrorSeverity.ERROR, ctx,
        )
        self.roll_number = roll_number
        self.name = name


class InvalidFieldError(RosterError):
    """A record field failed validation."""
    def __init__(
        self,
        message: str,
        field: str,
        code: str = "INVALID_FIELD",
        context: ErrorContext | None = None,
    ):
        ctx = context or ErrorContext()
        ctx.field_name = field
        super().__init__(
            message, code, ErrorCategory.VALIDATION,
            ErrorSeverity.ERROR, ctx,
        )
        self.field = field


class InvalidMarksError(InvalidFieldError):
    """Marks outside [0, 100] (or not a number at all)."""
    def __init__(self, marks: float, context: ErrorContext | None = None):
        super().__init__(
            f"Marks must be between 0 and 100, got {marks}",
            "marks", "INVALID_MARKS", context,
        )
        self.marks = marks


# ─── Storage Errors ─────────────────────────────────────────────

class MalformedRecordError(RosterError):
    """A line in the records file could not be parsed."""
    def __init__(self, reason: str, line_number: int, context: ErrorContext | None = None):
        ctx = context or ErrorContext()
        ctx.line_number = line_number
        super().__init__(
            f"Malformed record on line {line_number}: {reason}",
            "MALFORMED_RECORD", ErrorCategory.DATA_FORMAT,
            ErrorSeverity.ERROR, ctx,
        )
        self.reason = reason
        self.line_number = line_number


class RecordFileError(RosterError):
    """Reading or writing the records file failed."""
    def __init__(self, message: str, operation: str, context: ErrorContext | None = None):
        super().__init__(
            f"Records file {operation} failed: {message}",
            "IO_FAILURE", ErrorCategory.STORAGE,
            ErrorSeverity.CRITICAL, context,
        )
        self.operation = operation
