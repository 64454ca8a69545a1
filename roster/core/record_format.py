"""Record Format: one record to/from one line of the roster file.

Invariants:
    - Field order is fixed: roll_number, name, email, course, marks
    - Exactly FIELD_COUNT fields per line, joined by FIELD_DELIMITER, no header
    - No quoting or escaping: a text field containing "," or a line break
      does not survive a save/load round trip (has_unsafe_characters flags it)
    - Marks render as repr(float): 92 -> "92.0", 74.99 -> "74.99"
    - Roll number must be an optionally signed run of ASCII digits with no
      surrounding whitespace; marks must be plain decimal or exponent text
      (surrounding whitespace allowed). "1_000", " 7 ", "nan" and "inf" are malformed

Design Decisions:
    - Pure functions, no file access: RecordFile in infrastructure/ owns IO
    - Plain split instead of the csv module: keeps files written by earlier
      versions of the tool readable byte for byte
"""

import re

from roster.core.domain_types import RollNumber, validate_marks
from roster.core.errors import ErrorContext, MalformedRecordError
from roster.core.student_record import StudentRecord


FIELD_DELIMITER: str = ","
FIELD_ORDER: tuple[str, ...] = ("roll_number", "name", "email", "course", "marks")
FIELD_COUNT: int = len(FIELD_ORDER)

_UNSAFE = (FIELD_DELIMITER, "\n", "\r")

# Plain decimal text only: no inner whitespace, no "_" separators, no nan/inf.
_ROLL_NUMBER = re.compile(r"[+-]?[0-9]+")
_MARKS = re.compile(r"[+-]?([0-9]+\.?[0-9]*|\.[0-9]+)([eE][+-]?[0-9]+)?")


def format_record(record: StudentRecord) -> str:
    """Serialize a record to a single line (without the trailing newline)."""
    return FIELD_DELIMITER.join((
        str(record.roll_number),
        record.name,
        record.email,
        record.course,
        repr(float(record.marks)),
    ))


def parse_record(line: str, line_number: int) -> StudentRecord:
    """Parse one line. Raises MalformedRecordError or InvalidMarksError."""
    fields = line.rstrip("\r\n").split(FIELD_DELIMITER)
    if len(fields) != FIELD_COUNT:
        raise MalformedRecordError(
            f"expected {FIELD_COUNT} fields, found {len(fields)}", line_number,
        )
    raw_roll, name, email, course, raw_marks = fields

    if not _ROLL_NUMBER.fullmatch(raw_roll):
        raise MalformedRecordError(
            f"roll number '{raw_roll}' is not an integer", line_number,
        )
    roll_number = RollNumber(int(raw_roll))

    if not _MARKS.fullmatch(raw_marks.strip()):
        raise MalformedRecordError(
            f"marks '{raw_marks}' is not a number", line_number,
        )
    marks = float(raw_marks)

    if not name.strip():
        raise MalformedRecordError("name is empty", line_number)

    context = ErrorContext(roll_number=roll_number, line_number=line_number)
    return StudentRecord(roll_number, name, email, course, validate_marks(marks, context))


def has_unsafe_characters(record: StudentRecord) -> bool:
    """True if a text field would break the line format on the next load."""
    return any(
        token in value
        for value in (record.name, record.email, record.course)
        for token in _UNSAFE
    )
