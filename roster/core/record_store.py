"""Record Store: in-memory roster keyed by roll number, in listing order.

Invariants:
    - Roll numbers are unique across the store at all times
    - Every stored record has marks in [0, 100] and a non-empty name
    - Listing order is insertion order until sort_by_marks() reorders it;
      add appends, update keeps position, delete removes
    - Operations either succeed fully or raise a RosterError and leave the store unchanged

Design Decisions:
    - One insertion-ordered dict serves lookup and listing order, so there is
      no second view to keep in sync
    - No logging and no IO here; the shell reports, infrastructure persists
    - search() raises StudentNotFoundError on zero matches instead of returning []
"""

from collections.abc import Iterable, Iterator

from roster.core.domain_types import RollNumber, validate_marks
from roster.core.errors import (
    DuplicateRollNumberError,
    ErrorContext,
    InvalidFieldError,
    StudentNotFoundError,
)
from roster.core.student_record import StudentRecord


class RecordStore:
    """Owns the roster. Not thread-safe; callers serialize access."""

    def __init__(self) -> None:
        self._records: dict[RollNumber, StudentRecord] = {}

    @classmethod
    def from_records(cls, records: Iterable[StudentRecord]) -> "RecordStore":
        """Build a store through add(), so loaded data obeys the same rules."""
        store = cls()
        for record in records:
            store.add(
                record.roll_number, record.name, record.email,
                record.course, record.marks,
            )
        return store

    # ─── Container protocol ──────────────────────────────────────

    def __len__(self) -> int:
        return len(self._records)

    def __contains__(self, roll_number: object) -> bool:
        return roll_number in self._records

    def __iter__(self) -> Iterator[StudentRecord]:
        return iter(list(self._records.values()))

    # ─── Operations ──────────────────────────────────────────────

    def add(
        self,
        roll_number: int,
        name: str,
        email: str,
        course: str,
        marks: float,
    ) -> StudentRecord:
        """Insert a new record at the end of the listing order."""
        key = RollNumber(roll_number)
        if key in self._records:
            raise DuplicateRollNumberError(roll_number)
        if not name or not name.strip():
            raise InvalidFieldError(
                "Name cannot be empty", "name",
                context=ErrorContext(roll_number=roll_number),
            )
        valid_marks = validate_marks(marks, ErrorContext(roll_number=roll_number))

        record = StudentRecord(key, name, email, course, valid_marks)
        self._records[key] = record
        return record

    def get(self, roll_number: int) -> StudentRecord:
        try:
            return self._records[RollNumber(roll_number)]
        except KeyError:
            raise StudentNotFoundError(roll_number) from None

    def delete(self, roll_number: int) -> None:
        if roll_number not in self._records:
            raise StudentNotFoundError(roll_number)
        del self._records[RollNumber(roll_number)]

    def update(
        self, roll_number: int, email: str, course: str, marks: float,
    ) -> StudentRecord:
        """Replace email, course and marks; grade follows marks."""
        current = self.get(roll_number)
        valid_marks = validate_marks(marks, ErrorContext(roll_number=roll_number))

        # Assigning to an existing key keeps its position in the dict.
        updated = current.with_changes(email, course, valid_marks)
        self._records[current.roll_number] = updated
        return updated

    def search(self, name: str) -> list[StudentRecord]:
        """Case-insensitive exact match on name, in listing order."""
        wanted = name.casefold()
        matches = [r for r in self._records.values() if r.name.casefold() == wanted]
        if not matches:
            raise StudentNotFoundError(name=name)
        return matches

    def list_all(self) -> list[StudentRecord]:
        return list(self._records.values())

    def sort_by_marks(self) -> list[StudentRecord]:
        """Reorder the listing by marks, highest first. Stable on ties."""
        ordered = sorted(self._records.values(), key=lambda r: r.marks, reverse=True)
        self._records = {r.roll_number: r for r in ordered}
        return ordered
