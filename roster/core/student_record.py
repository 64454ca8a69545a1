"""Student Record: the single roster entity, an immutable value object.

Invariants:
    - roll_number never changes; updates produce a new record via with_changes()
    - grade is computed from marks on every access, never stored
    - Construction does not validate; RecordStore and parse_record do

Design Decisions:
    - frozen dataclass: a record handed to a caller cannot alter store state
"""

from dataclasses import dataclass, replace

from roster.core.domain_types import RollNumber, Marks, Grade, compute_grade


@dataclass(frozen=True)
class StudentRecord:
    """One student's stored data."""

    roll_number: RollNumber
    name: str
    email: str
    course: str
    marks: Marks

    @property
    def grade(self) -> Grade:
        return compute_grade(self.marks)

    def with_changes(self, email: str, course: str, marks: Marks) -> "StudentRecord":
        """Copy with the updatable fields replaced."""
        return replace(self, email=email, course=course, marks=marks)
