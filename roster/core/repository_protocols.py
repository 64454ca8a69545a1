"""Boundary Protocols: contracts between core and shell.

Invariants:
    - Core NEVER imports from infrastructure; dependency arrows point inward only
    - Record persistence is accessed through RecordRepository

Design Decisions:
    - Protocol over ABC: structural subtyping, no inheritance hierarchy.
      The shell accepts any object with load/save, tests pass in-memory fakes
"""

from typing import Protocol

from roster.core.student_record import StudentRecord


class RecordRepository(Protocol):
    """Contract for roster persistence, implemented by infrastructure."""
    def load(self) -> list[StudentRecord]: ...
    def save(self, records: list[StudentRecord]) -> None: ...
