"""Domain Types: rich types that replace bare primitives across the roster.

Invariants:
    - Marks is bounded 0.0–100.0 (checked by validate_marks, not by the NewType)
    - GRADE_THRESHOLDS is the single source of truth for grade cutoffs
    - Exact threshold values land on the higher grade (90 → A, 75 → B, 60 → C)

Design Decisions:
    - NewType over dataclass wrappers: zero runtime cost, full type-checker support
    - str Enum for Grade: Grade.A == "A", renders and serializes as the letter
"""

import math
from enum import Enum
from typing import NewType

from roster.core.errors import InvalidMarksError, ErrorContext


# ─── Identity Types ──────────────────────────────────────────────

RollNumber = NewType("RollNumber", int)


# ─── Value Types ─────────────────────────────────────────────────

Marks = NewType("Marks", float)   # 0.0–100.0

MIN_MARKS: float = 0.0
MAX_MARKS: float = 100.0


# ─── Enums ───────────────────────────────────────────────────────

class Grade(str, Enum):
    """Letter grade derived from marks."""
    A = "A"
    B = "B"
    C = "C"
    D = "D"

    def __str__(self) -> str:
        return self.value


# Checked top-down; first cutoff the marks reach wins.
GRADE_THRESHOLDS: tuple[tuple[float, Grade], ...] = (
    (90.0, Grade.A),
    (75.0, Grade.B),
    (60.0, Grade.C),
)


def compute_grade(marks: float) -> Grade:
    """Map marks to a letter grade. Pure."""
    for cutoff, grade in GRADE_THRESHOLDS:
        if marks >= cutoff:
            return grade
    return Grade.D


def validate_marks(marks: float, context: ErrorContext | None = None) -> Marks:
    """Return marks as float if within [0, 100], else raise InvalidMarksError."""
    value = float(marks)
    if math.isnan(value) or not MIN_MARKS <= value <= MAX_MARKS:
        raise InvalidMarksError(marks, context)
    return Marks(value)
