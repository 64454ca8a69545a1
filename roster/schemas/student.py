"""Student Schemas: pydantic models for shell input and record display.

Invariants:
    - StudentCreate.name: stripped, non-empty
    - roll_number coerces from text to int; marks coerce from text to float
    - Marks range is NOT checked here (RecordStore raises InvalidMarksError)
"""

from pydantic import BaseModel, ConfigDict, Field

from roster.core.domain_types import Grade


class StudentCreate(BaseModel):
    """Fields collected by the Add Student menu entry."""
    model_config = ConfigDict(str_strip_whitespace=True)

    roll_number: int
    name: str = Field(min_length=1)
    email: str
    course: str
    marks: float


class StudentUpdate(BaseModel):
    """Fields collected by the Update Student menu entry."""
    model_config = ConfigDict(str_strip_whitespace=True)

    roll_number: int
    email: str
    course: str
    marks: float


class RollNumberQuery(BaseModel):
    roll_number: int


class NameQuery(BaseModel):
    model_config = ConfigDict(str_strip_whitespace=True)

    name: str = Field(min_length=1)


class StudentResponse(BaseModel):
    """Read-only view of a StudentRecord for display."""
    model_config = ConfigDict(from_attributes=True)

    roll_number: int
    name: str
    email: str
    course: str
    marks: float
    grade: Grade
