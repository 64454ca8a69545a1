"""Pydantic Schemas: validation of raw shell input before it reaches the store.

Invariants:
    - Schemas coerce and strip text at the system boundary
    - Range rules (marks 0-100, unique roll numbers) stay in core/ so every
      caller gets the same typed errors

Design Decisions:
    - Separate from core: schemas are input contracts, StudentRecord is the entity
"""
