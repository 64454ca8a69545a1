"""Core Layer: pure domain logic, no IO, no logging.

Invariants:
    - No module in core/ imports from infrastructure/, schemas/, or shell/
    - Every failure is raised as a RosterError subclass (core/errors.py)

Design Decisions:
    - Functional core separated from imperative shell: file access and terminal
      IO live in infrastructure/ and shell/
"""
