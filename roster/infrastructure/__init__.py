"""Infrastructure Layer: file storage and cross-cutting concerns.

Invariants:
    - All OSError raised by file access is mapped to RecordFileError (core/errors.py)
"""
