"""Student Roster Package: console record manager over a flat text file.

Invariants:
    - Package root contains no executable code (import side-effects prohibited)
"""
