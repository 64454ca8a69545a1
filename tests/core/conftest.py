"""Core fixtures: stores pre-filled with the example roster."""

import pytest

from roster.core.record_store import RecordStore


@pytest.fixture
def store():
    return RecordStore()


@pytest.fixture
def seeded_store():
    """Ann (92, A), Bo (70, C), Cy (70, C) in insertion order."""
    s = RecordStore()
    s.add(1, "Ann", "a@x.com", "CS", 92.0)
    s.add(2, "Bo", "b@x.com", "CS", 70.0)
    s.add(3, "Cy", "c@x.com", "Math", 70.0)
    return s
