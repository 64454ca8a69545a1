"""Record File: load/save against real files in tmp_path.

Invariants:
    - Missing file is created and loads empty
    - save then load reproduces the same records (no commas in text fields)
    - strict load aborts on the first bad line; skip load drops it with a warning
    - OSError maps to RecordFileError
"""

import logging

import pytest

from roster.core.errors import (
    DuplicateRollNumberError,
    InvalidMarksError,
    MalformedRecordError,
    RecordFileError,
)
from roster.core.record_store import RecordStore
from roster.core.student_record import StudentRecord
from roster.infrastructure.record_file import RecordFile


@pytest.fixture
def path(tmp_path):
    return tmp_path / "students.txt"


def test_missing_file_is_created_and_loads_empty(path):
    assert RecordFile(path).load() == []
    assert path.exists()
    assert path.read_text() == ""


def test_save_then_load_round_trips(path):
    store = RecordStore()
    store.add(1, "Ann", "a@x.com", "CS", 92.0)
    store.add(2, "Bo", "b@x.com", "Math", 74.99)
    store.add(3, "Cy", "", "", 0)
    store.sort_by_marks()

    repo = RecordFile(path)
    repo.save(store.list_all())
    reloaded = RecordStore.from_records(repo.load())

    assert reloaded.list_all() == store.list_all()


def test_save_writes_one_line_per_record(path):
    records = [
        StudentRecord(1, "Ann", "a@x.com", "CS", 92.0),
        StudentRecord(2, "Bo", "b@x.com", "CS", 70.0),
    ]
    RecordFile(path).save(records)
    assert path.read_text() == "1,Ann,a@x.com,CS,92.0\n2,Bo,b@x.com,CS,70.0\n"


def test_save_overwrites_existing_content(path):
    path.write_text("1,Old,o@x.com,CS,10.0\n2,Gone,g@x.com,CS,20.0\n")
    RecordFile(path).save([StudentRecord(3, "New", "n@x.com", "CS", 30.0)])
    assert path.read_text() == "3,New,n@x.com,CS,30.0\n"


def test_save_empty_roster_truncates_file(path):
    path.write_text("1,Old,o@x.com,CS,10.0\n")
    RecordFile(path).save([])
    assert path.read_text() == ""


def test_load_ignores_blank_lines(path):
    path.write_text("1,Ann,a@x.com,CS,92.0\n\n   \n2,Bo,b@x.com,CS,70.0\n")
    assert [r.roll_number for r in RecordFile(path).load()] == [1, 2]


def test_load_reads_file_without_trailing_newline(path):
    path.write_text("1,Ann,a@x.com,CS,92.0")
    assert RecordFile(path).load()[0].name == "Ann"


def test_strict_load_aborts_on_malformed_line(path):
    path.write_text("1,Ann,a@x.com,CS,92.0\n2,Bo,b@x.com\n3,Cy,c@x.com,CS,50.0\n")
    with pytest.raises(MalformedRecordError) as exc:
        RecordFile(path).load()
    assert exc.value.line_number == 2
    assert exc.value.context.path == str(path)


def test_strict_load_aborts_on_out_of_range_marks(path):
    path.write_text("1,Ann,a@x.com,CS,192.0\n")
    with pytest.raises(InvalidMarksError):
        RecordFile(path).load()


def test_strict_load_leaves_duplicates_to_store(path):
    path.write_text("1,Ann,a@x.com,CS,92.0\n1,Ann,a@x.com,CS,80.0\n")
    records = RecordFile(path).load()
    assert len(records) == 2
    with pytest.raises(DuplicateRollNumberError):
        RecordStore.from_records(records)


def test_skip_load_drops_bad_lines_with_warning(path, caplog):
    path.write_text(
        "1,Ann,a@x.com,CS,92.0\n"
        "oops\n"
        "x,Bo,b@x.com,CS,70.0\n"
        "3,Cy,c@x.com,CS,500\n"
        "4,Di,d@x.com,CS,61.0\n"
    )
    with caplog.at_level(logging.WARNING, logger="roster.infrastructure.record_file"):
        records = RecordFile(path, load_policy="skip").load()

    assert [r.roll_number for r in records] == [1, 4]
    skipped = [r.line_number for r in caplog.records if r.levelno == logging.WARNING]
    assert skipped == [2, 3, 4]


def test_skip_load_keeps_first_duplicate(path, caplog):
    path.write_text("1,Ann,a@x.com,CS,92.0\n1,Imposter,i@x.com,CS,10.0\n")
    with caplog.at_level(logging.WARNING):
        records = RecordFile(path, load_policy="skip").load()
    assert [r.name for r in records] == ["Ann"]
    assert "duplicate Roll No 1" in caplog.text


def test_save_warns_about_unsafe_fields(path, caplog):
    with caplog.at_level(logging.WARNING):
        RecordFile(path).save([StudentRecord(9, "Doe, Jane", "j@x.com", "CS", 80.0)])
    assert "Roll No 9" in caplog.text
    assert path.read_text() == "9,Doe, Jane,j@x.com,CS,80.0\n"


def test_save_to_missing_directory_raises_file_error(tmp_path):
    repo = RecordFile(tmp_path / "no_such_dir" / "students.txt")
    with pytest.raises(RecordFileError) as exc:
        repo.save([StudentRecord(1, "Ann", "", "", 1.0)])
    assert exc.value.operation == "write"
    assert exc.value.code == "IO_FAILURE"


def test_load_directory_raises_file_error(tmp_path):
    with pytest.raises(RecordFileError) as exc:
        RecordFile(tmp_path).load()
    assert exc.value.operation == "read"


def test_load_undecodable_file_raises_file_error(path):
    path.write_bytes(b"1,\xff\xfe,a@x.com,CS,92.0\n")
    with pytest.raises(RecordFileError):
        RecordFile(path).load()


@pytest.mark.parametrize(
    "name",
    ["Ann\x85Lee", "Ann\u2028Lee", "Ann\u2029Lee", "Ann\x0cLee", "Ann\x0bLee", "Ann\x1cLee"],
)
def test_unicode_line_boundaries_in_name_round_trip(path, name):
    record = StudentRecord(1, name, "a@x.com", "CS", 92.0)
    repo = RecordFile(path)
    repo.save([record])
    assert repo.load() == [record]


def test_load_accepts_crlf_line_endings(path):
    path.write_bytes(b"1,Ann,a@x.com,CS,92.0\r\n2,Bo,b@x.com,CS,70.0\r\n")
    assert [r.name for r in RecordFile(path).load()] == ["Ann", "Bo"]


def test_unencodable_field_raises_file_error_and_keeps_old_content(path):
    repo = RecordFile(path)
    good = StudentRecord(1, "Ann", "a@x.com", "CS", 92.0)
    repo.save([good])
    before = path.read_bytes()

    with pytest.raises(RecordFileError) as exc:
        repo.save([good, StudentRecord(2, "B\udcff", "b@x.com", "CS", 70.0)])

    assert exc.value.operation == "write"
    assert exc.value.context.path == str(path)
    assert path.read_bytes() == before
