"""Record File: loads and saves the roster as a flat delimited text file.

Invariants:
    - A missing file is created empty and loads as []
    - Records are separated by LF only (CRLF and CR are folded to LF on read); other
      Unicode line boundaries such as U+0085 or U+2028 stay inside a field
    - Blank lines are ignored
    - strict policy: the first bad line aborts the whole load
    - skip policy: bad lines and repeated roll numbers are dropped with a WARNING
    - save() rewrites the whole file; there is no incremental write
    - save() encodes every record before opening the file, so an unencodable
      field leaves the previous content intact
    - Every OSError and every encode/decode failure maps to RecordFileError

Design Decisions:
    - Stateless between calls: path and policy are the only attributes
    - Not atomic: a failure mid-save can leave the file truncated. Acceptable
      for a single-user tool, and keeps the file's inode and permissions
"""

import logging
from pathlib import Path
from typing import Literal

from roster.core.errors import (
    ErrorContext,
    InvalidMarksError,
    MalformedRecordError,
    RecordFileError,
)
from roster.core.record_format import format_record, has_unsafe_characters, parse_record
from roster.core.student_record import StudentRecord

logger = logging.getLogger(__name__)

LoadPolicy = Literal["strict", "skip"]


class RecordFile:
    """Flat-file implementation of RecordRepository."""

    def __init__(self, path: str | Path, load_policy: LoadPolicy = "strict"):
        self.path = Path(path)
        self.load_policy = load_policy

    def load(self) -> list[StudentRecord]:
        """Read every record in file order."""
        text = self._read_text()
        records: list[StudentRecord] = []
        seen: set[int] = set()

        # Only \n separates records; read_text already folds \r\n and \r into \n.
        for line_number, line in enumerate(text.split("\n"), start=1):
            if not line.strip():
                continue
            try:
                record = parse_record(line, line_number)
            except (MalformedRecordError, InvalidMarksError) as e:
                e.context.path = str(self.path)
                if self.load_policy == "strict":
                    raise
                logger.warning(
                    f"Skipping line {line_number}: {e.message}",
                    extra={"path": str(self.path), "line_number": line_number,
                           "error_code": e.code},
                )
                continue

            if self.load_policy == "skip" and record.roll_number in seen:
                logger.warning(
                    f"Skipping line {line_number}: duplicate Roll No {record.roll_number}",
                    extra={"path": str(self.path), "line_number": line_number,
                           "roll_number": record.roll_number},
                )
                continue
            seen.add(record.roll_number)
            records.append(record)

        logger.info(
            "Records loaded",
            extra={"path": str(self.path), "record_count": len(records)},
        )
        return records

    def save(self, records: list[StudentRecord]) -> None:
        """Overwrite the file with one line per record, in the given order."""
        for record in records:
            if has_unsafe_characters(record):
                logger.warning(
                    f"Roll No {record.roll_number} has a comma or line break "
                    f"in a text field; it will not load back correctly",
                    extra={"path": str(self.path), "roll_number": record.roll_number},
                )

        payload = "".join(f"{format_record(r)}\n" for r in records)
        try:
            # Encode before opening: a bad character must not truncate the file.
            data = payload.encode("utf-8")
        except UnicodeEncodeError as e:
            logger.error(f"Records file encode error: {e}", extra={"path": str(self.path)})
            raise RecordFileError(
                str(e), "write", ErrorContext(path=str(self.path)),
            ) from e

        try:
            self.path.write_bytes(data)
        except OSError as e:
            logger.error(f"Records file write error: {e}", extra={"path": str(self.path)})
            raise RecordFileError(
                str(e), "write", ErrorContext(path=str(self.path)),
            ) from e

        logger.info(
            "Records saved",
            extra={"path": str(self.path), "record_count": len(records)},
        )

    def _read_text(self) -> str:
        try:
            if not self.path.exists():
                self.path.touch()
                logger.info("Created empty records file", extra={"path": str(self.path)})
                return ""
            return self.path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            logger.error(f"Records file read error: {e}", extra={"path": str(self.path)})
            raise RecordFileError(
                str(e), "read", ErrorContext(path=str(self.path)),
            ) from e
