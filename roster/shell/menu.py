"""Roster Menu: read a choice, dispatch to the store, render the result.

Invariants:
    - Menu choices 1-7 map to add/view/search/delete/update/sort/save-and-exit
    - Non-numeric choice → "Invalid Input!"; unknown number → "Invalid Option!"
    - End of input behaves like Save & Exit
    - A failed save keeps the loop running so the user can retry

Design Decisions:
    - Three error layers, like a web app's handlers: RosterError (domain),
      ValidationError (pydantic input), Exception (catch-all, logged with traceback)
    - stdin/stdout injected: tests drive the loop with io.StringIO
"""

import logging
import sys
from typing import Callable, TextIO

from pydantic import ValidationError

from roster.core.errors import DuplicateRollNumberError, RecordFileError, RosterError
from roster.core.record_store import RecordStore
from roster.core.repository_protocols import RecordRepository
from roster.core.student_record import StudentRecord
from roster.schemas.student import (
    NameQuery,
    RollNumberQuery,
    StudentCreate,
    StudentResponse,
    StudentUpdate,
)
from roster.shell.progress import show_progress

logger = logging.getLogger(__name__)

MENU = """
===== Student Roster Menu =====
1. Add Student
2. View All Students
3. Search Student
4. Delete Student
5. Update Student
6. Sort by Marks
7. Save & Exit"""

EXIT_CHOICE = 7


class RosterShell:
    """Interactive loop over one RecordStore and its repository."""

    def __init__(
        self,
        store: RecordStore,
        repository: RecordRepository,
        stdin: TextIO | None = None,
        stdout: TextIO | None = None,
        progress_steps: int = 3,
        progress_interval: float = 0.5,
    ):
        self.store = store
        self.repository = repository
        self.stdin = stdin or sys.stdin
        self.stdout = stdout or sys.stdout
        self.progress_steps = progress_steps
        self.progress_interval = progress_interval
        self._actions: dict[int, Callable[[], None]] = {
            1: self.add_student,
            2: self.view_all,
            3: self.search_student,
            4: self.delete_student,
            5: self.update_student,
            6: self.sort_by_marks,
        }

    def run(self) -> int:
        """Loop until Save & Exit succeeds or input ends. Returns an exit code."""
        while True:
            self._print(MENU)
            try:
                raw = self._read("Enter choice: ")
            except EOFError:
                return self._save_on_eof()

            try:
                choice = int(raw.strip())
            except ValueError:
                self._print("Invalid Input!")
                continue

            if choice == EXIT_CHOICE:
                if self._save_and_exit():
                    return 0
                continue

            action = self._actions.get(choice)
            if action is None:
                self._print("Invalid Option!")
                continue

            try:
                self._dispatch(action)
            except EOFError:
                return self._save_on_eof()

    # ─── Menu actions ────────────────────────────────────────────

    def add_student(self) -> None:
        roll_number = self._read_roll_number("Enter Roll No: ")
        # Fail before asking for the remaining fields.
        if roll_number in self.store:
            raise DuplicateRollNumberError(roll_number)

        data = StudentCreate(
            roll_number=roll_number,
            name=self._read("Enter Name: "),
            email=self._read("Enter Email: "),
            course=self._read("Enter Course: "),
            marks=self._read("Enter Marks: "),
        )
        record = self.store.add(
            data.roll_number, data.name, data.email, data.course, data.marks,
        )
        self._progress("Adding")
        logger.info("Student added", extra={"roll_number": record.roll_number})
        self._print("Student Added Successfully!\n")

    def view_all(self) -> None:
        records = self.store.list_all()
        if not records:
            self._print("No records found.\n")
            return
        for record in records:
            self._render(record)

    def search_student(self) -> None:
        query = NameQuery(name=self._read("Enter Name to search: "))
        for record in self.store.search(query.name):
            self._render(record)

    def delete_student(self) -> None:
        roll_number = self._read_roll_number("Enter Roll No to delete: ")
        self.store.delete(roll_number)
        logger.info("Student deleted", extra={"roll_number": roll_number})
        self._print("Record Deleted!\n")

    def update_student(self) -> None:
        roll_number = self._read_roll_number("Enter Roll No to update: ")
        self.store.get(roll_number)

        data = StudentUpdate(
            roll_number=roll_number,
            email=self._read("Enter New Email: "),
            course=self._read("Enter New Course: "),
            marks=self._read("Enter New Marks: "),
        )
        self.store.update(data.roll_number, data.email, data.course, data.marks)
        logger.info("Student updated", extra={"roll_number": roll_number})
        self._print("Record Updated!\n")

    def sort_by_marks(self) -> None:
        records = self.store.sort_by_marks()
        self._print("Sorted By Marks:\n")
        for record in records:
            self._render(record)

    # ─── Saving ──────────────────────────────────────────────────

    def _save(self) -> None:
        self.repository.save(self.store.list_all())
        self._progress("Saving")
        self._print("Records Saved!")

    def _save_and_exit(self) -> bool:
        try:
            self._save()
        except RecordFileError as e:
            self._report(e)
            return False
        self._print("Exiting...")
        return True

    def _save_on_eof(self) -> int:
        self._print("")
        return 0 if self._save_and_exit() else 1

    # ─── Error handling ──────────────────────────────────────────

    def _dispatch(self, action: Callable[[], None]) -> None:
        try:
            action()
        except RosterError as e:
            self._report(e)
        except ValidationError as e:
            first = e.errors()[0]
            field = ".".join(str(loc) for loc in first["loc"])
            logger.warning(f"Invalid input for {field}: {first['msg']}")
            self._print(f"ERROR: Invalid {field}: {first['msg']}")
        except EOFError:
            raise
        except Exception as e:
            logger.error(f"Unhandled exception in menu action: {e}", exc_info=True)
            self._print("ERROR: An unexpected error occurred")

    def _report(self, error: RosterError) -> None:
        level = logging.WARNING if error.recoverable else logging.ERROR
        logger.log(
            level, f"RosterError: {error.message}",
            extra={"error_code": error.code, "roll_number": error.context.roll_number},
        )
        self._print(f"ERROR: {error.context.user_message or error.message}")

    # ─── Terminal IO ─────────────────────────────────────────────

    def _read(self, prompt: str) -> str:
        self.stdout.write(prompt)
        self.stdout.flush()
        line = self.stdin.readline()
        if not line:
            raise EOFError
        return line.rstrip("\r\n")

    def _read_roll_number(self, prompt: str) -> int:
        return RollNumberQuery(roll_number=self._read(prompt).strip()).roll_number

    def _print(self, text: str) -> None:
        self.stdout.write(f"{text}\n")

    def _progress(self, message: str) -> None:
        show_progress(message, self.stdout, self.progress_steps, self.progress_interval)

    def _render(self, record: StudentRecord) -> None:
        view = StudentResponse.model_validate(record)
        self._print(
            f"Roll No: {view.roll_number}\n"
            f"Name: {view.name}\n"
            f"Email: {view.email}\n"
            f"Course: {view.course}\n"
            f"Marks: {view.marks}\n"
            f"Grade: {view.grade}\n"
        )
