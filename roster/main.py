"""Roster Entry Point: load records, run the menu, save on exit.

Invariants:
    - Settings read once via get_settings(); logging configured before any IO
    - A failed load aborts startup (exit code 1) and never touches the file
    - Ctrl-C exits with code 130 without saving

Design Decisions:
    - main() wires concrete RecordFile into RosterShell; nothing else
      instantiates infrastructure
"""

import logging
import sys

from roster.config import get_settings
from roster.core.errors import RosterError
from roster.core.record_store import RecordStore
from roster.infrastructure.observability import setup_logging
from roster.infrastructure.record_file import RecordFile
from roster.shell.menu import RosterShell

logger = logging.getLogger(__name__)


def main() -> int:
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)

    repository = RecordFile(settings.records_file, settings.load_policy)
    try:
        store = RecordStore.from_records(repository.load())
    except RosterError as e:
        logger.error(
            f"Startup load failed: {e.message}",
            extra={"error_code": e.code, "path": str(settings.records_file)},
        )
        print(f"Error loading file: {e.message}", file=sys.stderr)
        return 1

    print("Records Loaded Successfully!")
    logger.info("Roster started", extra={"record_count": len(store)})

    shell = RosterShell(
        store,
        repository,
        progress_steps=settings.progress_steps,
        progress_interval=settings.progress_interval_seconds,
    )
    try:
        return shell.run()
    except KeyboardInterrupt:
        print("\nInterrupted; changes not saved.")
        logger.warning("Interrupted by user; unsaved changes discarded")
        return 130


if __name__ == "__main__":
    sys.exit(main())
