"""Progress Dots: cosmetic "working..." feedback shown after add and save.

Invariants:
    - show_progress() returns only after the worker thread has finished
    - steps=0 or interval=0 never sleeps; tests run with interval 0
"""

import threading
import time
from typing import TextIO


def _print_dots(message: str, out: TextIO, steps: int, interval: float) -> None:
    out.write(message)
    out.flush()
    for _ in range(steps):
        if interval > 0:
            time.sleep(interval)
        out.write(".")
        out.flush()
    out.write("\n")


def show_progress(message: str, out: TextIO, steps: int = 3, interval: float = 0.5) -> None:
    """Print message followed by one dot per step, on a joined worker thread."""
    worker = threading.Thread(
        target=_print_dots, args=(message, out, steps, interval),
        name="roster-progress", daemon=True,
    )
    worker.start()
    worker.join()
