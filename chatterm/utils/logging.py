"""Simple logging utilities for chatterm."""

import logging
from pathlib import Path
from typing import Optional

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def setup_tui_logging(log_file: Optional[Path] = None) -> None:
    """Route the ``chatterm`` logger while the TUI owns the terminal.

    Writing to stderr would scribble over the screen, so records go to
    ``log_file`` when one is given and are dropped otherwise.
    """
    root = logging.getLogger("chatterm")
    for handler in list(root.handlers):
        root.removeHandler(handler)
        handler.close()

    if log_file is None:
        root.addHandler(logging.NullHandler())
        root.propagate = False
        return

    log_file.parent.mkdir(parents=True, exist_ok=True)
    handler = logging.FileHandler(log_file)
    handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))
    root.addHandler(handler)
    root.setLevel(logging.DEBUG)
    root.propagate = False
