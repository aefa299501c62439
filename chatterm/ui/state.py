"""
Screen state for the chat mock-up.

Holds the two pieces of state the controller owns: which input has focus and
the last terminal size reported by the driver.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Tuple

from ..config.constants import COMPOSE_MAX_ROWS, COMPOSE_MIN_ROWS


class FocusTarget(str, Enum):
    """The input widget that currently receives keyboard events."""

    SEARCH = "search"
    COMPOSE = "compose"

    def other(self) -> "FocusTarget":
        if self is FocusTarget.SEARCH:
            return FocusTarget.COMPOSE
        return FocusTarget.SEARCH


@dataclass
class ScreenState:
    """Focus and dimensions of the screen.

    ``width == 0`` means no resize event has arrived yet.
    """

    width: int = 0
    height: int = 0
    focused: FocusTarget = FocusTarget.COMPOSE

    @property
    def ready(self) -> bool:
        return self.width != 0

    def resize(self, width: int, height: int) -> None:
        self.width = width
        self.height = height

    def toggle_focus(self) -> Tuple[FocusTarget, FocusTarget]:
        """Move focus to the other widget.

        Returns:
            (blurred, focused) so the caller can notify both widgets.
        """
        blurred = self.focused
        self.focused = blurred.other()
        return blurred, self.focused


def clamp_compose_rows(line_count: int) -> int:
    """Visible rows for a compose document with ``line_count`` lines."""
    return min(max(line_count, COMPOSE_MIN_ROWS), COMPOSE_MAX_ROWS)
