"""
Message compose box at the bottom of the screen.

The TextArea keeps every line the user types; only its visible height is
clamped, so content past the second line scrolls instead of growing the box.
"""

import logging

from rich.text import Text
from textual.app import ComposeResult
from textual.containers import Horizontal
from textual.widgets import Static, TextArea

from ...config.constants import BORDER_ROWS, COMPOSE_MIN_ROWS, COMPOSE_PLACEHOLDER

logger = logging.getLogger(__name__)


class ComposeBox(Horizontal):
    """Prompt, multi-line TextArea and trailing icons inside a rounded border."""

    DEFAULT_CSS = """
    ComposeBox {
        height: 3;
        border: round $secondary;
        padding: 0 1;
    }

    ComposeBox > #compose-prompt, ComposeBox > #compose-icons {
        width: auto;
        height: 1;
    }

    ComposeBox > TextArea {
        height: 1;
        border: none;
        padding: 0;
        background: transparent;
        scrollbar-size: 0 0;
    }

    ComposeBox > TextArea:focus {
        border: none;
    }
    """

    def __init__(self, **kwargs) -> None:
        super().__init__(**kwargs)
        self._visible_rows = COMPOSE_MIN_ROWS

    def compose(self) -> ComposeResult:
        yield Static(id="compose-prompt")
        yield TextArea(
            soft_wrap=True,
            show_line_numbers=False,
            placeholder=COMPOSE_PLACEHOLDER,
            id="compose-input",
        )
        yield Static(id="compose-icons")

    @property
    def text_area(self) -> TextArea:
        return self.query_one("#compose-input", TextArea)

    @property
    def is_focused(self) -> bool:
        return self.text_area.has_focus

    def focus_input(self) -> None:
        self.text_area.focus()

    def blur_input(self) -> None:
        self.text_area.blur()

    def line_count(self) -> int:
        return self.text_area.document.line_count

    def set_visible_height(self, rows: int) -> None:
        if rows != self._visible_rows:
            logger.debug("Compose box height %s -> %s", self._visible_rows, rows)
        self._visible_rows = rows
        self.text_area.styles.height = rows
        self.styles.height = rows + BORDER_ROWS

    def rendered_height(self) -> int:
        return self._visible_rows

    def set_width(self, box_width: int, input_width: int) -> None:
        self.styles.width = box_width
        self.text_area.styles.width = input_width

    def set_decorations(
        self, prompt: Text, icons: Text, border_kind: str, border_color: str
    ) -> None:
        self.query_one("#compose-prompt", Static).update(prompt)
        self.query_one("#compose-icons", Static).update(icons)
        self.styles.border = (border_kind, border_color)
