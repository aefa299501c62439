"""
Search field shown in the middle of the header bar.
"""

from rich.cells import cell_len
from textual.app import ComposeResult
from textual.containers import Horizontal
from textual.widgets import Input, Static

from ...config.constants import SEARCH_CHAR_LIMIT, SEARCH_PLACEHOLDER, SEARCH_PROMPT


class SearchField(Horizontal):
    """Prompt glyph plus a single-line Input."""

    DEFAULT_CSS = """
    SearchField {
        height: 1;
        width: auto;
        padding: 0 1;
    }

    SearchField > #search-prompt {
        width: auto;
        height: 1;
    }

    SearchField > Input {
        height: 1;
        border: none;
        padding: 0;
        background: transparent;
    }

    SearchField > Input:focus {
        border: none;
    }
    """

    def compose(self) -> ComposeResult:
        yield Static(SEARCH_PROMPT, id="search-prompt")
        yield Input(
            placeholder=SEARCH_PLACEHOLDER,
            max_length=SEARCH_CHAR_LIMIT,
            id="search-input",
        )

    @property
    def input(self) -> Input:
        return self.query_one("#search-input", Input)

    @property
    def is_focused(self) -> bool:
        return self.input.has_focus

    def focus_input(self) -> None:
        self.input.focus()

    def blur_input(self) -> None:
        self.input.blur()

    def set_width(self, width: int, input_width: int) -> None:
        """Size the field.

        Args:
            width: Total width including padding
            input_width: Columns available to prompt and text
        """
        self.styles.width = width
        self.input.styles.width = max(input_width - cell_len(SEARCH_PROMPT), 1)

    def set_color(self, color: str) -> None:
        """Colour prompt and typed text (accent when focused)."""
        self.styles.color = color
        self.query_one("#search-prompt", Static).styles.color = color
        self.input.styles.color = color
