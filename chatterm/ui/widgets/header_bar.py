"""
Header bar: channel info on the left, search in the middle, icons on the right.
"""

from textual.app import ComposeResult
from textual.containers import Horizontal
from textual.widgets import Static

from .search_field import SearchField


class HeaderBar(Horizontal):
    DEFAULT_CSS = """
    HeaderBar {
        height: 3;
        margin: 1 0 0 0;
        border: solid $secondary;
        padding: 0 1;
        align-vertical: middle;
        overflow: hidden;
    }

    HeaderBar > #header-left, HeaderBar > #header-right {
        width: auto;
        height: 1;
    }
    """

    def compose(self) -> ComposeResult:
        yield Static(id="header-left")
        yield SearchField(id="search-field")
        yield Static(id="header-right")

    @property
    def search_field(self) -> SearchField:
        return self.query_one("#search-field", SearchField)
