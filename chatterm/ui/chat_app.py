"""
Chat screen controller.

Owns the ScreenState, reacts to resize / focus / text events, and after each
one re-runs the compose height adapter and the layout engine, then applies the
resulting geometry to the widget tree.
"""

import logging
from typing import Optional

from textual import events, on
from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.containers import Vertical
from textual.widgets import Static, TextArea

from ..config.constants import APP_TITLE, LOADING_TEXT, STATUS_LABEL
from ..config.ui_config import DEFAULT_STYLES, ChatStyles
from .layout import (
    ScreenLayout,
    compose_icons_text,
    compose_prompt_text,
    compute_layout,
    header_left_text,
    header_right_text,
)
from .state import FocusTarget, ScreenState, clamp_compose_rows
from .themes import DEFAULT_THEME, get_palette, register_all_themes
from .widgets import ComposeBox, HeaderBar, SearchField

logger = logging.getLogger(__name__)


class ChatApp(App[None]):
    """Single-screen chat mock-up."""

    TITLE = APP_TITLE
    AUTO_FOCUS = "#compose-input"

    CSS = """
    Screen {
        overflow: hidden;
    }

    #chat-layout {
        height: auto;
        width: auto;
        display: none;
    }

    #status-line {
        height: 1;
    }

    #message-buffer {
        height: 3;
    }
    """

    BINDINGS = [
        Binding("ctrl+c", "quit", "Quit", priority=True),
        Binding("tab", "toggle_focus", "Switch focus", show=False, priority=True),
    ]

    def __init__(
        self,
        theme_name: Optional[str] = None,
        chat_styles: ChatStyles = DEFAULT_STYLES,
    ) -> None:
        super().__init__()
        if theme_name is not None:
            chat_styles = chat_styles.with_palette(get_palette(theme_name))
        self.theme_name = theme_name or DEFAULT_THEME
        self.chat_styles = chat_styles
        self.screen_state = ScreenState()
        self._layout_ready = False
        register_all_themes(self)

    def compose(self) -> ComposeResult:
        yield Static(LOADING_TEXT, id="loading")
        with Vertical(id="chat-layout"):
            yield HeaderBar(id="header")
            yield Static(STATUS_LABEL, id="status-line")
            yield Static("", id="message-buffer")
            yield ComposeBox(id="compose-box")

    def on_mount(self) -> None:
        self.theme = self.theme_name
        self.screen.styles.padding = self.chat_styles.app_padding
        self._layout_ready = True
        self.set_terminal_title(self.title)
        self.compose_box.focus_input()
        self.refresh_layout()

    def set_terminal_title(self, title: str) -> None:
        """Set the terminal window title with an OSC 2 escape."""
        if self._driver is None:
            return
        self._driver.write(f"\x1b]2;{title}\a")

    # =========================================================================
    # Widget accessors
    # =========================================================================

    @property
    def search_field(self) -> SearchField:
        return self.query_one("#search-field", SearchField)

    @property
    def compose_box(self) -> ComposeBox:
        return self.query_one("#compose-box", ComposeBox)

    def _widget_for(self, target: FocusTarget):
        if target is FocusTarget.SEARCH:
            return self.search_field
        return self.compose_box

    # =========================================================================
    # Events
    # =========================================================================

    def on_resize(self, event: events.Resize) -> None:
        self.screen_state.resize(event.size.width, event.size.height)
        logger.debug("Terminal resized to %sx%s", event.size.width, event.size.height)
        self.refresh_layout()

    def action_toggle_focus(self) -> None:
        """Move focus between the search field and the compose box."""
        blurred, focused = self.screen_state.toggle_focus()
        logger.debug("Focus %s -> %s", blurred.value, focused.value)
        self._widget_for(blurred).blur_input()
        self._widget_for(focused).focus_input()
        self.refresh_layout()

    def on_descendant_focus(self, event: events.DescendantFocus) -> None:
        # Focus can also move by mouse click; keep the recorded focus in sync.
        if not self._layout_ready:
            return
        focused = self.focused
        if focused is self.search_field.input:
            target = FocusTarget.SEARCH
        elif focused is self.compose_box.text_area:
            target = FocusTarget.COMPOSE
        else:
            return
        if target is not self.screen_state.focused:
            self.screen_state.focused = target
            self.refresh_layout()

    @on(TextArea.Changed, "#compose-input")
    def _on_compose_changed(self, event: TextArea.Changed) -> None:
        self.refresh_layout()

    # =========================================================================
    # Layout
    # =========================================================================

    def adapt_compose_height(self) -> int:
        """Clamp the compose box to 1-2 visible rows based on its line count."""
        compose = self.compose_box
        rows = clamp_compose_rows(compose.line_count())
        compose.set_visible_height(rows)
        return compose.rendered_height()

    def refresh_layout(self) -> Optional[ScreenLayout]:
        """Recompute the layout from current state and apply it."""
        if not self._layout_ready:
            return None
        rows = self.adapt_compose_height()
        layout = compute_layout(self.screen_state, rows, self.chat_styles)
        loading = self.query_one("#loading", Static)
        chat_layout = self.query_one("#chat-layout", Vertical)
        if layout is None:
            loading.display = True
            chat_layout.display = False
            return None
        loading.display = False
        chat_layout.display = True
        self._apply_layout(layout)
        return layout

    def _apply_layout(self, layout: ScreenLayout) -> None:
        styles = self.chat_styles
        palette = styles.palette
        colors = layout.colors

        header = self.query_one("#header", HeaderBar)
        header.styles.width = layout.header_box_width
        header.styles.border = (styles.header_border, palette.neutral)
        header.styles.padding = styles.header_padding
        header.query_one("#header-left", Static).update(header_left_text(palette))
        header.query_one("#header-right", Static).update(header_right_text(palette))

        search = header.search_field
        search.styles.padding = styles.search_padding
        search.set_width(layout.search_width, layout.search_input_width)
        search.set_color(colors.search)

        status = self.query_one("#status-line", Static)
        status.styles.width = layout.status_width
        status.styles.padding = styles.status_padding
        status.styles.color = palette.text
        status.styles.background = palette.accent

        buffer = self.query_one("#message-buffer", Static)
        buffer.styles.width = layout.header_box_width
        buffer.styles.height = layout.main_height
        buffer.styles.border = (styles.content_border, palette.neutral)
        buffer.styles.padding = styles.content_padding

        compose = self.compose_box
        compose.styles.padding = styles.compose_padding
        compose.set_width(layout.compose_box_width, layout.compose_input_width)
        compose.set_decorations(
            compose_prompt_text(colors),
            compose_icons_text(palette),
            styles.compose_border,
            colors.compose_border,
        )
