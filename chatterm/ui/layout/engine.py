"""
Layout engine for the chat screen.

``compute_layout`` is a pure function of the screen state, the compose box's
visible rows and the style configuration. It returns a ``ScreenLayout``
holding every width, height and focus-derived colour the controller needs to
size the widget tree. Nothing here touches a widget.

Geometry (terminal cells, ``W``/``H`` = terminal size):

    header         width W-8, 1 content row + border + 1 row top margin
    search         max(W-8 - left - right - 2, 10), input gets 2 fewer
    status line    width W-4, 1 row
    message pane   width W-8, height H - header - status - compose - 2
    compose box    width W-8, 1-2 content rows + border

All widths and heights are floored so no negative size reaches a widget.
"""

import logging
from dataclasses import dataclass
from typing import Optional

from rich.text import Text

from ...config.constants import (
    BELL_ICON,
    BORDER_COLUMNS,
    BORDER_ROWS,
    CHANNEL_NAME,
    COMPOSE_FRAME,
    COMPOSE_ICONS,
    COMPOSE_PROMPT,
    DIVIDER_GLYPH,
    HEADER_CONTENT_ROWS,
    HEADER_MARGIN_TOP,
    ICON_BOX_MARGIN,
    ICON_BOX_PADDING,
    INFO_ICON,
    LOGO_GLYPH,
    OUTER_PADDING,
    SEARCH_BOX_PADDING,
    SEARCH_INPUT_INSET,
    SEARCH_MIN_WIDTH,
    SEGMENT_MARGIN,
    STATUS_INSET,
    STATUS_ROWS,
    TOPIC_TEXT,
    VERTICAL_CHROME,
)
from ...config.ui_config import DEFAULT_STYLES, ChatStyles, Palette
from ..state import FocusTarget, ScreenState

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class FocusColors:
    """Colours that depend on which widget has focus."""

    search: str
    compose_border: str
    compose_prompt: str


def focus_colors(focused: FocusTarget, palette: Palette) -> FocusColors:
    """Derive focus-dependent colours fresh from the focus state."""
    if focused is FocusTarget.COMPOSE:
        return FocusColors(
            search=palette.neutral,
            compose_border=palette.accent,
            compose_prompt=palette.accent,
        )
    return FocusColors(
        search=palette.accent,
        compose_border=palette.neutral,
        compose_prompt=palette.neutral,
    )


# =============================================================================
# Fixed header / compose content
# =============================================================================


def header_left_text(palette: Palette) -> Text:
    """Logo, channel, divider, topic, divider; each followed by a margin."""
    margin = " " * SEGMENT_MARGIN
    segments = [
        (LOGO_GLYPH, palette.accent),
        (CHANNEL_NAME, f"bold {palette.text}"),
        (DIVIDER_GLYPH, palette.neutral),
        (TOPIC_TEXT, palette.topic),
        (DIVIDER_GLYPH, palette.neutral),
    ]
    text = Text(no_wrap=True, end="")
    for content, style in segments:
        text.append(content, style=style)
        text.append(margin)
    return text


def header_right_text(palette: Palette) -> Text:
    """The bell and info icon boxes."""
    padding = " " * ICON_BOX_PADDING
    text = Text(no_wrap=True, end="")
    for icon in (BELL_ICON, INFO_ICON):
        text.append(" " * ICON_BOX_MARGIN)
        text.append(f"{padding}{icon}{padding}", style=palette.text)
    return text


def compose_prompt_text(colors: FocusColors) -> Text:
    return Text(COMPOSE_PROMPT, style=colors.compose_prompt, no_wrap=True, end="")


def compose_icons_text(palette: Palette) -> Text:
    return Text(COMPOSE_ICONS, style=palette.neutral, no_wrap=True, end="")


# =============================================================================
# Layout
# =============================================================================


@dataclass(frozen=True)
class ScreenLayout:
    """Resolved geometry for one render tick.

    Widths follow the content-plus-padding convention: a bordered region
    occupies ``width + 2`` columns on screen (see the ``*_box_width``
    properties). Heights are content rows unless named ``*_height``.
    """

    terminal_width: int
    terminal_height: int
    left_width: int
    right_width: int
    header_width: int
    search_width: int
    search_input_width: int
    status_width: int
    compose_prompt_width: int
    compose_icons_width: int
    compose_input_width: int
    compose_rows: int
    main_rows: int
    colors: FocusColors

    @property
    def header_height(self) -> int:
        return _header_height()

    @property
    def status_height(self) -> int:
        return STATUS_ROWS

    @property
    def compose_height(self) -> int:
        return self.compose_rows + BORDER_ROWS

    @property
    def main_height(self) -> int:
        return self.main_rows + BORDER_ROWS

    @property
    def header_box_width(self) -> int:
        return self.header_width + BORDER_COLUMNS

    @property
    def compose_box_width(self) -> int:
        return self.header_width + BORDER_COLUMNS


def _floor(value: int, minimum: int = 0) -> int:
    return value if value > minimum else minimum


def _header_height() -> int:
    """Rows taken by the header: top margin, border and one content row."""
    return HEADER_MARGIN_TOP + BORDER_ROWS + HEADER_CONTENT_ROWS


def compute_layout(
    state: ScreenState,
    compose_rows: int,
    styles: ChatStyles = DEFAULT_STYLES,
) -> Optional[ScreenLayout]:
    """Lay out the screen for the current state.

    Args:
        state: Focus and terminal dimensions
        compose_rows: Visible rows of the compose box (already clamped)
        styles: Colour and border configuration

    Returns:
        The resolved layout, or None before the first resize event
    """
    if not state.ready:
        return None

    palette = styles.palette
    colors = focus_colors(state.focused, palette)

    # Header: fixed segments on both sides, search field takes the rest
    left_width = header_left_text(palette).cell_len
    right_width = header_right_text(palette).cell_len
    available_width = state.width - OUTER_PADDING
    search_width = _floor(
        available_width - left_width - right_width - SEARCH_BOX_PADDING,
        SEARCH_MIN_WIDTH,
    )
    search_input_width = search_width - SEARCH_INPUT_INSET
    header_width = _floor(available_width)

    status_width = _floor(state.width - STATUS_INSET)

    prompt_width = compose_prompt_text(colors).cell_len
    icons_width = compose_icons_text(palette).cell_len
    compose_input_width = _floor(header_width - prompt_width - icons_width - COMPOSE_FRAME)

    # Message pane gets whatever height the fixed regions leave over
    main_rows = _floor(
        state.height
        - _header_height()
        - STATUS_ROWS
        - (compose_rows + BORDER_ROWS)
        - VERTICAL_CHROME
    )
    logger.debug(
        "Layout %sx%s: search=%s compose_input=%s main_rows=%s",
        state.width,
        state.height,
        search_width,
        compose_input_width,
        main_rows,
    )
    return ScreenLayout(
        terminal_width=state.width,
        terminal_height=state.height,
        left_width=left_width,
        right_width=right_width,
        header_width=header_width,
        search_width=search_width,
        search_input_width=search_input_width,
        status_width=status_width,
        compose_prompt_width=prompt_width,
        compose_icons_width=icons_width,
        compose_input_width=compose_input_width,
        compose_rows=compose_rows,
        main_rows=main_rows,
        colors=colors,
    )
