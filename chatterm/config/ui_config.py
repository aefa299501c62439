"""
chatterm UI configuration.

Colour tokens, border kinds and padding tuples for every region of the
screen. These are plain immutable values handed to the layout engine; any
focus-dependent colour is derived from them on each layout pass instead of
being written back into a shared style object.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Tuple

Spacing = Tuple[int, int, int, int]  # top, right, bottom, left


@dataclass(frozen=True)
class Palette:
    """Colour tokens for the chat screen."""

    accent: str = "#ff87d7"  # xterm 212, focused borders and status bar
    neutral: str = "#585858"  # xterm 240, idle borders and prompts
    topic: str = "#767676"  # xterm 243
    text: str = "#ffffff"


@dataclass(frozen=True)
class ChatStyles:
    """Border and padding configuration for each screen region.

    Border kinds are Textual border types ("solid", "round", ...).
    """

    palette: Palette = field(default_factory=Palette)
    app_padding: Spacing = (0, 2, 0, 2)
    header_border: str = "solid"
    header_padding: Spacing = (0, 1, 0, 1)
    search_padding: Spacing = (0, 1, 0, 1)
    status_padding: Spacing = (0, 1, 0, 1)
    content_border: str = "solid"
    content_padding: Spacing = (0, 1, 0, 1)
    compose_border: str = "round"
    compose_padding: Spacing = (0, 1, 0, 1)

    def with_palette(self, palette: Palette) -> ChatStyles:
        """Return a copy using a different palette."""
        return replace(self, palette=palette)


DEFAULT_PALETTE = Palette()
DEFAULT_STYLES = ChatStyles(palette=DEFAULT_PALETTE)
