"""
Layout engine for the chatterm screen.

Example usage:
    from chatterm.ui.layout import compute_layout
    from chatterm.ui.state import ScreenState

    layout = compute_layout(ScreenState(width=80, height=24), compose_rows=1)
    layout.search_width  # 29
"""

from .engine import (
    FocusColors,
    ScreenLayout,
    compose_icons_text,
    compose_prompt_text,
    compute_layout,
    focus_colors,
    header_left_text,
    header_right_text,
)

__all__ = [
    "FocusColors",
    "ScreenLayout",
    "compose_icons_text",
    "compose_prompt_text",
    "compute_layout",
    "focus_colors",
    "header_left_text",
    "header_right_text",
]
