"""
chatterm TUI Theme Definitions.

Each theme pairs a Textual Theme (screen background, foreground, scrollbars)
with the Palette the layout engine uses for borders, prompts and the status
bar.
"""

from typing import Any

from textual.theme import Theme

from ..config.ui_config import DEFAULT_PALETTE, Palette
from ..exceptions import ConfigurationError

DEFAULT_THEME = "chatterm-dark"

# =============================================================================
# chatterm Dark Theme (Default)
# Pink accent on a near-black terminal, the look of the original mock-up
# =============================================================================

CHATTERM_DARK = Theme(
    name="chatterm-dark",
    primary=DEFAULT_PALETTE.accent,
    secondary=DEFAULT_PALETTE.neutral,
    accent=DEFAULT_PALETTE.accent,
    foreground="#e0e0e0",
    background="#121212",
    surface="#121212",
    panel="#1e1e1e",
    success="#4EBF71",
    warning="#ffa62b",
    error="#ba3c5b",
    dark=True,
)

# =============================================================================
# chatterm Nord Theme
# Muted, low-contrast variant based on the Nord palette
# =============================================================================

NORD_PALETTE = Palette(
    accent="#88C0D0",  # Frost blue
    neutral="#4C566A",  # Polar night (lightest)
    topic="#D8DEE9",  # Snow storm
    text="#ECEFF4",
)

CHATTERM_NORD = Theme(
    name="chatterm-nord",
    primary=NORD_PALETTE.accent,
    secondary=NORD_PALETTE.neutral,
    accent=NORD_PALETTE.accent,
    foreground="#ECEFF4",
    background="#2E3440",
    surface="#2E3440",
    panel="#3B4252",
    success="#A3BE8C",
    warning="#EBCB8B",
    error="#BF616A",
    dark=True,
)

# =============================================================================
# Theme Registry
# =============================================================================

CHATTERM_THEMES: dict[str, Theme] = {
    "chatterm-dark": CHATTERM_DARK,
    "chatterm-nord": CHATTERM_NORD,
}

THEME_PALETTES: dict[str, Palette] = {
    "chatterm-dark": DEFAULT_PALETTE,
    "chatterm-nord": NORD_PALETTE,
}


def register_all_themes(app: Any) -> None:
    """
    Register all chatterm themes with the app.

    Args:
        app: The Textual App instance
    """
    for theme in CHATTERM_THEMES.values():
        app.register_theme(theme)


def get_theme_names() -> list[str]:
    """Get list of all available chatterm theme names."""
    return list(CHATTERM_THEMES.keys())


def get_palette(theme_name: str) -> Palette:
    """
    Get the layout palette paired with a theme.

    Raises:
        ConfigurationError: if the theme is not registered
    """
    try:
        return THEME_PALETTES[theme_name]
    except KeyError:
        raise ConfigurationError(
            f"Unknown theme '{theme_name}'. Available: {', '.join(get_theme_names())}",
            setting="theme",
        ) from None
