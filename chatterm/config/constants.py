"""
Centralized constants for chatterm.

Every glyph, label and geometry value used by the layout engine lives here so
the width and height arithmetic can be read in one place.
"""

# =============================================================================
# HEADER CONTENT
# =============================================================================

LOGO_GLYPH = "\uf489"  # nf-oct-terminal
CHANNEL_NAME = "#general"
DIVIDER_GLYPH = "|"
TOPIC_TEXT = "TOPIC: Discussion"
BELL_ICON = "\uf0f3"  # nf-fa-bell
INFO_ICON = "\uf05a"  # nf-fa-info_circle

# =============================================================================
# SEARCH FIELD
# =============================================================================

SEARCH_PROMPT = "\uf002 "  # nf-fa-search
SEARCH_PLACEHOLDER = "Search"
SEARCH_CHAR_LIMIT = 156

# =============================================================================
# STATUS LINE & MESSAGE BUFFER
# =============================================================================

STATUS_LABEL = "MESSAGE-BUFFER"
LOADING_TEXT = "Loading..."

# =============================================================================
# COMPOSE BOX
# =============================================================================

COMPOSE_PROMPT = "> "
COMPOSE_ICONS = " \uee49 \U000F0066"  # attachment, send
COMPOSE_PLACEHOLDER = "Type a Message or command (use / for actions)"
COMPOSE_MIN_ROWS = 1
COMPOSE_MAX_ROWS = 2

# =============================================================================
# GEOMETRY (terminal cells)
# =============================================================================

SEGMENT_MARGIN = 1  # right margin after each header left segment
ICON_BOX_PADDING = 1  # horizontal padding inside each header icon box
ICON_BOX_MARGIN = 1  # left margin before each header icon box

OUTER_PADDING = 8  # app padding + header border/padding, both sides
STATUS_INSET = 4  # status line spans the terminal minus app padding
SEARCH_BOX_PADDING = 2  # search box padding, both sides
SEARCH_MIN_WIDTH = 10
SEARCH_INPUT_INSET = 2  # reserved by the input's own rendering
COMPOSE_FRAME = 4  # compose box border + padding, both sides

BORDER_ROWS = 2  # top + bottom border of a boxed region
BORDER_COLUMNS = 2  # left + right border of a boxed region
HEADER_MARGIN_TOP = 1
HEADER_CONTENT_ROWS = 1
STATUS_ROWS = 1
VERTICAL_CHROME = 2  # fixed vertical margins/padding around the stack

# =============================================================================
# APP
# =============================================================================

APP_TITLE = "chatterm"
