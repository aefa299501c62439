"""Widgets that make up the chat screen."""

from .compose_box import ComposeBox
from .header_bar import HeaderBar
from .search_field import SearchField

__all__ = ["ComposeBox", "HeaderBar", "SearchField"]
