"""Shared pytest fixtures for chatterm tests."""

import pytest

from chatterm.ui.chat_app import ChatApp
from chatterm.ui.state import ScreenState


@pytest.fixture
def chat_app():
    """A fresh ChatApp with the default theme."""
    return ChatApp()


@pytest.fixture
def sized_state():
    """Screen state after a standard 80x24 resize."""
    return ScreenState(width=80, height=24)
