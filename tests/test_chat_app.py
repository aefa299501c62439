"""Pilot-based tests for ChatApp: focus switching, resize and compose height."""

from __future__ import annotations

from unittest.mock import patch

import pytest
from textual.color import Color
from textual.containers import Vertical
from textual.drivers.headless_driver import HeadlessDriver
from textual.widgets import Input, Static, TextArea

from chatterm.config.constants import LOADING_TEXT, STATUS_LABEL
from chatterm.config.ui_config import DEFAULT_PALETTE
from chatterm.exceptions import ConfigurationError
from chatterm.ui.chat_app import ChatApp
from chatterm.ui.state import FocusTarget
from chatterm.ui.themes import NORD_PALETTE

ACCENT = Color.parse(DEFAULT_PALETTE.accent)
NEUTRAL = Color.parse(DEFAULT_PALETTE.neutral)


def _border_color(widget) -> Color:
    return widget.styles.border_top[1]


def _style_snapshot(app: ChatApp) -> tuple:
    widgets = [
        app.query_one("#header"),
        app.query_one("#status-line"),
        app.query_one("#message-buffer"),
        app.compose_box,
        app.search_field,
    ]
    return tuple(
        (
            str(w.styles.width),
            str(w.styles.height),
            w.styles.border_top,
            w.styles.color,
        )
        for w in widgets
    )


# ---------------------------------------------------------------------------
# Tests: Construction
# ---------------------------------------------------------------------------


class TestChatAppInit:
    def test_starts_without_size(self, chat_app):
        assert not chat_app.screen_state.ready
        assert chat_app.screen_state.focused is FocusTarget.COMPOSE

    def test_refresh_before_mount_is_noop(self, chat_app):
        assert chat_app.refresh_layout() is None

    def test_theme_selects_palette(self):
        app = ChatApp(theme_name="chatterm-nord")
        assert app.chat_styles.palette == NORD_PALETTE
        assert app.theme_name == "chatterm-nord"

    def test_unknown_theme_raises(self):
        with pytest.raises(ConfigurationError, match="Unknown theme"):
            ChatApp(theme_name="no-such-theme")


# ---------------------------------------------------------------------------
# Tests: Layout
# ---------------------------------------------------------------------------


class TestChatLayout:
    @pytest.mark.asyncio
    async def test_mounts_all_regions(self, chat_app):
        async with chat_app.run_test(size=(80, 24)) as pilot:
            await pilot.pause()
            assert chat_app.query_one("#header") is not None
            assert chat_app.query_one("#search-input", Input) is not None
            assert chat_app.query_one("#status-line", Static) is not None
            assert chat_app.query_one("#message-buffer", Static) is not None
            assert chat_app.query_one("#compose-input", TextArea) is not None

    @pytest.mark.asyncio
    async def test_layout_shown_after_resize(self, chat_app):
        async with chat_app.run_test(size=(80, 24)) as pilot:
            await pilot.pause()
            assert chat_app.screen_state.width == 80
            assert chat_app.screen_state.height == 24
            assert not chat_app.query_one("#loading", Static).display
            assert chat_app.query_one("#chat-layout", Vertical).display

    @pytest.mark.asyncio
    async def test_zero_width_shows_placeholder(self, chat_app):
        async with chat_app.run_test(size=(80, 24)) as pilot:
            await pilot.pause()
            chat_app.screen_state.resize(0, 0)
            assert chat_app.refresh_layout() is None
            await pilot.pause()
            assert chat_app.query_one("#loading", Static).display
            assert not chat_app.query_one("#chat-layout", Vertical).display
            screen = chat_app.export_screenshot()
            assert LOADING_TEXT == "Loading..."
            assert LOADING_TEXT in screen
            assert STATUS_LABEL not in screen

    @pytest.mark.asyncio
    async def test_region_sizes_at_80x24(self, chat_app):
        async with chat_app.run_test(size=(80, 24)) as pilot:
            await pilot.pause()
            header = chat_app.query_one("#header")
            status = chat_app.query_one("#status-line")
            buffer = chat_app.query_one("#message-buffer")
            compose = chat_app.compose_box

            assert header.region.width == 74
            assert header.region.height == 3
            assert status.region.width == 76
            assert status.region.height == 1
            assert buffer.region.width == 74
            assert buffer.region.height == 14 + 2
            assert compose.region.width == 74
            assert compose.region.height == 3

    @pytest.mark.asyncio
    async def test_stack_fills_terminal_height(self, chat_app):
        async with chat_app.run_test(size=(80, 24)) as pilot:
            await pilot.pause()
            compose = chat_app.compose_box
            assert compose.region.bottom == 24

    @pytest.mark.asyncio
    async def test_resize_recomputes_widths(self, chat_app):
        async with chat_app.run_test(size=(80, 24)) as pilot:
            await pilot.pause()
            await pilot.resize_terminal(120, 40)
            await pilot.pause()
            assert chat_app.screen_state.width == 120
            assert chat_app.screen_state.height == 40
            assert chat_app.query_one("#header").region.width == 114
            assert chat_app.query_one("#status-line").region.width == 116
            assert chat_app.query_one("#message-buffer").region.height == 30 + 2

    @pytest.mark.asyncio
    async def test_render_is_idempotent(self, chat_app):
        async with chat_app.run_test(size=(80, 24)) as pilot:
            await pilot.pause()
            first = chat_app.refresh_layout()
            before = _style_snapshot(chat_app)
            second = chat_app.refresh_layout()
            await pilot.pause()
            assert first == second
            assert _style_snapshot(chat_app) == before

    @pytest.mark.asyncio
    async def test_repeated_render_draws_same_screen(self, chat_app):
        async with chat_app.run_test(size=(80, 24)) as pilot:
            await pilot.pause()
            before = chat_app.export_screenshot()
            chat_app.refresh_layout()
            await pilot.pause()
            assert chat_app.export_screenshot() == before

    @pytest.mark.asyncio
    async def test_sets_terminal_title(self, chat_app):
        with patch.object(HeadlessDriver, "write") as write:
            async with chat_app.run_test(size=(80, 24)) as pilot:
                await pilot.pause()
        written = [call.args[0] for call in write.call_args_list]
        assert "\x1b]2;chatterm\a" in written


# ---------------------------------------------------------------------------
# Tests: Focus
# ---------------------------------------------------------------------------


class TestFocus:
    @pytest.mark.asyncio
    async def test_initial_focus_and_colors(self, chat_app):
        async with chat_app.run_test(size=(80, 24)) as pilot:
            await pilot.pause()
            assert chat_app.screen_state.focused is FocusTarget.COMPOSE
            assert chat_app.compose_box.is_focused
            assert not chat_app.search_field.is_focused
            assert _border_color(chat_app.compose_box) == ACCENT
            assert chat_app.search_field.styles.color == NEUTRAL
            assert _border_color(chat_app.query_one("#header")) == NEUTRAL

    @pytest.mark.asyncio
    async def test_tab_switches_to_search(self, chat_app):
        async with chat_app.run_test(size=(80, 24)) as pilot:
            await pilot.pause()
            await pilot.press("tab")
            await pilot.pause()
            assert chat_app.screen_state.focused is FocusTarget.SEARCH
            assert chat_app.search_field.is_focused
            assert not chat_app.compose_box.is_focused
            assert _border_color(chat_app.compose_box) == NEUTRAL
            assert chat_app.search_field.styles.color == ACCENT

    @pytest.mark.asyncio
    async def test_tab_twice_restores_compose(self, chat_app):
        async with chat_app.run_test(size=(80, 24)) as pilot:
            await pilot.pause()
            await pilot.press("tab", "tab")
            await pilot.pause()
            assert chat_app.screen_state.focused is FocusTarget.COMPOSE
            assert chat_app.compose_box.is_focused
            assert _border_color(chat_app.compose_box) == ACCENT
            assert chat_app.search_field.styles.color == NEUTRAL

    @pytest.mark.asyncio
    async def test_typing_goes_to_focused_widget(self, chat_app):
        async with chat_app.run_test(size=(80, 24)) as pilot:
            await pilot.pause()
            await pilot.press("h", "i")
            await pilot.press("tab")
            await pilot.pause()
            await pilot.press("x")
            await pilot.pause()
            assert chat_app.compose_box.text_area.text == "hi"
            assert chat_app.search_field.input.value == "x"

    @pytest.mark.asyncio
    async def test_click_syncs_focus_state(self, chat_app):
        async with chat_app.run_test(size=(80, 24)) as pilot:
            await pilot.pause()
            await pilot.click("#search-input")
            await pilot.pause()
            assert chat_app.screen_state.focused is FocusTarget.SEARCH
            assert chat_app.search_field.styles.color == ACCENT


# ---------------------------------------------------------------------------
# Tests: Compose height
# ---------------------------------------------------------------------------


class TestComposeHeight:
    @pytest.mark.asyncio
    async def test_single_line(self, chat_app):
        async with chat_app.run_test(size=(80, 24)) as pilot:
            await pilot.pause()
            assert chat_app.compose_box.line_count() == 1
            assert chat_app.compose_box.rendered_height() == 1

    @pytest.mark.asyncio
    async def test_two_lines_grow_box(self, chat_app):
        async with chat_app.run_test(size=(80, 24)) as pilot:
            await pilot.pause()
            await pilot.press("a", "enter", "b")
            await pilot.pause()
            compose = chat_app.compose_box
            assert compose.line_count() == 2
            assert compose.rendered_height() == 2
            assert compose.region.height == 4
            assert chat_app.query_one("#message-buffer").region.height == 13 + 2

    @pytest.mark.asyncio
    async def test_three_lines_cap_at_two(self, chat_app):
        async with chat_app.run_test(size=(80, 24)) as pilot:
            await pilot.pause()
            await pilot.press("a", "enter", "b", "enter", "c")
            await pilot.pause()
            compose = chat_app.compose_box
            assert compose.line_count() == 3
            assert compose.rendered_height() == 2
            assert compose.region.height == 4
            # Content beyond the visible rows is kept
            assert compose.text_area.text == "a\nb\nc"

    @pytest.mark.asyncio
    async def test_deleting_lines_shrinks_box(self, chat_app):
        async with chat_app.run_test(size=(80, 24)) as pilot:
            await pilot.pause()
            await pilot.press("a", "enter", "b")
            await pilot.pause()
            await pilot.press("backspace", "backspace")
            await pilot.pause()
            compose = chat_app.compose_box
            assert compose.line_count() == 1
            assert compose.rendered_height() == 1
            assert compose.region.height == 3


# ---------------------------------------------------------------------------
# Tests: Quit
# ---------------------------------------------------------------------------


class TestQuit:
    @pytest.mark.asyncio
    async def test_ctrl_c_exits_cleanly(self, chat_app):
        async with chat_app.run_test(size=(80, 24)) as pilot:
            await pilot.pause()
            await pilot.press("ctrl+c")
        assert chat_app.return_code == 0
