#!/usr/bin/env python3
"""
Main CLI entry point for chatterm
"""

from pathlib import Path
from typing import Optional

import typer

from chatterm import __version__
from chatterm.exceptions import TerminalDriverError
from chatterm.utils.logging import setup_tui_logging
from chatterm.utils.output import console, is_non_interactive

app = typer.Typer(add_completion=False)


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"chatterm version {__version__}")
        raise typer.Exit()


@app.command()
def chat(
    theme: Optional[str] = typer.Option(
        None,
        "--theme",
        "-t",
        help="Theme to use (chatterm-dark, chatterm-nord)",
    ),
    log_file: Optional[Path] = typer.Option(
        None,
        "--log-file",
        help="Write debug logs to this file while the TUI runs",
    ),
    version: bool = typer.Option(
        False,
        "--version",
        callback=_version_callback,
        is_eager=True,
        help="Show chatterm version",
    ),
):
    """Terminal chat mock-up. Tab switches focus, Ctrl+C quits."""
    try:
        setup_tui_logging(log_file)
        if is_non_interactive():
            raise TerminalDriverError("stdin is not a terminal")

        from chatterm.ui.chat_app import ChatApp

        chat_app = ChatApp(theme_name=theme)
        chat_app.run()
    except KeyboardInterrupt:
        return
    except Exception as e:
        console.print(f"Error running program: {e}", style="red")
        raise typer.Exit(1) from e

    if chat_app.return_code:
        raise typer.Exit(1)


def run():
    """Entry point for the CLI"""
    app()


if __name__ == "__main__":
    run()
