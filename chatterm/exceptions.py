"""Custom exception hierarchy for chatterm.

The layout engine is defined for every terminal size, so the only failures
come from the outside world: the terminal driver refusing to start, or a bad
choice passed on the command line.

Exception Hierarchy:
    ChattermError (base)
    ├── TerminalDriverError - terminal could not be initialized or crashed
    └── ConfigurationError - unknown theme or invalid style configuration

Usage:
    from chatterm.exceptions import TerminalDriverError

    if not sys.stdin.isatty():
        raise TerminalDriverError("stdin is not a terminal")
"""

from typing import Any, Optional


class ChattermError(Exception):
    """Base exception for all chatterm errors.

    Attributes:
        message: Human-readable error description
        context: Additional context about the error (e.g., theme names)
    """

    def __init__(self, message: str, **context: Any) -> None:
        self.message = message
        self.context = context
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        """Format the error message with context."""
        if self.context:
            context_str = ", ".join(f"{k}={v!r}" for k, v in self.context.items())
            return f"{self.message} ({context_str})"
        return self.message


class TerminalDriverError(ChattermError):
    """The terminal driver failed to initialize or stopped with an error."""


class ConfigurationError(ChattermError):
    """Invalid configuration, e.g. an unknown theme name."""

    def __init__(
        self,
        message: str = "Configuration error",
        *,
        setting: Optional[str] = None,
        **context: Any,
    ) -> None:
        if setting:
            context["setting"] = setting
        super().__init__(message, **context)
