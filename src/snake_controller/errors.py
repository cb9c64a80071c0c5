"""Exceptions raised by the snake controller."""

from __future__ import annotations


class SnakeError(Exception):
    """Base class for all snake controller errors."""


class ConfigurationError(SnakeError, ValueError):
    """Raised when the textual game configuration cannot be parsed."""

    def __init__(self, detail: str | None = None) -> None:
        message = "Bad configuration of snake controller."
        if detail:
            message = f"{message} {detail}"
        super().__init__(message)
        self.detail = detail


class UnexpectedEventError(SnakeError, RuntimeError):
    """Raised when the controller receives an event it has no handler for."""

    def __init__(self, event: object) -> None:
        super().__init__(
            f"Unexpected event received! ({type(event).__name__})",
        )
        self.event = event
