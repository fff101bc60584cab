"""
Exceptions raised by host-side code.

The engine itself never raises: illegal actions come back as
rejected ActionResults. These are for sessions, the service and the CLI.
"""

from __future__ import annotations


class ChopsticksError(Exception):
    """Base exception for all Chopsticks errors."""


class SessionNotFoundError(ChopsticksError):
    """Raised when a session id does not refer to a live session."""

    def __init__(self, session_id: str) -> None:
        self.session_id = session_id
        super().__init__(f"Session not found: {session_id}")


class InvalidCommandError(ChopsticksError):
    """Raised when a CLI command cannot be parsed."""


__all__ = [
    "ChopsticksError",
    "InvalidCommandError",
    "SessionNotFoundError",
]
