"""
Session Module - Holds the current game for a host.

A session represents one table:
- Created when the host starts a game
- Holds the current game state and the accepted-action log
- Applies one action at a time, in submission order

Sessions are EPHEMERAL: no persistence, nothing survives end_session().
"""

from .manager import SessionManager, Session, SessionState

__all__ = [
    "SessionManager",
    "Session",
    "SessionState",
]
