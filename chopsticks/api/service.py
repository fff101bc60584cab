"""
API Service - The action table over sessions.

The service:
1. Translates request models into engine actions
2. Routes them to the right session
3. Formats snapshots for the presentation layer

This layer is framework-agnostic and runs in-process; there is no
HTTP server.
"""

from __future__ import annotations
from dataclasses import dataclass, field

from .schemas import (
    ActionResponse,
    ConfigureRequest,
    ErrorCode,
    ErrorResponse,
    GameStateInfo,
    SelectHandRequest,
    SplitRequest,
    TapRequest,
)
from ..engine_core.action import ActionResult
from ..exceptions import SessionNotFoundError
from ..session import Session, SessionManager


@dataclass
class GameService:
    """
    Main entry point for a presentation layer.

    Usage:
        service = GameService()
        response = service.create_game(ConfigureRequest(player1_hands=3))
        sid = response.session_id
        service.select_hand(sid, SelectHandRequest(hand_index=0))
        service.tap(sid, TapRequest(target_player=2, target_hand_index=1))
    """
    session_manager: SessionManager = field(default_factory=SessionManager)

    def create_game(self, request: ConfigureRequest | None = None) -> ActionResponse:
        """Create a session and return its starting state."""
        config = (request or ConfigureRequest()).to_config()
        session = self.session_manager.create_session(config)
        return ActionResponse(
            session_id=session.session_id,
            accepted=True,
            state=GameStateInfo.from_state(session.game_state),
            skin_theme=session.config.skin_theme,
            changes=["Game created"],
        )

    def get_game(self, session_id: str) -> ActionResponse | ErrorResponse:
        """Current state of a session, without applying anything."""
        try:
            session = self.session_manager.get_session(session_id)
        except SessionNotFoundError as e:
            return self._not_found(e)
        return ActionResponse(
            session_id=session_id,
            accepted=True,
            state=GameStateInfo.from_state(session.game_state),
            skin_theme=session.config.skin_theme,
        )

    def configure(
        self, session_id: str, request: ConfigureRequest
    ) -> ActionResponse | ErrorResponse:
        return self._run(session_id, lambda s: s.configure(request.to_config()))

    def select_hand(
        self, session_id: str, request: SelectHandRequest
    ) -> ActionResponse | ErrorResponse:
        return self._run(session_id, lambda s: s.select_hand(request.hand_index))

    def tap(self, session_id: str, request: TapRequest) -> ActionResponse | ErrorResponse:
        return self._run(
            session_id,
            lambda s: s.tap(request.target_player, request.target_hand_index),
        )

    def split(self, session_id: str, request: SplitRequest) -> ActionResponse | ErrorResponse:
        return self._run(session_id, lambda s: s.split(request.distribution))

    def reset(self, session_id: str) -> ActionResponse | ErrorResponse:
        return self._run(session_id, lambda s: s.reset())

    def restart(self, session_id: str) -> ActionResponse | ErrorResponse:
        return self._run(session_id, lambda s: s.restart())

    def end_game(self, session_id: str) -> ErrorResponse | None:
        """End a session. Returns an ErrorResponse if it did not exist."""
        try:
            self.session_manager.end_session(session_id)
        except SessionNotFoundError as e:
            return self._not_found(e)
        return None

    def _run(self, session_id: str, step) -> ActionResponse | ErrorResponse:
        try:
            session = self.session_manager.get_session(session_id)
        except SessionNotFoundError as e:
            return self._not_found(e)
        result = step(session)
        return self._to_response(session, result)

    def _to_response(self, session: Session, result: ActionResult) -> ActionResponse:
        return ActionResponse(
            session_id=session.session_id,
            accepted=result.success,
            state=GameStateInfo.from_state(session.game_state),
            skin_theme=session.config.skin_theme,
            rejection_code=result.error_code,
            message=result.error,
            changes=result.state_changes,
        )

    def _not_found(self, error: SessionNotFoundError) -> ErrorResponse:
        return ErrorResponse(
            error_code=ErrorCode.SESSION_NOT_FOUND,
            message=str(error),
            session_id=error.session_id,
        )
