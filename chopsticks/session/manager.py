"""
Session Manager - Creates and manages game sessions.

A session is the host-side holder of "the state the caller currently
holds". It serializes actions: each one goes through the reducer and
the current state is swapped only when the action is accepted.

Sessions are in-memory only. Nothing survives end_session().
"""

from __future__ import annotations
from dataclasses import dataclass, field
from enum import Enum
import time
import uuid

from ..engine_core.action import Action, ActionResult, ActionType
from ..engine_core.config import GameConfig
from ..engine_core.reducer import Reducer
from ..engine_core.state import GameState
from ..exceptions import SessionNotFoundError
from ..logging_config import get_logger


logger = get_logger(__name__)


class SessionState(Enum):
    """State of a game session."""
    ACTIVE = "active"  # Game in progress
    GAME_OVER = "game_over"  # Someone won, waiting for reset/configure
    ENDED = "ended"  # Removed from the manager


@dataclass
class Session:
    """
    One table: the current GameState plus what produced it.

    history holds every accepted action since the last
    reset/configure, in order.
    """
    session_id: str
    created_at: float
    config: GameConfig = field(default_factory=GameConfig)
    game_state: GameState | None = None
    history: list[Action] = field(default_factory=list)
    ended: bool = False

    reducer: Reducer = field(default_factory=Reducer)

    def __post_init__(self):
        if self.game_state is None:
            self.game_state = self.config.create_initial_state()

    @property
    def state(self) -> SessionState:
        if self.ended:
            return SessionState.ENDED
        if self.game_state.is_over:
            return SessionState.GAME_OVER
        return SessionState.ACTIVE

    def is_active(self) -> bool:
        """Check if session is still playable without a reset."""
        return self.state == SessionState.ACTIVE

    def dispatch(self, action: Action) -> ActionResult:
        """Apply one action and keep the resulting state if it was accepted."""
        result = self.reducer.apply(self.game_state, action)
        if not result.success:
            return result

        self.game_state = result.new_state
        if action.action_type in (ActionType.RESET, ActionType.CONFIGURE):
            self.history.clear()
        else:
            self.history.append(action)
        return result

    def select_hand(self, hand_index: int) -> ActionResult:
        return self.dispatch(Action.select_hand(hand_index))

    def tap(self, target_player: int, target_hand_index: int) -> ActionResult:
        return self.dispatch(Action.tap(target_player, target_hand_index))

    def split(self, distribution: list[int]) -> ActionResult:
        return self.dispatch(Action.split(distribution))

    def reset(self) -> ActionResult:
        """Back to the default 2-and-2 game; the stored config is dropped too."""
        self.config = GameConfig()
        return self.dispatch(Action.reset())

    def configure(self, config: GameConfig) -> ActionResult:
        """Start a new game with the given config and remember it."""
        result = self.dispatch(
            Action.configure(config.player1_hands, config.player2_hands)
        )
        if result.success:
            self.config = config
            logger.info(
                "Session %s configured: %d vs %d hands (%s skin)",
                self.session_id, config.player1_hands, config.player2_hands,
                config.skin_theme.value,
            )
        return result

    def restart(self) -> ActionResult:
        """Start over with the last config (reset would forget it)."""
        logger.info("Session %s restarting", self.session_id)
        return self.configure(self.config)


class SessionManager:
    """
    Manages game sessions.

    Responsibilities:
    - Create sessions from configs
    - Track live sessions
    - Drop ended sessions

    No persistence - sessions are in-memory only.
    """

    def __init__(self):
        self._sessions: dict[str, Session] = {}

    def create_session(self, config: GameConfig | None = None) -> Session:
        """Create a new session, starting the configured (or default) game."""
        config = config or GameConfig()
        session = Session(
            session_id=str(uuid.uuid4()),
            created_at=time.time(),
            config=config,
        )
        self._sessions[session.session_id] = session
        logger.info(
            "Created session %s (%d vs %d hands)",
            session.session_id, config.player1_hands, config.player2_hands,
        )
        return session

    def get_session(self, session_id: str) -> Session:
        """Get a session by ID, raising SessionNotFoundError if unknown."""
        session = self._sessions.get(session_id)
        if session is None:
            raise SessionNotFoundError(session_id)
        return session

    def end_session(self, session_id: str) -> None:
        """End a session and forget it."""
        session = self._sessions.pop(session_id, None)
        if session is None:
            raise SessionNotFoundError(session_id)
        session.ended = True
        session.history.clear()
        logger.info("Ended session %s", session_id)

    def list_sessions(self) -> list[str]:
        """List IDs of all live sessions."""
        return list(self._sessions)

    def list_active_sessions(self) -> list[str]:
        """List IDs of sessions whose game is still undecided."""
        return [
            sid for sid, session in self._sessions.items()
            if session.is_active()
        ]
