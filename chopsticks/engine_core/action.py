"""
Action System - Actions, payloads, and results.

The five actions form a closed set. Each has a factory on Action
so callers never build payloads by hand.

All state changes flow through actions.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from enum import Enum
from typing import Any


class ActionType(Enum):
    """Types of actions in the system."""
    # Player actions
    SELECT_HAND = "select_hand"
    TAP = "tap"
    SPLIT = "split"

    # System actions
    CONFIGURE = "configure"
    RESET = "reset"


class RejectionCode(str, Enum):
    """Why an action left the state unchanged."""
    GAME_OVER = "GAME_OVER"
    NO_SELECTION = "NO_SELECTION"
    SELF_TAP = "SELF_TAP"
    INVALID_PLAYER = "INVALID_PLAYER"
    INVALID_HAND = "INVALID_HAND"
    DEAD_HAND = "DEAD_HAND"
    BAD_DISTRIBUTION = "BAD_DISTRIBUTION"
    UNCHANGED_SPLIT = "UNCHANGED_SPLIT"
    INVALID_CONFIG = "INVALID_CONFIG"
    UNKNOWN_ACTION = "UNKNOWN_ACTION"
    HANDLER_ERROR = "HANDLER_ERROR"


@dataclass(frozen=True)
class ActionPayload:
    """
    Payload for an action - contains the action parameters.

    Different action types use different fields; validation
    happens in the reducer.
    """
    hand_index: Any = None
    target_player: Any = None
    target_hand_index: Any = None
    distribution: Any = None  # tuple when well-formed
    player1_hands: Any = None
    player2_hands: Any = None


@dataclass(frozen=True)
class Action:
    """A complete action to be applied to the game state."""
    action_type: ActionType
    payload: ActionPayload = field(default_factory=ActionPayload)

    @classmethod
    def select_hand(cls, hand_index: int) -> Action:
        """Factory for selecting the attacking hand."""
        return cls(
            action_type=ActionType.SELECT_HAND,
            payload=ActionPayload(hand_index=hand_index),
        )

    @classmethod
    def tap(cls, target_player: int, target_hand_index: int) -> Action:
        """Factory for attacking an opponent hand with the selected hand."""
        return cls(
            action_type=ActionType.TAP,
            payload=ActionPayload(
                target_player=target_player,
                target_hand_index=target_hand_index,
            ),
        )

    @classmethod
    def split(cls, distribution: list[int] | tuple[int, ...]) -> Action:
        """
        Factory for redistributing the current player's fingers.

        Non-sequences are passed through untouched so the reducer
        can reject them.
        """
        return cls(
            action_type=ActionType.SPLIT,
            payload=ActionPayload(
                distribution=(
                    tuple(distribution)
                    if isinstance(distribution, (list, tuple))
                    else distribution
                ),
            ),
        )

    @classmethod
    def configure(cls, player1_hands: int, player2_hands: int) -> Action:
        """Factory for starting a game with custom hand counts."""
        return cls(
            action_type=ActionType.CONFIGURE,
            payload=ActionPayload(
                player1_hands=player1_hands,
                player2_hands=player2_hands,
            ),
        )

    @classmethod
    def reset(cls) -> Action:
        """Factory for returning to the default game."""
        return cls(action_type=ActionType.RESET)

    def describe(self) -> str:
        """Short human-readable form, used in logs and the CLI."""
        p = self.payload
        if self.action_type == ActionType.SELECT_HAND:
            return f"select hand {p.hand_index}"
        if self.action_type == ActionType.TAP:
            return f"tap player {p.target_player} hand {p.target_hand_index}"
        if self.action_type == ActionType.SPLIT:
            if isinstance(p.distribution, tuple):
                return f"split into {list(p.distribution)}"
            return f"split into {p.distribution!r}"
        if self.action_type == ActionType.CONFIGURE:
            return f"configure {p.player1_hands} vs {p.player2_hands} hands"
        return self.action_type.value


@dataclass
class ActionResult:
    """
    Result of applying an action.

    new_state is always set: on rejection it is the input state,
    unchanged, so hosts can keep using it without a None check.
    """
    success: bool
    new_state: Any = None  # GameState
    error: str | None = None
    error_code: RejectionCode | None = None

    # For UI/presentation
    state_changes: list[str] = field(default_factory=list)

    @classmethod
    def rejected(
        cls,
        state: Any,
        error: str,
        error_code: RejectionCode,
    ) -> ActionResult:
        """Create a no-op result carrying the unchanged state."""
        return cls(success=False, new_state=state, error=error, error_code=error_code)

    @classmethod
    def success_with_state(
        cls,
        state: Any,
        changes: list[str] | None = None,
    ) -> ActionResult:
        """Create a success result with new state."""
        return cls(
            success=True,
            new_state=state,
            state_changes=changes or [],
        )
