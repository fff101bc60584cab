"""
Pydantic Schemas - Request/response models for the in-process action API.

These models are the contract between a presentation layer and the
engine: requests carry raw action input, responses carry a plain
snapshot of the state to render.

Error Codes:
- SESSION_NOT_FOUND: Session does not exist or has ended
"""

from enum import Enum
from typing import Annotated, Literal, Optional

from pydantic import BaseModel, Field, model_validator

from ..engine_core.action import RejectionCode
from ..engine_core.config import MAX_FINGERS, MAX_HANDS, MIN_HANDS, GameConfig, SkinTheme
from ..engine_core.rules import can_split
from ..engine_core.state import GameState, Player


# =============================================================================
# Enums
# =============================================================================

class ErrorCode(str, Enum):
    """Structured error codes."""
    SESSION_NOT_FOUND = "SESSION_NOT_FOUND"


# =============================================================================
# Snapshots
# =============================================================================

FingerCount = Annotated[int, Field(ge=0, le=MAX_FINGERS)]
PlayerId = Literal[1, 2]


class PlayerInfo(BaseModel):
    """Player information for display."""
    player_id: PlayerId
    hands: list[FingerCount] = Field(min_length=MIN_HANDS, max_length=MAX_HANDS)
    number_of_hands: int
    total_fingers: int
    is_current_turn: bool = False
    can_split: bool = False

    @model_validator(mode="after")
    def _check_totals(self) -> "PlayerInfo":
        if self.number_of_hands != len(self.hands):
            raise ValueError("number_of_hands does not match hands")
        if self.total_fingers != sum(self.hands):
            raise ValueError("total_fingers does not match hands")
        return self

    @classmethod
    def from_player(cls, player: Player, is_current_turn: bool = False) -> "PlayerInfo":
        return cls(
            player_id=player.player_id,
            hands=list(player.hands),
            number_of_hands=player.number_of_hands,
            total_fingers=player.total_fingers,
            is_current_turn=is_current_turn,
            can_split=is_current_turn and can_split(player),
        )


class GameStateInfo(BaseModel):
    """Snapshot of a GameState, ready to render or serialize."""
    player1: PlayerInfo
    player2: PlayerInfo
    current_turn: PlayerId
    selected_hand_index: Optional[int] = None
    winner: Optional[PlayerId] = None

    @model_validator(mode="after")
    def _check_consistency(self) -> "GameStateInfo":
        """
        Reject snapshots the engine could never have produced.

        Seats must match ids, a winner must match an eliminated
        opponent, and a selection must point at a live hand of the
        player to move.
        """
        if self.player1.player_id != 1 or self.player2.player_id != 2:
            raise ValueError("player1 and player2 must have ids 1 and 2")
        eliminated = [
            p.player_id for p in (self.player1, self.player2) if not any(p.hands)
        ]
        expected_winner = (3 - eliminated[0]) if eliminated else None
        if self.winner != expected_winner:
            raise ValueError(f"winner {self.winner} does not match the hands")
        if self.selected_hand_index is None:
            return self
        if self.winner is not None:
            raise ValueError("a finished game cannot have a selected hand")
        hands = (self.player1 if self.current_turn == 1 else self.player2).hands
        index = self.selected_hand_index
        if not 0 <= index < len(hands):
            raise ValueError(f"selected hand {index} does not exist")
        if hands[index] == 0:
            raise ValueError(f"selected hand {index} is out")
        return self

    @classmethod
    def from_state(cls, state: GameState) -> "GameStateInfo":
        playing = not state.is_over
        return cls(
            player1=PlayerInfo.from_player(
                state.player1, is_current_turn=playing and state.current_turn == 1
            ),
            player2=PlayerInfo.from_player(
                state.player2, is_current_turn=playing and state.current_turn == 2
            ),
            current_turn=state.current_turn,
            selected_hand_index=state.selected_hand_index,
            winner=state.winner,
        )

    def to_state(self) -> GameState:
        """Rebuild the engine value this snapshot was taken from."""
        return GameState(
            player1=Player(player_id=1, hands=tuple(self.player1.hands)),
            player2=Player(player_id=2, hands=tuple(self.player2.hands)),
            current_turn=self.current_turn,
            selected_hand_index=self.selected_hand_index,
            winner=self.winner,
        )


# =============================================================================
# Request Models
# =============================================================================

class ConfigureRequest(BaseModel):
    """Start a game with custom hand counts (clamped into 1-5)."""
    player1_hands: int = 2
    player2_hands: int = 2
    skin_theme: SkinTheme = SkinTheme.DEFAULT

    def to_config(self) -> GameConfig:
        return GameConfig(
            player1_hands=self.player1_hands,
            player2_hands=self.player2_hands,
            skin_theme=self.skin_theme,
        )


class SelectHandRequest(BaseModel):
    """Choose the attacking hand."""
    hand_index: int


class TapRequest(BaseModel):
    """Attack an opponent hand with the selected hand."""
    target_player: int
    target_hand_index: int


class SplitRequest(BaseModel):
    """Redistribute the current player's fingers."""
    distribution: list[int]


# =============================================================================
# Responses
# =============================================================================

class ActionResponse(BaseModel):
    """
    Result of one action.

    accepted=False means the state is exactly what it was before;
    rejection_code says why.
    """
    session_id: str
    accepted: bool
    state: GameStateInfo
    skin_theme: SkinTheme = SkinTheme.DEFAULT
    rejection_code: Optional[RejectionCode] = None
    message: Optional[str] = None
    changes: list[str] = Field(default_factory=list)


class ErrorResponse(BaseModel):
    """Error returned instead of an ActionResponse."""
    error_code: ErrorCode
    message: str
    session_id: Optional[str] = None
