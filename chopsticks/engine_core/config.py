"""
Game Configuration - Startup parameters for a game.

A config decides how many hands each player starts with and which
skin the host should draw. The skin never reaches the engine logic.

Out-of-range hand counts are clamped into [MIN_HANDS, MAX_HANDS],
both here and in the reducer's CONFIGURE handler.
"""

from __future__ import annotations
from enum import Enum
from typing import TYPE_CHECKING

from pydantic import BaseModel, Field, field_validator

if TYPE_CHECKING:
    from .state import GameState


MIN_HANDS = 1
MAX_HANDS = 5
DEFAULT_HANDS = 2

MAX_FINGERS = 4
WRAP_BASE = 5  # exactly this many fingers knocks a hand out
STARTING_FINGERS = 1


class SkinTheme(str, Enum):
    """Cosmetic hand styles."""
    DEFAULT = "default"
    CLAW = "claw"
    CARTOON = "cartoon"  # plain numbers


def clamp_hand_count(count: int) -> int:
    """Clamp a requested hand count into [MIN_HANDS, MAX_HANDS]."""
    return max(MIN_HANDS, min(MAX_HANDS, count))


class GameConfig(BaseModel):
    """Validated setup for a new game."""
    player1_hands: int = Field(DEFAULT_HANDS, description="Hands for player 1 (1-5)")
    player2_hands: int = Field(DEFAULT_HANDS, description="Hands for player 2 (1-5)")
    skin_theme: SkinTheme = SkinTheme.DEFAULT

    model_config = {"frozen": True}

    @field_validator("player1_hands", "player2_hands", mode="before")
    @classmethod
    def _reject_bool(cls, value):
        # pydantic would read True as 1 hand; the reducer refuses bools too
        if isinstance(value, bool):
            raise ValueError("hand count must be an integer, not a bool")
        return value

    @field_validator("player1_hands", "player2_hands", mode="after")
    @classmethod
    def _clamp(cls, value: int) -> int:
        return clamp_hand_count(value)

    def adjust(self, player_id: int, delta: int) -> GameConfig:
        """
        Return a config with one player's hand count moved by delta.

        Mirrors the +/- buttons of a setup screen: the result is
        clamped, so pressing "-" at 1 hand is harmless.
        """
        if player_id == 1:
            return self.model_copy(
                update={"player1_hands": clamp_hand_count(self.player1_hands + delta)}
            )
        if player_id == 2:
            return self.model_copy(
                update={"player2_hands": clamp_hand_count(self.player2_hands + delta)}
            )
        return self

    def create_initial_state(self) -> GameState:
        """Build the starting state for this config."""
        from .state import initial_state

        return initial_state(self.player1_hands, self.player2_hands)
