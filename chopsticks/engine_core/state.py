"""
Game State - Immutable value objects for a Chopsticks game.

Design principles:
- Immutable: frozen dataclasses, hands stored as tuples
- Value equality: two states with the same fields compare equal,
  which is how callers detect a rejected (no-op) action
- Every transition builds a fresh player and a fresh state;
  untouched branches are shared
"""

from __future__ import annotations
from dataclasses import dataclass

from .config import DEFAULT_HANDS, STARTING_FINGERS, clamp_hand_count


PLAYER_IDS = (1, 2)


@dataclass(frozen=True)
class Player:
    """
    One side of the table.

    hands[i] is the finger count of hand i. A hand at 0 is out
    but keeps its index, so hosts can bind widgets to positions.
    """
    player_id: int
    hands: tuple[int, ...]

    @property
    def number_of_hands(self) -> int:
        return len(self.hands)

    @property
    def total_fingers(self) -> int:
        return sum(self.hands)

    @property
    def active_hands(self) -> int:
        """Number of hands still in play."""
        return sum(1 for h in self.hands if h > 0)

    @property
    def is_eliminated(self) -> bool:
        return all(h == 0 for h in self.hands)

    def has_hand(self, hand_index: object) -> bool:
        """Check that hand_index is a real index into hands (no negatives)."""
        return (
            isinstance(hand_index, int)
            and not isinstance(hand_index, bool)
            and 0 <= hand_index < len(self.hands)
        )

    def is_live(self, hand_index: object) -> bool:
        """Check that hand_index addresses a hand with fingers left."""
        return self.has_hand(hand_index) and self.hands[hand_index] > 0

    def with_hand(self, hand_index: int, fingers: int) -> Player:
        """Return new player with one hand's count replaced."""
        new_hands = list(self.hands)
        new_hands[hand_index] = fingers
        return Player(player_id=self.player_id, hands=tuple(new_hands))

    def with_hands(self, hands: tuple[int, ...] | list[int]) -> Player:
        """Return new player with all hands replaced."""
        return Player(player_id=self.player_id, hands=tuple(hands))

    @classmethod
    def create(cls, player_id: int, number_of_hands: int) -> Player:
        """A fresh player with one finger up on every hand."""
        return cls(
            player_id=player_id,
            hands=(STARTING_FINGERS,) * clamp_hand_count(number_of_hands),
        )


@dataclass(frozen=True)
class GameState:
    """
    Complete game state at a point in time.

    This is the canonical state the reducer operates on.
    Once winner is set the state is terminal until reset/configure.
    """
    player1: Player
    player2: Player
    current_turn: int = 1
    selected_hand_index: int | None = None
    winner: int | None = None

    @property
    def is_over(self) -> bool:
        return self.winner is not None

    @property
    def current_player(self) -> Player:
        return self.get_player(self.current_turn)

    @property
    def opponent_id(self) -> int:
        return 2 if self.current_turn == 1 else 1

    @property
    def opponent(self) -> Player:
        return self.get_player(self.opponent_id)

    @property
    def players(self) -> tuple[Player, Player]:
        return (self.player1, self.player2)

    def get_player(self, player_id: int) -> Player:
        """Get player by id (1 or 2)."""
        return self.player1 if player_id == 1 else self.player2

    def with_player(self, player: Player) -> GameState:
        """Return new state with the matching player replaced."""
        if player.player_id == 1:
            return self._copy_with(player1=player)
        return self._copy_with(player2=player)

    def _copy_with(self, **kwargs) -> GameState:
        """Create a copy with some fields replaced."""
        return GameState(
            player1=kwargs.get("player1", self.player1),
            player2=kwargs.get("player2", self.player2),
            current_turn=kwargs.get("current_turn", self.current_turn),
            selected_hand_index=kwargs.get("selected_hand_index", self.selected_hand_index),
            winner=kwargs.get("winner", self.winner),
        )


def initial_state(
    player1_hands: int = DEFAULT_HANDS,
    player2_hands: int = DEFAULT_HANDS,
) -> GameState:
    """
    Build a starting state.

    Hand counts are clamped into range; player 1 moves first.
    """
    return GameState(
        player1=Player.create(1, player1_hands),
        player2=Player.create(2, player2_hands),
        current_turn=1,
        selected_hand_index=None,
        winner=None,
    )


def default_state() -> GameState:
    """The 2-and-2 state every reset returns to."""
    return initial_state(DEFAULT_HANDS, DEFAULT_HANDS)
