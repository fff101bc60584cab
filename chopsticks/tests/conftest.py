"""
Pytest fixtures for Chopsticks tests.
"""

import pytest

from ..engine_core.state import GameState, Player, default_state
from ..session import SessionManager


def make_state(
    p1_hands,
    p2_hands,
    current_turn: int = 1,
    selected_hand_index=None,
    winner=None,
) -> GameState:
    """Build a state with explicit finger counts."""
    return GameState(
        player1=Player(player_id=1, hands=tuple(p1_hands)),
        player2=Player(player_id=2, hands=tuple(p2_hands)),
        current_turn=current_turn,
        selected_hand_index=selected_hand_index,
        winner=winner,
    )


@pytest.fixture
def start_state() -> GameState:
    """Default 2-and-2 game, player 1 to move."""
    return default_state()


@pytest.fixture
def selected_state() -> GameState:
    """Default game with player 1's hand 0 selected."""
    return make_state([1, 1], [1, 1], selected_hand_index=0)


@pytest.fixture
def won_state() -> GameState:
    """Player 1 has already won."""
    return make_state([2, 1], [0, 0], current_turn=2, winner=1)


@pytest.fixture
def session_manager() -> SessionManager:
    return SessionManager()
