"""
Tests for game configuration and initial state.
"""

import pytest
from pydantic import ValidationError

from ..engine_core.config import GameConfig, SkinTheme, clamp_hand_count
from ..engine_core.state import Player, default_state, initial_state


class TestGameConfig:
    """Tests for the pydantic GameConfig."""

    def test_defaults(self):
        config = GameConfig()

        assert config.player1_hands == 2
        assert config.player2_hands == 2
        assert config.skin_theme == SkinTheme.DEFAULT

    def test_clamps_below_range(self):
        config = GameConfig(player1_hands=0, player2_hands=-3)

        assert config.player1_hands == 1
        assert config.player2_hands == 1

    def test_clamps_above_range(self):
        config = GameConfig(player1_hands=6, player2_hands=42)

        assert config.player1_hands == 5
        assert config.player2_hands == 5

    def test_numeric_string_is_coerced(self):
        assert GameConfig(player1_hands="3").player1_hands == 3

    def test_garbage_raises_validation_error(self):
        with pytest.raises(ValidationError):
            GameConfig(player1_hands="many")

    @pytest.mark.parametrize("value", [True, False])
    def test_bool_hand_count_rejected(self, value):
        with pytest.raises(ValidationError):
            GameConfig(player1_hands=value)

    def test_skin_theme_from_value(self):
        assert GameConfig(skin_theme="claw").skin_theme == SkinTheme.CLAW

    def test_unknown_skin_rejected(self):
        with pytest.raises(ValidationError):
            GameConfig(skin_theme="neon")

    def test_adjust_moves_one_player(self):
        config = GameConfig().adjust(1, 2)

        assert config.player1_hands == 4
        assert config.player2_hands == 2

    def test_adjust_clamps(self):
        config = GameConfig(player2_hands=5)

        assert config.adjust(2, 1).player2_hands == 5
        assert GameConfig(player1_hands=1).adjust(1, -1).player1_hands == 1

    def test_adjust_unknown_player_is_noop(self):
        config = GameConfig()
        assert config.adjust(3, 1) == config

    def test_create_initial_state(self):
        state = GameConfig(player1_hands=1, player2_hands=4).create_initial_state()

        assert state.player1.hands == (1,)
        assert state.player2.hands == (1, 1, 1, 1)
        assert state.current_turn == 1
        assert state.winner is None


class TestInitialState:
    """Tests for state builders."""

    @pytest.mark.parametrize("count,expected", [(-1, 1), (0, 1), (3, 3), (9, 5)])
    def test_clamp_hand_count(self, count, expected):
        assert clamp_hand_count(count) == expected

    def test_default_state(self):
        state = default_state()

        assert state.player1 == Player(player_id=1, hands=(1, 1))
        assert state.player2 == Player(player_id=2, hands=(1, 1))
        assert state.current_turn == 1
        assert state.selected_hand_index is None
        assert state.winner is None

    def test_initial_state_is_value_equal(self):
        """Two fresh states compare equal, so no-op checks can use ==."""
        assert initial_state(3, 2) == initial_state(3, 2)
        assert initial_state(3, 2) != initial_state(2, 3)

    def test_number_of_hands_matches_hands(self):
        state = initial_state(5, 1)

        assert state.player1.number_of_hands == len(state.player1.hands) == 5
        assert state.player2.number_of_hands == 1

    def test_player_queries(self):
        player = Player(player_id=2, hands=(0, 3, 1))

        assert player.total_fingers == 4
        assert player.active_hands == 2
        assert not player.is_eliminated
        assert player.is_live(1)
        assert not player.is_live(0)
        assert not player.has_hand(-1)
