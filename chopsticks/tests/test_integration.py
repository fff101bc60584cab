"""
Integration tests - whole games through the reducer.

Covers the reference scenarios and the game-wide properties:
turn alternation, split conservation, terminal absorption and
exact win detection.
"""

import random

from ..engine_core.action import Action, ActionType
from ..engine_core.action_generator import legal_actions
from ..engine_core.reducer import apply_action, reduce
from ..engine_core.rules import check_winner
from ..engine_core.state import default_state
from .conftest import make_state


class TestScenarios:
    """The reference scenarios, step by step."""

    def test_first_tap_of_default_game(self):
        state = default_state()
        state = reduce(state, Action.select_hand(0))
        state = reduce(state, Action.tap(2, 0))

        assert state.player2.hands == (2, 1)
        assert state.current_turn == 2
        assert state.winner is None

    def test_four_taps_one_to_elimination(self):
        state = make_state([4, 1], [1, 1], selected_hand_index=0)
        state = reduce(state, Action.tap(2, 0))

        assert state.player2.hands == (0, 1)
        assert state.winner is None

    def test_dead_hand_cannot_be_selected(self):
        state = make_state([1, 1], [0, 3], current_turn=2)

        assert reduce(state, Action.select_hand(0)) == state
        assert reduce(state, Action.select_hand(1)).selected_hand_index == 1

    def test_split_legality(self):
        state = make_state([0, 2], [1, 1])

        assert reduce(state, Action.split([1, 1])).player1.hands == (1, 1)
        assert reduce(state, Action.split([0, 2])) == state
        assert reduce(state, Action.split([2, 1])) == state

    def test_win_then_absorb_until_reset(self):
        state = make_state([3, 1], [0, 2], selected_hand_index=0)
        state = reduce(state, Action.tap(2, 1))

        assert state.player2.hands == (0, 0)
        assert state.winner == 1

        for action in [Action.tap(1, 0), Action.split([1, 3]), Action.select_hand(0)]:
            assert reduce(state, action) == state

        assert reduce(state, Action.reset()).winner is None
        assert reduce(state, Action.configure(2, 3)).winner is None


class TestRandomGames:
    """Property checks over random legal play."""

    def _random_game(self, seed, p1_hands, p2_hands, max_moves=200):
        rng = random.Random(seed)
        state = reduce(default_state(), Action.configure(p1_hands, p2_hands))
        steps = []
        for _ in range(max_moves):
            actions = legal_actions(state)
            if not actions:
                break
            action = rng.choice(actions)
            result = apply_action(state, action)
            steps.append((state, action, result.new_state))
            state = result.new_state
        return steps

    def test_properties_hold(self):
        for seed in range(20):
            p1, p2 = 1 + seed % 5, 1 + (seed * 3) % 5
            for before, action, after in self._random_game(seed, p1, p2):
                # Hand counts never change during play
                assert after.player1.number_of_hands == p1
                assert after.player2.number_of_hands == p2
                assert all(0 <= h <= 4 for p in after.players for h in p.hands)

                if action.action_type in (ActionType.TAP, ActionType.SPLIT):
                    assert after.current_turn != before.current_turn
                    assert after.selected_hand_index is None
                    assert after.winner == check_winner(after)
                else:
                    assert after.current_turn == before.current_turn

                if action.action_type == ActionType.SPLIT:
                    mover = before.current_player
                    moved = after.get_player(mover.player_id)
                    assert moved.total_fingers == mover.total_fingers
                    assert moved.hands != mover.hands

                if action.action_type == ActionType.TAP:
                    attacker = before.current_player
                    assert after.get_player(attacker.player_id) == attacker

    def test_winner_only_when_opponent_all_zero(self):
        for seed in range(20):
            for _, _, after in self._random_game(seed, 2, 2):
                if after.winner is not None:
                    loser = after.get_player(3 - after.winner)
                    assert all(h == 0 for h in loser.hands)
                else:
                    assert not after.player1.is_eliminated
                    assert not after.player2.is_eliminated
