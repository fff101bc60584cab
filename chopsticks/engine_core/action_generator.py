"""
Action Generator - Generates all legal actions from a game state.

The action generator is used by:
1. Hosts to show available moves (highlight hands, enable "Split")
2. Validation (is this action accepted?)

Only player actions are generated; reset and configure are
always available and left to the host.
"""

from __future__ import annotations
from dataclasses import dataclass

from .action import Action
from .reducer import apply_action
from .rules import split_distributions
from .state import GameState


@dataclass
class ActionGenerator:
    """Generates legal actions for the current player."""

    def generate(self, state: GameState) -> list[Action]:
        """
        Generate all legal actions for the current player.

        Returns a list of fully-specified Action objects.
        """
        if state.is_over:
            return []

        actions = []
        actions.extend(self._generate_select_actions(state))
        actions.extend(self._generate_tap_actions(state))
        actions.extend(self._generate_split_actions(state))
        return actions

    def _generate_select_actions(self, state: GameState) -> list[Action]:
        """One select per live hand of the current player."""
        player = state.current_player
        return [
            Action.select_hand(i)
            for i, fingers in enumerate(player.hands)
            if fingers > 0
        ]

    def _generate_tap_actions(self, state: GameState) -> list[Action]:
        """One tap per live opponent hand, once a hand is selected."""
        if state.selected_hand_index is None:
            return []
        if not state.current_player.is_live(state.selected_hand_index):
            return []

        opponent = state.opponent
        return [
            Action.tap(opponent.player_id, i)
            for i, fingers in enumerate(opponent.hands)
            if fingers > 0
        ]

    def _generate_split_actions(self, state: GameState) -> list[Action]:
        """One split per legal redistribution."""
        return [
            Action.split(distribution)
            for distribution in split_distributions(state.current_player)
        ]


def legal_actions(state: GameState) -> list[Action]:
    """
    Convenience function to get legal actions.

    Creates an ActionGenerator and generates actions.
    """
    generator = ActionGenerator()
    return generator.generate(state)


def is_legal(state: GameState, action: Action) -> bool:
    """Check whether the reducer would accept a specific action."""
    return apply_action(state, action).success
