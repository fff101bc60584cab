"""
Reducer - Applies actions to game state.

The reducer is the single point of state transition.
All state changes must go through apply_action().

Design principles:
- Pure function: (state, action) -> new_state
- Total: never raises; an illegal action returns the input state
  unchanged together with a RejectionCode
- Validates before applying
- Win detection runs after every tap and split
"""

from __future__ import annotations
from dataclasses import dataclass

from ..logging_config import get_logger
from .action import Action, ActionResult, ActionType, RejectionCode
from .config import clamp_hand_count
from .rules import apply_fingers, check_winner, is_valid_distribution
from .state import PLAYER_IDS, GameState, default_state, initial_state


logger = get_logger(__name__)

# Only these are refused once the game has a winner
PLAYER_ACTIONS = {ActionType.SELECT_HAND, ActionType.TAP, ActionType.SPLIT}


@dataclass
class Reducer:
    """
    Reducer applies actions to game state.

    Stateless - all state is in GameState.
    """

    def apply(self, state: GameState, action: Action) -> ActionResult:
        """
        Apply an action to the game state.

        Returns ActionResult with the new state, or the same state
        and a rejection code when the action is illegal.
        """
        action_type = getattr(action, "action_type", None)

        if state.is_over and action_type in PLAYER_ACTIONS:
            return self._reject(
                state, action, "Game is over - reset or configure to play again",
                RejectionCode.GAME_OVER,
            )

        handler = self._get_handler(action_type)
        if not handler:
            return self._reject(
                state, action, f"No handler for action type: {action_type}",
                RejectionCode.UNKNOWN_ACTION,
            )

        try:
            result = handler(state, action)
        except Exception as e:
            logger.exception("Handler for %s crashed", action_type)
            return ActionResult.rejected(state, str(e), RejectionCode.HANDLER_ERROR)

        if not result.success:
            logger.debug("Rejected %s: %s", action.describe(), result.error)
        elif result.new_state.winner is not None and not state.is_over:
            logger.info("Player %d wins", result.new_state.winner)
        return result

    def _get_handler(self, action_type: ActionType | None):
        """Get the handler function for an action type."""
        handlers = {
            ActionType.SELECT_HAND: self._handle_select_hand,
            ActionType.TAP: self._handle_tap,
            ActionType.SPLIT: self._handle_split,
            ActionType.CONFIGURE: self._handle_configure,
            ActionType.RESET: self._handle_reset,
        }
        return handlers.get(action_type)

    def _reject(
        self,
        state: GameState,
        action: Action,
        error: str,
        code: RejectionCode,
    ) -> ActionResult:
        logger.debug("Rejected %r: %s", action, error)
        return ActionResult.rejected(state, error, code)

    def _handle_select_hand(self, state: GameState, action: Action) -> ActionResult:
        """Handle choosing the attacking hand."""
        hand_index = action.payload.hand_index
        player = state.current_player

        if not player.has_hand(hand_index):
            return ActionResult.rejected(
                state, f"Player {player.player_id} has no hand {hand_index!r}",
                RejectionCode.INVALID_HAND,
            )
        if not player.is_live(hand_index):
            return ActionResult.rejected(
                state, f"Hand {hand_index} is out and cannot attack",
                RejectionCode.DEAD_HAND,
            )

        new_state = state._copy_with(selected_hand_index=hand_index)
        return ActionResult.success_with_state(
            new_state,
            changes=[f"Player {player.player_id} selected hand {hand_index}"],
        )

    def _handle_tap(self, state: GameState, action: Action) -> ActionResult:
        """Handle an attack on an opponent hand."""
        target_id = action.payload.target_player
        target_index = action.payload.target_hand_index

        if state.selected_hand_index is None:
            return ActionResult.rejected(
                state, "Select a hand before tapping", RejectionCode.NO_SELECTION,
            )
        if isinstance(target_id, bool) or target_id not in PLAYER_IDS:
            return ActionResult.rejected(
                state, f"Unknown player {target_id!r}", RejectionCode.INVALID_PLAYER,
            )
        if target_id == state.current_turn:
            return ActionResult.rejected(
                state, "Cannot tap your own hand", RejectionCode.SELF_TAP,
            )

        attacker = state.current_player
        if not attacker.is_live(state.selected_hand_index):
            return ActionResult.rejected(
                state, "Selected hand is out", RejectionCode.DEAD_HAND,
            )
        attacking_fingers = attacker.hands[state.selected_hand_index]

        target = state.get_player(target_id)
        if not target.has_hand(target_index):
            return ActionResult.rejected(
                state, f"Player {target_id} has no hand {target_index!r}",
                RejectionCode.INVALID_HAND,
            )
        if not target.is_live(target_index):
            return ActionResult.rejected(
                state, f"Player {target_id}'s hand {target_index} is already out",
                RejectionCode.DEAD_HAND,
            )

        new_fingers = apply_fingers(target.hands[target_index], attacking_fingers)
        new_state = state.with_player(target.with_hand(target_index, new_fingers))
        new_state = self._end_turn(new_state)

        return ActionResult.success_with_state(
            new_state,
            changes=[
                f"Player {attacker.player_id} hand {state.selected_hand_index} "
                f"({attacking_fingers}) tapped player {target_id} hand {target_index}: "
                f"{target.hands[target_index]} -> {new_fingers}"
            ],
        )

    def _handle_split(self, state: GameState, action: Action) -> ActionResult:
        """Handle redistributing the current player's fingers."""
        distribution = action.payload.distribution
        player = state.current_player

        if not is_valid_distribution(player, distribution):
            if (
                isinstance(distribution, (list, tuple))
                and tuple(distribution) == player.hands
            ):
                return ActionResult.rejected(
                    state, "A split must change at least one hand",
                    RejectionCode.UNCHANGED_SPLIT,
                )
            return ActionResult.rejected(
                state,
                f"Invalid split {distribution!r} for hands {list(player.hands)}",
                RejectionCode.BAD_DISTRIBUTION,
            )

        new_state = state.with_player(player.with_hands(distribution))
        new_state = self._end_turn(new_state)

        return ActionResult.success_with_state(
            new_state,
            changes=[
                f"Player {player.player_id} split {list(player.hands)} -> {list(distribution)}"
            ],
        )

    def _handle_configure(self, state: GameState, action: Action) -> ActionResult:
        """Handle starting a game with custom hand counts."""
        counts = (action.payload.player1_hands, action.payload.player2_hands)
        for count in counts:
            if not isinstance(count, int) or isinstance(count, bool):
                return ActionResult.rejected(
                    state, f"Hand count must be an integer, got {count!r}",
                    RejectionCode.INVALID_CONFIG,
                )

        p1_hands, p2_hands = (clamp_hand_count(c) for c in counts)
        new_state = initial_state(p1_hands, p2_hands)
        return ActionResult.success_with_state(
            new_state,
            changes=[f"New game: player 1 has {p1_hands} hands, player 2 has {p2_hands}"],
        )

    def _handle_reset(self, state: GameState, action: Action) -> ActionResult:
        """Handle reset to the default 2-and-2 game."""
        return ActionResult.success_with_state(default_state(), changes=["Game reset"])

    def _end_turn(self, state: GameState) -> GameState:
        """Pass the turn, clear the selection and evaluate the winner."""
        passed = state._copy_with(
            current_turn=state.opponent_id,
            selected_hand_index=None,
        )
        return passed._copy_with(winner=check_winner(passed))


def apply_action(state: GameState, action: Action) -> ActionResult:
    """
    Convenience function to apply an action.

    Creates a Reducer and applies the action.
    """
    reducer = Reducer()
    return reducer.apply(state, action)


def reduce(state: GameState, action: Action) -> GameState:
    """Apply an action and return only the resulting state."""
    return apply_action(state, action).new_state
