"""
Engine Core - Deterministic Chopsticks state transitions.

The engine is the runtime that:
1. Builds an initial GameState from a GameConfig
2. Applies actions via the reducer (illegal actions are no-ops)
3. Detects the winner after every tap and split
4. Enumerates legal actions for hosts
"""

from .config import (
    GameConfig,
    SkinTheme,
    clamp_hand_count,
    MIN_HANDS,
    MAX_HANDS,
    DEFAULT_HANDS,
    MAX_FINGERS,
)
from .state import GameState, Player, initial_state, default_state
from .action import Action, ActionType, ActionPayload, ActionResult, RejectionCode
from .rules import (
    RULES,
    wrap_fingers,
    apply_fingers,
    check_winner,
    is_valid_distribution,
    split_distributions,
    can_split,
    suggest_split,
)
from .reducer import Reducer, apply_action, reduce
from .action_generator import ActionGenerator, legal_actions, is_legal

__all__ = [
    "GameConfig",
    "SkinTheme",
    "clamp_hand_count",
    "MIN_HANDS",
    "MAX_HANDS",
    "DEFAULT_HANDS",
    "MAX_FINGERS",
    "GameState",
    "Player",
    "initial_state",
    "default_state",
    "Action",
    "ActionType",
    "ActionPayload",
    "ActionResult",
    "RejectionCode",
    "RULES",
    "wrap_fingers",
    "apply_fingers",
    "check_winner",
    "is_valid_distribution",
    "split_distributions",
    "can_split",
    "suggest_split",
    "Reducer",
    "apply_action",
    "reduce",
    "ActionGenerator",
    "legal_actions",
    "is_legal",
]
