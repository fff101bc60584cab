"""
Rules - Pure helpers behind the reducer.

Finger arithmetic, win detection and split enumeration live here so
the reducer, the action generator and hosts all agree on them.
"""

from __future__ import annotations
from itertools import product

from .config import MAX_FINGERS, WRAP_BASE
from .state import GameState, Player


RULES = [
    "Each player starts with 1 finger up on each hand.",
    "Select one of your hands, then tap an opponent's hand to add your fingers to theirs.",
    "Exactly 5 fingers knocks a hand out (it becomes 0).",
    "More than 5 wraps around (6 -> 1, 7 -> 2, 8 -> 3).",
    "Instead of attacking you may split: redistribute your own fingers, keeping the total.",
    "A split must change something; dead hands can be revived by a split.",
    "Win by knocking out every one of your opponent's hands.",
]


def wrap_fingers(total: int) -> int:
    """Map a finger sum back into [0, 4]; exactly 5 becomes 0."""
    return total % WRAP_BASE


def apply_fingers(current: int, added: int) -> int:
    """Finger count of a hand holding `current` after being tapped by `added`."""
    return wrap_fingers(current + added)


def check_winner(state: GameState) -> int | None:
    """
    Return the winning player id, or None while both sides have hands.

    A player wins when every one of the opponent's hands is 0.
    """
    if state.player1.is_eliminated:
        return 2
    if state.player2.is_eliminated:
        return 1
    return None


def is_valid_distribution(player: Player, distribution: object) -> bool:
    """
    Check a proposed split for one player.

    The distribution must give every hand an int count in [0, 4],
    keep the finger total, and differ from the current hands.
    """
    if not isinstance(distribution, (list, tuple)):
        return False
    if len(distribution) != player.number_of_hands:
        return False
    for value in distribution:
        if not isinstance(value, int) or isinstance(value, bool):
            return False
        if value < 0 or value > MAX_FINGERS:
            return False
    if sum(distribution) != player.total_fingers:
        return False
    return tuple(distribution) != player.hands


def split_distributions(player: Player) -> list[tuple[int, ...]]:
    """All legal splits for a player, in lexicographic order."""
    total = player.total_fingers
    return [
        combo
        for combo in product(range(MAX_FINGERS + 1), repeat=player.number_of_hands)
        if sum(combo) == total and combo != player.hands
    ]


def can_split(player: Player) -> bool:
    """Whether the player has at least one legal split."""
    # Cheap exits before enumerating
    if player.number_of_hands < 2 or player.total_fingers == 0:
        return False
    return bool(split_distributions(player))


def suggest_split(player: Player) -> tuple[int, ...] | None:
    """
    Propose a sensible split for the player, or None.

    If a hand is out and another holds more than one finger, half of
    that hand (rounded down) moves to the first dead hand. Otherwise
    the total is spread evenly, extra fingers going to the lowest
    indices.
    """
    total = player.total_fingers
    if total <= 1:
        return None

    hands = list(player.hands)
    if 0 in hands:
        dead = hands.index(0)
        for i, fingers in enumerate(hands):
            if fingers > 1:
                transfer = fingers // 2
                hands[dead] = transfer
                hands[i] = fingers - transfer
                return tuple(hands)

    average, remainder = divmod(total, player.number_of_hands)
    spread = tuple(
        average + (1 if i < remainder else 0) for i in range(player.number_of_hands)
    )
    if not is_valid_distribution(player, spread):
        return None
    return spread
