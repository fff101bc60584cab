"""
Chopsticks CLI - Play a game in the terminal.

Usage:
    chopsticks play [--p1-hands N] [--p2-hands N] [--skin THEME]
    chopsticks rules

In-game commands:
    select I        choose your hand I to attack with
    tap P I         tap player P's hand I with the selected hand
    split A B ...   redistribute your fingers (one number per hand)
    suggest         split using the suggested distribution
    moves           list legal moves
    reset           default 2-vs-2 game
    restart         same hand counts as this game
    rules           print the rules
    quit            leave
"""

import argparse
import sys
from dataclasses import dataclass, field
from typing import Callable

from .engine_core import (
    RULES,
    GameConfig,
    GameState,
    SkinTheme,
    legal_actions,
    suggest_split,
)
from .exceptions import InvalidCommandError
from .logging_config import get_logger, setup_logging
from .session import Session, SessionManager


logger = get_logger(__name__)

COMMANDS = {
    "select": 1,
    "tap": 2,
    "split": None,  # one number per hand
    "suggest": 0,
    "moves": 0,
    "reset": 0,
    "restart": 0,
    "rules": 0,
    "help": 0,
    "quit": 0,
}


@dataclass
class Command:
    """A parsed in-game command."""
    name: str
    args: list[int] = field(default_factory=list)


def parse_command(line: str) -> Command:
    """Parse one input line, raising InvalidCommandError on bad input."""
    parts = line.strip().lower().split()
    if not parts:
        raise InvalidCommandError("Empty command")

    name, raw_args = parts[0], parts[1:]
    if name not in COMMANDS:
        raise InvalidCommandError(f"Unknown command: {name}")

    try:
        args = [int(a) for a in raw_args]
    except ValueError:
        raise InvalidCommandError(f"Arguments must be numbers: {' '.join(raw_args)}")

    expected = COMMANDS[name]
    if expected is None:
        if not args:
            raise InvalidCommandError(f"{name} needs at least one number")
    elif len(args) != expected:
        raise InvalidCommandError(f"{name} takes {expected} argument(s), got {len(args)}")

    return Command(name=name, args=args)


def render_hand(fingers: int) -> str:
    """Draw one hand as its finger count; a hand that is out shows x."""
    if fingers == 0:
        return "[ x ]"
    return f"[ {fingers} ]"


def render_state(state: GameState) -> str:
    """Text picture of the table plus a status line."""
    lines = []
    for player in state.players:
        hands = " ".join(
            f"{i}:{render_hand(fingers)}" for i, fingers in enumerate(player.hands)
        )
        marker = ">" if player.player_id == state.current_turn and not state.is_over else " "
        lines.append(f"{marker} Player {player.player_id}  {hands}")

    if state.is_over:
        lines.append(f"Player {state.winner} wins!")
    elif state.selected_hand_index is None:
        lines.append(
            f"Player {state.current_turn}'s turn - select one of your hands or split"
        )
    else:
        lines.append(
            f"Player {state.current_turn}'s turn - hand {state.selected_hand_index} "
            f"selected, tap an opponent's hand or split"
        )
    return "\n".join(lines)


def run_command(session: Session, command: Command, out: Callable[[str], None]) -> bool:
    """Execute a command against the session. Returns False to stop playing."""
    name, args = command.name, command.args

    if name == "quit":
        return False
    if name == "help":
        out(__doc__.split("In-game commands:")[1].rstrip())
        return True
    if name == "rules":
        out("\n".join(f"- {rule}" for rule in RULES))
        return True
    if name == "moves":
        moves = legal_actions(session.game_state)
        out("\n".join(a.describe() for a in moves) if moves else "No moves available")
        return True

    if name == "select":
        result = session.select_hand(args[0])
    elif name == "tap":
        result = session.tap(args[0], args[1])
    elif name == "split":
        result = session.split(args)
    elif name == "suggest":
        distribution = suggest_split(session.game_state.current_player)
        if distribution is None:
            out("No useful split available")
            return True
        result = session.split(list(distribution))
    elif name == "reset":
        result = session.reset()
    else:
        result = session.restart()

    if not result.success:
        out(f"Not allowed: {result.error}")
    else:
        for change in result.state_changes:
            out(change)
    out(render_state(session.game_state))
    return True


def play_game(
    session: Session,
    read_line: Callable[[str], str] = input,
    out: Callable[[str], None] = print,
) -> None:
    """Read commands until quit or end of input."""
    out(render_state(session.game_state))
    while True:
        try:
            line = read_line("> ")
        except EOFError:
            break
        if not line.strip():
            continue
        try:
            command = parse_command(line)
        except InvalidCommandError as e:
            out(str(e))
            continue
        logger.debug("Command %s %s", command.name, command.args)
        if not run_command(session, command, out):
            break


def main(argv: list[str] | None = None):
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(
        description="Chopsticks - the hand-tapping game",
        prog="chopsticks",
    )
    parser.add_argument("--log-level", default="WARNING", help="Logging level")
    parser.add_argument("--log-json", action="store_true", help="Log as JSON lines")
    subparsers = parser.add_subparsers(dest="command", help="Commands")

    play_parser = subparsers.add_parser("play", help="Play a game in the terminal")
    play_parser.add_argument("--p1-hands", type=int, default=2, help="Hands for player 1 (1-5)")
    play_parser.add_argument("--p2-hands", type=int, default=2, help="Hands for player 2 (1-5)")
    play_parser.add_argument(
        "--skin",
        choices=[t.value for t in SkinTheme],
        default=SkinTheme.DEFAULT.value,
        help="Hand style",
    )

    subparsers.add_parser("rules", help="Print the rules")

    args = parser.parse_args(argv)
    setup_logging(args.log_level, format_json=args.log_json)

    if args.command == "play":
        cmd_play(args)
    elif args.command == "rules":
        cmd_rules(args)
    else:
        parser.print_help()
        sys.exit(1)


def cmd_play(args):
    """Start an interactive game."""
    config = GameConfig(
        player1_hands=args.p1_hands,
        player2_hands=args.p2_hands,
        skin_theme=SkinTheme(args.skin),
    )
    manager = SessionManager()
    session = manager.create_session(config)
    try:
        play_game(session)
    finally:
        manager.end_session(session.session_id)


def cmd_rules(args):
    """Print the rules."""
    for rule in RULES:
        print(f"- {rule}")


if __name__ == "__main__":
    main()
