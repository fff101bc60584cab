"""
Tests for the terminal CLI.
"""

import io

import pytest

from ..cli import Command, main, parse_command, play_game, render_hand, render_state
from ..engine_core.config import GameConfig
from ..exceptions import InvalidCommandError
from ..session import Session
from .conftest import make_state


class TestParseCommand:
    """Tests for command parsing."""

    def test_select(self):
        assert parse_command("select 1") == Command(name="select", args=[1])

    def test_tap_case_and_spacing(self):
        assert parse_command("  TAP 2   0 ") == Command(name="tap", args=[2, 0])

    def test_split_takes_any_count(self):
        assert parse_command("split 1 0 3").args == [1, 0, 3]

    @pytest.mark.parametrize(
        "line",
        ["", "dance", "select", "select x", "tap 2", "split", "quit now"],
    )
    def test_bad_commands(self, line):
        with pytest.raises(InvalidCommandError):
            parse_command(line)


class TestRenderState:
    """Tests for the text table."""

    def test_marks_current_player_and_dead_hands(self):
        text = render_state(make_state([0, 2], [1, 1], current_turn=1))

        assert "> Player 1  0:[ x ] 1:[ 2 ]" in text
        assert "select one of your hands" in text

    def test_selection_prompt(self):
        text = render_state(make_state([1, 1], [1, 1], selected_hand_index=0))
        assert "hand 0 selected" in text

    def test_winner_line(self):
        text = render_state(make_state([1, 0], [0, 0], current_turn=2, winner=1))
        assert "Player 1 wins!" in text

    def test_render_hand(self):
        assert render_hand(0) == "[ x ]"
        assert render_hand(3) == "[ 3 ]"


class TestPlayGame:
    """Tests for the interactive loop."""

    def _play(self, lines, config=None):
        session = Session(session_id="cli", created_at=0.0, config=config or GameConfig())
        feed = iter(lines)
        output = []

        def read_line(prompt):
            try:
                return next(feed)
            except StopIteration:
                raise EOFError

        play_game(session, read_line=read_line, out=output.append)
        return session, "\n".join(output)

    def test_select_and_tap(self):
        session, output = self._play(["select 0", "tap 2 1", "quit"])

        assert session.game_state.player2.hands == (1, 2)
        assert "tapped player 2 hand 1" in output

    def test_illegal_move_is_reported(self):
        session, output = self._play(["tap 2 0"])

        assert "Not allowed" in output
        assert session.game_state.current_turn == 1

    def test_bad_input_reprompts(self):
        session, output = self._play(["jump", "", "split 2 0"])

        assert "Unknown command: jump" in output
        assert session.game_state.player1.hands == (2, 0)

    def test_suggest_and_moves(self):
        session, output = self._play(["moves", "suggest"])

        assert "select hand 0" in output
        assert "No useful split available" in output

    def test_restart_keeps_hand_counts(self):
        config = GameConfig(player1_hands=3, player2_hands=1)
        session, _ = self._play(["split 2 1 0", "restart"], config=config)

        assert session.game_state.player1.hands == (1, 1, 1)
        assert session.game_state.player2.hands == (1,)

    def test_rules_and_help(self):
        _, output = self._play(["rules", "help"])

        assert "Exactly 5 fingers" in output
        assert "split A B" in output


class TestMain:
    """Tests for the argparse entry point."""

    def test_rules_command(self, capsys):
        main(["rules"])
        assert "Win by knocking out" in capsys.readouterr().out

    def test_no_command_exits(self):
        with pytest.raises(SystemExit):
            main([])

    def test_play_with_image_skin_draws_numbers(self, capsys, monkeypatch):
        monkeypatch.setattr("sys.stdin", io.StringIO("quit\n"))

        main(["play", "--skin", "claw", "--p2-hands", "3"])

        out = capsys.readouterr().out
        assert "Player 2  0:[ 1 ] 1:[ 1 ] 2:[ 1 ]" in out
