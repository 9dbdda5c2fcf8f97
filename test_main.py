"""
Tests for the console game loop, driven by scripted input.
"""

import pytest

import main
from logic.enums import Player, Difficulty
from main import TicTacToeGame, ask_difficulty


class FirstChoice:
    """Random source that always picks the first option."""

    def choice(self, options):
        return options[0]


def scripted(answers):
    answers = iter(answers)
    return lambda prompt: next(answers)


def collector():
    lines = []

    def output(*args, **kwargs):
        lines.append(" ".join(str(arg) for arg in args))

    return lines, output


def test_human_can_win_after_bad_input():
    lines, output = collector()
    game = TicTacToeGame(
        Difficulty.EXPERIENCED,
        rng=FirstChoice(),
        input_func=scripted([
            "5", "1",   # off the board
            "1", "1",
            "3", "3",
            "2", "2",   # computer took the center
            "3", "1",
            "2", "1",
        ]),
        output_func=output
    )

    assert game.play() == Player.HUMAN
    assert game.board.get_winning_line() == [(0, 0), (1, 0), (2, 0)]
    assert any("Must be 1-3" in line for line in lines)
    assert any("already taken" in line for line in lines)
    assert lines[-1] == "Congratulations! You won!"


def test_game_can_end_in_draw():
    lines, output = collector()
    game = TicTacToeGame(
        Difficulty.EXPERIENCED,
        rng=FirstChoice(),
        input_func=scripted(["1", "1", "1", "2", "3", "1", "2", "3", "3", "2"]),
        output_func=output
    )

    assert game.play() is None
    assert game.is_draw
    assert game.board.is_draw()
    assert lines[-1] == "It's a draw! Good game!"


def test_board_is_drawn_each_turn():
    lines, output = collector()
    game = TicTacToeGame(
        Difficulty.EXPERIENCED,
        rng=FirstChoice(),
        input_func=scripted(["1", "1", "1", "2", "3", "1", "2", "3", "3", "2"]),
        output_func=output
    )
    game.play()

    assert "O|X|O\n-----\nO|X|O\n-----\nX|O|X" in lines


def test_ask_difficulty_reprompts():
    lines, output = collector()

    difficulty = ask_difficulty(scripted(["9", "x", "3"]), output)

    assert difficulty == Difficulty.EXPERIENCED
    assert len(lines) == 2
    assert "Choose 1, 2 or 3" in lines[0]


def test_ask_difficulty_default():
    assert ask_difficulty(scripted([""])) == Difficulty.INTERMEDIATE


def test_from_choice_rejects_unknown():
    with pytest.raises(ValueError):
        Difficulty.from_choice("0")


def test_main_handles_interrupt(monkeypatch, capsys):
    def interrupted(*args, **kwargs):
        raise KeyboardInterrupt

    monkeypatch.setattr(main, "ask_difficulty", interrupted)

    main.main()

    out = capsys.readouterr().out
    assert "Game interrupted by user." in out
    assert out.rstrip().endswith("Goodbye!")
