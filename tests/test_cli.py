import io

import pytest

from twentyfortyeight.cli import PROMPT, main, option_for_key, play, render
from twentyfortyeight.game import Game2048, Option


def _feeder(lines):
    remaining = iter(lines)

    def read():
        try:
            return next(remaining)
        except StopIteration:
            raise EOFError from None

    return read


@pytest.mark.parametrize(
    "key, option",
    [
        ("w", Option.UP),
        ("s", Option.DOWN),
        ("a", Option.LEFT),
        ("d", Option.RIGHT),
        ("x", Option.NULL),
        ("W", Option.NULL),
    ],
)
def test_option_for_key(key, option):
    assert option_for_key(key) is option


def test_render_layout():
    game = Game2048(2, [2, 0, 4, 8], score=12)
    assert render(game) == "score: 12\n\t2\t0\n\t4\t8\n\n"


def test_play_finishes_stuck_game():
    game = Game2048(2, [2, 4, 4, 2], done=False)
    out = io.StringIO()
    result = play(game, _feeder(["a"]), out)
    assert result.done is True
    assert out.getvalue().endswith("Game Over!\n")
    assert out.getvalue().count(PROMPT) == 1


def test_play_done_game_reads_nothing():
    game = Game2048(2)

    def never():
        raise AssertionError("input must not be read")

    out = io.StringIO()
    play(game, never, out)
    assert out.getvalue() == render(game) + "Game Over!\n"


def test_play_stops_at_end_of_input():
    game = Game2048(2, [0, 0, 2, 0], done=False, seed=1)
    out = io.StringIO()
    result = play(game, _feeder(["w"]), out)
    assert result.tile(0, 0) == 2
    assert result.done is False
    text = out.getvalue()
    assert "Game Over!" not in text
    assert text.count("score:") == 2
    assert text.count(PROMPT) == 2


def test_play_takes_each_key_in_a_line():
    game = Game2048(3, [0] * 8 + [2], done=False, seed=4)
    out = io.StringIO()
    play(game, _feeder(["w a", "", "q"]), out)
    assert out.getvalue().count("score:") == 4
    assert game.tile(0, 0) != 0


def test_play_starts_new_game_when_none_given():
    out = io.StringIO()
    game = play(None, _feeder([]), out)
    assert game.size == 4
    assert len([v for v in game.data if v]) == 2
    assert out.getvalue().startswith("score: 0\n")


def test_main_runs_until_eof(monkeypatch, capsys):
    def no_input(*_args):
        raise EOFError

    monkeypatch.setattr("builtins.input", no_input)
    assert main(["--seed", "3", "--size", "3"]) == 0
    text = capsys.readouterr().out
    assert text.startswith("score: 0\n")
    assert PROMPT in text
    assert len([line for line in text.splitlines() if line.startswith("\t")]) == 3


def test_main_rejects_small_size():
    with pytest.raises(SystemExit):
        main(["--size", "1"])