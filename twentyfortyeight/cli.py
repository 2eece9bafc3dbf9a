"""Play 2048 in the terminal with the w, a, s and d keys."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Callable, Sequence
from typing import TextIO

from twentyfortyeight.game import Game2048, Option

PROMPT = "Select option: up(w), down(s), left(a), right(d): "

_KEYS = {
    "w": Option.UP,
    "s": Option.DOWN,
    "a": Option.LEFT,
    "d": Option.RIGHT,
}


def option_for_key(key: str) -> Option:
    """Map a key to a move; unknown keys give Option.NULL."""
    return _KEYS.get(key, Option.NULL)


def render(game: Game2048) -> str:
    """The score line followed by the board, one tab before each tile."""
    lines = [f"score: {game.score}\n"]
    lines.extend("".join(f"\t{value}" for value in row) + "\n" for row in game.rows())
    lines.append("\n")
    return "".join(lines)


def _keys(input_func: Callable[[], str]):
    """Yield non-blank characters from successive lines of input until EOF."""
    while True:
        try:
            line = input_func()
        except EOFError:
            return
        yield from (ch for ch in line if not ch.isspace())


def play(
    game: Game2048 | None = None,
    input_func: Callable[[], str] | None = None,
    output: TextIO | None = None,
) -> Game2048:
    """Run the game loop. A fresh 4x4 game is started when none is given."""
    if input_func is None:
        input_func = input
    if output is None:
        output = sys.stdout
    if game is None:
        game = Game2048(4)
        game.reset()
    output.write(render(game))

    keys = _keys(input_func)
    while not game.done:
        output.write(PROMPT)
        output.flush()
        key = next(keys, None)
        if key is None:
            output.write("\n")
            return game
        game.step(option_for_key(key))
        output.write(render(game))

    output.write("Game Over!\n")
    return game


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Play 2048 in the terminal.")
    parser.add_argument("--size", type=int, default=4, help="side length of the board")
    parser.add_argument("--seed", type=int, default=None, help="random seed")
    args = parser.parse_args(argv)
    if args.size < 2:
        parser.error("--size must be at least 2")
    game = Game2048(args.size, seed=args.seed)
    game.reset()
    play(game)
    return 0


if __name__ == "__main__":
    sys.exit(main())