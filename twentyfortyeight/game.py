"""Board state, moves and tile spawning for the 2048 sliding puzzle."""

from __future__ import annotations

import random
from collections.abc import Iterable
from enum import Enum
from itertools import pairwise

_TWO_PROBABILITY = 0.9


class Option(Enum):
    """A move the player can ask for."""

    NULL = 0
    UP = 1
    DOWN = 2
    LEFT = 3
    RIGHT = 4


# direction -> (works on columns, tiles slide toward the end of each line)
_DIRECTIONS = {
    Option.UP: (True, False),
    Option.DOWN: (True, True),
    Option.LEFT: (False, False),
    Option.RIGHT: (False, True),
}


def _slide(line: list[int]) -> tuple[list[int], int]:
    """Slide a line toward its start, merging equal neighbours once each."""
    merged: list[int] = []
    gained = 0
    can_merge = False
    for value in (v for v in line if v):
        if can_merge and merged[-1] == value:
            merged[-1] *= 2
            gained += merged[-1]
            can_merge = False
        else:
            merged.append(value)
            can_merge = True
    merged.extend([0] * (len(line) - len(merged)))
    return merged, gained


def _can_shift_toward_start(line: list[int]) -> bool:
    return any(b and (a == b or not a) for a, b in pairwise(line))


def _can_shift_toward_end(line: list[int]) -> bool:
    return any(a and (a == b or not b) for a, b in pairwise(line))


class Game2048:
    """A square 2048 board with score, game-over flag and its own random source."""

    def __init__(
        self,
        side_size: int,
        data: Iterable[int] | None = None,
        score: int = 0,
        done: bool = True,
        seed: int | None = None,
    ) -> None:
        if side_size < 2:
            raise ValueError("side_size must be at least 2")
        full_size = side_size * side_size
        if data is None:
            cells = [0] * full_size
        else:
            cells = [int(v) for v in data]
            if len(cells) != full_size:
                raise ValueError(
                    f"expected {full_size} tiles, got {len(cells)}"
                )
            if any(v < 0 for v in cells):
                raise ValueError("tile values must not be negative")
        if score < 0:
            raise ValueError("score must not be negative")
        self._size = side_size
        self._cells = cells
        self._score = score
        self._done = bool(done)
        self._rng = random.Random(seed)

    @property
    def size(self) -> int:
        return self._size

    @property
    def full_size(self) -> int:
        return len(self._cells)

    @property
    def score(self) -> int:
        return self._score

    @property
    def done(self) -> bool:
        return self._done

    @property
    def data(self) -> tuple[int, ...]:
        return tuple(self._cells)

    def reset(self) -> None:
        """Clear the board and start a new game with two tiles."""
        self._cells = [0] * self.full_size
        self._score = 0
        self._done = False
        self._random_insert()
        self._random_insert()

    def step(self, option: Option) -> bool:
        """Make a move; return whether the board changed."""
        if self._done:
            return False
        movable = {direction: self._can_move(direction) for direction in _DIRECTIONS}
        if not any(movable.values()):
            self._done = True
            return False
        if not movable.get(option, False):
            return False
        self._apply(option)
        self._update()
        return True

    def tile(self, i: int, j: int) -> int:
        """Value at row i, column j."""
        if not (0 <= i < self._size and 0 <= j < self._size):
            raise IndexError(f"tile ({i}, {j}) is off the board")
        return self._cells[i * self._size + j]

    def __getitem__(self, index: int | tuple[int, int]) -> int:
        if isinstance(index, tuple):
            return self.tile(*index)
        return self._cells[index]

    def copy(self) -> Game2048:
        """An independent game with the same board and random state."""
        twin = Game2048(self._size, self._cells, self._score, self._done)
        twin._rng.setstate(self._rng.getstate())
        return twin

    def rows(self) -> tuple[tuple[int, ...], ...]:
        size = self._size
        return tuple(
            tuple(self._cells[start:start + size])
            for start in range(0, self.full_size, size)
        )

    def __repr__(self) -> str:
        return (
            f"Game2048(size={self._size}, score={self._score}, "
            f"done={self._done}, data={self._cells})"
        )

    def _line_indices(self, vertical: bool) -> list[list[int]]:
        size, full = self._size, self.full_size
        if vertical:
            return [list(range(n, full, size)) for n in range(size)]
        return [list(range(n * size, (n + 1) * size)) for n in range(size)]

    def _can_move(self, option: Option) -> bool:
        vertical, toward_end = _DIRECTIONS[option]
        check = _can_shift_toward_end if toward_end else _can_shift_toward_start
        return any(
            check([self._cells[i] for i in indices])
            for indices in self._line_indices(vertical)
        )

    def _apply(self, option: Option) -> None:
        vertical, toward_end = _DIRECTIONS[option]
        for indices in self._line_indices(vertical):
            ordered = indices[::-1] if toward_end else indices
            line, gained = _slide([self._cells[i] for i in ordered])
            for position, value in zip(ordered, line):
                self._cells[position] = value
            self._score += gained

    def _update(self) -> None:
        if self._done:
            return
        if not any(self._can_move(direction) for direction in _DIRECTIONS):
            self._done = True
            return
        if 0 in self._cells:
            self._random_insert()

    def _spawn_value(self) -> int:
        return 2 if self._rng.randrange(100) < int(_TWO_PROBABILITY * 100) else 4

    def _random_insert(self) -> None:
        empty = [i for i, value in enumerate(self._cells) if value == 0]
        if not empty:
            return
        self._cells[self._rng.choice(empty)] = self._spawn_value()