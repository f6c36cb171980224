"""The minefield: mine placement, neighbour counts, flags and flood opening."""

from __future__ import annotations

import random
from collections.abc import Iterator

from .constants import NUM_COLS, NUM_MINES, NUM_ROWS

Cell = tuple[int, int]

_OFFSETS = tuple(
    (dr, dc) for dr in (-1, 0, 1) for dc in (-1, 0, 1) if (dr, dc) != (0, 0)
)


class Field:
    """A rectangular board of cells that may hold a mine, be opened or be flagged."""

    def __init__(
        self,
        rows: int = NUM_ROWS,
        cols: int = NUM_COLS,
        mine_count: int = NUM_MINES,
        rng: random.Random | None = None,
    ) -> None:
        if rows <= 0 or cols <= 0:
            raise ValueError(f"board must have positive size, got {rows}x{cols}")
        if mine_count < 0:
            raise ValueError(f"mine count must not be negative, got {mine_count}")
        self.rows = rows
        self.cols = cols
        self.mine_count = mine_count
        self._rng = rng if rng is not None else random.Random()
        self._mines: set[Cell] = set()
        self._opened: set[Cell] = set()
        self._flags: set[Cell] = set()

    @property
    def safe_cells(self) -> int:
        """Number of cells that hold no mine once the mines are placed."""
        return self.rows * self.cols - self.mine_count

    def _in_bounds(self, row: int, col: int) -> bool:
        return 0 <= row < self.rows and 0 <= col < self.cols

    def _check(self, row: int, col: int) -> None:
        if not self._in_bounds(row, col):
            raise IndexError(f"cell ({row}, {col}) is outside the board")

    def _neighbours(self, row: int, col: int) -> Iterator[Cell]:
        for dr, dc in _OFFSETS:
            r, c = row + dr, col + dc
            if self._in_bounds(r, c):
                yield r, c

    def place_mines(self, avoid_row: int, avoid_col: int) -> None:
        """Scatter the mines at random, keeping the cell and its neighbours clear."""
        candidates = [
            (r, c)
            for r in range(self.rows)
            for c in range(self.cols)
            if (r, c) not in self._mines
            and not (abs(r - avoid_row) <= 1 and abs(c - avoid_col) <= 1)
        ]
        if self.mine_count > len(candidates):
            raise ValueError(
                f"cannot place {self.mine_count} mines in {len(candidates)} free cells"
            )
        self._mines.update(self._rng.sample(candidates, self.mine_count))

    def count(self, row: int, col: int) -> int:
        """Number of mines in the eight cells around the given one."""
        return sum(1 for cell in self._neighbours(row, col) if cell in self._mines)

    def is_mined(self, row: int, col: int) -> bool:
        self._check(row, col)
        return (row, col) in self._mines

    def open(self, row: int, col: int) -> None:
        self._check(row, col)
        self._opened.add((row, col))

    def is_opened(self, row: int, col: int) -> bool:
        self._check(row, col)
        return (row, col) in self._opened

    def toggle_flag(self, row: int, col: int) -> None:
        self._check(row, col)
        self._flags ^= {(row, col)}

    def is_flagged(self, row: int, col: int) -> bool:
        self._check(row, col)
        return (row, col) in self._flags

    def auto_release(self, row: int, col: int) -> int:
        """Open a cell, flooding outwards through cells with no adjacent mines.

        Returns the number of safe cells newly opened. Flagged cells are never
        opened; opening a mine opens it and returns 0.
        """
        if not self._in_bounds(row, col):
            return 0
        start = (row, col)
        if start in self._opened or start in self._flags:
            return 0
        self._opened.add(start)
        if start in self._mines:
            return 0
        opened = 1
        pending = [start] if self.count(row, col) == 0 else []
        while pending:
            r, c = pending.pop()
            for cell in self._neighbours(r, c):
                if cell in self._opened or cell in self._flags:
                    continue
                self._opened.add(cell)
                opened += 1
                if self.count(*cell) == 0:
                    pending.append(cell)
        return opened