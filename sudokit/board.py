"""The immutable Sudoku board."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from sudokit.grid_math import NUM_CELLS, get_block_offset, get_pos, get_x_and_y_from_pos

Cell = Optional[int]
"""A single cell, which either holds a number from 1 through 9 or ``None``."""


def _check_number(n: object) -> None:
    if not isinstance(n, int) or isinstance(n, bool) or not 1 <= n <= 9:
        raise ValueError(f"number must be an integer from 1 through 9, got {n!r}")


def _peers_of(pos: int) -> tuple[int, ...]:
    x, y = get_x_and_y_from_pos(pos)
    bx, by = get_block_offset(x), get_block_offset(y)
    peers = {get_pos(i, y) for i in range(9)}
    peers |= {get_pos(x, i) for i in range(9)}
    peers |= {get_pos(bx + i % 3, by + i // 3) for i in range(9)}
    peers.discard(pos)
    return tuple(sorted(peers))


_PEERS = tuple(_peers_of(pos) for pos in range(NUM_CELLS))


@dataclass(frozen=True)
class Sudoku:
    """All 81 cells of a Sudoku board, in row-major order."""

    cells: tuple[Cell, ...] = (None,) * NUM_CELLS

    def __post_init__(self) -> None:
        cells = tuple(self.cells)
        if len(cells) != NUM_CELLS:
            raise ValueError(f"a Sudoku needs exactly 81 cells, got {len(cells)}")
        for cell in cells:
            if cell is not None:
                _check_number(cell)
        object.__setattr__(self, "cells", cells)

    @classmethod
    def _trusted(cls, cells: tuple[Cell, ...]) -> Sudoku:
        board = object.__new__(cls)
        object.__setattr__(board, "cells", cells)
        return board

    def get(self, x: int, y: int) -> Cell:
        """Return the value of the cell at the given coordinates."""
        return self.cells[get_pos(x, y)]

    def get_by_pos(self, pos: int) -> Cell:
        """Return the value of the cell at the given linear position."""
        if not 0 <= pos < NUM_CELLS:
            raise ValueError(f"pos must be between 0 and 80, got {pos!r}")
        return self.cells[pos]

    def has(self, x: int, y: int) -> bool:
        """Return whether the cell at the given coordinates holds a number."""
        return self.cells[get_pos(x, y)] is not None

    def is_solved(self) -> bool:
        """Return whether every cell is filled in without conflicts."""
        return all(
            n is not None and all(self.cells[p] != n for p in _PEERS[pos])
            for pos, n in enumerate(self.cells)
        )

    def may_set(self, x: int, y: int, n: int) -> bool:
        """Return whether ``n`` fits at ``x``, ``y`` without a conflict in its row, column or block."""
        _check_number(n)
        pos = get_pos(x, y)
        return all(self.cells[p] != n for p in _PEERS[pos])

    def set(self, x: int, y: int, n: int) -> Sudoku:
        """Return a new board with ``n`` filled in at the given coordinates."""
        _check_number(n)
        cells = list(self.cells)
        cells[get_pos(x, y)] = n
        return Sudoku._trusted(tuple(cells))

    def unset(self, x: int, y: int) -> Sudoku:
        """Return a new board with the cell at the given coordinates cleared."""
        return self.unset_by_pos(get_pos(x, y))

    def unset_by_pos(self, pos: int) -> Sudoku:
        """Return a new board with the cell at the given position cleared."""
        if not 0 <= pos < NUM_CELLS:
            raise ValueError(f"pos must be between 0 and 80, got {pos!r}")
        cells = list(self.cells)
        cells[pos] = None
        return Sudoku._trusted(tuple(cells))

    @classmethod
    def tutorial(cls) -> Sudoku:
        """Return the starting board used by the tutorial."""
        return cls._trusted(_TUTORIAL_CELLS)

    def __str__(self) -> str:
        rows = (self.cells[start:start + 9] for start in range(0, NUM_CELLS, 9))
        return "\n".join(" ".join(str(cell or 0) for cell in row) for row in rows)


_TUTORIAL_ROWS = (
    "020070910",
    "009100407",
    "071050800",
    "802501000",
    "903000045",
    "450020001",
    "700804020",
    "000007594",
    "040395000",
)

_TUTORIAL_CELLS: tuple[Cell, ...] = tuple(
    int(ch) or None for row in _TUTORIAL_ROWS for ch in row
)