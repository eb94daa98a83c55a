"""Pencil-mark notes for every cell of a Sudoku board, and the patterns found in them."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, Iterable, Optional

from sudokit.board import Sudoku
from sudokit.grid_math import NUM_CELLS, get_block_offset, get_pos, get_x_and_y_from_pos
from sudokit.patterns import (
    NOTE_BITS,
    collect_notes_in_range,
    find_hidden_triplets,
    find_hidden_twin,
    get_num_notes,
    get_triplet_permutations,
    get_twin_permutations,
)

_MAX_CELL = 0xFFFF


def _validate_number(n: object) -> int:
    if not isinstance(n, int) or isinstance(n, bool) or not 1 <= n <= 9:
        raise ValueError(f"number must be an integer from 1 through 9, got {n!r}")
    return n


@dataclass(frozen=True)
class Twins:
    """Two cells in range of one another that share the same two notes."""

    x1: int
    y1: int
    x2: int
    y2: int
    twin_notes: int


@dataclass(frozen=True)
class Triplets:
    """Three cells in range of one another that share the same three notes."""

    x1: int
    y1: int
    x2: int
    y2: int
    x3: int
    y3: int
    triplet_notes: int


def _cell_mask(points: Iterable[tuple[int, int]]) -> set[tuple[int, int]]:
    return set(points)


@dataclass
class Notes:
    """The notes of all 81 cells, each stored as a bit mask with bit ``n`` for number ``n``."""

    cells: list[int] = field(default_factory=lambda: [0] * NUM_CELLS)

    def __post_init__(self) -> None:
        cells = list(self.cells)
        if len(cells) != NUM_CELLS:
            raise ValueError(f"notes need exactly 81 cells, got {len(cells)}")
        for cell in cells:
            if not isinstance(cell, int) or isinstance(cell, bool) or not 0 <= cell <= _MAX_CELL:
                raise ValueError(f"a cell's notes must be an integer from 0 through 65535, got {cell!r}")
        self.cells = cells

    @classmethod
    def from_sudoku(cls, sudoku: Sudoku) -> Notes:
        """Return notes holding every number that fits in each empty cell of ``sudoku``."""
        notes = cls()
        for y in range(9):
            for x in range(9):
                if sudoku.has(x, y):
                    continue
                for n in range(1, 10):
                    if sudoku.may_set(x, y, n):
                        notes.set(x, y, n)
        return notes

    def copy(self) -> Notes:
        """Return an independent copy of these notes."""
        return Notes(list(self.cells))

    def clear(self, x: int, y: int) -> None:
        """Remove every note from the cell at the given coordinates."""
        self.cells[get_pos(x, y)] = 0

    def get_cell(self, x: int, y: int) -> int:
        """Return the raw note mask of the cell at the given coordinates."""
        return self.cells[get_pos(x, y)]

    def find_twins(self, pos: int) -> Optional[Twins]:
        """Return the twins the cell at ``pos`` belongs to, if any."""
        x1, y1 = get_x_and_y_from_pos(pos)
        twin_notes = self.cells[pos]
        if get_num_notes(twin_notes) != 2:
            return None

        bx, by = get_block_offset(x1), get_block_offset(y1)
        for i in range(9):
            if i != x1 and self.get_cell(i, y1) == twin_notes:
                return Twins(x1, y1, i, y1, twin_notes)
            if i != y1 and self.get_cell(x1, i) == twin_notes:
                return Twins(x1, y1, x1, i, twin_notes)
            block_x, block_y = bx + i % 3, by + i // 3
            if (block_x, block_y) != (x1, y1) and self.get_cell(block_x, block_y) == twin_notes:
                return Twins(x1, y1, block_x, block_y, twin_notes)
        return None

    def find_triplets(self, pos: int) -> Optional[Triplets]:
        """Return the triplets the cell at ``pos`` belongs to, if any."""
        x1, y1 = get_x_and_y_from_pos(pos)
        notes = self.cells[pos]
        if get_num_notes(notes) != 3:
            return None

        bx, by = get_block_offset(x1), get_block_offset(y1)
        for i in range(9):
            for j in range(9):
                if i == j:
                    continue
                if (
                    x1 not in (i, j)
                    and self.get_cell(i, y1) == notes
                    and self.get_cell(j, y1) == notes
                ):
                    return Triplets(x1, y1, i, y1, j, y1, notes)
                if (
                    y1 not in (i, j)
                    and self.get_cell(x1, i) == notes
                    and self.get_cell(x1, j) == notes
                ):
                    return Triplets(x1, y1, x1, i, x1, j, notes)
                first = (bx + i % 3, by + i // 3)
                second = (bx + j % 3, by + j // 3)
                if (
                    first != (x1, y1)
                    and second != (x1, y1)
                    and self.get_cell(*first) == notes
                    and self.get_cell(*second) == notes
                ):
                    return Triplets(x1, y1, *first, *second, notes)
        return None

    def _row_getter(self, x1: int, y1: int) -> Callable[[int], Optional[int]]:
        return lambda i: self.get_cell(i, y1) if i != x1 else None

    def _column_getter(self, x1: int, y1: int) -> Callable[[int], Optional[int]]:
        return lambda i: self.get_cell(x1, i) if i != y1 else None

    def _block_getter(self, x1: int, y1: int) -> Callable[[int], Optional[int]]:
        bx, by = get_block_offset(x1), get_block_offset(y1)

        def get(i: int) -> Optional[int]:
            block_x, block_y = bx + i % 3, by + i // 3
            if (block_x, block_y) == (x1, y1):
                return None
            return self.get_cell(block_x, block_y)

        return get

    def find_hidden_twins(self, pos: int) -> Optional[Twins]:
        """Return hidden twins the cell at ``pos`` belongs to, if any.

        Regular twins are not reported.
        """
        x1, y1 = get_x_and_y_from_pos(pos)
        cell_notes = self.cells[pos]
        if get_num_notes(cell_notes) <= 2:
            return None

        bx, by = get_block_offset(x1), get_block_offset(y1)
        row = self._row_getter(x1, y1)
        column = self._column_getter(x1, y1)
        block = self._block_getter(x1, y1)
        for twin_notes in get_twin_permutations(cell_notes):
            x2 = find_hidden_twin(twin_notes, row)
            if x2 is not None:
                return Twins(x1, y1, x2, y1, twin_notes)
            y2 = find_hidden_twin(twin_notes, column)
            if y2 is not None:
                return Twins(x1, y1, x1, y2, twin_notes)
            i = find_hidden_twin(twin_notes, block)
            if i is not None:
                return Twins(x1, y1, bx + i % 3, by + i // 3, twin_notes)
        return None

    def find_hidden_triplets(self, pos: int) -> Optional[Triplets]:
        """Return hidden triplets the cell at ``pos`` belongs to, if any."""
        x1, y1 = get_x_and_y_from_pos(pos)
        if get_num_notes(self.cells[pos]) < 2:
            return None

        notes_in_row = collect_notes_in_range(lambda i: self.get_cell(i, y1))
        row = self._row_getter(x1, y1)
        for triplet_notes in get_triplet_permutations(notes_in_row):
            found = find_hidden_triplets(triplet_notes, row)
            if found is not None:
                x2, x3 = found
                return Triplets(x1, y1, x2, y1, x3, y1, triplet_notes)

        notes_in_column = collect_notes_in_range(lambda i: self.get_cell(x1, i))
        column = self._column_getter(x1, y1)
        for triplet_notes in get_triplet_permutations(notes_in_column):
            found = find_hidden_triplets(triplet_notes, column)
            if found is not None:
                y2, y3 = found
                return Triplets(x1, y1, x1, y2, x1, y3, triplet_notes)

        bx, by = get_block_offset(x1), get_block_offset(y1)
        notes_in_block = collect_notes_in_range(
            lambda i: self.get_cell(bx + i % 3, by + i // 3)
        )
        block = self._block_getter(x1, y1)
        for triplet_notes in get_triplet_permutations(notes_in_block):
            found = find_hidden_triplets(triplet_notes, block)
            if found is not None:
                i, j = found
                return Triplets(
                    x1, y1,
                    bx + i % 3, by + i // 3,
                    bx + j % 3, by + j // 3,
                    triplet_notes,
                )
        return None

    def get_cleared_since(self, other: Notes) -> list[tuple[int, int, int]]:
        """Return ``(x, y, n)`` for notes present in ``other`` but absent here."""
        cleared = []
        for pos, (current_cell, other_cell) in enumerate(zip(self.cells, other.cells)):
            if current_cell == other_cell:
                continue
            for n in range(1, 9):
                bit = 1 << n
                if other_cell & bit and not current_cell & bit:
                    x, y = get_x_and_y_from_pos(pos)
                    cleared.append((x, y, n))
        return cleared

    def get_lone_ranger(self, pos: int) -> Optional[int]:
        """Return a number noted at ``pos`` that no other cell in its row, column or block holds."""
        x, y = get_x_and_y_from_pos(pos)
        row = self._row_getter(x, y)
        column = self._column_getter(x, y)
        block = self._block_getter(x, y)

        def busted(get: Callable[[int], Optional[int]], bit: int) -> bool:
            return any((cell := get(i)) is not None and cell & bit for i in range(9))

        for n, bit in enumerate(NOTE_BITS, start=1):
            if not self.cells[pos] & bit:
                continue
            if busted(row, bit) and busted(column, bit) and busted(block, bit):
                continue
            return n
        return None

    def get_only_number(self, pos: int) -> Optional[int]:
        """Return the number at ``pos`` if it is the only note there."""
        get_x_and_y_from_pos(pos)
        cell = self.cells[pos]
        if cell in NOTE_BITS:
            return NOTE_BITS.index(cell) + 1
        return None

    def has(self, x: int, y: int, n: int) -> bool:
        """Return whether ``n`` is noted in the cell at the given coordinates."""
        bit = 1 << _validate_number(n)
        return self.get_cell(x, y) & bit == bit

    def has_notes(self) -> bool:
        """Return whether any cell has a note."""
        return any(self.cells)

    def has_some_number(self, pos: int) -> bool:
        """Return whether the cell at ``pos`` has any note."""
        get_x_and_y_from_pos(pos)
        return self.cells[pos] != 0

    def remove_all_notes_affected_by_set(self, x: int, y: int, n: int) -> None:
        """Remove the notes that filling in ``n`` at ``x``, ``y`` rules out."""
        _validate_number(n)
        bx, by = get_block_offset(x), get_block_offset(y)
        for i in range(9):
            self.unset(x, y, i + 1)
            self.unset(i, y, n)
            self.unset(x, i, n)
            self.unset(bx + i % 3, by + i // 3, n)

    def _eliminate(self, cells: Iterable[tuple[int, int]], members: set[tuple[int, int]], mask: int) -> bool:
        eliminated = False
        for cx, cy in cells:
            to_eliminate = ~mask if (cx, cy) in members else mask
            pos = get_pos(cx, cy)
            if self.cells[pos] & to_eliminate:
                self.cells[pos] &= ~to_eliminate
                eliminated = True
        return eliminated

    def _eliminate_for_group(self, points: list[tuple[int, int]], mask: int) -> bool:
        members = _cell_mask(points)
        (x1, y1), rest = points[0], points[1:]
        eliminated = False

        if all(px == x1 for px, _ in rest):
            eliminated |= self._eliminate(((x1, y) for y in range(9)), members, mask)
        elif all(py == y1 for _, py in rest):
            eliminated |= self._eliminate(((x, y1) for x in range(9)), members, mask)

        bx, by = get_block_offset(x1), get_block_offset(y1)
        if all(get_block_offset(px) == bx and get_block_offset(py) == by for px, py in rest):
            block = ((bx + i % 3, by + i // 3) for i in range(9))
            eliminated |= self._eliminate(block, members, mask)
        return eliminated

    def remove_all_notes_affected_by_twins(self, twins: Twins) -> bool:
        """Remove the notes that (hidden) twins rule out; return whether any were removed."""
        points = [(twins.x1, twins.y1), (twins.x2, twins.y2)]
        return self._eliminate_for_group(points, twins.twin_notes)

    def remove_all_notes_affected_by_triplets(self, triplets: Triplets) -> bool:
        """Remove the notes that (hidden) triplets rule out; return whether any were removed."""
        points = [
            (triplets.x1, triplets.y1),
            (triplets.x2, triplets.y2),
            (triplets.x3, triplets.y3),
        ]
        return self._eliminate_for_group(points, triplets.triplet_notes)

    def set(self, x: int, y: int, n: int) -> None:
        """Add ``n`` to the notes of the cell at the given coordinates."""
        self.cells[get_pos(x, y)] |= 1 << _validate_number(n)

    def toggle(self, x: int, y: int, n: int) -> None:
        """Add ``n`` to the cell's notes if absent, remove it otherwise."""
        if self.has(x, y, n):
            self.unset(x, y, n)
        else:
            self.set(x, y, n)

    def unset(self, x: int, y: int, n: int) -> None:
        """Remove ``n`` from the notes of the cell at the given coordinates."""
        self.cells[get_pos(x, y)] &= ~(1 << _validate_number(n))