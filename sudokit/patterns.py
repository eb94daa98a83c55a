"""Bit-mask helpers for reasoning about pencil-mark notes.

A cell's notes are an integer in which bit ``n`` is set when number ``n``
(1 through 9) is noted.
"""

from __future__ import annotations

from functools import reduce
from itertools import permutations
from operator import or_
from typing import Callable, Optional

NOTE_BITS = tuple(1 << n for n in range(1, 10))


def get_num_notes(cell: int) -> int:
    """Return how many of the numbers 1 through 9 are noted in ``cell``."""
    return sum(1 for bit in NOTE_BITS if cell & bit)


def get_twin_permutations(cell_notes: int) -> list[int]:
    """Return every ordered pair of notes in ``cell_notes`` as a two-bit mask."""
    masks = ((2 << i) | (2 << j) for i, j in permutations(range(9), 2))
    return [mask for mask in masks if cell_notes & mask == mask]


def get_triplet_permutations(notes_in_range: int) -> list[int]:
    """Return every ordered triple of notes in ``notes_in_range`` as a three-bit mask."""
    masks = ((2 << i) | (2 << j) | (2 << k) for i, j, k in permutations(range(9), 3))
    return [mask for mask in masks if notes_in_range & mask == mask]


def find_hidden_twin(
    twin_notes: int, get_cell: Callable[[int], Optional[int]]
) -> Optional[int]:
    """Return the only index whose cell holds both twin notes, if no other cell holds either.

    ``get_cell`` returns ``None`` for indexes that should be skipped.
    """
    other = None
    for i in range(9):
        cell = get_cell(i)
        if cell is None:
            continue
        if cell & twin_notes == twin_notes:
            if other is not None:
                return None
            other = i
        elif cell & twin_notes:
            return None
    return other


def find_hidden_triplets(
    triplet_notes: int, get_cell: Callable[[int], Optional[int]]
) -> Optional[tuple[int, int]]:
    """Return the two indexes holding any of the triplet notes, if exactly two do.

    ``get_cell`` returns ``None`` for indexes that should be skipped.
    """
    matches = []
    for i in range(9):
        cell = get_cell(i)
        if cell is not None and cell & triplet_notes:
            matches.append(i)
            if len(matches) > 2:
                return None
    return (matches[0], matches[1]) if len(matches) == 2 else None


def collect_notes_in_range(get_cell: Callable[[int], int]) -> int:
    """Return the union of the notes of the nine cells in a range."""
    return reduce(or_, map(get_cell, range(9)), 0)