# sudokit

Building blocks for Sudoku programs in plain Python: an immutable 9x9 board,
pencil-mark notes with the patterns people use to solve puzzles (single
candidates, lone rangers, twins, triplets, hidden twins and hidden
triplets), and a small flex layout engine for arranging game screens.

## Installation

```
pip install sudokit
```

It needs Python 3.10 or later and has no runtime dependencies.

## Coordinates

`sudokit.grid_math` converts between `(x, y)` coordinates and the linear
positions 0 to 80 used throughout the package. Out-of-range values raise
`ValueError`.

```python
from sudokit.grid_math import get_pos, get_x_and_y_from_pos, get_block_offset

get_pos(4, 2)              # 22
get_x_and_y_from_pos(22)   # (4, 2)
get_block_offset(7)        # 6
```

## Boards

`sudokit.board.Sudoku` holds 81 cells, each `None` or a number from 1 to 9.
Boards are immutable: `set`, `unset` and `unset_by_pos` return new boards.

```python
from sudokit.board import Sudoku

board = Sudoku.tutorial()
print(board)               # nine lines of digits, 0 for empty cells
board.get(1, 0)            # 2
board.may_set(0, 0, 3)     # does 3 fit without a conflict?
filled = board.set(0, 0, 3)
filled.unset(0, 0) == board
board.is_solved()          # False
```

## Notes

`sudokit.notes.Notes` keeps the pencil marks of every cell as a bit mask in
which bit `n` stands for number `n`. `Notes.from_sudoku` notes every number
that fits in each empty cell.

```python
from sudokit.board import Sudoku
from sudokit.notes import Notes

notes = Notes.from_sudoku(Sudoku.tutorial())
notes.has(0, 0, 3)
notes.toggle(0, 0, 3)

for pos in range(81):
    n = notes.get_only_number(pos) or notes.get_lone_ranger(pos)
    if n is not None:
        print("cell", pos, "must be", n)
        break

twins = notes.find_twins(10)
if twins is not None:
    notes.remove_all_notes_affected_by_twins(twins)
```

`find_twins`, `find_triplets`, `find_hidden_twins` and `find_hidden_triplets`
return `Twins` or `Triplets` records (or `None`);
`remove_all_notes_affected_by_twins` and
`remove_all_notes_affected_by_triplets` strike the notes those patterns rule
out and report whether anything changed. `remove_all_notes_affected_by_set`
clears what filling in a number rules out, and `get_cleared_since` lists the
notes that disappeared compared with an earlier copy (see `Notes.copy`).

The bit-mask helpers behind these, such as `get_num_notes`,
`get_twin_permutations` and `find_hidden_twin`, live in `sudokit.patterns`.

## Utilities

```python
from sudokit.utils import format_time, ensure_sudoku_dir

format_time(125)           # "2:05"
ensure_sudoku_dir()        # ~/.sudoku, created if needed
```

If `~/.sudoku` cannot be created, `ensure_sudoku_dir` logs a warning and
returns the home directory instead.

## Layout

`sudokit.ui.values` provides `Val` sizes (`Val.pixel`, `Val.percent`,
`Val.cross_percent`, `Val.vmin`, `Val.vmax`, `Val.auto`, and sums and
differences that become `Val.calc` expressions), together with `Size`,
`Sides`, `FlexDirection` and `Alignment`. `sudokit.ui.flex` defines
`FlexItemStyle` and `FlexContainerStyle`; `sudokit.ui.geometry` defines
`Transform` and `ComputedPosition`.

`sudokit.ui.layout.layout` places a tree of `LayoutNode`s inside each
`Screen`, writing every node's `transform` and `computed_position`:

```python
from sudokit.ui.flex import FlexContainerStyle, FlexItemStyle
from sudokit.ui.layout import LayoutNode, Screen, layout
from sudokit.ui.values import Val

header = LayoutNode(item_style=FlexItemStyle.fixed_size(Val.percent(100), Val.pixel(60)))
body = LayoutNode(item_style=FlexItemStyle.available_size())
root = LayoutNode(container_style=FlexContainerStyle.column(), children=[header, body])

layout([Screen(state="main", width=800, height=600, root=root)])
body.computed_position     # area of the body in screen coordinates
```

Styles may carry `dynamic_styles`, callables that adjust a copy of the style
at layout time given the screen's `resources`.

## What is not included

The package does not solve whole puzzles, rate their difficulty, generate
new ones, keep score or save games; it offers the board, the note-based
solving steps and the layout pieces from which such a program can be built.
It does not draw anything or handle input either: the layout only computes
positions and transforms.

## Tests

```
pip install -e ".[test]"
pytest
```