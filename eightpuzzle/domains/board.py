from __future__ import annotations
from dataclasses import dataclass
from typing import Iterator, Optional, Sequence, Tuple
import operator
import random
import re

from eightpuzzle.errors import InvalidMoveError, MalformedBoardError
from eightpuzzle.heuristics.manhattan import SIDE, manhattan

Cells = Tuple[int, ...]  # 9-length row-major tuple, 0 is blank
Move = Tuple[int, int]

# Blank moves in expansion order; the order decides ties between equal-f siblings.
MOVES: Tuple[Tuple[str, Move], ...] = (
    ("down", (1, 0)),
    ("up", (-1, 0)),
    ("right", (0, 1)),
    ("left", (0, -1)),
)


def _cell(v) -> int:
    # bool is an int subclass but never a tile
    if isinstance(v, bool):
        raise TypeError(v)
    return operator.index(v)


def _validate(cells: Sequence[int]) -> Cells:
    try:
        out = tuple(_cell(v) for v in cells)
    except TypeError as exc:
        raise MalformedBoardError(f"board cells must be integers, got {cells!r}") from exc
    if len(out) != SIDE * SIDE:
        raise MalformedBoardError(f"board needs {SIDE * SIDE} cells, got {len(out)}")
    if sorted(out) != list(range(SIDE * SIDE)):
        missing = sorted(set(range(SIDE * SIDE)) - set(out))
        raise MalformedBoardError(f"board must be a permutation of 0..8 (missing {missing}): {out}")
    return out


@dataclass(frozen=True)
class Board:
    """Immutable 3x3 grid. Build with `from_rows`, `from_flat` or `parse`."""
    cells: Cells

    def __post_init__(self):
        object.__setattr__(self, "cells", _validate(self.cells))

    # ---------- Construction ----------
    @classmethod
    def from_flat(cls, seq: Sequence[int]) -> "Board":
        return cls(tuple(seq))

    @classmethod
    def from_rows(cls, rows: Sequence[Sequence[int]]) -> "Board":
        rows = list(rows)
        if len(rows) != SIDE or any(len(r) != SIDE for r in rows):
            raise MalformedBoardError(f"board must be {SIDE}x{SIDE}, got {rows!r}")
        return cls(tuple(v for r in rows for v in r))

    @classmethod
    def parse(cls, text: str) -> "Board":
        """Parse nine integers separated by whitespace, commas or slashes."""
        tokens = [t for t in re.split(r"[\s,/;]+", text.strip()) if t]
        try:
            cells = tuple(int(t) for t in tokens)
        except ValueError as exc:
            raise MalformedBoardError(f"board cells must be integers, got {text!r}") from exc
        return cls(cells)

    # ---------- Views ----------
    @property
    def rows(self) -> Tuple[Tuple[int, ...], ...]:
        return tuple(self.cells[r * SIDE:(r + 1) * SIDE] for r in range(SIDE))

    @property
    def blank(self) -> Tuple[int, int]:
        return divmod(self.cells.index(0), SIDE)

    def is_goal(self) -> bool:
        return self.cells == GOAL_CELLS

    def find(self, value: int) -> Optional[Tuple[int, int]]:
        """Row-major scan for `value`; None when absent."""
        for idx, v in enumerate(self.cells):
            if v == value:
                return divmod(idx, SIDE)
        return None

    # ---------- Core dynamics ----------
    def apply_move(self, delta_row: int, delta_col: int) -> "Board":
        """Swap the blank with the cell at blank + delta.

        Raises InvalidMoveError if that cell is off the grid.
        """
        r, c = self.blank
        nr, nc = r + delta_row, c + delta_col
        if not (0 <= nr < SIDE and 0 <= nc < SIDE):
            raise InvalidMoveError(f"blank at {(r, c)} cannot move by {(delta_row, delta_col)}")
        i, j = r * SIDE + c, nr * SIDE + nc
        lst = list(self.cells)
        lst[i], lst[j] = lst[j], lst[i]
        return Board(tuple(lst))

    def successors(self) -> Iterator[Tuple[str, "Board"]]:
        """Yield (move_name, board) for each legal move, in MOVES order."""
        for name, (dr, dc) in MOVES:
            try:
                yield name, self.apply_move(dr, dc)
            except InvalidMoveError:
                continue

    def heuristic(self) -> int:
        return manhattan(self.cells)

    def is_solvable(self) -> bool:
        """Odd width: reachable from the goal iff the inversion count is even."""
        arr = [x for x in self.cells if x != 0]
        inv = 0
        for i in range(len(arr)):
            for j in range(i + 1, len(arr)):
                if arr[i] > arr[j]:
                    inv += 1
        return (inv % 2) == 0

    def __str__(self) -> str:
        lines = []
        for row in self.rows:
            lines.append("|" + "".join(" _ |" if v == 0 else f" {v} |" for v in row))
        return "\n".join(lines)


GOAL_CELLS: Cells = tuple(range(SIDE * SIDE))
GOAL = Board(GOAL_CELLS)


def as_board(obj) -> Board:
    """Accept a Board, a 3x3 nested sequence, a flat sequence of 9 or a string."""
    if isinstance(obj, Board):
        return obj
    if isinstance(obj, str):
        return Board.parse(obj)
    seq = list(obj)
    if seq and all(isinstance(r, (list, tuple)) for r in seq):
        return Board.from_rows(seq)
    return Board.from_flat(seq)


def scramble(depth: int, seed: int) -> Board:
    """Random walk of `depth` legal moves from GOAL, never undoing the previous move."""
    rng = random.Random(seed)
    board, prev = GOAL, None
    for _ in range(depth):
        cand = [b for _, b in board.successors() if b != prev]
        board, prev = rng.choice(cand), board
    return board
