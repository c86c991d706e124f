"""Data models supporting the crossword solver."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional, Tuple

from .constants import BLANK_CHAR, BLOCK_CHAR, CellState, Direction


@dataclass(frozen=True)
class Cell:
    """Represents a grid cell and its optional prefilled letter."""

    state: CellState = CellState.BLANK
    letter: Optional[str] = None

    def is_fillable(self) -> bool:
        return self.state != CellState.BLOCK

    def symbol(self) -> str:
        if self.state == CellState.BLOCK:
            return BLOCK_CHAR
        if self.state == CellState.PREFILLED:
            return self.letter or BLANK_CHAR
        return BLANK_CHAR


@dataclass
class Slot:
    """A maximal run of fillable cells, i.e. one crossword entry."""

    index: int
    start_row: int
    start_col: int
    direction: Direction
    length: int
    _cells: Optional[List[Tuple[int, int]]] = field(default=None, repr=False, compare=False)

    @property
    def id(self) -> str:
        prefix = "AC" if self.direction == Direction.ACROSS else "DN"
        return f"{prefix}_{self.start_row}_{self.start_col}"

    @property
    def cells(self) -> List[Tuple[int, int]]:
        if self._cells is None:
            if self.direction == Direction.ACROSS:
                self._cells = [(self.start_row, self.start_col + i) for i in range(self.length)]
            else:
                self._cells = [(self.start_row + i, self.start_col) for i in range(self.length)]
        return self._cells


@dataclass(frozen=True)
class Solution:
    """A filled grid: one letter per fillable cell, ``#`` for blocks."""

    rows: Tuple[str, ...]

    def letter_at(self, row: int, col: int) -> str:
        return self.rows[row][col]

    def to_text(self) -> str:
        return "\n".join(self.rows)

    def __str__(self) -> str:
        return self.to_text()
