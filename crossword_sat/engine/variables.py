"""Translation between (cell, letter) pairs and SAT variable ids.

Cell variables come first in the model::

    variable(row, col, letter) = row * cols * 26 + col * 26 + letter + 1

so ``(0, 0, 'A')`` is 1, ``(0, 0, 'Z')`` is 26 and ``(0, 1, 'A')`` is 27.
Ids of block cells are reserved but never referenced by any clause.
Auxiliary variables created by the encoder start after
:attr:`VariableNumbering.cell_variable_count`.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Tuple

from ..core.constants import ALPHABET, ALPHABET_SIZE


@dataclass(frozen=True)
class VariableNumbering:
    """Stateless mapping derived from the grid dimensions only."""

    rows: int
    cols: int

    @property
    def cell_variable_count(self) -> int:
        return self.rows * self.cols * ALPHABET_SIZE

    def variable(self, row: int, col: int, letter_index: int) -> int:
        return (row * self.cols + col) * ALPHABET_SIZE + letter_index + 1

    def letter_variable(self, row: int, col: int, letter: str) -> int:
        return self.variable(row, col, ALPHABET.index(letter))

    def cell_variables(self, row: int, col: int) -> List[int]:
        first = self.variable(row, col, 0)
        return list(range(first, first + ALPHABET_SIZE))

    def is_cell_variable(self, variable: int) -> bool:
        return 1 <= variable <= self.cell_variable_count

    def describe(self, variable: int) -> Tuple[int, int, str]:
        """Return the ``(row, col, letter)`` encoded by a cell variable."""

        if not self.is_cell_variable(variable):
            raise ValueError(f"Variable {variable} is not a cell variable")
        cell, letter = divmod(variable - 1, ALPHABET_SIZE)
        row, col = divmod(cell, self.cols)
        return row, col, ALPHABET[letter]
