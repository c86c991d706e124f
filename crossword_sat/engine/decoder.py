"""Turns a satisfying assignment back into a letter grid."""

from __future__ import annotations

from typing import AbstractSet, List

from ..core.constants import ALPHABET, BLOCK_CHAR
from ..core.exceptions import InvariantViolation
from ..core.models import Solution
from .grid import Grid
from .variables import VariableNumbering


def decode(grid: Grid, numbering: VariableNumbering, true_variables: AbstractSet[int]) -> Solution:
    """Read the letter of each fillable cell from ``true_variables``.

    Raises :class:`InvariantViolation` when a cell has no letter or more
    than one letter set, which a correct backend never produces.
    """

    rows: List[str] = []
    for r in range(grid.rows):
        letters: List[str] = []
        for c in range(grid.cols):
            if not grid.cell(r, c).is_fillable():
                letters.append(BLOCK_CHAR)
                continue
            chosen = [
                letter
                for letter, variable in zip(ALPHABET, numbering.cell_variables(r, c))
                if variable in true_variables
            ]
            if len(chosen) != 1:
                raise InvariantViolation(
                    f"Cell ({r},{c}) decoded to {len(chosen)} letters: {''.join(chosen) or '-'}"
                )
            letters.append(chosen[0])
        rows.append("".join(letters))
    return Solution(rows=tuple(rows))


def blocking_clause(grid: Grid, numbering: VariableNumbering, solution: Solution) -> List[int]:
    """Return the clause forbidding ``solution``: no cell keeps all its letters."""

    return [
        -numbering.letter_variable(r, c, solution.letter_at(r, c))
        for r, c in grid.fillable_cells()
    ]
