"""Grid representation and the text grid parser."""

from __future__ import annotations

from typing import Iterator, List, Sequence, Tuple

from ..core.constants import (
    ALPHABET,
    BLANK_CHAR,
    BLOCK_CHAR,
    MIN_SLOT_LENGTH,
    Bounds,
    CellState,
    Direction,
)
from ..core.exceptions import MalformedGrid
from ..core.models import Cell, Slot
from ..utils.logger import get_logger


LOGGER = get_logger(__name__)


class Grid:
    """Immutable crossword grid with its derived slots."""

    def __init__(self, cells: Sequence[Sequence[Cell]]) -> None:
        if not cells or not cells[0]:
            raise MalformedGrid("Grid must have at least one row and one column")
        width = len(cells[0])
        for index, row in enumerate(cells):
            if len(row) != width:
                raise MalformedGrid(
                    f"Inconsistent number of columns: row #{index} has {len(row)} "
                    f"columns but row #0 has {width}"
                )
        self.cells: Tuple[Tuple[Cell, ...], ...] = tuple(tuple(row) for row in cells)
        self.bounds = Bounds(rows=len(self.cells), cols=width)
        self.slots: List[Slot] = self._enumerate_slots()

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------
    @property
    def rows(self) -> int:
        return self.bounds.rows

    @property
    def cols(self) -> int:
        return self.bounds.cols

    def cell(self, row: int, col: int) -> Cell:
        return self.cells[row][col]

    def fillable_cells(self) -> Iterator[Tuple[int, int]]:
        """Yield the coordinates of every non-block cell, row-major."""

        for r in range(self.rows):
            for c in range(self.cols):
                if self.cells[r][c].is_fillable():
                    yield r, c

    def prefilled_cells(self) -> Iterator[Tuple[int, int, str]]:
        for r, c in self.fillable_cells():
            cell = self.cells[r][c]
            if cell.state == CellState.PREFILLED and cell.letter:
                yield r, c, cell.letter

    def pattern(self, slot: Slot) -> List[str | None]:
        """Return the prefilled letters along ``slot``, ``None`` for blanks."""

        return [self.cells[r][c].letter for r, c in slot.cells]

    def to_text(self) -> str:
        return "\n".join("".join(cell.symbol() for cell in row) for row in self.cells)

    # ------------------------------------------------------------------
    # Slot detection
    # ------------------------------------------------------------------
    def _enumerate_slots(self) -> List[Slot]:
        slots: List[Slot] = []
        # Across
        for r in range(self.rows):
            for start, length in self._runs([self.cells[r][c] for c in range(self.cols)]):
                slots.append(Slot(len(slots), r, start, Direction.ACROSS, length))
        # Down
        for c in range(self.cols):
            for start, length in self._runs([self.cells[r][c] for r in range(self.rows)]):
                slots.append(Slot(len(slots), start, c, Direction.DOWN, length))
        LOGGER.debug("Detected %d slots in %dx%d grid", len(slots), self.rows, self.cols)
        return slots

    @staticmethod
    def _runs(line: Sequence[Cell]) -> Iterator[Tuple[int, int]]:
        start = 0
        for index, cell in enumerate(list(line) + [Cell(CellState.BLOCK)]):
            if cell.is_fillable():
                continue
            if index - start >= MIN_SLOT_LENGTH:
                yield start, index - start
            start = index + 1


def parse_grid(text: str) -> Grid:
    """Parse a grid text into a :class:`Grid`.

    Rows are separated by ``\\n``; ``.`` is a blank cell, ``#`` a block and
    any letter from ``A`` to ``Z`` a prefilled cell. A single trailing
    newline is ignored.
    """

    if text.endswith("\n"):
        text = text[:-1]
    if not text:
        raise MalformedGrid("Grid text is empty")

    cells: List[List[Cell]] = []
    for row_index, line in enumerate(text.split("\n")):
        row: List[Cell] = []
        for col_index, char in enumerate(line):
            if char == BLANK_CHAR:
                row.append(Cell(CellState.BLANK))
            elif char == BLOCK_CHAR:
                row.append(Cell(CellState.BLOCK))
            elif char in ALPHABET:
                row.append(Cell(CellState.PREFILLED, char))
            else:
                raise MalformedGrid(
                    f"Invalid value at row #{row_index}, column #{col_index}: {char!r}"
                )
        cells.append(row)
    return Grid(cells)
