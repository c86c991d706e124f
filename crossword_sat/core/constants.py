"""Shared constants and enumerations for the crossword SAT solver."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


ALPHABET: str = "ABCDEFGHIJKLMNOPQRSTUVWXYZ"
ALPHABET_SIZE: int = len(ALPHABET)

BLANK_CHAR = "."
BLOCK_CHAR = "#"

MIN_SLOT_LENGTH = 2


class CellState(str, Enum):
    """All supported cell states in the grid."""

    BLANK = "BLANK"
    BLOCK = "BLOCK"
    PREFILLED = "PREFILLED"


class Direction(str, Enum):
    """Word directions supported by the grid."""

    ACROSS = "ACROSS"
    DOWN = "DOWN"


@dataclass(frozen=True)
class Bounds:
    """Simple rectangle bounds helper."""

    rows: int
    cols: int
