"""CNF encoding of a crossword grid and its candidate words.

Clause families:

1. Cell totality: each fillable cell holds at least one letter.
2. Cell uniqueness: each fillable cell holds at most one letter.
3. Slot-word consistency: the letters along a slot spell one candidate.
   Chosen per slot, whichever needs fewer clauses:

   - direct: forbid every letter combination that spells no candidate
     (short slots only, the combination count grows as 26 ** length);
   - selector: one variable per candidate word, equivalent to the
     conjunction of its cell-letter variables, with exactly one selector
     true per slot.

4. Prefilled locking: a unit clause per prefilled cell.
"""

from __future__ import annotations

from dataclasses import dataclass
from itertools import combinations, product
from typing import List, Mapping, Optional, Sequence

from pysat.card import CardEnc, EncType

from ..core.constants import ALPHABET, ALPHABET_SIZE
from ..core.models import Slot
from ..utils.logger import get_logger
from .formula import CnfFormula
from .grid import Grid
from .variables import VariableNumbering

LOGGER = get_logger(__name__)


@dataclass
class EncoderConfig:
    """Thresholds steering the per-slot encoding choice."""

    direct_max_length: int = 2
    pairwise_limit: int = 32


class Encoder:
    """Builds the CNF formula for one grid and its per-slot candidates."""

    def __init__(
        self,
        grid: Grid,
        candidates: Mapping[int, Sequence[str]],
        config: Optional[EncoderConfig] = None,
    ) -> None:
        self.grid = grid
        self.candidates = candidates
        self.config = config or EncoderConfig()
        self.numbering = VariableNumbering(grid.rows, grid.cols)

    def encode(self) -> CnfFormula:
        formula = CnfFormula(num_vars=self.numbering.cell_variable_count)
        self._add_cell_totality(formula)
        self._add_cell_uniqueness(formula)
        for slot in self.grid.slots:
            self._add_slot_consistency(formula, slot, self.candidates.get(slot.index, ()))
        self._add_prefilled_locks(formula)
        LOGGER.info(
            "Encoded %dx%d grid: %d slots, %d variables, %d clauses",
            self.grid.rows,
            self.grid.cols,
            len(self.grid.slots),
            formula.num_vars,
            len(formula),
        )
        return formula

    # ------------------------------------------------------------------
    # Cell families
    # ------------------------------------------------------------------
    def _add_cell_totality(self, formula: CnfFormula) -> None:
        for row, col in self.grid.fillable_cells():
            formula.append(self.numbering.cell_variables(row, col))

    def _add_cell_uniqueness(self, formula: CnfFormula) -> None:
        for row, col in self.grid.fillable_cells():
            self._add_at_most_one(formula, self.numbering.cell_variables(row, col))

    def _add_prefilled_locks(self, formula: CnfFormula) -> None:
        for row, col, letter in self.grid.prefilled_cells():
            formula.append((self.numbering.letter_variable(row, col, letter),))

    # ------------------------------------------------------------------
    # Slot-word consistency
    # ------------------------------------------------------------------
    def _add_slot_consistency(self, formula: CnfFormula, slot: Slot, words: Sequence[str]) -> None:
        words = list(dict.fromkeys(words))
        if not words:
            # Permanently false selector: the formula becomes unsatisfiable.
            selector = formula.new_variable()
            formula.append((-selector,))
            formula.append((selector,))
            LOGGER.warning("Slot %s has no candidate; formula is unsatisfiable", slot.id)
            return

        if self._prefers_direct(slot, words):
            LOGGER.debug("Slot %s: direct encoding over %d candidates", slot.id, len(words))
            self._add_direct(formula, slot, words)
        else:
            LOGGER.debug("Slot %s: selector encoding over %d candidates", slot.id, len(words))
            self._add_selectors(formula, slot, words)

    def _prefers_direct(self, slot: Slot, words: Sequence[str]) -> bool:
        if slot.length > self.config.direct_max_length:
            return False
        direct_cost = ALPHABET_SIZE ** slot.length - len(words)
        count = len(words)
        if count <= self.config.pairwise_limit:
            at_most_one_cost = count * (count - 1) // 2
        else:
            at_most_one_cost = 3 * count
        selector_cost = count * (slot.length + 1) + 1 + at_most_one_cost
        return direct_cost <= selector_cost

    def _add_direct(self, formula: CnfFormula, slot: Slot, words: Sequence[str]) -> None:
        allowed = set(words)
        for letters in product(ALPHABET, repeat=slot.length):
            if "".join(letters) in allowed:
                continue
            formula.append(
                tuple(
                    -self.numbering.letter_variable(row, col, letter)
                    for (row, col), letter in zip(slot.cells, letters)
                )
            )

    def _add_selectors(self, formula: CnfFormula, slot: Slot, words: Sequence[str]) -> None:
        selectors: List[int] = []
        for word in words:
            selector = formula.new_variable()
            selectors.append(selector)
            letters = [
                self.numbering.letter_variable(row, col, letter)
                for (row, col), letter in zip(slot.cells, word)
            ]
            # selector <=> letters[0] & letters[1] & ...
            for literal in letters:
                formula.append((-selector, literal))
            formula.append(tuple(-literal for literal in letters) + (selector,))
        formula.append(selectors)
        self._add_at_most_one(formula, selectors)

    def _add_at_most_one(self, formula: CnfFormula, literals: Sequence[int]) -> None:
        if len(literals) < 2:
            return
        if len(literals) <= self.config.pairwise_limit:
            for first, second in combinations(literals, 2):
                formula.append((-first, -second))
            return
        encoded = CardEnc.atmost(
            lits=list(literals),
            bound=1,
            top_id=formula.num_vars,
            encoding=EncType.seqcounter,
        )
        formula.reserve(encoded.nv)
        formula.extend(encoded.clauses)


def encode(
    grid: Grid,
    candidates: Mapping[int, Sequence[str]],
    config: Optional[EncoderConfig] = None,
) -> CnfFormula:
    """Convenience wrapper around :class:`Encoder`."""

    return Encoder(grid, candidates, config).encode()
