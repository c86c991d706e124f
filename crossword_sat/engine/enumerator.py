"""Enumeration of distinct solutions through blocking clauses."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Iterator, List, Optional

from ..core.exceptions import EngineFailure
from ..core.models import Solution
from ..utils.logger import get_logger
from .backends import Satisfiable, SolverBackend
from .decoder import blocking_clause, decode
from .formula import CnfFormula
from .grid import Grid
from .variables import VariableNumbering

LOGGER = get_logger(__name__)


class EnumerationState(str, Enum):
    IDLE = "IDLE"
    SOLVING = "SOLVING"
    FOUND = "FOUND"
    EXHAUSTED = "EXHAUSTED"
    FAILED = "FAILED"


@dataclass
class EnumerationResult:
    solutions: List[Solution]
    state: EnumerationState
    error: Optional[EngineFailure] = None

    @property
    def ok(self) -> bool:
        return self.error is None


@dataclass
class SolutionEnumerator:
    """Owns one enumeration session over a private copy of the formula.

    Each round solves the formula, decodes the model and appends a clause
    blocking that exact filling before the next round.
    """

    grid: Grid
    formula: CnfFormula
    backend: SolverBackend
    state: EnumerationState = EnumerationState.IDLE
    error: Optional[EngineFailure] = None
    found: int = 0
    numbering: VariableNumbering = field(init=False)

    def __post_init__(self) -> None:
        self.formula = self.formula.copy()
        self.numbering = VariableNumbering(self.grid.rows, self.grid.cols)

    def iter_solutions(self) -> Iterator[Solution]:
        """Yield distinct solutions until the engine runs out or fails."""

        while self.state not in (EnumerationState.EXHAUSTED, EnumerationState.FAILED):
            self.state = EnumerationState.SOLVING
            try:
                result = self.backend.solve(self.formula)
            except EngineFailure as exc:
                LOGGER.warning("Round %d: engine failure: %s", self.found + 1, exc)
                self.state = EnumerationState.FAILED
                self.error = exc
                return
            if not isinstance(result, Satisfiable):
                LOGGER.info("Round %d: unsatisfiable, %d solutions found", self.found + 1, self.found)
                self.state = EnumerationState.EXHAUSTED
                return

            solution = decode(self.grid, self.numbering, result.true_variables)
            self.found += 1
            self.state = EnumerationState.FOUND
            LOGGER.info("Round %d: solution found", self.found)

            clause = blocking_clause(self.grid, self.numbering, solution)
            if clause:
                self.formula.append(clause)
            else:
                # No fillable cell: the only solution is the grid itself.
                self.state = EnumerationState.EXHAUSTED
            yield solution

    def run(self, count: int) -> EnumerationResult:
        """Collect up to ``count`` solutions."""

        if count < 0:
            raise ValueError("Solution count must not be negative")
        solutions: List[Solution] = []
        if count:
            for solution in self.iter_solutions():
                solutions.append(solution)
                if len(solutions) >= count:
                    break
        return EnumerationResult(solutions=solutions, state=self.state, error=self.error)
