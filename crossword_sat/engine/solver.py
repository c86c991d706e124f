"""Solve entry point: grid text + word list in, solved grid texts out."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Optional, Union

from ..core.exceptions import EngineFailure
from ..data.wordlist import WordList, filter_candidates
from ..utils.logger import get_logger
from .backends import BackendName, SolverBackend, get_backend
from .encoder import Encoder, EncoderConfig
from .enumerator import EnumerationState, SolutionEnumerator
from .grid import Grid, parse_grid

LOGGER = get_logger(__name__)


@dataclass
class SolverConfig:
    """Configuration values driving one solve call."""

    backend: Union[BackendName, str] = BackendName.CADICAL
    solution_count: int = 1
    encoder: EncoderConfig = field(default_factory=EncoderConfig)


@dataclass
class SolveResult:
    grids: List[str]
    state: EnumerationState
    error: Optional[EngineFailure] = None

    @property
    def exhausted(self) -> bool:
        return self.state == EnumerationState.EXHAUSTED

    @property
    def failed(self) -> bool:
        return self.state == EnumerationState.FAILED


class CrosswordSolver:
    """Wires parsing, filtering, encoding and enumeration together."""

    def __init__(self, config: Optional[SolverConfig] = None) -> None:
        self.config = config or SolverConfig()
        if self.config.solution_count < 0:
            raise ValueError("solution_count must not be negative")
        # Unknown selectors fail here, before any grid is parsed.
        self.backend: SolverBackend = get_backend(self.config.backend)

    def enumerator(self, grid_text: str, words: Iterable[str]) -> SolutionEnumerator:
        """Build an idle enumeration session for ``grid_text``."""

        grid = parse_grid(grid_text)
        word_list = words if isinstance(words, WordList) else WordList(words)
        candidates = self.candidates(grid, word_list)
        formula = Encoder(grid, candidates, self.config.encoder).encode()
        return SolutionEnumerator(grid=grid, formula=formula, backend=self.backend)

    @staticmethod
    def candidates(grid: Grid, word_list: WordList) -> Dict[int, List[str]]:
        candidates: Dict[int, List[str]] = {}
        for slot in grid.slots:
            candidates[slot.index] = filter_candidates(slot, grid, word_list)
            LOGGER.debug("Slot %s: %d candidates", slot.id, len(candidates[slot.index]))
        return candidates

    def solve(self, grid_text: str, words: Iterable[str]) -> SolveResult:
        session = self.enumerator(grid_text, words)
        result = session.run(self.config.solution_count)
        LOGGER.info(
            "Solve finished with %d/%d solutions (%s)",
            len(result.solutions),
            self.config.solution_count,
            result.state.value,
        )
        return SolveResult(
            grids=[solution.to_text() for solution in result.solutions],
            state=result.state,
            error=result.error,
        )


def solve_crossword(
    grid_text: str,
    words: Iterable[str],
    backend: Union[BackendName, str] = BackendName.CADICAL,
    count: int = 1,
) -> SolveResult:
    """Solve ``grid_text`` with ``words``, returning up to ``count`` grids."""

    config = SolverConfig(backend=backend, solution_count=count)
    return CrosswordSolver(config).solve(grid_text, words)
