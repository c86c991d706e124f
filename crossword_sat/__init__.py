"""Crossword solver backed by exchangeable SAT engines.

This package exposes the public API surface via:

- ``crossword_sat.engine.solver.solve_crossword``: one-call solve entry point.
- ``crossword_sat.engine.solver.CrosswordSolver``: configurable solver.
- ``crossword_sat.data.wordlist.load_word_list``: word list loading.
"""

from .engine.backends import BackendName
from .engine.solver import CrosswordSolver, SolveResult, SolverConfig, solve_crossword
from .data.wordlist import WordList, WordListConfig, load_word_list

__all__ = [
    "BackendName",
    "CrosswordSolver",
    "SolveResult",
    "SolverConfig",
    "solve_crossword",
    "WordList",
    "WordListConfig",
    "load_word_list",
]

__version__ = "0.1.0"
