"""Custom exception hierarchy for crossword solving."""


class CrosswordError(Exception):
    """Base exception for solver failures."""


class MalformedGrid(CrosswordError):
    """Raised when the grid text cannot be parsed into a rectangular grid."""


class UnknownBackend(CrosswordError):
    """Raised when a solver backend selector names no known engine."""


class WordListLoadError(CrosswordError):
    """Raised when the word list file cannot be read."""


class EngineFailure(CrosswordError):
    """Raised when a SAT engine fails internally.

    Distinct from an unsatisfiable formula: the engine could not decide.
    """


class InvariantViolation(CrosswordError):
    """Raised when a satisfying assignment breaks cell uniqueness.

    A correct backend never triggers this; it signals a defect.
    """
