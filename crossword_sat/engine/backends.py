"""Exchangeable SAT engines behind a single ``solve(formula)`` interface.

Every backend builds a fresh engine from the whole formula on each call, so
the result depends on the clauses alone. Engines are run single-threaded
with fixed seeds, which keeps repeated enumeration sessions reproducible.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Dict, FrozenSet, List, Union

from ortools.sat.python import cp_model
from pysat.solvers import Solver

from ..core.exceptions import EngineFailure, UnknownBackend
from ..utils.logger import get_logger
from .formula import CnfFormula

LOGGER = get_logger(__name__)


class BackendName(str, Enum):
    """Selectable SAT engines."""

    CADICAL = "cadical"
    GLUCOSE = "glucose"
    MINISAT = "minisat"
    CPSAT = "cpsat"


@dataclass(frozen=True)
class Satisfiable:
    """A model of the formula, given as the set of variables set to true."""

    true_variables: FrozenSet[int]


@dataclass(frozen=True)
class Unsatisfiable:
    """The formula has no model."""


UNSATISFIABLE = Unsatisfiable()

SatResult = Union[Satisfiable, Unsatisfiable]


class SolverBackend(ABC):
    """Capability interface implemented once per SAT engine."""

    name: BackendName

    @abstractmethod
    def solve(self, formula: CnfFormula) -> SatResult:
        """Decide ``formula``; raise :class:`EngineFailure` if the engine cannot."""


class PySatBackend(SolverBackend):
    """Backend over one of the engines bundled with PySAT."""

    def __init__(self, name: BackendName, engine: str) -> None:
        self.name = name
        self.engine = engine

    def solve(self, formula: CnfFormula) -> SatResult:
        clauses: List[List[int]] = [list(clause) for clause in formula]
        try:
            with Solver(name=self.engine, bootstrap_with=clauses) as solver:
                satisfiable = solver.solve()
                model = solver.get_model() if satisfiable else None
        except Exception as exc:
            raise EngineFailure(f"{self.engine} failed: {exc}") from exc

        if satisfiable is None:
            raise EngineFailure(f"{self.engine} returned no verdict")
        if not satisfiable:
            return UNSATISFIABLE
        if model is None:
            raise EngineFailure(f"{self.engine} reported SAT without a model")
        return Satisfiable(frozenset(literal for literal in model if literal > 0))


class CpSatBackend(SolverBackend):
    """Backend over OR-Tools CP-SAT, with clauses posted as boolean ORs."""

    name = BackendName.CPSAT

    def __init__(self, seed: int = 0) -> None:
        self.seed = seed

    def solve(self, formula: CnfFormula) -> SatResult:
        model = cp_model.CpModel()
        variables = [None] + [model.new_bool_var(f"x{index}") for index in range(1, formula.num_vars + 1)]
        for clause in formula:
            model.add_bool_or(
                [variables[literal] if literal > 0 else ~variables[-literal] for literal in clause]
            )

        solver = cp_model.CpSolver()
        solver.parameters.num_workers = 1
        solver.parameters.random_seed = self.seed
        try:
            status = solver.solve(model)
        except Exception as exc:
            raise EngineFailure(f"CP-SAT failed: {exc}") from exc

        if status in (cp_model.OPTIMAL, cp_model.FEASIBLE):
            return Satisfiable(
                frozenset(
                    index
                    for index in range(1, formula.num_vars + 1)
                    if solver.boolean_value(variables[index])
                )
            )
        if status == cp_model.INFEASIBLE:
            return UNSATISFIABLE
        raise EngineFailure(f"CP-SAT ended with status {solver.status_name(status)}")


_FACTORIES: Dict[BackendName, Callable[[], SolverBackend]] = {
    BackendName.CADICAL: lambda: PySatBackend(BackendName.CADICAL, "cadical195"),
    BackendName.GLUCOSE: lambda: PySatBackend(BackendName.GLUCOSE, "glucose4"),
    BackendName.MINISAT: lambda: PySatBackend(BackendName.MINISAT, "minisat22"),
    BackendName.CPSAT: CpSatBackend,
}


def get_backend(name: Union[BackendName, str]) -> SolverBackend:
    """Instantiate the backend registered under ``name``."""

    if isinstance(name, BackendName):
        key = name
    else:
        try:
            key = BackendName(str(name).strip().lower())
        except ValueError:
            known = ", ".join(member.value for member in BackendName)
            raise UnknownBackend(f"Unknown solver backend {name!r} (known: {known})") from None
    LOGGER.debug("Using %s backend", key.value)
    return _FACTORIES[key]()


def available_backends() -> List[str]:
    return [member.value for member in BackendName]
