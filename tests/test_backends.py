import unittest
from unittest.mock import MagicMock, patch

from ortools.sat.python import cp_model

from crossword_sat.core.exceptions import EngineFailure, UnknownBackend
from crossword_sat.engine.backends import (
    UNSATISFIABLE,
    BackendName,
    CpSatBackend,
    PySatBackend,
    Satisfiable,
    available_backends,
    get_backend,
)
from crossword_sat.engine.formula import CnfFormula


class BackendSelectionTests(unittest.TestCase):
    def test_every_name_resolves(self) -> None:
        for name in BackendName:
            backend = get_backend(name)
            self.assertEqual(backend.name, name)
        self.assertIsInstance(get_backend("CaDiCaL"), PySatBackend)
        self.assertIsInstance(get_backend("cpsat"), CpSatBackend)

    def test_unknown_backend(self) -> None:
        with self.assertRaises(UnknownBackend):
            get_backend("picosat")
        with self.assertRaises(UnknownBackend):
            get_backend(None)  # type: ignore[arg-type]

    def test_available_backends_lists_values(self) -> None:
        self.assertEqual(available_backends(), ["cadical", "glucose", "minisat", "cpsat"])


class BackendSolveTests(unittest.TestCase):
    def test_satisfiable_formula(self) -> None:
        formula = CnfFormula(clauses=[[1, 2], [-1], [-2, 3]])
        for name in BackendName:
            with self.subTest(backend=name.value):
                result = get_backend(name).solve(formula)
                self.assertIsInstance(result, Satisfiable)
                self.assertIn(2, result.true_variables)
                self.assertIn(3, result.true_variables)
                self.assertNotIn(1, result.true_variables)

    def test_unsatisfiable_formula(self) -> None:
        formula = CnfFormula(clauses=[[1, 2], [-1], [-2]])
        for name in BackendName:
            with self.subTest(backend=name.value):
                self.assertEqual(get_backend(name).solve(formula), UNSATISFIABLE)

    def test_repeated_calls_are_reproducible(self) -> None:
        formula = CnfFormula(clauses=[[1, 2, 3], [-1, -2], [-2, -3], [-1, -3]])
        for name in BackendName:
            with self.subTest(backend=name.value):
                backend = get_backend(name)
                self.assertEqual(backend.solve(formula), backend.solve(formula))


class EngineFailureTests(unittest.TestCase):
    def test_pysat_engine_error_is_wrapped(self) -> None:
        backend = get_backend(BackendName.GLUCOSE)
        with patch("crossword_sat.engine.backends.Solver", side_effect=MemoryError("out of memory")):
            with self.assertRaises(EngineFailure) as ctx:
                backend.solve(CnfFormula(clauses=[[1]]))
        self.assertIsInstance(ctx.exception.__cause__, MemoryError)

    def test_pysat_missing_verdict_is_failure(self) -> None:
        engine = MagicMock()
        engine.__enter__.return_value = engine
        engine.solve.return_value = None
        backend = get_backend(BackendName.MINISAT)
        with patch("crossword_sat.engine.backends.Solver", return_value=engine):
            with self.assertRaises(EngineFailure):
                backend.solve(CnfFormula(clauses=[[1]]))

    def test_cpsat_unknown_status_is_failure(self) -> None:
        engine = MagicMock()
        engine.solve.return_value = cp_model.UNKNOWN
        engine.status_name.return_value = "UNKNOWN"
        with patch("crossword_sat.engine.backends.cp_model.CpSolver", return_value=engine):
            with self.assertRaises(EngineFailure) as ctx:
                CpSatBackend().solve(CnfFormula(clauses=[[1]]))
        self.assertIn("UNKNOWN", str(ctx.exception))


if __name__ == "__main__":  # pragma: no cover
    unittest.main()
