"""Append-only CNF formula shared by the encoder, backends and enumerator."""

from __future__ import annotations

from typing import Iterable, Iterator, List, Sequence, Tuple

Clause = Tuple[int, ...]


class CnfFormula:
    """Ordered clauses over variables ``1..num_vars``.

    Literals are non-zero ints, negative for negated variables. Clauses can be
    appended but never removed or rewritten.
    """

    def __init__(self, num_vars: int = 0, clauses: Iterable[Sequence[int]] = ()) -> None:
        self._clauses: List[Clause] = []
        self.num_vars = num_vars
        self.extend(clauses)

    def append(self, clause: Sequence[int]) -> None:
        literals = tuple(int(literal) for literal in clause)
        if any(literal == 0 for literal in literals):
            raise ValueError(f"Literal 0 is not allowed: {literals}")
        if literals:
            self.num_vars = max(self.num_vars, max(abs(literal) for literal in literals))
        self._clauses.append(literals)

    def extend(self, clauses: Iterable[Sequence[int]]) -> None:
        for clause in clauses:
            self.append(clause)

    def new_variable(self) -> int:
        """Allocate a fresh auxiliary variable."""

        self.num_vars += 1
        return self.num_vars

    def reserve(self, top_id: int) -> None:
        self.num_vars = max(self.num_vars, top_id)

    def copy(self) -> "CnfFormula":
        clone = CnfFormula(num_vars=self.num_vars)
        clone._clauses = list(self._clauses)
        return clone

    @property
    def clauses(self) -> List[Clause]:
        return list(self._clauses)

    def __iter__(self) -> Iterator[Clause]:
        return iter(self._clauses)

    def __len__(self) -> int:
        return len(self._clauses)

    def __repr__(self) -> str:
        return f"CnfFormula(num_vars={self.num_vars}, clauses={len(self._clauses)})"
