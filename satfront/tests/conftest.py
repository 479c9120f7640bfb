from typing import Any, Dict, List, Optional, Sequence

import pytest

from satfront.core.types import Lbool, Lit, SolveStatus
from satfront.engine.base import Engine


class FakeEngine(Engine):
    """
    Scripted engine recording every call. Solve results are taken from
    `results` in order; the model assigns variable i to model_values[i]
    (or FALSE when not listed).
    """

    def __init__(self, results: Optional[List[Any]] = None, model_values: Optional[List[Lbool]] = None):
        self.results = list(results or [])
        self.model_values = list(model_values or [])
        self.num_vars = 0
        self.clauses: List[List[Lit]] = []
        self.xor_clauses: List[tuple] = []
        self.solve_calls: List[List[Lit]] = []
        self.settings: Dict[str, Any] = {}
        self.small_clauses: Optional[List[List[Lit]]] = None
        self.pending_small_clauses: List[List[Lit]] = []
        self.deleted = False

    @property
    def name(self) -> str:
        return "fake"

    def nvars(self) -> int:
        return self.num_vars

    def nclauses(self) -> int:
        return len(self.clauses) + len(self.xor_clauses)

    def new_vars(self, count: int) -> None:
        self.num_vars += count

    def add_clause(self, lits: Sequence[Lit]) -> None:
        self.clauses.append(list(lits))

    def add_xor_clause(self, variables: Sequence[int], rhs: bool) -> None:
        self.xor_clauses.append((list(variables), rhs))

    def solve(self, assumptions: Sequence[Lit] = ()) -> SolveStatus:
        self.solve_calls.append(list(assumptions))
        if not self.results:
            return SolveStatus.SAT
        return self.results.pop(0)

    @property
    def model(self) -> List[Lbool]:
        values = self.model_values + [Lbool.FALSE] * self.num_vars
        return values[:self.num_vars]

    def start_getting_small_clauses(self, max_len: int, max_glue: int) -> None:
        self.settings["small_clauses"] = (max_len, max_glue)
        self.small_clauses = [c for c in self.pending_small_clauses if len(c) <= max_len]

    def get_next_small_clause(self) -> Optional[List[Lit]]:
        if not self.small_clauses:
            return None
        return self.small_clauses.pop(0)

    def end_getting_small_clauses(self) -> None:
        self.small_clauses = None

    def set_max_time(self, seconds: float) -> None:
        self.settings["max_time"] = seconds

    def set_max_confl(self, count: int) -> None:
        self.settings["max_confl"] = count

    def set_verbosity(self, level: int) -> None:
        self.settings["verbosity"] = level

    def set_num_threads(self, count: int) -> None:
        self.settings["threads"] = count

    def delete(self) -> None:
        self.deleted = True


@pytest.fixture
def fake_engine():
    return FakeEngine()


def add_pigeonhole(solver, pigeons: int, holes: int) -> int:
    """
    Adds the pigeonhole formula with every clause guarded by a selector
    variable, returned. Assuming the selector false leaves the hard
    unsatisfiable core; assuming it true satisfies everything at once.
    """
    def var(p, h):
        return p * holes + h + 1

    selector = pigeons * holes + 1
    for p in range(pigeons):
        solver.add_clause([var(p, h) for h in range(holes)] + [selector])
    for h in range(holes):
        for p in range(pigeons):
            for q in range(p + 1, pigeons):
                solver.add_clause([-var(p, h), -var(q, h), selector])
    return selector
