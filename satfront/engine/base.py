import abc
from typing import Any, Dict, List, Optional, Sequence

from satfront.core.types import Lbool, Lit, SolveStatus


class Engine(abc.ABC):
    """
    Capability exposed by an external solving engine. Variables are
    zero-based indices; literals are Lit(var, sign).
    """

    @property
    @abc.abstractmethod
    def name(self) -> str:
        pass

    @abc.abstractmethod
    def nvars(self) -> int:
        pass

    @abc.abstractmethod
    def nclauses(self) -> int:
        pass

    @abc.abstractmethod
    def new_vars(self, count: int) -> None:
        pass

    def new_var(self) -> None:
        self.new_vars(1)

    @abc.abstractmethod
    def add_clause(self, lits: Sequence[Lit]) -> None:
        pass

    @abc.abstractmethod
    def add_xor_clause(self, variables: Sequence[int], rhs: bool) -> None:
        pass

    @abc.abstractmethod
    def solve(self, assumptions: Sequence[Lit] = ()) -> SolveStatus:
        """Blocking search; returns SAT, UNSAT or UNKNOWN."""
        pass

    @property
    @abc.abstractmethod
    def model(self) -> List[Lbool]:
        """Assignment of every variable after a SAT result."""
        pass

    @abc.abstractmethod
    def start_getting_small_clauses(self, max_len: int, max_glue: int) -> None:
        pass

    @abc.abstractmethod
    def get_next_small_clause(self) -> Optional[List[Lit]]:
        pass

    @abc.abstractmethod
    def end_getting_small_clauses(self) -> None:
        pass

    def set_max_time(self, seconds: float) -> None:
        pass

    def set_max_confl(self, count: int) -> None:
        pass

    def set_verbosity(self, level: int) -> None:
        pass

    def set_num_threads(self, count: int) -> None:
        pass

    def interrupt(self) -> None:
        """Asks a running solve to stop early with UNKNOWN."""
        pass

    def stats(self) -> Dict[str, Any]:
        return {}

    def delete(self) -> None:
        pass
