from enum import Enum
from typing import List, NamedTuple, Optional, Tuple, Union

# Literals are kept within half of a C int so negating or doubling an
# engine literal can never overflow.
INT_MAX = 2**31 - 1
MAX_LITERAL = INT_MAX // 2


class Lit(NamedTuple):
    """Engine-side literal: zero-based variable index and negation flag."""
    var: int
    sign: bool

    def __invert__(self) -> "Lit":
        return Lit(self.var, not self.sign)


class Lbool(Enum):
    TRUE = "TRUE"
    FALSE = "FALSE"
    UNDEF = "UNDEF"

    @staticmethod
    def from_bool(value: Optional[bool]) -> "Lbool":
        if value is None:
            return Lbool.UNDEF
        return Lbool.TRUE if value else Lbool.FALSE

    def to_bool(self) -> Optional[bool]:
        if self is Lbool.TRUE:
            return True
        if self is Lbool.FALSE:
            return False
        return None


class SolveStatus(str, Enum):
    SAT = "SAT"
    UNSAT = "UNSAT"
    UNKNOWN = "UNKNOWN"


Clause = List[Lit]
DenseSolution = Tuple[Optional[bool], ...]
RawSolution = Tuple[int, ...]
Solution = Union[DenseSolution, RawSolution]
