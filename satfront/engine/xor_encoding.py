from itertools import product
from typing import Callable, List, Sequence

DEFAULT_XOR_CUT = 4


def xor_to_cnf(ids: Sequence[int], rhs: bool, fresh: Callable[[], int],
               cut: int = DEFAULT_XOR_CUT) -> List[List[int]]:
    """
    Encodes ids[0] ^ ... ^ ids[k-1] == rhs over positive DIMACS ids.
    Short XORs are expanded directly: every clause rules out one
    assignment with the wrong parity. Long XORs are cut into chunks
    chained through fresh auxiliary variables.
    """
    if cut <= 2:
        raise ValueError("xor cut must be greater than 2")
    if not ids:
        return [[]] if rhs else []

    clauses = []
    rest = list(ids)
    while len(rest) > cut:
        aux = fresh()
        # head ^ aux == 0, i.e. aux carries the parity of the head
        clauses.extend(_expand(rest[:cut - 1] + [aux], False))
        rest = [aux] + rest[cut - 1:]
    clauses.extend(_expand(rest, rhs))
    return clauses


def _expand(ids: List[int], rhs: bool) -> List[List[int]]:
    clauses = []
    for signs in product((False, True), repeat=len(ids)):
        # The only assignment falsifying this clause sets exactly the
        # negated variables to true.
        negated = sum(signs)
        if (negated % 2 == 1) != rhs:
            clauses.append([-v if s else v for v, s in zip(ids, signs)])
    return clauses
