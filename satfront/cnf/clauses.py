from typing import Any, Iterable, List, Tuple

from satfront.cnf.literals import decode_literal
from satfront.core.types import Lit


def iterate(obj: Any) -> Iterable:
    try:
        return iter(obj)
    except TypeError:
        raise TypeError("iterable object expected") from None


def parse_clause(clause: Any) -> Tuple[List[Lit], int]:
    """
    Decodes an iterable of signed literals.
    Returns the literals and the largest variable index referenced,
    or -1 when the clause is empty.
    """
    lits = []
    max_var = -1
    for value in iterate(clause):
        lit = decode_literal(value)
        max_var = max(max_var, lit.var)
        lits.append(lit)
    return lits, max_var


def parse_xor_clause(xor_clause: Any) -> List[int]:
    """Decodes an XOR clause into zero-based variable indices."""
    variables = []
    for value in iterate(xor_clause):
        lit = decode_literal(value)
        if lit.sign:
            raise ValueError("XOR clause must contain only positive variables (not inverted literals)")
        variables.append(lit.var)
    return variables


def parse_assumptions(assumptions: Any, num_vars: int) -> List[Lit]:
    """
    Decodes assumption literals. Assumptions never declare variables, so
    every referenced variable must already exist.
    """
    lits = []
    for value in iterate(assumptions):
        lit = decode_literal(value)
        if lit.var >= num_vars:
            raise ValueError(f"variable '{lit.var + 1}' not used in clauses")
        lits.append(lit)
    return lits
