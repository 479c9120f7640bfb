"""
Renders an engine model as a caller-facing solution.

Dense solutions are indexable by variable number: slot 0 is None and
slot i holds True, False or None for variable i. Raw solutions list one
signed literal per assigned variable and skip unassigned ones, so they
are not indexable by variable number.
"""
from typing import Sequence

from satfront.core.types import DenseSolution, Lbool, RawSolution, Solution


def dense_solution(model: Sequence[Lbool], num_vars: int) -> DenseSolution:
    return (None,) + tuple(model[var].to_bool() for var in range(num_vars))


def raw_solution(model: Sequence[Lbool], num_vars: int) -> RawSolution:
    lits = []
    for var in range(num_vars):
        value = model[var]
        if value is Lbool.TRUE:
            lits.append(var + 1)
        elif value is Lbool.FALSE:
            lits.append(-(var + 1))
    return tuple(lits)


def render_solution(model: Sequence[Lbool], num_vars: int, raw: bool) -> Solution:
    if raw:
        return raw_solution(model, num_vars)
    return dense_solution(model, num_vars)
