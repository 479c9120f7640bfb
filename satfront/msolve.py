from typing import List, Sequence

from satfront.core.errors import EnumerationAbortedError, IllegalStateError
from satfront.core.logging import get_logger
from satfront.core.types import Lbool, Lit, Solution, SolveStatus
from satfront.engine.base import Engine
from satfront.solution import render_solution

logger = get_logger("satfront.msolve")


def blocking_clause(model: Sequence[Lbool], projection: Sequence[Lit]) -> List[Lit]:
    """
    Builds the clause forbidding the current assignment of the projection.
    Only projection entries given as positive literals take part, and
    variables without a definite value are left out.
    """
    clause = []
    for lit in projection:
        if lit.sign:
            continue
        value = model[lit.var]
        if value is Lbool.TRUE:
            clause.append(Lit(lit.var, True))
        elif value is Lbool.FALSE:
            clause.append(Lit(lit.var, False))
    return clause


def enumerate_solutions(engine: Engine, max_solutions: int, projection: Sequence[Lit],
                        raw: bool = True) -> List[Solution]:
    """
    Solves repeatedly, banning each solution found on the projection
    variables, until max_solutions are gathered or the formula becomes
    unsatisfiable. Blocking clauses stay in the engine afterwards.
    """
    solutions: List[Solution] = []
    while len(solutions) < max_solutions:
        status = engine.solve()

        if status is SolveStatus.UNSAT:
            logger.debug(f"enumeration exhausted after {len(solutions)} solutions")
            break
        if status is SolveStatus.UNKNOWN:
            raise EnumerationAbortedError(
                f"solve result undefined after {len(solutions)} solutions", solutions
            )
        if status is not SolveStatus.SAT:
            raise IllegalStateError(f"engine returned unexpected solve result {status!r}")

        model = engine.model
        solutions.append(render_solution(model, engine.nvars(), raw))

        if len(solutions) < max_solutions:
            ban = blocking_clause(model, projection)
            if not ban:
                logger.warning("empty blocking clause, the formula is now unsatisfiable")
            logger.debug(f"solution {len(solutions)} found, banning with {len(ban)} literals")
            engine.add_clause(ban)

    return solutions
