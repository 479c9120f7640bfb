import time
from typing import Any, Dict, Iterable, List, Optional, Tuple, Union

from satfront.cnf.buffers import buffer_format, buffer_values, check_buffer_format, iter_flat_clauses
from satfront.cnf.clauses import iterate, parse_assumptions, parse_clause, parse_xor_clause
from satfront.cnf.literals import is_integer
from satfront.config import SolverConfig
from satfront.core.errors import IllegalStateError
from satfront.core.logging import get_logger, set_verbosity
from satfront.core.types import DenseSolution, Lit, Solution, SolveStatus
from satfront.engine.base import Engine
from satfront.engine.registry import EngineRegistry, default_registry
from satfront.learnt import LearntClauseStream
from satfront.msolve import enumerate_solutions
from satfront.solution import dense_solution

logger = get_logger("satfront.solver")


def _outcome(status: SolveStatus) -> Optional[bool]:
    if status is SolveStatus.SAT:
        return True
    if status is SolveStatus.UNSAT:
        return False
    if status is SolveStatus.UNKNOWN:
        return None
    raise IllegalStateError(f"engine returned unexpected solve result {status!r}")


class Solver:
    """
    Incremental SAT solver front-end. Literals are non-zero signed
    integers exactly as in DIMACS; variable i is literal i, its negation -i.
    Variables are declared on first use by a clause.

    Solver(verbose=0, time_limit=0.0, confl_limit=0, threads=1)

    The search itself is done by an engine, "pysat" by default. Extra
    keyword arguments are passed to the engine factory, e.g.
    Solver(solver_name="cadical153").
    """

    def __init__(self, verbose: int = 0, time_limit: float = 0.0, confl_limit: int = 0,
                 threads: int = 1, engine: Union[str, Engine] = "pysat",
                 config: Optional[SolverConfig] = None,
                 registry: Optional[EngineRegistry] = None, **engine_options: Any):
        if config is None:
            config = SolverConfig.create(
                verbose=verbose,
                time_limit=time_limit,
                confl_limit=confl_limit,
                threads=threads,
                engine=engine.name if isinstance(engine, Engine) else engine,
                engine_options=engine_options,
            )
        self.config = config

        if isinstance(engine, Engine):
            self.engine = engine
        else:
            registry = registry if registry else default_registry
            self.engine = registry.create(config.engine, **config.engine_options)

        if config.time_limit > 0.0:
            self.engine.set_max_time(config.time_limit)
        if config.confl_limit > 0:
            self.engine.set_max_confl(config.confl_limit)
        if config.verbose > 0:
            self.engine.set_verbosity(config.verbose)
            set_verbosity(logger, config.verbose)
        self.engine.set_num_threads(config.threads)

        self._learnt = LearntClauseStream(self.engine)

    # --------- Variable space ----------
    def _ensure_var(self, var: int) -> None:
        """Grows the engine so that zero-based variable var exists."""
        num_vars = self.engine.nvars()
        if var >= num_vars:
            self.engine.new_vars(var - num_vars + 1)
            logger.debug(f"variable space grown from {num_vars} to {var + 1}")

    def nb_vars(self) -> int:
        """Returns the number of variables in the solver."""
        return self.engine.nvars()

    def nb_clauses(self) -> int:
        """Returns the number of clauses in the solver."""
        return self.engine.nclauses()

    # --------- Clause ingestion ----------
    def _commit(self, lits: List[Lit], max_var: int) -> None:
        if lits:
            self._ensure_var(max_var)
        self.engine.add_clause(lits)

    def add_clause(self, clause: Iterable[int]) -> None:
        """
        Adds a clause, an iterable of non-zero integer literals. An empty
        clause is added as such and makes the formula unsatisfiable.
        """
        lits, max_var = parse_clause(clause)
        self._commit(lits, max_var)

    def add_clauses(self, clauses: Any, max_var: int = 0) -> None:
        """
        Adds many clauses at once. clauses is either an iterable of
        clauses, or a flat array.array / numpy array (typecode 'i', 'l'
        or 'q') of zero separated and zero terminated literals.

        max_var optionally declares that many variables up front. Clauses
        before a failing one stay added.
        """
        if not is_integer(max_var):
            raise TypeError("max_var must be an integer")
        if max_var > self.engine.nvars():
            self._ensure_var(int(max_var) - 1)

        fmt = buffer_format(clauses)
        if fmt is not None:
            check_buffer_format(*fmt)
            self._add_flat(buffer_values(clauses))
            return

        for clause in iterate(clauses):
            self.add_clause(clause)

    def add_clause_buffer(self, values: Iterable[int], typecode: str = "i") -> None:
        """
        Adds zero separated, zero terminated clauses from a plain sequence
        of integers laid out as machine integers of the given typecode.
        """
        check_buffer_format(typecode)
        self._add_flat(list(iterate(values)))

    def _add_flat(self, values: List[int]) -> None:
        count = 0
        for lits, max_var in iter_flat_clauses(values):
            self._commit(lits, max_var)
            count += 1
        logger.debug(f"added {count} clauses from a flat buffer of {len(values)} integers")

    def add_xor_clause(self, xor_clause: Iterable[int], rhs: bool) -> None:
        """
        Adds the constraint x1 ^ x2 ^ ... ^ xk == rhs. Only positive
        variables are allowed.
        """
        if not isinstance(rhs, bool):
            raise TypeError("rhs must be boolean")
        variables = parse_xor_clause(xor_clause)
        for var in variables:
            self._ensure_var(var)
        self.engine.add_xor_clause(variables, rhs)

    # --------- Solving ----------
    def _solve(self, assumptions: List[Lit]) -> SolveStatus:
        start = time.time()
        status = self.engine.solve(assumptions)
        logger.debug(
            f"solve with {len(assumptions)} assumptions: {status} in {time.time() - start:.3f}s"
        )
        return status

    def solve(self, assumptions: Optional[Iterable[int]] = None
              ) -> Tuple[Optional[bool], Optional[DenseSolution]]:
        """
        Solves the clauses added so far.

        >>> s = Solver()
        >>> s.add_clause([1])
        >>> s.add_clause([-2])
        >>> s.add_clause([3])
        >>> s.add_clause([-1, 2, 3])
        >>> s.solve()
        (True, (None, True, False, True))
        >>> s.solve([-3])
        (False, None)

        assumptions are literals fixed for this call only; they may only
        use variables that already appear in clauses. Returns (True,
        solution) where solution[i] is the value of variable i, (False,
        None) if unsatisfiable and (None, None) when a limit was reached.
        """
        lits = [] if assumptions is None else parse_assumptions(assumptions, self.engine.nvars())
        sat = _outcome(self._solve(lits))
        if sat is True:
            return True, dense_solution(self.engine.model, self.engine.nvars())
        return sat, None

    def is_satisfiable(self) -> Optional[bool]:
        """Returns True, False, or None when a limit was reached."""
        return _outcome(self._solve([]))

    def msolve_selected(self, max_nr_of_solutions: int, var_selected: Iterable[int],
                        raw: bool = True) -> List[Solution]:
        """
        Finds up to max_nr_of_solutions solutions that differ on the
        selected variables. Each solution found is banned with a clause
        over the positive literals of var_selected, so only list the
        variables that matter to the problem, not auxiliary ones.

        With raw=True every solution is a tuple of signed literals, e.g.
        (1, -2, 3); otherwise a tuple of booleans preceded by None, e.g.
        (None, True, False, True).
        """
        if not is_integer(max_nr_of_solutions) or isinstance(max_nr_of_solutions, bool):
            raise TypeError("max_nr_of_solutions must be an integer")
        projection, max_var = parse_clause(var_selected)
        if projection:
            self._ensure_var(max_var)
        return enumerate_solutions(self.engine, int(max_nr_of_solutions), projection, bool(raw))

    # --------- Learnt clauses ----------
    def start_getting_small_clauses(self, max_len: int, max_glue: int = 1000) -> None:
        """Starts streaming learnt clauses of at most max_len literals."""
        self._learnt.start(max_len, max_glue)

    def get_next_small_clause(self) -> Optional[List[int]]:
        """Returns the next learnt clause, or None when there are no more."""
        return self._learnt.next()

    def end_getting_small_clauses(self) -> None:
        self._learnt.end()

    # --------- Resources ----------
    def stats(self) -> Dict[str, Any]:
        return self.engine.stats()

    def delete(self) -> None:
        self.engine.delete()

    def __enter__(self) -> "Solver":
        return self

    def __exit__(self, exc_type, exc_value, traceback) -> None:
        self.delete()
