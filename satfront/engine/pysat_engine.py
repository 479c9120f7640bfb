import threading
import time
from collections import deque
from typing import Any, Dict, List, Optional, Sequence

from pysat.formula import IDPool
from pysat.solvers import NoSuchSolverError, Solver

from satfront.core.errors import EngineError, IllegalStateError
from satfront.core.logging import get_logger, set_verbosity
from satfront.core.types import Lbool, Lit, SolveStatus
from satfront.engine.base import Engine
from satfront.engine.xor_encoding import DEFAULT_XOR_CUT, xor_to_cnf

logger = get_logger("satfront.engine.pysat")

DEFAULT_SOLVER_NAME = "glucose4"

# Backends able to log DRUP proofs through pysat's with_proof flag
PROOF_SOLVERS = {
    "g3", "g30", "glucose3", "glucose30",
    "g4", "g41", "glucose4", "glucose41",
    "lgl", "lingeling",
    "cd", "cd10", "cd103", "cadical103",
    "cd15", "cd153", "cadical153",
}


class PySATEngine(Engine):
    """
    Engine backed by a pysat solver. Caller variables and auxiliary
    variables introduced by XOR cutting share one IDPool; only caller
    variables are visible through nvars() and the model.

    Learnt clauses are read from the DRUP proof, so with_proof=True (the
    default) keeps every learnt clause and deletion in memory for the
    life of the solver. Pass with_proof=False when the learnt clause
    stream is not needed.
    """

    def __init__(self, solver_name: str = DEFAULT_SOLVER_NAME, with_proof: bool = True,
                 xor_cut: int = DEFAULT_XOR_CUT):
        self.solver_name = solver_name
        self.xor_cut = xor_cut
        self.with_proof = with_proof and solver_name in PROOF_SOLVERS
        if with_proof and not self.with_proof:
            logger.warning(f"Solver '{solver_name}' cannot log proofs, learnt clause streaming disabled")

        kwargs = {"with_proof": True} if self.with_proof else {}
        try:
            self._backend = Solver(name=solver_name, **kwargs)
        except NoSuchSolverError as e:
            raise EngineError(f"Unknown pysat solver '{solver_name}'") from e

        self._pool = IDPool(start_from=1)
        self._var_ids: List[int] = []
        self._num_aux = 0
        self._nclauses = 0
        self._contradiction = False
        self._model: List[Lbool] = []

        self._max_time = 0.0
        self._max_confl = 0
        self._verbose = 0
        self._small_clauses: Optional[deque] = None

        # Proof lines already replayed and the clauses they left live
        self._proof_pos = 0
        self._live: Dict[tuple, List[int]] = {}

    @property
    def name(self) -> str:
        return "pysat"

    @property
    def backend(self) -> Solver:
        if self._backend is None:
            raise EngineError("solver has been deleted")
        return self._backend

    def nvars(self) -> int:
        return len(self._var_ids)

    def nclauses(self) -> int:
        return self._nclauses

    def new_vars(self, count: int) -> None:
        backend = self.backend
        for _ in range(count):
            vid = self._pool.id(("v", len(self._var_ids)))
            self._var_ids.append(vid)
            # A tautology makes the backend declare the variable, so models
            # assign it even when no clause mentions it.
            backend.add_clause([vid, -vid])

    def _fresh_aux(self) -> int:
        self._num_aux += 1
        return self._pool.id(("x", self._num_aux))

    def _to_id(self, lit: Lit) -> int:
        vid = self._var_ids[lit.var]
        return -vid if lit.sign else vid

    def add_clause(self, lits: Sequence[Lit]) -> None:
        backend = self.backend
        self._model = []
        self._nclauses += 1
        if not lits:
            self._contradiction = True
            return
        backend.add_clause([self._to_id(lit) for lit in lits])

    def add_xor_clause(self, variables: Sequence[int], rhs: bool) -> None:
        backend = self.backend
        self._model = []
        self._nclauses += 1
        ids = [self._var_ids[var] for var in variables]
        for clause in xor_to_cnf(ids, rhs, self._fresh_aux, self.xor_cut):
            if not clause:
                self._contradiction = True
                continue
            backend.add_clause(clause)

    def set_max_time(self, seconds: float) -> None:
        self._max_time = seconds

    def set_max_confl(self, count: int) -> None:
        self._max_confl = count

    def set_verbosity(self, level: int) -> None:
        self._verbose = level
        set_verbosity(logger, level)

    def set_num_threads(self, count: int) -> None:
        if count > 1:
            logger.warning(f"pysat solvers are single threaded, ignoring threads={count}")

    def interrupt(self) -> None:
        """Asks a running solve to stop; it then reports UNKNOWN."""
        self.backend.interrupt()

    def solve(self, assumptions: Sequence[Lit] = ()) -> SolveStatus:
        backend = self.backend
        self._model = []
        if self._contradiction:
            return SolveStatus.UNSAT

        ids = [self._to_id(lit) for lit in assumptions]
        before = self.stats() if self._verbose > 0 else None
        start = time.time()
        result = self._run(backend, ids)
        elapsed = time.time() - start

        if before is not None:
            after = self.stats()
            delta = {k: int(after.get(k, 0)) - int(before.get(k, 0)) for k in after.keys()}
            logger.info(
                f"search: decisions={delta.get('decisions', 0)} "
                f"conflicts={delta.get('conflicts', 0)} "
                f"propagations={delta.get('propagations', 0)} "
                f"time={elapsed:.3f}s"
            )

        if result is True:
            self._model = self._read_model(backend)
            return SolveStatus.SAT
        if result is False:
            return SolveStatus.UNSAT
        if result is None:
            return SolveStatus.UNKNOWN
        raise IllegalStateError(f"pysat returned unexpected solve result {result!r}")

    def _run(self, backend: Solver, ids: List[int]) -> Any:
        # expect_interrupt=True is what makes pysat release the GIL
        timer = None
        try:
            if self._max_confl > 0:
                backend.conf_budget(self._max_confl)
            if self._max_time > 0:
                timer = threading.Timer(self._max_time, backend.interrupt)
                timer.start()
            return backend.solve_limited(assumptions=ids, expect_interrupt=True)
        except NotImplementedError as e:
            if self._max_confl > 0 or self._max_time > 0:
                raise EngineError(f"Solver '{self.solver_name}' does not support search limits") from e
            logger.debug(f"Solver '{self.solver_name}' has no limited solve, searching without it")
            return backend.solve(assumptions=ids)
        finally:
            if timer is not None:
                timer.cancel()
            try:
                backend.clear_interrupt()
            except NotImplementedError:
                pass

    def _read_model(self, backend: Solver) -> List[Lbool]:
        values = {abs(lit): lit > 0 for lit in backend.get_model() or []}
        return [Lbool.from_bool(values.get(vid)) for vid in self._var_ids]

    @property
    def model(self) -> List[Lbool]:
        return self._model

    def start_getting_small_clauses(self, max_len: int, max_glue: int) -> None:
        self._small_clauses = deque(self._collect_small_clauses(max_len, max_glue))
        logger.debug(f"learnt clause session opened with {len(self._small_clauses)} clauses")

    def _replay_proof(self) -> None:
        """Applies the DRUP proof lines logged since the previous session."""
        proof = self.backend.get_proof() or []
        for line in proof[self._proof_pos:]:
            if isinstance(line, bytes):
                line = line.decode("ascii")
            parts = line.split()
            deleting = bool(parts) and parts[0] == "d"
            if deleting:
                parts = parts[1:]
            ids = [int(p) for p in parts if p != "0"]
            if not ids:
                continue
            key = tuple(sorted(ids))
            if deleting:
                self._live.pop(key, None)
            else:
                self._live[key] = ids
        self._proof_pos = len(proof)

    def _collect_small_clauses(self, max_len: int, max_glue: int) -> List[List[Lit]]:
        if not self.with_proof:
            return []
        self._replay_proof()

        clauses = []
        for ids in self._live.values():
            # Glue never exceeds the clause length
            if len(ids) > max_len or len(ids) > max_glue:
                continue
            lits = self._to_lits(ids)
            if lits is not None:
                clauses.append(lits)
        return clauses

    def _to_lits(self, ids: List[int]) -> Optional[List[Lit]]:
        lits = []
        for lit in ids:
            obj = self._pool.obj(abs(lit))
            if obj is None or obj[0] != "v":
                return None
            lits.append(Lit(obj[1], lit < 0))
        return lits

    def get_next_small_clause(self) -> Optional[List[Lit]]:
        if not self._small_clauses:
            return None
        return self._small_clauses.popleft()

    def end_getting_small_clauses(self) -> None:
        self._small_clauses = None
        logger.debug("learnt clause session closed")

    def stats(self) -> Dict[str, Any]:
        try:
            return dict(self.backend.accum_stats() or {})
        except NotImplementedError:
            return {}

    def delete(self) -> None:
        if self._backend is not None:
            try:
                self._backend.delete()
            finally:
                self._backend = None
