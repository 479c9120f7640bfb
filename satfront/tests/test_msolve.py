import pytest

from satfront import EnumerationAbortedError, IllegalStateError, Solver
from satfront.core.types import Lbool, Lit, SolveStatus
from satfront.msolve import blocking_clause
from satfront.tests.conftest import FakeEngine


def _projection(solution, variables):
    return tuple(solution[v] for v in variables)


def test_zero_solutions_never_solves(fake_engine):
    solver = Solver(engine=fake_engine)
    solver.add_clause([1, 2])
    assert solver.msolve_selected(0, [1, 2]) == []
    assert fake_engine.solve_calls == []
    assert len(fake_engine.clauses) == 1


def test_enumerates_all_solutions():
    with Solver() as solver:
        solver.add_clause([1, 2])
        solutions = solver.msolve_selected(10, [1, 2], raw=False)
        assert len(solutions) == 3
        assignments = {_projection(s, [1, 2]) for s in solutions}
        assert assignments == {(True, True), (True, False), (False, True)}
        # All solutions are banned now
        assert solver.solve() == (False, None)


def test_cap_on_solutions():
    with Solver() as solver:
        solver.add_clause([1, 2, 3])
        solutions = solver.msolve_selected(4, [1, 2, 3])
        assert len(solutions) == 4
        assert len(set(solutions)) == 4
        # The last solution found is not banned
        assert solver.is_satisfiable() is True


def test_solutions_differ_on_projection_only():
    with Solver() as solver:
        solver.add_clause([1, 2, 3])
        solutions = solver.msolve_selected(10, [1], raw=False)
        assert len(solutions) == 2
        assert {s[1] for s in solutions} == {True, False}


def test_raw_solutions():
    with Solver() as solver:
        solver.add_clause([1])
        solver.add_clause([-2])
        solutions = solver.msolve_selected(5, [1, 2])
        assert solutions == [(1, -2)]


def test_negative_projection_entries_are_ignored():
    with Solver() as solver:
        solver.add_clause([1, 2])
        solutions = solver.msolve_selected(10, [1, -2], raw=False)
        assert len(solutions) == 2
        assert {s[1] for s in solutions} == {True, False}


def test_projection_grows_variable_space(fake_engine):
    solver = Solver(engine=fake_engine)
    solver.add_clause([1])
    solver.msolve_selected(1, [1, 5])
    assert solver.nb_vars() == 5


def test_blocking_clause():
    model = [Lbool.TRUE, Lbool.FALSE, Lbool.UNDEF, Lbool.TRUE]
    projection = [Lit(0, False), Lit(1, False), Lit(2, False), Lit(3, True)]
    assert blocking_clause(model, projection) == [Lit(0, True), Lit(1, False)]


def test_blocking_clauses_are_committed():
    engine = FakeEngine(
        results=[SolveStatus.SAT, SolveStatus.SAT, SolveStatus.UNSAT],
        model_values=[Lbool.TRUE, Lbool.FALSE],
    )
    solver = Solver(engine=engine)
    solver.add_clause([1, 2])
    solutions = solver.msolve_selected(5, [1, 2])
    assert solutions == [(1, -2), (1, -2)]
    assert engine.clauses[1:] == [[Lit(0, True), Lit(1, False)]] * 2
    assert len(engine.solve_calls) == 3


def test_no_blocking_clause_after_last_solution():
    engine = FakeEngine(model_values=[Lbool.TRUE])
    solver = Solver(engine=engine)
    solver.add_clause([1])
    assert solver.msolve_selected(2, [1]) == [(1,), (1,)]
    # one blocking clause between the two solves, none after the last one
    assert len(engine.clauses) == 2


def test_unknown_aborts_enumeration():
    engine = FakeEngine(results=[SolveStatus.SAT, SolveStatus.UNKNOWN])
    solver = Solver(engine=engine)
    solver.add_clause([1])
    with pytest.raises(EnumerationAbortedError) as info:
        solver.msolve_selected(5, [1])
    assert info.value.solutions == [(-1,)]
    assert isinstance(info.value, IllegalStateError)


def test_illegal_result_during_enumeration():
    engine = FakeEngine(results=["bogus"])
    solver = Solver(engine=engine)
    solver.add_clause([1])
    with pytest.raises(IllegalStateError):
        solver.msolve_selected(5, [1])


def test_msolve_bad_arguments(fake_engine):
    solver = Solver(engine=fake_engine)
    with pytest.raises(TypeError):
        solver.msolve_selected("3", [1])
    with pytest.raises(TypeError):
        solver.msolve_selected(3, 1)
    with pytest.raises(ValueError):
        solver.msolve_selected(3, [0])
    assert fake_engine.solve_calls == []


def test_free_projection_variable_takes_both_values():
    with Solver() as solver:
        solver.add_clause([1])
        solver.add_clauses([], max_var=2)
        solutions = solver.msolve_selected(10, [1, 2], raw=False)
        assert len(solutions) == 2
        assert set(solutions) == {(None, True, True), (None, True, False)}


def test_projection_growth_with_pysat():
    with Solver() as solver:
        solver.add_clause([1])
        solutions = solver.msolve_selected(10, [1, 3])
        assert solver.nb_vars() == 3
        assert len(solutions) == 2
        assert {s[2] for s in solutions} == {3, -3}
        assert all(len(s) == 3 for s in solutions)
