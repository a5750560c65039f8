"""Testy cyklu walidacja → kompilacja → solver oraz tokenów PuzzleSession."""

import asyncio
import logging

import pytest

from data_model import Operator, Puzzle, Rule
from solver import (
    Outcome,
    PuzzleSession,
    SolverError,
    SolverResult,
    SolveStatus,
    prepare_program,
    solve_puzzle,
)
from validator import ErrorCode, InvalidPuzzleError

from conftest import FakeSolver


def _broken(puzzle: Puzzle) -> Puzzle:
    return Puzzle(
        puzzle.house_count,
        puzzle.domains,
        (*puzzle.rules, Rule("pet", "dog", Operator.SAME, "color", "red")),
    )


def test_prepare_program_returns_program_and_report(small_puzzle):
    program, report = prepare_program(small_puzzle)
    assert report.is_valid
    assert program.startswith("% Define houses")


def test_invalid_puzzle_never_reaches_solver(small_puzzle, fake_solver):
    with pytest.raises(InvalidPuzzleError) as excinfo:
        solve_puzzle(_broken(small_puzzle), fake_solver)

    assert fake_solver.calls == []
    assert excinfo.value.report.errors[0].code == ErrorCode.RULE_CATEGORY_UNKNOWN
    assert "E_RULE_CATEGORY_UNKNOWN" in str(excinfo.value)


def test_solve_puzzle_passes_program_and_model_count(small_puzzle, fake_solver):
    result = solve_puzzle(small_puzzle, fake_solver, models=5)

    program, models = fake_solver.calls[0]
    assert program == prepare_program(small_puzzle)[0]
    assert models == 5
    assert result.outcome is Outcome.SOLVED
    assert result.houses == {1: {"color": "red", "beverage": "tea"}}


def test_solver_errors_propagate(small_puzzle):
    def failing(program: str, models: int = 2) -> SolverResult:
        raise SolverError("transport down")

    with pytest.raises(SolverError, match="transport down"):
        solve_puzzle(small_puzzle, failing)


def test_session_requires_puzzle(fake_solver):
    with pytest.raises(RuntimeError):
        PuzzleSession(fake_solver).compile()


def test_session_tokens_increase(small_puzzle, fake_solver):
    session = PuzzleSession(fake_solver)
    assert session.update(small_puzzle) == 1
    assert session.update(small_puzzle) == 2
    assert session.is_current(2)
    assert not session.is_current(1)


def test_session_accepts_current_result(small_puzzle, fake_solver):
    session = PuzzleSession(fake_solver)
    session.update(small_puzzle)

    output = session.solve()
    assert output.token == 1
    assert session.accept(output) is output.result


def test_session_discards_stale_result(small_puzzle, zebra_puzzle, fake_solver):
    session = PuzzleSession(fake_solver)
    session.update(small_puzzle)
    output = session.solve()

    session.update(zebra_puzzle)
    assert session.accept(output) is None


def test_session_decodes_with_domains_of_solved_state(small_puzzle, zebra_puzzle):
    class SwappingSolver(FakeSolver):
        def __call__(self, program, models=2):
            session.update(zebra_puzzle)  # edycja w trakcie rozwiązywania
            return super().__call__(program, models)

    session = PuzzleSession(SwappingSolver())
    session.update(small_puzzle)
    output = session.solve()

    assert output.result.houses == {1: {"color": "red", "beverage": "tea"}}
    assert session.accept(output) is None


def test_session_solve_async(small_puzzle):
    solver = FakeSolver(SolverResult(status=SolveStatus.UNSATISFIABLE))
    session = PuzzleSession(solver, models=1)
    session.update(small_puzzle)

    output = asyncio.run(session.solve_async())

    assert solver.calls[0][1] == 1
    assert session.accept(output).outcome is Outcome.NO_SOLUTION


def test_session_invalid_puzzle_raises(small_puzzle, fake_solver):
    session = PuzzleSession(fake_solver)
    session.update(_broken(small_puzzle))
    with pytest.raises(InvalidPuzzleError):
        session.solve()
    assert fake_solver.calls == []


@pytest.mark.parametrize("call", ["solve", "compile"])
def test_session_without_puzzle_raises_runtime_error(fake_solver, call):
    with pytest.raises(RuntimeError, match="update"):
        getattr(PuzzleSession(fake_solver), call)()
    assert fake_solver.calls == []


def test_session_solve_async_without_puzzle(fake_solver):
    with pytest.raises(RuntimeError):
        asyncio.run(PuzzleSession(fake_solver).solve_async())


def test_position_same_position_warned_once(small_domains, caplog):
    rule = Rule("position", "1", Operator.SAME, "position", "2")
    with caplog.at_level(logging.WARNING):
        prepare_program(Puzzle(3, small_domains, (rule,)))

    warnings = [r for r in caplog.records if r.levelno >= logging.WARNING]
    assert len(warnings) == 1
    assert "same" in warnings[0].getMessage()
