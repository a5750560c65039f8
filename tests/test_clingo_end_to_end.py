"""Testy end-to-end z prawdziwym solverem clingo."""

import pytest

from data_model import DomainRegistry, Operator, Puzzle, Rule
from solver import ClingoSolver, Outcome, SolveStatus, compile_puzzle, solve_puzzle


@pytest.fixture
def clingo_solver() -> ClingoSolver:
    return ClingoSolver()


def test_zebra_puzzle_has_unique_canonical_solution(zebra_puzzle, clingo_solver):
    result = solve_puzzle(zebra_puzzle, clingo_solver)

    assert result.outcome is Outcome.SOLVED
    assert result.models_count == 1
    assert result.more_models is False

    houses = result.houses
    assert houses[1] == {
        "nationality": "norwegian", "color": "yellow", "beverage": "water",
        "pet": "fox", "smoke": "kools",
    }
    assert houses[3]["nationality"] == "english"
    assert houses[3]["color"] == "red"
    assert houses[3]["beverage"] == "milk"
    assert houses[5]["nationality"] == "japanese"
    assert houses[5]["pet"] == "zebra"
    assert houses[1]["beverage"] == "water"


def test_raw_solver_result_for_zebra(zebra_puzzle, clingo_solver):
    raw = clingo_solver(compile_puzzle(zebra_puzzle), 2)

    assert raw.status is SolveStatus.SATISFIABLE
    assert len(raw.witnesses) == 1
    assert "assign(zebra,5)" in raw.witnesses[0]
    assert all(atom.startswith("assign(") for atom in raw.witnesses[0])


@pytest.mark.parametrize(
    "colors",
    [["red", "green"], ["red", "green", "blue", "white"]],
)
def test_domain_size_mismatch_is_unsatisfiable(clingo_solver, colors):
    puzzle = Puzzle(3, DomainRegistry.from_dict({"color": colors}))
    result = solve_puzzle(puzzle, clingo_solver)

    assert result.outcome is Outcome.NO_SOLUTION
    assert result.houses is None


def test_under_constrained_puzzle_reports_more_models(small_puzzle, clingo_solver):
    result = solve_puzzle(small_puzzle, clingo_solver, models=2)

    assert result.outcome is Outcome.SOLVED
    assert result.more_models is True
    assert result.houses[2]["beverage"] == "milk"


def test_contradictory_rules_have_no_solution(small_domains, clingo_solver):
    rules = (
        Rule("color", "red", Operator.SAME, "position", "1"),
        Rule("color", "red", Operator.SAME, "position", "2"),
    )
    result = solve_puzzle(Puzzle(3, small_domains, rules), clingo_solver)
    assert result.outcome is Outcome.NO_SOLUTION


def test_position_operand_in_next_and_right_rules(clingo_solver):
    domains = DomainRegistry.from_dict({"color": ["red", "green", "blue"]})
    rules = (
        Rule("color", "red", Operator.NEXT, "position", "1"),
        Rule("color", "green", Operator.RIGHT, "color", "red"),
    )
    result = solve_puzzle(Puzzle(3, domains, rules), clingo_solver)

    assert result.outcome is Outcome.SOLVED
    assert result.more_models is False
    assert result.houses == {
        1: {"color": "blue"},
        2: {"color": "red"},
        3: {"color": "green"},
    }


def test_quoted_values_round_trip_through_solver(clingo_solver):
    domains = DomainRegistry.from_dict({"color": ["Red", "blue"]})
    rules = (Rule("color", "Red", Operator.SAME, "position", "2"),)
    result = solve_puzzle(Puzzle(2, domains, rules), clingo_solver)

    assert result.houses == {1: {"color": "blue"}, 2: {"color": "Red"}}


def test_position_with_leading_zero_is_solvable(clingo_solver):
    domains = DomainRegistry.from_dict({"color": ["red", "green", "blue"]})
    rules = (
        Rule("position", "03", Operator.SAME, "color", "red"),
        Rule("color", "green", Operator.NEXT, "position", "03"),
        Rule("color", "blue", Operator.LEFT, "position", "002"),
    )
    result = solve_puzzle(Puzzle(3, domains, rules), clingo_solver)

    assert result.outcome is Outcome.SOLVED
    assert result.houses == {
        1: {"color": "blue"},
        2: {"color": "green"},
        3: {"color": "red"},
    }
