"""Testy kompilatora: tekst programu ASP i ograniczenia reguł."""

import logging

import pytest

from data_model import DomainRegistry, Operator, Puzzle, Rule
from solver import compile_program, compile_puzzle, rule_constraint

EXPECTED_SMALL = """\
% Define houses numbered 1 through 3.
house(1..3).

% Define the domains for each attribute.
color(red; green; blue).
beverage(tea; milk; water).

% Each attribute is assigned to exactly one house.
1 { assign(A, H) : house(H) } 1 :- color(A).
1 { assign(A, H) : house(H) } 1 :- beverage(A).

% Each house gets exactly one attribute from each category.
:- house(H), #count { X : assign(X, H), color(X) } != 1.
:- house(H), #count { X : assign(X, H), beverage(X) } != 1.

% Define the next_to predicate for adjacency.
next_to(X, Y) :- house(X), house(Y), X = Y + 1.
next_to(X, Y) :- house(X), house(Y), X = Y - 1.

% Constraints for each rule.
:- assign(red, H1), assign(tea, H2), H1 != H2.
:- assign(milk, H), H != 2.

#show assign/2.
"""


def _lines(program: str) -> list[str]:
    return program.splitlines()


def test_small_program_text(small_puzzle):
    assert compile_puzzle(small_puzzle) == EXPECTED_SMALL


@pytest.mark.parametrize("houses", [1, 3, 5, 12])
def test_single_house_range_fact(small_domains, houses):
    lines = _lines(compile_program(houses, [], small_domains))
    assert lines.count(f"house(1..{houses}).") == 1
    assert sum(1 for l in lines if l.startswith("house(")) == 1


def test_one_choice_rule_and_count_constraint_per_category(zebra_puzzle):
    program = compile_puzzle(zebra_puzzle)
    for category in zebra_puzzle.domains.categories():
        assert program.count(f"1 {{ assign(A, H) : house(H) }} 1 :- {category}(A).") == 1
        assert program.count(
            f":- house(H), #count {{ X : assign(X, H), {category}(X) }} != 1."
        ) == 1


def test_compilation_is_deterministic(zebra_puzzle):
    assert compile_puzzle(zebra_puzzle) == compile_puzzle(zebra_puzzle)


def test_rule_order_changes_output(small_puzzle):
    reordered = Puzzle(
        small_puzzle.house_count,
        small_puzzle.domains,
        tuple(reversed(small_puzzle.rules)),
    )
    assert compile_puzzle(reordered) != compile_puzzle(small_puzzle)


def test_position_never_declared_as_fact():
    domains = DomainRegistry.from_dict({"position": ["1", "2"], "color": ["red", "blue"]})
    program = compile_program(2, [], domains)

    assert "position(" not in program
    assert "color(red; blue)." in program


def test_compiler_does_not_mutate_inputs(small_puzzle):
    before = small_puzzle.to_dict()
    compile_puzzle(small_puzzle)
    assert small_puzzle.to_dict() == before


def test_show_directive_is_last_line(small_puzzle):
    assert _lines(compile_puzzle(small_puzzle))[-1] == "#show assign/2."


# ---------------------------------------------------------------------------
# ograniczenia reguł
# ---------------------------------------------------------------------------

@pytest.mark.parametrize(
    ("rule", "expected"),
    [
        (
            Rule("position", "3", Operator.SAME, "beverage", "milk"),
            ":- assign(milk, H), H != 3.",
        ),
        (
            Rule("beverage", "milk", Operator.SAME, "position", "3"),
            ":- assign(milk, H), H != 3.",
        ),
        (
            Rule("nationality", "english", Operator.SAME, "color", "red"),
            ":- assign(english, H1), assign(red, H2), H1 != H2.",
        ),
        (
            Rule("color", "green", Operator.RIGHT, "color", "ivory"),
            ":- assign(green, H1), assign(ivory, H2), H1 != H2 + 1.",
        ),
        (
            Rule("color", "ivory", Operator.LEFT, "color", "green"),
            ":- assign(ivory, H1), assign(green, H2), H1 != H2 - 1.",
        ),
        (
            Rule("smoke", "kools", Operator.NEXT, "pet", "horse"),
            ":- assign(kools, H1), assign(horse, H2), not next_to(H1, H2).",
        ),
        (
            Rule("nationality", "norwegian", Operator.NEXT, "position", "2"),
            ":- assign(norwegian, H1), not next_to(H1, 2).",
        ),
        (
            Rule("position", "1", Operator.RIGHT, "color", "blue"),
            ":- assign(blue, H2), 1 != H2 + 1.",
        ),
    ],
)
def test_rule_constraints(rule, expected):
    assert rule_constraint(rule) == expected


def test_position_same_position_emits_nothing(small_domains):
    rule = Rule("position", "1", Operator.SAME, "position", "2")
    assert rule_constraint(rule) is None

    with_rule    = compile_program(3, [rule], small_domains)
    without_rule = compile_program(3, [], small_domains)
    assert with_rule == without_rule


def test_non_constant_values_are_quoted():
    domains = DomainRegistry.from_dict({"color": ["Red", "blue"]})
    rule = Rule("color", "Red", Operator.SAME, "position", "1")
    program = compile_program(2, [rule], domains)

    assert 'color("Red"; blue).' in program
    assert ':- assign("Red", H), H != 1.' in program


@pytest.mark.parametrize(
    ("rule", "expected"),
    [
        (
            Rule("position", "03", Operator.SAME, "beverage", "milk"),
            ":- assign(milk, H), H != 3.",
        ),
        (
            Rule("color", "red", Operator.NEXT, "position", "002"),
            ":- assign(red, H1), not next_to(H1, 2).",
        ),
        (
            Rule("position", "01", Operator.LEFT, "color", "blue"),
            ":- assign(blue, H2), 1 != H2 - 1.",
        ),
    ],
)
def test_house_numbers_lose_leading_zeros(rule, expected):
    assert rule_constraint(rule) == expected


def test_position_same_position_is_not_logged_as_warning(small_domains, caplog):
    rule = Rule("position", "1", Operator.SAME, "position", "2")
    with caplog.at_level(logging.DEBUG, logger="solver.compiler"):
        compile_program(3, [rule], small_domains)

    assert caplog.records
    assert all(r.levelno < logging.WARNING for r in caplog.records)
