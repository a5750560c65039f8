"""
solver/compiler.py — kompilacja łamigłówki do programu ASP (clingo).

compile_program(house_count, rules, domains) -> str

Kolejność emisji:
  1. house(1..N).
  2. fakty domen:                 color(red; green; ...).
  3. bijekcja dla każdej kategorii:
       1 { assign(A, H) : house(H) } 1 :- color(A).
       :- house(H), #count { X : assign(X, H), color(X) } != 1.
  4. next_to/2 (symetryczne sąsiedztwo domów)
  5. po jednym ograniczeniu na regułę
  6. #show assign/2.

Kompilator jest czystą funkcją: nie sprawdza danych (robi to walidator)
i dla tych samych wejść zwraca identyczny tekst. Kolejność kategorii to
kolejność w rejestrze, kolejność ograniczeń to kolejność reguł.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence

from data_model import (
    POSITION,
    DomainRegistry,
    Operator,
    Puzzle,
    Rule,
    asp_term,
)
from data_model.common import ASSIGN_PRED, HOUSE_PRED, NEXT_TO_PRED

log = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Ograniczenia dla reguł
# ---------------------------------------------------------------------------

def rule_constraint(rule: Rule) -> str | None:
    """
    Zwraca ograniczenie (integrity constraint) dla reguły.

    None dla reguły 'same' między dwiema pozycjami — dwa literały
    numerów domów nie wnoszą ograniczenia.
    """
    left  = asp_term(rule.left_value)
    right = asp_term(rule.right_value)

    match rule.operator:
        case Operator.SAME:
            if rule.left_is_position and rule.right_is_position:
                return None
            if rule.left_is_position:
                return f":- {ASSIGN_PRED}({right}, H), H != {_house(rule.left_value)}."
            if rule.right_is_position:
                return f":- {ASSIGN_PRED}({left}, H), H != {_house(rule.right_value)}."
            return f":- {ASSIGN_PRED}({left}, H1), {ASSIGN_PRED}({right}, H2), H1 != H2."
        case Operator.NEXT:
            h1, h2, body = _operands(rule, left, right)
            return f":- {body}not {NEXT_TO_PRED}({h1}, {h2})."
        case Operator.RIGHT:
            h1, h2, body = _operands(rule, left, right)
            return f":- {body}{h1} != {h2} + 1."
        case Operator.LEFT:
            h1, h2, body = _operands(rule, left, right)
            return f":- {body}{h1} != {h2} - 1."


def _house(value: str) -> str:
    """Numer domu jako liczba ASP bez zer wiodących ("03" → "3")."""
    return str(int(value))


def _operands(rule: Rule, left: str, right: str) -> tuple[str, str, str]:
    """
    Zwraca (H1, H2, prefiks ciała) dla reguł next/right/left.

    Strona `position` jest literałem numeru domu, więc nie wprowadza
    atomu assign/2 ani zmiennej.
    """
    body: list[str] = []
    if rule.left_is_position:
        h1 = _house(rule.left_value)
    else:
        h1 = "H1"
        body.append(f"{ASSIGN_PRED}({left}, H1)")
    if rule.right_is_position:
        h2 = _house(rule.right_value)
    else:
        h2 = "H2"
        body.append(f"{ASSIGN_PRED}({right}, H2)")
    return h1, h2, "".join(f"{atom}, " for atom in body)


# ---------------------------------------------------------------------------
# Program
# ---------------------------------------------------------------------------

def compile_program(
    house_count: int,
    rules: Sequence[Rule],
    domains: DomainRegistry,
) -> str:
    """
    Generuje program ASP dla łamigłówki.

    Args:
        house_count: liczba domów N (zakres house(1..N))
        rules:       reguły w kolejności emisji
        domains:     rejestr domen; `position` (jeśli obecne) jest pomijane

    Returns:
        Tekst programu zakończony znakiem nowej linii.
    """
    categories = [c for c in domains if c != POSITION]
    out: list[str] = []

    out.append(f"% Define houses numbered 1 through {house_count}.")
    out.append(f"{HOUSE_PRED}(1..{house_count}).")
    out.append("")

    out.append("% Define the domains for each attribute.")
    for category in categories:
        values = "; ".join(asp_term(v) for v in domains[category])
        out.append(f"{category}({values}).")
    out.append("")

    out.append("% Each attribute is assigned to exactly one house.")
    for category in categories:
        out.append(
            f"1 {{ {ASSIGN_PRED}(A, H) : {HOUSE_PRED}(H) }} 1 :- {category}(A)."
        )
    out.append("")

    out.append("% Each house gets exactly one attribute from each category.")
    for category in categories:
        out.append(
            f":- {HOUSE_PRED}(H), #count {{ X : {ASSIGN_PRED}(X, H), {category}(X) }} != 1."
        )
    out.append("")

    out.append("% Define the next_to predicate for adjacency.")
    out.append(f"{NEXT_TO_PRED}(X, Y) :- {HOUSE_PRED}(X), {HOUSE_PRED}(Y), X = Y + 1.")
    out.append(f"{NEXT_TO_PRED}(X, Y) :- {HOUSE_PRED}(X), {HOUSE_PRED}(Y), X = Y - 1.")
    out.append("")

    out.append("% Constraints for each rule.")
    for rule in rules:
        constraint = rule_constraint(rule)
        if constraint is None:
            log.debug("reguła %s nie generuje ograniczenia (dwie pozycje)", rule)
            continue
        out.append(constraint)
    out.append("")

    out.append(f"#show {ASSIGN_PRED}/2.")

    program = "\n".join(out) + "\n"
    log.debug(
        "skompilowano program: %d domów, %d kategorii, %d reguł, %d znaków",
        house_count, len(categories), len(rules), len(program),
    )
    return program


def compile_puzzle(puzzle: Puzzle) -> str:
    """compile_program() dla obiektu Puzzle."""
    return compile_program(puzzle.house_count, puzzle.rules, puzzle.domains)
