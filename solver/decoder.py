"""
solver/decoder.py — dekodowanie wyniku solvera do przypisań dom → atrybuty.

Publiczne API:
  parse_assignments(atoms)        -> HouseValues
  categorize(house_values, domains) -> HouseAssignments
  decode(result, domains)         -> DecodeResult
"""

from __future__ import annotations

import logging
import re
from collections.abc import Iterable

from data_model import DomainRegistry, unquote_term
from data_model.common import ASSIGN_PRED

from .types import (
    DecodeResult,
    HouseAssignments,
    HouseValues,
    Outcome,
    SolverResult,
    SolveStatus,
)

log = logging.getLogger(__name__)

# assign(<wartość>,<dom>) — argumenty bez nawiasów i przecinków
_ASSIGN_RE = re.compile(
    rf"^{ASSIGN_PRED}\(\s*([^,()]+?)\s*,\s*([^,()]+?)\s*\)$"
)


def parse_assignments(atoms: Iterable[str]) -> HouseValues:
    """
    Grupuje atomy assign/2 według domu.

    Atomy o innym kształcie (inne predykaty, dom niebędący liczbą) są
    pomijane — solver może zwrócić atomy pomocnicze.

    Przykład::

        parse_assignments(["assign(red,1)", "assign(tea,1)", "x(y)"])
        → {1: ["red", "tea"]}
    """
    houses: HouseValues = {}
    for atom in atoms:
        m = _ASSIGN_RE.match(atom.strip())
        if not m:
            continue
        try:
            house = int(m.group(2))
        except ValueError:
            log.debug("pominięto atom z nieliczbowym domem: %s", atom)
            continue
        houses.setdefault(house, []).append(unquote_term(m.group(1)))
    return houses


def categorize(house_values: HouseValues, domains: DomainRegistry) -> HouseAssignments:
    """
    Rozpoznaje kategorię każdej wartości przypisanej do domu.

    Dla każdego domu i każdej kategorii z rejestru szuka wartości należącej
    do domeny tej kategorii. Kategoria bez wartości w danym domu jest
    pomijana (rejestr może być niepełny podczas edycji).
    """
    result: HouseAssignments = {}
    for house in sorted(house_values):
        values = house_values[house]
        attrs: dict[str, str] = {}
        for category in domains.categories():
            domain = domains[category]
            found = next((v for v in values if v in domain), None)
            if found is not None:
                attrs[category] = found
        result[house] = attrs
    return result


def decode(result: SolverResult, domains: DomainRegistry) -> DecodeResult:
    """
    Zamienia wynik solvera na DecodeResult.

    SATISFIABLE   → przypisania z pierwszego modelu (kolejne nie są scalane)
    UNSATISFIABLE → Outcome.NO_SOLUTION
    UNKNOWN       → Outcome.UNKNOWN
    OPTIMUM FOUND → Outcome.UNEXPECTED_OPTIMUM
    """
    meta = {"models_count": result.models_count, "more_models": result.more_models}

    match result.status:
        case SolveStatus.SATISFIABLE:
            atoms = result.witnesses[0] if result.witnesses else ()
            raw = parse_assignments(atoms)
            log.debug("zdekodowano %d domów z pierwszego modelu", len(raw))
            return DecodeResult(
                outcome=Outcome.SOLVED,
                houses=categorize(raw, domains),
                raw=raw,
                **meta,
            )
        case SolveStatus.UNSATISFIABLE:
            return DecodeResult(outcome=Outcome.NO_SOLUTION, **meta)
        case SolveStatus.UNKNOWN:
            return DecodeResult(outcome=Outcome.UNKNOWN, **meta)
        case SolveStatus.OPTIMUM_FOUND:
            return DecodeResult(outcome=Outcome.UNEXPECTED_OPTIMUM, **meta)
