"""
solver/types.py — typy wyniku solvera ASP i wyniku dekodowania.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import StrEnum
from typing import Protocol

from data_model import Category, HouseIndex, Value

# Tyle modeli prosi o solver oryginalny runner: drugi model mówi tylko,
# czy rozwiązanie jest jedyne.
DEFAULT_MODELS = 2

# dom → wartości przypisane do domu (bez rozpoznanej kategorii)
type HouseValues = dict[HouseIndex, list[Value]]

# dom → kategoria → wartość
type HouseAssignments = dict[HouseIndex, dict[Category, Value]]


class SolveStatus(StrEnum):
    """Pole Result wyniku clingo (--outf=2)."""
    SATISFIABLE   = "SATISFIABLE"
    UNSATISFIABLE = "UNSATISFIABLE"
    UNKNOWN       = "UNKNOWN"
    OPTIMUM_FOUND = "OPTIMUM FOUND"


class SolverError(RuntimeError):
    """Błąd po stronie solvera (gramatyka, grounding, transport, Result=ERROR)."""


@dataclass(frozen=True, slots=True)
class SolverResult:
    """
    Wynik wywołania solvera.

    - status:       SolveStatus
    - witnesses:    modele; każdy to lista atomów, np. ["assign(red,1)", ...]
    - models_count: liczba znalezionych modeli (Models.Number)
    - more_models:  czy istnieją kolejne modele (Models.More == "yes")
    """
    status: SolveStatus
    witnesses: tuple[tuple[str, ...], ...] = ()
    models_count: int = 0
    more_models: bool = False


class SolverClient(Protocol):
    """Zdolność uruchomienia programu ASP — wstrzykiwana, nie globalna."""

    def __call__(self, program: str, models: int = DEFAULT_MODELS) -> SolverResult:
        ...


class Outcome(StrEnum):
    """Wynik dekodowania widoczny dla użytkownika."""
    SOLVED             = "solved"
    NO_SOLUTION        = "no_solution"
    UNKNOWN            = "unknown"
    UNEXPECTED_OPTIMUM = "unexpected_optimum"


OUTCOME_MESSAGES: dict[Outcome, str] = {
    Outcome.SOLVED:             "Znaleziono rozwiązanie.",
    Outcome.NO_SOLUTION:        "Łamigłówka nie ma rozwiązania (UNSATISFIABLE).",
    Outcome.UNKNOWN:            "Solver nie rozstrzygnął spełnialności (np. limit czasu).",
    Outcome.UNEXPECTED_OPTIMUM: (
        "Solver zgłosił optymalizację (OPTIMUM FOUND) — program zawiera "
        "słabe ograniczenia, których kompilator nie generuje."
    ),
}


@dataclass(frozen=True, slots=True)
class DecodeResult:
    """
    Wynik dekodowania.

    - outcome:      Outcome
    - houses:       dom → kategoria → wartość; None gdy outcome != SOLVED
    - raw:          dom → wartości z pierwszego modelu (przed rozpoznaniem kategorii)
    - models_count: liczba modeli zgłoszona przez solver
    - more_models:  czy istnieją inne modele (rozwiązanie niejednoznaczne)
    """
    outcome: Outcome
    houses: HouseAssignments | None = None
    raw: HouseValues = field(default_factory=dict)
    models_count: int = 0
    more_models: bool = False

    @property
    def solved(self) -> bool:
        return self.outcome is Outcome.SOLVED

    @property
    def message(self) -> str:
        return OUTCOME_MESSAGES[self.outcome]
