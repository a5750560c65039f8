"""
solver/session.py — cykl walidacja → kompilacja → solver → dekodowanie.

prepare_program(puzzle)              -> (program, report)
solve_puzzle(puzzle, solver, models) -> DecodeResult
PuzzleSession                        — stan edytowanej łamigłówki z tokenem
                                       żądania (odrzucanie nieaktualnych wyników)
"""

from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass

from data_model import Puzzle
from validator import InvalidPuzzleError, PuzzleValidator, ValidationReport

from .compiler import compile_puzzle
from .decoder import decode
from .types import DEFAULT_MODELS, DecodeResult, SolverClient, SolverResult

log = logging.getLogger(__name__)


def prepare_program(
    puzzle: Puzzle,
    validator: PuzzleValidator | None = None,
) -> tuple[str, ValidationReport]:
    """
    Waliduje łamigłówkę i kompiluje ją do programu ASP.

    Raises:
        InvalidPuzzleError gdy walidacja zgłosiła błędy — program nie
        jest wtedy generowany.
    """
    report = (validator or PuzzleValidator()).validate(puzzle)
    if not report.is_valid:
        raise InvalidPuzzleError(report)
    for w in report.warnings:
        log.warning("%s", w.message)
    return compile_puzzle(puzzle), report


def solve_puzzle(
    puzzle: Puzzle,
    solver: SolverClient,
    models: int = DEFAULT_MODELS,
) -> DecodeResult:
    """Pełny cykl dla jednej łamigłówki. SolverError z solvera jest propagowany."""
    program, _ = prepare_program(puzzle)
    return decode(solver(program, models), puzzle.domains)


# ---------------------------------------------------------------------------
# PuzzleSession
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class SolveTicket:
    """Program wygenerowany dla stanu łamigłówki o danym tokenie."""
    token: int
    program: str
    report: ValidationReport


@dataclass(frozen=True, slots=True)
class SolveOutput:
    """Wynik solvera oznaczony tokenem żądania."""
    token: int
    program: str
    result: DecodeResult


class PuzzleSession:
    """
    Stan łamigłówki edytowanej interaktywnie.

    Każda zmiana łamigłówki (update) zwiększa token. Wynik solvera niesie
    token stanu, dla którego go policzono; accept() zwraca None dla
    wyników nieaktualnych.

    Użycie::

        session = PuzzleSession(ClingoSolver())
        session.update(puzzle)
        output = await session.solve_async()
        result = session.accept(output)   # None, jeśli łamigłówka się zmieniła
    """

    def __init__(
        self,
        solver: SolverClient,
        models: int = DEFAULT_MODELS,
        validator: PuzzleValidator | None = None,
    ) -> None:
        self._solver    = solver
        self._models    = models
        self._validator = validator or PuzzleValidator()
        self._puzzle: Puzzle | None = None
        self._token     = 0

    @property
    def token(self) -> int:
        return self._token

    @property
    def puzzle(self) -> Puzzle | None:
        return self._puzzle

    def update(self, puzzle: Puzzle) -> int:
        """Ustawia nowy stan łamigłówki; zwraca nowy token."""
        self._puzzle = puzzle
        self._token += 1
        return self._token

    def is_current(self, token: int) -> bool:
        return token == self._token

    def compile(self) -> SolveTicket:
        """
        Kompiluje bieżący stan.

        Raises:
            RuntimeError       gdy nie ustawiono łamigłówki.
            InvalidPuzzleError gdy łamigłówka jest niepoprawna.
        """
        return self._compile(self._require_puzzle())

    def _require_puzzle(self) -> Puzzle:
        if self._puzzle is None:
            raise RuntimeError("Brak łamigłówki — wywołaj update() przed compile().")
        return self._puzzle

    def _compile(self, puzzle: Puzzle) -> SolveTicket:
        program, report = prepare_program(puzzle, self._validator)
        return SolveTicket(token=self._token, program=program, report=report)

    def solve(self) -> SolveOutput:
        puzzle = self._require_puzzle()
        ticket = self._compile(puzzle)
        raw = self._solver(ticket.program, self._models)
        return self._finish(ticket, puzzle, raw)

    async def solve_async(self) -> SolveOutput:
        """Jak solve(), ale wywołanie solvera odbywa się w wątku roboczym."""
        puzzle = self._require_puzzle()
        ticket = self._compile(puzzle)
        raw = await asyncio.to_thread(self._solver, ticket.program, self._models)
        return self._finish(ticket, puzzle, raw)

    def _finish(self, ticket: SolveTicket, puzzle: Puzzle, raw: SolverResult) -> SolveOutput:
        return SolveOutput(
            token=ticket.token,
            program=ticket.program,
            result=decode(raw, puzzle.domains),
        )

    def accept(self, output: SolveOutput) -> DecodeResult | None:
        """Zwraca wynik, jeśli dotyczy bieżącego stanu; w przeciwnym razie None."""
        if not self.is_current(output.token):
            log.debug(
                "odrzucono nieaktualny wynik (token %d, bieżący %d)",
                output.token, self._token,
            )
            return None
        return output.result
