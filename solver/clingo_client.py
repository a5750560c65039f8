"""
solver/clingo_client.py — uruchamianie programu przez clingo.

ClingoSolver(timeout)(program, models)  → SolverResult
solver_result_from_json(data)          → SolverResult  (wyjście clingo --outf=2)

ClingoSolver spełnia protokół SolverClient; w testach można go zastąpić
dowolną funkcją (program, models) -> SolverResult.
"""

from __future__ import annotations

import logging
from typing import Any

import clingo

from .types import DEFAULT_MODELS, SolverError, SolverResult, SolveStatus

log = logging.getLogger(__name__)


class ClingoSolver:
    """
    Klient solvera oparty na pakiecie clingo.

    - timeout:   limit czasu rozwiązywania w sekundach; 0 = bez limitu.
                 Po przekroczeniu wyszukiwanie jest przerywane i — jeśli nie
                 znaleziono modelu — wynik ma status UNKNOWN.
    - arguments: dodatkowe opcje clingo (np. ["--seed=1"])
    """

    def __init__(self, timeout: float = 0.0, arguments: list[str] | None = None) -> None:
        self._timeout   = timeout
        self._arguments = list(arguments or [])

    def __call__(self, program: str, models: int = DEFAULT_MODELS) -> SolverResult:
        messages: list[str] = []

        def _logger(code: clingo.MessageCode, message: str) -> None:
            messages.append(message.strip())
            log.debug("clingo [%s]: %s", code, message.strip())

        try:
            ctl = clingo.Control([f"--models={models}", *self._arguments], logger=_logger)
            ctl.add("base", [], program)
            ctl.ground([("base", [])])
        except RuntimeError as exc:
            detail = "; ".join(messages) or str(exc)
            raise SolverError(f"clingo odrzucił program: {detail}") from exc

        witnesses: list[tuple[str, ...]] = []
        optimal = False

        def _on_model(model: clingo.Model) -> None:
            nonlocal optimal
            witnesses.append(tuple(sorted(str(s) for s in model.symbols(shown=True))))
            optimal = bool(model.cost) and model.optimality_proven

        with ctl.solve(on_model=_on_model, async_=True) as handle:
            if self._timeout > 0 and not handle.wait(self._timeout):
                log.debug("przekroczono limit czasu %.1fs — przerywam", self._timeout)
                handle.cancel()
            result = handle.get()

        if result.unsatisfiable:
            status = SolveStatus.UNSATISFIABLE
        elif result.satisfiable:
            status = SolveStatus.OPTIMUM_FOUND if optimal else SolveStatus.SATISFIABLE
        else:
            status = SolveStatus.UNKNOWN

        log.debug("clingo: %s, %d modeli", status, len(witnesses))
        return SolverResult(
            status=status,
            witnesses=tuple(witnesses),
            models_count=len(witnesses),
            more_models=bool(result.satisfiable) and not result.exhausted,
        )


# ---------------------------------------------------------------------------
# Wyjście JSON clingo (--outf=2)
# ---------------------------------------------------------------------------

def solver_result_from_json(data: dict[str, Any]) -> SolverResult:
    """
    Buduje SolverResult z wyjścia `clingo --outf=2`.

    Oczekiwany format (fragment)::

        {
            "Result": "SATISFIABLE",
            "Call":   [{"Witnesses": [{"Value": ["assign(red,1)", ...]}]}],
            "Models": {"Number": 1, "More": "no"}
        }

    Raises:
        SolverError gdy Result jest nieznany (np. "ERROR") lub brak pola.
    """
    raw_status = data.get("Result")
    try:
        status = SolveStatus(raw_status)
    except ValueError:
        detail = data.get("Error") or f"Result={raw_status!r}"
        raise SolverError(f"Nieoczekiwany wynik solvera: {detail}") from None

    calls = data.get("Call") or data.get("Calls") or []
    if not isinstance(calls, list):
        calls = []
    witnesses: list[tuple[str, ...]] = []
    if calls:
        for w in calls[0].get("Witnesses", []):
            witnesses.append(tuple(str(a) for a in w.get("Value", [])))

    models = data.get("Models", {})
    return SolverResult(
        status=status,
        witnesses=tuple(witnesses),
        models_count=int(models.get("Number", len(witnesses))),
        more_models=models.get("More") == "yes",
    )
