"""Komenda: zebra solve — kompiluje łamigłówkę i rozwiązuje ją clingo."""

from __future__ import annotations

import argparse

from rich.syntax import Syntax

from solver import ClingoSolver, SolverError, compile_puzzle, decode

from zebra._config import get_settings
from zebra._load import load_or_exit
from zebra._render import console, show_report, show_solution


def run(args: argparse.Namespace) -> None:
    settings = get_settings()
    puzzle, report = load_or_exit(args.puzzle, settings)
    if report.warnings:
        show_report(report)

    program = compile_puzzle(puzzle)
    if args.show_program:
        console.print(Syntax(program, "prolog", line_numbers=True))

    models  = args.models if args.models is not None else settings.models
    timeout = args.timeout if args.timeout is not None else settings.timeout
    solver  = ClingoSolver(timeout=timeout)

    console.print(
        f"Łamigłówka: [bold]{puzzle.house_count}[/bold] domów, "
        f"[bold]{len(puzzle.domains.categories())}[/bold] kategorii, "
        f"[bold]{len(puzzle.rules)}[/bold] reguł   "
        f"[dim](modele={models}, limit={timeout or '—'}s)[/dim]"
    )

    try:
        raw = solver(program, models)
    except SolverError as e:
        console.print(f"[red]Błąd solvera:[/red] {e}")
        raise SystemExit(1)

    result = decode(raw, puzzle.domains)
    show_solution(result, puzzle)
    if not result.solved:
        raise SystemExit(2)


def add_parser(subparsers: argparse._SubParsersAction) -> None:  # type: ignore[type-arg]
    p = subparsers.add_parser(
        "solve",
        help="Rozwiązuje łamigłówkę solverem clingo.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        description="""
Waliduje łamigłówkę, kompiluje ją do ASP, uruchamia clingo i wyświetla
przypisanie atrybutów do domów.

Kod wyjścia: 0 — rozwiązanie, 1 — błąd danych lub solvera,
2 — brak rozwiązania / wynik nieustalony.

Przykłady:
  zebra solve puzzles/zebra.json
  zebra solve puzzles/zebra.json --models 0 --timeout 10
  zebra solve puzzles/zebra.json --show-program
        """,
    )
    p.add_argument(
        "puzzle",
        metavar="PLIK",
        help="Ścieżka do pliku JSON łamigłówki.",
    )
    p.add_argument(
        "--models", "-n",
        type=int,
        metavar="N",
        help="Liczba modeli dla solvera (0 = wszystkie; domyślnie ZEBRA_MODELS lub 2).",
    )
    p.add_argument(
        "--timeout", "-t",
        type=float,
        metavar="SEK",
        help="Limit czasu solvera w sekundach (domyślnie ZEBRA_TIMEOUT lub brak).",
    )
    p.add_argument(
        "--show-program",
        action="store_true",
        help="Wyświetl wygenerowany program ASP przed rozwiązaniem.",
    )
    p.set_defaults(func=run)
