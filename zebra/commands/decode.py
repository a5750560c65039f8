"""Komenda: zebra decode — dekoduje zapisany wynik clingo (--outf=2)."""

from __future__ import annotations

import argparse
import pathlib

from data_model import PuzzleFormatError
from solver import SolverError, decode, load_result_json

from zebra._config import get_settings
from zebra._load import load_or_exit
from zebra._render import console, show_solution


def run(args: argparse.Namespace) -> None:
    puzzle, _ = load_or_exit(args.puzzle, get_settings())

    result_path = pathlib.Path(args.result)
    if not result_path.exists():
        console.print(f"[red]Brak pliku wyniku:[/red] {result_path}")
        raise SystemExit(1)

    try:
        raw = load_result_json(result_path)
    except (PuzzleFormatError, SolverError) as e:
        console.print(f"[red]Błąd wyniku solvera:[/red] {e}")
        raise SystemExit(1)

    result = decode(raw, puzzle.domains)
    show_solution(result, puzzle)
    if not result.solved:
        raise SystemExit(2)


def add_parser(subparsers: argparse._SubParsersAction) -> None:  # type: ignore[type-arg]
    p = subparsers.add_parser(
        "decode",
        help="Dekoduje wynik clingo (--outf=2) dla łamigłówki.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        description="""
Odczytuje wynik zewnętrznego uruchomienia clingo w formacie JSON i
wyświetla przypisanie atrybutów do domów. Domeny z pliku łamigłówki
służą do rozpoznania kategorii wartości.

Przykłady:
  zebra compile puzzles/zebra.json | clingo --outf=2 -n 2 > wynik.json
  zebra decode puzzles/zebra.json --result wynik.json
        """,
    )
    p.add_argument(
        "puzzle",
        metavar="PLIK",
        help="Ścieżka do pliku JSON łamigłówki.",
    )
    p.add_argument(
        "--result", "-r",
        metavar="PLIK",
        required=True,
        help="Plik JSON z wynikiem clingo --outf=2.",
    )
    p.set_defaults(func=run)
