"""Komenda: zebra validate — waliduje plik łamigłówki."""

from __future__ import annotations

import argparse
import dataclasses
import json
import pathlib

from data_model import PuzzleFormatError
from solver import load_puzzle

from zebra._config import get_settings
from zebra._render import console, show_report


def run(args: argparse.Namespace) -> None:
    path = pathlib.Path(args.puzzle)
    if not path.exists():
        console.print(f"[red]Brak pliku łamigłówki:[/red] {path}")
        raise SystemExit(1)

    try:
        puzzle, report = load_puzzle(path, get_settings().aliases)
    except PuzzleFormatError as exc:
        console.print(f"[red]Błąd wczytywania:[/red] {exc}")
        raise SystemExit(1)

    if report.is_valid:
        console.print(
            f"[green]OK[/green]  Łamigłówka [bold]{path.name}[/bold] jest poprawna "
            f"({puzzle.house_count} domów, {len(puzzle.domains.categories())} kategorii, "
            f"{len(puzzle.rules)} reguł)."
        )
    else:
        console.print(
            f"[red]BŁĄD[/red]  Łamigłówka [bold]{path.name}[/bold] — "
            f"{len(report.errors)} błąd(ów)."
        )
    show_report(report)

    if args.json_output:
        out: dict = {
            "is_valid": report.is_valid,
            "errors":   [dataclasses.asdict(e) for e in report.errors],
            "warnings": [dataclasses.asdict(w) for w in report.warnings],
        }
        if args.include_normalized and puzzle is not None:
            out["normalized_puzzle"] = puzzle.to_dict()
        print(json.dumps(out, ensure_ascii=False, indent=2))

    if not report.is_valid:
        raise SystemExit(1)


def add_parser(subparsers: argparse._SubParsersAction) -> None:  # type: ignore[type-arg]
    p = subparsers.add_parser(
        "validate",
        help="Waliduje plik JSON łamigłówki.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        description="""\
Waliduje plik JSON łamigłówki (etapy A–D):

  A  JSON Schema     (kształt pliku)
  B  Liczba domów    (dodatnia liczba całkowita)
  C  Domeny          (nazwy, kategorie zarezerwowane, wartości, rozmiar)
  D  Reguły          (kategorie i wartości istnieją; stop na pierwszej błędnej)

Przykłady:
  zebra validate puzzles/zebra.json
  zebra validate puzzles/zebra.json --json-output --include-normalized
        """,
    )
    p.add_argument(
        "puzzle",
        metavar="PLIK",
        help="Ścieżka do pliku JSON łamigłówki.",
    )
    p.add_argument(
        "--json-output",
        action="store_true",
        help="Wypisz raport walidacji jako JSON na stdout.",
    )
    p.add_argument(
        "--include-normalized",
        action="store_true",
        help="Dołącz znormalizowaną łamigłówkę do wyjścia JSON (wymaga --json-output).",
    )
    p.set_defaults(func=run)
