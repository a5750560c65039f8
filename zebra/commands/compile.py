"""Komenda: zebra compile — generuje program ASP dla łamigłówki."""

from __future__ import annotations

import argparse

from solver import compile_puzzle

from zebra._config import get_settings
from zebra._load import load_or_exit
from zebra._render import show_report, write_text


def run(args: argparse.Namespace) -> None:
    puzzle, report = load_or_exit(args.puzzle, get_settings())
    if report.warnings:
        show_report(report)
    write_text(compile_puzzle(puzzle), args.output)


def add_parser(subparsers: argparse._SubParsersAction) -> None:  # type: ignore[type-arg]
    p = subparsers.add_parser(
        "compile",
        help="Generuje program ASP (clingo) dla łamigłówki.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        description="""
Waliduje łamigłówkę i wypisuje program ASP gotowy dla clingo.

Przykłady:
  zebra compile puzzles/zebra.json
  zebra compile puzzles/zebra.json -o zebra.lp
  zebra compile puzzles/zebra.json | clingo --outf=2 > wynik.json
        """,
    )
    p.add_argument(
        "puzzle",
        metavar="PLIK",
        help="Ścieżka do pliku JSON łamigłówki.",
    )
    p.add_argument(
        "--output", "-o",
        metavar="PLIK",
        help="Zapisz program do pliku zamiast na stdout.",
    )
    p.set_defaults(func=run)
