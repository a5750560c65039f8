"""
zebra — narzędzie CLI: łamigłówki typu "zebra" → ASP (clingo) → rozwiązanie.

Użycie:
  zebra <komenda> [opcje]

Komendy:
  validate   Waliduje plik JSON łamigłówki.
  compile    Generuje program ASP dla łamigłówki.
  solve      Rozwiązuje łamigłówkę solverem clingo.
  decode     Dekoduje zapisany wynik clingo (--outf=2).
  rules      Listuje domeny i reguły łamigłówki.

Konfiguracja (zmienne środowiskowe lub plik .env):
  ZEBRA_MODELS            liczba modeli dla solvera (domyślnie 2)
  ZEBRA_TIMEOUT           limit czasu solvera w sekundach (domyślnie 0 = brak)
  ZEBRA_CATEGORY_ALIASES  aliasy kategorii, np. "drink=beverage"
"""

from __future__ import annotations

import argparse
import logging
import sys

# Windows: terminal może używać cp1252 — wymuszamy UTF-8, żeby polskie znaki
# w tekstach pomocy argparse były wypisywane poprawnie.
if hasattr(sys.stdout, "reconfigure"):
    sys.stdout.reconfigure(encoding="utf-8", errors="replace")
if hasattr(sys.stderr, "reconfigure"):
    sys.stderr.reconfigure(encoding="utf-8", errors="replace")

from rich.logging import RichHandler

from zebra import __version__
from zebra._render import console
from zebra.commands import validate as cmd_validate
from zebra.commands import compile as cmd_compile
from zebra.commands import solve as cmd_solve
from zebra.commands import decode as cmd_decode
from zebra.commands import rules as cmd_rules


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="zebra",
        description="Łamigłówki typu zebra — kompilacja do ASP i dekodowanie wyniku clingo.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "--version", action="version", version=f"zebra {__version__}"
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Wypisuj logi diagnostyczne (kompilacja, solver, dekodowanie).",
    )

    subparsers = parser.add_subparsers(
        title="komendy",
        metavar="<komenda>",
        dest="command",
    )
    subparsers.required = True

    cmd_validate.add_parser(subparsers)
    cmd_compile.add_parser(subparsers)
    cmd_solve.add_parser(subparsers)
    cmd_decode.add_parser(subparsers)
    cmd_rules.add_parser(subparsers)

    return parser


def _setup_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=console, show_path=False)],
    )


def main(argv: list[str] | None = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)
    _setup_logging(args.verbose)
    try:
        args.func(args)
    except ValueError as e:
        # np. błędne ZEBRA_MODELS / ZEBRA_CATEGORY_ALIASES
        console.print(f"[red]Błąd:[/red] {e}")
        raise SystemExit(1)


if __name__ == "__main__":
    main()
