"""Komenda: zebra rules — listowanie domen i reguł łamigłówki."""

from __future__ import annotations

import argparse

from rich import box
from rich.table import Table
from rich.text import Text

from data_model import Operator

from zebra._config import get_settings
from zebra._load import load_or_exit
from zebra._render import console

OPERATOR_STYLE: dict[Operator, str] = {
    Operator.SAME:  "green",
    Operator.NEXT:  "yellow",
    Operator.RIGHT: "cyan",
    Operator.LEFT:  "magenta",
}


def run(args: argparse.Namespace) -> None:
    puzzle, _ = load_or_exit(args.puzzle, get_settings())

    domains = Table(box=box.SIMPLE_HEAD, header_style="bold white", show_header=True)
    domains.add_column("KATEGORIA", style="bold cyan", no_wrap=True)
    domains.add_column("WARTOŚCI")
    for category in puzzle.domains.categories():
        domains.add_row(category, ", ".join(puzzle.domains[category]))
    domains.add_row(
        Text("position", style="dim"),
        Text(f"1..{puzzle.house_count}", style="dim"),
    )
    console.print()
    console.print(domains)

    if not puzzle.rules:
        console.print("[yellow]Brak reguł.[/yellow]")
        return

    table = Table(
        box=box.SIMPLE_HEAD,
        show_header=True,
        header_style="bold white",
        row_styles=["", "dim"],
    )
    table.add_column("#",        justify="right", no_wrap=True)
    table.add_column("LEWA",     no_wrap=True)
    table.add_column("OPERATOR", no_wrap=True)
    table.add_column("PRAWA",    no_wrap=True)

    for i, rule in enumerate(puzzle.rules):
        table.add_row(
            str(i),
            f"{rule.left_category}: {rule.left_value}",
            Text(rule.operator.label, style=OPERATOR_STYLE[rule.operator]),
            f"{rule.right_category}: {rule.right_value}",
        )

    console.print(table)
    console.print(f"  [dim]{len(puzzle.rules)} reguł[/dim]\n")


def add_parser(subparsers: argparse._SubParsersAction) -> None:  # type: ignore[type-arg]
    p = subparsers.add_parser(
        "rules",
        help="Listuje domeny i reguły łamigłówki.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        description="""
Wyświetla domeny kategorii (wraz z pseudo-kategorią position) oraz
reguły łamigłówki po normalizacji nazw.

Przykłady:
  zebra rules puzzles/zebra.json
        """,
    )
    p.add_argument(
        "puzzle",
        metavar="PLIK",
        help="Ścieżka do pliku JSON łamigłówki.",
    )
    p.set_defaults(func=run)
