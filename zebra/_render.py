"""Wspólne wyświetlanie (rich) dla komend zebra."""

from __future__ import annotations

import pathlib
import sys

from rich import box
from rich.console import Console
from rich.table import Table

from data_model import Puzzle
from solver import DecodeResult, Outcome
from validator import ValidationReport

console = Console(width=160)

OUTCOME_STYLE: dict[Outcome, str] = {
    Outcome.SOLVED:             "green",
    Outcome.NO_SOLUTION:        "red",
    Outcome.UNKNOWN:            "yellow",
    Outcome.UNEXPECTED_OPTIMUM: "magenta",
}


def show_report(report: ValidationReport) -> None:
    """Tabela błędów i lista ostrzeżeń walidacji."""
    if report.errors:
        table = Table(box=box.SIMPLE, show_header=True, header_style="bold")
        table.add_column("Kod",      style="yellow", no_wrap=True)
        table.add_column("Ścieżka", style="cyan",   no_wrap=True)
        table.add_column("Komunikat")
        table.add_column("Poprawka", style="dim")

        for e in report.errors:
            table.add_row(e.code, e.path, e.message, e.expected_fix)

        console.print(table)

    if report.warnings:
        console.print("[yellow]Ostrzeżenia:[/yellow]")
        for w in report.warnings:
            console.print(f"  [yellow]·[/yellow] {w}")


def show_solution(result: DecodeResult, puzzle: Puzzle) -> None:
    """Tabela dom × kategoria; brak wartości w domu → 'none'."""
    style = OUTCOME_STYLE[result.outcome]
    console.print(f"[{style}]{result.message}[/{style}]")

    if result.houses is None:
        return

    categories = puzzle.domains.categories()
    table = Table(box=box.SIMPLE_HEAD, header_style="bold white", show_header=True)
    table.add_column("DOM", style="bold", justify="right", no_wrap=True)
    for category in categories:
        table.add_column(category.upper(), style="cyan", no_wrap=True)

    for house in range(1, puzzle.house_count + 1):
        attrs = result.houses.get(house, {})
        table.add_row(str(house), *[attrs.get(c, "[dim]none[/dim]") for c in categories])
    console.print(table)

    if result.more_models:
        console.print(
            "[yellow]Istnieje więcej niż jeden model — rozwiązanie nie jest "
            "jednoznaczne (pokazano pierwszy).[/yellow]"
        )
    else:
        console.print(f"  [dim]modeli: {result.models_count}[/dim]")


def write_text(text: str, output: str | None) -> None:
    """Zapisuje tekst do pliku lub na stdout (UTF-8)."""
    if output:
        pathlib.Path(output).write_text(text, encoding="utf-8")
        console.print(f"[green]Zapisano[/green] {output}")
        return
    try:
        sys.stdout.buffer.write(text.encode("utf-8"))
        sys.stdout.buffer.flush()
    except AttributeError:
        print(text, end="")
