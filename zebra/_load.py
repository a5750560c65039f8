"""Wczytywanie łamigłówki dla komend — błędy kończą program kodem 1."""

from __future__ import annotations

import pathlib

from data_model import Puzzle, PuzzleFormatError
from solver import load_puzzle
from validator import ValidationReport

from zebra._config import Settings
from zebra._render import console, show_report


def load_or_exit(path_str: str, settings: Settings) -> tuple[Puzzle, ValidationReport]:
    path = pathlib.Path(path_str)
    if not path.exists():
        console.print(f"[red]Brak pliku łamigłówki:[/red] {path}")
        raise SystemExit(1)

    try:
        puzzle, report = load_puzzle(path, settings.aliases)
    except PuzzleFormatError as e:
        console.print(f"[red]Błąd wczytywania łamigłówki:[/red] {e}")
        raise SystemExit(1)

    if puzzle is None or not report.is_valid:
        console.print(
            f"[red]BŁĄD[/red]  Łamigłówka [bold]{path.name}[/bold] — "
            f"{len(report.errors)} błąd(ów)."
        )
        show_report(report)
        raise SystemExit(1)

    return puzzle, report
