"""
solver/loader.py — wczytywanie łamigłówek i zapisanych wyników solvera z JSON.

Publiczne API:
  read_puzzle_json(path)  -> dict   (surowe dane, przed walidacją)
  load_puzzle(path, aliases) -> (Puzzle | None, ValidationReport)
  load_result_json(path)  -> SolverResult
"""

from __future__ import annotations

import json
import pathlib
from collections.abc import Mapping
from typing import Any

from data_model import Puzzle, PuzzleFormatError
from validator import PuzzleValidator, ValidationReport

from .clingo_client import solver_result_from_json
from .types import SolverResult


def _read_json(path: pathlib.Path) -> Any:
    try:
        return json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as exc:
        raise PuzzleFormatError(f"Błąd parsowania JSON ({path.name}): {exc}") from exc


def read_puzzle_json(path: pathlib.Path) -> dict[str, Any]:
    """
    Wczytuje łamigłówkę z pliku JSON bez walidacji.

    Oczekiwany format::

        {
            "houses":  5,
            "domains": {"color": ["red", "green", "ivory", "yellow", "blue"]},
            "rules": [
                {"leftCategory": "nationality", "leftValue": "english",
                 "operator": "same",
                 "rightCategory": "color", "rightValue": "red"}
            ]
        }

    Raises:
        PuzzleFormatError gdy plik nie jest poprawnym obiektem JSON.
    """
    raw = _read_json(path)
    if not isinstance(raw, dict):
        raise PuzzleFormatError(f"Plik {path.name} nie zawiera obiektu JSON.")
    return raw


def load_puzzle(
    path: pathlib.Path,
    aliases: Mapping[str, str] | None = None,
) -> tuple[Puzzle | None, ValidationReport]:
    """Wczytuje, normalizuje i waliduje łamigłówkę z pliku."""
    raw = read_puzzle_json(path)
    return PuzzleValidator(aliases=aliases).validate_json(raw)


def load_result_json(path: pathlib.Path) -> SolverResult:
    """Wczytuje wynik `clingo --outf=2` zapisany do pliku."""
    raw = _read_json(path)
    if not isinstance(raw, dict):
        raise PuzzleFormatError(f"Plik {path.name} nie zawiera obiektu JSON.")
    return solver_result_from_json(raw)
