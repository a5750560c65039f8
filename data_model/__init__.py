"""
data_model — struktury danych łamigłówki typu "zebra".

Użycie:
  from data_model import Puzzle, Rule, Operator, DomainRegistry

Moduły:
  common  — aliasy typów, POSITION, nazwy zarezerwowane, termy ASP
  domains — DomainRegistry, position_values
  rules   — Operator, Rule
  puzzle  — Puzzle, PuzzleFormatError
"""

from .common import (
    Category,
    Value,
    HouseIndex,
    POSITION,
    RESERVED_CATEGORIES,
    CATEGORY_RE,
    VALUE_RE,
    asp_term,
    is_predicate_name,
    unquote_term,
)
from .domains import (
    DomainRegistry,
    position_values,
)
from .rules import (
    Operator,
    OPERATOR_LABELS,
    Rule,
)
from .puzzle import (
    Puzzle,
    PuzzleFormatError,
)

__all__ = [
    # common
    "Category",
    "Value",
    "HouseIndex",
    "POSITION",
    "RESERVED_CATEGORIES",
    "CATEGORY_RE",
    "VALUE_RE",
    "asp_term",
    "is_predicate_name",
    "unquote_term",
    # domains
    "DomainRegistry",
    "position_values",
    # rules
    "Operator",
    "OPERATOR_LABELS",
    "Rule",
    # puzzle
    "Puzzle",
    "PuzzleFormatError",
]
