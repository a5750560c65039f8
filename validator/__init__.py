"""
validator — walidator łamigłówki przed kompilacją do ASP.

Interfejs publiczny:
    PuzzleValidator  — główny walidator (etapy A–D)
    validate         — validate(house_count, rules, domains) -> ValidationReport
    normalize_puzzle — ujednolicenie nazw (aliasy, wielkość liter, duplikaty)
    ValidationReport, ValidationError, ValidationWarning, ErrorCode,
    WarningCode, InvalidPuzzleError — typy raportu

Typowe użycie:
    from validator import PuzzleValidator

    puzzle, report = PuzzleValidator().validate_json(json.loads(text))
    if not report.is_valid:
        for e in report.errors:
            print(e.code, e.path, e.message)
"""

from .types import (
    ErrorCode,
    WarningCode,
    ValidationError,
    ValidationWarning,
    ValidationReport,
    InvalidPuzzleError,
)
from .normalizer import DEFAULT_ALIASES, normalize_puzzle, parse_aliases
from .schema import PUZZLE_SCHEMA
from .puzzle_validator import PuzzleValidator, validate

__all__ = [
    "ErrorCode",
    "WarningCode",
    "ValidationError",
    "ValidationWarning",
    "ValidationReport",
    "InvalidPuzzleError",
    "DEFAULT_ALIASES",
    "normalize_puzzle",
    "parse_aliases",
    "PUZZLE_SCHEMA",
    "PuzzleValidator",
    "validate",
]
