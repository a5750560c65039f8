"""
validator/types.py — kody błędów i struktury raportu walidacji.

ValidationError — pojedynczy błąd z kodem, ścieżką JSON Pointer,
    komunikatem i mechaniczną instrukcją naprawy.
ValidationReport — wynik walidacji: is_valid, errors, warnings.
InvalidPuzzleError — wyjątek niosący raport, gdy ktoś próbuje
    skompilować niepoprawną łamigłówkę.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import StrEnum
from typing import Any


class ErrorCode(StrEnum):
    """Stałe kody błędów walidatora (etapy A–D)."""

    # A — JSON Schema
    SCHEMA_VIOLATION          = "E_SCHEMA_VIOLATION"

    # B — liczba domów
    HOUSE_COUNT_INVALID       = "E_HOUSE_COUNT_INVALID"

    # C — domeny
    CATEGORY_NAME_INVALID     = "E_CATEGORY_NAME_INVALID"
    CATEGORY_RESERVED         = "E_CATEGORY_RESERVED"
    DOMAIN_EMPTY              = "E_DOMAIN_EMPTY"
    VALUE_NAME_INVALID        = "E_VALUE_NAME_INVALID"
    VALUE_EQUALS_CATEGORY     = "E_VALUE_EQUALS_CATEGORY"
    VALUE_AMBIGUOUS           = "E_VALUE_AMBIGUOUS"

    # D — reguły (integralność referencyjna)
    RULE_CATEGORY_UNKNOWN     = "E_RULE_CATEGORY_UNKNOWN"
    RULE_VALUE_NOT_IN_DOMAIN  = "E_RULE_VALUE_NOT_IN_DOMAIN"


class WarningCode(StrEnum):
    """Ostrzeżenia — nie blokują kompilacji."""

    SIZE_MISMATCH       = "W_SIZE_MISMATCH"
    POSITION_SAME_NOOP  = "W_POSITION_SAME_NOOP"


@dataclass(slots=True)
class ValidationError:
    """
    Pojedynczy błąd walidacji.

    - code:         stały identyfikator klasy błędu (ErrorCode)
    - path:         JSON Pointer do miejsca błędu, np. "/rules/3/leftValue"
    - message:      czytelny opis błędu
    - expected_fix: krótka mechaniczna instrukcja naprawy
    - details:      opcjonalny słownik z dodatkowymi danymi
                    (dla reguł: rule_index, side, category, value)
    """

    code: ErrorCode
    path: str
    message: str
    expected_fix: str
    details: dict[str, Any] | None = None


@dataclass(slots=True)
class ValidationWarning:
    """Ostrzeżenie (np. rozmiar domeny różny od liczby domów)."""

    code: WarningCode
    path: str
    message: str
    details: dict[str, Any] | None = None

    def __str__(self) -> str:
        return self.message


@dataclass(slots=True)
class ValidationReport:
    """
    Wynik pełnej walidacji łamigłówki.

    - is_valid: True gdy brak błędów (warnings nie wpływają)
    - errors:   lista błędów (ValidationError)
    - warnings: lista ostrzeżeń (ValidationWarning)
    """

    is_valid: bool
    errors: list[ValidationError] = field(default_factory=list)
    warnings: list[ValidationWarning] = field(default_factory=list)

    @property
    def first_error(self) -> ValidationError | None:
        return self.errors[0] if self.errors else None


class InvalidPuzzleError(ValueError):
    """Łamigłówka nie przeszła walidacji; program nie został wygenerowany."""

    def __init__(self, report: ValidationReport) -> None:
        self.report = report
        first = report.first_error
        msg = f"{first.code}: {first.message}" if first else "Łamigłówka niepoprawna."
        super().__init__(msg)
