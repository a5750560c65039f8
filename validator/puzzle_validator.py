"""
validator/puzzle_validator.py — główny walidator łamigłówki.

PuzzleValidator.validate_json(puzzle_json) -> (Puzzle | None, ValidationReport)
PuzzleValidator.validate(puzzle)           -> ValidationReport
validate(house_count, rules, domains)      -> ValidationReport

Etapy:
  A — JSON Schema           (tylko validate_json; fail-fast)
  B — liczba domów          (dodatnia liczba całkowita)
  C — domeny                (nazwy, zarezerwowane kategorie, wartości,
                             niejednoznaczność, rozmiar vs liczba domów)
  D — reguły                (integralność referencyjna; fail-fast na
                             pierwszej błędnej regule)
"""

from __future__ import annotations

import logging
import re
from collections.abc import Mapping, Sequence
from typing import Any

import jsonschema

from data_model import (
    POSITION,
    RESERVED_CATEGORIES,
    VALUE_RE,
    DomainRegistry,
    Operator,
    Puzzle,
    PuzzleFormatError,
    Rule,
    is_predicate_name,
)

from .normalizer import normalize_puzzle
from .schema import PUZZLE_SCHEMA
from .types import (
    ErrorCode,
    ValidationError,
    ValidationReport,
    ValidationWarning,
    WarningCode,
)

log = logging.getLogger(__name__)

_DIGITS_RE = re.compile(r"^[0-9]+$")

# Limit błędów — po przekroczeniu przerywamy dalsze etapy
MAX_ERRORS = 20


# ---------------------------------------------------------------------------
# Funkcje pomocnicze
# ---------------------------------------------------------------------------

def _in_position_domain(value: str, house_count: int) -> bool:
    return bool(_DIGITS_RE.match(value)) and 1 <= int(value) <= house_count


def _side_fields(rule: Rule, side: str) -> tuple[str, str]:
    if side == "left":
        return rule.left_category, rule.left_value
    return rule.right_category, rule.right_value


# ---------------------------------------------------------------------------
# PuzzleValidator
# ---------------------------------------------------------------------------

class PuzzleValidator:
    """
    Walidator łamigłówki przed kompilacją.

    Użycie:
        validator      = PuzzleValidator(aliases={"drink": "beverage"})
        puzzle, report = validator.validate_json(json.loads(text))
        if not report.is_valid:
            for e in report.errors:
                print(e.code, e.path, e.message)
    """

    def __init__(
        self,
        aliases: Mapping[str, str] | None = None,
        schema: dict[str, Any] | None = PUZZLE_SCHEMA,
    ) -> None:
        self._aliases = aliases
        self._schema  = schema

    # ------------------------------------------------------------------
    # Publiczny interfejs
    # ------------------------------------------------------------------

    def validate_json(
        self,
        puzzle_json: dict[str, Any],
    ) -> tuple[Puzzle | None, ValidationReport]:
        """
        Normalizuje i waliduje łamigłówkę w formacie JSON.

        Returns:
            (puzzle, report) — puzzle jest None, gdy dane nie przeszły
            etapu A lub nie dały się zbudować.
        """
        normalized = normalize_puzzle(puzzle_json, self._aliases)

        errors: list[ValidationError] = []
        if self._schema is not None:
            self._stage_schema(normalized, errors)
            if errors:
                return None, ValidationReport(is_valid=False, errors=errors)

        try:
            puzzle = Puzzle.from_dict(normalized)
        except PuzzleFormatError as exc:
            return None, ValidationReport(
                is_valid=False,
                errors=[ValidationError(
                    code=ErrorCode.SCHEMA_VIOLATION,
                    path="/",
                    message=str(exc),
                    expected_fix="Popraw strukturę pliku łamigłówki.",
                )],
            )

        return puzzle, self.validate(puzzle)

    def validate(self, puzzle: Puzzle) -> ValidationReport:
        """Waliduje zbudowaną łamigłówkę (etapy B–D)."""
        errors: list[ValidationError] = []
        warnings: list[ValidationWarning] = []

        # B — liczba domów
        self._stage_houses(puzzle.house_count, errors)

        # C — domeny
        if len(errors) < MAX_ERRORS:
            self._stage_domains(puzzle.house_count, puzzle.domains, errors, warnings)

        # D — reguły
        if len(errors) < MAX_ERRORS:
            self._stage_rules(puzzle, errors, warnings)

        report = ValidationReport(
            is_valid=len(errors) == 0,
            errors=errors,
            warnings=warnings,
        )
        log.debug(
            "walidacja: %d błędów, %d ostrzeżeń",
            len(report.errors), len(report.warnings),
        )
        return report

    # ------------------------------------------------------------------
    # Stage A — JSON Schema
    # ------------------------------------------------------------------

    def _stage_schema(self, puzzle_json: dict, errors: list[ValidationError]) -> None:
        validator = jsonschema.Draft202012Validator(self._schema)
        for e in validator.iter_errors(puzzle_json):
            path = (
                "/" + "/".join(str(p) for p in e.absolute_path)
                if e.absolute_path
                else "/"
            )
            errors.append(ValidationError(
                code=ErrorCode.SCHEMA_VIOLATION,
                path=path,
                message=e.message,
                expected_fix=f"Popraw naruszenie schematu JSON na ścieżce {path}.",
            ))

    # ------------------------------------------------------------------
    # Stage B — liczba domów
    # ------------------------------------------------------------------

    def _stage_houses(self, house_count: int, errors: list[ValidationError]) -> None:
        if isinstance(house_count, bool) or not isinstance(house_count, int) or house_count < 1:
            errors.append(ValidationError(
                code=ErrorCode.HOUSE_COUNT_INVALID,
                path="/houses",
                message=f"Liczba domów musi być dodatnią liczbą całkowitą, podano {house_count!r}.",
                expected_fix="Ustaw 'houses' na liczbę >= 1.",
                details={"houses": house_count},
            ))

    # ------------------------------------------------------------------
    # Stage C — domeny
    # ------------------------------------------------------------------

    def _stage_domains(
        self,
        house_count: int,
        domains: DomainRegistry,
        errors: list[ValidationError],
        warnings: list[ValidationWarning],
    ) -> None:
        owner: dict[str, str] = {}

        for category, values in domains.items():
            path = f"/domains/{category}"

            if category in RESERVED_CATEGORIES:
                errors.append(ValidationError(
                    code=ErrorCode.CATEGORY_RESERVED,
                    path=path,
                    message=(
                        f"Kategoria '{category}' jest zarezerwowana "
                        f"(zarezerwowane: {sorted(RESERVED_CATEGORIES)})."
                    ),
                    expected_fix=(
                        "Usuń kategorię 'position' — jej wartości wynikają z liczby domów."
                        if category == POSITION
                        else f"Zmień nazwę kategorii '{category}'."
                    ),
                    details={"category": category},
                ))
                continue

            if not is_predicate_name(category):
                errors.append(ValidationError(
                    code=ErrorCode.CATEGORY_NAME_INVALID,
                    path=path,
                    message=(
                        f"Nazwa kategorii '{category}' nie jest nazwą predykatu ASP "
                        r"(^_*[a-z][A-Za-z0-9_]*$, różna od 'not')."
                    ),
                    expected_fix=(
                        "Użyj małych liter, cyfr i '_' (zacznij od małej litery), "
                        f"np. '{category.lower()}'."
                    ),
                    details={"category": category},
                ))
                continue

            if not values:
                errors.append(ValidationError(
                    code=ErrorCode.DOMAIN_EMPTY,
                    path=path,
                    message=f"Domena kategorii '{category}' jest pusta.",
                    expected_fix=f"Podaj {house_count} wartości dla '{category}'.",
                    details={"category": category},
                ))
                continue

            for i, value in enumerate(values):
                vpath = f"{path}/{i}"
                if not VALUE_RE.match(value):
                    errors.append(ValidationError(
                        code=ErrorCode.VALUE_NAME_INVALID,
                        path=vpath,
                        message=(
                            f"Wartość '{value}' kategorii '{category}' nie pasuje "
                            r"do wzorca ^[A-Za-z0-9_]+$."
                        ),
                        expected_fix="Użyj wyłącznie liter, cyfr i '_'.",
                        details={"category": category, "value": value},
                    ))
                elif value == category:
                    errors.append(ValidationError(
                        code=ErrorCode.VALUE_EQUALS_CATEGORY,
                        path=vpath,
                        message=f"Wartość '{value}' jest równa nazwie swojej kategorii.",
                        expected_fix="Zmień wartość lub nazwę kategorii.",
                        details={"category": category, "value": value},
                    ))
                elif value in owner:
                    errors.append(ValidationError(
                        code=ErrorCode.VALUE_AMBIGUOUS,
                        path=vpath,
                        message=(
                            f"Wartość '{value}' występuje w kategoriach "
                            f"'{owner[value]}' i '{category}'."
                        ),
                        expected_fix="Nadaj wartościom różnych kategorii różne nazwy.",
                        details={"value": value, "categories": [owner[value], category]},
                    ))
                else:
                    owner[value] = category

            if isinstance(house_count, int) and house_count >= 1 and len(values) != house_count:
                relation = "mniej" if len(values) < house_count else "więcej"
                warnings.append(ValidationWarning(
                    code=WarningCode.SIZE_MISMATCH,
                    path=path,
                    message=(
                        f"Kategoria '{category}' ma {len(values)} wartości, "
                        f"{relation} niż domów ({house_count}) — program będzie "
                        f"niespełnialny."
                    ),
                    details={
                        "category": category,
                        "size": len(values),
                        "houses": house_count,
                    },
                ))

    # ------------------------------------------------------------------
    # Stage D — reguły
    # ------------------------------------------------------------------

    def _stage_rules(
        self,
        puzzle: Puzzle,
        errors: list[ValidationError],
        warnings: list[ValidationWarning],
    ) -> None:
        for i, rule in enumerate(puzzle.rules):
            for side in ("left", "right"):
                error = self._check_side(rule, i, side, puzzle)
                if error is not None:
                    errors.append(error)
                    return  # fail-fast: pierwsza błędna reguła kończy etap

            if rule.operator is Operator.SAME and rule.left_is_position and rule.right_is_position:
                warnings.append(ValidationWarning(
                    code=WarningCode.POSITION_SAME_NOOP,
                    path=f"/rules/{i}",
                    message=(
                        f"Reguła {i} ({rule}) łączy dwie pozycje operatorem "
                        f"'same' — nie generuje żadnego ograniczenia."
                    ),
                    details={"rule_index": i},
                ))

    def _check_side(
        self,
        rule: Rule,
        index: int,
        side: str,
        puzzle: Puzzle,
    ) -> ValidationError | None:
        category, value = _side_fields(rule, side)
        details = {"rule_index": index, "side": side, "category": category, "value": value}

        if category == POSITION:
            if _in_position_domain(value, puzzle.house_count):
                return None
            return ValidationError(
                code=ErrorCode.RULE_VALUE_NOT_IN_DOMAIN,
                path=f"/rules/{index}/{side}Value",
                message=(
                    f"Reguła {index}: pozycja '{value}' ({side}) spoza zakresu "
                    f"1..{puzzle.house_count}."
                ),
                expected_fix=f"Użyj numeru domu od 1 do {puzzle.house_count}.",
                details=details,
            )

        domain = puzzle.domains.get(category)
        if domain is None:
            return ValidationError(
                code=ErrorCode.RULE_CATEGORY_UNKNOWN,
                path=f"/rules/{index}/{side}Category",
                message=(
                    f"Reguła {index}: kategoria '{category}' ({side}) "
                    f"nie jest zdefiniowana w domenach."
                ),
                expected_fix=(
                    f"Dodaj domenę '{category}' lub użyj jednej z: "
                    f"{puzzle.domains.categories() + [POSITION]}."
                ),
                details=details,
            )

        if value not in domain:
            return ValidationError(
                code=ErrorCode.RULE_VALUE_NOT_IN_DOMAIN,
                path=f"/rules/{index}/{side}Value",
                message=(
                    f"Reguła {index}: wartość '{value}' ({side}) nie należy "
                    f"do domeny '{category}'."
                ),
                expected_fix=f"Użyj jednej z: {list(domain)}.",
                details=details,
            )
        return None


# ---------------------------------------------------------------------------
# Funkcja modułowa
# ---------------------------------------------------------------------------

def validate(
    house_count: int,
    rules: Sequence[Rule],
    domains: DomainRegistry,
) -> ValidationReport:
    """Waliduje (liczba domów, reguły, domeny) — skrót dla PuzzleValidator().validate()."""
    puzzle = Puzzle(house_count=house_count, domains=domains, rules=tuple(rules))
    return PuzzleValidator().validate(puzzle)
