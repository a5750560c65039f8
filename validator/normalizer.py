"""
validator/normalizer.py — normalizacja łamigłówki (JSON) przed walidacją.

normalize_puzzle():
  - Zwraca głęboką kopię z ujednoliconymi nazwami.
  - Nazwy kategorii: strip(), małe litery, aliasy (np. drink → beverage).
    Kategorie, które po normalizacji się pokrywają, są scalane.
  - Wartości: strip(), duplikaty usuwane z zachowaniem kolejności.
  - Operator reguły: strip() i małe litery.

Kompilator nigdy nie poprawia pisowni — całe ujednolicanie jest tutaj.
"""

from __future__ import annotations

import copy
from collections.abc import Mapping
from typing import Any

DEFAULT_ALIASES: dict[str, str] = {"drink": "beverage"}


def parse_aliases(text: str) -> dict[str, str]:
    """
    Parsuje aliasy kategorii w formacie "stara=nowa,inna=docelowa".

    Puste elementy są pomijane; element bez '=' podnosi ValueError.
    """
    aliases: dict[str, str] = {}
    for item in text.split(","):
        item = item.strip()
        if not item:
            continue
        old, sep, new = item.partition("=")
        if not sep or not old.strip() or not new.strip():
            raise ValueError(f"Nieprawidłowy alias kategorii: '{item}' (oczekiwano 'stara=nowa').")
        aliases[old.strip().lower()] = new.strip().lower()
    return aliases


def normalize_category(name: Any, aliases: Mapping[str, str]) -> Any:
    if not isinstance(name, str):
        return name
    key = name.strip().lower()
    return aliases.get(key, key)


def normalize_puzzle(
    puzzle: dict[str, Any],
    aliases: Mapping[str, str] | None = None,
) -> dict[str, Any]:
    """
    Zwraca głęboką kopię łamigłówki z ujednoliconymi nazwami.

    Pola o niepoprawnym typie zostają bez zmian — zgłosi je walidator.
    """
    aliases = DEFAULT_ALIASES if aliases is None else aliases
    puzzle = copy.deepcopy(puzzle)

    domains = puzzle.get("domains")
    if isinstance(domains, dict):
        merged: dict[Any, list[Any]] = {}
        for category, values in domains.items():
            key = normalize_category(category, aliases)
            bucket = merged.setdefault(key, [])
            if isinstance(values, list):
                for v in values:
                    v = v.strip() if isinstance(v, str) else v
                    if v not in bucket:
                        bucket.append(v)
        puzzle["domains"] = merged

    rules = puzzle.get("rules")
    if isinstance(rules, list):
        puzzle["rules"] = [
            _normalize_rule(r, aliases) if isinstance(r, dict) else r
            for r in rules
        ]

    return puzzle


def _normalize_rule(rule: dict[str, Any], aliases: Mapping[str, str]) -> dict[str, Any]:
    rule = dict(rule)
    for key in ("leftCategory", "rightCategory"):
        if key in rule:
            rule[key] = normalize_category(rule[key], aliases)
    for key in ("leftValue", "rightValue"):
        value = rule.get(key)
        if isinstance(value, str):
            rule[key] = value.strip()
        elif isinstance(value, int) and not isinstance(value, bool):
            rule[key] = str(value)
    if isinstance(rule.get("operator"), str):
        rule["operator"] = rule["operator"].strip().lower()
    return rule
