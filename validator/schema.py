"""
validator/schema.py — JSON Schema pliku łamigłówki (Draft 2020-12).

Schemat sprawdza tylko kształt danych; nazwy, domeny i integralność
referencyjną reguł sprawdzają etapy B–D walidatora.
"""

from __future__ import annotations

from typing import Any

PUZZLE_SCHEMA: dict[str, Any] = {
    "$schema": "https://json-schema.org/draft/2020-12/schema",
    "title": "zebra_puzzle_v1",
    "type": "object",
    "required": ["houses", "domains"],
    "additionalProperties": False,
    "properties": {
        "houses": {"type": "integer"},
        "domains": {
            "type": "object",
            "additionalProperties": {
                "type": "array",
                "items": {"type": "string"},
            },
        },
        "rules": {
            "type": "array",
            "items": {"$ref": "#/$defs/Rule"},
        },
    },
    "$defs": {
        "Rule": {
            "type": "object",
            "required": [
                "leftCategory",
                "leftValue",
                "operator",
                "rightCategory",
                "rightValue",
            ],
            "additionalProperties": False,
            "properties": {
                "leftCategory":  {"type": "string"},
                "leftValue":     {"type": ["string", "integer"]},
                "operator":      {"enum": ["same", "next", "right", "left"]},
                "rightCategory": {"type": "string"},
                "rightValue":    {"type": ["string", "integer"]},
            },
        },
    },
}
