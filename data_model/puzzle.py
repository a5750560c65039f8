"""
Łamigłówka: liczba domów, rejestr domen i lista reguł.

Format pliku JSON::

    {
        "houses":  5,
        "domains": {"color": ["red", "green", ...], ...},
        "rules":   [{"leftCategory": ..., "operator": "same", ...}, ...]
    }
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from .domains import DomainRegistry
from .rules import Rule


class PuzzleFormatError(ValueError):
    """Dane łamigłówki nie dają się odczytać (zły kształt, nieznany operator)."""


@dataclass(frozen=True, slots=True)
class Puzzle:
    """
    Niezmienna łamigłówka przekazywana do walidatora i kompilatora.

    - house_count: liczba domów (>= 1 po walidacji)
    - domains:     rejestr domen kategorii użytkownika
    - rules:       reguły w kolejności podania (kolejność wpływa na program)
    """
    house_count: int
    domains: DomainRegistry = field(default_factory=DomainRegistry)
    rules: tuple[Rule, ...] = ()

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Puzzle":
        try:
            house_count = int(data["houses"])
            domains = DomainRegistry.from_dict(
                {str(c): [str(v) for v in vals] for c, vals in data.get("domains", {}).items()}
            )
            rules = tuple(Rule.from_dict(r) for r in data.get("rules", []))
        except (KeyError, TypeError, ValueError, AttributeError) as exc:
            raise PuzzleFormatError(f"Nieprawidłowe dane łamigłówki: {exc}") from exc
        return cls(house_count=house_count, domains=domains, rules=rules)

    def to_dict(self) -> dict[str, Any]:
        return {
            "houses":  self.house_count,
            "domains": self.domains.to_dict(),
            "rules":   [r.to_dict() for r in self.rules],
        }
