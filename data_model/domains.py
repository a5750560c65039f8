"""
Rejestr domen: kategoria → uporządkowana lista unikalnych wartości.

Rejestr jest niezmienny — operacje edycji (with_values, without) zwracają
nowy obiekt. Kategoria `position` nie jest przechowywana: jej wartości
wylicza position_values(house_count).
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping

from .common import POSITION, Category, Value


def _dedupe(values: Iterable[Value]) -> tuple[Value, ...]:
    """Usuwa duplikaty z zachowaniem kolejności pierwszego wystąpienia."""
    return tuple(dict.fromkeys(values))


def position_values(house_count: int) -> tuple[Value, ...]:
    """Domena pseudo-kategorii position: ("1", ..., str(house_count))."""
    return tuple(str(i) for i in range(1, house_count + 1))


class DomainRegistry(Mapping[Category, tuple[Value, ...]]):
    """
    Niezmienne odwzorowanie kategoria → wartości.

    Kolejność kategorii to kolejność wstawiania; kompilator emituje fakty
    właśnie w tej kolejności.

    Użycie::

        domains = DomainRegistry.from_dict({"color": ["red", "green"]})
        domains["color"]             # ("red", "green")
        domains.category_of("green") # "color"
    """

    __slots__ = ("_domains",)

    def __init__(self, domains: Iterable[tuple[Category, Iterable[Value]]] = ()) -> None:
        merged: dict[Category, tuple[Value, ...]] = {}
        for category, values in domains:
            merged[category] = _dedupe((*merged.get(category, ()), *values))
        self._domains = merged

    @classmethod
    def from_dict(cls, domains: Mapping[Category, Iterable[Value]]) -> "DomainRegistry":
        return cls(domains.items())

    def to_dict(self) -> dict[Category, list[Value]]:
        return {c: list(v) for c, v in self._domains.items()}

    # ------------------------------------------------------------------
    # Mapping
    # ------------------------------------------------------------------

    def __getitem__(self, category: Category) -> tuple[Value, ...]:
        return self._domains[category]

    def __iter__(self) -> Iterator[Category]:
        return iter(self._domains)

    def __len__(self) -> int:
        return len(self._domains)

    def __repr__(self) -> str:
        return f"DomainRegistry({self._domains!r})"

    # ------------------------------------------------------------------
    # Zapytania
    # ------------------------------------------------------------------

    def categories(self) -> list[Category]:
        """Kategorie użytkownika (bez position), w kolejności wstawiania."""
        return [c for c in self._domains if c != POSITION]

    def resolve(self, category: Category, house_count: int) -> tuple[Value, ...] | None:
        """Domena kategorii; dla position wyliczana z liczby domów. None gdy brak."""
        if category == POSITION:
            return position_values(house_count)
        return self._domains.get(category)

    def category_of(self, value: Value) -> Category | None:
        """Pierwsza kategoria (bez position), do której należy wartość."""
        for category in self.categories():
            if value in self._domains[category]:
                return category
        return None

    # ------------------------------------------------------------------
    # Edycja (zwraca nowy rejestr)
    # ------------------------------------------------------------------

    def with_values(self, category: Category, values: Iterable[Value]) -> "DomainRegistry":
        """Dodaje wartości do kategorii; istniejąca kategoria jest scalana."""
        return DomainRegistry([*self._domains.items(), (category, values)])

    def without(self, category: Category) -> "DomainRegistry":
        return DomainRegistry((c, v) for c, v in self._domains.items() if c != category)
