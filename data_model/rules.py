"""
Struktury danych dla reguł łamigłówki (rules).

Reguła to skierowana relacja binarna między parami (kategoria, wartość):

    leftCategory:leftValue  <operator>  rightCategory:rightValue

Format JSON (jak w edytorze reguł):
  {"leftCategory": "nationality", "leftValue": "english",
   "operator": "same", "rightCategory": "color", "rightValue": "red"}
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from typing import Any

from .common import POSITION, Category, Value

# ---------------------------------------------------------------------------
# Operator
# ---------------------------------------------------------------------------


class Operator(StrEnum):
    """
    Relacja między domami dwóch wartości.

    - SAME:  ten sam dom
    - NEXT:  domy sąsiednie (dowolna kolejność)
    - RIGHT: lewa wartość jest w domu o numerze o 1 większym
    - LEFT:  lewa wartość jest w domu o numerze o 1 mniejszym
    """
    SAME  = "same"
    NEXT  = "next"
    RIGHT = "right"
    LEFT  = "left"

    @property
    def label(self) -> str:
        return OPERATOR_LABELS[self]


OPERATOR_LABELS: dict[Operator, str] = {
    Operator.SAME:  "same as",
    Operator.NEXT:  "next to",
    Operator.RIGHT: "right of",
    Operator.LEFT:  "left of",
}


# ---------------------------------------------------------------------------
# Rule
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class Rule:
    """
    Reguła: (left_category, left_value, operator, right_category, right_value).

    Kategoria `position` po dowolnej stronie przypina wartość do numeru domu.
    """
    left_category:  Category
    left_value:     Value
    operator:       Operator
    right_category: Category
    right_value:    Value

    def __str__(self) -> str:
        return (
            f"{self.left_category}:{self.left_value} "
            f"<{self.operator.label}> "
            f"{self.right_category}:{self.right_value}"
        )

    @property
    def left_is_position(self) -> bool:
        return self.left_category == POSITION

    @property
    def right_is_position(self) -> bool:
        return self.right_category == POSITION

    @classmethod
    def from_dict(cls, d: dict[str, Any]) -> "Rule":
        """Buduje regułę z formatu JSON (klucze camelCase). Podnosi ValueError/KeyError."""
        return cls(
            left_category=str(d["leftCategory"]),
            left_value=str(d["leftValue"]),
            operator=Operator(str(d["operator"]).lower()),
            right_category=str(d["rightCategory"]),
            right_value=str(d["rightValue"]),
        )

    def to_dict(self) -> dict[str, str]:
        return {
            "leftCategory":  self.left_category,
            "leftValue":     self.left_value,
            "operator":      self.operator.value,
            "rightCategory": self.right_category,
            "rightValue":    self.right_value,
        }
