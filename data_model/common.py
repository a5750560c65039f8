"""
Wspólne typy pierwotne i stałe modelu łamigłówki.

  Category, Value, HouseIndex  — aliasy typów
  POSITION                     — zarezerwowana pseudo-kategoria pozycji domu
  RESERVED_CATEGORIES          — nazwy kolidujące z predykatami programu ASP
  asp_term() / unquote_term()  — zapis wartości jako termu ASP i odwrotnie
  is_predicate_name()          — czy kategoria może być nazwą predykatu ASP
"""

from __future__ import annotations

import re

# ---------------------------------------------------------------------------
# Aliasy typów
# ---------------------------------------------------------------------------

# Wzorzec: ^_*[a-z][A-Za-z0-9_]*$  np. "nationality" (nazwa predykatu ASP)
type Category = str

# Wzorzec: ^[A-Za-z0-9_]+$  np. "old_gold", "3"
type Value = str

# 1..houseCount
type HouseIndex = int


# ---------------------------------------------------------------------------
# Stałe
# ---------------------------------------------------------------------------

# Pseudo-kategoria: jej domeną są numery domów "1".."N", nie podaje jej użytkownik.
POSITION: Category = "position"

# Predykaty używane wewnętrznie przez program ASP.
HOUSE_PRED   = "house"
ASSIGN_PRED  = "assign"
NEXT_TO_PRED = "next_to"

RESERVED_CATEGORIES: frozenset[str] = frozenset({
    POSITION,
    HOUSE_PRED,
    ASSIGN_PRED,
    NEXT_TO_PRED,
})

# Kategoria staje się nazwą predykatu: wielka litera lub samo "_" to w clingo zmienna.
CATEGORY_RE = re.compile(r"^_*[a-z][A-Za-z0-9_]*$")
VALUE_RE    = re.compile(r"^[A-Za-z0-9_]+$")


# ---------------------------------------------------------------------------
# Termy ASP
# ---------------------------------------------------------------------------

# Stała ASP: opcjonalne '_' i mała litera na początku; liczba bez zer wiodących.
_PLAIN_CONST_RE = re.compile(r"^_*[a-z][A-Za-z0-9_]*$")
_PLAIN_INT_RE   = re.compile(r"^(0|[1-9][0-9]*)$")
_ASP_KEYWORDS   = frozenset({"not"})


def asp_term(value: Value) -> str:
    """
    Zwraca wartość w postaci termu ASP.

    Wartości będące poprawnymi stałymi ("red", "old_gold", "3") są zapisywane
    bez zmian. Pozostałe ("Red", "007", "not") byłyby w clingo zmienną,
    inną liczbą lub słowem kluczowym — zapisujemy je jako string "...".
    """
    if value in _ASP_KEYWORDS:
        return f'"{value}"'
    if _PLAIN_CONST_RE.match(value) or _PLAIN_INT_RE.match(value):
        return value
    return f'"{value}"'


def unquote_term(term: str) -> Value:
    """Odwrotność asp_term(): '"Red"' → 'Red', 'red' → 'red'."""
    term = term.strip()
    if len(term) >= 2 and term[0] == term[-1] == '"':
        return term[1:-1]
    return term


def is_predicate_name(name: str) -> bool:
    """Czy nazwa kategorii może być nazwą predykatu ASP ("color" tak; "Color", "_", "not" nie)."""
    return bool(CATEGORY_RE.match(name)) and name not in _ASP_KEYWORDS
