"""Wspólne fixture'y testów."""

from __future__ import annotations

import json
import pathlib

import pytest

from data_model import DomainRegistry, Operator, Puzzle, Rule
from solver import SolverResult, SolveStatus

ROOT        = pathlib.Path(__file__).resolve().parent.parent
ZEBRA_JSON  = ROOT / "puzzles" / "zebra.json"


@pytest.fixture
def zebra_json() -> dict:
    return json.loads(ZEBRA_JSON.read_text(encoding="utf-8"))


@pytest.fixture
def zebra_puzzle(zebra_json) -> Puzzle:
    return Puzzle.from_dict(zebra_json)


@pytest.fixture
def small_domains() -> DomainRegistry:
    return DomainRegistry.from_dict({
        "color":    ["red", "green", "blue"],
        "beverage": ["tea", "milk", "water"],
    })


@pytest.fixture
def small_puzzle(small_domains) -> Puzzle:
    return Puzzle(
        house_count=3,
        domains=small_domains,
        rules=(
            Rule("color", "red", Operator.SAME, "beverage", "tea"),
            Rule("position", "2", Operator.SAME, "beverage", "milk"),
        ),
    )


class FakeSolver:
    """Solver zastępczy: zapisuje wywołania i zwraca zadany wynik."""

    def __init__(self, result: SolverResult | None = None) -> None:
        self.result = result or SolverResult(
            status=SolveStatus.SATISFIABLE,
            witnesses=(("assign(red,1)", "assign(tea,1)"),),
            models_count=1,
        )
        self.calls: list[tuple[str, int]] = []

    def __call__(self, program: str, models: int = 2) -> SolverResult:
        self.calls.append((program, models))
        return self.result


@pytest.fixture
def fake_solver() -> FakeSolver:
    return FakeSolver()
