"""
solver — kompilacja łamigłówki do ASP i dekodowanie wyniku clingo.

Publiczne API:
  compile_program(house_count, rules, domains) → str
  compile_puzzle(puzzle)                       → str
  decode(result, domains)                      → DecodeResult
  parse_assignments(atoms)                     → dom → wartości
  categorize(house_values, domains)            → dom → kategoria → wartość
  ClingoSolver(timeout)                        klient solvera (clingo)
  solver_result_from_json(data)                → SolverResult (clingo --outf=2)
  load_puzzle(path, aliases)                   → (Puzzle | None, ValidationReport)
  load_result_json(path)                       → SolverResult
  prepare_program(puzzle)                      → (program, report)
  solve_puzzle(puzzle, solver, models)         → DecodeResult
  PuzzleSession                                stan łamigłówki z tokenem żądania
"""

from .types import (
    DEFAULT_MODELS,
    DecodeResult,
    HouseAssignments,
    HouseValues,
    Outcome,
    SolverClient,
    SolverError,
    SolverResult,
    SolveStatus,
)
from .compiler import compile_program, compile_puzzle, rule_constraint
from .decoder import categorize, decode, parse_assignments
from .clingo_client import ClingoSolver, solver_result_from_json
from .loader import load_puzzle, load_result_json, read_puzzle_json
from .session import (
    PuzzleSession,
    SolveOutput,
    SolveTicket,
    prepare_program,
    solve_puzzle,
)

__all__ = [
    "DEFAULT_MODELS",
    "DecodeResult",
    "HouseAssignments",
    "HouseValues",
    "Outcome",
    "SolverClient",
    "SolverError",
    "SolverResult",
    "SolveStatus",
    "compile_program",
    "compile_puzzle",
    "rule_constraint",
    "categorize",
    "decode",
    "parse_assignments",
    "ClingoSolver",
    "solver_result_from_json",
    "load_puzzle",
    "load_result_json",
    "read_puzzle_json",
    "PuzzleSession",
    "SolveOutput",
    "SolveTicket",
    "prepare_program",
    "solve_puzzle",
]
