"""Hare and hounds game solver."""

from . import core, evaluation, solver, validation
from .core import (
    PLY_CAP,
    BoardState,
    Move,
    Position,
    Role,
    apply_move,
    has_evader_passed,
    initialize_game_state,
    legal_moves,
)
from .evaluation import SolveReport, format_report, summarize
from .solver import GameSolver, SearchContext, SolveResult, SolverConfig, principal_line, solve

__all__ = [
    "core",
    "evaluation",
    "solver",
    "validation",
    "PLY_CAP",
    "BoardState",
    "Move",
    "Position",
    "Role",
    "apply_move",
    "has_evader_passed",
    "initialize_game_state",
    "legal_moves",
    "SolveReport",
    "format_report",
    "summarize",
    "GameSolver",
    "SearchContext",
    "SolveResult",
    "SolverConfig",
    "principal_line",
    "solve",
]
