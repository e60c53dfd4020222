"""Exhaustive game solving."""

from .search import GameSolver, SearchContext, SolveResult, SolverConfig, principal_line, solve

__all__ = ["GameSolver", "SearchContext", "SolveResult", "SolverConfig", "principal_line", "solve"]
