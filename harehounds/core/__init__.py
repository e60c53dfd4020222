"""Core game logic for hare and hounds."""

from .state import BoardState, Move, Position, Role, StateKey
from .graph import (
    EVADER_ADJACENCY,
    NUM_POSITIONS,
    PURSUER_ADJACENCY,
    adjacency_matrix,
    neighbours,
    rank_vector,
)
from .rules import (
    BoardInvariantError,
    NUM_PURSUERS,
    PLY_CAP,
    STARTING_EVADER,
    STARTING_PURSUERS,
    apply_move,
    has_evader_passed,
    initialize_game_state,
    is_empty,
    is_terminal,
    legal_moves,
    ply_cap_exceeded,
)

__all__ = [
    "BoardState",
    "BoardInvariantError",
    "Move",
    "Position",
    "Role",
    "StateKey",
    "EVADER_ADJACENCY",
    "PURSUER_ADJACENCY",
    "NUM_POSITIONS",
    "NUM_PURSUERS",
    "PLY_CAP",
    "STARTING_EVADER",
    "STARTING_PURSUERS",
    "adjacency_matrix",
    "apply_move",
    "has_evader_passed",
    "initialize_game_state",
    "is_empty",
    "is_terminal",
    "legal_moves",
    "neighbours",
    "ply_cap_exceeded",
    "rank_vector",
]
