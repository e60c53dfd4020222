from __future__ import annotations

from typing import List

from .graph import neighbours
from .state import BoardState, Move, Position, Role

PLY_CAP = 30
NUM_PURSUERS = 3
STARTING_PURSUERS = (Position.LEFT_TOP, Position.LEFT_END, Position.LEFT_BOTTOM)
STARTING_EVADER = Position.RIGHT_END


class BoardInvariantError(AssertionError):
    """A state or move broke a rule the move generator guarantees."""


def initialize_game_state() -> BoardState:
    return BoardState(
        pursuers=STARTING_PURSUERS,
        evader=STARTING_EVADER,
        ply=1,
        to_move=Role.PURSUER,
    )


def is_empty(state: BoardState, position: Position) -> bool:
    return position not in state.occupied()


def legal_moves(state: BoardState) -> List[Move]:
    """Enumerate moves for the side to move.

    Pursuer moves come piece by piece in stored order, then in adjacency-table
    order. An empty list means the side to move is stuck.
    """
    if state.to_move is Role.PURSUER:
        origins = state.pursuers
    else:
        origins = (state.evader,)

    moves: List[Move] = []
    for origin in origins:
        for destination in neighbours(origin, state.to_move):
            if is_empty(state, destination):
                moves.append(Move(origin, destination))
    return moves


def apply_move(state: BoardState, move: Move) -> BoardState:
    if state.to_move is Role.PURSUER:
        if move.origin not in state.pursuers:
            raise BoardInvariantError(f"No pursuer at {move.origin.name}: {state!r}")
        index = state.pursuers.index(move.origin)
        pursuers = list(state.pursuers)
        pursuers[index] = move.destination
        return BoardState(
            pursuers=tuple(pursuers),
            evader=state.evader,
            ply=state.ply + 1,
            to_move=Role.EVADER,
        )

    if move.origin != state.evader:
        raise BoardInvariantError(f"Evader is not at {move.origin.name}: {state!r}")
    return BoardState(
        pursuers=state.pursuers,
        evader=move.destination,
        ply=state.ply + 1,
        to_move=Role.PURSUER,
    )


def has_evader_passed(state: BoardState) -> bool:
    evader_rank = state.evader.rank
    return all(pursuer.rank >= evader_rank for pursuer in state.pursuers)


def ply_cap_exceeded(state: BoardState, ply_cap: int = PLY_CAP) -> bool:
    return state.ply > ply_cap


def is_terminal(state: BoardState, ply_cap: int = PLY_CAP) -> bool:
    """Terminal states are always won by the evader."""
    return ply_cap_exceeded(state, ply_cap) or has_evader_passed(state)
