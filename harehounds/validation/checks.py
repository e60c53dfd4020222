from __future__ import annotations

import numpy as np

from harehounds.core import (
    NUM_PURSUERS,
    BoardInvariantError,
    BoardState,
    Position,
    Role,
    adjacency_matrix,
)
from harehounds.solver import SearchContext


class GraphDataError(ValueError):
    pass


def validate_state(state: BoardState) -> None:
    if len(state.pursuers) != NUM_PURSUERS:
        raise BoardInvariantError(f"expected {NUM_PURSUERS} pursuers, got {len(state.pursuers)}")
    if len(set(state.pursuers)) != NUM_PURSUERS:
        raise BoardInvariantError("pursuers share a position")
    if state.evader in state.pursuers:
        raise BoardInvariantError("evader shares a position with a pursuer")
    if state.ply < 1:
        raise BoardInvariantError("ply counter starts at 1")


def validate_position_graph() -> None:
    pursuer = adjacency_matrix(Role.PURSUER)
    evader = adjacency_matrix(Role.EVADER)
    if np.diagonal(pursuer).any() or np.diagonal(evader).any():
        raise GraphDataError("adjacency tables contain self-loops")
    if (pursuer & ~evader).any():
        raise GraphDataError("pursuer links must also be evader links")
    if pursuer[int(Position.RIGHT_END)].any():
        raise GraphDataError("pursuers cannot leave the right end")
    if not evader.any(axis=1).all():
        raise GraphDataError("every node needs at least one evader exit")


def validate_memo(context: SearchContext) -> None:
    for key, winner in context.memo.items():
        pursuers = key[0]
        if list(pursuers) != sorted(pursuers):
            raise BoardInvariantError(f"memo key is not canonical: {key}")
        if not isinstance(winner, Role):
            raise BoardInvariantError(f"memo value is not a role: {winner!r}")
