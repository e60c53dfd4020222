from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Dict, List, Optional

from harehounds.core import (
    PLY_CAP,
    BoardState,
    Move,
    Role,
    StateKey,
    apply_move,
    is_terminal,
    legal_moves,
)

logger = logging.getLogger(__name__)


@dataclass
class SolverConfig:
    ply_cap: int = PLY_CAP
    log_interval: int = 0

    def __post_init__(self) -> None:
        if self.ply_cap < 1:
            raise ValueError("ply_cap must be at least 1")
        if self.log_interval < 0:
            raise ValueError("log_interval must be non-negative")


@dataclass
class SearchContext:
    """Mutable state owned by a single solve: memo table and counters."""

    memo: Dict[StateKey, Role] = field(default_factory=dict)
    invocations: int = 0
    hits: int = 0
    misses: int = 0

    def lookup(self, state: BoardState) -> Optional[Role]:
        winner = self.memo.get(state.key())
        if winner is None:
            self.misses += 1
        else:
            self.hits += 1
        return winner

    def store(self, state: BoardState, winner: Role) -> None:
        self.memo[state.key()] = winner

    def __len__(self) -> int:
        return len(self.memo)


@dataclass
class SolveResult:
    winner: Role
    context: SearchContext


class GameSolver:
    """Exhaustive memoized search returning the side with a forced win.

    Any single winning move ends the search at a node; moves are tried in
    :func:`legal_moves` order with no pruning or reordering.
    """

    def __init__(self, config: Optional[SolverConfig] = None) -> None:
        self.config = config or SolverConfig()

    # ------------------------------------------------------------------
    def run(self, state: BoardState) -> SolveResult:
        context = SearchContext()
        winner = self.solve(state, context)
        logger.info(
            "solved %r: winner=%s invocations=%d memo=%d",
            state,
            winner.value,
            context.invocations,
            len(context),
        )
        return SolveResult(winner=winner, context=context)

    def solve(self, state: BoardState, context: Optional[SearchContext] = None) -> Role:
        if context is None:
            context = SearchContext()
        context.invocations += 1
        interval = self.config.log_interval
        if interval and context.invocations % interval == 0:
            logger.debug(
                "invocations=%d memo=%d hits=%d ply=%d",
                context.invocations,
                len(context),
                context.hits,
                state.ply,
            )

        if is_terminal(state, self.config.ply_cap):
            return Role.EVADER

        mover = state.to_move
        for move in legal_moves(state):
            child = apply_move(state, move)
            winner = self.child_outcome(child, context)
            if winner is mover:
                return winner
        return mover.opponent()

    def child_outcome(self, child: BoardState, context: SearchContext) -> Role:
        winner = context.lookup(child)
        if winner is None:
            winner = self.solve(child, context)
            context.store(child, winner)
        return winner

    # ------------------------------------------------------------------
    def principal_line(self, state: BoardState, context: Optional[SearchContext] = None) -> List[Move]:
        """Replay the decided game from ``state``.

        The winning side plays the first move that keeps its win; the losing
        side plays its first legal move. Children missing from the memo table
        are solved into ``context``.
        """
        if context is None:
            context = SearchContext()
        line: List[Move] = []
        current = state
        while not is_terminal(current, self.config.ply_cap):
            moves = legal_moves(current)
            if not moves:
                break
            chosen = moves[0]
            for move in moves:
                if self.child_outcome(apply_move(current, move), context) is current.to_move:
                    chosen = move
                    break
            line.append(chosen)
            current = apply_move(current, chosen)
        return line


def solve(
    state: BoardState,
    context: Optional[SearchContext] = None,
    config: Optional[SolverConfig] = None,
) -> Role:
    return GameSolver(config).solve(state, context)


def principal_line(
    state: BoardState,
    context: Optional[SearchContext] = None,
    config: Optional[SolverConfig] = None,
) -> List[Move]:
    return GameSolver(config).principal_line(state, context)
