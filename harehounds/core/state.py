from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, IntEnum
from typing import Tuple


class Position(IntEnum):
    """Board nodes, declared in canonical order (left to right, top to bottom)."""

    LEFT_END = 0
    LEFT_TOP = 1
    LEFT_MID = 2
    LEFT_BOTTOM = 3
    CENTRE_TOP = 4
    CENTRE_MID = 5
    CENTRE_BOTTOM = 6
    RIGHT_TOP = 7
    RIGHT_MID = 8
    RIGHT_BOTTOM = 9
    RIGHT_END = 10

    @property
    def rank(self) -> int:
        return _RANKS[self]

    @property
    def row(self) -> int:
        return _ROWS[self]


_RANKS = {
    Position.LEFT_END: 0,
    Position.LEFT_TOP: 1,
    Position.LEFT_MID: 1,
    Position.LEFT_BOTTOM: 1,
    Position.CENTRE_TOP: 2,
    Position.CENTRE_MID: 2,
    Position.CENTRE_BOTTOM: 2,
    Position.RIGHT_TOP: 3,
    Position.RIGHT_MID: 3,
    Position.RIGHT_BOTTOM: 3,
    Position.RIGHT_END: 4,
}

_ROWS = {
    Position.LEFT_END: 1,
    Position.LEFT_TOP: 0,
    Position.LEFT_MID: 1,
    Position.LEFT_BOTTOM: 2,
    Position.CENTRE_TOP: 0,
    Position.CENTRE_MID: 1,
    Position.CENTRE_BOTTOM: 2,
    Position.RIGHT_TOP: 0,
    Position.RIGHT_MID: 1,
    Position.RIGHT_BOTTOM: 2,
    Position.RIGHT_END: 1,
}


class Role(Enum):
    PURSUER = "Pursuer"
    EVADER = "Evader"

    def opponent(self) -> "Role":
        return Role.EVADER if self is Role.PURSUER else Role.PURSUER


@dataclass(frozen=True, order=True)
class Move:
    origin: Position
    destination: Position

    def as_tuple(self) -> Tuple[Position, Position]:
        return (self.origin, self.destination)


StateKey = Tuple[Tuple[Position, ...], Position, int, Role]


@dataclass(frozen=True, eq=False)
class BoardState:
    """Immutable snapshot of the board.

    ``pursuers`` is stored positionally so move enumeration keeps a stable
    order, but equality and hashing go through :meth:`key`, which treats the
    three pursuers as a set.
    """

    pursuers: Tuple[Position, Position, Position]
    evader: Position
    ply: int = 1
    to_move: Role = Role.PURSUER

    def key(self) -> StateKey:
        return (tuple(sorted(self.pursuers)), self.evader, self.ply, self.to_move)

    def occupied(self) -> Tuple[Position, ...]:
        return self.pursuers + (self.evader,)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, BoardState):
            return NotImplemented
        return self.key() == other.key()

    def __hash__(self) -> int:
        return hash(self.key())

    def __repr__(self) -> str:
        pursuers = ", ".join(p.name for p in self.pursuers)
        return (
            f"BoardState(to_move={self.to_move.value}, ply={self.ply}, "
            f"pursuers=[{pursuers}], evader={self.evader.name})"
        )
