from __future__ import annotations

from typing import Dict, Tuple

import numpy as np
from numpy.typing import NDArray

from .state import Position, Role

NUM_POSITIONS = len(Position)

LE = Position.LEFT_END
LT = Position.LEFT_TOP
LM = Position.LEFT_MID
LB = Position.LEFT_BOTTOM
CT = Position.CENTRE_TOP
CM = Position.CENTRE_MID
CB = Position.CENTRE_BOTTOM
RT = Position.RIGHT_TOP
RM = Position.RIGHT_MID
RB = Position.RIGHT_BOTTOM
RE = Position.RIGHT_END

# Neighbour order is significant: it fixes move enumeration order.
PURSUER_ADJACENCY: Dict[Position, Tuple[Position, ...]] = {
    LE: (LT, LM, LB),
    LT: (LM, CT, CM),
    LM: (LT, LB, CM),
    LB: (LM, CM, CB),
    CT: (CM, RT),
    CM: (CT, CB, RT, RM, RB),
    CB: (CM, RB),
    RT: (RM, RE),
    RM: (RT, RB, RE),
    RB: (RM, RE),
    RE: (),
}

# The evader may also step back towards the left.
EVADER_ADJACENCY: Dict[Position, Tuple[Position, ...]] = {
    LE: (LT, LM, LB),
    LT: (LE, LM, CT, CM),
    LM: (LE, LT, LB, CM),
    LB: (LE, LM, CM, CB),
    CT: (LT, CM, RT),
    CM: (LT, LM, LB, CT, CB, RT, RM, RB),
    CB: (LB, CM, RB),
    RT: (CT, CM, RM, RE),
    RM: (CM, RT, RB, RE),
    RB: (CB, RM, RE),
    RE: (RT, RM, RB),
}

_TABLES = {
    Role.PURSUER: PURSUER_ADJACENCY,
    Role.EVADER: EVADER_ADJACENCY,
}


def neighbours(position: Position, role: Role) -> Tuple[Position, ...]:
    return _TABLES[role][position]


def adjacency_matrix(role: Role) -> NDArray[np.bool_]:
    """Return the directed adjacency matrix for ``role`` (rows are origins)."""
    matrix = np.zeros((NUM_POSITIONS, NUM_POSITIONS), dtype=bool)
    for origin, targets in _TABLES[role].items():
        for target in targets:
            matrix[int(origin), int(target)] = True
    return matrix


def rank_vector() -> NDArray[np.int8]:
    return np.array([position.rank for position in Position], dtype=np.int8)
