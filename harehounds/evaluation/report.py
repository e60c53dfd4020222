from __future__ import annotations

from dataclasses import dataclass
from typing import Dict

import numpy as np

from harehounds.core import Role
from harehounds.solver import SearchContext


@dataclass
class SolveReport:
    winner: Role
    invocations: int
    memo_size: int
    memo_hits: int
    memo_misses: int
    winner_share: float

    def hit_rate(self) -> float:
        return self.memo_hits / max(1, self.memo_hits + self.memo_misses)

    def as_dict(self) -> Dict[str, object]:
        return {
            "winner": self.winner.value,
            "invocations": self.invocations,
            "memo_size": self.memo_size,
            "memo_hits": self.memo_hits,
            "memo_misses": self.memo_misses,
            "memo_hit_rate": self.hit_rate(),
            "winner_share": self.winner_share,
        }


def winner_share(context: SearchContext, winner: Role) -> float:
    """Fraction of memoized states whose cached outcome is ``winner``."""
    if not context.memo:
        return 0.0
    outcomes = np.fromiter((role is winner for role in context.memo.values()), dtype=bool, count=len(context.memo))
    return float(outcomes.mean())


def summarize(winner: Role, context: SearchContext) -> SolveReport:
    return SolveReport(
        winner=winner,
        invocations=context.invocations,
        memo_size=len(context.memo),
        memo_hits=context.hits,
        memo_misses=context.misses,
        winner_share=winner_share(context, winner),
    )


def format_report(report: SolveReport) -> str:
    return (
        f"the winner is {report.winner.value} after {report.invocations} recursions\n"
        f"the proportion of {report.winner.value} wins in memoization is {report.winner_share}"
    )
