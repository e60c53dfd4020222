import pytest

from harehounds.core import (
    BoardState,
    Move,
    Position,
    Role,
    apply_move,
    initialize_game_state,
    is_terminal,
    legal_moves,
)
from harehounds.solver import GameSolver, SearchContext, SolverConfig, principal_line, solve
from harehounds.solver import search

P = Position


@pytest.fixture(scope="module")
def solved():
    return GameSolver().run(initialize_game_state())


def final_outcome(state: BoardState) -> Role:
    if is_terminal(state):
        return Role.EVADER
    assert legal_moves(state) == []
    return state.to_move.opponent()


def test_evader_breaks_through_gap() -> None:
    state = BoardState((P.LEFT_BOTTOM, P.CENTRE_TOP, P.CENTRE_BOTTOM), P.CENTRE_MID, 5, Role.EVADER)
    assert solve(state, SearchContext()) is Role.EVADER


def test_ply_cap_dominates_initial_layout() -> None:
    start = initialize_game_state()
    state = BoardState(start.pursuers, start.evader, 29, Role.PURSUER)
    assert solve(state, SearchContext()) is Role.EVADER


def test_pursuers_trap_flanked_evader() -> None:
    state = BoardState((P.RIGHT_TOP, P.CENTRE_MID, P.RIGHT_BOTTOM), P.RIGHT_END, 29, Role.PURSUER)
    assert solve(state, SearchContext()) is Role.PURSUER


def test_over_cap_returns_without_enumerating(monkeypatch) -> None:
    def fail(state):
        raise AssertionError("legal_moves should not be called")

    monkeypatch.setattr(search, "legal_moves", fail)
    start = initialize_game_state()
    state = BoardState(start.pursuers, start.evader, 31, Role.PURSUER)
    context = SearchContext()
    assert solve(state, context) is Role.EVADER
    assert context.invocations == 1
    assert len(context) == 0


def test_stuck_mover_loses() -> None:
    state = BoardState((P.RIGHT_TOP, P.RIGHT_MID, P.RIGHT_BOTTOM), P.RIGHT_END, 10, Role.EVADER)
    context = SearchContext()
    assert solve(state, context) is Role.PURSUER
    assert context.invocations == 1


def test_cached_child_is_not_searched_again() -> None:
    state = BoardState((P.RIGHT_TOP, P.CENTRE_MID, P.RIGHT_BOTTOM), P.RIGHT_END, 29, Role.PURSUER)
    context = SearchContext()
    solve(state, context)
    first_invocations = context.invocations

    solve(state, context)
    assert context.invocations == first_invocations + 1
    assert context.hits > 0


def test_cached_loss_does_not_end_search() -> None:
    state = BoardState((P.RIGHT_TOP, P.CENTRE_MID, P.RIGHT_BOTTOM), P.RIGHT_END, 29, Role.PURSUER)
    first_move = legal_moves(state)[0]
    assert first_move == Move(P.RIGHT_TOP, P.RIGHT_MID)
    first_child = apply_move(state, first_move)

    context = SearchContext()
    context.store(first_child, Role.EVADER)
    assert solve(state, context) is Role.PURSUER
    assert context.hits >= 1
    winning_child = apply_move(state, Move(P.CENTRE_MID, P.RIGHT_MID))
    assert context.memo[winning_child.key()] is Role.PURSUER


def test_initial_position_is_won_by_pursuers(solved) -> None:
    assert solved.winner is Role.PURSUER


def test_smaller_ply_cap_changes_search_horizon() -> None:
    state = BoardState((P.RIGHT_TOP, P.CENTRE_MID, P.RIGHT_BOTTOM), P.RIGHT_END, 29, Role.PURSUER)
    assert solve(state, config=SolverConfig(ply_cap=31)) is Role.PURSUER
    assert solve(state, config=SolverConfig(ply_cap=29)) is Role.EVADER


def test_solver_config_rejects_bad_values() -> None:
    with pytest.raises(ValueError):
        SolverConfig(ply_cap=0)
    with pytest.raises(ValueError):
        SolverConfig(log_interval=-1)


def test_initial_position_is_deterministic(solved) -> None:
    again = GameSolver().run(initialize_game_state())
    assert again.winner is solved.winner
    assert again.context.invocations == solved.context.invocations
    assert again.context.memo == solved.context.memo


def test_memo_keys_are_canonical(solved) -> None:
    for key in solved.context.memo:
        assert list(key[0]) == sorted(key[0])


def test_memo_entries_match_fresh_solves(solved) -> None:
    late = sorted(
        (key for key in solved.context.memo if key[2] >= 26),
        key=lambda k: (k[2], k[0], k[1]),
    )[:25]
    assert late
    for pursuers, evader, ply, to_move in late:
        state = BoardState(pursuers, evader, ply, to_move)
        assert solve(state, SearchContext()) is solved.context.memo[state.key()]


def test_principal_line_reaches_decided_outcome(solved) -> None:
    start = initialize_game_state()
    line = principal_line(start, solved.context)
    state = start
    for move in line:
        state = apply_move(state, move)
    assert final_outcome(state) is solved.winner


def test_principal_line_follows_enumeration_order() -> None:
    flank = BoardState((P.RIGHT_TOP, P.CENTRE_MID, P.RIGHT_BOTTOM), P.RIGHT_END, 29, Role.PURSUER)
    assert principal_line(flank) == [Move(P.CENTRE_MID, P.RIGHT_MID)]

    gap = BoardState((P.LEFT_BOTTOM, P.CENTRE_TOP, P.CENTRE_BOTTOM), P.CENTRE_MID, 5, Role.EVADER)
    assert principal_line(gap) == [Move(P.CENTRE_MID, P.LEFT_TOP)]
