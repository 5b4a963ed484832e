import numpy as np
import pytest
from packages.strategies import create_strategy
from packages.engine import (
    Solver, score, is_consistent, InvalidFeedback, GameOver,
    AwaitingFeedback, Continue, Solved, Contradiction,
)


def _oracle_game(solver: Solver, secret: str, limit: int = 100):
    """Drive `solver` with honest feedback; return (final result, remaining per round)."""
    result = solver.initialize()
    remaining = [result.remaining]
    for _ in range(limit):
        result = solver.submit_feedback(*score(secret, solver.current_guess))
        if result.kind != "continue":
            return result, remaining
        remaining.append(result.remaining)
    raise AssertionError("solver did not terminate")


def test_initialize_full_pool():
    solver = Solver(seed=1)
    res = solver.initialize()
    assert isinstance(res, Continue) and res.kind == "continue"
    assert res.remaining == 5040
    assert isinstance(solver.state, AwaitingFeedback)
    assert solver.current_guess == res.next_guess
    assert res.next_guess in solver.pool
    assert solver.turns == 0 and solver.history == []


def test_first_guess_correct_is_solved_in_one_turn():
    solver = Solver(seed=3)
    first = solver.initialize().next_guess
    res = solver.submit_feedback(4, 0)
    assert isinstance(res, Solved) and res.kind == "solved"
    assert res.turns == 1 and res.final_guess == first
    assert solver.finished and solver.state == res


def test_full_game_first_candidate_exact_path():
    solver = Solver("first_candidate")
    result, remaining = _oracle_game(solver, "7890")
    assert result == Solved("7890", 5)
    assert [t.guess for t in solver.history] == ["0123", "1456", "2789", "3897", "7890"]
    assert [str(t.feedback) for t in solver.history] == ["0A1B", "0A0B", "0A3B", "2A1B", "4A0B"]
    assert remaining[0] == 5040 and remaining[-1] == 3
    assert all(x > y for x, y in zip(remaining, remaining[1:]))
    assert result.turns <= 8


@pytest.mark.parametrize("seed", [0, 1, 2, 3, 4])
def test_full_game_random_strategy_terminates(seed):
    solver = Solver("random_consistent", seed=seed)
    result, remaining = _oracle_game(solver, "7890")
    assert result.kind == "solved" and result.final_guess == "7890"
    assert result.turns <= 8
    assert all(x > y for x, y in zip(remaining, remaining[1:]))
    # every recorded turn is consistent with the true secret
    assert is_consistent("7890", solver.history)


def test_same_seed_same_game():
    a = Solver(seed=99)
    b = Solver(seed=99)
    _oracle_game(a, "5021")
    _oracle_game(b, "5021")
    assert a.history == b.history


def test_contradiction_keeps_pool_and_is_terminal():
    solver = Solver("first_candidate")
    assert solver.initialize().next_guess == "0123"
    res = solver.submit_feedback(0, 0)          # none of 0,1,2,3
    assert res.next_guess == "4567" and res.remaining == 360
    pool_before = solver.pool
    res = solver.submit_feedback(0, 0)          # none of 4..7 either: only 8, 9 left
    assert isinstance(res, Contradiction) and res.kind == "contradiction"
    assert res.last_guess == "4567"
    assert res.pool == pool_before and len(res.pool) == 360
    assert solver.pool == pool_before
    assert solver.turns == 2
    with pytest.raises(GameOver):
        solver.submit_feedback(1, 0)


def test_impossible_feedback_on_first_round_is_contradiction():
    solver = Solver(seed=5)
    solver.initialize()
    res = solver.submit_feedback(3, 1)          # 3A1B can never happen
    assert res.kind == "contradiction"
    assert len(res.pool) == 5040


@pytest.mark.parametrize("a,b", [(-1, 0), (0, -1), (5, 0), (0, 5), (3, 2), (4, 1), ("1", 0)])
def test_invalid_feedback_leaves_state_untouched(a, b):
    solver = Solver(seed=8)
    solver.initialize()
    solver.submit_feedback(0, 2)
    state, pool, history = solver.state, solver.pool, solver.history
    with pytest.raises(InvalidFeedback):
        solver.submit_feedback(a, b)
    assert solver.state == state
    assert solver.pool == pool
    assert solver.history == history


def test_submit_before_initialize_raises():
    with pytest.raises(GameOver):
        Solver().submit_feedback(0, 0)


def test_solved_game_rejects_more_feedback_and_can_restart():
    solver = Solver(seed=2)
    solver.initialize()
    solver.submit_feedback(4, 0)
    with pytest.raises(GameOver):
        solver.submit_feedback(0, 0)
    res = solver.initialize()
    assert res.remaining == 5040 and solver.turns == 0 and not solver.finished


def test_function_strategy_slot():
    solver = Solver(lambda cands: max(cands))
    assert solver.initialize().next_guess == "9876"
    res = solver.submit_feedback(0, 0)
    assert res.next_guess == "5432"  # largest code with none of 9, 8, 7, 6


def test_strategy_must_return_a_candidate():
    with pytest.raises(ValueError, match="not a remaining candidate"):
        Solver(lambda cands: "0000").initialize()


def test_independent_solvers_share_nothing():
    a, b = Solver("first_candidate"), Solver("first_candidate")
    a.initialize()
    b.initialize()
    a.submit_feedback(0, 0)
    assert b.remaining == 5040 and b.turns == 0


def test_failing_strategy_leaves_state_untouched():
    calls = []

    def flaky(cands):
        calls.append(len(cands))
        return min(cands) if len(calls) == 1 else "0000"

    solver = Solver(flaky)
    assert solver.initialize().next_guess == "0123"
    state, pool, history = solver.state, solver.pool, solver.history
    with pytest.raises(ValueError, match="not a remaining candidate"):
        solver.submit_feedback(0, 0)
    assert solver.state == state
    assert solver.pool == pool and solver.remaining == 5040
    assert solver.history == history and solver.turns == 0
    assert solver.current_guess == "0123"


def test_solvers_built_from_one_strategy_instance_do_not_share_it():
    shared = create_strategy("random_consistent")
    a, b = Solver(shared, seed=4), Solver(shared, seed=4)
    assert a.strategy is not b.strategy and a.strategy is not shared
    a.initialize()
    a.submit_feedback(0, 1)
    # b's draws are unaffected by a's game
    assert b.initialize().next_guess == Solver("random_consistent", seed=4).initialize().next_guess


def test_numpy_integer_feedback_is_accepted():
    solver = Solver("first_candidate")
    solver.initialize()
    res = solver.submit_feedback(np.int64(0), np.int64(1))
    assert res.kind == "continue" and res.remaining == 1440
    assert type(solver.history[-1].feedback.a) is int
