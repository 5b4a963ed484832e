import pytest
from packages.engine import Solver, score, enumerate_all, filter_candidates
from packages.strategies import create_strategy, get_strategy_ids, as_strategy, FunctionStrategy


def test_registry_contents():
    assert {"random_consistent", "first_candidate", "expected_left", "max_patterns"} <= set(get_strategy_ids())
    with pytest.raises(ValueError, match="Unknown strategy id"):
        create_strategy("nope")
    with pytest.raises(TypeError):
        as_strategy(42)
    assert isinstance(as_strategy(min), FunctionStrategy)


@pytest.mark.parametrize("sid", ["random_consistent", "first_candidate", "expected_left", "max_patterns"])
def test_strategy_picks_a_candidate(sid):
    strategy = create_strategy(sid)
    strategy.reset(seed=7)
    cands = filter_candidates(enumerate_all(), [("0123", (1, 1))])
    guess = strategy.next_guess({"turn": 2, "candidates": cands, "history": []})
    assert guess in cands


@pytest.mark.parametrize("sid", ["expected_left", "max_patterns"])
def test_partition_strategies_solve(sid):
    solver = Solver(sid, seed=11)
    solver.initialize()
    for _ in range(12):
        res = solver.submit_feedback(*score("4079", solver.current_guess))
        if res.kind != "continue":
            break
    assert res.kind == "solved" and res.final_guess == "4079"
