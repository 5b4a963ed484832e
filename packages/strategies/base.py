from __future__ import annotations
import random
from typing import Callable, Dict, List, Type

# ---- Global strategy registry ----
REGISTRY: Dict[str, Type["BaseStrategy"]] = {}


def register(cls: Type["BaseStrategy"]) -> Type["BaseStrategy"]:
    """
    Decorator: @register on a strategy class adds it to REGISTRY by its `id`.
    """
    sid = getattr(cls, "id", None)
    if not sid:
        raise ValueError(f"{cls.__name__} must define a non-empty `id`")
    if sid in REGISTRY:
        raise ValueError(f"Duplicate strategy id: {sid}")
    REGISTRY[sid] = cls
    return cls


# ---- Base class that strategies inherit ----
class BaseStrategy:
    """
    A strategy fills the "pick next guess" slot of the Solver.

    next_guess(state) receives a dict with:
      - "turn":       1-based round number of the guess being chosen
      - "candidates": codes still consistent with all feedback (never empty)
      - "history":    list of (guess, Feedback) turns so far

    It must return one of the candidates; that keeps the pool shrinking
    every round until the secret is found.
    """
    id = "base"
    name = "Base"
    version = "0.0.0"

    def __init__(self):
        self.rng = random.Random()

    def reset(self, seed: int | None = None) -> None:
        if seed is not None:
            self.rng.seed(seed)

    def next_guess(self, state: dict) -> str:
        raise NotImplementedError("Override in subclass")


class FunctionStrategy(BaseStrategy):
    """Adapter: wrap a plain `candidates -> code` function as a strategy."""
    id = "function"
    name = "Function"

    def __init__(self, fn: Callable[[List[str]], str]):
        super().__init__()
        self.fn = fn
        self.name = getattr(fn, "__name__", self.name)

    def next_guess(self, state: dict) -> str:
        return self.fn(list(state["candidates"]))


def create_strategy(strategy_id: str) -> BaseStrategy:
    """
    Factory: instantiate a registered strategy by id.
    """
    try:
        cls = REGISTRY[strategy_id]
    except KeyError as e:
        raise ValueError(
            f"Unknown strategy id: {strategy_id}. Available: {sorted(REGISTRY.keys())}") from e
    return cls()


def as_strategy(strategy) -> BaseStrategy:
    """
    Accept a registered id, a BaseStrategy instance, or a plain function
    `list[str] -> str`, and return a BaseStrategy.
    """
    if isinstance(strategy, BaseStrategy):
        return strategy
    if isinstance(strategy, str):
        return create_strategy(strategy)
    if callable(strategy):
        return FunctionStrategy(strategy)
    raise TypeError(f"Not a strategy: {strategy!r}")
