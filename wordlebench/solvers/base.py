from __future__ import annotations
import random
from typing import Dict, List, Sequence, Type

from wordlebench.engine import StrategyFailure, filter_candidates

# ---- Global guesser registry ----
REGISTRY: Dict[str, Type["Guesser"]] = {}


def register(cls: Type["Guesser"]) -> Type["Guesser"]:
    """
    Decorator: @register on a guesser class adds it to REGISTRY by its `id`.
    """
    gid = getattr(cls, "id", None)
    if not gid:
        raise ValueError(f"{cls.__name__} must define a non-empty `id`")
    if gid in REGISTRY:
        raise ValueError(f"Duplicate guesser id: {gid}")
    REGISTRY[gid] = cls
    return cls


# ---- Base class that guessers inherit ----
class Guesser:
    """
    Strategy interface: given the history of this game, propose the next word.

    `guess` is called once per round with a read-only tuple of GuessRecord
    (empty on the first round). Implementations may keep per-game state; the
    batch runner calls `reset` before every game so state never leaks across
    answers.
    """
    id = "base"
    name = "Base"
    version = "0.0.0"

    def __init__(self):
        self.answers: List[str] = []
        self.rng = random.Random()

    def reset(self, *, answers: Sequence[str], seed: int | None = None) -> None:
        self.answers = list(answers)
        if seed is not None:
            self.rng.seed(seed)

    def guess(self, history: Sequence) -> str:
        raise NotImplementedError("Override in subclass")


class PoolGuesser(Guesser):
    """
    Guesser that keeps a shrinking pool of candidates consistent with feedback.

    The pool starts as the answer list and is narrowed by the newest record on
    each call, so each record is applied exactly once.
    """

    def __init__(self):
        super().__init__()
        self.pool: List[str] = []
        self._seen = 0

    def reset(self, *, answers: Sequence[str], seed: int | None = None) -> None:
        super().reset(answers=answers, seed=seed)
        self.pool = list(self.answers)
        self._seen = 0

    def _narrow(self, history: Sequence) -> List[str]:
        if len(history) < self._seen:
            raise StrategyFailure(
                f"{self.id}: history shrank from {self._seen} to {len(history)}; call reset() between games")
        fresh = history[self._seen:]
        if not self.pool and self._seen == 0:
            raise StrategyFailure(f"{self.id}: candidate pool is empty; call reset(answers=...) before the first guess")
        if fresh:
            self.pool = filter_candidates(self.pool, fresh)
            self._seen = len(history)
        if not self.pool:
            raise StrategyFailure(f"{self.id}: no candidate is consistent with the feedback so far")
        return self.pool
