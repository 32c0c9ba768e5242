"""
Random Consistent solver.

Strategy:
  - Choose uniformly at random from the CURRENT candidate pool (words still
    consistent with all feedback so far).

Notes:
  - Deterministic across runs with the same seed (via Guesser.rng).
  - This is a baseline to verify the pipeline; it does not try to maximize
    information gain or positional coverage.
"""

from __future__ import annotations

from typing import Sequence
from .base import PoolGuesser, register


@register
class RandomConsistentGuesser(PoolGuesser):
    id = "random_consistent"
    name = "Random Consistent"
    version = "1.1.0"

    def guess(self, history: Sequence) -> str:
        """
        Pick any surviving candidate uniformly at random (seeded RNG).

        Raises:
            StrategyFailure if nothing in the pool fits the history.
        """
        pool = self._narrow(history)
        i = self.rng.randrange(len(pool))
        return pool[i]
