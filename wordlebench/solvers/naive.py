"""
Naive solver.

Strategy:
  - Keep the answer list as the candidate pool, drop every word the feedback
    rules out, and guess the first survivor in list order.

Notes:
  - Fully deterministic; the seed is ignored.
  - Never repeats a guess: a wrong guess scores itself out of the pool.
"""

from __future__ import annotations

from typing import Sequence
from .base import PoolGuesser, register


@register
class NaiveGuesser(PoolGuesser):
    id = "naive"
    name = "Naive (first consistent)"
    version = "1.0.0"

    def guess(self, history: Sequence) -> str:
        return self._narrow(history)[0]
