"""
Aggregate statistics over a batch of GameResult.

Round statistics only cover solved games; unsolved games are counted under
`failed`. The histogram maps round number -> number of games won in it.
"""

from __future__ import annotations

from typing import Dict, Iterable

import numpy as np


def summarize(results: Iterable) -> Dict:
    results = list(results)
    rounds = np.array([r.rounds for r in results if r.rounds is not None], dtype=int)

    summary: Dict = {
        "games": len(results),
        "solved": int(rounds.size),
        "failed": len(results) - int(rounds.size),
        "mean_rounds": None,
        "median_rounds": None,
        "max_rounds": None,
        "histogram": {},
        "time_ms": round(float(sum(r.time_ms for r in results)), 3),
    }
    if rounds.size:
        counts = np.bincount(rounds)
        summary.update(
            mean_rounds=round(float(rounds.mean()), 4),
            median_rounds=float(np.median(rounds)),
            max_rounds=int(rounds.max()),
            histogram={int(k): int(c) for k, c in enumerate(counts) if c},
        )
    return summary


def pretty_summary(summary: Dict) -> str:
    """
    One-liner for the console, e.g.
        games=10 | solved=10 | failed=0 | mean=3.4000 | median=3.0 | max=6 | 1:1 2:2 3:3 4:2 5:1 6:1
    """
    if not summary["solved"]:
        return f"games={summary['games']} | solved=0 | failed={summary['failed']}"
    hist = " ".join(f"{k}:{v}" for k, v in sorted(summary["histogram"].items()))
    return (
        f"games={summary['games']} | solved={summary['solved']} | failed={summary['failed']} "
        f"| mean={summary['mean_rounds']:.4f} | median={summary['median_rounds']} "
        f"| max={summary['max_rounds']} | {hist}"
    )
