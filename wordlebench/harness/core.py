"""
Game driver primitives.

- play:      run one game, return the winning round number or None.
- play_game: same loop, but keep the full history and guesser timing.
- run_batch: run many games in sequence, resetting the guesser before each.

The round bound defaults to 31 rather than Wordle's 6 so that weak guessers
can still be benchmarked to completion; pass WORDLE_MAX_ROUNDS for real rules.

These functions are UI-agnostic so they can be reused by the CLI, a notebook,
or tests without changes.
"""

from __future__ import annotations

import sys
import time
from dataclasses import dataclass
from typing import Iterable, List, Optional, Sequence, Tuple

from tqdm import tqdm

from wordlebench.engine import Mask, compute

# Benchmark bound (rounds 1..31).
DEFAULT_MAX_ROUNDS = 31
# Real Wordle turn budget.
WORDLE_MAX_ROUNDS = 6

PROGRESS_MODES = ("auto", "bar", "plain", "off")


@dataclass(frozen=True)
class GuessRecord:
    word: str
    mask: Mask


@dataclass(frozen=True)
class GameResult:
    answer: str
    rounds: Optional[int]              # None when the bound was exhausted
    history: Tuple[GuessRecord, ...]   # scored (non-winning) guesses only
    time_ms: float                     # time spent inside guesser.guess
    guesser_id: str = "?"

    @property
    def solved(self) -> bool:
        return self.rounds is not None


def _check_max_rounds(max_rounds: int) -> None:
    """Guardrail: a game needs at least one round."""
    if max_rounds < 1:
        raise ValueError(f"max_rounds must be >= 1; got {max_rounds}")


def play_game(answer: str, guesser, *, max_rounds: int = DEFAULT_MAX_ROUNDS) -> GameResult:
    """
    Execute one game until the guesser names the answer or the rounds run out.

    Args:
        answer:     the hidden word for this game
        guesser:    an object implementing Guesser.guess(history)
        max_rounds: round bound (>= 1)

    Returns:
        GameResult; `rounds` is the 1-based round of the win, or None.

    Errors from the guesser (StrategyFailure) or the classifier
    (InvalidLength / InvalidLetter) propagate and abort the game.
    """
    _check_max_rounds(max_rounds)

    history: List[GuessRecord] = []
    guesser_id = getattr(guesser, "id", "?")
    total_ms = 0.0

    for rnd in range(1, max_rounds + 1):
        t0 = time.perf_counter_ns()
        guess = guesser.guess(tuple(history))
        total_ms += (time.perf_counter_ns() - t0) / 1_000_000.0

        # Win check is plain string equality; the winning guess is never scored
        if guess == answer:
            return GameResult(answer, rnd, tuple(history), total_ms, guesser_id)

        history.append(GuessRecord(guess, compute(answer, guess)))

    return GameResult(answer, None, tuple(history), total_ms, guesser_id)


def play(answer: str, guesser, max_rounds: int = DEFAULT_MAX_ROUNDS) -> Optional[int]:
    """Play one game; return the winning round number, or None if out of rounds."""
    return play_game(answer, guesser, max_rounds=max_rounds).rounds


def _progress_mode(mode: str) -> str:
    if mode not in PROGRESS_MODES:
        raise ValueError(f"progress must be one of {PROGRESS_MODES}; got {mode!r}")
    if mode == "auto":
        return "bar" if sys.stderr.isatty() else "plain"
    return mode


def run_batch(
        guesser,
        answers: Iterable[str],
        *,
        pool: Sequence[str] | None = None,
        max_rounds: int = DEFAULT_MAX_ROUNDS,
        seed: int | None = None,
        sample: int | None = None,
        progress: str = "off",
) -> List[GameResult]:
    """
    Run many games back-to-back with one guesser instance.

    The guesser is reset before every game with the candidate `pool`
    (defaults to the answers themselves), so per-game state never carries
    over. If 'sample' is provided, only the first K answers are played.

    Each game's seed is derived from the base seed (seed + index) so runs are
    reproducible but not identical across games.
    """
    _check_max_rounds(max_rounds)
    mode = _progress_mode(progress)

    cases = list(answers)
    if sample is not None:
        cases = cases[:sample]
    pool = list(pool) if pool is not None else list(cases)

    total = len(cases)
    label = getattr(guesser, "id", "games")
    iterator = tqdm(cases, ncols=80, desc=label, unit="game") if mode == "bar" else cases

    out: List[GameResult] = []
    start = time.time()
    last_print = 0.0
    for idx, ans in enumerate(iterator, start=1):
        game_seed = None if seed is None else (seed + idx)
        guesser.reset(answers=pool, seed=game_seed)
        out.append(play_game(ans, guesser, max_rounds=max_rounds))

        if mode == "plain":
            now = time.time()
            if (now - last_print >= 1.0) or (idx == total):
                elapsed = now - start
                rate = (idx / elapsed) if elapsed > 0 else 0.0
                remaining = (total - idx) / rate if rate > 0 else 0.0
                pct = 100.0 * idx / max(1, total)
                sys.stderr.write(
                    f"\r[{label}] {idx}/{total} {pct:5.1f}% | elapsed {elapsed:6.1f}s | ETA {remaining:5.1f}s")
                sys.stderr.flush()
                last_print = now

    if mode == "plain" and total:
        sys.stderr.write("\n")
        sys.stderr.flush()
    return out
