"""
Candidate filtering given game history.

A word stays a candidate only if, had it been the answer, every past guess
would have produced exactly the mask that was recorded. Guessers use this to
shrink their pool between rounds.
"""

from typing import Iterable, List

from .scoring import WORD_LENGTH, compute


def filter_candidates(words: Iterable[str], history: Iterable) -> List[str]:
    """
    Keep only words consistent with every GuessRecord in `history`.

    Args:
      words   : iterable of candidate words (often the answers pool)
      history : iterable of records with `.word` and `.mask`

    Returns:
      List[str] of consistent candidates (order preserved as in `words`).
    """
    history = list(history)
    out: List[str] = []

    for w in words:
        w = w.strip().lower()

        # Skip anything the classifier would reject
        if len(w) != WORD_LENGTH or not (w.isascii() and w.isalpha()):
            continue

        if all(compute(w, rec.word) == rec.mask for rec in history):
            out.append(w)

    return out
