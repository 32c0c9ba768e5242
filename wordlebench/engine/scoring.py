"""
Wordle-style scoring (feedback) for a single (answer, guess) pair.

Each guessed letter gets one Correctness:
  - CORRECT   ('G'): right letter, right position
  - MISPLACED ('Y'): letter occurs elsewhere and still has availability
  - WRONG     ('-'): letter absent, or every occurrence already claimed

Algorithm (two-pass):
  1) Count the answer's letters into a 26-slot table.
  2) Mark exact matches and consume their availability. This pass must finish
     before pass 3 so that greens are never stolen by an earlier yellow.
  3) Left to right over the rest: MISPLACED while availability remains,
     WRONG afterwards. Earlier positions win scarce letters.
"""

from __future__ import annotations

import enum
from typing import Iterable, Tuple

from .errors import InvalidLength, InvalidLetter

WORD_LENGTH = 5
ALPHABET_SIZE = 26


class Correctness(enum.Enum):
    CORRECT = "G"
    MISPLACED = "Y"
    WRONG = "-"

    @property
    def symbol(self) -> str:
        return self.value


# A mask is always exactly WORD_LENGTH long and aligned with the guess.
Mask = Tuple[Correctness, ...]

_SYMBOLS = {c.value: c for c in Correctness}


def _check_word(word: str) -> str:
    if len(word) != WORD_LENGTH:
        raise InvalidLength(word, WORD_LENGTH)
    word = word.lower()
    for ch in word:
        if not ("a" <= ch <= "z"):
            raise InvalidLetter(word, ch)
    return word


def compute(answer: str, guess: str) -> Mask:
    """
    Score `guess` against `answer`.

    Raises:
      InvalidLength if either word is not exactly 5 characters.
      InvalidLetter if either word has a character outside a-z.

    Examples:
      compute("hello", "llama") -> (MISPLACED, MISPLACED, WRONG, WRONG, WRONG)
      compute("speed", "spell") -> (CORRECT, CORRECT, CORRECT, WRONG, WRONG)
    """
    answer = _check_word(answer)
    guess = _check_word(guess)

    mask = [Correctness.WRONG] * WORD_LENGTH

    available = [0] * ALPHABET_SIZE
    for a in answer:
        available[ord(a) - ord("a")] += 1

    # Pass 1: exact matches
    for i, (g, a) in enumerate(zip(guess, answer)):
        if g == a:
            mask[i] = Correctness.CORRECT
            available[ord(g) - ord("a")] -= 1

    # Pass 2: misplaced, capped by what pass 1 left over
    for i, g in enumerate(guess):
        if mask[i] is Correctness.CORRECT:
            continue
        idx = ord(g) - ord("a")
        if available[idx] > 0:
            mask[i] = Correctness.MISPLACED
            available[idx] -= 1

    return tuple(mask)


def is_solved(mask: Iterable[Correctness]) -> bool:
    mask = tuple(mask)
    return len(mask) == WORD_LENGTH and all(c is Correctness.CORRECT for c in mask)


def format_mask(mask: Iterable[Correctness]) -> str:
    """Render a mask as a pattern string, e.g. "GY--G"."""
    return "".join(c.symbol for c in mask)


def parse_mask(pattern: str) -> Mask:
    """
    Inverse of format_mask. Lowercase 'g'/'y' are accepted too.
    """
    if len(pattern) != WORD_LENGTH:
        raise InvalidLength(pattern, WORD_LENGTH)
    try:
        return tuple(_SYMBOLS[ch.upper()] for ch in pattern)
    except KeyError as e:
        raise ValueError(f"Unknown pattern symbol {e.args[0]!r} in {pattern!r}") from e
