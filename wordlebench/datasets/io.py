from __future__ import annotations
from pathlib import Path
from typing import List

from wordlebench.engine import WORD_LENGTH

# Small bundled list so the CLI runs out of the box.
DEFAULT_ANSWERS_PATH = Path(__file__).resolve().parent / "data" / "answers_5.txt"


def read_words(p: Path | str) -> List[str]:
    """
    Read a UTF-8 text file of whitespace-separated words, lowercased.
    Raises FileNotFoundError if the path doesn't exist.
    """
    p = Path(p)
    if not p.exists():
        raise FileNotFoundError(p)
    return [w.lower() for w in p.read_text(encoding="utf-8").split()]


def load_answers(p: Path | str, N: int = WORD_LENGTH) -> List[str]:
    """
    Read the answer list, keeping only tokens of exactly N letters a-z.
    Anything else would abort a game in the classifier, so it is skipped here
    (the validator reports it). File order is preserved; it is the order
    games are played in.
    """
    return [w for w in read_words(p) if len(w) == N and w.isascii() and w.isalpha()]
