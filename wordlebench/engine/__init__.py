from .scoring import (
    WORD_LENGTH, Correctness, Mask, compute, format_mask, is_solved, parse_mask,
)
from .constraints import filter_candidates
from .errors import InvalidLength, InvalidLetter, StrategyFailure, WordError

__all__ = [
    "WORD_LENGTH", "Correctness", "Mask", "compute", "format_mask", "is_solved",
    "parse_mask", "filter_candidates", "InvalidLength", "InvalidLetter",
    "StrategyFailure", "WordError",
]
