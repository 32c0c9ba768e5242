from .core import (
    DEFAULT_MAX_ROUNDS, WORDLE_MAX_ROUNDS, GameResult, GuessRecord, play, play_game, run_batch,
)
from .io import write_csv, write_manifest
from .report import summarize

__all__ = [
    "DEFAULT_MAX_ROUNDS", "WORDLE_MAX_ROUNDS", "GameResult", "GuessRecord", "play",
    "play_game", "run_batch", "summarize", "write_csv", "write_manifest",
]
