from .validator import validate_answers, pretty_summary
from .io import DEFAULT_ANSWERS_PATH, read_words, load_answers

__all__ = ["DEFAULT_ANSWERS_PATH", "validate_answers", "pretty_summary", "read_words", "load_answers"]
