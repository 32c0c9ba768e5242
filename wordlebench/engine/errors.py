"""
Error types raised by the engine and by guessers.

  - WordError / InvalidLength / InvalidLetter: caller handed the classifier
    something that is not a 5-letter a-z word. These are programming errors.
  - StrategyFailure: a guesser has nothing left to propose.

Running out of rounds is not an error; the driver returns None for that.
"""


class WordError(ValueError):
    """Base class for malformed words passed to the engine."""


class InvalidLength(WordError):
    def __init__(self, word: str, expected: int):
        self.word = word
        self.expected = expected
        super().__init__(f"expected a {expected}-letter word, got {word!r} ({len(word)} chars)")


class InvalidLetter(WordError):
    def __init__(self, word: str, letter: str):
        self.word = word
        self.letter = letter
        super().__init__(f"{word!r} contains {letter!r}; only a-z is allowed")


class StrategyFailure(RuntimeError):
    """A guesser could not produce a guess."""
