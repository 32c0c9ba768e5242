import itertools
from collections import Counter

import pytest
from wordlebench.engine import (
    Correctness, InvalidLength, InvalidLetter, compute, filter_candidates, format_mask,
    is_solved, parse_mask,
)
from wordlebench.harness import GuessRecord

C, M, W = Correctness.CORRECT, Correctness.MISPLACED, Correctness.WRONG


# --- golden tests (duplicates + placements) ---
@pytest.mark.parametrize("answer,guess,expected", [
    ("hello", "hello", (C, C, C, C, C)),
    ("hello", "world", (W, M, W, C, W)),
    ("hello", "lloll", (M, W, M, C, W)),
    ("world", "robot", (M, C, W, W, W)),
    ("peeks", "lever", (W, C, W, M, W)),
    ("hello", "llama", (M, M, W, W, W)),
    ("hello", "helps", (C, C, C, W, W)),
    ("hello", "ohell", (M, M, M, C, M)),
    ("speed", "spell", (C, C, C, W, W)),
    ("peaks", "spell", (M, M, M, W, W)),
    ("aaaaa", "aaaaa", (C, C, C, C, C)),
    ("aaaaa", "bbbbb", (W, W, W, W, W)),
])
def test_compute_golden(answer, guess, expected):
    assert compute(answer, guess) == expected


@pytest.mark.parametrize("guess,answer,expected", [
    ("belle", "level", "-GYYY"),
    ("level", "level", "GGGGG"),
    ("lemon", "level", "GG---"),
    ("cools", "scoop", "YYG-Y"),
    ("raise", "crane", "YY--G"),
    ("stare", "crane", "--GYG"),
])
def test_compute_patterns(guess, answer, expected):
    assert format_mask(compute(answer, guess)) == expected


def test_exact_match_wins_over_earlier_misplaced():
    # the only 'e' left after greens belongs to position 4; the early 'e'
    # must not steal it
    assert format_mask(compute("abcde", "eeeee")) == "----G"
    assert format_mask(compute("abcee", "eeeex")) == "Y--G-"


def test_compute_is_case_insensitive():
    assert compute("HELLO", "Hello") == compute("hello", "hello")


@pytest.mark.parametrize("answer,guess", [
    ("toolong", "hello"),
    ("hello", "toolong"),
    ("", "hello"),
    ("hell", "hello"),
])
def test_compute_invalid_length(answer, guess):
    with pytest.raises(InvalidLength):
        compute(answer, guess)


def test_invalid_length_is_a_value_error():
    with pytest.raises(ValueError):
        compute("hello", "hi")


@pytest.mark.parametrize("answer,guess", [("hell0", "hello"), ("hello", "he-lo"), ("héllo", "hello")])
def test_compute_invalid_letter(answer, guess):
    with pytest.raises(InvalidLetter):
        compute(answer, guess)


WORDS = ["hello", "llama", "speed", "spell", "eerie", "geese", "abbey", "kayak",
         "crane", "sissy", "mamma", "lever", "peeks", "robot", "world"]


@pytest.mark.parametrize("answer,guess", list(itertools.product(WORDS, repeat=2)))
def test_compute_properties(answer, guess):
    mask = compute(answer, guess)
    assert len(mask) == 5
    assert mask.count(C) == sum(a == g for a, g in zip(answer, guess))

    credited = Counter(g for g, c in zip(guess, mask) if c is not W)
    occurs = Counter(answer)
    for letter, n in credited.items():
        assert n <= occurs[letter]


def test_mask_helpers():
    mask = compute("hello", "world")
    assert format_mask(mask) == "-Y-G-"
    assert parse_mask("-Y-G-") == mask
    assert parse_mask("gyggy") == (C, M, C, C, M)
    assert is_solved(compute("crane", "crane"))
    assert not is_solved(mask)
    with pytest.raises(InvalidLength):
        parse_mask("GG")
    with pytest.raises(ValueError):
        parse_mask("GGXGG")


def test_filter_candidates_history():
    words = ["crane", "raise", "stare", "trace", "cared", "racer", "scoop"]
    history = [GuessRecord("raise", parse_mask("YY--G"))]
    cand = filter_candidates(words, history)
    assert "crane" in cand and "stare" not in cand and "scoop" not in cand


def test_filter_candidates_skips_malformed_words():
    assert filter_candidates(["Crane", "cranes", "cr4ne", ""], []) == ["crane"]
