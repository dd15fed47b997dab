import pytest

from lexwrap.wrapper import clamp, wrap

SAMPLES = [
    "alpha beta gamma delta",
    "the quick brown fox jumps over the lazy dog",
    "Lorem ipsum dolor sit amet, consectetur adipiscing elit, sed do eiusmod tempor",
    "a bb ccc dddd eeeee ffff ggg hh i",
]


def test_greedy_fill_breaks_before_word_that_does_not_fit():
    assert wrap("alpha beta gamma delta", 20, 20) == ["alpha beta gamma", "delta"]


def test_empty_text_yields_one_empty_line():
    assert wrap("", 10, 10) == [""]


def test_text_that_fits_is_a_single_line():
    assert wrap("short text", 80, 80) == ["short text"]


def test_exact_fit_uses_full_width():
    assert wrap("abcde fghij", 5, 5) == ["abcde", "fghij"]


def test_first_line_limit_is_independent_of_continuation_limit():
    assert wrap("one two three four", 3, 9) == ["one", "two three", "four"]


def test_single_word_longer_than_limit_is_kept_whole():
    assert wrap("supercalifragilistic", 5, 5) == ["supercalifragilistic"]


def test_long_word_between_short_words_gets_its_own_line():
    assert wrap("a verylongword b", 5, 5) == ["a", "verylongword", "b"]


@pytest.mark.parametrize("limit", [0, -3])
def test_non_positive_limit_puts_each_word_on_its_own_line(limit):
    assert wrap("ab cd", limit, limit) == ["ab", "cd"]


@pytest.mark.parametrize("text", SAMPLES)
@pytest.mark.parametrize("width", [5, 8, 13, 21, 40])
def test_lines_never_exceed_limit_when_words_fit(text, width):
    """Every line fits as long as no single word is wider than the limit."""
    lines = wrap(text, width, width)
    if max(len(w) for w in text.split()) <= width:
        assert all(len(line) <= width for line in lines)


@pytest.mark.parametrize("text", SAMPLES)
@pytest.mark.parametrize("width", [1, 7, 16, 100])
def test_words_and_their_order_are_preserved(text, width):
    lines = wrap(text, width, width)
    assert " ".join(lines).split() == text.split()


def test_clamp():
    assert clamp(-1, 0, 5) == 0
    assert clamp(9, 0, 5) == 5
    assert clamp(3, 0, 5) == 3
