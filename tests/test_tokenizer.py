import pytest

from wer_core.alignment import normalize_text, tokenize


def test_normalize_lowercases_trims_and_collapses_whitespace():
    assert normalize_text("  The\tCat \n\n SAT  ") == "the cat sat"


def test_normalize_keeps_punctuation():
    assert normalize_text("Hello, World.") == "hello, world."


@pytest.mark.parametrize("text", ["", "   ", "\n\t \r\n"])
def test_tokenize_blank_input_is_empty(text):
    assert tokenize(text) == []


def test_tokenize_splits_on_any_whitespace():
    assert tokenize("one  two\tthree\nFOUR") == ["one", "two", "three", "four"]


def test_tokenize_does_not_split_on_zero_width_space():
    # U+200B is not whitespace; pre-cleaning is text_cleanup's job
    assert tokenize("a\u200bb c") == ["a\u200bb", "c"]


def test_tokenize_treats_byte_order_mark_as_whitespace():
    assert tokenize("\ufeffA\ufeffb ") == ["a", "b"]
