import jiwer
import pytest

from wer_core import (
    AlignmentError,
    EmptyReferenceError,
    InputTooLargeError,
    InvalidInputError,
    align,
    compute_metrics,
    compute_wer,
)
from wer_core.models import AlignmentToken, TokenType
from wer_core.scoring import metrics as metrics_module
from wer_core.scoring.metrics import count_operations


def _check_counts(result, ref_text, hyp_text):
    ref_len = len(ref_text.split())
    hyp_len = len(hyp_text.split())
    assert result.hits + result.substitutions + result.deletions == result.total_words == ref_len
    assert result.hits + result.substitutions + result.insertions == hyp_len
    assert len(result.alignment) == (
        result.hits + result.substitutions + result.deletions + result.insertions
    )
    for rate in (result.wer, result.mer, result.wil):
        assert 0.0 <= rate <= 1.0


def test_identical_text():
    result = compute_wer("the cat sat", "the cat sat")
    assert result.hits == 3
    assert result.total_words == 3
    assert result.wer == 0
    assert result.mer == 0
    assert result.wil == 0
    assert all(t.type == TokenType.CORRECT for t in result.alignment)


def test_identical_text_ignores_case_and_spacing():
    result = compute_wer("The  Cat\nSat", "the cat sat ")
    assert result.wer == 0


def test_single_substitution():
    result = compute_wer("the cat sat", "the dog sat")
    assert result.substitutions == 1
    assert result.hits == 2
    assert result.wer == pytest.approx(1 / 3)
    assert result.mer == pytest.approx(1 / 3)
    assert result.wil == pytest.approx(1 / 3)
    assert result.alignment[1] == AlignmentToken.substitution("cat", "dog")


def test_single_deletion():
    result = compute_wer("a b c", "a b")
    assert result.deletions == 1
    assert result.hits == 2
    assert result.wer == pytest.approx(1 / 3)
    assert result.alignment[-1] == AlignmentToken.deletion("c")


def test_single_insertion():
    result = compute_wer("a b", "a b c")
    assert result.insertions == 1
    assert result.hits == 2
    assert result.wer == 0.5
    assert result.mer == pytest.approx(1 / 3)
    assert result.wil == 0


def test_empty_hypothesis_is_all_deletions():
    result = compute_wer("a b", "")
    assert result.deletions == 2
    assert (result.wer, result.mer, result.wil) == (1.0, 1.0, 1.0)


@pytest.mark.parametrize("reference", ["", "   ", "\n\t"])
def test_empty_reference_fails(reference):
    with pytest.raises(EmptyReferenceError):
        compute_wer(reference, "anything")


def test_empty_reference_fails_before_alignment(monkeypatch):
    def _fail(*args, **kwargs):
        raise AssertionError("align should not be called")

    monkeypatch.setattr(metrics_module, "align", _fail)
    with pytest.raises(EmptyReferenceError):
        compute_wer("", "anything")


def test_rates_are_capped_with_many_insertions():
    result = compute_wer("a", "a b b b b b")
    assert result.hits == 1
    assert result.insertions == 5
    assert result.wer == 1.0
    assert result.raw_wer == 5.0
    assert result.mer == pytest.approx(5 / 6)
    assert result.wil == 0.0


@pytest.mark.parametrize(
    "reference, hypothesis",
    [
        ("the cat sat", "the cat sat"),
        ("the cat sat on the mat", "a cat sat on mat"),
        ("one two three", "four five six seven eight"),
        ("x", "y y y y y y y y"),
        ("we will meet at the station at noon", "we meet at station at twelve noon today"),
        ("a b c d e f", "f e d c b a"),
    ],
)
def test_counts_are_consistent(reference, hypothesis):
    _check_counts(compute_wer(reference, hypothesis), reference, hypothesis)


@pytest.mark.parametrize(
    "reference, hypothesis",
    [
        ("the cat sat on the mat", "the cat sat on a mat"),
        ("please call stella ask her to bring these things", "please call ella ask her to bring things"),
        ("a b c d e f", "f e d c b a"),
        ("we will meet at the station at noon", "we meet at station at twelve noon today"),
    ],
)
def test_error_count_matches_jiwer(reference, hypothesis):
    result = compute_wer(reference, hypothesis)
    assert result.raw_wer == pytest.approx(jiwer.wer(reference, hypothesis))


def test_results_are_repeatable():
    first = compute_wer("the quick brown fox", "the quack brown fox jumps")
    second = compute_wer("the quick brown fox", "the quack brown fox jumps")
    assert first == second
    assert first.to_dict() == second.to_dict()


@pytest.mark.parametrize("reference, hypothesis", [(None, "a"), ("a", 3), (["a"], "a")])
def test_non_text_input_is_rejected(reference, hypothesis):
    with pytest.raises(InvalidInputError):
        compute_wer(reference, hypothesis)


def test_invalid_input_is_a_type_error():
    with pytest.raises(TypeError):
        compute_wer(b"bytes", "a")


def test_size_limit_is_forwarded():
    with pytest.raises(InputTooLargeError):
        compute_wer("a b c", "a b c", max_cells=10)


def test_compute_metrics_from_alignment():
    outcome = align(["a", "b", "c"], ["a", "x"])
    result = compute_metrics(outcome.alignment, 3)
    assert (result.hits, result.substitutions, result.deletions) == (1, 1, 1)
    assert result.errors == outcome.distance == 2
    assert result.hypothesis_words == 2


def test_compute_metrics_rejects_zero_words():
    with pytest.raises(EmptyReferenceError):
        compute_metrics([], 0)


def test_compute_metrics_rejects_mismatched_total():
    with pytest.raises(AlignmentError):
        compute_metrics([AlignmentToken.correct("a")], 2)


def test_count_operations():
    counts = count_operations([
        AlignmentToken.correct("a"),
        AlignmentToken.insertion("b"),
        AlignmentToken.insertion("c"),
        AlignmentToken.deletion("d"),
    ])
    assert counts == {"hits": 1, "substitutions": 0, "deletions": 1, "insertions": 2}


def test_result_to_dict_shape():
    payload = compute_wer("a b", "a c d").to_dict()
    assert set(payload) == {
        "wer", "mer", "wil", "raw_wer", "hits", "substitutions",
        "deletions", "insertions", "total_words", "alignment",
    }
    assert payload["alignment"][0] == {"reference": "a", "hypothesis": "a", "type": "correct"}


def test_byte_order_mark_inside_text_splits_words():
    result = compute_wer("a\ufeffb", "a b")
    assert result.total_words == 2
    assert result.wer == 0
