# backend/tests/core/test_segmenter.py
import types

from lingua.core.parsing import segment_sentences


def test_splits_on_terminal_punctuation():
    assert list(segment_sentences("A. B! C?")) == ["A", "B", "C"]


def test_runs_of_punctuation_count_as_one_boundary():
    assert list(segment_sentences("Wait... What?! Really.")) == ["Wait", "What", "Really"]


def test_drops_empty_pieces_and_trims():
    assert list(segment_sentences("  ...  Hello world .  ! ")) == ["Hello world"]


def test_text_without_punctuation_is_one_piece():
    assert list(segment_sentences("not json at all")) == ["not json at all"]


def test_empty_text():
    assert list(segment_sentences("")) == []


def test_returns_single_use_generator():
    pieces = segment_sentences("One. Two.")
    assert isinstance(pieces, types.GeneratorType)
    assert list(pieces) == ["One", "Two"]
    assert list(pieces) == []
