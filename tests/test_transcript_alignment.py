from __future__ import annotations

import pytest

from subalign.exceptions import InvalidInputError
from subalign.models.token import Token
from subalign.pipeline import align_transcript
from subalign.utils.word_aligner import WordAligner, build_asr_words, build_transcript_words, split_transcript_lines


def _tokens(*items: tuple[str, float, float]) -> list[Token]:
    return [Token(text=text, start=start, end=end) for text, start, end in items]


def _alignments(result):
    return [(w.text, w.alignment) for line in result.lines for w in line.words]


def test_align_transcript_exact_match_times_each_line() -> None:
    tokens = _tokens(("the", 0.0, 0.5), ("cat", 0.5, 1.0), ("sat", 2.0, 2.5))
    result = align_transcript("the cat\nsat", tokens)

    assert [a.exact for _, a in _alignments(result)] == [True, True, True]
    line1, line2 = result.lines
    assert (line1.line_number, line1.text) == (1, "the cat")
    assert line1.start == pytest.approx(0.0)
    assert line1.end == pytest.approx(1.0)
    assert line2.start == pytest.approx(2.0)
    assert line2.end == pytest.approx(2.5)
    assert result.diagnostics.matched_word_count == 3
    assert result.diagnostics.unaligned_line_numbers == []


def test_align_transcript_full_match_is_strictly_increasing(whitespace_segmenter) -> None:
    words = ["one", "two", "three", "four", "five", "six"]
    tokens = [Token(w, i * 0.6, i * 0.6 + 0.5) for i, w in enumerate(words)]
    result = align_transcript(
        "one two three\nfour five six", tokens, aligner=WordAligner(segmenter=whitespace_segmenter)
    )

    timed = [a for _, a in _alignments(result)]
    assert all(a.exact for a in timed)
    starts = [a.start for a in timed]
    ends = [a.end for a in timed]
    assert starts == sorted(starts) and len(set(starts)) == len(starts)
    assert ends == sorted(ends) and len(set(ends)) == len(ends)
    assert [a.anchor_token_index for a in timed] == list(range(6))


def test_align_transcript_matching_is_case_insensitive(whitespace_segmenter) -> None:
    tokens = _tokens(("the", 0.0, 0.5), ("cat", 0.5, 1.0))
    result = align_transcript("The CAT", tokens, aligner=WordAligner(segmenter=whitespace_segmenter))
    assert all(a.exact for _, a in _alignments(result))


def test_align_transcript_interpolates_missing_word_between_anchors(whitespace_segmenter) -> None:
    tokens = _tokens(("a", 0.0, 1.0), ("b", 1.0, 2.0), ("d", 5.0, 6.0))
    result = align_transcript("a b c d", tokens, aligner=WordAligner(segmenter=whitespace_segmenter))

    by_word = dict(_alignments(result))
    c = by_word["c"]
    assert c.exact is False
    assert (c.start, c.end) == pytest.approx((2.0, 5.0))
    assert c.anchor_token_index == 1
    assert result.diagnostics.interpolated_word_count == 1


def test_align_transcript_spreads_several_missing_words_evenly(whitespace_segmenter) -> None:
    tokens = _tokens(("a", 0.0, 1.0), ("d", 4.0, 5.0))
    result = align_transcript("a b c d", tokens, aligner=WordAligner(segmenter=whitespace_segmenter))

    by_word = dict(_alignments(result))
    assert (by_word["b"].start, by_word["b"].end) == pytest.approx((1.0, 2.5))
    assert (by_word["c"].start, by_word["c"].end) == pytest.approx((2.5, 4.0))


def test_align_transcript_substituted_word_uses_asr_time(whitespace_segmenter) -> None:
    tokens = _tokens(("a", 0.0, 1.0), ("dog", 1.0, 2.0), ("c", 2.0, 3.0))
    result = align_transcript("a cat c", tokens, aligner=WordAligner(segmenter=whitespace_segmenter))

    cat = dict(_alignments(result))["cat"]
    assert cat.exact is False
    assert (cat.start, cat.end) == pytest.approx((1.0, 2.0))
    assert cat.anchor_token_index == 1


def test_align_transcript_trailing_substitution_is_interpolated(whitespace_segmenter) -> None:
    tokens = _tokens(("the", 0.0, 0.5), ("cat", 0.5, 1.0), ("mat", 1.0, 1.5))
    result = align_transcript("the cat sat", tokens, aligner=WordAligner(segmenter=whitespace_segmenter))

    sat = dict(_alignments(result))["sat"]
    assert sat.exact is False
    assert (sat.start, sat.end) == pytest.approx((1.0, 1.5))


def test_align_transcript_leading_span_without_anchor_is_reported(whitespace_segmenter) -> None:
    tokens = _tokens(("the", 3.0, 3.5), ("cat", 3.5, 4.0))
    result = align_transcript("hello\nthe cat", tokens, aligner=WordAligner(segmenter=whitespace_segmenter))

    first, second = result.lines
    assert first.is_aligned is False
    assert first.words[0].alignment is None
    assert (first.start, first.end) == (None, None)
    assert second.start == pytest.approx(3.0)

    diagnostics = result.diagnostics
    assert diagnostics.unaligned_line_numbers == [1]
    assert diagnostics.unaligned_word_count == 1
    assert [s.line_numbers for s in diagnostics.unalignable_spans] == [[1]]
    assert diagnostics.unalignable_spans[0].words == ["hello"]


def test_align_transcript_trailing_span_without_anchor_is_left_untimed(whitespace_segmenter) -> None:
    tokens = _tokens(("the", 0.0, 0.5), ("cat", 0.5, 1.0))
    result = align_transcript("the cat\nbye now", tokens, aligner=WordAligner(segmenter=whitespace_segmenter))
    assert [w.alignment for w in result.lines[1].words] == [None, None]
    assert result.diagnostics.unaligned_line_numbers == [2]


def test_align_transcript_with_no_common_words_leaves_transcript_on_asr_span(whitespace_segmenter) -> None:
    tokens = _tokens(("x", 0.0, 1.0), ("y", 1.0, 2.0))
    result = align_transcript("p q", tokens, aligner=WordAligner(segmenter=whitespace_segmenter))
    assert [g.aligned for g in result.groups] == [False]
    timed = [a for _, a in _alignments(result)]
    assert [t for a in timed for t in (a.start, a.end)] == pytest.approx([0.0, 1.0, 1.0, 2.0])
    assert not any(a.exact for a in timed)


def test_align_transcript_rejects_blank_transcript() -> None:
    with pytest.raises(InvalidInputError):
        align_transcript("  \n\n ", [Token("a", 0.0, 1.0)])


def test_align_transcript_rejects_empty_token_stream() -> None:
    with pytest.raises(InvalidInputError):
        align_transcript("hello", [])


def test_split_transcript_lines_trims_and_drops_blank_lines() -> None:
    assert split_transcript_lines(" first \r\n\r\nsecond\rthird\n  ") == ["first", "second", "third"]


def test_build_transcript_words_keeps_char_offsets(whitespace_segmenter) -> None:
    transcript = build_transcript_words("a  bb\nccc", segmenter=whitespace_segmenter)
    assert transcript.texts == ["a  bb", "ccc"]
    assert [(w.text, w.line_index, w.char_offset) for w in transcript.flat_words] == [
        ("a", 0, 0),
        ("bb", 0, 3),
        ("ccc", 1, 0),
    ]


def test_build_asr_words_subdivides_multi_word_tokens(whitespace_segmenter) -> None:
    words = build_asr_words([Token("the cat", 0.0, 1.0), Token("sat", 1.0, 1.5)], segmenter=whitespace_segmenter)
    assert [(w.text, w.start, w.end, w.index) for w in words] == [
        ("the", 0.0, 0.5, 0),
        ("cat", 0.5, 1.0, 1),
        ("sat", 1.0, 1.5, 2),
    ]


def test_align_transcript_anchors_accented_words_with_default_segmenter() -> None:
    tokens = _tokens(("cafe", 0.0, 1.0), ("naive", 1.0, 2.0))
    result = align_transcript("Café\nnaïve", tokens)

    assert [w.text for line in result.lines for w in line.words] == ["Café", "naïve"]
    assert [a.exact for _, a in _alignments(result)] == [True, True]
    assert (result.lines[0].start, result.lines[0].end) == pytest.approx((0.0, 1.0))
    assert result.diagnostics.matched_word_count == 2
