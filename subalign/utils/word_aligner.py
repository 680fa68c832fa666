"""Word-level alignment between a corrected transcript and ASR output.

Both sides are reduced to word-like units, then diffed with a
longest-common-subsequence primitive. The result is an ordered list of groups
alternating between unmatched and matched runs that covers both sequences.
"""

from __future__ import annotations

import re
from collections.abc import Sequence
from dataclasses import dataclass

from subalign.exceptions import InvalidInputError
from subalign.models.alignment import AlignmentGroup, AsrWord, TranscriptWord
from subalign.models.token import Token, validate_token_stream
from subalign.utils.sequence_diff import CommonRunsFn, find_common_runs
from subalign.utils.word_segmentation import SegmentWordsFn, segment_words, word_like_segments, words_equal

_LINE_BREAK_RE = re.compile(r"\r\n|\r|\n")


@dataclass(frozen=True)
class TranscriptLines:
    texts: list[str]
    words: list[list[TranscriptWord]]

    @property
    def flat_words(self) -> list[TranscriptWord]:
        return [w for line in self.words for w in line]


def split_transcript_lines(text: str) -> list[str]:
    return [line.strip() for line in _LINE_BREAK_RE.split(text or "") if line.strip()]


def build_transcript_words(
    text: str,
    *,
    segmenter: SegmentWordsFn = segment_words,
) -> TranscriptLines:
    lines = split_transcript_lines(text)
    if not lines:
        raise InvalidInputError("transcript has no non-empty lines")
    words: list[list[TranscriptWord]] = []
    for line_index, line in enumerate(lines):
        words.append(
            [
                TranscriptWord(text=seg.text, line_index=line_index, char_offset=seg.offset)
                for seg in word_like_segments(line, segmenter)
            ]
        )
    return TranscriptLines(texts=lines, words=words)


def build_asr_words(
    tokens: Sequence[Token],
    *,
    segmenter: SegmentWordsFn = segment_words,
) -> list[AsrWord]:
    """Re-segment ASR tokens into words, subdividing each token's interval evenly."""
    out: list[AsrWord] = []
    for token in tokens:
        pieces = word_like_segments(token.text, segmenter)
        count = len(pieces)
        start = float(token.start)
        span = float(token.end) - start
        for k, piece in enumerate(pieces):
            out.append(
                AsrWord(
                    text=piece.text,
                    start=start + (k / count) * span,
                    end=start + ((k + 1) / count) * span,
                    index=len(out),
                )
            )
    return out


def group_words(
    transcript_words: Sequence[TranscriptWord],
    asr_words: Sequence[AsrWord],
    *,
    common_runs: CommonRunsFn = find_common_runs,
) -> list[AlignmentGroup]:
    """Diff the two word lists into alternating unmatched/matched groups.

    Unmatched groups that hold no word on either side are omitted; a trailing
    unmatched group covers whatever follows the last common run.
    """
    runs = common_runs(
        len(transcript_words),
        len(asr_words),
        lambda i, j: words_equal(transcript_words[i].text, asr_words[j].text),
    )

    groups: list[AlignmentGroup] = []

    def _push(aligned: bool, t_lo: int, t_hi: int, a_lo: int, a_hi: int) -> None:
        if t_lo == t_hi and a_lo == a_hi:
            return
        groups.append(
            AlignmentGroup(
                aligned=aligned,
                transcript_words=list(transcript_words[t_lo:t_hi]),
                asr_words=list(asr_words[a_lo:a_hi]),
            )
        )

    last_t = 0
    last_a = 0
    for run in runs:
        _push(False, last_t, run.a_index, last_a, run.b_index)
        _push(True, run.a_index, run.a_index + run.length, run.b_index, run.b_index + run.length)
        last_t = run.a_index + run.length
        last_a = run.b_index + run.length
    _push(False, last_t, len(transcript_words), last_a, len(asr_words))
    return groups


class WordAligner:
    """Prepare both word sequences and group them by diff.

    The word segmenter and the common-subsequence primitive are injectable.
    """

    def __init__(
        self,
        *,
        segmenter: SegmentWordsFn = segment_words,
        common_runs: CommonRunsFn = find_common_runs,
    ) -> None:
        self.segmenter = segmenter
        self.common_runs = common_runs

    def prepare(
        self, transcript_text: str, asr_tokens: Sequence[Token]
    ) -> tuple[TranscriptLines, list[AsrWord]]:
        validate_token_stream(asr_tokens)
        transcript = build_transcript_words(transcript_text, segmenter=self.segmenter)
        asr_words = build_asr_words(asr_tokens, segmenter=self.segmenter)
        return transcript, asr_words

    def group(
        self, transcript: TranscriptLines, asr_words: Sequence[AsrWord]
    ) -> list[AlignmentGroup]:
        return group_words(transcript.flat_words, asr_words, common_runs=self.common_runs)
