"""Timing interpolation for grouped transcript words.

Groups backed by ASR words map each transcript word onto the group's ASR
timeline. Groups without ASR words are spread evenly across the silence
between their neighbours' anchors, or left untimed when a neighbour is missing.
"""

from __future__ import annotations

import logging
import math
from collections.abc import Sequence
from dataclasses import dataclass, field

from subalign.models.alignment import AlignmentGroup, AsrWord, TranscriptWord, UnalignableSpan, WordAlignment

logger = logging.getLogger(__name__)

WordKey = tuple[int, int]


def word_key(word: TranscriptWord) -> WordKey:
    return (int(word.line_index), int(word.char_offset))


@dataclass
class InterpolationResult:
    alignments: dict[WordKey, WordAlignment] = field(default_factory=dict)
    unalignable_spans: list[UnalignableSpan] = field(default_factory=list)


def resolve_time(asr_words: Sequence[AsrWord], t: float) -> tuple[float, int]:
    """Map fractional position `t` in [0, len(asr_words)] to (time, anchor index)."""
    index = min(int(math.floor(t)), len(asr_words) - 1)
    word = asr_words[index]
    fraction = t - index
    return float(word.start) + fraction * (float(word.end) - float(word.start)), int(word.index)


def interpolate_along_asr(group: AlignmentGroup) -> dict[WordKey, WordAlignment]:
    """Spread transcript words over the group's ASR words.

    The end of each word is extrapolated from a probe a quarter of the way
    into it, which front-loads durations against trailing ASR boundaries.
    """
    n_asr = len(group.asr_words)
    n_transcript = len(group.transcript_words)
    out: dict[WordKey, WordAlignment] = {}
    for i, word in enumerate(group.transcript_words):
        start, index = resolve_time(group.asr_words, i * n_asr / n_transcript)
        quarter, _ = resolve_time(group.asr_words, (i + 0.25) * n_asr / n_transcript)
        out[word_key(word)] = WordAlignment(
            start=start,
            end=start + (quarter - start) * 4,
            exact=group.aligned,
            anchor_token_index=index,
        )
    return out


def interpolate_between_anchors(
    group: AlignmentGroup,
    previous: AlignmentGroup | None,
    following: AlignmentGroup | None,
) -> dict[WordKey, WordAlignment] | None:
    """Distribute an anchor-less group between its neighbours, or None if one is missing."""
    last_word = previous.asr_words[-1] if previous is not None and previous.asr_words else None
    next_word = following.asr_words[0] if following is not None and following.asr_words else None
    if last_word is None or next_word is None:
        return None

    group_start = float(last_word.end)
    group_duration = float(next_word.start) - group_start
    count = len(group.transcript_words)
    out: dict[WordKey, WordAlignment] = {}
    for i, word in enumerate(group.transcript_words):
        out[word_key(word)] = WordAlignment(
            start=group_start + (i / count) * group_duration,
            end=group_start + ((i + 1) / count) * group_duration,
            exact=group.aligned,
            anchor_token_index=int(last_word.index),
        )
    return out


def interpolate_groups(groups: Sequence[AlignmentGroup]) -> InterpolationResult:
    result = InterpolationResult()
    for group_index, group in enumerate(groups):
        if not group.transcript_words:
            continue
        if group.asr_words:
            result.alignments.update(interpolate_along_asr(group))
            continue

        previous = groups[group_index - 1] if group_index > 0 else None
        following = groups[group_index + 1] if group_index + 1 < len(groups) else None
        bracketed = interpolate_between_anchors(group, previous, following)
        if bracketed is not None:
            result.alignments.update(bracketed)
            continue

        span = UnalignableSpan(
            line_numbers=sorted({int(w.line_index) + 1 for w in group.transcript_words}),
            words=[w.text for w in group.transcript_words],
        )
        logger.warning(
            "no ASR anchor around %d transcript word(s) on line(s) %s; leaving them untimed",
            len(span.words),
            span.line_numbers,
        )
        result.unalignable_spans.append(span)
    return result
