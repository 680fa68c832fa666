"""Word error rate between two transcripts, using the alignment diff."""

from __future__ import annotations

from collections.abc import Sequence

from subalign.utils.sequence_diff import CommonRunsFn, find_common_runs
from subalign.utils.word_segmentation import SegmentWordsFn, segment_words, word_like_segments


def vtt_cue_text(vtt: str) -> str:
    """Cue text of a WebVTT document, without the header and timing lines."""
    body = vtt.split("\n")[2:]
    return "\n".join(line for line in body if line.strip() and "-->" not in line)


def text_words(text: str, *, segmenter: SegmentWordsFn = segment_words) -> list[str]:
    return [seg.text for seg in word_like_segments(text, segmenter)]


def word_error_rate(
    reference: Sequence[str],
    hypothesis: Sequence[str],
    *,
    common_runs: CommonRunsFn = find_common_runs,
) -> float:
    """Approximate WER from the common-subsequence length.

    Words missing from the common subsequence count as substitutions, and a
    length difference adds the matching number of insertions or deletions.
    """
    if not reference:
        return 1.0
    runs = common_runs(len(reference), len(hypothesis), lambda i, j: reference[i] == hypothesis[j])
    common = sum(run.length for run in runs)
    substitutions = max(len(reference), len(hypothesis)) - common
    insertions = max(0, len(hypothesis) - len(reference))
    deletions = max(0, len(reference) - len(hypothesis))
    return (substitutions + insertions + deletions) / len(reference)
