"""Utility helpers."""

from subalign.utils.sequence_diff import CommonRun, find_common_runs
from subalign.utils.token_partition import segment
from subalign.utils.word_segmentation import WordSegment, segment_words, words_equal

__all__ = [
    "CommonRun",
    "WordSegment",
    "find_common_runs",
    "segment",
    "segment_words",
    "words_equal",
]
