"""Transcript alignment models."""

from __future__ import annotations

from dataclasses import dataclass, field

from subalign.error_codes import ErrorCode


@dataclass(frozen=True)
class WordAlignment:
    start: float
    end: float
    exact: bool
    anchor_token_index: int


@dataclass(frozen=True)
class TranscriptWord:
    """A word-like unit of the corrected transcript.

    `line_index` is 0-based into the non-empty transcript lines; `char_offset`
    is the position of the word inside its line.
    """

    text: str
    line_index: int
    char_offset: int
    alignment: WordAlignment | None = None


@dataclass(frozen=True)
class AsrWord:
    """A re-segmented ASR sub-word with its global position in the ASR word list."""

    text: str
    start: float
    end: float
    index: int


@dataclass(frozen=True)
class AlignmentGroup:
    aligned: bool
    transcript_words: list[TranscriptWord]
    asr_words: list[AsrWord]


@dataclass(frozen=True)
class AlignedLine:
    line_number: int  # 1-based
    text: str
    words: list[TranscriptWord]
    start: float | None = None
    end: float | None = None

    @property
    def is_aligned(self) -> bool:
        return self.start is not None and self.end is not None


@dataclass(frozen=True)
class UnalignableSpan:
    """Transcript words with no ASR anchor on one side; they carry no timing."""

    line_numbers: list[int]
    words: list[str]
    error_code: ErrorCode = ErrorCode.UNALIGNABLE_SPAN


@dataclass(frozen=True)
class AlignmentDiagnostics:
    transcript_word_count: int
    asr_word_count: int
    matched_word_count: int
    interpolated_word_count: int
    unaligned_word_count: int
    unalignable_spans: list[UnalignableSpan] = field(default_factory=list)
    unaligned_line_numbers: list[int] = field(default_factory=list)


@dataclass(frozen=True)
class AlignmentResult:
    lines: list[AlignedLine]
    groups: list[AlignmentGroup]
    asr_words: list[AsrWord]
    diagnostics: AlignmentDiagnostics
