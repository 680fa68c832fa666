"""Align a corrected transcript against ASR word timestamps."""

from __future__ import annotations

import logging
from collections.abc import Sequence

from subalign.models.alignment import AlignmentDiagnostics, AlignmentResult
from subalign.models.token import Token
from subalign.utils.interpolation import interpolate_groups
from subalign.utils.line_assembler import assemble_lines
from subalign.utils.word_aligner import WordAligner

logger = logging.getLogger(__name__)


def align_transcript(
    transcript_text: str,
    asr_tokens: Sequence[Token],
    *,
    aligner: WordAligner | None = None,
) -> AlignmentResult:
    """Time every transcript line from ASR tokens.

    Raises InvalidInputError for an empty/unordered token stream or a
    transcript without any non-empty line. Lines that cannot be timed are
    reported through `diagnostics` rather than raised.
    """
    aligner = aligner or WordAligner()
    transcript, asr_words = aligner.prepare(transcript_text, asr_tokens)
    logger.info("words in transcript: %d", sum(len(w) for w in transcript.words))
    logger.info("words in ASR: %d", len(asr_words))

    groups = aligner.group(transcript, asr_words)
    interpolated = interpolate_groups(groups)
    lines = assemble_lines(transcript.texts, transcript.words, interpolated.alignments)

    matched = sum(len(g.transcript_words) for g in groups if g.aligned)
    total = sum(len(w) for w in transcript.words)
    timed = len(interpolated.alignments)
    diagnostics = AlignmentDiagnostics(
        transcript_word_count=total,
        asr_word_count=len(asr_words),
        matched_word_count=matched,
        interpolated_word_count=timed - matched,
        unaligned_word_count=total - timed,
        unalignable_spans=interpolated.unalignable_spans,
        unaligned_line_numbers=[line.line_number for line in lines if not line.is_aligned],
    )
    logger.info(
        "aligned: %d exact, %d interpolated, %d untimed word(s); %d untimed line(s)",
        diagnostics.matched_word_count,
        diagnostics.interpolated_word_count,
        diagnostics.unaligned_word_count,
        len(diagnostics.unaligned_line_numbers),
    )
    return AlignmentResult(lines=lines, groups=groups, asr_words=asr_words, diagnostics=diagnostics)
