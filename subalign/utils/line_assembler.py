"""Assemble aligned words back into timed transcript lines and subtitle cues."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import replace

from subalign.models.alignment import AlignedLine, TranscriptWord, WordAlignment
from subalign.models.subtitle_types import SubtitleCue
from subalign.utils.interpolation import WordKey, word_key

DEFAULT_MIN_GAP_S = 1.0 / 12.0


def assemble_lines(
    line_texts: Sequence[str],
    line_words: Sequence[Sequence[TranscriptWord]],
    alignments: Mapping[WordKey, WordAlignment],
) -> list[AlignedLine]:
    """Attach alignments to words and derive each line's [min start, max end].

    Lines without any aligned word keep `start`/`end` as None.
    """
    out: list[AlignedLine] = []
    for line_index, text in enumerate(line_texts):
        words = [
            replace(word, alignment=alignments.get(word_key(word)))
            for word in line_words[line_index]
        ]
        timed = [w.alignment for w in words if w.alignment is not None]
        start = min(a.start for a in timed) if timed else None
        end = max(a.end for a in timed) if timed else None
        out.append(
            AlignedLine(
                line_number=line_index + 1,
                text=text,
                words=words,
                start=start,
                end=end,
            )
        )
    return out


def build_cues(
    lines: Sequence[AlignedLine],
    *,
    min_gap_s: float = DEFAULT_MIN_GAP_S,
) -> list[SubtitleCue]:
    """Emit strictly ordered, non-overlapping cues for timed lines.

    A line ending later than `next_start - min_gap_s` is trimmed to that point.
    A line starting before the previous cue's end starts at that end instead.
    Lines left with a non-positive duration, or with empty text, are dropped.
    """
    timed: list[tuple[AlignedLine, float, float]] = [
        (line, float(line.start), float(line.end))
        for line in lines
        if line.start is not None and line.end is not None and (line.text or "").strip()
    ]
    cues: list[SubtitleCue] = []
    prev_end: float | None = None
    for i, (line, start, end) in enumerate(timed):
        if i + 1 < len(timed):
            next_start = timed[i + 1][1]
            if end > next_start - min_gap_s:
                end = next_start - min_gap_s
        if prev_end is not None and start < prev_end:
            start = prev_end
        if end <= start:
            continue
        cues.append(
            SubtitleCue(
                index=len(cues) + 1,
                start=start,
                end=end,
                text=line.text.strip(),
                line_number=line.line_number,
            )
        )
        prev_end = end
    return cues
