"""Subtitle formatter base."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Iterator

from subalign.models.subtitle_types import SubtitleCue, SubtitleExportConfig


def printable_cues(cues: list[SubtitleCue]) -> Iterator[tuple[SubtitleCue, str]]:
    """Yield cues with their stripped text, skipping blank ones."""
    for cue in cues:
        text = (cue.text or "").strip()
        if text:
            yield cue, text


class SubtitleFormatter(ABC):
    @abstractmethod
    def format(self, cues: list[SubtitleCue], config: SubtitleExportConfig) -> str:
        raise NotImplementedError

    @staticmethod
    def seconds_to_timestamp(seconds: float, separator: str) -> str:
        """`HH:MM:SS<sep>mmm`, rounded to the millisecond; negatives clamp to zero."""
        total_ms = max(0, int(round(seconds * 1000)))
        total_s, ms = divmod(total_ms, 1000)
        total_m, s = divmod(total_s, 60)
        h, m = divmod(total_m, 60)
        return f"{h:02d}:{m:02d}:{s:02d}{separator}{ms:03d}"

    def cue_timing(self, cue: SubtitleCue, separator: str) -> str:
        return f"{self.seconds_to_timestamp(cue.start, separator)} --> {self.seconds_to_timestamp(cue.end, separator)}"
