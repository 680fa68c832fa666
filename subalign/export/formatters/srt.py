"""SRT subtitle formatter."""

from __future__ import annotations

from subalign.export.formatters.base import SubtitleFormatter, printable_cues
from subalign.models.subtitle_types import SubtitleCue, SubtitleExportConfig


class SRTFormatter(SubtitleFormatter):
    def format(self, cues: list[SubtitleCue], config: SubtitleExportConfig) -> str:
        blocks = [
            f"{number}\n{self.cue_timing(cue, ',')}\n{text}"
            for number, (cue, text) in enumerate(printable_cues(cues), start=1)
        ]
        return "\n\n".join(blocks) + "\n"
