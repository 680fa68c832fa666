"""WebVTT subtitle formatter."""

from __future__ import annotations

from subalign.export.formatters.base import SubtitleFormatter, printable_cues
from subalign.models.subtitle_types import SubtitleCue, SubtitleExportConfig


class VTTFormatter(SubtitleFormatter):
    def format(self, cues: list[SubtitleCue], config: SubtitleExportConfig) -> str:
        # The header must stay on the signature line.
        header = (config.header or "").strip().replace("\n", " ")
        blocks = [f"WEBVTT - {header}" if header else "WEBVTT"]
        blocks.extend(f"{self.cue_timing(cue, '.')}\n{text}" for cue, text in printable_cues(cues))
        return "\n\n".join(blocks) + "\n"
