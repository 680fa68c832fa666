"""Build subtitle cues from aligned lines and export to multiple formats."""

from __future__ import annotations

from subalign.export.formatters.json_format import JSONFormatter
from subalign.export.formatters.srt import SRTFormatter
from subalign.export.formatters.vtt import VTTFormatter
from subalign.models.alignment import AlignedLine
from subalign.models.subtitle_types import SubtitleCue, SubtitleExportConfig, SubtitleFormat
from subalign.utils.line_assembler import build_cues


class SubtitleExporter:
    def build_cues(self, lines: list[AlignedLine], config: SubtitleExportConfig) -> list[SubtitleCue]:
        if config.min_gap_s < 0:
            raise ValueError("min_gap_s must be >= 0")
        return build_cues(lines, min_gap_s=float(config.min_gap_s))

    def export(self, lines: list[AlignedLine], config: SubtitleExportConfig) -> str:
        cues = self.build_cues(lines, config)

        match config.format:
            case SubtitleFormat.SRT:
                return SRTFormatter().format(cues, config)
            case SubtitleFormat.VTT:
                return VTTFormatter().format(cues, config)
            case SubtitleFormat.JSON:
                return JSONFormatter().format(cues, config)
            case _:
                raise ValueError(f"Unknown subtitle format: {config.format}")
