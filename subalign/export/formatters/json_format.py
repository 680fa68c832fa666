"""JSON subtitle formatter."""

from __future__ import annotations

import json

from subalign.export.formatters.base import SubtitleFormatter, printable_cues
from subalign.models.subtitle_types import SubtitleCue, SubtitleExportConfig

JSON_FORMAT_VERSION = "1.0"


class JSONFormatter(SubtitleFormatter):
    """Machine-readable cues that keep a link back to the transcript line."""

    def format(self, cues: list[SubtitleCue], config: SubtitleExportConfig) -> str:
        data = {
            "version": JSON_FORMAT_VERSION,
            "header": config.header,
            "cues": [
                {
                    "index": cue.index,
                    "start": cue.start,
                    "end": cue.end,
                    "line_number": cue.line_number,
                    "text": text,
                }
                for cue, text in printable_cues(cues)
            ],
        }
        return json.dumps(data, ensure_ascii=False, indent=2) + "\n"
