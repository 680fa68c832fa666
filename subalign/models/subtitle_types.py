"""Subtitle export models."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


@dataclass(frozen=True)
class SubtitleCue:
    """Single emitted subtitle cue, one per timed transcript line."""

    index: int
    start: float  # seconds
    end: float  # seconds
    text: str
    line_number: int


class SubtitleFormat(Enum):
    SRT = "srt"
    VTT = "vtt"
    JSON = "json"


@dataclass(frozen=True)
class SubtitleExportConfig:
    """Subtitle export configuration."""

    format: SubtitleFormat = SubtitleFormat.VTT
    header: str = ""  # WebVTT provenance comment
    min_gap_s: float = 1.0 / 12.0
