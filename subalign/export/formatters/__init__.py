"""Subtitle export formatters."""

from subalign.export.formatters.base import SubtitleFormatter
from subalign.export.formatters.json_format import JSONFormatter
from subalign.export.formatters.srt import SRTFormatter
from subalign.export.formatters.vtt import VTTFormatter

__all__ = ["JSONFormatter", "SRTFormatter", "SubtitleFormatter", "VTTFormatter"]
