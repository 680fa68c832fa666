"""Subtitle export."""

from subalign.export.subtitle_exporter import SubtitleExporter

__all__ = ["SubtitleExporter"]
