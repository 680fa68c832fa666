"""Core data models for SubAlign."""

from subalign.models.alignment import (
    AlignedLine,
    AlignmentDiagnostics,
    AlignmentGroup,
    AlignmentResult,
    AsrWord,
    TranscriptWord,
    UnalignableSpan,
    WordAlignment,
)
from subalign.models.partition import (
    SEGMENTATION_PRESETS,
    Partition,
    PartitionResult,
    SegmentationMode,
    SegmenterConfig,
    SplitLeaf,
    SplitNode,
    SplitTree,
)
from subalign.models.subtitle_types import SubtitleCue, SubtitleExportConfig, SubtitleFormat
from subalign.models.token import Token, stream_duration, validate_token_stream

__all__ = [
    "AlignedLine",
    "AlignmentDiagnostics",
    "AlignmentGroup",
    "AlignmentResult",
    "AsrWord",
    "Partition",
    "PartitionResult",
    "SEGMENTATION_PRESETS",
    "SegmentationMode",
    "SegmenterConfig",
    "SplitLeaf",
    "SplitNode",
    "SplitTree",
    "SubtitleCue",
    "SubtitleExportConfig",
    "SubtitleFormat",
    "Token",
    "TranscriptWord",
    "UnalignableSpan",
    "WordAlignment",
    "stream_duration",
    "validate_token_stream",
]
