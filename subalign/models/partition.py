"""Partition models produced by the segmenter."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

from subalign.models.token import Token


class SegmentationMode(str, Enum):
    SHORT = "short"
    NORMAL = "normal"
    LONG = "long"


@dataclass(frozen=True)
class SegmenterConfig:
    max_segment_s: float = 180.0
    min_segment_s: float = 30.0


SEGMENTATION_PRESETS: dict[SegmentationMode, SegmenterConfig] = {
    SegmentationMode.SHORT: SegmenterConfig(max_segment_s=60.0, min_segment_s=15.0),
    SegmentationMode.NORMAL: SegmenterConfig(max_segment_s=180.0, min_segment_s=30.0),
    SegmentationMode.LONG: SegmenterConfig(max_segment_s=480.0, min_segment_s=120.0),
}


@dataclass(frozen=True)
class Partition:
    """A contiguous, named time range [start, end) in seconds."""

    name: str
    start: float
    end: float

    @property
    def duration(self) -> float:
        return float(self.end) - float(self.start)


@dataclass(frozen=True)
class SplitLeaf:
    tokens: tuple[Token, ...]


@dataclass(frozen=True)
class SplitNode:
    left: "SplitTree"
    right: "SplitTree"
    gap: float


SplitTree = SplitLeaf | SplitNode


@dataclass(frozen=True)
class PartitionResult:
    partitions: list[Partition]
    tree: SplitTree
    tree_report: list[str] = field(default_factory=list)
