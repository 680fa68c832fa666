"""Top-level segmentation and alignment operations."""

from subalign.pipeline.alignment import align_transcript
from subalign.pipeline.partitioning import partition_tokens

__all__ = ["align_transcript", "partition_tokens"]
