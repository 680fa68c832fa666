"""Recursive gap-aware partitioning of a token stream.

Long recordings are cut into bounded-duration parts for per-part processing.
Each over-long slice is split in two at the point that maximises
`evenness * gap`, so cuts land in long pauses while keeping parts balanced.
"""

from __future__ import annotations

from collections.abc import Iterator, Sequence

from subalign.exceptions import NoValidSplitError
from subalign.models.partition import Partition, SegmenterConfig, SplitLeaf, SplitNode, SplitTree
from subalign.models.token import Token, stream_duration, validate_token_stream

# Share of the following silence kept as trailing padding; the rest leads into the next part.
TRAILING_GAP_RATIO = 0.75


def part_name(index: int) -> str:
    """1-based part name, zero-padded to at least two digits."""
    return f"part_{index:02d}"


def split_tokens(tokens: Sequence[Token], config: SegmenterConfig) -> SplitTree:
    """Build the binary split tree for `tokens` (assumed non-empty and sorted)."""
    slice_tokens = tuple(tokens)
    this_duration = stream_duration(slice_tokens)
    if this_duration < config.max_segment_s:
        return SplitLeaf(tokens=slice_tokens)

    best: tuple[float, int, float] | None = None  # (score, index, gap)
    for i in range(1, len(slice_tokens)):
        left_duration = float(slice_tokens[i - 1].end) - float(slice_tokens[0].start)
        right_duration = float(slice_tokens[-1].end) - float(slice_tokens[i].start)
        if left_duration < config.min_segment_s or right_duration < config.min_segment_s:
            continue
        longer = max(left_duration, right_duration)
        evenness = min(left_duration, right_duration) / longer if longer > 0 else 0.0
        gap = this_duration - left_duration - right_duration
        score = evenness * gap
        if best is None or score > best[0]:
            best = (score, i, gap)

    if best is None:
        raise NoValidSplitError(
            start=float(slice_tokens[0].start),
            end=float(slice_tokens[-1].end),
            token_count=len(slice_tokens),
            max_segment_s=config.max_segment_s,
            min_segment_s=config.min_segment_s,
        )

    _, index, gap = best
    return SplitNode(
        left=split_tokens(slice_tokens[:index], config),
        right=split_tokens(slice_tokens[index:], config),
        gap=gap,
    )


def iter_leaves(tree: SplitTree, gap: float = 0.0, path: str = "") -> Iterator[tuple[SplitLeaf, float, str]]:
    """Yield (leaf, trailing gap, branch path) left to right."""
    if isinstance(tree, SplitLeaf):
        yield tree, gap, path
        return
    yield from iter_leaves(tree.left, tree.gap, path + "0")
    yield from iter_leaves(tree.right, gap, path + "1")


def describe_tree(tree: SplitTree) -> list[str]:
    return [
        f"{path} | {stream_duration(leaf.tokens):.1f}s {len(leaf.tokens)} words + {gap:.1f}s gap"
        for leaf, gap, path in iter_leaves(tree)
    ]


def partitions_from_tree(tree: SplitTree) -> list[Partition]:
    """Flatten leaves into gapless partitions starting at 0."""
    parts: list[Partition] = []
    prev_end = 0.0
    for leaf, gap, _ in iter_leaves(tree):
        end = float(leaf.tokens[-1].end) + gap * TRAILING_GAP_RATIO
        parts.append(Partition(name=part_name(len(parts) + 1), start=prev_end, end=end))
        prev_end = end
    return parts


def segment(tokens: Sequence[Token], config: SegmenterConfig) -> list[Partition]:
    """Partition `tokens` into contiguous parts bounded by `config`."""
    validate_token_stream(tokens)
    return partitions_from_tree(split_tokens(tokens, config))
