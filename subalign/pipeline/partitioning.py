"""Partition an ASR token stream into named parts."""

from __future__ import annotations

import logging
from collections.abc import Sequence

from subalign.models.partition import PartitionResult, SegmenterConfig
from subalign.models.token import Token, validate_token_stream
from subalign.utils.token_partition import describe_tree, partitions_from_tree, split_tokens

logger = logging.getLogger(__name__)


def partition_tokens(tokens: Sequence[Token], config: SegmenterConfig) -> PartitionResult:
    validate_token_stream(tokens)
    tree = split_tokens(tokens, config)
    report = describe_tree(tree)
    for line in report:
        logger.info("%s", line)
    partitions = partitions_from_tree(tree)
    logger.info(
        "partitioned %d tokens into %d part(s) (max_segment_s=%s, min_segment_s=%s)",
        len(tokens),
        len(partitions),
        config.max_segment_s,
        config.min_segment_s,
    )
    return PartitionResult(partitions=partitions, tree=tree, tree_report=report)
