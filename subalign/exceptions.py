"""SubAlign exception hierarchy."""

from __future__ import annotations

from subalign.error_codes import ErrorCode


class SubAlignError(Exception):
    """Base error for SubAlign."""

    error_code: ErrorCode = ErrorCode.UNKNOWN


class ConfigurationError(SubAlignError):
    """Raised when configuration values are invalid."""

    error_code = ErrorCode.INVALID_CONFIG


class InvalidInputError(SubAlignError):
    """Raised when a token stream or transcript violates structural rules."""

    error_code = ErrorCode.INVALID_INPUT


class NoValidSplitError(SubAlignError):
    """Raised when an over-long slice has no split point honoring the minimum length."""

    error_code = ErrorCode.NO_VALID_SPLIT

    def __init__(
        self,
        *,
        start: float,
        end: float,
        token_count: int,
        max_segment_s: float,
        min_segment_s: float,
    ) -> None:
        super().__init__(
            f"no valid split for {end - start:.1f}s slice [{start:.3f}, {end:.3f}] "
            f"({token_count} tokens; max_segment_s={max_segment_s}, "
            f"min_segment_s={min_segment_s})"
        )
        self.start = start
        self.end = end
        self.token_count = token_count
        self.max_segment_s = max_segment_s
        self.min_segment_s = min_segment_s
