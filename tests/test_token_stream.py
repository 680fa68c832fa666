from __future__ import annotations

import pytest

from subalign.error_codes import ErrorCode
from subalign.exceptions import InvalidInputError
from subalign.models.token import Token, stream_duration, validate_token_stream


def test_stream_duration_spans_first_start_to_last_end() -> None:
    tokens = [Token("a", 1.0, 1.5), Token("b", 2.0, 4.25)]
    assert stream_duration(tokens) == pytest.approx(3.25)
    assert stream_duration([]) == 0.0


def test_validate_token_stream_rejects_empty_stream() -> None:
    with pytest.raises(InvalidInputError) as exc_info:
        validate_token_stream([])
    assert exc_info.value.error_code is ErrorCode.INVALID_INPUT


def test_validate_token_stream_rejects_unordered_tokens() -> None:
    with pytest.raises(InvalidInputError, match="out of order"):
        validate_token_stream([Token("a", 2.0, 3.0), Token("b", 1.0, 1.5)])


def test_validate_token_stream_rejects_start_after_end() -> None:
    with pytest.raises(InvalidInputError, match="starts after it ends"):
        validate_token_stream([Token("a", 2.0, 1.0)])


def test_validate_token_stream_tolerates_overlapping_neighbours() -> None:
    validate_token_stream([Token("a", 0.0, 2.0), Token("b", 1.0, 1.5), Token("c", 1.0, 3.0)])
