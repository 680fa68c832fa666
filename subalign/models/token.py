"""Timestamped token stream shared by the segmenter and the aligner."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

from subalign.exceptions import InvalidInputError


@dataclass(frozen=True)
class Token:
    """A timed unit of ASR output (a word, or a phrase for some backends)."""

    text: str
    start: float
    end: float

    @property
    def duration(self) -> float:
        return float(self.end) - float(self.start)


def stream_duration(tokens: Sequence[Token]) -> float:
    """Time from the first token's start to the last token's end."""
    if not tokens:
        return 0.0
    return float(tokens[-1].end) - float(tokens[0].start)


def validate_token_stream(tokens: Sequence[Token]) -> None:
    """Fail fast on structurally invalid streams.

    Overlapping neighbours are tolerated; only `start > end` within a token and
    decreasing start times across tokens are rejected.
    """
    if not tokens:
        raise InvalidInputError("token stream is empty")
    prev_start: float | None = None
    for i, tok in enumerate(tokens):
        start = float(tok.start)
        end = float(tok.end)
        if start > end:
            raise InvalidInputError(
                f"token #{i} ({tok.text!r}) starts after it ends: {start} > {end}"
            )
        if prev_start is not None and start < prev_start:
            raise InvalidInputError(
                f"token #{i} ({tok.text!r}) is out of order: start {start} < previous {prev_start}"
            )
        prev_start = start
