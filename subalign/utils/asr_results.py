"""Normalize ASR backend results into token streams.

Supported payloads:
- normalized word timestamps: `[{"word", "start", "end"}]` or `{"words": [...]}`
- Speechmatics: `{"results": [{"alternatives": [{"content"}], "start_time", "end_time"}]}`
- Gladia: `{"transcription": {"utterances": [{"words": [{"word", "start", "end"}]}]}}`
- iApp: `{"output": [{"text", "start", "end"}]}`
"""

from __future__ import annotations

from typing import Any

from subalign.exceptions import InvalidInputError
from subalign.models.serializers import deserialize_tokens
from subalign.models.token import Token
from subalign.utils.word_segmentation import SegmentWordsFn, segment_words, word_like_segments


def tokens_from_speechmatics(payload: dict[str, Any]) -> list[Token]:
    out: list[Token] = []
    for result in payload.get("results") or []:
        alternatives = result.get("alternatives") or []
        if not alternatives:
            continue
        out.append(
            Token(
                text=str(alternatives[0].get("content") or ""),
                start=float(result["start_time"]),
                end=float(result["end_time"]),
            )
        )
    return out


def tokens_from_gladia(
    payload: dict[str, Any],
    *,
    segmenter: SegmentWordsFn = segment_words,
) -> list[Token]:
    """Gladia words may bundle several words; split and subdivide their interval."""
    out: list[Token] = []
    utterances = (payload.get("transcription") or {}).get("utterances") or []
    for utterance in utterances:
        for word in utterance.get("words") or []:
            start = float(word["start"])
            span = float(word["end"]) - start
            pieces = word_like_segments(str(word.get("word") or ""), segmenter)
            for i, piece in enumerate(pieces):
                out.append(
                    Token(
                        text=piece.text.strip(),
                        start=start + (i / len(pieces)) * span,
                        end=start + ((i + 1) / len(pieces)) * span,
                    )
                )
    return out


def tokens_from_iapp(payload: dict[str, Any]) -> list[Token]:
    return [
        Token(text=str(seg.get("text") or ""), start=float(seg["start"]), end=float(seg["end"]))
        for seg in payload.get("output") or []
    ]


def detect_and_load_tokens(payload: Any) -> list[Token]:
    """Dispatch on payload shape; raise InvalidInputError for unknown or malformed shapes."""
    try:
        return _load_tokens(payload)
    except (AttributeError, KeyError, TypeError, ValueError) as exc:
        raise InvalidInputError(f"malformed ASR payload: {exc!r}") from exc


def _load_tokens(payload: Any) -> list[Token]:
    if isinstance(payload, list):
        return deserialize_tokens(payload)
    if not isinstance(payload, dict):
        raise InvalidInputError(f"unsupported ASR payload type: {type(payload).__name__}")
    if isinstance(payload.get("words"), list):
        return deserialize_tokens(payload["words"])
    if isinstance(payload.get("results"), list):
        return tokens_from_speechmatics(payload)
    if isinstance(payload.get("transcription"), dict):
        return tokens_from_gladia(payload)
    if isinstance(payload.get("output"), list):
        return tokens_from_iapp(payload)
    raise InvalidInputError(
        f"unrecognized ASR payload (keys: {sorted(str(k) for k in payload.keys())})"
    )
