"""Serialization helpers for artifacts stored in JSON."""

from __future__ import annotations

from typing import Any

from subalign.models.alignment import AlignedLine, TranscriptWord
from subalign.models.partition import Partition
from subalign.models.token import Token


def serialize_tokens(tokens: list[Token]) -> list[dict[str, Any]]:
    return [{"word": t.text, "start": float(t.start), "end": float(t.end)} for t in tokens]


def deserialize_tokens(items: list[dict[str, Any]]) -> list[Token]:
    out: list[Token] = []
    for item in items:
        text = item.get("word", item.get("text", ""))
        out.append(Token(text=str(text or ""), start=float(item["start"]), end=float(item["end"])))
    return out


def serialize_partitions(parts: list[Partition]) -> dict[str, Any]:
    return {
        "partitions": [
            {"name": p.name, "start": float(p.start), "end": float(p.end)} for p in parts
        ]
    }


def deserialize_partitions(data: dict[str, Any] | list[dict[str, Any]]) -> list[Partition]:
    items = data.get("partitions", []) if isinstance(data, dict) else data
    return [
        Partition(name=str(item["name"]), start=float(item["start"]), end=float(item["end"]))
        for item in items
    ]


def _serialize_word(word: TranscriptWord) -> dict[str, Any]:
    out: dict[str, Any] = {"word": word.text, "offset": int(word.char_offset)}
    if word.alignment is not None:
        out["alignment"] = {
            "start": float(word.alignment.start),
            "end": float(word.alignment.end),
            "exact": bool(word.alignment.exact),
            "index": int(word.alignment.anchor_token_index),
        }
    return out


def serialize_aligned_lines(lines: list[AlignedLine]) -> list[dict[str, Any]]:
    """Per-line debug view: timing plus per-word alignment and exactness."""
    return [
        {
            "line_number": int(line.line_number),
            "text": line.text,
            "start": line.start,
            "end": line.end,
            "words": [_serialize_word(w) for w in line.words],
        }
        for line in lines
    ]
