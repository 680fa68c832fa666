from __future__ import annotations

import json

import pytest

from subalign.export import SubtitleExporter
from subalign.export.formatters.base import SubtitleFormatter
from subalign.models.alignment import AlignedLine
from subalign.models.subtitle_types import SubtitleExportConfig, SubtitleFormat
from subalign.utils.line_assembler import build_cues


def _line(n: int, text: str, start: float | None, end: float | None) -> AlignedLine:
    return AlignedLine(line_number=n, text=text, words=[], start=start, end=end)


def test_build_cues_trims_overlap_to_min_gap() -> None:
    cues = build_cues([_line(1, "one", 0.0, 2.0), _line(2, "two", 1.5, 3.0)], min_gap_s=0.1)
    assert [(c.start, c.end) for c in cues][1] == (1.5, 3.0)
    assert cues[0].end == pytest.approx(1.4)
    assert cues[0].end <= cues[1].start


def test_build_cues_clamps_start_to_previous_end() -> None:
    # Line 2 collapses and is dropped; line 3 then starts before line 1's end.
    cues = build_cues(
        [_line(1, "one", 0.0, 4.0), _line(2, "two", 2.0, 2.0), _line(3, "three", 1.5, 5.0)],
        min_gap_s=0.0,
    )
    assert [(c.line_number, c.start, c.end) for c in cues] == [(1, 0.0, 2.0), (3, 2.0, 5.0)]


def test_build_cues_skips_untimed_and_empty_lines_and_renumbers() -> None:
    cues = build_cues(
        [
            _line(1, "intro", None, None),
            _line(2, "hello", 1.0, 2.0),
            _line(3, "   ", 2.5, 3.0),
            _line(4, "bye", 4.0, 5.0),
        ],
        min_gap_s=0.0,
    )
    assert [(c.index, c.line_number, c.text) for c in cues] == [(1, 2, "hello"), (2, 4, "bye")]


def test_build_cues_drops_line_squeezed_to_nothing() -> None:
    cues = build_cues(
        [_line(1, "a", 0.0, 1.0), _line(2, "b", 1.0, 1.0), _line(3, "c", 2.0, 3.0)],
        min_gap_s=0.0,
    )
    assert [c.text for c in cues] == ["a", "c"]


def test_seconds_to_timestamp_rounds_to_milliseconds() -> None:
    assert SubtitleFormatter.seconds_to_timestamp(3725.0426, ".") == "01:02:05.043"
    assert SubtitleFormatter.seconds_to_timestamp(-1.0, ",") == "00:00:00,000"


def test_export_vtt_with_header() -> None:
    lines = [_line(1, "the cat", 0.0, 1.0), _line(2, "sat", 2.0, 2.5)]
    out = SubtitleExporter().export(lines, SubtitleExportConfig(format=SubtitleFormat.VTT, header="aligned"))
    assert out == (
        "WEBVTT - aligned\n"
        "\n"
        "00:00:00.000 --> 00:00:01.000\n"
        "the cat\n"
        "\n"
        "00:00:02.000 --> 00:00:02.500\n"
        "sat\n"
    )


def test_export_vtt_without_header_is_bare() -> None:
    out = SubtitleExporter().export([], SubtitleExportConfig(format=SubtitleFormat.VTT))
    assert out == "WEBVTT\n"


def test_export_srt_numbers_cues_and_uses_comma() -> None:
    lines = [_line(1, "hello", 0.5, 1.25), _line(2, "world", 2.0, 3.0)]
    out = SubtitleExporter().export(lines, SubtitleExportConfig(format=SubtitleFormat.SRT))
    assert out == (
        "1\n"
        "00:00:00,500 --> 00:00:01,250\n"
        "hello\n"
        "\n"
        "2\n"
        "00:00:02,000 --> 00:00:03,000\n"
        "world\n"
    )


def test_export_json_keeps_line_numbers() -> None:
    lines = [_line(1, "skip", None, None), _line(2, "kept", 1.0, 2.0)]
    out = SubtitleExporter().export(lines, SubtitleExportConfig(format=SubtitleFormat.JSON, header="h"))
    data = json.loads(out)
    assert data["version"] == "1.0"
    assert data["header"] == "h"
    assert data["cues"] == [{"index": 1, "start": 1.0, "end": 2.0, "line_number": 2, "text": "kept"}]


def test_export_rejects_negative_gap() -> None:
    with pytest.raises(ValueError):
        SubtitleExporter().export([], SubtitleExportConfig(min_gap_s=-0.5))


@pytest.mark.parametrize("min_gap_s", [0.0, 1.0 / 12.0, 0.5])
def test_build_cues_never_overlap(min_gap_s: float) -> None:
    spans = [(0.0, 1.2), (1.0, 2.0), (1.9, 1.95), (1.5, 4.0), (3.0, 3.1), (5.0, 5.0), (4.5, 6.0)]
    lines = [_line(i + 1, f"line {i + 1}", s, e) for i, (s, e) in enumerate(spans)]
    cues = build_cues(lines, min_gap_s=min_gap_s)
    assert cues
    for cue in cues:
        assert cue.end > cue.start
    for prev, cur in zip(cues, cues[1:]):
        assert prev.end <= cur.start
    assert [c.index for c in cues] == list(range(1, len(cues) + 1))
