from __future__ import annotations

import argparse
import json
from pathlib import Path

from subalign.config import Settings
from subalign.exceptions import SubAlignError
from subalign.export import SubtitleExporter
from subalign.models.partition import SegmentationMode
from subalign.models.serializers import serialize_aligned_lines, serialize_partitions
from subalign.models.subtitle_types import SubtitleExportConfig, SubtitleFormat
from subalign.pipeline import align_transcript, partition_tokens
from subalign.utils.asr_results import detect_and_load_tokens
from subalign.utils.logging_setup import setup_logging
from subalign.utils.wer import text_words, vtt_cue_text, word_error_rate


def _parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Partition ASR output and align corrected transcripts.")
    sub = parser.add_subparsers(dest="command", required=True)

    p_part = sub.add_parser("partition", help="Split an ASR token stream into parts")
    p_part.add_argument("--asr", required=True, help="ASR result JSON (normalized, Speechmatics, Gladia or iApp)")
    p_part.add_argument("--output", required=True, help="Where to write parts JSON")
    p_part.add_argument("--mode", choices=[m.value for m in SegmentationMode], default=None)
    p_part.add_argument("--max-segment-s", type=float, default=None)
    p_part.add_argument("--min-segment-s", type=float, default=None)

    p_align = sub.add_parser("align", help="Align a corrected transcript to ASR word timestamps")
    p_align.add_argument("--asr", required=True, help="ASR result JSON")
    p_align.add_argument("--transcript", required=True, help="Plain-text transcript, one line per cue")
    p_align.add_argument("--output", required=True, help="Subtitle output path")
    p_align.add_argument(
        "--format",
        choices=[f.value for f in SubtitleFormat],
        default=SubtitleFormat.VTT.value,
    )
    p_align.add_argument("--debug-json", default=None, help="Optional per-line alignment dump")

    p_wer = sub.add_parser("wer", help="Word error rate between two WebVTT files")
    p_wer.add_argument("--reference", required=True)
    p_wer.add_argument("--hypothesis", required=True)
    return parser.parse_args()


def _read_json(path: str) -> object:
    return json.loads(Path(path).read_text(encoding="utf-8"))


def _write_text(path: str, content: str) -> None:
    out = Path(path)
    out.parent.mkdir(parents=True, exist_ok=True)
    out.write_text(content, encoding="utf-8")


def _run_partition(args: argparse.Namespace, settings: Settings) -> int:
    segmenter = settings.segmenter.with_overrides(
        mode=args.mode,
        max_segment_s=args.max_segment_s,
        min_segment_s=args.min_segment_s,
    )
    tokens = detect_and_load_tokens(_read_json(args.asr))
    result = partition_tokens(tokens, segmenter.to_config())
    _write_text(args.output, json.dumps(serialize_partitions(result.partitions), indent=2) + "\n")
    print(f"parts={len(result.partitions)} output={args.output}")
    return 0


def _run_align(args: argparse.Namespace, settings: Settings) -> int:
    tokens = detect_and_load_tokens(_read_json(args.asr))
    transcript = Path(args.transcript).read_text(encoding="utf-8")
    result = align_transcript(transcript, tokens)

    config = SubtitleExportConfig(
        format=SubtitleFormat(args.format),
        header=settings.aligner.vtt_header,
        min_gap_s=float(settings.aligner.min_cue_gap_s),
    )
    _write_text(args.output, SubtitleExporter().export(result.lines, config))
    if args.debug_json:
        _write_text(
            args.debug_json,
            json.dumps(serialize_aligned_lines(result.lines), ensure_ascii=False, indent=2) + "\n",
        )
    untimed = result.diagnostics.unaligned_line_numbers
    print(f"lines={len(result.lines)} untimed_lines={untimed} output={args.output}")
    return 0


def _run_wer(args: argparse.Namespace) -> int:
    reference = text_words(vtt_cue_text(Path(args.reference).read_text(encoding="utf-8")))
    hypothesis = text_words(vtt_cue_text(Path(args.hypothesis).read_text(encoding="utf-8")))
    print(f"reference_words={len(reference)} hypothesis_words={len(hypothesis)}")
    print(f"wer={word_error_rate(reference, hypothesis) * 100:.2f}%")
    return 0


def _run() -> int:
    args = _parse_args()
    settings = Settings()
    setup_logging(settings)
    try:
        if args.command == "partition":
            return _run_partition(args, settings)
        if args.command == "align":
            return _run_align(args, settings)
        return _run_wer(args)
    except SubAlignError as exc:
        raise SystemExit(f"[{exc.error_code.value}] {exc}") from exc


def main() -> None:
    raise SystemExit(_run())


if __name__ == "__main__":
    main()
